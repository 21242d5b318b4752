"""
Shared utilities for RESUMATE.

Common functionality used across contexts:
- Logger setup
- Text processing
- Report formatting
- Timestamps
"""

from resumate.utils.timestamp import format_timestamp, now, now_exact

__all__ = ["format_timestamp", "now", "now_exact"]
