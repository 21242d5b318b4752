"""
Tracking Context

Responsibilities:
- Builds analysis records from scoring feedback, ready for the caller to persist
- Enforces the per-resume limit on ATS analysis attempts

Owns: Analysis record shape, attempt quota policy
Never: Computes scores or writes to storage
"""

from resumate.contexts.tracking.analysis_record import (
    MAX_ATS_ATTEMPTS,
    AtsAnalysisRecord,
    check_attempts_remaining,
    collect_suggestions,
    remaining_attempts,
)
from resumate.contexts.tracking.exceptions import AttemptLimitExceededError

__all__ = [
    "MAX_ATS_ATTEMPTS",
    "AtsAnalysisRecord",
    "AttemptLimitExceededError",
    "check_attempts_remaining",
    "collect_suggestions",
    "remaining_attempts",
]
