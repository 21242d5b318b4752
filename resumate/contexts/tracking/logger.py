"""
Tracking context logger.

Provides logging interface for tracking context with automatic [track] prefix.
"""

from loguru import logger

CONTEXT_PREFIX = "[track]"


def _log_info(message: str) -> None:
    """Log info message with [track] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [track] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")
