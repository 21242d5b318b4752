"""
Scoring context logger.

Provides logging interface for scoring context with automatic [score] prefix.
All scoring modules should import from this module, not from utils.logger directly.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from resumate.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[score]"


def setup_scoring_logger(
    log_dir: Path, job_source: Optional[str] = None, console=sys.stdout
) -> Path:
    """
    Setup logger for scoring context.

    Args:
        log_dir: Directory for this scoring session
        job_source: Job description file or identifier, if one is used
        console: Stream for console log output

    Returns:
        Path to log file

    Example:
        from resumate.contexts.scoring.logger import setup_scoring_logger

        log_file = setup_scoring_logger(log_dir, job_source="MLEng_AcmeCorp")
    """
    return _setup_logger(
        context_name="score",
        log_dir=log_dir,
        extra_provenance={"Job description": job_source or "(built-in keyword set)"},
        console=console,
    )


# Wrapper functions with automatic [score] prefix


def _log_info(message: str) -> None:
    """Log info message with [score] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [score] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [score] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [score] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level scoring-specific logging helpers


def log_analysis_start(resume_label: str, using_job_description: bool) -> None:
    """Log start of an analysis."""
    keyword_source = "job description" if using_job_description else "built-in keyword set"
    _log_info(f"Analyzing {resume_label} against {keyword_source}")


def log_analysis_result(resume_label: str, feedback, elapsed_time: float) -> None:
    """
    Log analysis result with per-section scores.

    Args:
        resume_label: Resume name or file for display
        feedback: AtsFeedback from analyze_resume()
        elapsed_time: Time taken in seconds
    """
    sections = feedback.sections
    _log_debug(
        f"Section scores: keywords={sections.keywords.score}, format={sections.format.score}, "
        f"content={sections.content.score}, length={sections.length.score}"
    )
    _log_success(
        f"{resume_label}: overall score {feedback.overall.score}/100 ({elapsed_time:.3f}s)"
    )
