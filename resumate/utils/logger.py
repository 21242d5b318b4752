"""
Session logging on top of loguru.

Every scoring session writes a full DEBUG log file plus a shorter console
stream. Context packages wrap the loguru logger with their own prefix in
contexts/{context}/logger.py and call setup_logger() from there.
"""

import sys
from pathlib import Path
from typing import Optional, TextIO

from dotenv import load_dotenv
from loguru import logger

from resumate import __version__

load_dotenv()

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"
)

# Console colors by level; levels not listed keep loguru's defaults
LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: Optional[dict] = None,
    console: TextIO = sys.stdout,
    console_level: str = "INFO",
) -> Path:
    """
    Route loguru output to a session log file and a console stream.

    Any sinks added earlier (including loguru's default stderr sink) are
    removed first, so calling this twice in one process starts a new session.

    Args:
        context_name: Context identifier, used as the log file name ("score", "intake", ...)
        log_dir: Directory for this session; created if missing
        extra_provenance: Additional key-value pairs for the provenance header
        console: Stream for console output. Scripts that print JSON on stdout
            pass sys.stderr here.
        console_level: Minimum level shown on the console

    Returns:
        Path to the log file

    Example:
        log_file = setup_logger(
            "score",
            Path("outs/logs/score_20251114_123456"),
            extra_provenance={"Job description": "MLEng_AcmeCorp.md"},
        )
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    for level_name, color in LEVEL_COLORS.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(console, format=CONSOLE_FORMAT, level=console_level, colorize=True)

    log_provenance(extra_provenance)

    return log_file


def log_provenance(extra_context: Optional[dict] = None) -> None:
    """
    Write the session header: package version, command line, working
    directory and Python version, then any extra key-value pairs.
    """
    logger.info("=" * 80)
    logger.info(f"resumate {__version__}")
    logger.info(f"Command: {' '.join(sys.argv)}")
    logger.info(f"Working directory: {Path.cwd()}")
    logger.info(f"Python: {sys.version.split()[0]}")

    for key, value in (extra_context or {}).items():
        logger.info(f"{key}: {value}")

    logger.info("=" * 80)
