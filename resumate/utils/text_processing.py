"""
Text processing utilities for scoring and display.
"""

import math
from typing import Iterable, Optional


def join_nonempty(parts: Iterable[Optional[str]], separator: str = " ") -> str:
    """
    Join text parts, dropping empty and missing entries first.

    Never inserts empty tokens or doubled separators for skipped parts.

    Example:
        >>> join_nonempty(["Ada", "", None, "Lovelace"])
        'Ada Lovelace'
    """
    return separator.join(part for part in parts if part)


def count_words(text: str) -> int:
    """
    Count whitespace-delimited tokens in text.

    Example:
        >>> count_words("  led   a team\\nof 5 ")
        5
        >>> count_words("")
        0
    """
    return len(text.split())


def utf16_length(text: str) -> int:
    """
    Length of text in UTF-16 code units.

    Characters outside the Basic Multilingual Plane (most emoji) count as 2,
    matching how the length thresholds were originally measured.

    Example:
        >>> utf16_length("ok \U0001F680")
        5
    """
    return len(text.encode("utf-16-le")) // 2


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, with halves rounded towards positive infinity.

    Python's built-in round() uses banker's rounding (round(30.5) == 30);
    scores are rounded the conventional way instead.

    Example:
        >>> round_half_up(30.5)
        31
        >>> round_half_up(12.4)
        12
    """
    return int(math.floor(value + 0.5))


def truncate_display(text: str, max_len: int) -> str:
    """
    Truncate text for display with ellipsis if needed.

    Args:
        text: Text to truncate
        max_len: Maximum length including ellipsis

    Returns:
        Original text if within max_len, otherwise truncated with "..."

    Example:
        >>> truncate_display("short", 10)
        'short'
        >>> truncate_display("this is a very long string", 10)
        'this is...'
    """
    return text if len(text) <= max_len else text[: max_len - 3] + "..."
