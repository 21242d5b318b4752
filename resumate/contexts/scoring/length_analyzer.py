"""
Resume length analysis.

Maps the extracted word count onto fixed bands. Bands are evaluated in the
order < 200, < 400, > 800, > 600, so 400-600 words scores 100 ("Perfect length")
while 601-800 words scores 90 ("Good length").
"""

from typing import List, Tuple

from resumate.contexts.intake.resume_content import ResumeContent
from resumate.contexts.scoring.extractor import extract_resume_text
from resumate.contexts.scoring.feedback import LengthAnalysis
from resumate.contexts.scoring.logger import _log_debug
from resumate.contexts.scoring.vocabulary import (
    LONG_WORDS,
    SHORT_WORDS,
    TOO_LONG_WORDS,
    TOO_SHORT_WORDS,
)
from resumate.utils.text_processing import count_words


def score_word_count(word_count: int) -> Tuple[int, str, List[str]]:
    """
    Band a word count.

    Returns:
        (score, ideal label, suggestions)

    Example:
        >>> score_word_count(150)
        (40, 'Too short', [...])
        >>> score_word_count(500)
        (100, 'Perfect length', [])
    """
    if word_count < TOO_SHORT_WORDS:
        return (
            40,
            "Too short",
            [
                "Expand your resume with more detailed descriptions",
                "Add more relevant experience and achievements",
            ],
        )
    elif word_count < SHORT_WORDS:
        return 70, "Could be longer", ["Consider adding more details to strengthen your resume"]
    elif word_count > TOO_LONG_WORDS:
        return (
            75,
            "Consider shortening",
            ["Try to keep resume concise while maintaining key information"],
        )
    elif word_count > LONG_WORDS:
        return 90, "Good length", []

    return 100, "Perfect length", []


def analyze_length(content: ResumeContent) -> LengthAnalysis:
    """
    Score resume length by the word count of its extracted text.

    Args:
        content: Resume content

    Returns:
        LengthAnalysis with word count, band score and label
    """
    word_count = count_words(extract_resume_text(content))
    score, ideal, suggestions = score_word_count(word_count)

    _log_debug(f"Word count: {word_count} ({ideal}) -> {score}")

    return LengthAnalysis(score=score, word_count=word_count, ideal=ideal, suggestions=suggestions)
