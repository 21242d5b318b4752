"""
ATS compatibility scorer.

Runs the keyword, format, content and length analyses over one resume and
combines their scores with fixed weights (0.30 / 0.25 / 0.25 / 0.20).

The scorer is stateless: every call builds fresh results from its arguments
only, so it is safe to call concurrently and repeated calls return equal output.

Usage:
    from resumate.contexts.scoring import analyze_resume

    feedback = analyze_resume(content)
    feedback = analyze_resume(content, job_description=job_text)
    payload = feedback.to_dict()
"""

from collections.abc import Mapping
from typing import Optional, Union

from resumate.contexts.intake.resume_content import ResumeContent
from resumate.contexts.scoring.content_analyzer import analyze_content
from resumate.contexts.scoring.feedback import AtsFeedback, FeedbackSections, OverallScore
from resumate.contexts.scoring.format_analyzer import analyze_format
from resumate.contexts.scoring.keyword_analyzer import analyze_keywords
from resumate.contexts.scoring.length_analyzer import analyze_length
from resumate.contexts.scoring.logger import _log_debug
from resumate.contexts.scoring.vocabulary import (
    FALLBACK_MESSAGE,
    OVERALL_MESSAGES,
    SECTION_WEIGHTS,
)
from resumate.utils.text_processing import round_half_up


def clamp_score(score: int) -> int:
    """Clamp a score to [0, 100]."""
    return max(0, min(100, score))


def combine_scores(
    keyword_score: int, format_score: int, content_score: int, length_score: int
) -> int:
    """
    Weighted overall score from the four section scores.

    Example:
        >>> combine_scores(0, 35, 55, 40)
        31
    """
    weighted = (
        keyword_score * SECTION_WEIGHTS["keywords"]
        + format_score * SECTION_WEIGHTS["format"]
        + content_score * SECTION_WEIGHTS["content"]
        + length_score * SECTION_WEIGHTS["length"]
    )
    return round_half_up(weighted)


def get_overall_message(score: int) -> str:
    """Headline message for an overall score."""
    for threshold, message in OVERALL_MESSAGES:
        if score >= threshold:
            return message
    return FALLBACK_MESSAGE


def analyze_resume(
    content: Union[ResumeContent, Mapping], job_description: Optional[str] = None
) -> AtsFeedback:
    """
    Score a resume for ATS compatibility.

    Args:
        content: ResumeContent, or a camelCase resume mapping (converted with
            ResumeContent.from_dict)
        job_description: Optional job description; when given (and non-empty),
            keyword targets are taken from it instead of the built-in set

    Returns:
        Fully populated AtsFeedback. All scores are integers in [0, 100].
    """
    if isinstance(content, Mapping):
        content = ResumeContent.from_dict(content)

    keywords = analyze_keywords(content, job_description)
    format_analysis = analyze_format(content)
    content_analysis = analyze_content(content)
    length = analyze_length(content)

    for analysis in (keywords, format_analysis, content_analysis, length):
        analysis.score = clamp_score(analysis.score)

    overall_score = clamp_score(
        combine_scores(
            keywords.score, format_analysis.score, content_analysis.score, length.score
        )
    )
    _log_debug(f"Overall score: {overall_score}")

    return AtsFeedback(
        overall=OverallScore(score=overall_score, message=get_overall_message(overall_score)),
        sections=FeedbackSections(
            keywords=keywords,
            format=format_analysis,
            content=content_analysis,
            length=length,
        ),
    )
