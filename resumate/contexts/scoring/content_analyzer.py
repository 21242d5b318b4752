"""
Content quality analysis.

Checks summary length, experience description depth, quantified achievements
and action verb usage, subtracting a fixed penalty for each shortfall.
"""

from typing import List

from resumate.contexts.intake.resume_content import ResumeContent
from resumate.contexts.scoring.extractor import extract_resume_text
from resumate.contexts.scoring.feedback import IssueAnalysis
from resumate.contexts.scoring.logger import _log_debug
from resumate.contexts.scoring.vocabulary import (
    ACTION_VERBS,
    CONTENT_PENALTIES,
    MIN_ACTION_VERBS,
    MIN_DESCRIPTION_CHARS,
    MIN_SUMMARY_CHARS,
    QUANTIFIED_ACHIEVEMENT_PATTERN,
)
from resumate.utils.text_processing import utf16_length


def has_quantified_achievements(text: str) -> bool:
    """
    Check for a number directly followed by a unit or magnitude.

    Case-sensitive, and the unit must follow the digits directly:
    "5k" and "3years" match, "5K" and "3 years" don't.

    Example:
        >>> has_quantified_achievements("Cut costs by 40%")
        True
        >>> has_quantified_achievements("Cut costs by 5K")
        False
    """
    return QUANTIFIED_ACHIEVEMENT_PATTERN.search(text) is not None


def find_action_verbs(text: str) -> List[str]:
    """Action verbs contained (as substrings, case-insensitively) in text."""
    lowered = text.lower()
    return [verb for verb in ACTION_VERBS if verb in lowered]


def analyze_content(content: ResumeContent) -> IssueAnalysis:
    """
    Score content quality of a resume.

    Penalties: summary missing or under 50 chars -20, any experience
    description missing or under 100 chars -15 (once), no quantified
    achievement -15, fewer than 3 action verbs -10. The score never drops below 0.
    Lengths are counted in UTF-16 code units, so an emoji counts as 2 chars.

    Args:
        content: Resume content

    Returns:
        IssueAnalysis with one issue and one suggestion per penalty applied
    """
    issues = []
    suggestions = []
    score = 100

    if not content.summary or utf16_length(content.summary) < MIN_SUMMARY_CHARS:
        issues.append("Professional summary is too short or missing")
        suggestions.append("Add a compelling professional summary (2-3 sentences)")
        score -= CONTENT_PENALTIES["summary"]

    short_descriptions = [
        exp
        for exp in content.experience or []
        if not exp.description or utf16_length(exp.description) < MIN_DESCRIPTION_CHARS
    ]
    if short_descriptions:
        issues.append(f"{len(short_descriptions)} experience entries lack detailed descriptions")
        suggestions.append(
            "Expand job descriptions with specific achievements and responsibilities"
        )
        score -= CONTENT_PENALTIES["descriptions"]

    resume_text = extract_resume_text(content)

    if not has_quantified_achievements(resume_text):
        issues.append("No quantified achievements found")
        suggestions.append(
            "Include specific numbers, percentages, or metrics to demonstrate impact"
        )
        score -= CONTENT_PENALTIES["quantified"]

    used_action_verbs = find_action_verbs(resume_text)
    if len(used_action_verbs) < MIN_ACTION_VERBS:
        issues.append("Limited use of strong action verbs")
        suggestions.append(
            "Start bullet points with strong action verbs like 'achieved', 'improved', 'led'"
        )
        score -= CONTENT_PENALTIES["action_verbs"]

    score = max(0, score)
    _log_debug(
        f"Content issues: {len(issues)} (action verbs: {len(used_action_verbs)}) -> {score}"
    )

    return IssueAnalysis(score=score, issues=issues, suggestions=suggestions)
