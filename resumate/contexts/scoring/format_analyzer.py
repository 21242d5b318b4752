"""
Structural completeness and consistency analysis.

Starts from 100 and subtracts a fixed penalty for each missing essential
(contact details, experience, education, skills) and for mixed date formats
across experience entries.
"""

from typing import Iterable, List

from resumate.contexts.intake.resume_content import ResumeContent
from resumate.contexts.scoring.feedback import IssueAnalysis
from resumate.contexts.scoring.logger import _log_debug
from resumate.contexts.scoring.vocabulary import (
    DATE_FORMAT_PATTERNS,
    FORMAT_PENALTIES,
    OTHER_DATE_FORMAT,
)


def classify_date_format(date: str) -> str:
    """
    Bucket a date string by shape.

    Returns:
        "MM/YYYY", "Month YYYY", "YYYY" or "other"

    Example:
        >>> classify_date_format("3/2021")
        'MM/YYYY'
        >>> classify_date_format("March 2021")
        'Month YYYY'
        >>> classify_date_format("Present")
        'other'
    """
    for format_name, pattern in DATE_FORMAT_PATTERNS:
        if pattern.fullmatch(date):
            return format_name
    return OTHER_DATE_FORMAT


def is_consistent_date_format(dates: Iterable[str]) -> bool:
    """
    Check that all non-empty dates share one format bucket.

    Fewer than two non-empty dates are trivially consistent.
    """
    valid_dates = [date for date in dates if date]
    if len(valid_dates) < 2:
        return True

    formats = {classify_date_format(date) for date in valid_dates}
    return len(formats) == 1


def collect_experience_dates(content: ResumeContent) -> List[str]:
    """Literal start and end dates of every experience entry, in order."""
    dates = []
    for exp in content.experience or []:
        dates.extend([exp.start_date, exp.end_date])
    return dates


def analyze_format(content: ResumeContent) -> IssueAnalysis:
    """
    Score structural completeness of a resume.

    Penalties: missing email -15, missing phone -10, no experience -30,
    no education -20, no skills -15, inconsistent experience dates -10.
    The score never drops below 0.

    Args:
        content: Resume content

    Returns:
        IssueAnalysis with one issue and one suggestion per penalty applied
    """
    issues = []
    suggestions = []
    score = 100

    personal_info = content.personal_info

    if not (personal_info and personal_info.email):
        issues.append("Missing email address")
        suggestions.append("Add a professional email address")
        score -= FORMAT_PENALTIES["email"]

    if not (personal_info and personal_info.phone):
        issues.append("Missing phone number")
        suggestions.append("Include a phone number for contact")
        score -= FORMAT_PENALTIES["phone"]

    if not content.experience:
        issues.append("No work experience listed")
        suggestions.append("Add your work experience")
        score -= FORMAT_PENALTIES["experience"]

    if not content.education:
        issues.append("No education listed")
        suggestions.append("Include your educational background")
        score -= FORMAT_PENALTIES["education"]

    if not content.skills:
        issues.append("No skills section")
        suggestions.append("Add a skills section with relevant abilities")
        score -= FORMAT_PENALTIES["skills"]

    if not is_consistent_date_format(collect_experience_dates(content)):
        issues.append("Inconsistent date formatting")
        suggestions.append("Use consistent date format (e.g., MM/YYYY) throughout")
        score -= FORMAT_PENALTIES["dates"]

    score = max(0, score)
    _log_debug(f"Format issues: {len(issues)} -> {score}")

    return IssueAnalysis(score=score, issues=issues, suggestions=suggestions)
