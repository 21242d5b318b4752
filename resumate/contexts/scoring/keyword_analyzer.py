"""
Keyword coverage analysis.

Scores how many target keywords appear in the resume. Targets come from the
job description when one is supplied (its 20 most frequent words of 3+ letters),
otherwise from the built-in COMMON_KEYWORDS + TECH_KEYWORDS set.

Matching is plain substring containment on lower-cased text, so "java" is
found inside "javascript". No stemming or stopword removal is applied to job
descriptions either; both would change scores for existing resumes.
"""

from collections import Counter
from typing import List, Optional

from resumate.contexts.intake.resume_content import ResumeContent
from resumate.contexts.scoring.extractor import extract_resume_text
from resumate.contexts.scoring.feedback import KeywordAnalysis
from resumate.contexts.scoring.logger import _log_debug, _log_warning
from resumate.contexts.scoring.vocabulary import (
    COMMON_KEYWORDS,
    JOB_KEYWORD_LIMIT,
    JOB_KEYWORD_PATTERN,
    LOW_KEYWORD_SCORE,
    MISSING_KEYWORD_LIMIT,
    SUGGESTED_KEYWORD_LIMIT,
    TECH_KEYWORDS,
)
from resumate.utils.text_processing import round_half_up


def extract_keywords_from_job(job_text: str) -> List[str]:
    """
    Pick the most frequent words of a job description as target keywords.

    Args:
        job_text: Job description text

    Returns:
        Up to 20 distinct lower-cased words of 3+ ASCII letters, most frequent
        first; ties keep first-occurrence order

    Example:
        >>> extract_keywords_from_job("Python developer. Python, SQL and AWS.")
        ['python', 'developer', 'sql', 'and', 'aws']
    """
    words = (match.lower() for match in JOB_KEYWORD_PATTERN.findall(job_text))
    frequency = Counter(words)
    return [word for word, _ in frequency.most_common(JOB_KEYWORD_LIMIT)]


def get_target_keywords(job_description: Optional[str] = None) -> List[str]:
    """Target keyword set for a scoring call (empty job description counts as none)."""
    if job_description:
        return extract_keywords_from_job(job_description.lower())
    return [*COMMON_KEYWORDS, *TECH_KEYWORDS]


def get_keyword_suggestions(missing_keywords: List[str], score: int) -> List[str]:
    suggestions = []

    if score < LOW_KEYWORD_SCORE:
        suggestions.append("Consider adding more industry-specific keywords")
        suggestions.append("Review the job description for important terms to include")

    if missing_keywords:
        to_add = ", ".join(missing_keywords[:SUGGESTED_KEYWORD_LIMIT])
        suggestions.append(f"Try incorporating: {to_add}")

    return suggestions


def analyze_keywords(
    content: ResumeContent, job_description: Optional[str] = None
) -> KeywordAnalysis:
    """
    Score keyword coverage of a resume.

    Args:
        content: Resume content
        job_description: Optional raw job description text

    Returns:
        KeywordAnalysis with score = round(100 * found / targets), capped at 100.
        An empty target set (job description without any 3+ letter word) scores 0.
    """
    resume_text = extract_resume_text(content).lower()
    target_keywords = get_target_keywords(job_description)

    found = [kw for kw in target_keywords if kw.lower() in resume_text]
    missing = [kw for kw in target_keywords if kw.lower() not in resume_text]
    missing = missing[:MISSING_KEYWORD_LIMIT]

    if job_description and not target_keywords:
        _log_warning("Job description has no words of 3+ letters, keyword score is 0")

    if target_keywords:
        score = min(100, round_half_up(len(found) / len(target_keywords) * 100))
    else:
        score = 0

    _log_debug(f"Keywords found: {len(found)}/{len(target_keywords)} -> {score}")

    return KeywordAnalysis(
        score=score,
        found=found,
        missing=missing,
        suggestions=get_keyword_suggestions(missing, score),
    )
