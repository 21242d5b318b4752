"""
ATS analysis records.

An analysis record captures one scoring run for a stored resume: the overall
score, the full feedback, the keyword section and the flattened suggestions.
Each resume may be analyzed at most MAX_ATS_ATTEMPTS times.

Usage:
    from resumate.contexts.tracking import AtsAnalysisRecord

    record = AtsAnalysisRecord.from_feedback(
        resume_id="a1b2c3",
        feedback=analyze_resume(content),
        attempts_used=resume_row["atsAttempts"],
    )
    storage.save(record.to_dict())
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from resumate.contexts.scoring.feedback import AtsFeedback
from resumate.contexts.tracking.exceptions import AttemptLimitExceededError
from resumate.contexts.tracking.logger import _log_info, _log_warning
from resumate.utils.timestamp import now_exact

MAX_ATS_ATTEMPTS = 5


def remaining_attempts(attempts_used: int, max_attempts: int = MAX_ATS_ATTEMPTS) -> int:
    """Analyses still allowed for a resume (never negative)."""
    return max(0, max_attempts - (attempts_used or 0))


def check_attempts_remaining(
    attempts_used: int, max_attempts: int = MAX_ATS_ATTEMPTS, resume_id: str = None
) -> None:
    """
    Raise if a resume has no analysis attempts left.

    Raises:
        AttemptLimitExceededError: If attempts_used >= max_attempts
    """
    if (attempts_used or 0) >= max_attempts:
        _log_warning(f"Attempt limit reached for resume {resume_id} ({attempts_used}/{max_attempts})")
        raise AttemptLimitExceededError(attempts_used, max_attempts, resume_id=resume_id)


def collect_suggestions(feedback: AtsFeedback) -> List[str]:
    """All section suggestions, in section order (keywords, format, content, length)."""
    return [
        suggestion
        for _, analysis in feedback.sections.items()
        for suggestion in analysis.suggestions
    ]


@dataclass
class AtsAnalysisRecord:
    """
    One ATS analysis of a stored resume.

    Attributes:
        resume_id: Identifier of the analyzed resume
        score: Overall score
        feedback: Full feedback mapping (AtsFeedback.to_dict())
        keywords: Keyword section mapping
        suggestions: Suggestions from all sections, flattened
        created_at: ISO 8601 creation time
    """

    resume_id: str
    score: int
    feedback: Dict[str, Any]
    keywords: Dict[str, Any]
    suggestions: List[str] = field(default_factory=list)
    created_at: str = field(default_factory=now_exact)

    @classmethod
    def from_feedback(
        cls,
        resume_id: str,
        feedback: AtsFeedback,
        attempts_used: int = 0,
        max_attempts: int = MAX_ATS_ATTEMPTS,
    ) -> "AtsAnalysisRecord":
        """
        Build a record from scoring feedback after checking the attempt quota.

        Args:
            resume_id: Identifier of the analyzed resume
            feedback: Result of analyze_resume()
            attempts_used: Analyses already recorded for this resume
            max_attempts: Allowed analyses per resume

        Returns:
            AtsAnalysisRecord

        Raises:
            AttemptLimitExceededError: If the resume has no attempts left
        """
        check_attempts_remaining(attempts_used, max_attempts, resume_id=resume_id)

        payload = feedback.to_dict()
        record = cls(
            resume_id=resume_id,
            score=feedback.overall.score,
            feedback=payload,
            keywords=payload["sections"]["keywords"],
            suggestions=collect_suggestions(feedback),
        )

        _log_info(
            f"Recorded analysis for resume {resume_id}: score {record.score} "
            f"({remaining_attempts((attempts_used or 0) + 1, max_attempts)} attempts left)"
        )
        return record

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the camelCase mapping stored by callers."""
        return {
            "resumeId": self.resume_id,
            "score": self.score,
            "feedback": self.feedback,
            "keywords": self.keywords,
            "suggestions": list(self.suggestions),
            "createdAt": self.created_at,
        }
