"""
ATS Feedback Data Structures

Result types returned by the scorer. Every call builds new instances;
to_dict() produces the JSON shape callers persist or render:

    {
        "overall": {"score": 72, "message": "..."},
        "sections": {
            "keywords": {"score", "found", "missing", "suggestions"},
            "format": {"score", "issues", "suggestions"},
            "content": {"score", "issues", "suggestions"},
            "length": {"score", "wordCount", "ideal", "suggestions"},
        },
    }
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class OverallScore:
    score: int
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {"score": self.score, "message": self.message}


@dataclass
class KeywordAnalysis:
    """
    Keyword coverage against the target keyword set.

    Attributes:
        found: Target keywords present in the resume, in target-set order
        missing: Absent target keywords, at most 10
    """

    score: int
    found: List[str] = field(default_factory=list)
    missing: List[str] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "found": list(self.found),
            "missing": list(self.missing),
            "suggestions": list(self.suggestions),
        }


@dataclass
class IssueAnalysis:
    """Penalty-based result (format and content checks): issues pair with suggestions."""

    score: int
    issues: List[str] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "issues": list(self.issues),
            "suggestions": list(self.suggestions),
        }


@dataclass
class LengthAnalysis:
    """
    Word count banding.

    Attributes:
        word_count: Whitespace-delimited tokens in the extracted resume text
        ideal: Band label (e.g., "Too short", "Perfect length")
    """

    score: int
    word_count: int
    ideal: str
    suggestions: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "wordCount": self.word_count,
            "ideal": self.ideal,
            "suggestions": list(self.suggestions),
        }


@dataclass
class FeedbackSections:
    keywords: KeywordAnalysis
    format: IssueAnalysis
    content: IssueAnalysis
    length: LengthAnalysis

    def items(self):
        """(section name, analysis) pairs in aggregation order."""
        return [
            ("keywords", self.keywords),
            ("format", self.format),
            ("content", self.content),
            ("length", self.length),
        ]

    def to_dict(self) -> Dict[str, Any]:
        return {name: analysis.to_dict() for name, analysis in self.items()}


@dataclass
class AtsFeedback:
    """Complete scoring result: overall score plus the four section analyses."""

    overall: OverallScore
    sections: FeedbackSections

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-serializable mapping."""
        return {"overall": self.overall.to_dict(), "sections": self.sections.to_dict()}
