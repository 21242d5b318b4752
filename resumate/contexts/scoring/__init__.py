"""
Scoring Context

Responsibilities:
- Flattens resume content into searchable text
- Scores keyword coverage, format completeness, content quality and length
- Combines section scores into one weighted overall score and message
- Renders feedback as a text report

Owns: Scoring rules, thresholds, vocabularies, feedback structure
Never: Reads files, persists results, or enforces analysis quotas
"""

from resumate.contexts.scoring.extractor import extract_resume_text
from resumate.contexts.scoring.feedback import (
    AtsFeedback,
    FeedbackSections,
    IssueAnalysis,
    KeywordAnalysis,
    LengthAnalysis,
    OverallScore,
)
from resumate.contexts.scoring.report import format_feedback_report
from resumate.contexts.scoring.scorer import analyze_resume, combine_scores, get_overall_message

__all__ = [
    # Entry point
    "analyze_resume",
    "combine_scores",
    "get_overall_message",
    "extract_resume_text",
    "format_feedback_report",
    # Feedback structures
    "AtsFeedback",
    "FeedbackSections",
    "OverallScore",
    "KeywordAnalysis",
    "IssueAnalysis",
    "LengthAnalysis",
]
