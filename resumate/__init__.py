"""
RESUMATE - Resume ATS Matching and Evaluation

Scores structured resume content the way an Applicant Tracking System might,
returning a composite score plus categorized, actionable feedback.

Architecture:
- Intake Context: Resume content model and file loading
- Scoring Context: Keyword, format, content and length analysis with weighted aggregation
- Tracking Context: Analysis records and per-resume attempt quota
"""

__version__ = "0.1.0"
