"""
Fixed vocabularies, patterns, penalties and thresholds for ATS scoring.

These values define scoring behavior; changing any of them changes the
scores users see for an unchanged resume.
"""

import re

# Default keyword set when no job description is supplied (COMMON + TECH)
COMMON_KEYWORDS = [
    "leadership",
    "management",
    "communication",
    "teamwork",
    "problem-solving",
    "analytical",
    "strategic",
    "innovative",
    "results-driven",
    "experienced",
    "proficient",
    "skilled",
    "expert",
    "advanced",
    "collaborative",
]

TECH_KEYWORDS = [
    "javascript",
    "python",
    "java",
    "react",
    "node.js",
    "sql",
    "aws",
    "docker",
    "kubernetes",
    "git",
    "agile",
    "scrum",
    "api",
    "database",
    "cloud",
    "devops",
]

ACTION_VERBS = [
    "achieved",
    "improved",
    "increased",
    "decreased",
    "managed",
    "led",
    "developed",
    "implemented",
    "created",
    "designed",
    "optimized",
    "streamlined",
    "delivered",
]

# Keyword analysis
JOB_KEYWORD_PATTERN = re.compile(r"\b[a-zA-Z]{3,}\b", re.ASCII)
JOB_KEYWORD_LIMIT = 20
MISSING_KEYWORD_LIMIT = 10
SUGGESTED_KEYWORD_LIMIT = 5
LOW_KEYWORD_SCORE = 50

# Content analysis (matched against original-case text)
QUANTIFIED_ACHIEVEMENT_PATTERN = re.compile(
    r"\d+(%|k|\+|million|thousand|hours|years|projects|teams)", re.ASCII
)
MIN_SUMMARY_CHARS = 50
MIN_DESCRIPTION_CHARS = 100
MIN_ACTION_VERBS = 3

# Date buckets, checked in order; anything else is "other"
DATE_FORMAT_PATTERNS = [
    ("MM/YYYY", re.compile(r"\d{1,2}/\d{4}", re.ASCII)),
    ("Month YYYY", re.compile(r"\w+ \d{4}", re.ASCII)),
    ("YYYY", re.compile(r"\d{4}", re.ASCII)),
]
OTHER_DATE_FORMAT = "other"

# Penalties subtracted from a starting score of 100
FORMAT_PENALTIES = {
    "email": 15,
    "phone": 10,
    "experience": 30,
    "education": 20,
    "skills": 15,
    "dates": 10,
}

CONTENT_PENALTIES = {
    "summary": 20,
    "descriptions": 15,
    "quantified": 15,
    "action_verbs": 10,
}

# Length bands, evaluated in this order (first match wins):
#   < 200, < 400, > 800, > 600, otherwise
TOO_SHORT_WORDS = 200
SHORT_WORDS = 400
TOO_LONG_WORDS = 800
LONG_WORDS = 600

# Aggregation weights, applied in this order
SECTION_WEIGHTS = {
    "keywords": 0.30,
    "format": 0.25,
    "content": 0.25,
    "length": 0.20,
}

# (minimum score, message), highest threshold first
OVERALL_MESSAGES = [
    (90, "Excellent! Your resume is well-optimized for ATS systems."),
    (80, "Great job! Your resume performs well with minor areas for improvement."),
    (70, "Good foundation with several opportunities for optimization."),
    (60, "Your resume needs some improvements to pass ATS filters effectively."),
]
FALLBACK_MESSAGE = "Significant improvements needed to optimize for ATS systems."
