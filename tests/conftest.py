"""Shared resume documents for scoring tests."""

import copy
from pathlib import Path

import pytest

FIXTURES_PATH = Path(__file__).parent / "fixtures"

COMPLETE_RESUME = {
    "personalInfo": {
        "firstName": "Jane",
        "lastName": "Doe",
        "email": "jane.doe@example.com",
        "phone": "555-0100",
        "location": "Portland, OR",
        "github": "janedoe",
    },
    "summary": (
        "Backend engineer with 8 years of experience building data platforms "
        "and leading small teams."
    ),
    "experience": [
        {
            "id": "exp-1",
            "position": "Senior Software Engineer",
            "company": "Acme Corp",
            "location": "Remote",
            "startDate": "01/2020",
            "endDate": "",
            "current": True,
            "description": (
                "Led the platform team that designed and implemented event-driven services, "
                "cutting processing latency by 40% across 12 products."
            ),
            "achievements": [
                "Delivered a streaming pipeline handling 2 million events per day",
                "Improved deployment frequency from weekly to daily",
            ],
        },
        {
            "id": "exp-2",
            "position": "Software Engineer",
            "company": "Globex",
            "location": "Seattle, WA",
            "startDate": "06/2016",
            "endDate": "12/2019",
            "current": False,
            "description": (
                "Developed internal APIs in Python and SQL for the billing system, "
                "and created automated test suites used by 5 teams."
            ),
            "achievements": ["Optimized nightly batch jobs, saving 3 hours of compute"],
        },
    ],
    "education": [
        {
            "id": "edu-1",
            "degree": "B.S. Computer Science",
            "school": "State University",
            "location": "Eugene, OR",
            "graduationDate": "05/2016",
            "achievements": [],
        }
    ],
    "skills": [
        {"id": "sk-1", "category": "Languages", "items": ["Python", "SQL", "Go"]},
        {"id": "sk-2", "category": "Tools", "items": ["Docker", "Kubernetes", "AWS"]},
    ],
}

MINIMAL_RESUME = {
    "personalInfo": {
        "firstName": "",
        "lastName": "",
        "email": "sam@example.com",
        "phone": "555-0199",
        "location": "",
    },
    "summary": "",
    "experience": [],
    "education": [],
    "skills": [],
}


@pytest.fixture
def complete_resume():
    """Resume with every format and content check satisfied."""
    return copy.deepcopy(COMPLETE_RESUME)


@pytest.fixture
def minimal_resume():
    """Resume with only an email address and phone number."""
    return copy.deepcopy(MINIMAL_RESUME)


@pytest.fixture
def make_resume():
    """Factory: minimal resume with top-level fields overridden."""

    def _make(**overrides):
        data = copy.deepcopy(MINIMAL_RESUME)
        data.update(overrides)
        return data

    return _make


@pytest.fixture
def fixtures_path():
    return FIXTURES_PATH
