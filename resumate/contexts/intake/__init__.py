"""
Intake Context

Responsibilities:
- Represents resume content as a structured data model
- Loads resume documents (YAML/JSON) and job description text from disk
- Rejects documents whose shape cannot be mapped onto the model

Owns: Resume content model, file resolution and loading
Never: Scores content or decides what feedback to give
"""

from resumate.contexts.intake.exceptions import InvalidResumeStructureError
from resumate.contexts.intake.loaders import load_job_description, load_resume
from resumate.contexts.intake.resume_content import (
    EducationEntry,
    ExperienceEntry,
    PersonalInfo,
    ProjectEntry,
    ResumeContent,
    SkillCategory,
)

__all__ = [
    # Data model
    "ResumeContent",
    "PersonalInfo",
    "ExperienceEntry",
    "EducationEntry",
    "SkillCategory",
    "ProjectEntry",
    # Loading
    "load_resume",
    "load_job_description",
    "InvalidResumeStructureError",
]
