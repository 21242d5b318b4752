"""
Resume text extraction.

Flattens structured resume content into the single searchable string that
every analyzer matches keywords, patterns and word counts against.
"""

from typing import List, Optional

from resumate.contexts.intake.resume_content import ResumeContent
from resumate.utils.text_processing import join_nonempty


def extract_resume_text(content: ResumeContent) -> str:
    """
    Flatten resume content into one space-joined string.

    Order: first name, last name, summary, then per experience entry its
    position, company, description and achievements, per education entry its
    degree and school, per skill category its name and items, and per project
    its name, description and technologies.

    Contact details, locations, dates, certifications and languages are not
    included. Empty fields are skipped without leaving extra separators.

    Args:
        content: Resume content

    Returns:
        Extracted text (empty string for an empty resume)
    """
    parts: List[Optional[str]] = []

    personal_info = content.personal_info
    if personal_info is not None:
        parts.extend([personal_info.first_name, personal_info.last_name])

    parts.append(content.summary)

    for exp in content.experience or []:
        parts.extend([exp.position, exp.company, exp.description])
        parts.extend(exp.achievements or [])

    for edu in content.education or []:
        parts.extend([edu.degree, edu.school])

    for skill_group in content.skills or []:
        parts.append(skill_group.category)
        parts.extend(skill_group.items or [])

    for project in content.projects or []:
        parts.extend([project.name, project.description])
        parts.extend(project.technologies or [])

    return join_nonempty(parts)
