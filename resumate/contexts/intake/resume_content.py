"""
Resume Content Structure

Defines the structured representation of a resume as edited by users and
consumed by the Scoring context.

Documents travel as camelCase mappings (personalInfo, startDate, graduationDate, ...).
Each dataclass converts from and to that shape, so a well-formed document
survives ResumeContent.from_dict(data).to_dict() unchanged.
"""

import copy
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from resumate.contexts.intake.exceptions import InvalidResumeStructureError


def _get_str(data: Mapping, key: str) -> str:
    value = data.get(key)
    return "" if value is None else str(value)


def _get_optional_str(data: Mapping, key: str) -> Optional[str]:
    value = data.get(key)
    return None if value is None else str(value)


def _get_list(
    data: Mapping, key: str, field_path: str, source_path: Optional[Path] = None
) -> Optional[list]:
    """
    Get a list-typed field, or None when the key is absent.

    Raises:
        InvalidResumeStructureError: If the field holds anything other than a list
    """
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, list):
        raise InvalidResumeStructureError(
            f"Expected a list, got {type(value).__name__}",
            field_name=field_path,
            source_path=source_path,
        )
    return value


def _get_str_list(
    data: Mapping, key: str, field_path: str, source_path: Optional[Path] = None
) -> List[str]:
    values = _get_list(data, key, field_path, source_path) or []
    return ["" if item is None else str(item) for item in values]


def _get_entries(
    data: Mapping, key: str, field_path: str, source_path: Optional[Path] = None
) -> Optional[List[Mapping]]:
    """Get a list of mapping entries (experience, skills, ...), or None when absent."""
    entries = _get_list(data, key, field_path, source_path)
    if entries is None:
        return None

    for index, entry in enumerate(entries):
        if not isinstance(entry, Mapping):
            raise InvalidResumeStructureError(
                f"Expected a mapping, got {type(entry).__name__}",
                field_name=f"{field_path}[{index}]",
                source_path=source_path,
            )
    return entries


def _drop_none(data: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in data.items() if value is not None}


@dataclass
class PersonalInfo:
    """Contact details shown in the resume header."""

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    website: Optional[str] = None
    linkedin: Optional[str] = None
    github: Optional[str] = None

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)

    @classmethod
    def from_dict(cls, data: Mapping) -> "PersonalInfo":
        return cls(
            first_name=_get_str(data, "firstName"),
            last_name=_get_str(data, "lastName"),
            email=_get_str(data, "email"),
            phone=_get_str(data, "phone"),
            location=_get_str(data, "location"),
            website=_get_optional_str(data, "website"),
            linkedin=_get_optional_str(data, "linkedin"),
            github=_get_optional_str(data, "github"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none(
            {
                "firstName": self.first_name,
                "lastName": self.last_name,
                "email": self.email,
                "phone": self.phone,
                "location": self.location,
                "website": self.website,
                "linkedin": self.linkedin,
                "github": self.github,
            }
        )


@dataclass
class ExperienceEntry:
    """
    One position in the work history.

    Attributes:
        start_date: Start date exactly as the user typed it (e.g., "01/2020", "March 2021")
        end_date: End date exactly as stored; ignored for display when current is True
        current: Whether the role is ongoing
        achievements: Bullet points, in display order
    """

    id: str = ""
    position: str = ""
    company: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    current: bool = False
    description: str = ""
    achievements: List[str] = field(default_factory=list)

    @property
    def end_date_display(self) -> str:
        """End date as shown to readers: "Present" for ongoing roles."""
        return "Present" if self.current else self.end_date

    @classmethod
    def from_dict(
        cls, data: Mapping, field_path: str = "experience", source_path: Optional[Path] = None
    ) -> "ExperienceEntry":
        return cls(
            id=_get_str(data, "id"),
            position=_get_str(data, "position"),
            company=_get_str(data, "company"),
            location=_get_str(data, "location"),
            start_date=_get_str(data, "startDate"),
            end_date=_get_str(data, "endDate"),
            current=bool(data.get("current", False)),
            description=_get_str(data, "description"),
            achievements=_get_str_list(
                data, "achievements", f"{field_path}.achievements", source_path
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "position": self.position,
            "company": self.company,
            "location": self.location,
            "startDate": self.start_date,
            "endDate": self.end_date,
            "current": self.current,
            "description": self.description,
            "achievements": list(self.achievements),
        }


@dataclass
class EducationEntry:
    """One degree or program."""

    id: str = ""
    degree: str = ""
    school: str = ""
    location: str = ""
    graduation_date: str = ""
    gpa: Optional[str] = None
    achievements: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(
        cls, data: Mapping, field_path: str = "education", source_path: Optional[Path] = None
    ) -> "EducationEntry":
        return cls(
            id=_get_str(data, "id"),
            degree=_get_str(data, "degree"),
            school=_get_str(data, "school"),
            location=_get_str(data, "location"),
            graduation_date=_get_str(data, "graduationDate"),
            gpa=_get_optional_str(data, "gpa"),
            achievements=_get_str_list(
                data, "achievements", f"{field_path}.achievements", source_path
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none(
            {
                "id": self.id,
                "degree": self.degree,
                "school": self.school,
                "location": self.location,
                "graduationDate": self.graduation_date,
                "gpa": self.gpa,
                "achievements": list(self.achievements),
            }
        )


@dataclass
class SkillCategory:
    """Named group of skills (e.g., "Languages": ["Python", "SQL"])."""

    id: str = ""
    category: str = ""
    items: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(
        cls, data: Mapping, field_path: str = "skills", source_path: Optional[Path] = None
    ) -> "SkillCategory":
        return cls(
            id=_get_str(data, "id"),
            category=_get_str(data, "category"),
            items=_get_str_list(data, "items", f"{field_path}.items", source_path),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "category": self.category, "items": list(self.items)}


@dataclass
class ProjectEntry:
    """Side or portfolio project."""

    id: str = ""
    name: str = ""
    description: str = ""
    technologies: List[str] = field(default_factory=list)
    url: Optional[str] = None
    github: Optional[str] = None

    @classmethod
    def from_dict(
        cls, data: Mapping, field_path: str = "projects", source_path: Optional[Path] = None
    ) -> "ProjectEntry":
        return cls(
            id=_get_str(data, "id"),
            name=_get_str(data, "name"),
            description=_get_str(data, "description"),
            technologies=_get_str_list(
                data, "technologies", f"{field_path}.technologies", source_path
            ),
            url=_get_optional_str(data, "url"),
            github=_get_optional_str(data, "github"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none(
            {
                "id": self.id,
                "name": self.name,
                "description": self.description,
                "technologies": list(self.technologies),
                "url": self.url,
                "github": self.github,
            }
        )


@dataclass
class ResumeContent:
    """
    Complete resume content.

    Optional sections (projects, certifications, languages) are None when the
    document doesn't have them. Certifications and languages are kept as raw
    mappings because nothing downstream interprets them.
    """

    personal_info: PersonalInfo = field(default_factory=PersonalInfo)
    summary: str = ""
    experience: List[ExperienceEntry] = field(default_factory=list)
    education: List[EducationEntry] = field(default_factory=list)
    skills: List[SkillCategory] = field(default_factory=list)
    projects: Optional[List[ProjectEntry]] = None
    certifications: Optional[List[Dict[str, Any]]] = None
    languages: Optional[List[Dict[str, Any]]] = None

    @classmethod
    def from_dict(cls, data: Mapping, source_path: Optional[Path] = None) -> "ResumeContent":
        """
        Build ResumeContent from a camelCase document mapping.

        Args:
            data: Resume document (e.g., parsed JSON or YAML)
            source_path: File the document came from, used in error messages

        Returns:
            ResumeContent instance; missing arrays become empty lists and
            missing strings become ""

        Raises:
            InvalidResumeStructureError: If data is not a mapping, or a list-typed
                field holds something else
        """
        if not isinstance(data, Mapping):
            raise InvalidResumeStructureError(
                f"Resume document must be a mapping, got {type(data).__name__}",
                source_path=source_path,
            )

        personal_info = data.get("personalInfo") or {}
        if not isinstance(personal_info, Mapping):
            raise InvalidResumeStructureError(
                f"Expected a mapping, got {type(personal_info).__name__}",
                field_name="personalInfo",
                source_path=source_path,
            )

        def build_entries(key, entry_cls):
            entries = _get_entries(data, key, key, source_path)
            if entries is None:
                return None
            return [
                entry_cls.from_dict(entry, f"{key}[{index}]", source_path)
                for index, entry in enumerate(entries)
            ]

        def copy_raw(key):
            entries = _get_entries(data, key, key, source_path)
            return None if entries is None else [dict(copy.deepcopy(e)) for e in entries]

        return cls(
            personal_info=PersonalInfo.from_dict(personal_info),
            summary=_get_str(data, "summary"),
            experience=build_entries("experience", ExperienceEntry) or [],
            education=build_entries("education", EducationEntry) or [],
            skills=build_entries("skills", SkillCategory) or [],
            projects=build_entries("projects", ProjectEntry),
            certifications=copy_raw("certifications"),
            languages=copy_raw("languages"),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert back to the camelCase document mapping."""
        result = {
            "personalInfo": self.personal_info.to_dict(),
            "summary": self.summary,
            "experience": [entry.to_dict() for entry in self.experience],
            "education": [entry.to_dict() for entry in self.education],
            "skills": [category.to_dict() for category in self.skills],
        }

        if self.projects is not None:
            result["projects"] = [project.to_dict() for project in self.projects]
        if self.certifications is not None:
            result["certifications"] = copy.deepcopy(self.certifications)
        if self.languages is not None:
            result["languages"] = copy.deepcopy(self.languages)

        return result
