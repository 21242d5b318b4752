"""
Resume and job description loading.

Sources can be given as file paths or as bare identifiers, which are resolved
against RESUMES_PATH (resumes) and JOBS_PATH (job descriptions).

Usage:
    from resumate.contexts.intake.loaders import load_job_description, load_resume

    content = load_resume("data/resumes/jane_doe.yaml")
    content = load_resume("jane_doe")  # -> $RESUMES_PATH/jane_doe.{yaml,yml,json}
    job_text = load_job_description("MLEng_AcmeCorp")  # -> $JOBS_PATH/MLEng_AcmeCorp.{md,txt}
"""

import os
from pathlib import Path
from typing import Optional, Sequence, Union

import yaml
from dotenv import load_dotenv
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from resumate.contexts.intake.exceptions import InvalidResumeStructureError
from resumate.contexts.intake.logger import _log_debug, _log_info, _log_warning
from resumate.contexts.intake.resume_content import ResumeContent

load_dotenv()
RESUMES_PATH = Path(os.getenv("RESUMES_PATH", "data/resumes"))
JOBS_PATH = Path(os.getenv("JOBS_PATH", "data/jobs"))

RESUME_SUFFIXES = (".yaml", ".yml", ".json")
JOB_SUFFIXES = (".md", ".txt")


def resolve_source(
    source: Union[str, Path], search_dir: Path, suffixes: Sequence[str]
) -> Path:
    """
    Resolve a file path or bare identifier to an existing file.

    Args:
        source: Path to a file, or an identifier (filename stem) inside search_dir
        search_dir: Directory searched for identifiers
        suffixes: File extensions tried, in order, for identifiers

    Returns:
        Path to the existing file

    Raises:
        FileNotFoundError: If neither the path nor any identifier candidate exists
    """
    path = Path(source)
    if path.is_file():
        return path

    candidates = [search_dir / f"{path.name}{suffix}" for suffix in suffixes]
    for candidate in candidates:
        if candidate.is_file():
            _log_debug(f"Resolved '{source}' to {candidate}")
            return candidate

    tried = ", ".join(str(c) for c in [path, *candidates])
    raise FileNotFoundError(f"No file found for '{source}' (tried: {tried})")


def load_resume(source: Union[str, Path], resumes_dir: Optional[Path] = None) -> ResumeContent:
    """
    Load resume content from a YAML or JSON document.

    The document root is either the resume content itself or a stored resume
    record (title, templateId, content) whose "content" mapping is used.

    Args:
        source: File path or identifier
        resumes_dir: Directory for identifier lookup (defaults to RESUMES_PATH)

    Returns:
        ResumeContent instance

    Raises:
        FileNotFoundError: If the source can't be resolved
        InvalidResumeStructureError: If the document can't be parsed or doesn't
            have the resume shape
    """
    path = resolve_source(source, resumes_dir or RESUMES_PATH, RESUME_SUFFIXES)

    # JSON is a subset of YAML, so OmegaConf reads both. Resume text is user
    # content: "${...}" stays literal instead of being interpolated.
    try:
        data = OmegaConf.to_container(OmegaConf.load(path), resolve=False)
    except (yaml.YAMLError, OmegaConfBaseException) as e:
        raise InvalidResumeStructureError(
            f"Could not parse resume document: {e}", source_path=path
        ) from e

    if not isinstance(data, dict):
        raise InvalidResumeStructureError(
            f"Resume document must be a mapping, got {type(data).__name__}", source_path=path
        )

    if "personalInfo" not in data and isinstance(data.get("content"), dict):
        _log_debug(f"Unwrapping stored resume record '{data.get('title', path.stem)}'")
        data = data["content"]

    content = ResumeContent.from_dict(data, source_path=path)
    _log_info(
        f"Loaded {path.name}: {len(content.experience)} experience, "
        f"{len(content.education)} education, {len(content.skills)} skill categories"
    )
    return content


def load_job_description(source: Union[str, Path], jobs_dir: Optional[Path] = None) -> str:
    """
    Load job description text.

    Args:
        source: File path or identifier
        jobs_dir: Directory for identifier lookup (defaults to JOBS_PATH)

    Returns:
        Raw job description text

    Raises:
        FileNotFoundError: If the source can't be resolved
    """
    path = resolve_source(source, jobs_dir or JOBS_PATH, JOB_SUFFIXES)
    text = path.read_text(encoding="utf-8")
    if not text:
        _log_warning(f"Job description {path.name} is empty, built-in keywords will be used")
    _log_info(f"Loaded job description {path.name} ({len(text)} chars)")
    return text
