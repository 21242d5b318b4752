"""Custom exceptions for the intake context."""

from pathlib import Path
from typing import Optional


class InvalidResumeStructureError(ValueError):
    """
    Exception raised when a resume document cannot be mapped onto ResumeContent.

    Raised for structural problems only (root is not a mapping, a list-typed
    field holds something else). Empty or missing fields are not errors.

    Attributes:
        message: Error description
        field_name: Dotted path of the offending field (e.g., 'experience[0].achievements')
        source_path: File the document was loaded from, if any
    """

    def __init__(
        self,
        message: str,
        field_name: Optional[str] = None,
        source_path: Optional[Path] = None,
    ):
        self.message = message
        self.field_name = field_name
        self.source_path = source_path

        parts = [message]

        if field_name:
            parts.append(f"Field: {field_name}")

        if source_path:
            parts.append(f"Source: {source_path}")

        super().__init__("\n".join(parts))
