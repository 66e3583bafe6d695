"""Custom exceptions for the profile context."""

from pathlib import Path
from typing import Optional

from cvgen.exceptions import CvgenError


class ProfileReadError(CvgenError):
    """
    Exception raised when the profile file cannot be read.

    Attributes:
        path: Path that was being read
        original_error: The underlying OSError
    """

    stage = "read"

    def __init__(self, path: Path, original_error: Optional[Exception] = None):
        self.path = path
        self.original_error = original_error

        message = f"Cannot read profile file: {path}"
        if original_error:
            message += f" ({original_error.__class__.__name__}: {original_error})"

        super().__init__(message)


class ProfileParseError(CvgenError, ValueError):
    """
    Exception raised when profile YAML does not match the expected schema.

    Covers malformed YAML, a non-mapping document, missing mandatory fields
    and fields of the wrong type.

    Attributes:
        message: Error description
        field_path: Dotted path of the offending field (e.g. 'experience_details[0].company')
        source: Where the YAML came from (file path or None for in-memory text)
    """

    stage = "parse"

    def __init__(
        self,
        message: str,
        field_path: Optional[str] = None,
        source: Optional[Path] = None,
    ):
        self.message = message
        self.field_path = field_path
        self.source = source

        parts = [message]
        if field_path:
            parts.append(f"Field: {field_path}")
        if source:
            parts.append(f"Source: {source}")

        super().__init__("\n".join(parts))
