"""Custom exceptions for the rendering context."""

from pathlib import Path
from typing import Optional

from cvgen.exceptions import CvgenError


class OutputWriteError(CvgenError):
    """
    Exception raised when a rendered document cannot be written.

    Attributes:
        path: Target output path
        original_error: The underlying OSError
    """

    stage = "write"

    def __init__(self, path: Path, original_error: Optional[Exception] = None):
        self.path = path
        self.original_error = original_error

        message = f"Cannot write output file: {path}"
        if original_error:
            message += f" ({original_error.__class__.__name__}: {original_error})"

        super().__init__(message)
