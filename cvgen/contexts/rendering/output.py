"""
Output writing.

Rendered documents are committed in one step: data goes to a temporary file
next to the target and is moved into place only after the write succeeded,
so a failed run never leaves a partial output file behind.
"""

import os
import tempfile
from pathlib import Path

from cvgen.contexts.rendering.exceptions import OutputWriteError
from cvgen.contexts.rendering.logger import _log_debug, _log_error

OUTPUT_FILE_MODE = 0o644


def write_bytes_atomic(path: Path, data: bytes) -> Path:
    """
    Write bytes to path via a temporary file.

    Args:
        path: Target file
        data: Complete file content

    Returns:
        The target path

    Raises:
        OutputWriteError: If the directory cannot be created or the file written
    """
    path = Path(path)
    temp_path = None

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        temp_fd, temp_path = tempfile.mkstemp(
            prefix=f".{path.name}.", suffix=".tmp", dir=path.parent
        )
        with os.fdopen(temp_fd, "wb") as f:
            f.write(data)
        os.chmod(temp_path, OUTPUT_FILE_MODE)

        # Only overwrite target if write succeeded
        os.replace(temp_path, path)
    except OSError as e:
        if temp_path and os.path.exists(temp_path):
            os.unlink(temp_path)
        _log_error(f"Failed to write {path}: {e}")
        raise OutputWriteError(path, e) from e

    _log_debug(f"Wrote {len(data)} bytes to {path}")
    return path


def write_text_atomic(path: Path, text: str) -> Path:
    """Write UTF-8 text to path via a temporary file."""
    return write_bytes_atomic(path, text.encode("utf-8"))
