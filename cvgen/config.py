"""
Runtime configuration.

Paths are read from the environment (and a local .env file) with defaults,
then passed explicitly into the generators as a RenderConfig.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

PROFILE_PATH = Path(os.getenv("PROFILE_PATH", "profile.yaml"))
DOCX_OUTPUT_PATH = Path(os.getenv("DOCX_OUTPUT_PATH", "resume.docx"))
MARKDOWN_OUTPUT_PATH = Path(os.getenv("MARKDOWN_OUTPUT_PATH", "resume.md"))
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))


@dataclass(frozen=True)
class RenderConfig:
    """
    Paths for a single generation run.

    Attributes:
        input_path: Location of the YAML profile
        output_path: Where the rendered document is written
    """

    input_path: Path
    output_path: Path

    @classmethod
    def for_docx(
        cls, input_path: Optional[Path] = None, output_path: Optional[Path] = None
    ) -> "RenderConfig":
        """Build a config for the Word renderer, filling gaps from the environment."""
        return cls(
            input_path=Path(input_path) if input_path else PROFILE_PATH,
            output_path=Path(output_path) if output_path else DOCX_OUTPUT_PATH,
        )

    @classmethod
    def for_markdown(
        cls, input_path: Optional[Path] = None, output_path: Optional[Path] = None
    ) -> "RenderConfig":
        """Build a config for the markdown renderer, filling gaps from the environment."""
        return cls(
            input_path=Path(input_path) if input_path else PROFILE_PATH,
            output_path=Path(output_path) if output_path else MARKDOWN_OUTPUT_PATH,
        )
