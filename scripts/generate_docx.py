#!/usr/bin/env python3
"""
Word Resume Generation CLI

Renders the YAML profile into a styled .docx document.

Usage:
    # Use paths from the environment (.env) or defaults
    python scripts/generate_docx.py

    # Explicit paths
    python scripts/generate_docx.py --input profile.yaml --output outs/resume.docx
"""

from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from cvgen.config import LOGS_PATH, RenderConfig
from cvgen.contexts.rendering.generator import generate_docx
from cvgen.contexts.rendering.logger import setup_rendering_logger
from cvgen.exceptions import CvgenError
from cvgen.utils.timestamp import now

app = typer.Typer(
    help="Generate a Word resume from a YAML profile",
    add_completion=False,
)


@app.command()
def main(
    input_path: Annotated[
        Optional[Path],
        typer.Option("--input", "-i", help="Profile YAML (default: PROFILE_PATH)", dir_okay=False),
    ] = None,
    output_path: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Output .docx (default: DOCX_OUTPUT_PATH)", dir_okay=False),
    ] = None,
    log_dir: Annotated[
        Optional[Path],
        typer.Option("--log-dir", help="Log directory (default: LOGS_PATH/docx_<timestamp>)", file_okay=False),
    ] = None,
):
    """Generate the Word resume."""
    config = RenderConfig.for_docx(input_path, output_path)
    setup_rendering_logger(log_dir or LOGS_PATH / f"docx_{now()}", "docx", config)

    try:
        result = generate_docx(config)
    except CvgenError as e:
        typer.echo(f"Error ({e.stage}): {e}", err=True)
        raise typer.Exit(code=1)

    typer.secho(f"✓ Resume generated successfully: {result.output_path}", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
