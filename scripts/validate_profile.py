#!/usr/bin/env python3
"""
Validate a profile YAML before rendering.

Usage:
    python scripts/validate_profile.py
    python scripts/validate_profile.py --input profile.yaml --show-yaml
"""

from pathlib import Path
from typing import Optional

import typer
from omegaconf import OmegaConf
from typing_extensions import Annotated

from cvgen.config import PROFILE_PATH
from cvgen.contexts.profile.loader import load_profile
from cvgen.exceptions import CvgenError

app = typer.Typer(help="Validate a resume profile.", add_completion=False)


@app.command()
def main(
    input_path: Annotated[
        Optional[Path],
        typer.Option("--input", "-i", help="Profile YAML (default: PROFILE_PATH)", dir_okay=False),
    ] = None,
    show_yaml: Annotated[
        bool, typer.Option("--show-yaml", help="Print the normalized profile YAML")
    ] = False,
):
    """Load the profile and display what the renderers will see."""
    path = input_path or PROFILE_PATH
    typer.echo(f"Loading {path}")

    try:
        profile = load_profile(path)
    except CvgenError as e:
        typer.echo(f"Error ({e.stage}): {e}", err=True)
        raise typer.Exit(code=1)

    info = profile.personal_information

    typer.echo("\n=== Personal Information ===")
    typer.echo(f"  name: {info.full_name}")
    typer.echo(f"  email: {info.email}")
    typer.echo(f"  phone: {info.phone}")

    typer.echo("\n=== Sections ===")
    typer.echo(f"  summary_of_qualifications: {len(profile.summary_of_qualifications)}")
    typer.echo(f"  experience_details: {len(profile.experience_details)}")
    typer.echo(f"  projects: {len(profile.projects)}")
    typer.echo(f"  technical_skills: {len(profile.technical_skills)}")
    typer.echo(f"  education_details: {len(profile.education_details)}")

    warnings = []
    if profile.design is None:
        warnings.append("No design block: Word output will be rejected")
    if not profile.experience_details:
        warnings.append("No experience entries")

    if warnings:
        typer.echo("\n=== Warnings ===")
        for w in warnings:
            typer.echo(f"  ! {w}")

    if show_yaml:
        typer.echo("\n=== Normalized YAML ===")
        typer.echo(OmegaConf.to_yaml(OmegaConf.create(profile.to_dict())))

    typer.secho("\n✓ Profile is valid", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
