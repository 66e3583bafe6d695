"""
Generation orchestrators.

Each generator runs one full pipeline: load profile -> render in memory ->
write output file. Errors from any stage propagate to the caller unchanged
(all are CvgenError subclasses carrying the failing stage).
"""

import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict

from cvgen.config import RenderConfig
from cvgen.contexts.profile.loader import load_profile
from cvgen.contexts.profile.profile_data_structure import Profile
from cvgen.contexts.rendering.docx_renderer import document_to_bytes, render_document
from cvgen.contexts.rendering.logger import (
    log_generation_failure,
    log_generation_result,
    log_generation_start,
)
from cvgen.contexts.rendering.markdown_formatter import render_markdown
from cvgen.contexts.rendering.output import write_bytes_atomic, write_text_atomic
from cvgen.exceptions import CvgenError


@dataclass
class GenerationResult:
    """
    Result of a generation run.

    Attributes:
        output_path: Path of the written document
        output_format: "docx" or "markdown"
        elapsed: Seconds spent on the whole run
        section_counts: Number of entries rendered per section
    """

    output_path: Path
    output_format: str
    elapsed: float = 0.0
    section_counts: Dict[str, int] = field(default_factory=dict)


def _section_counts(profile: Profile, include_projects: bool) -> Dict[str, int]:
    counts = {
        "summary_of_qualifications": len(profile.summary_of_qualifications),
        "experience_details": len(profile.experience_details),
        "technical_skills": len(profile.technical_skills),
        "education_details": len(profile.education_details),
    }
    if include_projects:
        counts["projects"] = len(profile.projects)
    return counts


def generate_docx(config: RenderConfig) -> GenerationResult:
    """
    Generate the Word resume.

    Args:
        config: Input profile path and output .docx path

    Returns:
        GenerationResult describing the written file

    Raises:
        ProfileReadError: Profile file missing or unreadable
        ProfileParseError: Profile invalid or without a design block
        OutputWriteError: Output could not be written
    """
    start_time = time.time()
    log_generation_start("docx", config.input_path, config.output_path)

    try:
        profile = load_profile(config.input_path)
        document = render_document(profile)
        write_bytes_atomic(config.output_path, document_to_bytes(document))
    except CvgenError as e:
        log_generation_failure("docx", e, time.time() - start_time)
        raise

    result = GenerationResult(
        output_path=config.output_path,
        output_format="docx",
        elapsed=time.time() - start_time,
        section_counts=_section_counts(profile, include_projects=False),
    )
    log_generation_result(result)
    return result


def generate_markdown(config: RenderConfig) -> GenerationResult:
    """
    Generate the markdown resume.

    Args:
        config: Input profile path and output .md path

    Returns:
        GenerationResult describing the written file

    Raises:
        ProfileReadError: Profile file missing or unreadable
        ProfileParseError: Profile invalid
        OutputWriteError: Output could not be written
    """
    start_time = time.time()
    log_generation_start("markdown", config.input_path, config.output_path)

    try:
        profile = load_profile(config.input_path)
        write_text_atomic(config.output_path, render_markdown(profile))
    except CvgenError as e:
        log_generation_failure("markdown", e, time.time() - start_time)
        raise

    result = GenerationResult(
        output_path=config.output_path,
        output_format="markdown",
        elapsed=time.time() - start_time,
        section_counts=_section_counts(profile, include_projects=True),
    )
    log_generation_result(result)
    return result
