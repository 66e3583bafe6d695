"""
Rendering Context

Responsibilities:
- Converts design values (page size, margins, font sizes) into document units
- Builds the styled Word document and the markdown rendering
- Writes output files atomically

Owns: Output formats, output management
Never: Modifies profile content
"""

from cvgen.contexts.rendering.docx_renderer import (
    DocxResumeBuilder,
    document_to_bytes,
    render_document,
)
from cvgen.contexts.rendering.exceptions import OutputWriteError
from cvgen.contexts.rendering.generator import (
    GenerationResult,
    generate_docx,
    generate_markdown,
)
from cvgen.contexts.rendering.markdown_formatter import render_markdown

__all__ = [
    # Orchestrators
    "generate_docx",
    "generate_markdown",
    "GenerationResult",
    # Renderers
    "DocxResumeBuilder",
    "render_document",
    "document_to_bytes",
    "render_markdown",
    "OutputWriteError",
]
