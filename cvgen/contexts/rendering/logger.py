"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from cvgen.config import RenderConfig
from cvgen.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Path, output_format: str, config: RenderConfig) -> Path:
    """
    Setup logger for a rendering run.

    The log header names the profile and the output document of this run.

    Args:
        log_dir: Directory for this rendering session
        output_format: "docx" or "markdown"
        config: Paths of the run

    Returns:
        Path to log file

    Example:
        from cvgen.contexts.rendering.logger import setup_rendering_logger, _log_info

        config = RenderConfig.for_docx()
        log_file = setup_rendering_logger(log_dir, "docx", config)
        _log_info("Starting rendering...")
    """
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        input_path=config.input_path,
        output_path=config.output_path,
        run_details={"Output format": output_format},
    )


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_generation_start(output_format: str, input_path: Path, output_path: Path) -> None:
    """Log start of a generation run."""
    _log_info(f"Starting {output_format} generation")
    _log_debug(f"  Source: {input_path}")
    _log_debug(f"  Target: {output_path}")


def log_generation_result(result) -> None:  # GenerationResult
    """
    Log a finished generation run.

    Args:
        result: GenerationResult from generate_docx() or generate_markdown()
    """
    _log_success(f"{result.output_format}: written to {result.output_path} ({result.elapsed:.2f}s)")
    for section, count in result.section_counts.items():
        _log_debug(f"  {section}: {count}")


def log_generation_failure(output_format: str, error: Exception, elapsed_time: float) -> None:
    """Log a failed generation run with the failing stage."""
    stage = getattr(error, "stage", "unknown")
    _log_error(f"{output_format} generation failed at stage '{stage}' ({elapsed_time:.2f}s)")
    _log_error(f"  Error: {error}")
