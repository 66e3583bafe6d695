"""
Shared loguru setup for generation runs.

Each run gets its own log directory holding one file per context. The file
keeps every DEBUG line; the console shows INFO and above. Context modules
wrap this in contexts/{context}/logger.py and never call loguru setup directly.
"""

import sys
from pathlib import Path
from typing import Any, Dict, Optional

from loguru import logger

import cvgen

LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "{time:HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"
BANNER = "=" * 80


def setup_logger(
    context_name: str,
    log_dir: Path,
    input_path: Path,
    output_path: Path,
    run_details: Optional[Dict[str, Any]] = None,
) -> Path:
    """
    Route loguru output for one run and log its provenance header.

    Args:
        context_name: Context identifier, used as the log file name
        log_dir: Directory for this run's logs (created if missing)
        input_path: Profile being rendered
        output_path: Document being written
        run_details: Extra header lines, e.g. {"Output format": "docx"}

    Returns:
        Path to the log file
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    for level_name, color in LEVEL_COLORS.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level="INFO", colorize=True)

    log_provenance(input_path, output_path, run_details)
    return log_file


def log_provenance(
    input_path: Path, output_path: Path, run_details: Optional[Dict[str, Any]] = None
) -> None:
    """Log which profile produced which document, and how the run was started."""
    logger.info(BANNER)
    logger.info(f"cvgen {cvgen.__version__} (Python {sys.version.split()[0]})")
    logger.info(f"Command: {' '.join(sys.argv)}")
    logger.info(f"Working directory: {Path.cwd()}")
    logger.info(f"Profile: {Path(input_path).resolve()}")
    logger.info(f"Output: {Path(output_path).resolve()}")

    for key, value in (run_details or {}).items():
        logger.info(f"{key}: {value}")

    logger.info(BANNER)
