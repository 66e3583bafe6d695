"""
Profile context logger.

Provides logging interface for the profile context with automatic [profile] prefix.
All profile modules should import from this module, not from utils.logger directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[profile]"


# Wrapper functions with automatic [profile] prefix


def _log_success(message: str) -> None:
    """Log success message with [profile] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [profile] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [profile] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_profile_loaded(profile, source) -> None:
    """Log a one-line summary of a freshly loaded profile."""
    _log_success(f"Loaded profile for {profile.personal_information.full_name}")
    _log_debug(
        f"Source: {source} "
        f"(experience: {len(profile.experience_details)}, "
        f"projects: {len(profile.projects)}, "
        f"skills: {len(profile.technical_skills)}, "
        f"education: {len(profile.education_details)})"
    )
