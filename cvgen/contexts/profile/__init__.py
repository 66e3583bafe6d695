"""
Profile Context

Responsibilities:
- Defines the resume profile data model
- Reads profile YAML and validates it against the schema

Owns: Profile schema, YAML -> Profile conversion
Never: Formats or writes output documents
"""

from cvgen.contexts.profile.exceptions import ProfileParseError, ProfileReadError
from cvgen.contexts.profile.loader import load_profile, parse_profile
from cvgen.contexts.profile.profile_data_structure import (
    Design,
    Education,
    Experience,
    PageMargins,
    PersonalInfo,
    Profile,
    Project,
)

__all__ = [
    # Loading
    "load_profile",
    "parse_profile",
    "ProfileParseError",
    "ProfileReadError",
    # Data structure classes
    "Profile",
    "PersonalInfo",
    "Experience",
    "Project",
    "Education",
    "Design",
    "PageMargins",
]
