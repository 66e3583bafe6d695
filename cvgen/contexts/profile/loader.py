"""
Profile Loader

Reads a YAML resume profile and converts it into a Profile instance.

Validation is strict about structure (mandatory fields, field types) and
lenient about extras: unknown keys are ignored, optional keys default to
empty values. Nothing is returned unless the whole document is valid.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from cvgen.contexts.profile.exceptions import ProfileParseError, ProfileReadError
from cvgen.contexts.profile.logger import _log_debug, _log_error, log_profile_loaded
from cvgen.contexts.profile.profile_data_structure import (
    EDUCATION_OPTIONAL_FIELDS,
    Design,
    Education,
    Experience,
    PageMargins,
    PersonalInfo,
    Profile,
    Project,
)

_MISSING = object()


class _ProfileBuilder:
    """
    Walks a plain YAML container and builds Profile records.

    Keeps track of the source so every error points at the offending file.
    """

    def __init__(self, source: Optional[Path] = None):
        self.source = source

    def _fail(self, message: str, field_path: str) -> ProfileParseError:
        return ProfileParseError(message, field_path=field_path, source=self.source)

    # Field accessors

    def _mapping(self, value: Any, field_path: str) -> Dict[str, Any]:
        if not isinstance(value, dict):
            raise self._fail(
                f"Expected a mapping, got {type(value).__name__}", field_path
            )
        return value

    def _scalar(self, value: Any, field_path: str) -> str:
        if isinstance(value, str):
            return value
        # Bare numbers lose their source text (0123 loads as 83), so they must be quoted
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            raise self._fail(
                f"Expected a string, got number {value!r}; quote the value in the YAML file",
                field_path,
            )
        raise self._fail(f"Expected a string, got {type(value).__name__}", field_path)

    def _required_str(self, data: Dict[str, Any], key: str, prefix: str) -> str:
        field_path = f"{prefix}.{key}" if prefix else key
        value = data.get(key, _MISSING)
        if value is _MISSING or value is None:
            raise self._fail(f"Missing required field '{key}'", field_path)
        return self._scalar(value, field_path)

    def _optional_str(self, data: Dict[str, Any], key: str, prefix: str) -> Optional[str]:
        value = data.get(key)
        if value is None:
            return None
        return self._scalar(value, f"{prefix}.{key}" if prefix else key)

    def _list(self, data: Dict[str, Any], key: str, prefix: str) -> List[Any]:
        field_path = f"{prefix}.{key}" if prefix else key
        value = data.get(key)
        if value is None:
            return []
        if not isinstance(value, list):
            raise self._fail(f"Expected a list, got {type(value).__name__}", field_path)
        return value

    def _str_list(self, data: Dict[str, Any], key: str, prefix: str) -> tuple:
        field_path = f"{prefix}.{key}" if prefix else key
        return tuple(
            self._scalar(item, f"{field_path}[{i}]")
            for i, item in enumerate(self._list(data, key, prefix))
        )

    # Records

    def personal_info(self, data: Dict[str, Any]) -> PersonalInfo:
        if data.get("cv") is None:
            raise self._fail("Missing required field 'cv'", "cv")
        cv = self._mapping(data["cv"], "cv")
        if cv.get("personal_information") is None:
            raise self._fail(
                "Missing required field 'personal_information'", "cv.personal_information"
            )

        prefix = "cv.personal_information"
        info = self._mapping(cv["personal_information"], prefix)
        return PersonalInfo(
            name=self._required_str(info, "name", prefix),
            surname=self._required_str(info, "surname", prefix),
            email=self._required_str(info, "email", prefix),
            phone=self._required_str(info, "phone", prefix),
            github=self._required_str(info, "github", prefix),
            linkedin=self._required_str(info, "linkedin", prefix),
        )

    def experience(self, data: Any, prefix: str) -> Experience:
        entry = self._mapping(data, prefix)
        return Experience(
            company=self._required_str(entry, "company", prefix),
            position=self._required_str(entry, "position", prefix),
            location=self._required_str(entry, "location", prefix),
            employment_period=self._required_str(entry, "employment_period", prefix),
            industry=self._required_str(entry, "industry", prefix),
            key_responsibilities=self._str_list(entry, "key_responsibilities", prefix),
        )

    def project(self, data: Any, prefix: str) -> Project:
        entry = self._mapping(data, prefix)
        return Project(
            name=self._required_str(entry, "name", prefix),
            details=self._str_list(entry, "details", prefix),
        )

    def education(self, data: Any, prefix: str) -> Education:
        entry = self._mapping(data, prefix)
        optional = {key: self._optional_str(entry, key, prefix) for key in EDUCATION_OPTIONAL_FIELDS}
        return Education(
            institution=self._required_str(entry, "institution", prefix),
            degree=self._required_str(entry, "degree", prefix),
            **optional,
        )

    def design(self, data: Dict[str, Any]) -> Optional[Design]:
        if data.get("design") is None:
            return None

        design = self._mapping(data["design"], "design")
        if design.get("margins") is None:
            raise self._fail("Missing required field 'margins'", "design.margins")
        margins = self._mapping(design["margins"], "design.margins")
        if margins.get("page") is None:
            raise self._fail("Missing required field 'page'", "design.margins.page")

        prefix = "design.margins.page"
        page = self._mapping(margins["page"], prefix)
        return Design(
            page_size=self._required_str(design, "page_size", "design"),
            margins=PageMargins(
                top=self._required_str(page, "top", prefix),
                bottom=self._required_str(page, "bottom", prefix),
                left=self._required_str(page, "left", prefix),
                right=self._required_str(page, "right", prefix),
            ),
            font=self._required_str(design, "font", "design"),
            font_size=self._required_str(design, "font_size", "design"),
        )

    def profile(self, data: Any) -> Profile:
        data = self._mapping(data, "<root>")
        return Profile(
            personal_information=self.personal_info(data),
            summary_of_qualifications=self._str_list(data, "summary_of_qualifications", ""),
            experience_details=tuple(
                self.experience(item, f"experience_details[{i}]")
                for i, item in enumerate(self._list(data, "experience_details", ""))
            ),
            projects=tuple(
                self.project(item, f"projects[{i}]")
                for i, item in enumerate(self._list(data, "projects", ""))
            ),
            technical_skills=self._str_list(data, "technical_skills", ""),
            education_details=tuple(
                self.education(item, f"education_details[{i}]")
                for i, item in enumerate(self._list(data, "education_details", ""))
            ),
            design=self.design(data),
        )


def parse_profile(text: str, source: Optional[Path] = None) -> Profile:
    """
    Parse profile YAML text into a Profile.

    Args:
        text: YAML document
        source: Optional origin of the text, used in error messages

    Returns:
        Fully populated Profile

    Raises:
        ProfileParseError: If the YAML is malformed or does not match the schema
    """
    try:
        yaml_data = OmegaConf.create(text)
        yaml_dict = OmegaConf.to_container(yaml_data, resolve=False)
    except (yaml.YAMLError, OmegaConfBaseException, ValueError) as e:
        raise ProfileParseError(f"Malformed YAML: {e}", source=source) from e

    return _ProfileBuilder(source).profile(yaml_dict)


def load_profile(path: Union[str, Path]) -> Profile:
    """
    Load a profile from a YAML file.

    The file is read completely before parsing starts.

    Args:
        path: Path to the profile YAML

    Returns:
        Fully populated Profile

    Raises:
        ProfileReadError: If the file is missing or unreadable
        ProfileParseError: If the content does not match the schema
    """
    path = Path(path)
    _log_debug(f"Reading profile: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        _log_error(f"Cannot read {path}: {e}")
        raise ProfileReadError(path, e) from e

    profile = parse_profile(text, source=path)
    log_profile_loaded(profile, path)
    return profile
