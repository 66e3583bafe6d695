"""Unit tests for profile loading and schema validation."""

import pytest
from omegaconf import OmegaConf

from cvgen.contexts.profile.exceptions import ProfileParseError, ProfileReadError
from cvgen.contexts.profile.loader import load_profile, parse_profile

MINIMAL_YAML = """\
cv:
  personal_information:
    name: Grace
    surname: Hopper
    email: grace@example.com
    phone: "555-0100"
    github: github.com/ghopper
    linkedin: linkedin.com/in/ghopper
"""


@pytest.mark.unit
def test_parse_sample_profile(sample_yaml):
    """All sections load in source order."""
    profile = parse_profile(sample_yaml)

    info = profile.personal_information
    assert info.full_name == "Ada Lovelace"
    assert info.github == "github.com/ada"

    assert [exp.company for exp in profile.experience_details] == ["Acme", "Difference Works"]
    assert profile.experience_details[0].key_responsibilities == ("Built X", "Shipped Y")
    assert profile.projects[0].name == "Note G"
    assert profile.technical_skills == ("Mathematics", "Punched cards")
    assert [edu.degree for edu in profile.education_details] == [
        "BSc Mathematics",
        "Lecture series",
        "MSc Analysis",
    ]

    assert profile.design.page_size == "letterpaper"
    assert profile.design.margins.bottom == "1.5 cm"
    assert profile.design.font_size == "10pt"


@pytest.mark.unit
def test_optional_collections_default_to_empty():
    """Missing lists and design block do not fail the load."""
    profile = parse_profile(MINIMAL_YAML)

    assert profile.summary_of_qualifications == ()
    assert profile.experience_details == ()
    assert profile.projects == ()
    assert profile.technical_skills == ()
    assert profile.education_details == ()
    assert profile.design is None


@pytest.mark.unit
def test_null_list_treated_as_empty():
    profile = parse_profile(MINIMAL_YAML + "technical_skills:\n")
    assert profile.technical_skills == ()


@pytest.mark.unit
def test_unknown_fields_ignored():
    yaml_text = MINIMAL_YAML + "hobbies:\n  - chess\nexperience_details: []\n"
    profile = parse_profile(yaml_text)
    assert profile.experience_details == ()


@pytest.mark.unit
def test_optional_education_fields_absent_are_none():
    yaml_text = MINIMAL_YAML + (
        "education_details:\n"
        "  - institution: Yale\n"
        "    degree: PhD Mathematics\n"
    )
    edu = parse_profile(yaml_text).education_details[0]

    assert edu.graduation_year is None
    assert edu.course_name is None
    assert edu.credential_id is None


@pytest.mark.unit
def test_quoted_numbers_keep_their_text():
    yaml_text = MINIMAL_YAML.replace('phone: "555-0100"', 'phone: "0123"') + (
        "education_details:\n"
        "  - institution: Yale\n"
        "    degree: PhD Mathematics\n"
        "    graduation_year: \"1934\"\n"
        "    completion_date: \"2020.10\"\n"
    )
    profile = parse_profile(yaml_text)

    assert profile.personal_information.phone == "0123"
    assert profile.education_details[0].graduation_year == "1934"
    assert profile.education_details[0].completion_date == "2020.10"


@pytest.mark.unit
def test_bare_number_in_string_field_raises():
    """YAML reads 0123 as the octal number 83, so unquoted numbers are rejected."""
    yaml_text = MINIMAL_YAML.replace('phone: "555-0100"', "phone: 0123")

    with pytest.raises(ProfileParseError) as exc_info:
        parse_profile(yaml_text)

    assert exc_info.value.field_path == "cv.personal_information.phone"
    assert "quote" in str(exc_info.value)


@pytest.mark.unit
@pytest.mark.parametrize("value", ["1934", "2020.10", "0123"])
def test_bare_numeric_education_value_raises(value):
    yaml_text = MINIMAL_YAML + (
        "education_details:\n"
        "  - institution: Yale\n"
        "    degree: PhD Mathematics\n"
        f"    graduation_year: {value}\n"
    )

    with pytest.raises(ProfileParseError) as exc_info:
        parse_profile(yaml_text)
    assert exc_info.value.field_path == "education_details[0].graduation_year"


@pytest.mark.unit
def test_interpolation_syntax_kept_as_text():
    """Dollar-brace text is resume content, not a config reference."""
    skill = "Shell scripting with ${HOME} expansions"
    profile = parse_profile(MINIMAL_YAML + f'technical_skills:\n  - "{skill}"\n')

    assert profile.technical_skills == (skill,)

    dumped = OmegaConf.to_yaml(OmegaConf.create(profile.to_dict()))
    assert parse_profile(dumped) == profile


@pytest.mark.unit
def test_missing_personal_field_raises():
    yaml_text = MINIMAL_YAML.replace('    phone: "555-0100"\n', "")

    with pytest.raises(ProfileParseError) as exc_info:
        parse_profile(yaml_text)

    assert exc_info.value.field_path == "cv.personal_information.phone"
    assert exc_info.value.stage == "parse"


@pytest.mark.unit
@pytest.mark.parametrize("key", ["github", "linkedin"])
def test_missing_social_link_raises(key):
    yaml_text = "\n".join(
        line for line in MINIMAL_YAML.splitlines() if not line.strip().startswith(f"{key}:")
    )

    with pytest.raises(ProfileParseError) as exc_info:
        parse_profile(yaml_text)
    assert exc_info.value.field_path == f"cv.personal_information.{key}"


@pytest.mark.unit
def test_empty_social_link_is_allowed():
    yaml_text = MINIMAL_YAML.replace("github: github.com/ghopper", 'github: ""')
    assert parse_profile(yaml_text).personal_information.github == ""


@pytest.mark.unit
def test_missing_cv_raises():
    with pytest.raises(ProfileParseError) as exc_info:
        parse_profile("technical_skills: [Python]\n")
    assert exc_info.value.field_path == "cv"


@pytest.mark.unit
def test_missing_experience_field_reports_index(sample_yaml):
    yaml_text = sample_yaml.replace("    industry: Computing\n", "")

    with pytest.raises(ProfileParseError) as exc_info:
        parse_profile(yaml_text)

    assert exc_info.value.field_path == "experience_details[1].industry"


@pytest.mark.unit
def test_wrong_list_type_raises():
    with pytest.raises(ProfileParseError) as exc_info:
        parse_profile(MINIMAL_YAML + "technical_skills: Python\n")
    assert exc_info.value.field_path == "technical_skills"


@pytest.mark.unit
def test_mapping_in_string_field_raises():
    yaml_text = MINIMAL_YAML + "technical_skills:\n  - name: Python\n"

    with pytest.raises(ProfileParseError) as exc_info:
        parse_profile(yaml_text)
    assert exc_info.value.field_path == "technical_skills[0]"


@pytest.mark.unit
def test_boolean_in_string_field_raises():
    yaml_text = MINIMAL_YAML.replace("name: Grace", "name: true")

    with pytest.raises(ProfileParseError):
        parse_profile(yaml_text)


@pytest.mark.unit
def test_non_mapping_root_raises():
    with pytest.raises(ProfileParseError):
        parse_profile("- just\n- a list\n")


@pytest.mark.unit
def test_malformed_yaml_raises():
    with pytest.raises(ProfileParseError) as exc_info:
        parse_profile("cv: [unclosed\n")
    assert "Malformed YAML" in str(exc_info.value)


@pytest.mark.unit
def test_incomplete_design_block_raises(sample_yaml):
    yaml_text = sample_yaml.replace("  font: Garamond\n", "")

    with pytest.raises(ProfileParseError) as exc_info:
        parse_profile(yaml_text)
    assert exc_info.value.field_path == "design.font"


@pytest.mark.unit
def test_load_profile_from_file(sample_profile_path):
    profile = load_profile(sample_profile_path)
    assert profile.personal_information.surname == "Lovelace"


@pytest.mark.unit
def test_load_profile_parse_error_names_source(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("cv: {}\n", encoding="utf-8")

    with pytest.raises(ProfileParseError) as exc_info:
        load_profile(path)
    assert exc_info.value.source == path


@pytest.mark.unit
def test_load_missing_file_raises_read_error(tmp_path):
    missing = tmp_path / "nope.yaml"

    with pytest.raises(ProfileReadError) as exc_info:
        load_profile(missing)

    assert exc_info.value.path == missing
    assert exc_info.value.stage == "read"
    assert isinstance(exc_info.value.original_error, FileNotFoundError)


@pytest.mark.unit
def test_to_dict_roundtrip(sample_yaml):
    """Serializing a profile back to YAML and loading it gives an equal profile."""
    profile = parse_profile(sample_yaml)

    dumped = OmegaConf.to_yaml(OmegaConf.create(profile.to_dict()))
    reloaded = parse_profile(dumped)

    assert reloaded == profile


@pytest.mark.unit
def test_to_dict_omits_absent_optionals():
    profile = parse_profile(MINIMAL_YAML)
    data = profile.to_dict()

    assert "design" not in data
    assert data["cv"]["personal_information"]["github"] == "github.com/ghopper"
    assert data["education_details"] == []
