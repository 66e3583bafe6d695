"""Shared fixtures: a complete sample profile as YAML text and on disk."""

import sys
from pathlib import Path

import pytest
from loguru import logger

SAMPLE_PROFILE_YAML = """\
design:
  page_size: letterpaper
  margins:
    page:
      top: 2 cm
      bottom: 1.5 cm
      left: 2.5 cm
      right: 2 cm
  font: Garamond
  font_size: 10pt
cv:
  personal_information:
    name: Ada
    surname: Lovelace
    email: ada@example.com
    phone: "+44 20 7946 0000"
    github: github.com/ada
    linkedin: linkedin.com/in/ada
summary_of_qualifications:
  - Ten years of analytical engine programming
  - Published translator and annotator
experience_details:
  - company: Acme
    position: Engineer
    location: Remote
    employment_period: 2020-2022
    industry: Tech
    key_responsibilities:
      - Built X
      - Shipped Y
  - company: Difference Works
    position: Analyst
    location: London
    employment_period: 1842-1843
    industry: Computing
    key_responsibilities:
      - Wrote the first program
projects:
  - name: Note G
    details:
      - Bernoulli numbers algorithm
technical_skills:
  - Mathematics
  - Punched cards
education_details:
  - institution: University of London
    degree: BSc Mathematics
    location: London
    graduation_year: "1835"
  - institution: Royal Institution
    degree: Lecture series
    course_name: Chemistry
    instructor: Michael Faraday
  - institution: University of London
    degree: MSc Analysis
    location: Cambridge
    completion_date: June 1838
    credential_id: UL-1838-7
"""


@pytest.fixture
def sample_yaml() -> str:
    return SAMPLE_PROFILE_YAML


@pytest.fixture
def sample_profile_path(tmp_path) -> Path:
    path = tmp_path / "profile.yaml"
    path.write_text(SAMPLE_PROFILE_YAML, encoding="utf-8")
    return path


@pytest.fixture
def restore_logger():
    """Put loguru back on stderr after a test that configured run logging."""
    yield
    logger.remove()
    logger.add(sys.stderr)
