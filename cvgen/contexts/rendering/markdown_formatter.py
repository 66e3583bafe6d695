"""
Markdown Formatter

Helper functions for formatting a Profile as markdown.

Structure:
# Name Surname
## Section
### Entry (company, project, institution)
- list item
"""

from typing import List, Sequence

from cvgen.contexts.profile.profile_data_structure import (
    Education,
    Experience,
    PersonalInfo,
    Profile,
    Project,
)

# Education field -> label, in output order
EDUCATION_FIELD_LABELS = [
    ("course_name", "Course"),
    ("instructor", "Instructor"),
    ("completion_date", "Completed"),
    ("graduation_year", "Graduated"),
    ("location", "Location"),
    ("credential_id", "Credential ID"),
]

CONTACT_FIELD_LABELS = [
    ("email", "Email"),
    ("phone", "Phone"),
    ("github", "GitHub"),
    ("linkedin", "LinkedIn"),
]


def format_header_markdown(info: PersonalInfo) -> str:
    """
    Format name as the document title followed by contact lines.

    Contact fields that are empty are left out.
    """
    parts = [f"# {info.full_name}\n"]

    for key, label in CONTACT_FIELD_LABELS:
        value = getattr(info, key)
        if value:
            parts.append(f"{label}: {value}")

    return "\n".join(parts)


def format_list_markdown(items: Sequence[str], section_name: str) -> str:
    """
    Format a simple list as markdown.

    Args:
        items: List of items
        section_name: Name to use as header

    Returns:
        Markdown-formatted list
    """
    parts = [f"## {section_name}\n"]

    for item in items:
        parts.append(f"- {item}")

    return "\n".join(parts)


def format_work_experience_markdown(exp: Experience) -> str:
    """
    Format single work experience entry as markdown.

    Company is formatted as ### (section header added separately by caller).

    Args:
        exp: Work experience entry

    Returns:
        Markdown-formatted work experience (without section header)
    """
    parts = [
        f"### {exp.company}",
        f"**{exp.position}**",
        f"{exp.location} | {exp.employment_period}",
        f"Industry: {exp.industry}",
    ]

    for responsibility in exp.key_responsibilities:
        parts.append(f"- {responsibility}")

    return "\n".join(parts)


def format_project_markdown(project: Project) -> str:
    parts = [f"### {project.name}"]
    for detail in project.details:
        parts.append(f"- {detail}")
    return "\n".join(parts)


def format_education_markdown(edu: Education) -> str:
    """
    Format single education entry as markdown.

    Optional fields get one labelled line each, only when present.

    Args:
        edu: Education entry

    Returns:
        Markdown-formatted education (without section header)
    """
    parts = [f"### {edu.institution}", f"**{edu.degree}**"]

    for key, label in EDUCATION_FIELD_LABELS:
        value = getattr(edu, key)
        if value:
            parts.append(f"{label}: {value}")

    return "\n".join(parts)


def _format_entries_markdown(section_name: str, entries: List[str]) -> str:
    return "\n\n".join([f"## {section_name}"] + entries)


def render_markdown(profile: Profile) -> str:
    """
    Render a complete profile as markdown.

    Sections, in order: header, summary (if any), work experience, projects
    (if any), technical skills, education. Education entries are not grouped.

    Args:
        profile: Loaded profile

    Returns:
        Markdown text ending with a newline
    """
    sections = [format_header_markdown(profile.personal_information)]

    if profile.summary_of_qualifications:
        sections.append(
            format_list_markdown(profile.summary_of_qualifications, "Summary of Qualifications")
        )

    sections.append(
        _format_entries_markdown(
            "Work Experience",
            [format_work_experience_markdown(exp) for exp in profile.experience_details],
        )
    )

    if profile.projects:
        sections.append(
            _format_entries_markdown(
                "Projects", [format_project_markdown(project) for project in profile.projects]
            )
        )

    sections.append(format_list_markdown(profile.technical_skills, "Technical Skills"))

    sections.append(
        _format_entries_markdown(
            "Education", [format_education_markdown(edu) for edu in profile.education_details]
        )
    )

    return "\n\n".join(sections) + "\n"
