"""
Profile Data Structures

Defines the in-memory representation of a resume profile.
Instances are built by the loader and only read by the renderers.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class PageMargins:
    """
    Page margins as written in the profile (unit suffix included, e.g. "2 cm").
    """

    top: str
    bottom: str
    left: str
    right: str


@dataclass(frozen=True)
class Design:
    """
    Presentation settings for the Word document.

    Attributes:
        page_size: Page size keyword ("letterpaper", anything else means A4)
        margins: Page margins with unit suffix
        font: Font family name
        font_size: Base font size with unit suffix (e.g. "11pt")
    """

    page_size: str
    margins: PageMargins
    font: str
    font_size: str


@dataclass(frozen=True)
class PersonalInfo:
    name: str
    surname: str
    email: str
    phone: str
    github: str
    linkedin: str

    @property
    def full_name(self) -> str:
        return f"{self.name} {self.surname}"


@dataclass(frozen=True)
class Experience:
    """
    Single work experience entry.

    Attributes:
        company: Employer name
        position: Job title
        location: Work location
        employment_period: Free-text period (not parsed into dates)
        industry: Industry label
        key_responsibilities: Responsibilities in source order
    """

    company: str
    position: str
    location: str
    employment_period: str
    industry: str
    key_responsibilities: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Project:
    name: str
    details: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Education:
    """
    Single education entry.

    Several entries may share an institution (e.g. a BSc and an MSc from the
    same university).
    """

    institution: str
    degree: str
    course_name: Optional[str] = None
    completion_date: Optional[str] = None
    graduation_year: Optional[str] = None
    location: Optional[str] = None
    instructor: Optional[str] = None
    credential_id: Optional[str] = None


EDUCATION_OPTIONAL_FIELDS = (
    "course_name",
    "completion_date",
    "graduation_year",
    "location",
    "instructor",
    "credential_id",
)


@dataclass(frozen=True)
class Profile:
    """
    Complete resume profile.

    Attributes:
        personal_information: Name and contact details
        summary_of_qualifications: Summary bullet points
        experience_details: Work history in source order
        projects: Side projects (markdown output only)
        technical_skills: Skill strings
        education_details: Education entries in source order
        design: Presentation block (Word output only)
    """

    personal_information: PersonalInfo
    summary_of_qualifications: Tuple[str, ...] = ()
    experience_details: Tuple[Experience, ...] = ()
    projects: Tuple[Project, ...] = ()
    technical_skills: Tuple[str, ...] = ()
    education_details: Tuple[Education, ...] = ()
    design: Optional[Design] = field(default=None)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert back to the YAML mapping layout accepted by the loader.

        Absent optional values are omitted so the result loads back into an
        equal Profile.
        """
        info = self.personal_information
        personal = {
            "name": info.name,
            "surname": info.surname,
            "email": info.email,
            "phone": info.phone,
            "github": info.github,
            "linkedin": info.linkedin,
        }

        data: Dict[str, Any] = {"cv": {"personal_information": personal}}

        if self.design is not None:
            margins = self.design.margins
            data["design"] = {
                "page_size": self.design.page_size,
                "margins": {
                    "page": {
                        "top": margins.top,
                        "bottom": margins.bottom,
                        "left": margins.left,
                        "right": margins.right,
                    }
                },
                "font": self.design.font,
                "font_size": self.design.font_size,
            }

        data["summary_of_qualifications"] = list(self.summary_of_qualifications)
        data["experience_details"] = [
            {
                "company": exp.company,
                "position": exp.position,
                "location": exp.location,
                "employment_period": exp.employment_period,
                "industry": exp.industry,
                "key_responsibilities": list(exp.key_responsibilities),
            }
            for exp in self.experience_details
        ]
        data["projects"] = [
            {"name": project.name, "details": list(project.details)} for project in self.projects
        ]
        data["technical_skills"] = list(self.technical_skills)

        education = []
        for edu in self.education_details:
            entry = {"institution": edu.institution, "degree": edu.degree}
            for key in EDUCATION_OPTIONAL_FIELDS:
                value = getattr(edu, key)
                if value is not None:
                    entry[key] = value
            education.append(entry)
        data["education_details"] = education

        return data
