"""
Word (.docx) Renderer

Builds a styled Word document from a Profile using python-docx.

Document layout:
- Header: name, 2x2 contact table
- Summary of Qualifications
- Work Experience
- Technical Skills
- Education (grouped by institution)

A separator paragraph follows every section except Education, which is last.
The document is built completely in memory; writing it is left to the caller.
"""

from io import BytesIO
from typing import Dict, List, Sequence

from docx import Document
from docx.document import Document as DocumentObject
from docx.enum.style import WD_STYLE_TYPE
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Pt, Twips
from docx.text.paragraph import Paragraph

from cvgen.contexts.profile.exceptions import ProfileParseError
from cvgen.contexts.profile.profile_data_structure import (
    Design,
    Education,
    Experience,
    PersonalInfo,
    Profile,
)
from cvgen.contexts.rendering.design import (
    BULLET_INDENT_TWIPS,
    CONTACT_COLUMN_TWIPS,
    ParagraphStyleSpec,
    derive_styles,
    page_dimensions,
    parse_margin,
)
from cvgen.contexts.rendering.logger import _log_debug

NORMAL_STYLE = "Normal"
HEADING_STYLE = "Heading"
SUBHEADING_STYLE = "Subheading"

SEPARATOR_TEXT = "_"
# Half-point size of the separator run (0.5 pt)
SEPARATOR_SIZE_HALF_POINTS = 1
NAME_SIZE_HALF_POINTS = 48

SECTION_TITLES = {
    "summary": "Summary of Qualifications",
    "experience": "WORK EXPERIENCE",
    "skills": "TECHNICAL SKILLS",
    "education": "EDUCATION",
}


def _half_points(value: int) -> Pt:
    return Pt(value / 2)


class DocxResumeBuilder:
    """
    Owns one python-docx Document and appends resume sections to it.

    Usage:
        builder = DocxResumeBuilder(profile.design)
        builder.add_header(profile.personal_information)
        ...
        document = builder.document
    """

    def __init__(self, design: Design):
        self.design = design
        self.document: DocumentObject = Document()
        self.apply_design()

    # Design

    def apply_design(self) -> None:
        """Apply page size, margins and the three named paragraph styles."""
        section = self.document.sections[0]

        width, height = page_dimensions(self.design.page_size)
        section.page_width = Twips(width)
        section.page_height = Twips(height)

        margins = self.design.margins
        section.top_margin = Twips(parse_margin(margins.top))
        section.bottom_margin = Twips(parse_margin(margins.bottom))
        section.left_margin = Twips(parse_margin(margins.left))
        section.right_margin = Twips(parse_margin(margins.right))

        for spec in derive_styles(self.design):
            self._apply_style(spec)

        _log_debug(f"Page {width}x{height} twips, font {self.design.font} {self.design.font_size}")

    def _apply_style(self, spec: ParagraphStyleSpec) -> None:
        styles = self.document.styles
        if spec.name in styles:
            style = styles[spec.name]
        else:
            style = styles.add_style(spec.name, WD_STYLE_TYPE.PARAGRAPH)
            style.base_style = styles[NORMAL_STYLE]

        style.font.name = spec.font
        style.font.size = _half_points(spec.size_half_points)
        if spec.bold:
            style.font.bold = True

    # Paragraph helpers

    def add_section_title(self, title: str) -> Paragraph:
        return self.document.add_paragraph(title, style=HEADING_STYLE)

    def add_separator(self) -> Paragraph:
        """Add the minimal centered paragraph used as a horizontal line."""
        paragraph = self.document.add_paragraph()
        run = paragraph.add_run(SEPARATOR_TEXT)
        run.font.size = _half_points(SEPARATOR_SIZE_HALF_POINTS)
        paragraph.alignment = WD_ALIGN_PARAGRAPH.CENTER
        paragraph.paragraph_format.left_indent = Twips(0)
        paragraph.paragraph_format.right_indent = Twips(0)
        return paragraph

    def add_bullet(self, text: str, marker: str = "• ", indent: bool = False) -> Paragraph:
        paragraph = self.document.add_paragraph(style=NORMAL_STYLE)
        paragraph.add_run(marker)
        paragraph.add_run(text)
        if indent:
            paragraph.paragraph_format.left_indent = Twips(BULLET_INDENT_TWIPS)
        return paragraph

    def add_line(self, text: str) -> Paragraph:
        return self.document.add_paragraph(text, style=NORMAL_STYLE)

    # Sections

    def add_header(self, info: PersonalInfo) -> None:
        name = self.document.add_paragraph(style=HEADING_STYLE)
        run = name.add_run(info.full_name)
        run.bold = True
        run.font.size = _half_points(NAME_SIZE_HALF_POINTS)

        contact_rows = [
            (info.email, info.phone),
            (info.github, info.linkedin),
        ]
        table = self.document.add_table(rows=len(contact_rows), cols=2)
        for row_index, values in enumerate(contact_rows):
            for col_index, value in enumerate(values):
                table.cell(row_index, col_index).text = value
        for column in table.columns:
            column.width = Twips(CONTACT_COLUMN_TWIPS)
            for cell in column.cells:
                cell.width = Twips(CONTACT_COLUMN_TWIPS)

        self.add_separator()

    def add_summary(self, summary: Sequence[str]) -> None:
        self.add_section_title(SECTION_TITLES["summary"])
        for qualification in summary:
            self.add_bullet(qualification, marker=" • ")
        self.add_separator()

    def add_experience(self, experiences: Sequence[Experience]) -> None:
        self.add_section_title(SECTION_TITLES["experience"])

        for exp in experiences:
            heading = self.document.add_paragraph(style=SUBHEADING_STYLE)
            heading.add_run(exp.company).bold = True
            heading.add_run(" - ")
            heading.add_run(exp.position).bold = False

            self.add_line(f"{exp.location} | {exp.employment_period}")
            self.add_line(f"Industry: {exp.industry}")

            for responsibility in exp.key_responsibilities:
                self.add_bullet(responsibility, marker=" • ", indent=True)

            self.document.add_paragraph()

        self.add_separator()

    def add_skills(self, skills: Sequence[str]) -> None:
        self.add_section_title(SECTION_TITLES["skills"])
        for skill in skills:
            self.add_bullet(skill)
        self.add_separator()

    def add_education(self, education: Sequence[Education]) -> None:
        self.add_section_title(SECTION_TITLES["education"])

        for institution, entries in group_by_institution(education).items():
            heading = self.document.add_paragraph(style=SUBHEADING_STYLE)
            heading.add_run(institution).bold = True

            # Entries of one institution share the first entry's location
            location = entries[0].location
            if location:
                self.add_line(f"Location: {location}")

            for edu in entries:
                degree = self.document.add_paragraph(style=NORMAL_STYLE)
                degree.add_run("• ")
                degree.add_run(edu.degree).italic = True

                if edu.course_name:
                    self.add_line(f"  Course: {edu.course_name}")
                if edu.completion_date:
                    self.add_line(f"  Completed: {edu.completion_date}")
                if edu.graduation_year:
                    self.add_line(f"  Graduated: {edu.graduation_year}")

            self.document.add_paragraph()

    def build(self, profile: Profile) -> DocumentObject:
        """Append every section of the profile and return the document."""
        self.add_header(profile.personal_information)
        self.add_summary(profile.summary_of_qualifications)
        self.add_experience(profile.experience_details)
        self.add_skills(profile.technical_skills)
        self.add_education(profile.education_details)
        return self.document


def group_by_institution(education: Sequence[Education]) -> Dict[str, List[Education]]:
    """
    Group education entries by institution.

    Groups appear in first-seen order; entries keep their input order.
    """
    groups: Dict[str, List[Education]] = {}
    for edu in education:
        groups.setdefault(edu.institution, []).append(edu)
    return groups


def render_document(profile: Profile) -> DocumentObject:
    """
    Build the Word document for a profile.

    Args:
        profile: Loaded profile; must carry a design block

    Returns:
        python-docx Document, not yet saved

    Raises:
        ProfileParseError: If the profile has no design block
    """
    if profile.design is None:
        raise ProfileParseError("Missing required field 'design'", field_path="design")

    return DocxResumeBuilder(profile.design).build(profile)


def document_to_bytes(document: DocumentObject) -> bytes:
    """Serialize a document to .docx bytes."""
    buffer = BytesIO()
    document.save(buffer)
    return buffer.getvalue()
