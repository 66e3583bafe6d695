"""
Design value conversions.

Turns the human-written design block ("2 cm", "11pt", "letterpaper") into
the numeric values used by the Word renderer. Every conversion falls back to
a default instead of failing; presentation values never abort a run.

Units:
- Page dimensions and margins are in twips (1/20 pt, 567 per cm).
- Font sizes are in half-points, the unit Word stores in w:sz.
"""

import math
from dataclasses import dataclass
from typing import Tuple

from cvgen.contexts.profile.profile_data_structure import Design
from cvgen.contexts.rendering.logger import _log_warning

TWIPS_PER_CM = 567
DEFAULT_MARGIN_CM = 2.0
# Largest margin Word accepts on a page (22 inches)
MAX_MARGIN_TWIPS = 31680
DEFAULT_FONT_SIZE_PT = 11

# (width, height) in twips
LETTER_PAGE = (12240, 15840)  # 8.5" x 11"
A4_PAGE = (11906, 16838)
LETTER_KEYWORDS = {"letterpaper", "letter"}

# Indent for nested bullet items (0.5 inch)
BULLET_INDENT_TWIPS = 720

# Contact table column width
CONTACT_COLUMN_TWIPS = 5000


def page_dimensions(page_size: str) -> Tuple[int, int]:
    """
    Map a page size keyword to (width, height) in twips.

    Args:
        page_size: "letterpaper" (or "letter") for US Letter; anything else is A4

    Returns:
        Tuple of (width, height)
    """
    if page_size.strip().lower() in LETTER_KEYWORDS:
        return LETTER_PAGE
    return A4_PAGE


def parse_margin(margin: str) -> int:
    """
    Convert a centimeter margin string to twips.

    Args:
        margin: Margin such as "2 cm" or "1.5cm"

    Returns:
        Margin in twips, truncated toward zero. Unparsable, negative or
        oversized values give the 2 cm default (1134 twips).
    """
    value = margin.strip().removesuffix("cm").strip()
    try:
        centimeters = float(value)
    except ValueError:
        centimeters = math.nan

    if not math.isfinite(centimeters) or not 0 <= centimeters * TWIPS_PER_CM <= MAX_MARGIN_TWIPS:
        _log_warning(f"Unparsable margin '{margin}', using {DEFAULT_MARGIN_CM} cm")
        centimeters = DEFAULT_MARGIN_CM

    return int(centimeters * TWIPS_PER_CM)


def parse_font_size(font_size: str) -> int:
    """
    Parse a point size string such as "11pt".

    Only whole, positive point sizes are accepted; anything else gives 11.
    """
    value = font_size.strip().removesuffix("pt").strip()
    try:
        points = int(value)
    except ValueError:
        points = 0

    if points <= 0:
        _log_warning(f"Unparsable font size '{font_size}', using {DEFAULT_FONT_SIZE_PT}pt")
        return DEFAULT_FONT_SIZE_PT

    return points


@dataclass(frozen=True)
class ParagraphStyleSpec:
    """
    Named paragraph style derived from the design block.

    Attributes:
        name: Style name referenced by paragraphs
        font: Font family (applied to the ASCII and high-ANSI slots)
        size_half_points: Font size in half-points
        bold: Whether the style is bold
    """

    name: str
    font: str
    size_half_points: int
    bold: bool = False


@dataclass(frozen=True)
class StyleSet:
    normal: ParagraphStyleSpec
    heading: ParagraphStyleSpec
    subheading: ParagraphStyleSpec

    def __iter__(self):
        return iter((self.normal, self.heading, self.subheading))


def derive_styles(design: Design) -> StyleSet:
    """
    Derive Normal, Heading and Subheading styles from one font and size.

    For a base size of S points: Normal is 2S half-points, Heading 4S and
    bold, Subheading 3S and bold.
    """
    base = parse_font_size(design.font_size) * 2

    return StyleSet(
        normal=ParagraphStyleSpec("Normal", design.font, base),
        heading=ParagraphStyleSpec("Heading", design.font, base * 2, bold=True),
        subheading=ParagraphStyleSpec("Subheading", design.font, base * 3 // 2, bold=True),
    )
