"""Mapping of IR text styles onto python-docx runs and paragraphs."""

from __future__ import annotations

from docx.shared import Pt, RGBColor

from bookmark_md.ir.schema import TextStyle


def apply_text_style(run, style: TextStyle, font_name: str | None = None) -> None:
    """Apply size, weight, slant and colour of a TextStyle to a Run.

    Args:
        run: The python-docx Run object.
        style: The IR style of the run.
        font_name: Optional typeface; the document default is kept if None.
    """
    run.font.size = Pt(style.size)
    run.bold = style.bold
    run.italic = style.italic
    if style.color:
        run.font.color.rgb = RGBColor.from_string(style.color.lstrip("#").upper())
    if font_name:
        run.font.name = font_name


def apply_paragraph_spacing(paragraph, points: float) -> None:
    """Set the space after a paragraph, in points."""
    paragraph.paragraph_format.space_after = Pt(points)

