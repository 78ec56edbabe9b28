"""Rich text → .docx renderer.

The IR is a flat run/break sequence, so every line of it becomes one Word
paragraph and blank lines become empty paragraphs. Spacing therefore comes
from the IR's breaks; only body paragraphs get extra space after them.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from docx import Document

from bookmark_md.config import Config
from bookmark_md.exceptions import GenerationError
from bookmark_md.generators.styles import (
    apply_paragraph_spacing,
    apply_text_style,
)
from bookmark_md.ir.schema import BlockKind, RichText, StyledRun

logger = logging.getLogger(__name__)


class WordGenerator:
    """Generates a Word document from a RichText IR."""

    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config.default()

    def generate(self, rich: RichText, output_path: Path) -> Path:
        """Generate a .docx file from a RichText.

        Args:
            rich: The document IR to render.
            output_path: Where to write the .docx file.

        Returns:
            The output path (for convenience).
        """
        doc = self.generate_document(rich)

        try:
            doc.save(str(output_path))
        except OSError as exc:
            raise GenerationError(f"Failed to save document: {exc}") from exc

        logger.info("Generated %s", output_path)
        return output_path

    def generate_document(self, rich: RichText) -> Document:
        """Generate and return a python-docx Document object."""
        doc = Document()

        if rich.metadata.title:
            doc.core_properties.title = rich.metadata.title
        if rich.metadata.author:
            doc.core_properties.author = rich.metadata.author

        lines = rich.lines()
        for runs in lines:
            self._render_line(doc, runs)

        logger.debug("Rendered %d lines", len(lines))
        return doc

    def _render_line(self, doc: Document, runs: list[StyledRun]) -> None:
        """Render one line of runs as a paragraph."""
        paragraph = doc.add_paragraph()
        for run_data in runs:
            run = paragraph.add_run(run_data.text)
            apply_text_style(run, run_data.style, self.config.style.font_name)

        # Breaks carry the spacing; only body paragraphs add space after.
        if any(run.kind is BlockKind.PARAGRAPH for run in runs):
            apply_paragraph_spacing(paragraph, self.config.style.paragraph_spacing)
        else:
            apply_paragraph_spacing(paragraph, 0)
