"""Parser for the book-flavoured Markdown format.

Wraps the classifier, stylist and assembler, and lifts the title, author and
year lines into document metadata.
"""

from __future__ import annotations

import logging

from bookmark_md.config import Config
from bookmark_md.ir.schema import BlockEvent, BlockKind, DocumentMetadata, RichText
from bookmark_md.parsers.assembler import assemble
from bookmark_md.parsers.base import BaseParser
from bookmark_md.parsers.classifier import classify

logger = logging.getLogger(__name__)

_METADATA_FIELDS = {
    BlockKind.TITLE: "title",
    BlockKind.AUTHOR: "author",
    BlockKind.YEAR: "year",
}


class MarkdownParser(BaseParser):
    """Book parser for '# Title:' / '## Chapter' style Markdown."""

    def __init__(self, config: Config | None = None):
        super().__init__(config)
        self.styles = self.config.style.to_style_table()

    @property
    def name(self) -> str:
        return "bookmark"

    @property
    def version(self) -> str:
        return "1"

    def classify(self, text: str) -> list[BlockEvent]:
        return classify(text)

    def assemble(
        self, events: list[BlockEvent], metadata: DocumentMetadata | None = None
    ) -> RichText:
        metadata = self._build_metadata(events, metadata or DocumentMetadata())
        rich = assemble(events, self.styles, metadata)
        logger.info(
            "Parsed %d blocks into %d runs", len(events), len(rich.runs)
        )
        return rich

    def _build_metadata(
        self, events: list[BlockEvent], metadata: DocumentMetadata
    ) -> DocumentMetadata:
        """Fill parser info and the first title/author/year found."""
        update = {"parser": self.name, "parser_version": self.version}
        for event in events:
            field_name = _METADATA_FIELDS.get(event.kind)
            if field_name and field_name not in update and event.text:
                update[field_name] = event.text
        return metadata.model_copy(update=update)
