"""Block assembly: block events → one flat rich-text sequence.

Every block is stylized with the base style of its kind and followed by the
spacing its kind calls for:

    title, author, chapter, section   two breaks
    paragraph                         one break
    year                              one break, unless already after a break
    separator, blank                  one break, unless already after two

Afterwards runs of three or more breaks collapse to two, and a non-empty
document always ends in exactly two breaks.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from bookmark_md.ir.schema import (
    BlockEvent,
    BlockKind,
    DocumentMetadata,
    LineBreak,
    RichText,
    RichTextItem,
    StyleTable,
)
from bookmark_md.parsers.classifier import classify
from bookmark_md.parsers.stylist import stylize

logger = logging.getLogger(__name__)

MAX_BREAKS = 2

_HEADING_KINDS = frozenset(
    {BlockKind.TITLE, BlockKind.AUTHOR, BlockKind.CHAPTER, BlockKind.SECTION}
)


def _trailing_breaks(items: list[RichTextItem]) -> int:
    count = 0
    for item in reversed(items):
        if not isinstance(item, LineBreak):
            break
        count += 1
    return count


def _collapse_breaks(items: list[RichTextItem]) -> list[RichTextItem]:
    """Drop every break beyond the second in a row."""
    result: list[RichTextItem] = []
    streak = 0
    for item in items:
        if isinstance(item, LineBreak):
            streak += 1
            if streak > MAX_BREAKS:
                continue
        else:
            streak = 0
        result.append(item)
    return result


def assemble(
    events: Iterable[BlockEvent],
    styles: Optional[StyleTable] = None,
    metadata: Optional[DocumentMetadata] = None,
) -> RichText:
    """Stylize block events and join them with the spacing policy.

    Args:
        events: Block events in document order.
        styles: Base styles per block kind. Uses StyleTable.default() if None.
        metadata: Metadata attached to the result.

    Returns:
        The assembled RichText.
    """
    styles = styles or StyleTable.default()
    items: list[RichTextItem] = []

    for event in events:
        kind = event.kind
        if kind in _HEADING_KINDS:
            items.extend(stylize(event.text, styles.for_kind(kind), kind))
            items.extend([LineBreak(), LineBreak()])
        elif kind is BlockKind.PARAGRAPH:
            items.extend(stylize(event.text, styles.normal, kind))
            items.append(LineBreak())
        elif kind is BlockKind.YEAR:
            if items and _trailing_breaks(items) == 0:
                items.append(LineBreak())
        elif items and _trailing_breaks(items) < MAX_BREAKS:
            # Separator and blank lines only contribute spacing.
            items.append(LineBreak())

    items = _collapse_breaks(items)
    if items:
        items.extend(LineBreak() for _ in range(MAX_BREAKS - _trailing_breaks(items)))

    logger.debug("Assembled %d items", len(items))
    return RichText(metadata=metadata or DocumentMetadata(), items=items)


def convert(document: str, styles: Optional[StyleTable] = None) -> RichText:
    """Classify and assemble a document in one call."""
    return assemble(classify(document), styles)
