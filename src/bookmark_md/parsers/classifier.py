"""Block classification: document lines → block events.

Each line is matched against the structural markers of the book format in a
fixed order. Lines that match nothing are prose; consecutive prose lines are
reflowed into one paragraph until a blank line or a marker interrupts them.
"""

from __future__ import annotations

import logging
import re

from bookmark_md.ir.schema import BlockEvent, BlockKind

logger = logging.getLogger(__name__)


_NEWLINE_RE = re.compile(r"\r\n|[\n\r\x85\u2028\u2029]")
_SECTION_RE = re.compile(r"\*\d+\*")

SEPARATOR = "-------"

# Order matters: "## " must come after the more specific "## ..." prefixes.
_PREFIXES: tuple[tuple[str, BlockKind], ...] = (
    ("# Title: ", BlockKind.TITLE),
    ("## Author: ", BlockKind.AUTHOR),
    ("## Year: ", BlockKind.YEAR),
    ("## ", BlockKind.CHAPTER),
)


def split_lines(document: str) -> list[str]:
    """Split on every newline boundary, keeping empty lines."""
    return _NEWLINE_RE.split(document)


def classify_line(line: str) -> BlockEvent | None:
    """Classify a single line.

    Returns None for a prose line, which the caller buffers into a paragraph.
    """
    stripped = line.lstrip()
    if not stripped.strip():
        return BlockEvent(kind=BlockKind.BLANK)

    for prefix, kind in _PREFIXES:
        if stripped.startswith(prefix):
            return BlockEvent(kind=kind, text=stripped[len(prefix):].rstrip())

    trimmed = stripped.rstrip()
    if trimmed == SEPARATOR:
        return BlockEvent(kind=BlockKind.SEPARATOR)
    if _SECTION_RE.fullmatch(trimmed):
        return BlockEvent(kind=BlockKind.SECTION, text=trimmed)
    return None


def classify(document: str) -> list[BlockEvent]:
    """Classify a whole document into an ordered list of block events.

    Args:
        document: The complete book text.

    Returns:
        Block events in document order. The empty document yields none.
    """
    if not document:
        return []

    events: list[BlockEvent] = []
    buffer: list[str] = []

    def flush() -> None:
        if buffer:
            text = " ".join(buffer).strip()
            if text:
                events.append(BlockEvent(kind=BlockKind.PARAGRAPH, text=text))
            buffer.clear()

    for line in split_lines(document):
        event = classify_line(line)
        if event is None:
            buffer.append(line.strip())
            continue
        flush()
        events.append(event)

    flush()
    logger.debug("Classified %d blocks", len(events))
    return events
