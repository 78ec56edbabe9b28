"""Rich-text Intermediate Representation models."""

from bookmark_md.ir.schema import (
    BlockEvent,
    BlockKind,
    DocumentMetadata,
    LineBreak,
    RichText,
    RichTextItem,
    StyledRun,
    StyleTable,
    TextStyle,
    Trait,
)

__all__ = [
    "BlockEvent",
    "BlockKind",
    "DocumentMetadata",
    "LineBreak",
    "RichText",
    "RichTextItem",
    "StyledRun",
    "StyleTable",
    "TextStyle",
    "Trait",
]
