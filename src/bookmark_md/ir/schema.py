"""Pydantic models for the rich-text Intermediate Representation (IR).

The IR is a flat sequence of styled runs and explicit line breaks, in document
order. There is no tree: block boundaries survive only as line breaks, and the
block kind a run came from is kept on the run for renderers that want it.
This is the contract between the parser and the generator stages.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Styles
# ---------------------------------------------------------------------------


class Trait(str, Enum):
    BOLD = "bold"
    ITALIC = "italic"


class TextStyle(BaseModel):
    """An opaque-to-the-parser text style: size plus weight and slant."""

    model_config = ConfigDict(frozen=True)

    size: float = Field(gt=0)
    bold: bool = False
    italic: bool = False
    color: Optional[str] = Field(default=None, pattern=r"^#?[0-9A-Fa-f]{6}$")  # hex RGB

    def with_trait(self, trait: Trait) -> TextStyle:
        """Return a copy with one trait added; size and other traits are kept."""
        if trait == Trait.BOLD:
            return self.model_copy(update={"bold": True})
        return self.model_copy(update={"italic": True})


class BlockKind(str, Enum):
    TITLE = "title"
    AUTHOR = "author"
    YEAR = "year"
    CHAPTER = "chapter"
    SECTION = "section"
    SEPARATOR = "separator"
    PARAGRAPH = "paragraph"
    BLANK = "blank"


class StyleTable(BaseModel):
    """Base style for every block kind that renders text."""

    model_config = ConfigDict(frozen=True)

    title: TextStyle
    author: TextStyle
    chapter: TextStyle
    section: TextStyle
    normal: TextStyle

    def for_kind(self, kind: BlockKind) -> Optional[TextStyle]:
        """Return the base style of a block kind, or None if it renders no text."""
        return {
            BlockKind.TITLE: self.title,
            BlockKind.AUTHOR: self.author,
            BlockKind.CHAPTER: self.chapter,
            BlockKind.SECTION: self.section,
            BlockKind.PARAGRAPH: self.normal,
        }.get(kind)

    def bold(self, kind: BlockKind = BlockKind.PARAGRAPH) -> TextStyle:
        base = self.for_kind(kind) or self.normal
        return base.with_trait(Trait.BOLD)

    def italic(self, kind: BlockKind = BlockKind.PARAGRAPH) -> TextStyle:
        base = self.for_kind(kind) or self.normal
        return base.with_trait(Trait.ITALIC)

    @classmethod
    def default(cls, base_size: float = 16.0) -> StyleTable:
        """Book defaults: large bold title, medium author, bold headings."""
        return cls(
            title=TextStyle(size=base_size + 12, bold=True),
            author=TextStyle(size=base_size + 6),
            chapter=TextStyle(size=base_size + 4, bold=True),
            section=TextStyle(size=base_size + 2, bold=True),
            normal=TextStyle(size=base_size),
        )


# ---------------------------------------------------------------------------
# Block events (classifier output)
# ---------------------------------------------------------------------------


class BlockEvent(BaseModel):
    """One classified block with its raw, unstyled text."""

    model_config = ConfigDict(frozen=True)

    kind: BlockKind
    text: str = ""


# ---------------------------------------------------------------------------
# Rich-text items (discriminated union via `type` field)
# ---------------------------------------------------------------------------


class StyledRun(BaseModel):
    """A contiguous text fragment sharing one style."""

    model_config = ConfigDict(frozen=True)

    type: Literal["run"] = "run"
    text: str
    style: TextStyle
    kind: Optional[BlockKind] = None

    @property
    def is_bold(self) -> bool:
        return self.style.bold

    @property
    def is_italic(self) -> bool:
        return self.style.italic


class LineBreak(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["break"] = "break"


RichTextItem = Annotated[
    Union[StyledRun, LineBreak],
    Field(discriminator="type"),
]


# ---------------------------------------------------------------------------
# Document metadata
# ---------------------------------------------------------------------------


class DocumentMetadata(BaseModel):
    source_file: str = ""
    source_hash: str = ""
    parser: str = ""
    parser_version: str = ""
    title: str = ""
    author: str = ""
    year: str = ""


# ---------------------------------------------------------------------------
# Top-level IR document
# ---------------------------------------------------------------------------


class RichText(BaseModel):
    """The complete styled output for one book."""

    metadata: DocumentMetadata = Field(default_factory=DocumentMetadata)
    items: list[RichTextItem] = Field(default_factory=list)

    @property
    def runs(self) -> list[StyledRun]:
        return [item for item in self.items if isinstance(item, StyledRun)]

    @property
    def text(self) -> str:
        """Plain text of the document, line breaks as newlines."""
        return "".join(
            item.text if isinstance(item, StyledRun) else "\n" for item in self.items
        )

    def trailing_breaks(self) -> int:
        """Number of consecutive line breaks at the end of the document."""
        count = 0
        for item in reversed(self.items):
            if not isinstance(item, LineBreak):
                break
            count += 1
        return count

    def lines(self) -> list[list[StyledRun]]:
        """Group runs into lines; every break terminates one line.

        Runs after the last break form a final line only if there are any.
        """
        lines: list[list[StyledRun]] = []
        current: list[StyledRun] = []
        for item in self.items:
            if isinstance(item, LineBreak):
                lines.append(current)
                current = []
            else:
                current.append(item)
        if current:
            lines.append(current)
        return lines

    def to_json(self, **kwargs) -> str:
        """Serialize to JSON string."""
        return self.model_dump_json(indent=2, **kwargs)

    @classmethod
    def from_json(cls, json_str: str) -> RichText:
        """Deserialize from JSON string."""
        return cls.model_validate_json(json_str)
