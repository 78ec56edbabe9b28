"""Tests for IR Pydantic models — immutability, helpers, JSON serialization."""

import json

import pytest
from pydantic import ValidationError

from bookmark_md.ir import (
    BlockEvent,
    BlockKind,
    DocumentMetadata,
    LineBreak,
    RichText,
    StyledRun,
    StyleTable,
    TextStyle,
    Trait,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _sample_document() -> RichText:
    styles = StyleTable.default()
    return RichText(
        metadata=DocumentMetadata(
            source_file="zarathustra.md",
            source_hash="abc123",
            parser="bookmark",
            parser_version="1",
            title="Thus Spoke Zarathustra",
            author="Friedrich Nietzsche",
            year="1883",
        ),
        items=[
            StyledRun(text="Thus Spoke Zarathustra", style=styles.title, kind=BlockKind.TITLE),
            LineBreak(),
            LineBreak(),
            StyledRun(text="Like thee ", style=styles.normal, kind=BlockKind.PARAGRAPH),
            StyledRun(text="GO DOWN", style=styles.bold(), kind=BlockKind.PARAGRAPH),
            LineBreak(),
            StyledRun(text="Next", style=styles.normal, kind=BlockKind.PARAGRAPH),
            LineBreak(),
            LineBreak(),
        ],
    )


# ---------------------------------------------------------------------------
# Styles
# ---------------------------------------------------------------------------

class TestTextStyle:
    def test_frozen(self):
        style = TextStyle(size=16)
        with pytest.raises(ValidationError):
            style.bold = True

    def test_size_must_be_positive(self):
        with pytest.raises(ValidationError):
            TextStyle(size=0)

    def test_with_trait(self):
        style = TextStyle(size=18, italic=True)
        assert style.with_trait(Trait.BOLD) == TextStyle(size=18, bold=True, italic=True)

    def test_hashable(self):
        assert len({TextStyle(size=16), TextStyle(size=16)}) == 1


class TestStyleTable:
    def test_default_sizes(self):
        styles = StyleTable.default()
        assert styles.title.size == 28
        assert styles.author.size == 22
        assert styles.chapter.size == 20
        assert styles.section.size == 18
        assert styles.normal.size == 16
        assert styles.title.bold and styles.chapter.bold and styles.section.bold
        assert not styles.author.bold and not styles.normal.bold

    def test_for_kind(self):
        styles = StyleTable.default()
        assert styles.for_kind(BlockKind.PARAGRAPH) == styles.normal
        assert styles.for_kind(BlockKind.SECTION) == styles.section
        for kind in (BlockKind.YEAR, BlockKind.SEPARATOR, BlockKind.BLANK):
            assert styles.for_kind(kind) is None

    def test_bold_and_italic_variants_keep_size(self):
        styles = StyleTable.default()
        assert styles.bold(BlockKind.AUTHOR) == TextStyle(size=22, bold=True)
        assert styles.italic() == TextStyle(size=16, italic=True)


# ---------------------------------------------------------------------------
# Events and runs
# ---------------------------------------------------------------------------

class TestBlockEvent:
    def test_equality(self):
        assert BlockEvent(kind=BlockKind.TITLE, text="Foo") == BlockEvent(
            kind=BlockKind.TITLE, text="Foo"
        )

    def test_text_defaults_to_empty(self):
        assert BlockEvent(kind=BlockKind.SEPARATOR).text == ""

    def test_frozen(self):
        event = BlockEvent(kind=BlockKind.BLANK)
        with pytest.raises(ValidationError):
            event.text = "x"

    def test_kind_from_string(self):
        assert BlockEvent(kind="chapter").kind is BlockKind.CHAPTER


class TestRichText:
    def test_runs_and_text(self):
        doc = _sample_document()
        assert [r.text for r in doc.runs] == [
            "Thus Spoke Zarathustra", "Like thee ", "GO DOWN", "Next",
        ]
        assert doc.text == "Thus Spoke Zarathustra\n\nLike thee GO DOWN\nNext\n\n"

    def test_trailing_breaks(self):
        assert _sample_document().trailing_breaks() == 2
        assert RichText().trailing_breaks() == 0

    def test_lines(self):
        lines = _sample_document().lines()
        assert [[r.text for r in line] for line in lines] == [
            ["Thus Spoke Zarathustra"],
            [],
            ["Like thee ", "GO DOWN"],
            ["Next"],
            [],
        ]

    def test_lines_keeps_unterminated_tail(self):
        doc = RichText(items=[StyledRun(text="a", style=TextStyle(size=16))])
        assert [[r.text for r in line] for line in doc.lines()] == [["a"]]

    def test_run_helpers(self):
        run = StyledRun(text="x", style=TextStyle(size=16, italic=True))
        assert run.is_italic and not run.is_bold


# ---------------------------------------------------------------------------
# Serialization
# ---------------------------------------------------------------------------

class TestIRSerialization:
    def test_round_trip_json(self):
        doc = _sample_document()
        restored = RichText.from_json(doc.to_json())
        assert restored == doc

    def test_json_is_valid(self):
        data = json.loads(_sample_document().to_json())
        assert set(data) == {"metadata", "items"}
        assert data["items"][0]["type"] == "run"
        assert data["items"][0]["kind"] == "title"
        assert data["items"][1] == {"type": "break"}

    def test_invalid_item_type_rejected(self):
        with pytest.raises(ValidationError):
            RichText.model_validate({"items": [{"type": "image"}]})
