"""Tests for block classification — markers, precedence, paragraph reflow."""

import pytest

from bookmark_md.ir.schema import BlockEvent, BlockKind
from bookmark_md.parsers.classifier import classify, classify_line, split_lines


def _kinds(events):
    return [e.kind for e in events]


class TestSplitLines:
    def test_keeps_empty_lines(self):
        assert split_lines("a\n\nb") == ["a", "", "b"]

    def test_trailing_newline_gives_empty_line(self):
        assert split_lines("a\n") == ["a", ""]

    def test_crlf_is_one_boundary(self):
        assert split_lines("a\r\nb\rc") == ["a", "b", "c"]


class TestClassifyLine:
    @pytest.mark.parametrize("line,kind,text", [
        ("# Title: Thus Spoke Zarathustra", BlockKind.TITLE, "Thus Spoke Zarathustra"),
        ("## Author: Friedrich Nietzsche", BlockKind.AUTHOR, "Friedrich Nietzsche"),
        ("## Year: 1883", BlockKind.YEAR, "1883"),
        ("## FIRST PART.", BlockKind.CHAPTER, "FIRST PART."),
        ("-------", BlockKind.SEPARATOR, ""),
        ("*1*", BlockKind.SECTION, "*1*"),
        ("*23*", BlockKind.SECTION, "*23*"),
        ("", BlockKind.BLANK, ""),
        ("   \t ", BlockKind.BLANK, ""),
    ])
    def test_markers(self, line, kind, text):
        assert classify_line(line) == BlockEvent(kind=kind, text=text)

    def test_surrounding_whitespace_is_trimmed(self):
        assert classify_line("   ## Chapter One  ") == BlockEvent(
            kind=BlockKind.CHAPTER, text="Chapter One"
        )
        assert classify_line("  -------  ").kind is BlockKind.SEPARATOR

    def test_author_wins_over_chapter(self):
        assert classify_line("## Author: X").kind is BlockKind.AUTHOR

    def test_bare_chapter_marker_has_empty_payload(self):
        assert classify_line("## ") == BlockEvent(kind=BlockKind.CHAPTER, text="")

    @pytest.mark.parametrize("line,kind", [
        ("## Author: ", BlockKind.AUTHOR),
        ("## Year: ", BlockKind.YEAR),
        ("# Title: ", BlockKind.TITLE),
    ])
    def test_bare_front_matter_prefix_keeps_its_kind(self, line, kind):
        assert classify_line(line) == BlockEvent(kind=kind, text="")

    @pytest.mark.parametrize("line", [
        "Just prose.",
        "--------",
        "------",
        "*1* and more",
        "**1**",
        "*a*",
        "#Title: no space",
        "##NoSpace",
    ])
    def test_prose_lines(self, line):
        assert classify_line(line) is None


class TestClassify:
    def test_empty_document(self):
        assert classify("") == []

    def test_front_matter(self):
        events = classify(
            "# Title: Foo\n## Author: Bar\n## Year: 1999\n-------\nHello world."
        )
        assert events == [
            BlockEvent(kind=BlockKind.TITLE, text="Foo"),
            BlockEvent(kind=BlockKind.AUTHOR, text="Bar"),
            BlockEvent(kind=BlockKind.YEAR, text="1999"),
            BlockEvent(kind=BlockKind.SEPARATOR),
            BlockEvent(kind=BlockKind.PARAGRAPH, text="Hello world."),
        ]

    def test_soft_wrapped_lines_join_into_one_paragraph(self):
        events = classify("Line one.\nLine two.")
        assert events == [BlockEvent(kind=BlockKind.PARAGRAPH, text="Line one. Line two.")]

    def test_paragraph_lines_are_trimmed_before_joining(self):
        events = classify("  Line one.  \n\tLine two.")
        assert events[0].text == "Line one. Line two."

    def test_blank_line_splits_paragraphs(self):
        events = classify("First.\n\nSecond.")
        assert _kinds(events) == [BlockKind.PARAGRAPH, BlockKind.BLANK, BlockKind.PARAGRAPH]
        assert events[0].text == "First."
        assert events[2].text == "Second."

    def test_marker_flushes_paragraph_first(self):
        events = classify("Some prose\n*2*\nMore prose")
        assert events == [
            BlockEvent(kind=BlockKind.PARAGRAPH, text="Some prose"),
            BlockEvent(kind=BlockKind.SECTION, text="*2*"),
            BlockEvent(kind=BlockKind.PARAGRAPH, text="More prose"),
        ]

    def test_every_blank_line_is_an_event(self):
        events = classify("\n\n")
        assert _kinds(events) == [BlockKind.BLANK] * 3

    def test_inline_markup_is_left_for_the_stylist(self):
        events = classify("_Translated By Thomas Common_")
        assert events == [
            BlockEvent(kind=BlockKind.PARAGRAPH, text="_Translated By Thomas Common_")
        ]

    def test_sample_book(self):
        book = (
            "# Title: Thus Spoke Zarathustra\n"
            "## Author: Friedrich Nietzsche\n"
            "## Year: 1883\n"
            "-------\n"
            "_Translated By Thomas Common_\n"
            "\n"
            "## FIRST PART. ZARATHUSTRA'S DISCOURSES.\n"
            "\n"
            "*1*\n"
            "When Zarathustra was thirty years old,\n"
            "he left his home.\n"
        )
        assert _kinds(classify(book)) == [
            BlockKind.TITLE,
            BlockKind.AUTHOR,
            BlockKind.YEAR,
            BlockKind.SEPARATOR,
            BlockKind.PARAGRAPH,
            BlockKind.BLANK,
            BlockKind.CHAPTER,
            BlockKind.BLANK,
            BlockKind.SECTION,
            BlockKind.PARAGRAPH,
            BlockKind.BLANK,
        ]
        assert classify(book)[9].text == "When Zarathustra was thirty years old, he left his home."
