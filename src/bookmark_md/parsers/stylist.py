"""Inline emphasis: block text → styled runs.

Three markers are recognised in one left-to-right alternation, tried in this
order at every position:

    **content**   bold, lazy non-empty content (may contain underscores)
    __content__   bold, lazy non-empty content
    _content_     italic, content without underscores

Matches never nest or overlap. Delimiters are dropped from the output. A bare
``****`` or ``____`` is consumed without producing a run, but only where no
non-empty bold starts at the same position, so ``****x**`` is bold ``**x``.
Anything that does not form a pair stays literal text.
"""

from __future__ import annotations

import re

from bookmark_md.ir.schema import BlockKind, StyledRun, TextStyle, Trait

_INLINE_RE = re.compile(
    r"\*\*(?P<star>.+?)\*\*"
    r"|\*\*\*\*"
    r"|__(?P<under>.+?)__"
    r"|____"
    r"|_(?P<italic>[^_]+)_"
)


def derive_style(base: TextStyle, trait: Trait) -> TextStyle:
    """Return base with one trait added, as a new value."""
    return base.with_trait(trait)


def stylize(
    text: str,
    base_style: TextStyle,
    kind: BlockKind | None = None,
) -> list[StyledRun]:
    """Split text into literal and emphasised runs.

    Args:
        text: The block text to scan.
        base_style: Style for literal text; emphasis is derived from it.
        kind: Optional block kind recorded on every run.

    Returns:
        Runs in text order. Empty text yields no runs.
    """
    runs: list[StyledRun] = []
    cursor = 0

    for match in _INLINE_RE.finditer(text):
        if match.start() > cursor:
            runs.append(StyledRun(text=text[cursor:match.start()], style=base_style, kind=kind))

        if match.group("italic") is not None:
            content, trait = match.group("italic"), Trait.ITALIC
        else:
            # None for a bare empty pair
            content, trait = match.group("star") or match.group("under"), Trait.BOLD

        if content:
            runs.append(StyledRun(text=content, style=derive_style(base_style, trait), kind=kind))
        cursor = match.end()

    if cursor < len(text):
        runs.append(StyledRun(text=text[cursor:], style=base_style, kind=kind))
    return runs
