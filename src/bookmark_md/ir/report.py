"""Conversion report — diagnostics and statistics from a conversion run."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Optional

from bookmark_md.ir.schema import BlockEvent, BlockKind, RichText, StyleTable

_HEADING_KINDS = (BlockKind.TITLE, BlockKind.AUTHOR, BlockKind.CHAPTER, BlockKind.SECTION)


@dataclass
class ConversionReport:
    """Summary of a book-to-Word conversion run."""

    # Source info
    source_file: str = ""
    title: str = ""

    # Timing
    parse_time_seconds: float = 0.0
    generate_time_seconds: float = 0.0
    total_time_seconds: float = 0.0

    # Block counts: {kind value: count}
    blocks_by_kind: dict[str, int] = field(default_factory=dict)

    # Run counts; bold and italic count inline emphasis
    run_count: int = 0
    bold_run_count: int = 0
    italic_run_count: int = 0
    line_break_count: int = 0

    # Warnings collected during conversion
    warnings: list[str] = field(default_factory=list)

    @property
    def paragraph_count(self) -> int:
        return self.blocks_by_kind.get(BlockKind.PARAGRAPH.value, 0)

    @property
    def chapter_count(self) -> int:
        return self.blocks_by_kind.get(BlockKind.CHAPTER.value, 0)

    @property
    def section_count(self) -> int:
        return self.blocks_by_kind.get(BlockKind.SECTION.value, 0)

    def to_json(self, indent: int = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self._to_dict(), indent=indent)

    def _to_dict(self) -> dict:
        """Convert to a plain dict for JSON serialization."""
        return {
            "source_file": self.source_file,
            "title": self.title,
            "timing": {
                "parse_seconds": round(self.parse_time_seconds, 3),
                "generate_seconds": round(self.generate_time_seconds, 3),
                "total_seconds": round(self.total_time_seconds, 3),
            },
            "block_counts": {
                kind.value: self.blocks_by_kind.get(kind.value, 0) for kind in BlockKind
            },
            "run_counts": {
                "total": self.run_count,
                "bold": self.bold_run_count,
                "italic": self.italic_run_count,
                "line_breaks": self.line_break_count,
            },
            "warnings": self.warnings,
        }

    @classmethod
    def from_parse(
        cls,
        events: list[BlockEvent],
        rich: RichText,
        styles: Optional[StyleTable] = None,
    ) -> ConversionReport:
        """Build a report from the classifier output and the assembled IR.

        Bold and italic counts cover inline emphasis only: a run counts when
        the trait is absent from the base style of its block kind, so the
        text of an already-bold chapter heading is not bold emphasis.
        """
        styles = styles or StyleTable.default()
        report = cls(
            source_file=rich.metadata.source_file,
            title=rich.metadata.title,
        )
        for event in events:
            key = event.kind.value
            report.blocks_by_kind[key] = report.blocks_by_kind.get(key, 0) + 1
            if event.kind in _HEADING_KINDS and not event.text:
                report.warnings.append(f"Empty {key} heading")

        runs = rich.runs
        report.run_count = len(runs)
        bases = [styles.for_kind(run.kind) or styles.normal for run in runs]
        report.bold_run_count = sum(
            1 for run, base in zip(runs, bases) if run.is_bold and not base.bold
        )
        report.italic_run_count = sum(
            1 for run, base in zip(runs, bases) if run.is_italic and not base.italic
        )
        report.line_break_count = len(rich.items) - len(runs)
        return report
