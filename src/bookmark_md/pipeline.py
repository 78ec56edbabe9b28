"""Pipeline orchestrator: load → parse → (optional IR save) → generate.

Coordinates the conversion of a book file into a Word document and provides
convenience methods for partial workflows (parse-only, generate-from-IR).
"""

from __future__ import annotations

import logging
import time
from pathlib import Path

from pydantic import ValidationError

from bookmark_md.config import Config
from bookmark_md.exceptions import LoadError
from bookmark_md.generators.word_generator import WordGenerator
from bookmark_md.ir.report import ConversionReport
from bookmark_md.ir.schema import BlockEvent, DocumentMetadata, RichText
from bookmark_md.loader import file_hash, load_document
from bookmark_md.parsers.factory import create_parser

logger = logging.getLogger(__name__)


class Pipeline:
    """Orchestrates book file → IR → Word conversion."""

    def __init__(self, config: Config | None = None):
        self.config = config or Config.default()
        self.parser = create_parser(self.config)
        self.last_report: ConversionReport | None = None

    def convert(
        self,
        input_path: Path,
        output_path: Path,
        save_ir: bool = False,
        ir_path: Path | None = None,
        save_report: bool = False,
        report_path: Path | None = None,
    ) -> Path:
        """Full pipeline: book file → IR → .docx.

        Args:
            input_path: Input Markdown book.
            output_path: Output .docx file.
            save_ir: Whether to save the IR as a JSON checkpoint.
            ir_path: Custom path for IR JSON. Defaults to {output_stem}.ir.json.
            save_report: Whether to save a conversion report JSON.
            report_path: Custom path for report JSON. Defaults to {output_stem}.report.json.

        Returns:
            Path to the generated .docx file.
        """
        input_path = Path(input_path)
        output_path = Path(output_path)

        # Stage 1: Load and parse
        t0 = time.monotonic()
        text = load_document(input_path, self.config.loader)
        events = self.parser.classify(text)
        rich = self.parser.assemble(events, self._source_metadata(input_path))
        t1 = time.monotonic()

        # Optional: save IR checkpoint
        if save_ir:
            if ir_path is None:
                ir_path = output_path.with_suffix(".ir.json")
            self.save_ir(rich, ir_path)

        # Stage 2: Generate
        t2 = time.monotonic()
        result = self.generate(rich, output_path)
        t3 = time.monotonic()

        report = ConversionReport.from_parse(events, rich, self.config.style.to_style_table())
        report.parse_time_seconds = t1 - t0
        report.generate_time_seconds = t3 - t2
        report.total_time_seconds = t3 - t0
        self.last_report = report

        if save_report:
            if report_path is None:
                report_path = output_path.with_suffix(".report.json")
            Path(report_path).write_text(report.to_json(), encoding="utf-8")
            logger.info("Saved report to %s", report_path)

        return result

    def parse(self, input_path: Path) -> RichText:
        """Stage 1: Load a book file and parse it to IR."""
        input_path = Path(input_path)
        logger.info("Parsing %s", input_path)

        text = load_document(input_path, self.config.loader)
        return self.parser.parse(text, self._source_metadata(input_path))

    def parse_text(self, text: str) -> RichText:
        """Parse already-loaded document text to IR."""
        return self.parser.parse(text)

    def blocks(self, input_path: Path) -> list[BlockEvent]:
        """Load a book file and return its block events."""
        text = load_document(Path(input_path), self.config.loader)
        return self.parser.classify(text)

    def generate(self, rich: RichText, output_path: Path) -> Path:
        """Stage 2: Generate .docx from IR.

        Args:
            rich: The document IR.
            output_path: Output .docx file path.

        Returns:
            Path to the generated .docx file.
        """
        output_path = Path(output_path)
        logger.info("Generating %s", output_path)

        generator = WordGenerator(self.config)
        return generator.generate(rich, output_path)

    def inspect(self, input_path: Path) -> str:
        """Parse a book file and return IR as formatted JSON string."""
        return self.parse(input_path).to_json()

    def from_ir(self, ir_path: Path, output_path: Path) -> Path:
        """Generate .docx from a saved IR JSON file.

        Args:
            ir_path: Path to the IR JSON file.
            output_path: Output .docx file path.

        Returns:
            Path to the generated .docx file.
        """
        ir_path = Path(ir_path)
        output_path = Path(output_path)

        logger.info("Loading IR from %s", ir_path)
        try:
            json_str = ir_path.read_text(encoding="utf-8")
            rich = RichText.from_json(json_str)
        except FileNotFoundError:
            raise LoadError(f"IR file not found: {ir_path}")
        except (OSError, UnicodeDecodeError, ValidationError) as exc:
            raise LoadError(f"Failed to load IR from {ir_path}: {exc}") from exc

        return self.generate(rich, output_path)

    @staticmethod
    def save_ir(rich: RichText, path: Path) -> Path:
        """Save IR to a JSON file."""
        path = Path(path)
        logger.info("Saving IR to %s", path)
        path.write_text(rich.to_json(), encoding="utf-8")
        return path

    @staticmethod
    def _source_metadata(input_path: Path) -> DocumentMetadata:
        return DocumentMetadata(
            source_file=input_path.name,
            source_hash=file_hash(input_path),
        )
