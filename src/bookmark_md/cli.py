"""Click CLI for the book reader.

Commands:
    convert   — Full book → .docx conversion
    inspect   — Parse a book to IR JSON (for debugging)
    blocks    — List the classified blocks of a book
    from-ir   — Generate .docx from a saved IR JSON file
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from bookmark_md.config import Config
from bookmark_md.exceptions import BookmarkError
from bookmark_md.pipeline import Pipeline


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose logging.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to a YAML configuration file.",
)
@click.pass_context
def main(ctx: click.Context, verbose: bool, config_path: Path | None) -> None:
    """Markdown book reader: render '# Title:' style books as Word documents."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = Config.load(config_path)
        if verbose:
            config.verbose = True
        pipeline = Pipeline(config)
    except BookmarkError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(1)

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["pipeline"] = pipeline


@main.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.argument("output_docx", type=click.Path(path_type=Path), required=False)
@click.option("--save-ir", is_flag=True, help="Save IR JSON checkpoint alongside output.")
@click.option(
    "--ir-path",
    type=click.Path(path_type=Path),
    default=None,
    help="Custom path for the IR JSON file.",
)
@click.option("--report", is_flag=True, help="Save conversion report JSON alongside output.")
@click.option(
    "--report-path",
    type=click.Path(path_type=Path),
    default=None,
    help="Custom path for the report JSON file.",
)
@click.pass_context
def convert(
    ctx: click.Context,
    input_file: Path,
    output_docx: Path | None,
    save_ir: bool,
    ir_path: Path | None,
    report: bool,
    report_path: Path | None,
) -> None:
    """Convert a Markdown book to a Word document."""
    pipeline: Pipeline = ctx.obj["pipeline"]

    if output_docx is None:
        output_docx = input_file.with_suffix(".docx")

    try:
        result = pipeline.convert(
            input_file,
            output_docx,
            save_ir=save_ir,
            ir_path=ir_path,
            save_report=report,
            report_path=report_path,
        )
        click.echo(f"Generated: {result}")

        if report and pipeline.last_report:
            rpt = pipeline.last_report
            click.echo(
                f"Report: {rpt.chapter_count} chapters, "
                f"{rpt.section_count} sections, {rpt.paragraph_count} paragraphs, "
                f"{len(rpt.warnings)} warnings"
            )
    except BookmarkError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(1)


@main.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.pass_context
def inspect(ctx: click.Context, input_file: Path) -> None:
    """Parse a book and output its IR as JSON (for debugging)."""
    pipeline: Pipeline = ctx.obj["pipeline"]

    try:
        json_str = pipeline.inspect(input_file)
        click.echo(json_str)
    except BookmarkError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(1)


@main.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.pass_context
def blocks(ctx: click.Context, input_file: Path) -> None:
    """List the classified blocks of a book, one per line."""
    pipeline: Pipeline = ctx.obj["pipeline"]

    try:
        for event in pipeline.blocks(input_file):
            click.echo(f"{event.kind.value}\t{event.text}")
    except BookmarkError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(1)


@main.command("from-ir")
@click.argument("ir_json", type=click.Path(exists=True, path_type=Path))
@click.argument("output_docx", type=click.Path(path_type=Path))
@click.pass_context
def from_ir(ctx: click.Context, ir_json: Path, output_docx: Path) -> None:
    """Generate a Word document from a saved IR JSON file."""
    pipeline: Pipeline = ctx.obj["pipeline"]

    try:
        result = pipeline.from_ir(ir_json, output_docx)
        click.echo(f"Generated: {result}")
    except BookmarkError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(1)
