"""CLI command implementations"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from policydiff.config import Settings, load_config
from policydiff.core.diff import compare_documents, filter_differences_only, summarize
from policydiff.core.documents import load_document
from policydiff.core.models import ComparisonSummary, DiffKind, DiffLine, DiffResult, Document
from policydiff.core.report import write_report
from policydiff.errors import PolicyDiffError


MARKERS = {
    DiffKind.unchanged: " ",
    DiffKind.added: "+",
    DiffKind.removed: "-",
    DiffKind.modified: "~",
}


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling, then apply its log level."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    return settings


def _load_pair(left: str, right: str, settings: Settings) -> tuple[Document, Document, DiffResult]:
    """Load both documents and compare them using the configured strategy and size limit."""
    try:
        left_doc, right_doc = load_document(Path(left)), load_document(Path(right))
        result = compare_documents(
            left_doc, right_doc, strategy=settings.strategy, max_lines=settings.max_lines,
        )
    except PolicyDiffError as e:
        _fail("Comparison failed", e)
    return left_doc, right_doc, result


def _format_side(line: DiffLine, width: int = 0) -> str:
    number = "" if line.is_placeholder else str(line.line_number)
    return f"{number.rjust(4)} {line.content.ljust(width)}"


def _format_row(left: DiffLine, right: DiffLine, width: int) -> str:
    """One split-view row: marker, left number + content, right number + content."""
    kind = right.kind if left.is_placeholder else left.kind
    return f"{MARKERS[kind]} {_format_side(left, width)} | {_format_side(right)}".rstrip()


def _echo_summary(summary: ComparisonSummary) -> None:
    typer.echo(
        f"{summary.differences} differences - "
        f"{summary.added} added, "
        f"{summary.removed} removed, "
        f"{summary.modified} modified, "
        f"{summary.unchanged} unchanged"
    )


def compare_cmd(
    left: Annotated[str, typer.Argument(help="Left (original) document")],
    right: Annotated[str, typer.Argument(help="Right (revised) document")],
    differences_only: Annotated[bool, typer.Option("--differences-only", help="Hide unchanged rows")] = False,
    strategy: Annotated[Optional[str], typer.Option("--strategy", help="positional or matcher")] = None,
    max_lines: Annotated[Optional[int], typer.Option("--max-lines", help="Refuse documents above N lines; 0 = unlimited")] = None,
    ):
    """Print a split view of two documents, row by row."""
    settings = _settings(overrides={"strategy": strategy, "max_lines": max_lines})
    _, _, result = _load_pair(left, right, settings)
    summary = summarize(result)

    shown = filter_differences_only(result) if differences_only else result
    width = max((len(line.content) for line in shown.left), default=0)
    for left_line, right_line in shown.rows():
        typer.echo(_format_row(left_line, right_line, width))
    _echo_summary(summary)


def summary_cmd(
    left: Annotated[str, typer.Argument(help="Left (original) document")],
    right: Annotated[str, typer.Argument(help="Right (revised) document")],
    strategy: Annotated[Optional[str], typer.Option("--strategy", help="positional or matcher")] = None,
    ):
    """Print added/removed/modified/unchanged line counts."""
    settings = _settings(overrides={"strategy": strategy})
    _, _, result = _load_pair(left, right, settings)
    _echo_summary(summarize(result))


def report_cmd(
    left: Annotated[str, typer.Argument(help="Left (original) document")],
    right: Annotated[str, typer.Argument(help="Right (revised) document")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    comparison_type: Annotated[Optional[str], typer.Option("--comparison-type", help="Report filename prefix")] = None,
    strategy: Annotated[Optional[str], typer.Option("--strategy", help="positional or matcher")] = None,
    ):
    """Write a plain-text comparison report and JSON sidecar."""
    settings = _settings(overrides={
        "output_dir": out, "comparison_type": comparison_type, "strategy": strategy,
    })
    left_doc, right_doc, result = _load_pair(left, right, settings)
    output_dir = Path(settings.output_dir)

    try:
        report_path, json_path = write_report(
            left_doc, right_doc, output_dir, result,
            comparison_type=settings.comparison_type, footer=settings.report_footer,
        )
    except (OSError, PolicyDiffError) as e:
        _fail("Report export failed", e)
    typer.echo(f"  report -> {report_path}")
    typer.echo(f"  sidecar -> {json_path}")
