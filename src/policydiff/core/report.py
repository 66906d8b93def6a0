"""Comparison report export: plain-text report, filename, sidecar JSON, and writing output files"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from policydiff.core.diff import compare_documents, summarize
from policydiff.core.models import ComparisonSummary, DiffResult, Document
from policydiff.core.utils.slug import slugify
from policydiff.errors import InvalidInputError


logger = logging.getLogger("policydiff.core.report")

DEFAULT_FOOTER = "Generated by policydiff"


def _check_documents(left_doc: Document, right_doc: Document) -> None:
    for name, doc in (("left", left_doc), ("right", right_doc)):
        if not isinstance(doc, Document):
            raise InvalidInputError(f"{name} document is missing or not a Document")


def _resolve(left_doc: Document, right_doc: Document, result: Optional[DiffResult]) -> DiffResult:
    """Validate inputs and return result, computing it from the documents when omitted."""
    _check_documents(left_doc, right_doc)
    if result is None:
        return compare_documents(left_doc, right_doc)
    if not isinstance(result, DiffResult):
        raise InvalidInputError(f"result must be a DiffResult, got {type(result).__name__}")
    return result


def _timestamp(value) -> str:
    """Render a store timestamp; datetimes as ISO 8601, text as supplied."""
    if isinstance(value, datetime):
        return value.isoformat()
    return value or "n/a"


def _details(doc: Document) -> list[str]:
    return [
        f"### {doc.title}",
        f"- Version: {doc.version or 'n/a'}",
        f"- Author: {doc.author or 'n/a'}",
        f"- Last Modified: {_timestamp(doc.last_modified)}",
        f"- Status: {doc.status or 'n/a'}",
        f"- Category: {doc.category or 'n/a'}",
    ]


def _summary_lines(summary: ComparisonSummary) -> list[str]:
    return [
        f"- Added Lines: {summary.added}",
        f"- Removed Lines: {summary.removed}",
        f"- Modified Lines: {summary.modified}",
        f"- Unchanged Lines: {summary.unchanged}",
    ]


def build_report(
    left_doc: Document,
    right_doc: Document,
    result: Optional[DiffResult] = None,
    generated_at: Optional[datetime] = None,
    footer: str = DEFAULT_FOOTER,
    ) -> str:
    """Render the comparison report as a single string.

    Fixed order: documents compared, per-document details, changes summary,
    then both documents' full content verbatim (raw content, not an inline
    diff), then the footer. Raises InvalidInputError on missing or mistyped
    inputs; never returns a partial report.
    """
    result = _resolve(left_doc, right_doc, result)
    summary = summarize(result)
    generated_at = generated_at or datetime.now()

    parts = [
        "# Policy Comparison Report",
        "",
        "## Documents Compared",
        f"- Left Document: {left_doc.title} (v{left_doc.version})",
        f"- Right Document: {right_doc.title} (v{right_doc.version})",
        f"- Comparison Date: {generated_at.strftime('%Y-%m-%d')}",
        "",
        "## Document Details",
        "",
        *_details(left_doc),
        "",
        *_details(right_doc),
        "",
        "## Changes Summary",
        *_summary_lines(summary),
        "",
        "## Detailed Comparison",
        "",
        "### Left Document Content",
        left_doc.content,
        "",
        "### Right Document Content",
        right_doc.content,
        "",
        "---",
        f"*{footer}*",
    ]
    return "\n".join(parts) + "\n"


def report_filename(
    left_doc: Document,
    right_doc: Document,
    comparison_type: str = "policy-comparison",
    timestamp: Optional[datetime] = None,
    ) -> str:
    """Return '<comparison-type>-<leftTitle>-vs-<rightTitle>-<epoch ms>.txt' with slugified titles."""
    _check_documents(left_doc, right_doc)
    timestamp = timestamp or datetime.now()
    millis = int(timestamp.timestamp() * 1000)
    left = slugify(left_doc.title, fallback="untitled")
    right = slugify(right_doc.title, fallback="untitled")
    return f"{slugify(comparison_type, fallback='comparison')}-{left}-vs-{right}-{millis}.txt"


def build_sidecar(left_doc: Document, right_doc: Document, result: Optional[DiffResult] = None) -> dict:
    """Build a JSON-friendly dict with document metadata, summary counts, and the aligned rows.

    Each row holds the left and right DiffLine as plain dicts; line_number is
    null for placeholders.
    """
    result = _resolve(left_doc, right_doc, result)
    summary = summarize(result)
    return {
        "left": left_doc.model_dump(mode="json", exclude={"content"}),
        "right": right_doc.model_dump(mode="json", exclude={"content"}),
        "summary": {**summary.model_dump(), "differences": summary.differences},
        "rows": [
            {"left": left.model_dump(mode="json"), "right": right.model_dump(mode="json")}
            for left, right in result.rows()
        ],
    }


def write_report(
    left_doc: Document,
    right_doc: Document,
    output_dir: Path,
    result: Optional[DiffResult] = None,
    comparison_type: str = "policy-comparison",
    footer: str = DEFAULT_FOOTER,
    generated_at: Optional[datetime] = None,
    ) -> tuple[Path, Path]:
    """Write the text report and its .json sidecar into output_dir.

    Both files share a stem; output_dir is created if needed.
    Returns (report_path, json_path).
    """
    result = _resolve(left_doc, right_doc, result)
    generated_at = generated_at or datetime.now()
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    report_path = output_dir / report_filename(left_doc, right_doc, comparison_type, generated_at)
    json_path = report_path.with_suffix(".json")

    report_path.write_text(
        build_report(left_doc, right_doc, result, generated_at=generated_at, footer=footer),
        encoding="utf-8",
    )
    json_path.write_text(
        json.dumps(build_sidecar(left_doc, right_doc, result), indent=2, ensure_ascii=False),
        encoding="utf-8",
    )
    logger.info("Wrote comparison report %s and sidecar %s", report_path, json_path)
    return report_path, json_path
