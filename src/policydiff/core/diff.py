"""Line-oriented comparison of two texts: align, classify, summarize, filter"""

import difflib
import logging

from policydiff.core.models import ComparisonSummary, DiffKind, DiffLine, DiffResult, Document
from policydiff.core.utils.text import split_lines
from policydiff.errors import ComparisonTooLargeError, InvalidInputError


logger = logging.getLogger("policydiff.core.diff")

STRATEGIES = ("positional", "matcher")


def _check_text(name: str, text) -> None:
    """Raise InvalidInputError unless text is a str."""
    if text is None:
        raise InvalidInputError(f"{name} content is missing")
    if not isinstance(text, str):
        raise InvalidInputError(f"{name} content must be a string, got {type(text).__name__}")


def _placeholder(kind: DiffKind) -> DiffLine:
    return DiffLine(kind=kind, content="", line_number=None)


def _align_positional(left: list[str], right: list[str]) -> tuple[list[DiffLine], list[DiffLine]]:
    """Walk both line lists with independent cursors, classifying index against index.

    Not a minimal edit diff: a line inserted near the top shifts every later
    line out of step, and those rows come out as modified.
    """
    out_left: list[DiffLine] = []
    out_right: list[DiffLine] = []
    i = j = 0

    while i < len(left) or j < len(right):
        if i < len(left) and j < len(right) and left[i] == right[j]:
            out_left.append(DiffLine(kind=DiffKind.unchanged, content=left[i], line_number=i + 1))
            out_right.append(DiffLine(kind=DiffKind.unchanged, content=right[j], line_number=j + 1))
            i += 1
            j += 1
        elif i >= len(left):
            out_left.append(_placeholder(DiffKind.removed))
            out_right.append(DiffLine(kind=DiffKind.added, content=right[j], line_number=j + 1))
            j += 1
        elif j >= len(right):
            out_left.append(DiffLine(kind=DiffKind.removed, content=left[i], line_number=i + 1))
            out_right.append(_placeholder(DiffKind.added))
            i += 1
        else:
            out_left.append(DiffLine(kind=DiffKind.modified, content=left[i], line_number=i + 1))
            out_right.append(DiffLine(kind=DiffKind.modified, content=right[j], line_number=j + 1))
            i += 1
            j += 1

    return out_left, out_right


def _align_matcher(left: list[str], right: list[str]) -> tuple[list[DiffLine], list[DiffLine]]:
    """Align on difflib.SequenceMatcher opcodes so inserted or deleted lines do not shift the rest.

    Replace spans pair lines index by index as modified; the unpaired tail of
    the longer side becomes removed or added rows.
    """
    out_left: list[DiffLine] = []
    out_right: list[DiffLine] = []

    def _removed(i: int) -> None:
        out_left.append(DiffLine(kind=DiffKind.removed, content=left[i], line_number=i + 1))
        out_right.append(_placeholder(DiffKind.added))

    def _added(j: int) -> None:
        out_left.append(_placeholder(DiffKind.removed))
        out_right.append(DiffLine(kind=DiffKind.added, content=right[j], line_number=j + 1))

    matcher = difflib.SequenceMatcher(None, left, right, autojunk=False)
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            for i, j in zip(range(i1, i2), range(j1, j2)):
                out_left.append(DiffLine(kind=DiffKind.unchanged, content=left[i], line_number=i + 1))
                out_right.append(DiffLine(kind=DiffKind.unchanged, content=right[j], line_number=j + 1))
        elif tag == "delete":
            for i in range(i1, i2):
                _removed(i)
        elif tag == "insert":
            for j in range(j1, j2):
                _added(j)
        elif tag == "replace":
            paired = min(i2 - i1, j2 - j1)
            for k in range(paired):
                i, j = i1 + k, j1 + k
                out_left.append(DiffLine(kind=DiffKind.modified, content=left[i], line_number=i + 1))
                out_right.append(DiffLine(kind=DiffKind.modified, content=right[j], line_number=j + 1))
            for i in range(i1 + paired, i2):
                _removed(i)
            for j in range(j1 + paired, j2):
                _added(j)

    return out_left, out_right


def compare(left_text: str, right_text: str, strategy: str = "positional", max_lines: int = 0) -> DiffResult:
    """Compare two texts line by line and return the aligned left/right rows.

    The default "positional" strategy classifies by direct index-to-index
    equality. "matcher" aligns on longest matching blocks instead; its counts
    differ from positional for shifted content, so it is opt-in only.
    max_lines > 0 rejects either side above that many lines.

    Raises InvalidInputError for None/non-string content or an unknown
    strategy, ComparisonTooLargeError when max_lines is exceeded.
    """
    _check_text("left", left_text)
    _check_text("right", right_text)
    if strategy not in STRATEGIES:
        raise InvalidInputError(f"Unknown strategy {strategy!r}; expected one of {', '.join(STRATEGIES)}")

    left, right = split_lines(left_text), split_lines(right_text)
    logger.debug("Comparing %d left lines to %d right lines (%s)", len(left), len(right), strategy)

    if max_lines > 0 and max(len(left), len(right)) > max_lines:
        raise ComparisonTooLargeError(
            f"Comparison exceeds max_lines={max_lines} (left={len(left)}, right={len(right)})"
        )

    align = _align_positional if strategy == "positional" else _align_matcher
    out_left, out_right = align(left, right)
    logger.debug("Produced %d aligned rows", len(out_left))
    return DiffResult(left=out_left, right=out_right)


def compare_documents(left_doc: Document, right_doc: Document, **kwargs) -> DiffResult:
    """Compare the contents of two Documents. kwargs are passed through to compare()."""
    for name, doc in (("left", left_doc), ("right", right_doc)):
        if not isinstance(doc, Document):
            raise InvalidInputError(f"{name} document is missing or not a Document")
    return compare(left_doc.content, right_doc.content, **kwargs)


def summarize(result: DiffResult) -> ComparisonSummary:
    """Count each kind. Removed/modified/unchanged come from the left side, added from the right.

    Placeholder rows carry no content and are not counted.
    """
    counts = {kind: 0 for kind in DiffKind}
    for line in result.left:
        if line.kind != DiffKind.added and not line.is_placeholder:
            counts[line.kind] += 1
    for line in result.right:
        if line.kind == DiffKind.added and not line.is_placeholder:
            counts[DiffKind.added] += 1
    return ComparisonSummary(**{kind.value: n for kind, n in counts.items()})


def filter_differences_only(result: DiffResult) -> DiffResult:
    """Return a new result without unchanged rows, filtering each side on its own kind.

    Unchanged rows are always paired with unchanged rows, so both sides stay
    the same length and stay aligned.
    """
    return DiffResult(
        left=[line for line in result.left if line.kind != DiffKind.unchanged],
        right=[line for line in result.right if line.kind != DiffKind.unchanged],
    )
