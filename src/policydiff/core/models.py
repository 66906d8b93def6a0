"""Comparison data models: input documents, classified lines, results, and summaries"""

from datetime import datetime
from enum import Enum
from typing import Iterator, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class DiffKind(str, Enum):
    """Classification of a single row in a comparison result"""
    unchanged = "unchanged"
    added = "added"
    removed = "removed"
    modified = "modified"


class Document(BaseModel):
    """A policy document supplied by the document store. Read-only input to a comparison."""
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    content: str
    version: str = ""
    author: str = ""
    status: str = ""
    category: str = ""
    last_modified: Optional[Union[str, datetime]] = None    # text is kept as supplied, not parsed
    created_at: Optional[Union[str, datetime]] = None


class DiffLine(BaseModel):
    """One side of one comparison step."""
    model_config = ConfigDict(frozen=True)

    kind: DiffKind
    content: str = ""
    line_number: Optional[int] = Field(default=None, ge=1)     # None: no corresponding source line

    @property
    def is_placeholder(self) -> bool:
        return self.line_number is None


class DiffResult(BaseModel):
    """Paired left/right rows produced by one comparison.

    left[i] and right[i] always describe the same step, so both lists have the
    same length. Unchanged and modified steps carry a line number on both
    sides; added and removed steps carry one on exactly one side.
    """
    model_config = ConfigDict(frozen=True)

    left: list[DiffLine] = []
    right: list[DiffLine] = []

    @model_validator(mode="after")
    def _check_aligned(self) -> "DiffResult":
        if len(self.left) != len(self.right):
            raise ValueError(f"left and right must have equal length, got {len(self.left)} and {len(self.right)}")
        return self

    def __len__(self) -> int:
        return len(self.left)

    def rows(self) -> Iterator[tuple[DiffLine, DiffLine]]:
        """Yield (left, right) pairs in order."""
        return zip(self.left, self.right)


class ComparisonSummary(BaseModel):
    """Per-kind line counts for a DiffResult. Derived, never stored."""
    model_config = ConfigDict(frozen=True)

    added:     int = Field(default=0, ge=0)
    removed:   int = Field(default=0, ge=0)
    modified:  int = Field(default=0, ge=0)
    unchanged: int = Field(default=0, ge=0)

    @property
    def differences(self) -> int:
        return self.added + self.removed + self.modified

    @property
    def total(self) -> int:
        return self.differences + self.unchanged
