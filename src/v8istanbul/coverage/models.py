"""Per-script coverage records.

A script is indexed into one LineRecord per physical line. Block coverage
ranges then produce BranchRecord and FunctionRecord entries, which point at
their first and last line by index into the owning line sequence. Indices
are resolved against that sequence when serializing to Istanbul.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any


@dataclass(slots=True)
class LineRecord:
    """One physical line of a script.

    Columns are offsets into the trimmed source. ``end_col`` excludes the
    line terminator.
    """

    line: int  # 1-based
    start_col: int
    end_col: int
    count: int = 0

    def to_istanbul(self) -> dict[str, Any]:
        return {
            "start": {"line": self.line, "column": 0},
            "end": {"line": self.line, "column": self.end_col - self.start_col},
        }


def _location(
    lines: Sequence[LineRecord],
    start_line: int,
    start_col: int,
    end_line: int,
    end_col: int,
) -> dict[str, Any]:
    first = lines[start_line]
    last = lines[end_line]
    return {
        "start": {"line": first.line, "column": start_col - first.start_col},
        "end": {"line": last.line, "column": end_col - last.start_col},
    }


@dataclass(frozen=True, slots=True)
class BranchRecord:
    """A block-coverage range, reported as a single-armed Istanbul branch."""

    start_line: int  # index into the line sequence
    start_col: int
    end_line: int  # index into the line sequence
    end_col: int
    count: int

    def to_istanbul(self, lines: Sequence[LineRecord]) -> dict[str, Any]:
        loc = _location(lines, self.start_line, self.start_col, self.end_line, self.end_col)
        return {
            "type": "branch",
            "line": lines[self.start_line].line,
            "loc": loc,
            "locations": [dict(loc)],
        }


@dataclass(frozen=True, slots=True)
class FunctionRecord:
    """A function-level coverage range."""

    name: str
    start_line: int  # index into the line sequence
    start_col: int
    end_line: int  # index into the line sequence
    end_col: int
    count: int

    def to_istanbul(self, lines: Sequence[LineRecord]) -> dict[str, Any]:
        loc = _location(lines, self.start_line, self.start_col, self.end_line, self.end_col)
        return {
            "name": self.name,
            "decl": loc,
            "loc": loc,
            "line": lines[self.start_line].line,
        }
