"""Line index over a script's source text.

Maps character offsets to physical lines. Every line owns the span
``[start_col, end_col]`` where ``end_col`` stops before the line terminator;
the terminator itself still advances the running position, so spans are
ordered and never overlap.
"""

from __future__ import annotations

import re
from bisect import bisect_left
from collections.abc import Iterator
from operator import attrgetter

from v8istanbul.coverage.models import LineRecord

# Split after every newline; a \r\n pair stays with its line.
_LINE_SPLIT = re.compile(r"(?<=\n)")
_TERMINATOR = re.compile(r"\r?\n$")
_SHEBANG = re.compile(r"#![^\r\n\u2028\u2029]*")
# Whitespace and line terminators removed by JavaScript String.prototype.trim(),
# including the byte-order mark. Unlike str.strip(), \x1c-\x1f and \x85 are kept.
_JS_WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006"
    "\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)


def compute_shebang_length(source: str) -> int:
    """Length of the ``#!`` line at the very start of ``source``, else 0."""
    if not source.startswith("#!"):
        return 0
    match = _SHEBANG.match(source)
    return len(match.group(0)) if match else 0


class LineIndex:
    """Ordered line records for one script."""

    def __init__(self, lines: list[LineRecord], eof: int) -> None:
        self.lines = lines
        self.eof = eof

    @classmethod
    def build(cls, source: str, shebang_length: int = 0) -> LineIndex:
        """Index ``source`` (trimmed as JavaScript does) into one LineRecord per physical line.

        A non-zero ``shebang_length`` marks line 1 as executed: the runtime
        never instruments the shebang line but always runs past it.
        """
        lines: list[LineRecord] = []
        position = 0
        eof = -1
        for i, line_str in enumerate(_LINE_SPLIT.split(source.strip(_JS_WHITESPACE))):
            terminator = _TERMINATOR.search(line_str)
            newline_length = len(terminator.group(0)) if terminator else 0
            eof = position + len(line_str) - newline_length
            record = LineRecord(line=i + 1, start_col=position, end_col=eof)
            if i == 0 and shebang_length != 0:
                record.count = 1
            lines.append(record)
            position += len(line_str)
        return cls(lines, eof)

    def overlapping(self, start_col: int, end_col: int) -> range:
        """Indices of lines whose span intersects ``[start_col, end_col]``.

        Spans are sorted, so the match is always a contiguous run.
        """
        first = bisect_left(self.lines, start_col, key=attrgetter("end_col"))
        last = first
        while last < len(self.lines) and self.lines[last].start_col <= end_col:
            last += 1
        return range(first, last)

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[LineRecord]:
        return iter(self.lines)

    def __getitem__(self, index: int) -> LineRecord:
        return self.lines[index]
