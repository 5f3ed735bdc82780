"""Per-script conversion from V8 block coverage to Istanbul.

A ScriptReport indexes one source file into lines, applies batches of V8
coverage ranges to it, and serializes the result as an Istanbul file
coverage object:

{
  "<path>": {
    "path": "<path>",
    "statementMap": {"0": {"start": {"line": 1, "column": 0}, "end": ...}, ...},
    "s": {"0": 1, ...},
    "branchMap": {"0": {"type": "branch", "line": 1, "loc": ..., "locations": [...]}, ...},
    "b": {"0": [1], ...},
    "fnMap": {"0": {"name": "f", "decl": ..., "loc": ..., "line": 1}, ...},
    "f": {"0": 1, ...}
  }
}

Every line is reported as a statement. Each block-coverage range becomes a
single-armed branch.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

import structlog
from pydantic import ValidationError

from v8istanbul.core.errors import CoverageError
from v8istanbul.coverage.lines import LineIndex, compute_shebang_length
from v8istanbul.coverage.models import BranchRecord, FunctionRecord
from v8istanbul.coverage.v8 import V8Block

log = structlog.get_logger()

FILE_URL_PREFIX = "file://"


def parse_path(script_path: str) -> str:
    """Strip the ``file://`` scheme from a script URL."""
    return script_path.replace(FILE_URL_PREFIX, "", 1)


class ScriptReport:
    """Coverage state for a single script.

    Args:
        script_path: Script path or ``file://`` URL; used as the report key.
        source: Full source text of the script.
        wrapper_length: Characters the host prepended to the source before
            compiling it. Subtracted from every incoming offset.
    """

    def __init__(self, script_path: str, source: str, wrapper_length: int = 0) -> None:
        if not isinstance(script_path, str):
            raise CoverageError.invalid_path(script_path)
        self.path = parse_path(script_path)
        self.source = source
        shebang_length = compute_shebang_length(source)
        self.wrapper_length = wrapper_length - shebang_length
        self.lines = LineIndex.build(source, shebang_length)
        self.branches: list[BranchRecord] = []
        self.functions: list[FunctionRecord] = []
        log.debug(
            "script.indexed",
            path=self.path,
            lines=len(self.lines),
            eof=self.lines.eof,
            shebang_length=shebang_length,
        )

    @classmethod
    def from_file(cls, script_path: str | Path, wrapper_length: int = 0) -> ScriptReport:
        """Read the script from disk. I/O errors propagate to the caller."""
        path = parse_path(str(script_path))
        source = Path(path).read_text(encoding="utf-8")
        return cls(path, source, wrapper_length)

    @property
    def eof(self) -> int:
        return self.lines.eof

    def apply_coverage(self, blocks: Iterable[V8Block | Mapping[str, Any]]) -> None:
        """Record branches, functions and line hits for a batch of blocks.

        Line counts are only overwritten by ranges that span the whole line,
        so the untaken arm of ``a ? b : c`` does not zero out its line. When
        several ranges span a line, the last one applied wins.

        Raises:
            CoverageError: If any block is malformed. Nothing is recorded.
        """
        parsed = self._parse_blocks(blocks)

        for block in parsed:
            for i, rng in enumerate(block.ranges):
                start_col = max(0, rng.start_offset - self.wrapper_length)
                end_col = min(self.lines.eof, rng.end_offset - self.wrapper_length)
                covered = self.lines.overlapping(start_col, end_col)
                if not covered:
                    log.debug(
                        "coverage.range_outside_script",
                        path=self.path,
                        start_offset=rng.start_offset,
                        end_offset=rng.end_offset,
                    )
                    continue

                first, last = covered[0], covered[-1]
                if block.is_block_coverage:
                    self.branches.append(
                        BranchRecord(first, start_col, last, end_col, rng.count)
                    )
                    # Block-level coverage still yields one function entry,
                    # taken from the outermost range.
                    if block.function_name and i == 0:
                        self.functions.append(
                            FunctionRecord(
                                block.function_name, first, start_col, last, end_col, rng.count
                            )
                        )
                elif block.function_name:
                    self.functions.append(
                        FunctionRecord(
                            block.function_name, first, start_col, last, end_col, rng.count
                        )
                    )

                for index in covered:
                    line = self.lines[index]
                    if start_col <= line.start_col and end_col >= line.end_col:
                        line.count = rng.count

    def _parse_blocks(self, blocks: Iterable[V8Block | Mapping[str, Any]]) -> list[V8Block]:
        parsed: list[V8Block] = []
        for block in blocks:
            if isinstance(block, V8Block):
                parsed.append(block)
                continue
            try:
                parsed.append(V8Block.model_validate(block))
            except ValidationError as e:
                raise CoverageError.invalid_input(self.path, str(e)) from e
        return parsed

    def to_istanbul(self) -> dict[str, Any]:
        """Serialize current state. Does not mutate anything."""
        inner: dict[str, Any] = {
            "path": self.path,
            **self._statements_to_istanbul(),
            **self._branches_to_istanbul(),
            **self._functions_to_istanbul(),
        }
        return {self.path: inner}

    def _statements_to_istanbul(self) -> dict[str, Any]:
        statement_map: dict[str, Any] = {}
        s: dict[str, int] = {}
        for index, line in enumerate(self.lines):
            statement_map[str(index)] = line.to_istanbul()
            s[str(index)] = line.count
        return {"statementMap": statement_map, "s": s}

    def _branches_to_istanbul(self) -> dict[str, Any]:
        branch_map: dict[str, Any] = {}
        b: dict[str, list[int]] = {}
        for index, branch in enumerate(self.branches):
            branch_map[str(index)] = branch.to_istanbul(self.lines.lines)
            b[str(index)] = [branch.count]
        return {"branchMap": branch_map, "b": b}

    def _functions_to_istanbul(self) -> dict[str, Any]:
        fn_map: dict[str, Any] = {}
        f: dict[str, int] = {}
        for index, fn in enumerate(self.functions):
            fn_map[str(index)] = fn.to_istanbul(self.lines.lines)
            f[str(index)] = fn.count
        return {"fnMap": fn_map, "f": f}
