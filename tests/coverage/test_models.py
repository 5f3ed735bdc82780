"""Tests for coverage records and the V8 input schema."""

import pytest
from pydantic import ValidationError

from v8istanbul.coverage.models import BranchRecord, FunctionRecord, LineRecord
from v8istanbul.coverage.v8 import V8Block, V8ProcessCoverage, V8Range


@pytest.fixture
def lines() -> list[LineRecord]:
    return [LineRecord(1, 0, 10), LineRecord(2, 11, 25, count=3)]


class TestLineRecord:
    def test_to_istanbul_uses_line_relative_columns(self) -> None:
        line = LineRecord(line=4, start_col=30, end_col=42)

        assert line.to_istanbul() == {
            "start": {"line": 4, "column": 0},
            "end": {"line": 4, "column": 12},
        }

    def test_count_is_mutable(self) -> None:
        line = LineRecord(1, 0, 5)
        line.count = 7

        assert line.count == 7


class TestBranchRecord:
    def test_to_istanbul(self, lines: list[LineRecord]) -> None:
        branch = BranchRecord(start_line=0, start_col=4, end_line=1, end_col=20, count=2)

        result = branch.to_istanbul(lines)

        assert result["type"] == "branch"
        assert result["line"] == 1
        assert result["loc"] == {
            "start": {"line": 1, "column": 4},
            "end": {"line": 2, "column": 9},
        }
        assert result["locations"] == [result["loc"]]
        assert result["locations"][0] is not result["loc"]

    def test_is_immutable(self) -> None:
        branch = BranchRecord(0, 0, 0, 1, 1)

        with pytest.raises(AttributeError):
            branch.count = 5  # type: ignore[misc]


class TestFunctionRecord:
    def test_to_istanbul(self, lines: list[LineRecord]) -> None:
        fn = FunctionRecord(
            name="handler", start_line=1, start_col=11, end_line=1, end_col=25, count=1
        )

        result = fn.to_istanbul(lines)

        loc = {"start": {"line": 2, "column": 0}, "end": {"line": 2, "column": 14}}
        assert result == {"name": "handler", "decl": loc, "loc": loc, "line": 2}


class TestV8Schema:
    def test_camel_case_fields(self) -> None:
        block = V8Block.model_validate(
            {
                "functionName": "f",
                "isBlockCoverage": True,
                "ranges": [{"startOffset": 0, "endOffset": 9, "count": 1}],
            }
        )

        assert block.function_name == "f"
        assert block.is_block_coverage is True
        assert block.ranges == [V8Range(start_offset=0, end_offset=9, count=1)]

    def test_function_name_optional(self) -> None:
        block = V8Block.model_validate({"isBlockCoverage": False, "ranges": []})

        assert block.function_name is None

    @pytest.mark.parametrize(
        "payload",
        [
            {"ranges": []},
            {"isBlockCoverage": True},
            {"isBlockCoverage": True, "ranges": [{"startOffset": 0, "count": 1}]},
        ],
    )
    def test_missing_fields_rejected(self, payload: dict[str, object]) -> None:
        with pytest.raises(ValidationError):
            V8Block.model_validate(payload)

    def test_no_type_coercion(self) -> None:
        payload = {
            "isBlockCoverage": "no",
            "ranges": [{"startOffset": "0", "endOffset": 9.0, "count": "3"}],
        }

        with pytest.raises(ValidationError) as exc_info:
            V8Block.model_validate(payload)

        assert exc_info.value.error_count() == 4

    def test_process_coverage_ignores_unknown_keys(self) -> None:
        coverage = V8ProcessCoverage.model_validate(
            {
                "result": [{"scriptId": "7", "url": "file:///a.js", "functions": []}],
                "timestamp": 123.4,
                "source-map-cache": {},
            }
        )

        assert coverage.result[0].script_id == "7"
        assert coverage.result[0].url == "file:///a.js"
