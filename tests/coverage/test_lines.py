"""Tests for the line index and shebang detection."""

import pytest

from v8istanbul.coverage.lines import LineIndex, compute_shebang_length


def _spans(index: LineIndex) -> list[tuple[int, int, int]]:
    return [(line.line, line.start_col, line.end_col) for line in index]


class TestComputeShebangLength:
    """Tests for compute_shebang_length."""

    def test_no_shebang(self) -> None:
        assert compute_shebang_length("console.log(1)\n") == 0

    def test_empty_source(self) -> None:
        assert compute_shebang_length("") == 0

    def test_shebang_line(self) -> None:
        assert compute_shebang_length("#!/usr/bin/env node\nconsole.log(1)\n") == 19

    def test_crlf_terminator_not_counted(self) -> None:
        assert compute_shebang_length("#!/bin/sh\r\necho") == 9

    def test_shebang_only(self) -> None:
        assert compute_shebang_length("#!/usr/bin/env node") == 19

    def test_must_be_at_start(self) -> None:
        assert compute_shebang_length(" #!/usr/bin/env node\n") == 0
        assert compute_shebang_length("x\n#!/usr/bin/env node\n") == 0


class TestLineIndexBuild:
    """Tests for LineIndex.build."""

    def test_single_line(self) -> None:
        index = LineIndex.build("const x = 1")

        assert _spans(index) == [(1, 0, 11)]
        assert index.eof == 11

    def test_terminators_excluded_from_end_col(self) -> None:
        index = LineIndex.build("a\nbc\r\nd")

        assert _spans(index) == [(1, 0, 1), (2, 2, 4), (3, 6, 7)]
        assert index.eof == 7

    def test_source_is_trimmed(self) -> None:
        index = LineIndex.build("a\nb\n\n")

        assert _spans(index) == [(1, 0, 1), (2, 2, 3)]
        assert index.eof == 3

    def test_byte_order_mark_trimmed(self) -> None:
        index = LineIndex.build("\ufefflet a = 1\nlet b = 2\n")

        assert _spans(index) == [(1, 0, 9), (2, 10, 19)]

    def test_trims_like_javascript(self) -> None:
        index = LineIndex.build("\u00a0\u3000a\x85\u2028")

        assert _spans(index) == [(1, 0, 2)]
        assert index.eof == 2

    def test_blank_lines_kept(self) -> None:
        index = LineIndex.build("a\n\nb")

        assert _spans(index) == [(1, 0, 1), (2, 2, 2), (3, 3, 4)]

    def test_empty_source_has_one_empty_line(self) -> None:
        index = LineIndex.build("")

        assert _spans(index) == [(1, 0, 0)]
        assert index.eof == 0

    def test_counts_start_at_zero(self) -> None:
        index = LineIndex.build("a\nb")

        assert [line.count for line in index] == [0, 0]

    def test_shebang_marks_first_line_executed(self) -> None:
        source = "#!/usr/bin/env node\nconsole.log(1)\n"
        index = LineIndex.build(source, compute_shebang_length(source))

        assert [line.count for line in index] == [1, 0]

    @pytest.mark.parametrize(
        "source",
        [
            "a",
            "function f () {\n  return 1\n}\n",
            "x\r\n\r\ny\r\nzz\n",
            "\n\n  lead\n\ttabbed\n\n",
            "#!/usr/bin/env node\n'use strict'\n",
        ],
    )
    def test_spans_partition_source(self, source: str) -> None:
        trimmed = source.strip()
        index = LineIndex.build(source)

        assert index[0].start_col == 0
        assert index[len(index) - 1].end_col == index.eof
        for prev, nxt in zip(index.lines, index.lines[1:], strict=False):
            assert prev.start_col <= prev.end_col
            assert nxt.line == prev.line + 1
            # Only the terminator separates consecutive lines.
            assert trimmed[prev.end_col : nxt.start_col] in ("\n", "\r\n")
        assert len(index) == trimmed.count("\n") + 1


class TestLineIndexOverlapping:
    """Tests for LineIndex.overlapping."""

    @pytest.fixture
    def index(self) -> LineIndex:
        # [0, 3], [4, 7], [8, 11]
        return LineIndex.build("abc\ndef\nghi")

    def test_within_one_line(self, index: LineIndex) -> None:
        assert list(index.overlapping(1, 2)) == [0]

    def test_touching_boundaries(self, index: LineIndex) -> None:
        assert list(index.overlapping(3, 4)) == [0, 1]

    def test_whole_file(self, index: LineIndex) -> None:
        assert list(index.overlapping(0, 11)) == [0, 1, 2]

    def test_past_end(self, index: LineIndex) -> None:
        assert list(index.overlapping(12, 20)) == []

    def test_before_start(self, index: LineIndex) -> None:
        assert list(index.overlapping(0, -1)) == []

    def test_matches_linear_filter(self, index: LineIndex) -> None:
        for start in range(-2, 14):
            for end in range(-2, 14):
                expected = [
                    i
                    for i, line in enumerate(index)
                    if start <= line.end_col and end >= line.start_col
                ]
                assert list(index.overlapping(start, end)) == expected
