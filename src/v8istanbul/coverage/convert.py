"""NODE_V8_COVERAGE file conversion.

Node.js writes one JSON document per process into the NODE_V8_COVERAGE
directory. Each script entry is converted independently through a
ScriptReport; the per-file Istanbul objects are combined into one mapping.
Scripts that do not correspond to a file on disk (``node:internal/...``,
eval'd code) are skipped.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import structlog
from pydantic import ValidationError

from v8istanbul.core.errors import CoverageError
from v8istanbul.coverage.script import FILE_URL_PREFIX, ScriptReport, parse_path
from v8istanbul.coverage.v8 import V8ProcessCoverage, V8ScriptCoverage

log = structlog.get_logger()


def load_process_coverage(path: Path) -> V8ProcessCoverage:
    """Read and validate a V8 coverage JSON document.

    Raises:
        CoverageError: If the file cannot be read or does not match the schema.
    """
    try:
        with path.open(encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise CoverageError.parse_error(str(path), str(e)) from e

    try:
        return V8ProcessCoverage.model_validate(data)
    except ValidationError as e:
        raise CoverageError.parse_error(str(path), str(e)) from e


def convert_script(script: V8ScriptCoverage, *, wrapper_length: int = 0) -> dict[str, Any]:
    """Convert one script's coverage. Source read errors propagate."""
    report = ScriptReport.from_file(script.url, wrapper_length)
    report.apply_coverage(script.functions)
    return report.to_istanbul()


def _is_convertible(url: str, include_internal: bool) -> bool:
    if url.startswith(FILE_URL_PREFIX):
        return True
    if not include_internal or not url:
        return False
    return Path(parse_path(url)).is_file()


def convert_process_coverage(
    coverage: V8ProcessCoverage,
    *,
    wrapper_length: int = 0,
    include_internal: bool = False,
) -> dict[str, Any]:
    """Convert every file-backed script in a process coverage document.

    Args:
        coverage: Parsed NODE_V8_COVERAGE document.
        wrapper_length: Host preamble length applied to every script.
        include_internal: Also convert non file:// URLs that name an
                          existing file.

    Returns:
        Istanbul coverage map keyed by script path. A script listed twice
        keeps its last entry.
    """
    result: dict[str, Any] = {}
    skipped = 0
    for script in coverage.result:
        if not _is_convertible(script.url, include_internal):
            skipped += 1
            log.debug("convert.script_skipped", url=script.url, script_id=script.script_id)
            continue
        result.update(convert_script(script, wrapper_length=wrapper_length))

    log.debug("convert.done", scripts=len(result), skipped=skipped)
    return result
