"""V8 block coverage to Istanbul conversion.

Usage:
    from v8istanbul.coverage import ScriptReport

    report = ScriptReport.from_file("file:///app/index.js")
    report.apply_coverage(script_coverage["functions"])
    istanbul = report.to_istanbul()

Whole NODE_V8_COVERAGE documents go through convert_process_coverage.
"""

from v8istanbul.coverage.convert import (
    convert_process_coverage,
    convert_script,
    load_process_coverage,
)
from v8istanbul.coverage.lines import LineIndex, compute_shebang_length
from v8istanbul.coverage.models import BranchRecord, FunctionRecord, LineRecord
from v8istanbul.coverage.runtime import (
    CJS_WRAPPER_HEADER,
    detect_node_version,
    resolve_wrapper_length,
    wrapper_length_for,
)
from v8istanbul.coverage.script import ScriptReport, parse_path
from v8istanbul.coverage.v8 import V8Block, V8ProcessCoverage, V8Range, V8ScriptCoverage

__all__ = [
    # Records
    "BranchRecord",
    "FunctionRecord",
    "LineRecord",
    # Line index
    "LineIndex",
    "compute_shebang_length",
    # Input schema
    "V8Block",
    "V8ProcessCoverage",
    "V8Range",
    "V8ScriptCoverage",
    # Conversion
    "ScriptReport",
    "parse_path",
    "convert_process_coverage",
    "convert_script",
    "load_process_coverage",
    # Runtime
    "CJS_WRAPPER_HEADER",
    "detect_node_version",
    "resolve_wrapper_length",
    "wrapper_length_for",
]
