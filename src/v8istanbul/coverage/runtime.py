"""Host runtime wrapper length.

Node.js 10 compiled CommonJS modules wrapped in a function header, so every
offset V8 reported was shifted by the header's length. Node.js 11+ compiles
the module source as-is.
"""

from __future__ import annotations

import re
import shutil
import subprocess
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from v8istanbul.config.models import ConversionConfig

log = structlog.get_logger()

CJS_WRAPPER_HEADER = "(function (exports, require, module, __filename, __dirname) { "

_WRAPPED_VERSION = re.compile(r"^v?10\.")


def wrapper_length_for(node_version: str | None) -> int:
    """Wrapper length injected by the given Node.js version (0 if none)."""
    if node_version and _WRAPPED_VERSION.match(node_version.strip()):
        return len(CJS_WRAPPER_HEADER)
    return 0


def detect_node_version() -> str | None:
    """Version of the ``node`` on PATH, e.g. "v20.10.0", or None."""
    node_exe = shutil.which("node")
    if not node_exe:
        return None
    try:
        result = subprocess.run(
            [node_exe, "--version"],
            capture_output=True,
            timeout=5,
            text=True,
        )
    except (OSError, subprocess.SubprocessError):
        log.debug("runtime.node_version_failed", node=node_exe, exc_info=True)
        return None
    if result.returncode != 0:
        return None
    return result.stdout.strip() or None


def resolve_wrapper_length(config: ConversionConfig) -> int:
    """Explicit wrapper_length, else derived from the (detected) Node.js version."""
    if config.wrapper_length is not None:
        return config.wrapper_length
    node_version = config.node_version or detect_node_version()
    wrapper_length = wrapper_length_for(node_version)
    log.debug("runtime.wrapper_length", node_version=node_version, wrapper_length=wrapper_length)
    return wrapper_length
