"""Core module exports."""

from v8istanbul.core.errors import (
    ConfigError,
    CoverageError,
    ErrorCode,
    V8IstanbulError,
)
from v8istanbul.core.logging import (
    configure_logging,
    get_logger,
)

__all__ = [
    # Errors
    "ConfigError",
    "CoverageError",
    "ErrorCode",
    "V8IstanbulError",
    # Logging
    "configure_logging",
    "get_logger",
]
