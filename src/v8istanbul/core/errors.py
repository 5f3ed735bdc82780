"""v8-istanbul error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Coverage
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Coverage (3xxx)
    COVERAGE_INVALID_PATH = 3001
    COVERAGE_INVALID_INPUT = 3002
    COVERAGE_PARSE_ERROR = 3003


@dataclass(frozen=True, slots=True)
class V8IstanbulError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'CONFIG_PARSE_ERROR')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(V8IstanbulError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )


class CoverageError(V8IstanbulError):
    """Errors raised while reading or applying V8 coverage."""

    @classmethod
    def invalid_path(cls, path: Any) -> "CoverageError":
        return cls(
            code=ErrorCode.COVERAGE_INVALID_PATH,
            message=f"Script path must be a string, got {type(path).__name__}",
            details={"path": repr(path)},
        )

    @classmethod
    def invalid_input(cls, path: str, reason: str) -> "CoverageError":
        return cls(
            code=ErrorCode.COVERAGE_INVALID_INPUT,
            message=f"Malformed coverage for {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "CoverageError":
        return cls(
            code=ErrorCode.COVERAGE_PARSE_ERROR,
            message=f"Failed to parse V8 coverage at {path}: {reason}",
            details={"path": path, "reason": reason},
        )
