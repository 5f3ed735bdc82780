"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (V8ISTANBUL__SECTION__KEY)
3. Project YAML (.v8istanbul.yaml)
4. Global YAML (~/.config/v8istanbul/config.yaml)
5. Built-in defaults (this file)

Examples:
    V8ISTANBUL__LOGGING__LEVEL=DEBUG
    V8ISTANBUL__CONVERSION__WRAPPER_LENGTH=62
    V8ISTANBUL__CONVERSION__NODE_VERSION=v10.24.1
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration."""

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        V8ISTANBUL__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG logs every skipped script and out-of-range block.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class ConversionConfig(BaseModel):
    """V8 to Istanbul conversion settings.

    Env vars:
        V8ISTANBUL__CONVERSION__WRAPPER_LENGTH: Fixed preamble length to subtract
        V8ISTANBUL__CONVERSION__NODE_VERSION: Node.js version the coverage came from
        V8ISTANBUL__CONVERSION__INCLUDE_INTERNAL: Convert non file:// scripts too
        V8ISTANBUL__CONVERSION__INDENT: JSON indent for CLI output
    """

    wrapper_length: int | None = Field(
        default=None,
        description="Characters injected by the host before each script. "
        "None derives it from node_version (or the installed node).",
    )
    node_version: str | None = Field(
        default=None,
        description="Node.js version that produced the coverage, e.g. 'v10.24.1'. "
        "Only consulted when wrapper_length is unset.",
    )
    include_internal: bool = Field(
        default=False,
        description="Also convert scripts whose URL is not a file:// URL "
        "when the URL resolves to an existing file.",
    )
    indent: int | None = Field(
        default=2,
        description="JSON indent for CLI output. None writes compact JSON.",
    )

    @field_validator("wrapper_length")
    @classmethod
    def validate_wrapper_length(cls, v: int | None) -> int | None:
        if v is not None and v < 0:
            raise ValueError(f"Wrapper length must be >= 0, got {v}")
        return v


class V8IstanbulConfig(BaseModel):
    """Root configuration for v8-istanbul.

    All settings can be configured via:
    1. Environment variables: V8ISTANBUL__SECTION__KEY
    2. YAML config files (project or global)
    3. Direct kwargs to load_config()
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    conversion: ConversionConfig = Field(default_factory=ConversionConfig)
