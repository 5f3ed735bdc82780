"""Config module exports."""

from v8istanbul.config.loader import load_config
from v8istanbul.config.models import (
    ConversionConfig,
    LoggingConfig,
    LogOutputConfig,
    V8IstanbulConfig,
)

__all__ = [
    "load_config",
    "V8IstanbulConfig",
    "ConversionConfig",
    "LoggingConfig",
    "LogOutputConfig",
]
