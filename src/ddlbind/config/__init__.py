"""Config module exports."""

from ddlbind.config.loader import load_config
from ddlbind.config.models import (
    DdlBindConfig,
    GeneratorConfig,
    LoggingConfig,
    LogOutputConfig,
)

__all__ = [
    "load_config",
    "DdlBindConfig",
    "GeneratorConfig",
    "LoggingConfig",
    "LogOutputConfig",
]
