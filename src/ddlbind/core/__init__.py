"""Core module exports."""

from ddlbind.core.errors import (
    ConfigError,
    DdlBindError,
    ErrorCode,
    InternalError,
    SchemaError,
)
from ddlbind.core.logging import (
    clear_run_id,
    configure_logging,
    get_logger,
    get_run_id,
    set_run_id,
)
from ddlbind.core.progress import pluralize, spinner, status

__all__ = [
    # Errors
    "ConfigError",
    "DdlBindError",
    "ErrorCode",
    "InternalError",
    "SchemaError",
    # Logging
    "clear_run_id",
    "configure_logging",
    "get_logger",
    "get_run_id",
    "set_run_id",
    # Progress
    "pluralize",
    "spinner",
    "status",
]
