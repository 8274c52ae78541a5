"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config() (CLI flags end up here)
2. Environment variables (DDLBIND__SECTION__KEY)
3. Project YAML (ddlbind.yaml next to the schema directory)
4. Built-in defaults (this file)

Environment Variable Format:
    DDLBIND__<SECTION>__<KEY>=<VALUE>

Examples:
    DDLBIND__LOGGING__LEVEL=DEBUG
    DDLBIND__GENERATOR__OUTPUT_DIR=src/schemas/db_entries
    DDLBIND__GENERATOR__STRICT=true
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
NamingStyle = Literal["camel", "snake"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

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
        DDLBIND__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG traces every statement and field.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class GeneratorConfig(BaseModel):
    """Code generation configuration.

    Relative paths are resolved against the project root.

    Env vars:
        DDLBIND__GENERATOR__INPUT_DIR: Directory holding the *.sql schema files
        DDLBIND__GENERATOR__OUTPUT_DIR: Generated package (wiped on every run)
        DDLBIND__GENERATOR__NAMING: Field key style, camel or snake
        DDLBIND__GENERATOR__STRICT: Fail on statements that are not CREATE TABLE/TYPE
    """

    input_dir: str = Field(
        default="tables",
        description="Directory holding the *.sql schema files.",
    )
    output_dir: str = Field(
        default="src/db_entries",
        description="Generated package. RISK: deleted and recreated on every run.",
    )
    custom_types_module: str = Field(
        default="custom_types",
        description="Module name for generated enum classes.",
    )
    overrides_module: str = Field(
        default="..foundations",
        description="Import path (relative to the generated package) of override types "
        "named by /* @use <Type> */ annotations.",
    )
    overrides_dir: str = Field(
        default="src/foundations",
        description="Where 'ddlbind init' installs the built-in override types.",
    )
    naming: NamingStyle = Field(
        default="camel",
        description="Record key style: camel (role_names -> roleNames) or snake.",
    )
    strict: bool = Field(
        default=False,
        description="Treat unsupported statements as errors instead of warnings.",
    )

    @field_validator("custom_types_module")
    @classmethod
    def validate_module(cls, v: str) -> str:
        if not v.isidentifier():
            raise ValueError(f"Module name must be a Python identifier, got {v!r}")
        return v

    @field_validator("overrides_module")
    @classmethod
    def validate_overrides_module(cls, v: str) -> str:
        dotted = v.lstrip(".")
        if not dotted or not all(part.isidentifier() for part in dotted.split(".")):
            raise ValueError(f"Not an importable module path: {v!r}")
        return v


class DdlBindConfig(BaseModel):
    """Root configuration for ddlbind.

    All settings can be configured via:
    1. Environment variables: DDLBIND__SECTION__KEY
    2. ddlbind.yaml in the project root
    3. Direct kwargs to load_config()
    """

    generator: GeneratorConfig = Field(default_factory=GeneratorConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
