"""Code generation: type resolution, emission and output management."""

from ddlbind.codegen.models import (
    CheckResult,
    FieldKind,
    GeneratedArtifact,
    GenerationResult,
    ResolvedEnum,
    ResolvedField,
    ResolvedFile,
    ResolvedSchema,
    ResolvedTable,
)
from ddlbind.codegen.naming import CamelCaseNaming, NamingStrategy, SnakeCaseNaming, get_naming
from ddlbind.codegen.ops import check, discover_sources, generate
from ddlbind.codegen.render import render_artifacts
from ddlbind.codegen.resolver import resolve_schema
from ddlbind.codegen.writer import reset_directory, write_artifacts

__all__ = [
    "CamelCaseNaming",
    "CheckResult",
    "FieldKind",
    "GeneratedArtifact",
    "GenerationResult",
    "NamingStrategy",
    "ResolvedEnum",
    "ResolvedField",
    "ResolvedFile",
    "ResolvedSchema",
    "ResolvedTable",
    "SnakeCaseNaming",
    "check",
    "discover_sources",
    "generate",
    "get_naming",
    "render_artifacts",
    "reset_directory",
    "resolve_schema",
    "write_artifacts",
]
