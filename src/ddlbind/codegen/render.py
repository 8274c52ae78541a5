"""Python source emission for a resolved schema.

Rendering is deterministic: the same ``ResolvedSchema`` always yields the
same artifacts, byte for byte, in the same order.
"""

from __future__ import annotations

from collections.abc import Iterable

from ddlbind.codegen.models import (
    FieldKind,
    GeneratedArtifact,
    ResolvedEnum,
    ResolvedField,
    ResolvedFile,
    ResolvedSchema,
    ResolvedTable,
)
from ddlbind.codegen.resolver import is_identifier
from ddlbind.config.constants import GENERATED_HEADER, INDEX_MODULE, RUNTIME_IMPORT
from ddlbind.config.models import GeneratorConfig

_INDENT = "    "


def render_artifacts(
    resolved: ResolvedSchema, config: GeneratorConfig | None = None
) -> list[GeneratedArtifact]:
    """Render every output file: bindings modules, then the enum module, then the index."""
    config = config or GeneratorConfig()
    artifacts = [
        GeneratedArtifact(
            relative_path=f"{f.module_name}.py",
            content=render_bindings(f, config),
        )
        for f in resolved.files
    ]
    if resolved.enums:
        artifacts.append(
            GeneratedArtifact(
                relative_path=f"{config.custom_types_module}.py",
                content=render_enums(resolved.enums),
            )
        )
    artifacts.append(
        GeneratedArtifact(
            relative_path=f"{INDEX_MODULE}.py",
            content=render_index(resolved, config),
        )
    )
    return artifacts


def render_enums(enums: tuple[ResolvedEnum, ...]) -> str:
    blocks = []
    for enum in enums:
        lines = [f"class {enum.class_name}(StrEnum):"]
        lines.extend(f"{_INDENT}{value} = {value!r}" for value in enum.values)
        if not enum.values:
            lines.append(f"{_INDENT}pass")
        blocks.append("\n".join(lines))
    blocks.append(_render_all(e.class_name for e in enums))
    return _module(["from enum import StrEnum"], blocks)


def render_bindings(resolved_file: ResolvedFile, config: GeneratorConfig) -> str:
    blocks: list[str] = []
    exported: list[str] = []
    for table in resolved_file.tables:
        blocks.append(render_record(table))
        blocks.append(render_descriptor(table))
        exported.extend((table.record_name, table.descriptor_name))
    blocks.append(_render_all(exported))
    return _module(_import_groups(resolved_file, config), blocks)


def render_index(resolved: ResolvedSchema, config: GeneratorConfig) -> str:
    lines = []
    if resolved.enums:
        lines.append(f"from .{config.custom_types_module} import *")
    lines.extend(f"from .{f.module_name} import *" for f in resolved.files)
    if not lines:
        return GENERATED_HEADER
    return GENERATED_HEADER + "\n".join(lines) + "\n"


def render_annotation(field: ResolvedField) -> str:
    """Annotation for one record key: ``list`` per dimension, optional wrapped."""
    annotation = field.final_type
    for _ in range(field.array_depth):
        annotation = f"list[{annotation}]"
    if not field.required:
        annotation = f"NotRequired[{annotation} | None]"
    return annotation


def render_record(table: ResolvedTable) -> str:
    name = table.record_name
    if all(is_identifier(f.key) for f in table.fields):
        lines = [f"class {name}(TypedDict):"]
        lines.extend(f"{_INDENT}{f.key}: {render_annotation(f)}" for f in table.fields)
        if not table.fields:
            lines.append(f"{_INDENT}pass")
        return "\n".join(lines)

    # Keys that are not identifiers need the functional form
    lines = [f"{name} = TypedDict("]
    lines.append(f"{_INDENT}{name!r},")
    lines.append(f"{_INDENT}{{")
    lines.extend(f"{_INDENT * 2}{f.key!r}: {render_annotation(f)}," for f in table.fields)
    lines.append(f"{_INDENT}}},")
    lines.append(")")
    return "\n".join(lines)


def render_descriptor(table: ResolvedTable) -> str:
    lines = [f"{table.descriptor_name} = TableSchema("]
    lines.append(f"{_INDENT}table={table.name!r},")
    lines.append(f"{_INDENT}fields={{")
    lines.extend(f"{_INDENT * 2}{f.key!r}: {f.name!r}," for f in table.fields)
    lines.append(f"{_INDENT}}},")
    lines.append(f"{_INDENT}field_keys=(")
    lines.extend(f"{_INDENT * 2}{f.key!r}," for f in table.fields)
    lines.append(f"{_INDENT}),")
    lines.append(")")
    return "\n".join(lines)


def _import_groups(resolved_file: ResolvedFile, config: GeneratorConfig) -> list[str]:
    """Import lines, grouped stdlib / runtime / overrides / enums."""
    fields = [f for t in resolved_file.tables for f in t.fields]

    stdlib: dict[str, list[str]] = {}
    for f in fields:
        for module, name in f.imports:
            _add_unique(stdlib.setdefault(module, []), name)
    typing_names = stdlib.pop("typing", [])
    if any(not f.required for f in fields):
        _add_unique(typing_names, "NotRequired")
    _add_unique(typing_names, "TypedDict")
    stdlib["typing"] = typing_names

    overrides: list[str] = []
    enums: list[str] = []
    for f in fields:
        if f.kind is FieldKind.OVERRIDE:
            _add_unique(overrides, f.final_type)
        elif f.kind is FieldKind.ENUM:
            _add_unique(enums, f.final_type)

    groups = ["\n".join(_from_import(module, names) for module, names in stdlib.items())]
    groups.append(RUNTIME_IMPORT)
    if overrides:
        groups.append(_from_import(config.overrides_module, overrides))
    if enums:
        groups.append(_from_import(f".{config.custom_types_module}", enums))
    return groups


def _add_unique(names: list[str], name: str) -> None:
    if name not in names:
        names.append(name)


def _from_import(module: str, names: list[str]) -> str:
    return f"from {module} import {', '.join(names)}"


def _render_all(names: Iterable[str]) -> str:
    lines = ["__all__ = ["]
    lines.extend(f"{_INDENT}{name!r}," for name in names)
    lines.append("]")
    return "\n".join(lines)


def _module(import_groups: list[str], blocks: list[str]) -> str:
    return (
        GENERATED_HEADER
        + "\n\n".join(import_groups)
        + "\n\n\n"
        + "\n\n\n".join(blocks)
        + "\n"
    )
