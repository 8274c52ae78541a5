"""Type resolution over the merged schema snapshot.

Pure: the snapshot and a naming strategy in, a ``ResolvedSchema`` out.
Nothing here touches the filesystem, so a resolution error leaves any
previously generated output untouched.
"""

from __future__ import annotations

import keyword
from collections.abc import Iterable

from ddlbind.codegen.models import (
    FieldKind,
    ResolvedEnum,
    ResolvedField,
    ResolvedFile,
    ResolvedSchema,
    ResolvedTable,
)
from ddlbind.codegen.naming import NamingStrategy
from ddlbind.core.errors import SchemaError
from ddlbind.parsing.models import Field, SchemaSnapshot, Table


def is_identifier(name: str) -> bool:
    """True if *name* can be used as a Python name."""
    return name.isidentifier() and not keyword.iskeyword(name)


class _Namespace:
    """Tracks generated names and the SQL names they came from."""

    def __init__(self, reserved: Iterable[str] = ()) -> None:
        self._owners: dict[str, str] = {name: name for name in reserved}

    def claim(self, generated: str, origin: str) -> None:
        owner = self._owners.setdefault(generated, origin)
        if owner != origin:
            raise SchemaError.ambiguous_generated_name(generated, [owner, origin])


def resolve_schema(
    snapshot: SchemaSnapshot,
    naming: NamingStrategy,
    *,
    reserved_modules: Iterable[str] = (),
) -> ResolvedSchema:
    """Resolve every column type and generated name in *snapshot*.

    Enums are resolved first so a table in one file can reference an enum
    declared in any other file. Only files declaring tables produce a
    bindings module.

    Args:
        snapshot: Merged extraction result of all input files.
        naming: Strategy deriving class, key and module names.
        reserved_modules: Module names already taken in the output
            directory (the enum module and the index).

    Raises:
        SchemaError: DUPLICATE_DEFINITION, AMBIGUOUS_GENERATED_NAME,
            INVALID_IDENTIFIER or UNRESOLVED_FIELD_TYPE, tagged with the
            input file it was raised for.
    """
    # Everything the index re-exports shares one namespace
    exports = _Namespace()
    enums: list[ResolvedEnum] = []
    declared_enums: set[str] = set()
    for source in snapshot.files:
        try:
            for enum in source.enums:
                if enum.name in declared_enums:
                    raise SchemaError.duplicate_definition("enum type", enum.name)
                declared_enums.add(enum.name)
                enums.append(_resolve_enum(enum.name, enum.values, naming, exports))
        except SchemaError as e:
            raise e.with_source(source.name) from e

    enum_lookup = _EnumLookup(enums)
    modules = _Namespace(reserved_modules)
    declared_tables: set[str] = set()
    files: list[ResolvedFile] = []
    for source in snapshot.files:
        if not source.tables:
            continue
        try:
            module_name = naming.module_name(source.stem)
            if not is_identifier(module_name):
                raise SchemaError.invalid_identifier("module", module_name, source.name)
            modules.claim(module_name, source.name)

            tables: list[ResolvedTable] = []
            for table in source.tables:
                if table.name in declared_tables:
                    raise SchemaError.duplicate_definition("table", table.name)
                declared_tables.add(table.name)
                tables.append(_resolve_table(table, naming, enum_lookup, exports))
        except SchemaError as e:
            raise e.with_source(source.name) from e
        files.append(
            ResolvedFile(source=source.name, module_name=module_name, tables=tuple(tables))
        )

    return ResolvedSchema(files=tuple(files), enums=tuple(enums))


class _EnumLookup:
    """Enum lookup by the type token a column was declared with.

    Exact match first; bare identifiers are lowercased by the table
    extractor, so fall back to a case-insensitive match.
    """

    def __init__(self, enums: list[ResolvedEnum]) -> None:
        self._exact = {e.name: e for e in enums}
        self._folded: dict[str, ResolvedEnum] = {}
        for e in enums:
            self._folded.setdefault(e.name.lower(), e)

    def get(self, base_type: str) -> ResolvedEnum | None:
        return self._exact.get(base_type) or self._folded.get(base_type.lower())


def _resolve_enum(
    name: str, values: tuple[str, ...], naming: NamingStrategy, exports: _Namespace
) -> ResolvedEnum:
    class_name = naming.type_name(name)
    if not is_identifier(class_name):
        raise SchemaError.invalid_identifier("enum class", class_name, name)
    exports.claim(class_name, f"enum {name}")
    for value in values:
        # Members are emitted verbatim; sunder names are reserved by Enum
        if not is_identifier(value) or value.startswith("_"):
            raise SchemaError.invalid_identifier("enum member", value, f"{name}.{value}")
    return ResolvedEnum(name=name, class_name=class_name, values=values)


def _resolve_table(
    table: Table, naming: NamingStrategy, enums: _EnumLookup, exports: _Namespace
) -> ResolvedTable:
    record_name = naming.record_name(table.name)
    descriptor_name = naming.descriptor_name(table.name)
    for kind, generated in (("record", record_name), ("descriptor", descriptor_name)):
        if not is_identifier(generated):
            raise SchemaError.invalid_identifier(kind, generated, table.name)
        exports.claim(generated, f"table {table.name}")

    keys = _Namespace()
    fields: list[ResolvedField] = []
    for column in table.fields:
        key = naming.field_key(column.name)
        keys.claim(key, f"{table.name}.{column.name}")
        fields.append(_resolve_field(table.name, column, key, enums))

    return ResolvedTable(
        name=table.name,
        record_name=record_name,
        descriptor_name=descriptor_name,
        fields=tuple(fields),
    )


def _resolve_field(table: str, column: Field, key: str, enums: _EnumLookup) -> ResolvedField:
    """Override wins, then the primitive mapping, then a declared enum."""
    if column.override_type is not None:
        final_type, kind, imports = column.override_type, FieldKind.OVERRIDE, ()
    elif column.primitive is not None:
        final_type, kind = column.primitive.annotation, FieldKind.PRIMITIVE
        imports = column.primitive.imports
    elif (enum := enums.get(column.base_type)) is not None:
        final_type, kind, imports = enum.class_name, FieldKind.ENUM, ()
    else:
        raise SchemaError.unresolved_field_type(table, column.name, column.raw_type)

    return ResolvedField(
        name=column.name,
        key=key,
        final_type=final_type,
        kind=kind,
        required=column.required,
        array_depth=column.array_depth,
        imports=imports,
    )
