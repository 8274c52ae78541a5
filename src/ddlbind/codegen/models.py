"""Codegen models - resolved schema and emitted artifacts."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class FieldKind(Enum):
    """Where a resolved field's type came from."""

    PRIMITIVE = "primitive"
    OVERRIDE = "override"
    ENUM = "enum"


@dataclass(frozen=True, slots=True)
class ResolvedField:
    """A column with its final Python element type."""

    name: str  # SQL column name
    key: str  # generated record key
    final_type: str  # element annotation, before list/optional wrapping
    kind: FieldKind
    required: bool = False
    array_depth: int = 0
    imports: tuple[tuple[str, str], ...] = ()  # stdlib (module, name) pairs

    @property
    def is_array(self) -> bool:
        return self.array_depth > 0


@dataclass(frozen=True, slots=True)
class ResolvedTable:
    name: str
    record_name: str  # "UserDBEntry"
    descriptor_name: str  # "User"
    fields: tuple[ResolvedField, ...] = ()


@dataclass(frozen=True, slots=True)
class ResolvedEnum:
    name: str  # SQL type name
    class_name: str
    values: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class ResolvedFile:
    source: str  # input file name
    module_name: str
    tables: tuple[ResolvedTable, ...] = ()


@dataclass(frozen=True, slots=True)
class ResolvedSchema:
    """Resolver output: everything the emitter needs, in input order."""

    files: tuple[ResolvedFile, ...] = ()
    enums: tuple[ResolvedEnum, ...] = ()

    @property
    def table_count(self) -> int:
        return sum(len(f.tables) for f in self.files)


@dataclass(frozen=True, slots=True)
class GeneratedArtifact:
    """One output file, relative to the output directory."""

    relative_path: str
    content: str


@dataclass
class GenerationResult:
    """Summary of a ``generate`` run."""

    output_dir: Path
    artifacts: list[GeneratedArtifact] = field(default_factory=list)
    files_read: int = 0
    tables: int = 0
    enums: int = 0
    skipped: list[str] = field(default_factory=list)
    duration_seconds: float = 0.0


@dataclass
class CheckResult:
    """Difference between the rendered bindings and the output directory."""

    output_dir: Path
    missing: list[str] = field(default_factory=list)
    stale: list[str] = field(default_factory=list)
    unexpected: list[str] = field(default_factory=list)

    @property
    def up_to_date(self) -> bool:
        return not (self.missing or self.stale or self.unexpected)
