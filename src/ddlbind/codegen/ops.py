"""Generation operations - generate and check.

Pipeline::

    discover *.sql -> parse (fan out) -> snapshot -> resolve -> render
                   -> reset output dir -> write bindings (fan out)
                   -> write enum module and index

Everything up to rendering happens in memory. The output directory is
only reset once the whole schema has resolved, so a bad input file never
destroys the previous good output.
"""

from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass
from pathlib import Path

from ddlbind.codegen.models import CheckResult, GeneratedArtifact, GenerationResult, ResolvedSchema
from ddlbind.codegen.naming import get_naming
from ddlbind.codegen.render import render_artifacts
from ddlbind.codegen.resolver import resolve_schema
from ddlbind.codegen.writer import read_existing, reset_directory, write_artifact
from ddlbind.config.constants import INDEX_MODULE, SCHEMA_SUFFIX
from ddlbind.config.models import GeneratorConfig
from ddlbind.core.errors import SchemaError
from ddlbind.core.logging import get_logger
from ddlbind.parsing.models import SchemaSnapshot, SourceFile
from ddlbind.parsing.ops import parse_source

log = get_logger("codegen")


@dataclass(frozen=True, slots=True)
class _Compiled:
    snapshot: SchemaSnapshot
    resolved: ResolvedSchema
    artifacts: list[GeneratedArtifact]


def discover_sources(input_dir: Path) -> list[Path]:
    """Schema files in *input_dir*, sorted by file name.

    Raises:
        SchemaError: INPUT_NOT_FOUND if the directory does not exist.
    """
    if not input_dir.is_dir():
        raise SchemaError.input_not_found(str(input_dir))
    return sorted(
        (p for p in input_dir.iterdir() if p.is_file() and p.suffix == SCHEMA_SUFFIX),
        key=lambda p: p.name,
    )


def _read_source(path: Path, strict: bool) -> SourceFile:
    return parse_source(path.name, path.read_text(encoding="utf-8"), strict=strict)


async def _compile(config: GeneratorConfig, root: Path) -> _Compiled:
    sources = discover_sources(root / config.input_dir)
    log.debug("sources_discovered", count=len(sources))

    parsed = await asyncio.gather(
        *(asyncio.to_thread(_read_source, path, config.strict) for path in sources)
    )
    # gather preserves argument order, so the snapshot keeps sorted input order
    snapshot = SchemaSnapshot(files=tuple(parsed))

    resolved = resolve_schema(
        snapshot,
        get_naming(config.naming),
        reserved_modules=(config.custom_types_module, INDEX_MODULE),
    )
    log.debug(
        "schema_resolved",
        files=len(resolved.files),
        tables=resolved.table_count,
        enums=len(resolved.enums),
    )
    return _Compiled(snapshot, resolved, render_artifacts(resolved, config))


async def generate(config: GeneratorConfig, *, root: Path | None = None) -> GenerationResult:
    """Compile every schema file and rebuild the output directory.

    Args:
        config: Generator settings; relative paths resolve against *root*.
        root: Project root (default: current directory).

    Raises:
        SchemaError: On any parsing or resolution failure. The output
            directory is left untouched in that case.
    """
    start_time = time.time()
    root = root or Path.cwd()
    compiled = await _compile(config, root)
    output_dir = root / config.output_dir

    reset_directory(output_dir)
    module_count = len(compiled.resolved.files)
    bindings = compiled.artifacts[:module_count]
    trailing = compiled.artifacts[module_count:]
    await asyncio.gather(*(asyncio.to_thread(write_artifact, output_dir, a) for a in bindings))
    # Enum module and index reference the bindings, so they go last
    for artifact in trailing:
        write_artifact(output_dir, artifact)

    skipped = [stmt for source in compiled.snapshot.files for stmt in source.skipped]
    result = GenerationResult(
        output_dir=output_dir,
        artifacts=compiled.artifacts,
        files_read=len(compiled.snapshot.files),
        tables=compiled.resolved.table_count,
        enums=len(compiled.resolved.enums),
        skipped=skipped,
        duration_seconds=time.time() - start_time,
    )
    log.info(
        "generation_complete",
        output_dir=str(output_dir),
        artifacts=len(result.artifacts),
        tables=result.tables,
        enums=result.enums,
        skipped=len(skipped),
    )
    return result


async def check(config: GeneratorConfig, *, root: Path | None = None) -> CheckResult:
    """Compare freshly rendered bindings with the output directory. Never writes."""
    root = root or Path.cwd()
    compiled = await _compile(config, root)
    output_dir = root / config.output_dir
    existing = await asyncio.to_thread(read_existing, output_dir)

    result = CheckResult(output_dir=output_dir)
    expected = {a.relative_path: a.content.encode("utf-8") for a in compiled.artifacts}
    for relative_path, content in expected.items():
        if relative_path not in existing:
            result.missing.append(relative_path)
        elif existing[relative_path] != content:
            result.stale.append(relative_path)
    result.unexpected.extend(sorted(set(existing) - set(expected)))

    log.info(
        "check_complete",
        up_to_date=result.up_to_date,
        missing=len(result.missing),
        stale=len(result.stale),
        unexpected=len(result.unexpected),
    )
    return result
