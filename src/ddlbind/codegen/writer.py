"""Output directory management.

The output directory is owned by the generator: it is wiped and rebuilt
on every run, so deleting an input file removes its bindings.
"""

from __future__ import annotations

import shutil
from pathlib import Path

from ddlbind.codegen.models import GeneratedArtifact


def reset_directory(path: Path) -> None:
    """Remove *path* recursively if present, then recreate it empty."""
    if path.exists():
        shutil.rmtree(path)
    path.mkdir(parents=True)


def write_artifact(directory: Path, artifact: GeneratedArtifact) -> Path:
    target = directory / artifact.relative_path
    target.write_text(artifact.content, encoding="utf-8", newline="\n")
    return target


def write_artifacts(directory: Path, artifacts: list[GeneratedArtifact]) -> list[Path]:
    """Write every artifact with a full overwrite, in order."""
    return [write_artifact(directory, artifact) for artifact in artifacts]


def read_existing(directory: Path) -> dict[str, bytes]:
    """Current files as raw bytes, keyed by path relative to *directory*.

    Files are not decoded, so binary leftovers are returned as-is.
    """
    if not directory.is_dir():
        return {}
    existing: dict[str, bytes] = {}
    for path in sorted(directory.rglob("*")):
        relative = path.relative_to(directory)
        if path.is_file() and "__pycache__" not in relative.parts:
            existing[relative.as_posix()] = path.read_bytes()
    return existing
