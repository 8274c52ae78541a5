"""CLI utilities."""

from collections.abc import Callable
from pathlib import Path
from typing import Any

import click

from ddlbind.config import DdlBindConfig, load_config
from ddlbind.config.constants import CONFIG_FILENAME
from ddlbind.core.logging import configure_logging


def find_project_root(start_path: Path | None = None) -> Path:
    """Find the ddlbind project root from the given path.

    Walks up the directory tree looking for ddlbind.yaml. Falls back to
    the start path itself so a project without a config file still runs
    with the built-in defaults.

    Args:
        start_path: Starting directory to search from (default: cwd)

    Returns:
        Path to project root
    """
    if start_path is None:
        start_path = Path.cwd()

    start = start_path.resolve()
    current = start

    # Walk up to find ddlbind.yaml
    while current != current.parent:
        if (current / CONFIG_FILENAME).is_file():
            return current
        current = current.parent

    # Check root as well
    if (current / CONFIG_FILENAME).is_file():
        return current

    return start


def generator_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Options shared by commands that compile the schema."""
    options = [
        click.argument(
            "path",
            default=None,
            required=False,
            type=click.Path(exists=True, file_okay=False, path_type=Path),
        ),
        click.option("--input", "input_dir", default=None, help="Directory of *.sql files"),
        click.option("--output", "output_dir", default=None, help="Generated package directory"),
        click.option(
            "--naming",
            type=click.Choice(["camel", "snake"]),
            default=None,
            help="Record key style",
        ),
        click.option("--strict", is_flag=True, help="Fail on unsupported statements"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def generator_overrides(
    *,
    input_dir: str | None,
    output_dir: str | None,
    naming: str | None,
    strict: bool,
) -> dict[str, Any]:
    """CLI flags as a ``generator`` section override; unset flags are omitted."""
    overrides: dict[str, Any] = {
        key: value
        for key, value in (("input_dir", input_dir), ("output_dir", output_dir), ("naming", naming))
        if value is not None
    }
    if strict:
        overrides["strict"] = True
    return overrides


def load_project(
    ctx: click.Context, path: Path | None, overrides: dict[str, Any]
) -> tuple[Path, DdlBindConfig]:
    """Locate the project, load its config and apply its logging section.

    ``-v`` keeps debug logging regardless of the configured level.
    """
    root = find_project_root(path)
    config = load_config(root, generator=overrides) if overrides else load_config(root)
    if not (ctx.obj or {}).get("verbose"):
        configure_logging(config=config.logging)
    return root, config
