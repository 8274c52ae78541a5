"""ddlbind check command - verify generated bindings are current."""

import asyncio
import sys
from pathlib import Path

import click

from ddlbind.cli.utils import generator_options, generator_overrides, load_project
from ddlbind.codegen.ops import check
from ddlbind.core.errors import DdlBindError
from ddlbind.core.logging import set_run_id
from ddlbind.core.progress import status


@click.command()
@generator_options
@click.pass_context
def check_command(
    ctx: click.Context,
    path: Path | None,
    input_dir: str | None,
    output_dir: str | None,
    naming: str | None,
    strict: bool,
) -> None:
    """Check that generated bindings match the schema, without writing.

    Exits with status 1 when any generated file is missing, stale or
    unexpected. Intended for CI.
    """
    overrides = generator_overrides(
        input_dir=input_dir, output_dir=output_dir, naming=naming, strict=strict
    )
    set_run_id()
    try:
        root, config = load_project(ctx, path, overrides)
        result = asyncio.run(check(config.generator, root=root))
    except DdlBindError as e:
        status(str(e), style="error")
        sys.exit(1)

    if result.up_to_date:
        status(f"Bindings in {result.output_dir} are up to date", style="success")
        return

    for label, paths in (
        ("missing", result.missing),
        ("stale", result.stale),
        ("unexpected", result.unexpected),
    ):
        for relative_path in paths:
            status(f"{relative_path} ({label})", style="warning", indent=2)
    status("Bindings are out of date, run 'ddlbind generate'", style="error")
    sys.exit(1)
