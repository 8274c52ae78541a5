"""ddlbind generate command - compile the schema into bindings."""

import asyncio
import sys
from pathlib import Path

import click

from ddlbind.cli.utils import generator_options, generator_overrides, load_project
from ddlbind.codegen.ops import generate
from ddlbind.core.errors import DdlBindError
from ddlbind.core.logging import set_run_id
from ddlbind.core.progress import get_console, make_summary_table, pluralize, spinner, status


@click.command()
@generator_options
@click.pass_context
def generate_command(
    ctx: click.Context,
    path: Path | None,
    input_dir: str | None,
    output_dir: str | None,
    naming: str | None,
    strict: bool,
) -> None:
    """Generate typed bindings from the *.sql files of a project.

    PATH is the project root. If not specified, walks up from the current
    directory to the nearest ddlbind.yaml.

    The output directory is deleted and recreated on every run.
    """
    overrides = generator_overrides(
        input_dir=input_dir, output_dir=output_dir, naming=naming, strict=strict
    )
    set_run_id()
    try:
        root, config = load_project(ctx, path, overrides)
        with spinner("Generating bindings"):
            result = asyncio.run(generate(config.generator, root=root))
    except DdlBindError as e:
        status(str(e), style="error")
        sys.exit(1)

    for statement in result.skipped:
        status(f"Skipped unsupported statement: {statement[:60]}", style="warning")

    status(f"Generated {pluralize(len(result.artifacts), 'file')}", style="success")
    get_console().print(
        make_summary_table(
            [
                ("Schema files", str(result.files_read)),
                ("Tables", str(result.tables)),
                ("Enums", str(result.enums)),
                ("Output", str(result.output_dir)),
                ("Time", f"{result.duration_seconds:.2f}s"),
            ]
        )
    )
