"""ddlbind CLI - ddlbind command."""

import click

from ddlbind.cli.check import check_command
from ddlbind.cli.generate import generate_command
from ddlbind.cli.init import init_command
from ddlbind.core.logging import configure_logging


@click.group()
@click.version_option(version="0.1.0", prog_name="ddlbind")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """ddlbind - Typed Python bindings generated from SQL DDL."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    configure_logging(level="DEBUG" if verbose else "INFO")


cli.add_command(init_command, name="init")
cli.add_command(generate_command, name="generate")
cli.add_command(check_command, name="check")


if __name__ == "__main__":
    cli()
