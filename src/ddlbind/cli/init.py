"""ddlbind init command - set up a project for code generation."""

import sys
from pathlib import Path

import click

from ddlbind.config import load_config
from ddlbind.config.constants import CONFIG_FILENAME
from ddlbind.config.user_config import write_user_config
from ddlbind.core.errors import DdlBindError
from ddlbind.core.progress import get_console, status
from ddlbind.integrations import add_integrations


def initialize_project(root: Path, *, force: bool = False, assume_yes: bool = False) -> bool:
    """Initialize a project for ddlbind, returning True on success.

    Args:
        root: Project root
        force: Overwrite an existing ddlbind.yaml
        assume_yes: Install built-in override types without asking
    """
    config_path = root / CONFIG_FILENAME
    console = get_console()

    if config_path.exists() and not force:
        status(f"Already initialized: {config_path}", style="info")
        status("Use --force to reinitialize", style="info")
        return False

    console.print()
    status(f"Initializing ddlbind in {root}", style="none")
    console.print()

    write_user_config(config_path)
    status(f"Wrote {config_path.name}", style="success")

    # Read back so env var overrides apply to the directories created below
    generator = load_config(root).generator

    input_dir = root / generator.input_dir
    if not input_dir.exists():
        input_dir.mkdir(parents=True)
        status(f"Created schema directory {generator.input_dir}/", style="success")

    if add_integrations(root / generator.overrides_dir, assume_yes=assume_yes):
        status(f"Installed built-in override types in {generator.overrides_dir}/", style="success")

    console.print()
    status(
        f"Add CREATE TABLE files to {generator.input_dir}/, then run 'ddlbind generate'",
        style="none",
    )
    return True


@click.command()
@click.argument(
    "path",
    default=None,
    required=False,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
)
@click.option("--force", "-f", is_flag=True, help="Overwrite existing ddlbind.yaml")
@click.option("--yes", "-y", "assume_yes", is_flag=True, help="Answer yes to all prompts")
def init_command(path: Path | None, force: bool, assume_yes: bool) -> None:
    """Initialize a project for ddlbind.

    Writes ddlbind.yaml with commented defaults, creates the schema
    directory and offers to install the built-in override types.

    PATH is the project root (default: current directory).
    """
    root = (path or Path.cwd()).resolve()
    try:
        initialize_project(root, force=force, assume_yes=assume_yes)
    except DdlBindError as e:
        status(str(e), style="error")
        sys.exit(1)
