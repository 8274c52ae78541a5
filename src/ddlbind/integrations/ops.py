"""Built-in override types installation.

The generator itself never calls this; ``ddlbind init`` does, and only the
boolean result matters to it.
"""

from __future__ import annotations

from pathlib import Path

import questionary

from ddlbind.core.logging import get_logger
from ddlbind.templates import get_foundations_template

log = get_logger("integrations")

PROMPT = "Would you like to add built-in override types?"


def add_integrations(directory: Path, *, assume_yes: bool = False) -> bool:
    """Install the built-in foundations package into *directory*.

    Skipped without prompting when *directory* already exists, so re-running
    init never clobbers hand-edited override types.

    Args:
        directory: Target package directory (e.g. ``src/foundations``).
        assume_yes: Install without asking.

    Returns:
        True if the package was installed.
    """
    if directory.exists():
        log.debug("integrations_skipped", directory=str(directory), reason="exists")
        return False

    if not assume_yes:
        answer = questionary.confirm(PROMPT, default=True).ask()
        if not answer:
            log.debug("integrations_declined", directory=str(directory))
            return False

    install_foundations(directory)
    return True


def install_foundations(directory: Path) -> Path:
    directory.mkdir(parents=True)
    target = directory / "__init__.py"
    target.write_text(get_foundations_template(), encoding="utf-8")
    log.info("integrations_installed", path=str(target))
    return target
