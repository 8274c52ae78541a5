"""Template files for ddlbind init."""

from pathlib import Path

FOUNDATIONS_TEMPLATE = "foundations_module.py"


def get_foundations_template() -> str:
    """Return the built-in override types module source for installation."""
    return (Path(__file__).parent / FOUNDATIONS_TEMPLATE).read_text(encoding="utf-8")


__all__ = ["FOUNDATIONS_TEMPLATE", "get_foundations_template"]
