"""Shared fixtures for CLI tests."""

from pathlib import Path

import pytest

SCHEMA = """\
CREATE TYPE role AS ENUM ('admin', 'member');

CREATE TABLE users (
  id varchar(21) NOT NULL,
  role role NOT NULL,
  display_name text
);
"""


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep DDLBIND__ env vars of the host out of CLI runs."""
    import os

    for key in list(os.environ):
        if key.startswith("DDLBIND__"):
            monkeypatch.delenv(key)


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Project root with one schema file and default layout."""
    root = tmp_path / "project"
    (root / "tables").mkdir(parents=True)
    (root / "tables" / "users.sql").write_text(SCHEMA)
    return root
