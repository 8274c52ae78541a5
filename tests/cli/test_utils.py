"""Tests for CLI utilities.

Covers:
- find_project_root() lookup of ddlbind.yaml
- generator_overrides() flag filtering
"""

from __future__ import annotations

from pathlib import Path

from ddlbind.cli.utils import find_project_root, generator_overrides


class TestFindProjectRoot:
    """Tests for find_project_root function."""

    def test_finds_root_from_root(self, tmp_path: Path) -> None:
        (tmp_path / "ddlbind.yaml").write_text("generator: {}\n")

        assert find_project_root(tmp_path) == tmp_path.resolve()

    def test_finds_root_from_subdirectory(self, tmp_path: Path) -> None:
        """Walks up to the nearest ddlbind.yaml."""
        (tmp_path / "ddlbind.yaml").write_text("generator: {}\n")
        nested = tmp_path / "a" / "b" / "c"
        nested.mkdir(parents=True)

        assert find_project_root(nested) == tmp_path.resolve()

    def test_nearest_config_wins(self, tmp_path: Path) -> None:
        (tmp_path / "ddlbind.yaml").write_text("generator: {}\n")
        inner = tmp_path / "inner"
        inner.mkdir()
        (inner / "ddlbind.yaml").write_text("generator: {}\n")

        assert find_project_root(inner) == inner.resolve()

    def test_falls_back_to_start_without_config(self, tmp_path: Path) -> None:
        """A project without ddlbind.yaml runs from where it was started."""
        start = tmp_path / "no-config"
        start.mkdir()

        assert find_project_root(start) == start.resolve()

    def test_directory_named_like_config_is_ignored(self, tmp_path: Path) -> None:
        (tmp_path / "ddlbind.yaml").mkdir()
        start = tmp_path / "sub"
        start.mkdir()

        assert find_project_root(start) == start.resolve()


class TestGeneratorOverrides:
    def test_unset_flags_are_omitted(self) -> None:
        assert generator_overrides(
            input_dir=None, output_dir=None, naming=None, strict=False
        ) == {}

    def test_set_flags_are_included(self) -> None:
        assert generator_overrides(
            input_dir="schema", output_dir="out", naming="snake", strict=True
        ) == {"input_dir": "schema", "output_dir": "out", "naming": "snake", "strict": True}
