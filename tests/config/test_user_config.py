"""Tests for the starter ddlbind.yaml writer."""

from pathlib import Path

import yaml

from ddlbind.config.loader import load_config
from ddlbind.config.models import GeneratorConfig
from ddlbind.config.user_config import write_user_config


class TestWriteUserConfig:
    def test_given_defaults_when_written_then_loads_back_as_defaults(
        self, tmp_path: Path
    ) -> None:
        # Given
        path = tmp_path / "ddlbind.yaml"

        # When
        write_user_config(path)

        # Then
        assert load_config(tmp_path).generator == GeneratorConfig()

    def test_given_defaults_when_written_then_optional_keys_commented(
        self, tmp_path: Path
    ) -> None:
        path = tmp_path / "ddlbind.yaml"

        write_user_config(path)

        data = yaml.safe_load(path.read_text())
        assert data == {"generator": {"input_dir": "tables", "output_dir": "src/db_entries"}}
        assert "# naming: camel" in path.read_text()

    def test_given_custom_values_when_written_then_active(self, tmp_path: Path) -> None:
        path = tmp_path / "ddlbind.yaml"

        write_user_config(path, GeneratorConfig(naming="snake", strict=True, input_dir="ddl"))

        data = yaml.safe_load(path.read_text())
        assert data["generator"]["naming"] == "snake"
        assert data["generator"]["strict"] is True
        assert data["generator"]["input_dir"] == "ddl"
