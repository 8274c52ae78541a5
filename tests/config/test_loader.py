"""Tests for config/loader.py module.

Covers:
- _load_yaml() function
- _YamlSource settings source
- load_config() precedence: defaults < yaml < env < kwargs
"""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from ddlbind.config.loader import _load_yaml, load_config
from ddlbind.core.errors import ConfigError, ErrorCode


class TestLoadYaml:
    """Tests for _load_yaml function."""

    def test_returns_empty_dict_for_missing_file(self, tmp_path: Path) -> None:
        """Returns empty dict when file doesn't exist."""
        result = _load_yaml(tmp_path / "nonexistent.yaml")
        assert result == {}

    def test_loads_valid_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "ddlbind.yaml"
        yaml_file.write_text("generator:\n  naming: snake\n")

        result = _load_yaml(yaml_file)
        assert result == {"generator": {"naming": "snake"}}

    def test_returns_empty_for_empty_file(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "empty.yaml"
        yaml_file.write_text("")

        assert _load_yaml(yaml_file) == {}

    def test_raises_config_error_for_invalid_yaml(self, tmp_path: Path) -> None:
        """Raises ConfigError for invalid YAML syntax."""
        yaml_file = tmp_path / "invalid.yaml"
        yaml_file.write_text("generator:\n  naming:\n    - invalid: [unclosed")

        with pytest.raises(ConfigError) as exc_info:
            _load_yaml(yaml_file)
        assert exc_info.value.code == ErrorCode.CONFIG_PARSE_ERROR

    def test_raises_config_error_for_non_mapping(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "list.yaml"
        yaml_file.write_text("- a\n- b\n")

        with pytest.raises(ConfigError):
            _load_yaml(yaml_file)


class TestLoadConfig:
    """Tests for load_config precedence."""

    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Keep DDLBIND__ variables from the outer environment out of the tests."""
        for key in [k for k in os.environ if k.upper().startswith("DDLBIND__")]:
            monkeypatch.delenv(key)

    def test_defaults_without_config_file(self, tmp_path: Path) -> None:
        config = load_config(tmp_path)

        assert config.generator.input_dir == "tables"
        assert config.generator.output_dir == "src/db_entries"
        assert config.generator.naming == "camel"
        assert config.generator.strict is False
        assert config.logging.level == "INFO"

    def test_yaml_overrides_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "ddlbind.yaml").write_text(
            "generator:\n  input_dir: ddl\n  strict: true\nlogging:\n  level: DEBUG\n"
        )

        config = load_config(tmp_path)

        assert config.generator.input_dir == "ddl"
        assert config.generator.strict is True
        assert config.generator.output_dir == "src/db_entries"
        assert config.logging.level == "DEBUG"

    def test_env_overrides_yaml(self, tmp_path: Path) -> None:
        (tmp_path / "ddlbind.yaml").write_text("generator:\n  naming: camel\n")

        with patch.dict(os.environ, {"DDLBIND__GENERATOR__NAMING": "snake"}):
            config = load_config(tmp_path)

        assert config.generator.naming == "snake"

    def test_kwargs_override_env(self, tmp_path: Path) -> None:
        with patch.dict(os.environ, {"DDLBIND__GENERATOR__OUTPUT_DIR": "from_env"}):
            config = load_config(tmp_path, generator={"output_dir": "from_kwargs"})

        assert config.generator.output_dir == "from_kwargs"

    def test_kwargs_merge_with_yaml_section(self, tmp_path: Path) -> None:
        """A partial kwargs section keeps the other yaml values."""
        (tmp_path / "ddlbind.yaml").write_text("generator:\n  input_dir: ddl\n")

        config = load_config(tmp_path, generator={"naming": "snake"})

        assert config.generator.input_dir == "ddl"
        assert config.generator.naming == "snake"

    def test_commented_out_section_is_ignored(self, tmp_path: Path) -> None:
        (tmp_path / "ddlbind.yaml").write_text("generator:\n  input_dir: ddl\nlogging:\n")

        config = load_config(tmp_path)

        assert config.logging.level == "INFO"

    def test_invalid_value_raises_config_error(self, tmp_path: Path) -> None:
        (tmp_path / "ddlbind.yaml").write_text("generator:\n  naming: kebab\n")

        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path)

        assert exc_info.value.code == ErrorCode.CONFIG_INVALID_VALUE
        assert "naming" in exc_info.value.details["field"]

    def test_defaults_to_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "ddlbind.yaml").write_text("generator:\n  output_dir: out\n")
        monkeypatch.chdir(tmp_path)

        assert load_config().generator.output_dir == "out"
