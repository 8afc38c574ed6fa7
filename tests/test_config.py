"""Tests for configuration models and YAML loading."""

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from stubkit.core.config import (
    Config,
    DoublesConfig,
    LoggingConfig,
    expand_env_vars,
    get_config,
    load_config,
    set_config,
)


class TestModels:
    """Defaults and validation."""

    def test_defaults(self):
        config = Config()

        assert config.logging.level == "WARNING"
        assert config.doubles.create_missing is False
        assert config.doubles.report_unobserved_rejections is True

    def test_level_is_normalized(self):
        assert LoggingConfig(level="debug").level == "DEBUG"

    def test_invalid_level_raises(self):
        with pytest.raises(ValidationError, match="Invalid log level"):
            LoggingConfig(level="LOUD")

    def test_parse_from_dict(self):
        """Test parsing from dict (simulating YAML load)."""
        config = Config(**{"doubles": {"create_missing": True}})

        assert config.doubles.create_missing is True
        assert config.logging.level == "WARNING"


class TestLoadConfig:
    """load_config() from YAML files."""

    def test_load_yaml(self, tmp_path: Path):
        path = tmp_path / "stubkit.yaml"
        path.write_text(
            "logging:\n"
            "  level: info\n"
            "doubles:\n"
            "  create_missing: true\n"
            "  report_unobserved_rejections: false\n"
        )

        config = load_config(path)

        assert config.logging.level == "INFO"
        assert config.doubles.create_missing is True
        assert config.doubles.report_unobserved_rejections is False

    def test_empty_file_gives_defaults(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert load_config(path) == Config()

    def test_env_vars_expanded(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("STUBKIT_TEST_LEVEL", "ERROR")
        path = tmp_path / "stubkit.yaml"
        path.write_text("logging:\n  level: ${STUBKIT_TEST_LEVEL}\n")

        assert load_config(str(path)).logging.level == "ERROR"

    def test_unresolved_env_var_raises(self, tmp_path: Path, monkeypatch):
        monkeypatch.delenv("STUBKIT_MISSING_VAR", raising=False)
        path = tmp_path / "stubkit.yaml"
        path.write_text("logging:\n  level: ${STUBKIT_MISSING_VAR}\n")

        with pytest.raises(ValueError, match="STUBKIT_MISSING_VAR"):
            load_config(path)

    def test_non_mapping_top_level_raises(self, tmp_path: Path):
        path = tmp_path / "stubkit.yaml"
        path.write_text("- just\n- a list\n")

        with pytest.raises(ValueError, match="mapping"):
            load_config(path)

    def test_missing_file_raises(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")


class TestEnvExpansion:
    """expand_env_vars() over nested data."""

    def test_nested_values_expanded(self, monkeypatch):
        monkeypatch.setenv("STUBKIT_TEST_NAME", "svc")

        data = {"a": [{"b": "x-${STUBKIT_TEST_NAME}"}], "n": 3}

        assert expand_env_vars(data) == {"a": [{"b": "x-svc"}], "n": 3}

    def test_every_unset_var_is_reported(self, monkeypatch):
        monkeypatch.delenv("STUBKIT_UNSET_A", raising=False)
        monkeypatch.delenv("STUBKIT_UNSET_B", raising=False)

        with pytest.raises(ValueError, match="test.yaml.*STUBKIT_UNSET_A, STUBKIT_UNSET_B"):
            expand_env_vars(
                {"a": ["${STUBKIT_UNSET_B}"], "b": "${STUBKIT_UNSET_A}"},
                source="test.yaml",
            )

    def test_input_is_not_mutated(self, monkeypatch):
        monkeypatch.setenv("STUBKIT_TEST_NAME", "svc")
        data = {"a": "${STUBKIT_TEST_NAME}"}

        expand_env_vars(data)

        assert data == {"a": "${STUBKIT_TEST_NAME}"}


class TestActiveConfig:
    """get_config() / set_config()."""

    def test_defaults_when_unset(self):
        assert get_config() == Config()

    def test_set_and_get(self):
        config = Config(doubles=DoublesConfig(create_missing=True))

        set_config(config)

        assert get_config() is config

    def test_set_applies_logging_level(self):
        set_config(Config(logging=LoggingConfig(level="DEBUG")))

        assert logging.getLogger("stubkit").level == logging.DEBUG

    def test_reset_to_defaults(self):
        set_config(Config(doubles=DoublesConfig(create_missing=True)))

        set_config(None)

        assert get_config().doubles.create_missing is False
        assert logging.getLogger("stubkit").level == logging.WARNING
