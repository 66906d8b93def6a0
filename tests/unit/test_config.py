"""Unit tests for config.py"""

import pytest
from pydantic import ValidationError

from policydiff.config import load_config


def test_load_config_defaults(tmp_path, monkeypatch):
    """Settings defaults are used when no config.yaml, env var, or CLI override exists."""
    monkeypatch.chdir(tmp_path)
    settings = load_config()
    assert settings.strategy == "positional"
    assert settings.max_lines == 0
    assert settings.output_dir == "reports"


def test_load_config_reads_config_yaml(tmp_path, monkeypatch):
    """Values in config.yaml are applied."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "config.yaml").write_text("strategy: matcher\nmax_lines: 500\n")
    settings = load_config()
    assert settings.strategy == "matcher"
    assert settings.max_lines == 500


def test_load_config_env_overrides_config_yaml(tmp_path, monkeypatch):
    """POLICYDIFF_MAX_LINES takes precedence over config.yaml and is coerced to int."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "config.yaml").write_text("max_lines: 500\n")
    monkeypatch.setenv("POLICYDIFF_MAX_LINES", "20")
    settings = load_config()
    assert settings.max_lines == 20


def test_load_config_cli_overrides_env(monkeypatch):
    """A non-None CLI override beats the env var."""
    monkeypatch.setenv("POLICYDIFF_OUTPUT_DIR", "env-reports")
    settings = load_config(overrides={"output_dir": "cli-reports"})
    assert settings.output_dir == "cli-reports"


def test_load_config_ignores_none_overrides(monkeypatch):
    """None overrides leave env/default values in place."""
    monkeypatch.setenv("POLICYDIFF_STRATEGY", "matcher")
    settings = load_config(overrides={"strategy": None})
    assert settings.strategy == "matcher"


def test_load_config_invalid_yaml(tmp_path, monkeypatch):
    """load_config raises ValueError when config.yaml contains invalid YAML."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "config.yaml").write_text("key: [unclosed\n")
    with pytest.raises(ValueError, match="Invalid config.yaml"):
        load_config()


def test_load_config_non_mapping_yaml(tmp_path, monkeypatch):
    """A config.yaml that is not a mapping is rejected."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "config.yaml").write_text("- just\n- a list\n")
    with pytest.raises(ValueError, match="expected a mapping"):
        load_config()


@pytest.mark.parametrize("field,value", [
    ("strategy", "lcs"),
    ("max_lines", -1),
    ("log_level", "LOUD"),
])
def test_load_config_rejects_invalid_values(field, value):
    """Out-of-range or unknown values fail validation."""
    with pytest.raises(ValidationError):
        load_config(overrides={field: value})
