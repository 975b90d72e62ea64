"""Unit tests for config.py"""

import pytest

from mdterm.config import load_config


def test_load_config_defaults():
    """Settings defaults apply with no mdterm.yaml, env var, or CLI override."""
    settings = load_config()
    assert settings.color is None
    assert settings.log_level == "WARNING"
    assert settings.json_indent == 2


def test_load_config_reads_yaml(tmp_path):
    (tmp_path / "mdterm.yaml").write_text("color: false\njson_indent: 4\n")
    settings = load_config()
    assert settings.color is False
    assert settings.json_indent == 4


def test_load_config_env_overrides_yaml(tmp_path, monkeypatch):
    """MDTERM_COLOR takes precedence over mdterm.yaml."""
    (tmp_path / "mdterm.yaml").write_text("color: false\n")
    monkeypatch.setenv("MDTERM_COLOR", "true")
    assert load_config().color is True


def test_load_config_cli_overrides_env(monkeypatch):
    """A non-None CLI override beats the env var."""
    monkeypatch.setenv("MDTERM_JSON_INDENT", "8")
    settings = load_config(overrides={"json_indent": 0})
    assert settings.json_indent == 0


def test_load_config_none_override_ignored(monkeypatch):
    monkeypatch.setenv("MDTERM_LOG_LEVEL", "debug")
    settings = load_config(overrides={"log_level": None})
    assert settings.log_level == "DEBUG"


def test_load_config_invalid_yaml(tmp_path):
    (tmp_path / "mdterm.yaml").write_text("key: [unclosed\n")
    with pytest.raises(ValueError, match="Invalid mdterm.yaml"):
        load_config()


def test_load_config_yaml_not_mapping(tmp_path):
    (tmp_path / "mdterm.yaml").write_text("- a\n- b\n")
    with pytest.raises(ValueError, match="expected a mapping"):
        load_config()


@pytest.mark.parametrize("field,value", [
    ("log_level", "LOUD"),
    ("json_indent", -1),
    ("color", "sometimes"),
])
def test_load_config_invalid_values(field, value):
    with pytest.raises(ValueError, match="Invalid configuration"):
        load_config(overrides={field: value})
