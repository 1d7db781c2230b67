"""Unit tests for config.py"""

import pytest

from mdslack.config import load_config


@pytest.fixture(autouse=True)
def chdir_tmp(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)


def test_load_config_defaults(monkeypatch):
    """Settings defaults apply when no config.yaml, env var, or CLI override exists."""
    monkeypatch.delenv("MDSLACK_MAX_BLOCKS", raising=False)
    settings = load_config()
    assert settings.max_blocks == 50
    assert settings.max_input_length == 100_000
    assert settings.parser_config == "gfm-like"


def test_load_config_reads_config_yaml(tmp_path):
    (tmp_path / "config.yaml").write_text("max_blocks: 10\noutput_dir: out\n")
    settings = load_config()
    assert settings.max_blocks == 10
    assert settings.output_dir == "out"


def test_load_config_env_overrides_config_yaml(tmp_path, monkeypatch):
    """MDSLACK_MAX_BLOCKS takes precedence over config.yaml."""
    (tmp_path / "config.yaml").write_text("max_blocks: 10\n")
    monkeypatch.setenv("MDSLACK_MAX_BLOCKS", "20")
    assert load_config().max_blocks == 20


def test_load_config_cli_overrides_env(monkeypatch):
    """A non-None CLI override beats the env var."""
    monkeypatch.setenv("MDSLACK_MAX_BLOCKS", "20")
    settings = load_config(overrides={"max_blocks": 5, "parser_config": None})
    assert settings.max_blocks == 5
    assert settings.parser_config == "gfm-like"


def test_load_config_env_checkbox(monkeypatch):
    monkeypatch.setenv("MDSLACK_CHECKBOX_CHECKED", "[x] ")
    options = load_config().parsing_options()
    assert options.lists.checkbox_prefix(True) == "[x] "
    assert options.lists.checkbox_prefix(False) == "☐ "


def test_load_config_recursion_depth_flows_to_options(monkeypatch):
    monkeypatch.setenv("MDSLACK_MAX_RECURSION_DEPTH", "7")
    assert load_config().parsing_options().max_recursion_depth == 7


def test_load_config_invalid_yaml(tmp_path):
    """load_config raises ValueError when config.yaml contains invalid YAML."""
    (tmp_path / "config.yaml").write_text("key: [unclosed\n")
    with pytest.raises(ValueError, match="Invalid config.yaml"):
        load_config()


def test_load_config_non_mapping_yaml(tmp_path):
    (tmp_path / "config.yaml").write_text("- a\n- b\n")
    with pytest.raises(ValueError, match="expected a mapping"):
        load_config()


def test_load_config_rejects_bad_limit():
    """Pydantic validation errors surface as ValueError."""
    with pytest.raises(ValueError):
        load_config(overrides={"max_blocks": 0})
