"""
tests/test_config.py — YAML configuration loading.
"""

import pytest

from charcodec.config import DEFAULT_CONFIG, ConfigError, load_config


def test_defaults_without_path():
    config = load_config()
    assert config == DEFAULT_CONFIG
    assert config is not DEFAULT_CONFIG


def test_defaults_are_not_shared():
    config = load_config()
    config["codec"]["wrap_special"] = False
    assert DEFAULT_CONFIG["codec"]["wrap_special"] is True


def test_file_overrides_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("codec:\n  wrap_special: false\ndisplay:\n  separator: ','\n")

    config = load_config(str(path))

    assert config["codec"]["wrap_special"] is False
    assert config["display"]["separator"] == ","
    assert config["display"]["show_breakdown"] is False
    assert config["dataset"]["context_window"] == 32


def test_unknown_keys_are_kept(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("extra:\n  key: 1\n")
    assert load_config(str(path))["extra"] == {"key": 1}


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("")
    assert load_config(str(path)) == DEFAULT_CONFIG


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "missing.yaml"))


def test_non_mapping_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("- just\n- a list\n")
    with pytest.raises(ConfigError):
        load_config(str(path))


def test_invalid_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("codec: [unclosed\n")
    with pytest.raises(ConfigError):
        load_config(str(path))


def test_shipped_config_loads():
    from pathlib import Path

    shipped = Path(__file__).resolve().parent.parent / "config.yaml"
    assert load_config(str(shipped)) == DEFAULT_CONFIG
