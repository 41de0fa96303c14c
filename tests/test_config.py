"""Tests for configuration loading."""

import pytest
from pathlib import Path

from textrecords.config import load_config

ENV_KEYS = ["TEXTRECORDS_ENCODING", "TEXTRECORDS_DEBUG", "TEXTRECORDS_LOG_LEVEL"]


class TestConfig:
    def test_defaults(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("HOME", str(tmp_path))
        for key in ENV_KEYS:
            monkeypatch.delenv(key, raising=False)

        config = load_config()
        assert config.encoding == "utf-8"
        assert config.debug is False
        assert config.log_level == "INFO"

    def test_env_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("HOME", str(tmp_path))
        monkeypatch.setenv("TEXTRECORDS_DEBUG", "1")
        monkeypatch.setenv("TEXTRECORDS_LOG_LEVEL", "DEBUG")

        config = load_config()
        assert config.debug is True
        assert config.log_level == "DEBUG"

    def test_toml_file(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("HOME", str(tmp_path))
        for key in ENV_KEYS:
            monkeypatch.delenv(key, raising=False)

        toml_path = tmp_path / "textrecords.toml"
        toml_path.write_text("""
encoding = "latin-1"
debug = true
log_level = "WARNING"
""")
        config = load_config(toml_path)
        assert config.encoding == "latin-1"
        assert config.debug is True
        assert config.log_level == "WARNING"

    def test_toml_in_cwd(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("HOME", str(tmp_path))
        for key in ENV_KEYS:
            monkeypatch.delenv(key, raising=False)
        (tmp_path / "textrecords.toml").write_text('log_level = "ERROR"\n')

        assert load_config().log_level == "ERROR"

    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("HOME", str(tmp_path))
        monkeypatch.setenv("TEXTRECORDS_DEBUG", "false")

        toml_path = tmp_path / "textrecords.toml"
        toml_path.write_text("debug = true\n")
        config = load_config(toml_path)
        assert config.debug is False  # env wins
