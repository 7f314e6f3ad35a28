"""Tests for TOML configuration loading."""

import pytest

from shared.config import ForgeConfig


def test_defaults():
    config = ForgeConfig()
    assert config.generator.max_attempts == 100
    assert config.generator.placement_retry_limit == 64
    assert config.generator.default_preset == "medium"
    assert config.analyzer.guesses_per_second == 1e10
    assert config.analyzer.recommended_length == 12
    assert config.selftest.significance == 0.001
    assert config.global_settings.log_level == "WARNING"


def test_load_partial_file_keeps_defaults(tmp_path):
    path = tmp_path / "passforge.toml"
    path.write_text(
        "[generator]\n"
        "max_attempts = 250\n"
        "default_preset = \"strong\"\n"
        "unknown_key = 1\n"
        "\n"
        "[analyzer]\n"
        "dictionary_path = \"words.txt\"\n"
        "\n"
        "[selftest]\n"
        "samples = 5000\n",
        encoding="utf-8",
    )
    config = ForgeConfig.load(path)
    assert config.generator.max_attempts == 250
    assert config.generator.default_preset == "strong"
    assert config.generator.placement_retry_limit == 64
    assert config.analyzer.dictionary_path == "words.txt"
    assert config.selftest.samples == 5000
    assert config.selftest.bound == 62


def test_explicit_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        ForgeConfig.load(tmp_path / "missing.toml")


def test_implicit_missing_file_uses_defaults(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert ForgeConfig.load() == ForgeConfig()


def test_implicit_file_in_working_directory(tmp_path, monkeypatch):
    (tmp_path / "passforge.toml").write_text("[global]\nlog_level = \"DEBUG\"\n")
    monkeypatch.chdir(tmp_path)
    assert ForgeConfig.load().global_settings.log_level == "DEBUG"


def test_to_dict_has_every_section():
    data = ForgeConfig().to_dict()
    assert set(data) == {"global_settings", "generator", "analyzer", "selftest"}
    assert data["generator"]["max_attempts"] == 100
