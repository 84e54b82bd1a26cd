"""
Tests for Tangara configuration.
"""

import pytest
from tangara import config as config_module
from tangara.config import TangaraConfig, get_default_config, reset_default_config


ENV_VARS = [
    "TANGARA_SHOW_KIND",
    "TANGARA_SOURCE_EXIT_CODE",
    "TANGARA_INVOCATION_EXIT_CODE",
    "TANGARA_LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    reset_default_config()
    yield
    reset_default_config()


def test_defaults():
    """Default configuration is valid."""
    cfg = TangaraConfig()
    assert cfg.show_kind is True
    assert cfg.source_exit_code == 1
    assert cfg.invocation_exit_code == 2
    assert cfg.log_level == "WARNING"
    cfg.validate()


def test_from_env(monkeypatch):
    """Environment variables override defaults."""
    monkeypatch.setenv("TANGARA_SHOW_KIND", "0")
    monkeypatch.setenv("TANGARA_SOURCE_EXIT_CODE", "3")
    monkeypatch.setenv("TANGARA_INVOCATION_EXIT_CODE", "64")
    monkeypatch.setenv("TANGARA_LOG_LEVEL", "debug")

    cfg = TangaraConfig.from_env()
    assert cfg.show_kind is False
    assert cfg.source_exit_code == 3
    assert cfg.invocation_exit_code == 64
    assert cfg.log_level == "DEBUG"


@pytest.mark.parametrize("field,value", [
    ("source_exit_code", 0),
    ("source_exit_code", 256),
    ("invocation_exit_code", -1),
])
def test_validate_rejects_bad_exit_codes(field, value):
    """Exit codes must fit a process status."""
    cfg = TangaraConfig(**{field: value})
    with pytest.raises(ValueError, match=field):
        cfg.validate()


def test_validate_rejects_unknown_log_level():
    """Unknown log level names are rejected."""
    cfg = TangaraConfig(log_level="LOUD")
    with pytest.raises(ValueError, match="log_level"):
        cfg.validate()


def test_log_level_number():
    """Level name resolves to the logging constant."""
    assert TangaraConfig(log_level="INFO").log_level_number == 20


def test_summary_mentions_settings():
    """Summary lists the reporting settings."""
    summary = TangaraConfig(show_kind=False, source_exit_code=4).get_summary()
    assert "Show Kind: Disabled" in summary
    assert "Source Exit Code: 4" in summary
    assert "Level: WARNING" in summary


def test_default_config_is_cached(monkeypatch):
    """get_default_config loads once until reset."""
    first = get_default_config()
    assert get_default_config() is first

    monkeypatch.setenv("TANGARA_SOURCE_EXIT_CODE", "9")
    assert get_default_config().source_exit_code == 1

    reset_default_config()
    assert config_module.get_default_config().source_exit_code == 9


def test_default_config_validates(monkeypatch):
    """Invalid environment settings fail at load time."""
    monkeypatch.setenv("TANGARA_INVOCATION_EXIT_CODE", "0")
    with pytest.raises(ValueError):
        get_default_config()
