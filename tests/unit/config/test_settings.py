"""
Unit tests for release_signing.config.settings
"""

import logging
from pathlib import Path

import pytest

from release_signing.config import SigningSettings, load_settings_from_env
from release_signing.exceptions import ConfigError


@pytest.fixture
def clean_env(monkeypatch):
    # setenv first so teardown also undoes values written by load_dotenv
    for name in ("SIGNING_PROPERTIES_PATH", "SIGNING_STRICT", "LOG_LEVEL"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


@pytest.mark.unit
def test_defaults(clean_env):
    settings = SigningSettings.from_env()
    assert settings.properties_path == Path("key.properties")
    assert settings.strict is False
    assert settings.log_level == "INFO"


@pytest.mark.unit
def test_from_env(clean_env):
    clean_env.setenv("SIGNING_PROPERTIES_PATH", "/ci/secrets/key.properties")
    clean_env.setenv("SIGNING_STRICT", "True")
    clean_env.setenv("LOG_LEVEL", "debug")
    settings = load_settings_from_env()
    assert settings.properties_path == Path("/ci/secrets/key.properties")
    assert settings.strict is True
    assert settings.log_level == "debug"


@pytest.mark.unit
@pytest.mark.parametrize("raw, expected", [("1", True), ("yes", True), ("0", False), ("no", False), ("", False)])
def test_strict_values(clean_env, raw, expected):
    clean_env.setenv("SIGNING_STRICT", raw)
    assert SigningSettings.from_env().strict is expected


@pytest.mark.unit
def test_invalid_strict_value(clean_env):
    clean_env.setenv("SIGNING_STRICT", "maybe")
    with pytest.raises(ConfigError, match="SIGNING_STRICT"):
        SigningSettings.from_env()


@pytest.mark.unit
def test_configure_logging(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.update(kw))
    SigningSettings(log_level="debug").configure_logging()
    assert calls["level"] == logging.DEBUG


@pytest.mark.unit
def test_configure_logging_unknown_level(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.update(kw))
    SigningSettings(log_level="chatty").configure_logging()
    assert calls["level"] == logging.INFO


@pytest.mark.unit
def test_from_env_file(clean_env, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("SIGNING_PROPERTIES_PATH=/ci/key.properties\nSIGNING_STRICT=true\n", encoding="utf-8")
    settings = SigningSettings.from_env(env_file)
    assert settings.properties_path == Path("/ci/key.properties")
    assert settings.strict is True


@pytest.mark.unit
def test_environment_overrides_env_file(clean_env, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("SIGNING_STRICT=true\n", encoding="utf-8")
    clean_env.setenv("SIGNING_STRICT", "false")
    assert load_settings_from_env(env_file).strict is False
