"""Tests for settings loading."""

import pytest

from core.config import DEFAULT_SERVER_NAME, Settings, load_settings
from core.errors import ConfigurationError


def test_minimal_environment():
    settings = load_settings({"LINKUP_API_KEY": "secret"})
    assert settings == Settings(api_key="secret")
    assert settings.timeout_seconds is None
    assert settings.server_name == DEFAULT_SERVER_NAME


@pytest.mark.parametrize("environ", [{}, {"LINKUP_API_KEY": ""}, {"LINKUP_API_KEY": "   "}])
def test_missing_api_key_is_fatal(environ):
    with pytest.raises(ConfigurationError, match="LINKUP_API_KEY environment variable is required") as exc_info:
        load_settings(environ)
    assert exc_info.value.error_type == "configuration_error"


def test_reads_os_environ_by_default(monkeypatch):
    monkeypatch.setenv("LINKUP_API_KEY", "from-env")
    monkeypatch.delenv("LINKUP_TIMEOUT_SECONDS", raising=False)
    assert load_settings().api_key == "from-env"


def test_os_environ_without_key(monkeypatch):
    monkeypatch.delenv("LINKUP_API_KEY", raising=False)
    with pytest.raises(ConfigurationError):
        load_settings()


@pytest.mark.parametrize("raw,expected", [("30", 30.0), ("2.5", 2.5), ("0", None), ("", None), ("  ", None)])
def test_timeout_parsing(raw, expected):
    settings = load_settings({"LINKUP_API_KEY": "k", "LINKUP_TIMEOUT_SECONDS": raw})
    assert settings.timeout_seconds == expected


@pytest.mark.parametrize("raw", ["soon", "-1", "nan", "inf"])
def test_invalid_timeout_is_fatal(raw):
    with pytest.raises(ConfigurationError, match="LINKUP_TIMEOUT_SECONDS"):
        load_settings({"LINKUP_API_KEY": "k", "LINKUP_TIMEOUT_SECONDS": raw})


def test_server_name_override():
    settings = load_settings({"LINKUP_API_KEY": "k", "DEEP_SEARCH_SERVER_NAME": "research"})
    assert settings.server_name == "research"


def test_repr_masks_api_key():
    assert "secret" not in repr(Settings(api_key="secret"))
