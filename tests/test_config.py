import pytest

from weatherhist.config import DEFAULT_BASE_URL, AppConfig, ConfigError, load_config


def test_load_config_from_env(monkeypatch):
    monkeypatch.setenv("WEATHERAPI_KEY", "abc123")
    monkeypatch.delenv("WEATHERAPI_BASE_URL", raising=False)

    config = load_config(use_dotenv=False)

    assert config == AppConfig(api_key="abc123", base_url=DEFAULT_BASE_URL)


def test_load_config_base_url_override(monkeypatch):
    monkeypatch.setenv("WEATHERAPI_KEY", "abc123")
    monkeypatch.setenv("WEATHERAPI_BASE_URL", "http://localhost:8080/v1/")

    assert load_config(use_dotenv=False).base_url == "http://localhost:8080/v1"


def test_load_config_requires_key(monkeypatch):
    monkeypatch.delenv("WEATHERAPI_KEY", raising=False)
    with pytest.raises(ConfigError):
        load_config(use_dotenv=False)
