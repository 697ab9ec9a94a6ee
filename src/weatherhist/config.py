# process-wide settings, built once at startup and injected into the client

from __future__ import annotations
import os
from dataclasses import dataclass
from dotenv import load_dotenv

DEFAULT_BASE_URL = "https://api.weatherapi.com/v1"
DEFAULT_TIMEOUT = 10.0


class ConfigError(RuntimeError):
    pass


@dataclass(frozen=True)
class AppConfig:
    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT


def load_config(use_dotenv: bool = True) -> AppConfig:
    # a local .env is convenient on a desktop, real environment variables still win
    if use_dotenv:
        load_dotenv()

    api_key = os.getenv("WEATHERAPI_KEY")
    if not api_key:
        raise ConfigError("WEATHERAPI_KEY not set")

    base_url = os.getenv("WEATHERAPI_BASE_URL") or DEFAULT_BASE_URL
    return AppConfig(api_key=api_key, base_url=base_url.rstrip("/"))
