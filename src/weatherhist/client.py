# OOP boundary for external i/o
# all http and provider details live here, parsing and orchestration stay in service.py
# one session per thread, since every fetch cycle runs on its own worker thread

from __future__ import annotations
import logging
import threading
from typing import Dict, Any
import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry
from .config import AppConfig

logger = logging.getLogger(__name__)


class WeatherAPIError(RuntimeError):
    # single error type used to propagate clear messages from this layer
    pass


class WeatherAPIClient:
    HISTORY_PATH = "/history.json"

    def __init__(
        self,
        config: AppConfig,
        user_agent: str = "weather-history-viewer/0.1",
    ):
        self.config = config
        self.user_agent = user_agent

        # each worker thread lazily obtains its own session through _session()
        self._local = threading.local()

        # a failed day is reported as missing, never retried
        self._retry = Retry(total=0, raise_on_status=False)

    @property
    def history_url(self) -> str:
        return self.config.base_url + self.HISTORY_PATH

    def _build_session(self) -> requests.Session:
        s = requests.Session()
        s.headers.update({"User-Agent": self.user_agent})
        adapter = HTTPAdapter(max_retries=self._retry)
        s.mount("http://", adapter)
        s.mount("https://", adapter)
        return s

    def _session(self) -> requests.Session:
        sess = getattr(self._local, "session", None)
        if sess is None:
            sess = self._build_session()
            self._local.session = sess
        return sess

    def get_history(self, city: str, date: str) -> Dict[str, Any]:
        # fetch one day of history for one city and validate the envelope shape
        params = {
            "key": self.config.api_key,
            "q": city,
            "dt": date,
        }
        logger.debug("GET %s q=%s dt=%s", self.history_url, city, date)

        try:
            resp = self._session().get(self.history_url, params=params, timeout=self.config.timeout)
        except requests.RequestException as exc:
            raise WeatherAPIError(f"Request error for {city!r} on {date}: {exc}") from exc

        if not 200 <= resp.status_code < 300:
            # include a short response snippet to speed up triage
            snippet = (resp.text or "")[:300]
            raise WeatherAPIError(f"HTTP {resp.status_code} for {city!r} on {date}. Body: {snippet}")

        try:
            data = resp.json()
        except ValueError as exc:
            raise WeatherAPIError(f"Invalid JSON for {city!r} on {date}: {exc}") from exc

        try:
            _ = data["forecast"]["forecastday"]
        except (KeyError, TypeError) as exc:
            raise WeatherAPIError("Unexpected API shape: missing forecast.forecastday") from exc

        return data
