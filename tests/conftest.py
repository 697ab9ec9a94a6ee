# shared fixtures: a recorded week of lviv history and an in-memory client that never touches the network

import copy
import json
from datetime import date
from pathlib import Path

import pytest

from weatherhist.client import WeatherAPIError

DATA_DIR = Path(__file__).parent / "data"


class FakeClient:
    # stands in for WeatherAPIClient.get_history, records every call
    def __init__(self, responses, failures=None, hook=None):
        self.responses = responses
        self.failures = failures or {}
        self.hook = hook
        self.calls = []

    def get_history(self, city, day):
        self.calls.append((city, day))
        if self.hook is not None:
            self.hook(city, day)
        if day in self.failures:
            raise self.failures[day]
        by_day = self.responses.get(city, {})
        if day not in by_day:
            raise WeatherAPIError(f"HTTP 400 for {city!r} on {day}")
        return by_day[day]


@pytest.fixture
def lviv_week():
    return json.loads((DATA_DIR / "lviv_history.json").read_text())


@pytest.fixture
def today(lviv_week):
    return date.fromisoformat(lviv_week["today"])


@pytest.fixture
def responses(lviv_week):
    # same week for kyiv, relabelled so stale lviv data is easy to spot
    kyiv = copy.deepcopy(lviv_week["responses"])
    for payload in kyiv.values():
        day = payload["forecast"]["forecastday"][0]["day"]
        day["condition"]["text"] = "Kyiv " + day["condition"]["text"]
        day["avgtemp_c"] = day["avgtemp_c"] + 1.0
    return {"Lviv": lviv_week["responses"], "Kyiv": kyiv}


@pytest.fixture
def fake_client(responses):
    return FakeClient(responses)


@pytest.fixture
def make_client(responses):
    def _make(failures=None, hook=None):
        return FakeClient(responses, failures=failures, hook=hook)
    return _make
