# toolkit-free side of the window: selection state and what should be on screen.
# the tk layer in app.py only draws a Rendered and forwards user choices here

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple
from .models import CITIES, Failed, ForecastDay, Loading, Parameter, Ready, Status
from .service import HISTORY_DAYS, FetchOrchestrator

logger = logging.getLogger(__name__)

LOADING_TEXT = "Loading data..."

# starts a cycle's work somewhere (a worker thread in the app, inline in tests)
Runner = Callable[[Callable[[], object]], None]


@dataclass(frozen=True)
class Card:
    date: str
    condition: str
    value: str


@dataclass(frozen=True)
class Rendered:
    heading: str
    message: str = ""
    is_error: bool = False
    cards: Tuple[Card, ...] = ()


def format_value(day: ForecastDay, parameter: Parameter) -> str:
    if parameter is Parameter.TEMPERATURE:
        return f"Avg Temp: {day.avg_temp_c} °C"
    if parameter is Parameter.HUMIDITY:
        return f"Humidity: {day.avg_humidity}%"
    return f"Precipitation: {day.total_precip_mm} mm"


def build_cards(snapshot, parameter: Parameter) -> List[Card]:
    # iso dates sort correctly as strings
    return [
        Card(date=d, condition=snapshot[d].condition, value=format_value(snapshot[d], parameter))
        for d in sorted(snapshot)
    ]


class WeatherView:
    def __init__(self, orchestrator: FetchOrchestrator, runner: Runner):
        self.orchestrator = orchestrator
        self.runner = runner
        self.city = CITIES[0]
        self.parameter = Parameter.TEMPERATURE

    def start(self) -> None:
        self._start_cycle()

    def select_city(self, city: str) -> None:
        if city not in CITIES:
            logger.warning("Ignoring unknown city %r", city)
            return
        if city == self.city:
            return
        self.city = city
        self._start_cycle()

    def select_parameter(self, parameter: Parameter) -> None:
        # re-render from the current snapshot, no network
        self.parameter = Parameter(parameter)

    def _start_cycle(self) -> None:
        city = self.city
        cycle_id = self.orchestrator.begin(city)
        self.runner(lambda: self.orchestrator.run_cycle(city, cycle_id))

    def render(self, status: Optional[Status] = None) -> Rendered:
        if status is None:
            status = self.orchestrator.status
        heading = f"Weather in {self.city}"

        # a status that belongs to another city is stale, show loading until ours lands
        if isinstance(status, (Failed, Ready)) and status.city != self.city:
            return Rendered(heading=heading, message=LOADING_TEXT)

        if isinstance(status, Failed):
            # any failure hides the partial list
            return Rendered(heading=heading, message=status.message, is_error=True)
        if isinstance(status, Ready):
            return Rendered(heading=heading, cards=tuple(build_cards(status.snapshot, self.parameter)))
        if isinstance(status, Loading):
            message = LOADING_TEXT
            if status.resolved:
                message = f"{LOADING_TEXT} ({status.resolved}/{HISTORY_DAYS})"
            return Rendered(heading=heading, message=message)
        return Rendered(heading=heading)
