# orchestration and business rules.
# pure parsing, the client boundary that turns any failure into None,
# and the orchestrator that runs one sequential seven-day fetch cycle per city selection

from __future__ import annotations
import itertools
import logging
import threading
from datetime import date, timedelta
from typing import Any, Callable, Dict, List, Optional
from .client import WeatherAPIClient, WeatherAPIError
from .models import CycleResult, Failed, ForecastDay, Idle, Loading, Ready, Snapshot, Status

logger = logging.getLogger(__name__)

HISTORY_DAYS = 7

Listener = Callable[[Status], None]


# transform raw provider payload into our typed value object and check shape
def parse_forecast_day(data: Dict[str, Any]) -> ForecastDay:
    # weatherAPI shape: data["forecast"]["forecastday"][0]["day"]["avgtemp_c"], ...
    try:
        days = data["forecast"]["forecastday"]
        first = days[0]
        day = first["day"]
        return ForecastDay(
            date=str(first["date"]),
            condition=str(day["condition"]["text"]),
            avg_temp_c=float(day["avgtemp_c"]),
            avg_humidity=float(day["avghumidity"]),
            total_precip_mm=float(day["totalprecip_mm"]),
        )
    except IndexError as exc:
        raise ValueError("Empty forecastday list") from exc
    except (KeyError, TypeError, ValueError, OverflowError) as exc:
        raise ValueError(f"Unsupported payload shape for parse_forecast_day(): {exc}") from exc


def fetch_forecast_day(client: WeatherAPIClient, city: str, day: str) -> Optional[ForecastDay]:
    # nothing escapes this boundary, the reason only goes to the log
    try:
        return parse_forecast_day(client.get_history(city, day))
    except (WeatherAPIError, ValueError) as exc:
        logger.warning("Error fetching weather for %s on %s: %s", city, day, exc)
        return None


def last_seven_dates(today: date) -> List[str]:
    # today first, then the six days before it
    return [(today - timedelta(days=i)).isoformat() for i in range(HISTORY_DAYS)]


def failure_message(city: str, day: str) -> str:
    return f"Failed to fetch weather data for {city} on {day}"


class FetchOrchestrator:
    # single writer of the ui status; a cycle id decides which worker may still publish

    def __init__(self, client: WeatherAPIClient, today: Callable[[], date] = date.today):
        self.client = client
        self.today = today
        self._ids = itertools.count(1)
        self._current = 0
        self._status: Status = Idle()
        self._listeners: List[Listener] = []
        self._lock = threading.Lock()

    @property
    def status(self) -> Status:
        with self._lock:
            return self._status

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def is_current(self, cycle_id: int) -> bool:
        with self._lock:
            return cycle_id == self._current

    def begin(self, city: str) -> int:
        # supersede whatever is in flight and reset to Loading before any request goes out
        with self._lock:
            cycle_id = next(self._ids)
            self._current = cycle_id
            self._status = Loading(city)
        logger.info("Cycle %d started for %s", cycle_id, city)
        self._notify(Loading(city))
        return cycle_id

    def _publish(self, cycle_id: int, status: Status) -> bool:
        with self._lock:
            if cycle_id != self._current:
                return False
            self._status = status
        self._notify(status)
        return True

    def _notify(self, status: Status) -> None:
        for listener in list(self._listeners):
            listener(status)

    def run_cycle(self, city: str, cycle_id: int) -> CycleResult:
        snapshot: Snapshot = {}
        error: Optional[str] = None
        resolved = 0

        for day in last_seven_dates(self.today()):
            if not self.is_current(cycle_id):
                logger.info("Cycle %d for %s superseded, stopping", cycle_id, city)
                return CycleResult(city=city, snapshot=snapshot, error=error, cycle_id=cycle_id)

            try:
                forecast = fetch_forecast_day(self.client, city, day)
            except Exception:
                # one bad day must not kill the worker and leave the ui on Loading
                logger.exception("Unexpected error fetching weather for %s on %s", city, day)
                forecast = None

            if forecast is not None:
                snapshot[day] = forecast
            else:
                # latest failure wins
                error = failure_message(city, day)
            resolved += 1
            self._publish(cycle_id, Loading(city, resolved=resolved))

        # hand out a copy, the worker's map is not shared with the ui
        final = dict(snapshot)
        status: Status = Failed(city, error, final) if error else Ready(city, final)
        if self._publish(cycle_id, status):
            logger.info("Cycle %d for %s finished: %d/%d days", cycle_id, city, len(final), HISTORY_DAYS)
        else:
            logger.info("Cycle %d for %s finished after being superseded, result dropped", cycle_id, city)
        return CycleResult(city=city, snapshot=final, error=error, cycle_id=cycle_id)
