# value objects shared by the client, the orchestrator and the view

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple, Union

CITIES: Tuple[str, ...] = ("Lviv", "Kyiv", "Donetsk", "Odesa", "Rivne", "Sumy", "Kharkiv")


class Parameter(Enum):
    TEMPERATURE = "Temperature"
    HUMIDITY = "Humidity"
    PRECIPITATION = "Precipitation"


@dataclass(frozen=True)
class ForecastDay:
    # one day of aggregated history, exactly as the provider reported it
    date: str
    condition: str
    avg_temp_c: float
    avg_humidity: float
    total_precip_mm: float


# date (yyyy-MM-dd) -> forecast day, at most seven entries per cycle
Snapshot = Dict[str, ForecastDay]


# ui status, one of Idle / Loading / Failed / Ready; only the orchestrator writes it
@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Loading:
    city: str
    # requests answered so far, successful or not
    resolved: int = 0


@dataclass(frozen=True)
class Failed:
    city: str
    message: str
    # kept for callers that want the partial data, the view does not draw it
    snapshot: Snapshot = field(default_factory=dict)


@dataclass(frozen=True)
class Ready:
    city: str
    snapshot: Snapshot = field(default_factory=dict)


Status = Union[Idle, Loading, Failed, Ready]


@dataclass(frozen=True)
class CycleResult:
    city: str
    snapshot: Snapshot
    error: Optional[str]
    cycle_id: int
