# models and the icon table to keep data shapes explicit and reusable across the app

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date
from types import MappingProxyType
from typing import List, Mapping, Optional
from uuid import UUID, uuid4

FALLBACK_ICON = "cloud.sun.fill"

# the screen shows at most this many days
FORECAST_DAYS = 5

# openweather icon code -> display token, read-only so nothing can patch it at runtime
ICON_MAP: Mapping[str, str] = MappingProxyType({
    "01d": "sun.max.fill",
    "01n": "moon.fill",
    "02d": "cloud.sun.fill",
    "02n": "cloud.moon.fill",
    "03d": "cloud.fill",
    "03n": "cloud.fill",
    "04d": "smoke.fill",
    "04n": "smoke.fill",
    "09d": "cloud.drizzle.fill",
    "09n": "cloud.drizzle.fill",
    "10d": "cloud.sun.rain.fill",
    "10n": "cloud.moon.rain.fill",
    "11d": "cloud.bolt.fill",
    "11n": "cloud.bolt.fill",
    "13d": "snow",
    "13n": "snow",
    "50d": "cloud.fog.fill",
    "50n": "cloud.fog.fill",
})

# fixed english labels so output does not depend on the process locale (date.weekday() order)
WEEKDAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def map_icon(code: Optional[str]) -> str:
    # total lookup, anything unknown (or missing) gets the fallback
    return ICON_MAP.get(code or "", FALLBACK_ICON)


def weekday_label(day: date) -> str:
    return WEEKDAY_LABELS[day.weekday()]


@dataclass(frozen=True)
class Place:
    city: str
    region: str = ""

    @property
    def label(self) -> str:
        return f"{self.city}, {self.region}" if self.region else self.city


@dataclass(frozen=True)
class Sample:
    # immutable value object for a single 3-hour forecast entry
    timestamp: float  # epoch seconds, utc
    temperature: float
    condition_code: str = ""


@dataclass(frozen=True)
class CurrentConditions:
    temperature: int = 0
    condition_code: str = ""

    @property
    def icon(self) -> str:
        return map_icon(self.condition_code)


@dataclass(frozen=True)
class DailyForecast:
    # output value object, one per calendar day; id only exists so lists can key rows
    calendar_day: date
    weekday_label: str
    temperature: int
    condition_code: str
    id: UUID = field(default_factory=uuid4, compare=False, repr=False)

    @property
    def icon(self) -> str:
        return map_icon(self.condition_code)


@dataclass(frozen=True)
class WeatherReport:
    # everything the screen needs, produced fresh on every fetch cycle
    place: Place
    current: CurrentConditions
    forecast: List[DailyForecast]
    forecast_is_default: bool = False

    @property
    def days(self) -> List[DailyForecast]:
        return self.forecast[:FORECAST_DAYS]
