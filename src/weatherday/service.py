# orchestration and business rules.
# pure functions turn provider payloads into samples and samples into one forecast per day
# fetch_weather runs the two network calls concurrently and never lets a fetch error escape

from __future__ import annotations
import logging
import math
from concurrent.futures import ThreadPoolExecutor
from datetime import MAXYEAR, MINYEAR, date, datetime, time, timedelta, timezone, tzinfo
from typing import Any, Dict, Iterable, List, Optional

from .client import DecodeError, OpenWeatherClient, WeatherAPIError
from .models import (
    FORECAST_DAYS,
    CurrentConditions,
    DailyForecast,
    Place,
    Sample,
    WeatherReport,
    weekday_label,
)

logger = logging.getLogger(__name__)

DEFAULT_TEMPERATURE = 70
DEFAULT_CONDITION = "02d"  # renders as the fallback icon


def _first_icon(entry: Dict[str, Any]) -> str:
    # openweather shape: entry["weather"] is a list, only the first condition counts
    conditions = entry.get("weather") or []
    if isinstance(conditions, list) and conditions and isinstance(conditions[0], dict):
        return str(conditions[0].get("icon") or "")
    return ""


def _finite(value: Any) -> float:
    # json accepts NaN and Infinity, neither can become an int temperature or a date
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"non-finite number {value!r}")
    return number


def _timestamp(value: Any) -> float:
    ts = _finite(value)
    # out of range raises OverflowError/OSError, the edge years leave room for any zone offset
    year = datetime.fromtimestamp(ts, timezone.utc).year
    if not MINYEAR < year < MAXYEAR:
        raise ValueError(f"timestamp {value!r} out of range")
    return ts


def parse_current(data: Dict[str, Any]) -> CurrentConditions:
    # openweather shape: data["main"]["temp"], data["weather"][0]["icon"]
    try:
        return CurrentConditions(
            temperature=int(_finite(data["main"]["temp"])),
            condition_code=_first_icon(data),
        )
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        raise DecodeError("Unsupported payload shape for parse_current()") from exc


def parse_samples(data: Dict[str, Any]) -> List[Sample]:
    # openweather shape: data["list"][i] with "dt", "main"."temp" and "weather"
    try:
        return [
            Sample(
                timestamp=_timestamp(item["dt"]),
                temperature=_finite(item["main"]["temp"]),
                condition_code=_first_icon(item),
            )
            for item in data["list"]
        ]
    except (AttributeError, KeyError, TypeError, ValueError, OverflowError, OSError) as exc:
        raise DecodeError("Unsupported payload shape for parse_samples()") from exc


def _daily(day: date, temperature: float, condition_code: str) -> DailyForecast:
    return DailyForecast(
        calendar_day=day,
        weekday_label=weekday_label(day),
        temperature=int(temperature),  # truncates toward zero
        condition_code=condition_code,
    )


def reduce_to_daily(samples: Iterable[Sample], tz: tzinfo = timezone.utc) -> List[DailyForecast]:
    # group by calendar day in tz, keep the sample closest to that day's noon
    groups: Dict[date, List[Sample]] = {}
    for s in samples:
        day = datetime.fromtimestamp(s.timestamp, tz).date()
        groups.setdefault(day, []).append(s)

    daily: List[DailyForecast] = []
    for day, items in groups.items():
        noon = datetime.combine(day, time(12), tzinfo=tz).timestamp()
        # equal distance: the earlier timestamp wins, min() keeps input order after that
        closest = min(items, key=lambda s: (abs(s.timestamp - noon), s.timestamp))
        daily.append(_daily(day, closest.temperature, closest.condition_code))

    return sorted(daily, key=lambda d: d.calendar_day)


def default_forecast(reference_now: datetime, tz: tzinfo = timezone.utc) -> List[DailyForecast]:
    # placeholder rows so the screen always has something to show
    today = reference_now.astimezone(tz).date()
    return [
        _daily(today + timedelta(days=offset), DEFAULT_TEMPERATURE, DEFAULT_CONDITION)
        for offset in range(1, FORECAST_DAYS + 1)
    ]


def fetch_weather(
    client: OpenWeatherClient,
    place: Place,
    now: Optional[datetime] = None,
    previous: Optional[CurrentConditions] = None,
    tz: tzinfo = timezone.utc,
) -> WeatherReport:
    now = now or datetime.now(timezone.utc)
    current = previous or CurrentConditions()
    forecast: List[DailyForecast] = []

    with ThreadPoolExecutor(max_workers=2) as pool:
        current_fut = pool.submit(client.get_current, place)
        forecast_fut = pool.submit(client.get_forecast, place)

        try:
            current = parse_current(current_fut.result())
        except WeatherAPIError as exc:
            # keep whatever was shown before
            logger.warning("Error fetching current weather for %s: %s", place.label, exc)

        try:
            forecast = reduce_to_daily(parse_samples(forecast_fut.result()), tz)
        except WeatherAPIError as exc:
            logger.warning("Error fetching forecast for %s: %s", place.label, exc)

    if not forecast:
        logger.info("No forecast days for %s, using the default forecast", place.label)
        return WeatherReport(place, current, default_forecast(now, tz), forecast_is_default=True)
    return WeatherReport(place, current, forecast)
