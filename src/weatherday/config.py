# settings come from the environment, a local .env file is honoured for development
# missing credentials fail here at startup instead of deep inside a request

from __future__ import annotations
import os
from dataclasses import dataclass
from datetime import timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError
from dotenv import load_dotenv

from .models import Place

DEFAULT_PLACE = Place(city="Cupertino", region="CA")


class ConfigError(RuntimeError):
    pass


def load_tz(name: str | None) -> tzinfo:
    if not name or name.upper() == "UTC":
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ConfigError(f"Unknown time zone {name!r}") from exc


@dataclass(frozen=True)
class Settings:
    api_key: str
    units: str = "imperial"
    country: str = "US"
    place: Place = DEFAULT_PLACE
    tz: tzinfo = timezone.utc

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()  # in production the variables are injected by the environment
        api_key = os.getenv("OPENWEATHER_API_KEY")
        if not api_key:
            raise ConfigError("OPENWEATHER_API_KEY not set")

        place = Place(
            city=os.getenv("WEATHER_CITY") or DEFAULT_PLACE.city,
            region=os.getenv("WEATHER_REGION", DEFAULT_PLACE.region),
        )
        return cls(
            api_key=api_key,
            units=os.getenv("WEATHER_UNITS") or "imperial",
            country=os.getenv("WEATHER_COUNTRY") or "US",
            place=place,
            tz=load_tz(os.getenv("WEATHER_TZ")),
        )
