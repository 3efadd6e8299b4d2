# OOP boundary for external i/o
# all http/keys/retries live here, so the reducer and the screen stay pure and testable
# use a thread-local session per executor worker, current and forecast run side by side

from __future__ import annotations
import logging
import threading
from typing import Any, Dict
import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .models import Place

logger = logging.getLogger(__name__)


class WeatherAPIError(RuntimeError):
    # base type for everything this layer raises, callers catch only this
    pass


class NetworkError(WeatherAPIError):
    pass


class HTTPStatusError(WeatherAPIError):
    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class DecodeError(WeatherAPIError):
    pass


class OpenWeatherClient:
    # this class encapsulates provider details like base URL, params, auth, retries
    BASE_URL = "https://api.openweathermap.org/data/2.5"
    DEFAULT_TIMEOUT = 10.0

    def __init__(
        self,
        api_key: str,
        units: str = "imperial",
        country: str = "US",
        base_url: str = BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        max_retries: int = 3,
        backoff_factor: float = 0.5,
        user_agent: str = "weatherday/0.1",
    ):
        if not api_key:
            raise WeatherAPIError("OpenWeather API key is empty")

        self.api_key = api_key
        self.units = units
        self.country = country
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.user_agent = user_agent

        # each worker thread lazily obtains its own session through _session()
        self._local = threading.local()

        # retry policy for transient network, server or rate-limit issues
        self._retry = Retry(
            total=max_retries,
            backoff_factor=backoff_factor,        # exponential backoff (0.5, 1.0, 2.0, ...)
            status_forcelist=(429, 500, 502, 503, 504),
            allowed_methods=("GET",),
            raise_on_status=False,
        )

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

    def query_for(self, place: Place) -> str:
        # "City,Region,Country", an empty region is skipped rather than sent as ",,"
        parts = [place.city, place.region, self.country]
        return ",".join(p for p in parts if p)

    def get_current(self, place: Place) -> Dict[str, Any]:
        data = self._get("weather", place)
        if not isinstance(data, dict) or "main" not in data:
            raise DecodeError("Unexpected API shape: missing main")
        return data

    def get_forecast(self, place: Place) -> Dict[str, Any]:
        data = self._get("forecast", place)
        if not isinstance(data, dict) or "list" not in data:
            raise DecodeError("Unexpected API shape: missing list")
        return data

    def _get(self, endpoint: str, place: Place) -> Any:
        url = f"{self.base_url}/{endpoint}"
        query = self.query_for(place)
        params = {"q": query, "appid": self.api_key, "units": self.units}
        logger.debug("GET %s q=%s", url, query)

        try:
            resp = self._session().get(url, params=params, timeout=self.timeout)
        except requests.RequestException as exc:
            raise NetworkError(f"Request error for {query!r}: {exc}") from exc

        if resp.status_code != 200:
            # include a short response snippet to speed up triage
            snippet = (resp.text or "")[:300]
            raise HTTPStatusError(
                f"HTTP {resp.status_code} for {query!r} ({endpoint}). Body: {snippet}",
                status_code=resp.status_code,
            )

        try:
            return resp.json()
        except ValueError as exc:
            raise DecodeError(f"Invalid JSON for {query!r}: {exc}") from exc
