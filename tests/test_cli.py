from datetime import datetime, timezone

from weatherday.cli import main
from weatherday.models import CurrentConditions, Place, WeatherReport
from weatherday.screen import render
from weatherday.service import default_forecast

WEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"
FORECAST_URL = "https://api.openweathermap.org/data/2.5/forecast"


def _report():
    days = default_forecast(datetime(2024, 6, 1, tzinfo=timezone.utc))
    return WeatherReport(Place("Cupertino", "CA"), CurrentConditions(64, "10d"), days, forecast_is_default=True)


def test_render_day():
    text = render(_report())
    lines = text.splitlines()
    assert lines[0] == "[day: blue -> lightBlue]"
    assert lines[1] == "Cupertino, CA"
    assert "cloud.sun.rain.fill  64°" in text
    assert "SUN" in text and "THU" in text
    assert text.count("70°") == 5
    assert "--night" in lines[-1]


def test_render_night():
    assert render(_report(), night=True).startswith("[night: black -> gray]")


def test_main_prints_screen(monkeypatch, requests_mock, current_payload, forecast_payload, capsys):
    monkeypatch.setenv("OPENWEATHER_API_KEY", "test-key")
    monkeypatch.delenv("WEATHER_TZ", raising=False)
    requests_mock.get(WEATHER_URL, json=current_payload)
    requests_mock.get(FORECAST_URL, json=forecast_payload)

    assert main(["--city", "Boise", "--region", "ID", "--night"]) == 0

    out = capsys.readouterr().out
    assert "Boise, ID" in out
    assert "night" in out
    assert "FRI" in out and "SAT" in out and "SUN" in out


def test_main_fetch_failure_is_not_fatal(monkeypatch, requests_mock, capsys):
    monkeypatch.setenv("OPENWEATHER_API_KEY", "test-key")
    monkeypatch.delenv("WEATHER_TZ", raising=False)
    requests_mock.get(WEATHER_URL, status_code=503)
    requests_mock.get(FORECAST_URL, status_code=503)

    assert main([]) == 0
    assert capsys.readouterr().out.count("70°") == 5


def test_main_missing_key(monkeypatch, capsys):
    monkeypatch.delenv("OPENWEATHER_API_KEY", raising=False)
    assert main([]) == 2
    assert "OPENWEATHER_API_KEY" in capsys.readouterr().err
