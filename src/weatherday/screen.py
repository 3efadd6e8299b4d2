# text rendering of a WeatherReport, the terminal stand-in for the phone screen

from __future__ import annotations
from typing import List

from .models import WeatherReport

# background gradient (top, bottom) per theme
THEMES = {
    False: ("blue", "lightBlue"),
    True: ("black", "gray"),
}

TOGGLE_HINT = "Change Day Time"


def render(report: WeatherReport, night: bool = False) -> str:
    top, bottom = THEMES[night]
    lines: List[str] = [
        f"[{'night' if night else 'day'}: {top} -> {bottom}]",
        report.place.label,
        "",
        f"  {report.current.icon}  {report.current.temperature}°",
        "",
    ]
    for day in report.days:
        lines.append(f"  {day.weekday_label.upper():<4} {day.icon:<22} {day.temperature}°")
    toggle = "run without --night" if night else "run with --night"
    lines += ["", f"({TOGGLE_HINT}: {toggle})"]
    return "\n".join(lines)
