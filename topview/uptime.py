"""Uptime meter: how long the system has been running."""

from __future__ import annotations

from dataclasses import dataclass, field

from .richstring import Color

UNKNOWN_UPTIME = "(unknown)"


def _split_uptime(total_seconds: int) -> tuple[int, int, int, int]:
    seconds = total_seconds % 60
    minutes = (total_seconds // 60) % 60
    hours = (total_seconds // 3600) % 24
    days = total_seconds // 86400
    return days, hours, minutes, seconds


def format_uptime(total_seconds: int) -> str:
    """Render an uptime in seconds; -1 means unknown."""
    if total_seconds == -1:
        return UNKNOWN_UPTIME
    days, hours, minutes, seconds = _split_uptime(total_seconds)
    if days > 100:
        prefix = f"{days} days(!), "
    elif days > 1:
        prefix = f"{days} days, "
    elif days == 1:
        prefix = "1 day, "
    else:
        prefix = ""
    return f"{prefix}{hours:02d}:{minutes:02d}:{seconds:02d}"


@dataclass
class UptimeMeter:
    """Meter holding the number of days up; its total grows to fit."""

    name: str = "Uptime"
    ui_name: str = "Uptime"
    caption: str = "Uptime: "
    attributes: tuple[Color, ...] = (Color.UPTIME,)
    total: float = 100.0
    values: list[float] = field(default_factory=lambda: [0.0])

    def update(self, total_seconds: int) -> str:
        """Record a new uptime and return its text."""
        if total_seconds == -1:
            return UNKNOWN_UPTIME
        days = _split_uptime(total_seconds)[0]
        self.values[0] = days
        if days > self.total:
            self.total = days
        return format_uptime(total_seconds)