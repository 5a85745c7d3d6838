"""Fixed-width number, time and rate rendering for process columns."""

from __future__ import annotations

import math
from collections.abc import Iterable

from .richstring import Color, RichString

ONE_K = 1024
ONE_M = ONE_K * ONE_K
ONE_G = ONE_M * ONE_K

ONE_DECIMAL_K = 1000
ONE_DECIMAL_M = ONE_DECIMAL_K * ONE_DECIMAL_K
ONE_DECIMAL_G = ONE_DECIMAL_M * ONE_DECIMAL_K

DEFAULT_PID_FORMAT = "%7d "
NO_PERM = "    no perm "

_HUMAN_WIDTH = 9
_UNSIGNED_MINUS_ONE = 2**64 - 1


def _palette(coloring: bool) -> tuple[Color, Color]:
    if coloring:
        return Color.LARGE_NUMBER, Color.PROCESS_MEGABYTES
    return Color.PROCESS, Color.PROCESS


def human_number(out: RichString, number: int, coloring: bool) -> None:
    """Append a memory amount in KiB, scaled to M, G or T as it grows."""
    large, megabytes = _palette(coloring)
    if number >= 10 * ONE_DECIMAL_M:
        if number >= 100 * ONE_DECIMAL_G:
            text, attr = "%4dT " % (number // ONE_G), large
        elif number >= 1000 * ONE_DECIMAL_M:
            text, attr = "%4.1fT " % (number / ONE_G), large
        elif number >= 100 * ONE_DECIMAL_M:
            text, attr = "%4dG " % (number // ONE_M), large
        else:
            text, attr = "%4.1fG " % (number / ONE_M), large
        out.append(attr, text[:_HUMAN_WIDTH])
    elif number >= 100000:
        out.append(megabytes, "%4dM " % (number // ONE_K))
    elif number >= 1000:
        out.append(megabytes, "%2d" % (number // 1000))
        out.append(Color.PROCESS, "%03d " % (number % 1000))
    else:
        out.append(Color.PROCESS, "%5d " % number)


def color_number(out: RichString, number: int, coloring: bool) -> None:
    """Append a count with its digit groups coloured by magnitude."""
    large, megabytes = _palette(coloring)
    shadow = Color.PROCESS_SHADOW if coloring else Color.PROCESS
    if number in (-1, _UNSIGNED_MINUS_ONE):
        out.append(Color.PROCESS_SHADOW, NO_PERM)
    elif number > 10000000000:
        text = "%11d " % (number // 1000)
        out.append(large, text[0:5])
        out.append(megabytes, text[5:8])
        out.append(Color.PROCESS, text[8:12])
    else:
        text = "%11d " % number
        out.append(large, text[0:2])
        out.append(megabytes, text[2:5])
        out.append(Color.PROCESS, text[5:8])
        out.append(shadow, text[8:12])


def print_time(out: RichString, total_hundredths: int) -> None:
    """Append a CPU time given in hundredths of a second."""
    total_seconds = total_hundredths // 100
    hours = total_seconds // 3600
    minutes = (total_seconds // 60) % 60
    seconds = total_seconds % 60
    hundredths = total_hundredths - total_seconds * 100
    if hours >= 100:
        out.append(Color.LARGE_NUMBER, ("%7dh " % hours)[:_HUMAN_WIDTH])
        return
    if hours:
        out.append(Color.LARGE_NUMBER, "%2dh" % hours)
        text = "%02d:%02d " % (minutes, seconds)
    else:
        text = "%2d:%02d.%02d " % (minutes, seconds, hundredths)
    out.append(Color.DEFAULT_COLOR, text)


def output_rate(out: RichString, rate: float, coloring: bool) -> None:
    """Append a byte rate per second; -1 means it could not be read."""
    large, megabytes = _palette(coloring)
    if rate == -1:
        out.append(Color.PROCESS_SHADOW, NO_PERM)
    elif rate < ONE_K:
        out.append(Color.PROCESS, "%7.2f B/s " % rate)
    elif rate < ONE_M:
        out.append(Color.PROCESS, "%7.2f K/s " % (rate / ONE_K))
    elif rate < ONE_G:
        out.append(megabytes, "%7.2f M/s " % (rate / ONE_K / ONE_K))
    else:
        out.append(large, "%7.2f G/s " % (rate / ONE_K / ONE_K / ONE_K))


def _pid_digits(max_pid: int) -> int | None:
    if max_pid == -1:
        return None
    if max_pid <= 0:
        raise ValueError("maximum pid must be positive")
    return math.ceil(math.log10(max_pid))


def pid_format(max_pid: int) -> str:
    """A %-format for pid columns wide enough for ``max_pid``; -1 means unknown."""
    digits = _pid_digits(max_pid)
    if digits is None:
        return DEFAULT_PID_FORMAT
    return "%%%dd " % digits


def pid_column_titles(max_pid: int, labels: Iterable[str]) -> list[str] | None:
    """Right-aligned titles for pid columns; ``None`` when ``max_pid`` is unknown."""
    digits = _pid_digits(max_pid)
    if digits is None:
        return None
    return ["%*s " % (digits, label) for label in labels]