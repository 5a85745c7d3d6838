"""The list of signals offered when sending a signal to a process."""

from __future__ import annotations

import signal
from collections.abc import Iterable
from dataclasses import dataclass

SIGNALS_HEADER = "Send signal:"
_DEFAULT_POSITION = 15
_MAX_REALTIME_SPAN = 100


@dataclass(frozen=True)
class SignalItem:
    """A signal's display name and number."""

    name: str
    number: int


def realtime_signal_labels(rtmin: int | None, rtmax: int | None) -> list[SignalItem]:
    """Items for the real-time signals ``rtmin`` through ``rtmax``.

    Nothing is returned when either bound is unknown or the range spans
    more than 100 signals.
    """
    if rtmin is None or rtmax is None or rtmax - rtmin > _MAX_REALTIME_SPAN:
        return []
    items = []
    for sig in range(rtmin, rtmax + 1):
        n = sig - rtmin
        label = f"{sig:2d} SIGRTMIN{n:<+3d}"
        if n == 0:
            label = label[:11]
        items.append(SignalItem(label, sig))
    return items


def signal_items(
    signals: Iterable[SignalItem],
    rtmin: int | None = None,
    rtmax: int | None = None,
) -> list[SignalItem]:
    """The platform signals followed by the real-time ones."""
    return [*signals, *realtime_signal_labels(rtmin, rtmax)]


def default_signal_position(items: list[SignalItem]) -> int:
    """Index to select initially: the last SIGTERM entry, kept within range."""
    position = _DEFAULT_POSITION
    for index, item in enumerate(items):
        if item.number == signal.SIGTERM:
            position = index
    if position >= len(items):
        position = len(items) - 1
    return max(position, 0)