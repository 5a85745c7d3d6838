"""Strings whose characters each carry a display attribute."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from typing import Any


class Color(enum.Enum):
    """Colour roles a character can be drawn with."""

    RESET_COLOR = enum.auto()
    DEFAULT_COLOR = enum.auto()
    METER_TEXT = enum.auto()
    METER_VALUE = enum.auto()
    PANEL_HEADER_FOCUS = enum.auto()
    PANEL_HEADER_UNFOCUS = enum.auto()
    PANEL_SELECTION_FOCUS = enum.auto()
    PANEL_SELECTION_FOLLOW = enum.auto()
    PANEL_SELECTION_UNFOCUS = enum.auto()
    LARGE_NUMBER = enum.auto()
    PROCESS = enum.auto()
    PROCESS_SHADOW = enum.auto()
    PROCESS_TAG = enum.auto()
    PROCESS_MEGABYTES = enum.auto()
    PROCESS_BASENAME = enum.auto()
    PROCESS_TREE = enum.auto()
    PROCESS_R_STATE = enum.auto()
    PROCESS_D_STATE = enum.auto()
    PROCESS_HIGH_PRIORITY = enum.auto()
    PROCESS_LOW_PRIORITY = enum.auto()
    PROCESS_THREAD = enum.auto()
    PROCESS_THREAD_BASENAME = enum.auto()
    TASKS_RUNNING = enum.auto()
    CPU_KERNEL = enum.auto()
    UPTIME = enum.auto()
    SWAP = enum.auto()


def _printable(ch: str) -> str:
    return ch if ch.isprintable() else "?"


class RichString:
    """A sequence of characters, each paired with an attribute."""

    def __init__(self) -> None:
        self._chars: list[str] = []
        self._attrs: list[Any] = []

    def __len__(self) -> int:
        return len(self._chars)

    def __str__(self) -> str:
        return self.text

    def __iter__(self) -> Iterator[tuple[str, Any]]:
        return iter(zip(self._chars, self._attrs))

    @property
    def text(self) -> str:
        return "".join(self._chars)

    def _write_from(self, attr: Any, text: str, start: int) -> None:
        del self._chars[start:]
        del self._attrs[start:]
        self._chars.extend(_printable(ch) for ch in text)
        self._attrs.extend([attr] * len(text))

    def append(self, attr: Any, text: str) -> None:
        """Add ``text`` at the end, drawn with ``attr``."""
        self._write_from(attr, text, len(self._chars))

    def write(self, attr: Any, text: str) -> None:
        """Replace the whole content with ``text`` drawn with ``attr``."""
        self._write_from(attr, text, 0)

    def set_attr(self, attr: Any) -> None:
        """Give every character the attribute ``attr``."""
        self.set_attrn(attr, 0, len(self._chars) - 1)

    def set_attrn(self, attr: Any, start: int, finish: int) -> None:
        """Set ``attr`` on characters ``start`` through ``finish`` inclusive.

        ``finish`` is clamped to the string's last index.
        """
        if start < 0:
            raise IndexError("start must not be negative")
        high = len(self._chars) - 1
        if finish > high:
            finish = high
        elif finish < 0:
            finish = 0
        for i in range(start, finish + 1):
            self._attrs[i] = attr

    def find_char(self, ch: str, start: int) -> int:
        """Index of ``ch`` at or after ``start``, or -1."""
        try:
            return self._chars.index(ch, start)
        except ValueError:
            return -1

    def prune(self) -> None:
        """Empty the string."""
        self._chars.clear()
        self._attrs.clear()

    def attr_at(self, index: int) -> Any:
        """Attribute of the character at ``index``."""
        if not 0 <= index < len(self._attrs):
            raise IndexError("index out of range")
        return self._attrs[index]