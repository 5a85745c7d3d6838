"""A scrollable, selectable list of items with an optional header line."""

from __future__ import annotations

import enum
import itertools
import string
from typing import Any

from .richstring import Color, RichString
from .vector import Compare, Vector

EVENT_SET_SELECTED = -1
HEADER_CLICK_BASE = -10000

_ALNUM = frozenset(string.ascii_letters + string.digits)
_TYPED_LIMIT = 99


class HandlerResult(enum.IntFlag):
    """What an event handler did with a key."""

    HANDLED = 0x01
    IGNORED = 0x02
    BREAK_LOOP = 0x04
    REDRAW = 0x08
    RESCAN = 0x10
    SYNTH_KEY = 0x20


class Key(enum.IntEnum):
    """Key codes understood by panels."""

    ERR = -1
    DOWN = 258
    UP = 259
    LEFT = 260
    RIGHT = 261
    HOME = 262
    F0 = 264
    WHEELUP = 284
    WHEELDOWN = 285
    DC = 330
    NPAGE = 338
    PPAGE = 339
    ENTER = 343
    END = 360
    MOUSE = 409
    RESIZE = 410

    @staticmethod
    def function(n: int) -> int:
        """Code of function key ``n``."""
        return Key.F0 + n

    @staticmethod
    def ctrl(letter: str) -> int:
        """Code of Ctrl with an upper-case ``letter``."""
        return ord(letter) - ord("A") + 1


_CTRL_A = Key.ctrl("A")
_CTRL_B = Key.ctrl("B")
_CTRL_E = Key.ctrl("E")
_CTRL_F = Key.ctrl("F")
_CTRL_N = Key.ctrl("N")
_CTRL_P = Key.ctrl("P")


def _item_value(item: Any) -> str:
    value = getattr(item, "value", None)
    return value if isinstance(value, str) else str(item)


def _display_item(item: Any) -> RichString:
    out = RichString()
    display = getattr(item, "display", None)
    if callable(display):
        display(out)
    else:
        out.append(Color.DEFAULT_COLOR, str(item))
    return out


def _visible_row(source: RichString, offset: int, width: int, pad_attr: Any) -> RichString:
    row = RichString()
    if width <= 0:
        return row
    for ch, attr in itertools.islice(source, max(offset, 0), max(offset, 0) + width):
        row.append(attr, ch)
    if len(row) < width:
        row.append(pad_attr, " " * (width - len(row)))
    return row


class Panel:
    """A list of items with a selection, vertical and horizontal scrolling."""

    scroll_h_amount = 5
    scroll_wheel_v_amount = 10

    def __init__(
        self,
        x: int = 1,
        y: int = 1,
        w: int = 1,
        h: int = 1,
        owner: bool = True,
        compare: Compare | None = None,
        function_bar: Any = None,
    ) -> None:
        self.x = x
        self.y = y
        self.w = w
        self.h = h
        self.items = Vector(compare, owner)
        self.selected = 0
        self.old_selected = 0
        self.selected_len = 0
        self.scroll_v = 0
        self.scroll_h = 0
        self.needs_redraw = True
        self.header = RichString()
        self.default_bar = function_bar
        self.current_bar = function_bar
        self.selection_color: Any = Color.PANEL_SELECTION_FOCUS
        self._typed = ""

    def __len__(self) -> int:
        return len(self.items)

    def set_header(self, header: str) -> None:
        """Replace the header text."""
        self.header.write(Color.PANEL_HEADER_FOCUS, header)
        self.needs_redraw = True

    def move(self, x: int, y: int) -> None:
        """Place the panel's top-left corner."""
        self.x = x
        self.y = y
        self.needs_redraw = True

    def resize(self, w: int, h: int) -> None:
        """Set the size; a header line takes one row of the height."""
        if len(self.header) > 0:
            h -= 1
        self.w = w
        self.h = h
        self.needs_redraw = True

    def prune(self) -> None:
        """Remove every item and reset scrolling and selection."""
        self.items.prune()
        self.scroll_v = 0
        self.selected = 0
        self.old_selected = 0
        self.needs_redraw = True

    def add(self, item: Any) -> None:
        """Append ``item``."""
        self.items.add(item)
        self.needs_redraw = True

    def insert(self, index: int, item: Any) -> None:
        """Insert ``item`` at ``index``."""
        self.items.insert(index, item)
        self.needs_redraw = True

    def set(self, index: int, item: Any) -> None:
        """Put ``item`` at ``index``, growing the list when needed."""
        self.items.set(index, item)

    def get(self, index: int) -> Any:
        """Item at ``index``."""
        return self.items[index]

    def remove(self, index: int) -> Any:
        """Remove the item at ``index``, keeping the selection in range."""
        self.needs_redraw = True
        removed = self.items.remove(index)
        if self.selected > 0 and self.selected >= len(self.items):
            self.selected -= 1
        return removed

    def selected_item(self) -> Any:
        """The selected item, or ``None`` when the panel is empty."""
        if len(self.items) > 0:
            return self.items[self.selected]
        return None

    def move_selected_up(self) -> None:
        """Move the selected item one place up, following it."""
        self.items.move_up(self.selected)
        if self.selected > 0:
            self.selected -= 1

    def move_selected_down(self) -> None:
        """Move the selected item one place down, following it."""
        self.items.move_down(self.selected)
        if self.selected + 1 < len(self.items):
            self.selected += 1

    def set_selected(self, selected: int) -> None:
        """Select ``selected``, clamped to the list, and notify the handler."""
        size = len(self.items)
        if selected >= size:
            selected = size - 1
        if selected < 0:
            selected = 0
        self.selected = selected
        self.event_handler(EVENT_SET_SELECTED)

    def _ensure_visible(self) -> None:
        size = len(self.items)
        if self.scroll_v < 0:
            self.scroll_v = 0
            self.needs_redraw = True
        elif self.scroll_v >= size:
            self.scroll_v = max(size - 1, 0)
            self.needs_redraw = True
        if self.selected < self.scroll_v:
            self.scroll_v = self.selected
            self.needs_redraw = True
        elif self.selected >= self.scroll_v + self.h:
            self.scroll_v = self.selected - self.h + 1
            self.needs_redraw = True

    def render(self, focus: bool) -> list[RichString]:
        """Lay out the visible rows, each ``w`` characters wide.

        The header line, when there is one, comes first, followed by ``h``
        item rows. Scrolling is adjusted so the selection is visible.
        """
        rows: list[RichString] = []
        if len(self.header) > 0:
            header_attr = Color.PANEL_HEADER_FOCUS if focus else Color.PANEL_HEADER_UNFOCUS
            rows.append(_visible_row(self.header, self.scroll_h, self.w, header_attr))

        self._ensure_visible()
        first = self.scroll_v
        up_to = min(first + self.h, len(self.items))
        selection_color = self.selection_color if focus else Color.PANEL_SELECTION_UNFOCUS

        for i in range(first, up_to):
            item = self.items[i]
            if item is None:
                continue
            text = _display_item(item)
            is_selected = i == self.selected
            pad_attr: Any = Color.RESET_COLOR
            if is_selected:
                text.set_attr(selection_color)
                self.selected_len = len(text)
                pad_attr = selection_color
            rows.append(_visible_row(text, self.scroll_h, self.w, pad_attr))
        header_rows = 1 if len(self.header) > 0 else 0
        while len(rows) - header_rows < self.h:
            rows.append(_visible_row(RichString(), 0, self.w, Color.RESET_COLOR))

        self.needs_redraw = False
        self.old_selected = self.selected
        return rows

    def on_key(self, key: int) -> bool:
        """Apply a navigation key; return whether the key was one."""
        size = len(self.items)
        if key in (Key.DOWN, _CTRL_N):
            self.selected += 1
        elif key in (Key.UP, _CTRL_P):
            self.selected -= 1
        elif key in (Key.LEFT, _CTRL_B):
            if self.scroll_h > 0:
                self.scroll_h -= max(self.scroll_h_amount, 0)
                self.needs_redraw = True
        elif key in (Key.RIGHT, _CTRL_F):
            self.scroll_h += self.scroll_h_amount
            self.needs_redraw = True
        elif key == Key.PPAGE:
            self.selected -= self.h - 1
            self.scroll_v = max(0, self.scroll_v - self.h + 1)
            self.needs_redraw = True
        elif key == Key.NPAGE:
            self.selected += self.h - 1
            self.scroll_v = max(0, min(size - self.h, self.scroll_v + self.h - 1))
            self.needs_redraw = True
        elif key == Key.WHEELUP:
            self.selected -= self.scroll_wheel_v_amount
            self.scroll_v -= self.scroll_wheel_v_amount
            self.needs_redraw = True
        elif key == Key.WHEELDOWN:
            self.selected += self.scroll_wheel_v_amount
            self.scroll_v += self.scroll_wheel_v_amount
            if self.scroll_v > size - self.h:
                self.scroll_v = size - self.h
            self.needs_redraw = True
        elif key == Key.HOME:
            self.selected = 0
        elif key == Key.END:
            self.selected = size - 1
        elif key in (_CTRL_A, ord("^")):
            self.scroll_h = 0
            self.needs_redraw = True
        elif key in (_CTRL_E, ord("$")):
            self.scroll_h = max(self.selected_len - self.w, 0)
            self.needs_redraw = True
        else:
            return False

        if self.selected < 0 or size == 0:
            self.selected = 0
            self.needs_redraw = True
        elif self.selected >= size:
            self.selected = size - 1
            self.needs_redraw = True
        return True

    def event_handler(self, ch: int) -> HandlerResult:
        """Handle an event; by default, jump to items by typing their start."""
        return self.select_by_typing(ch)

    def select_by_typing(self, ch: int) -> HandlerResult:
        """Select the first item whose value starts with the letters typed so far.

        When the typed prefix matches nothing, the key is tried again as the
        start of a new prefix. Enter ends the panel's loop.
        """
        if 0 < ch < 255 and chr(ch) in _ALNUM:
            if len(self._typed) < _TYPED_LIMIT:
                self._typed += chr(ch)
            for _attempt in range(2):
                prefix = self._typed.lower()
                for index, item in enumerate(self.items):
                    if item is None:
                        continue
                    if _item_value(item).lstrip(" ").lower().startswith(prefix):
                        self.set_selected(index)
                        return HandlerResult.HANDLED
                self._typed = chr(ch)
            return HandlerResult.HANDLED
        if ch != Key.ERR:
            self._typed = ""
        if ch == 13:
            return HandlerResult.BREAK_LOOP
        return HandlerResult.IGNORED