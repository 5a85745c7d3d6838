"""Small string helpers used across the package."""

from __future__ import annotations

from typing import IO

_TRIM_CHARS = " \t\n"


def trim(text: str) -> str:
    """Strip spaces, tabs and newlines from both ends of ``text``."""
    return text.strip(_TRIM_CHARS)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``.

    Empty fields between separators are kept, but a trailing empty field
    (text ending in the separator, or empty text) is dropped.
    """
    parts = text.split(sep)
    if parts and parts[-1] == "":
        parts.pop()
    return parts


def get_token(line: str, num_match: int) -> str:
    """Return the ``num_match``-th space-separated word of ``line`` (1-based).

    Newlines and NUL characters inside the word are dropped. An empty string
    is returned when there is no such word.
    """
    count = 0
    in_word = False
    found: list[str] = []
    for ch in line:
        was_in_word = in_word
        in_word = ch != " "
        if in_word and not was_in_word:
            count += 1
        if in_word and count == num_match and ch not in ("\0", "\n", "\xff"):
            found.append(ch)
    return "".join(found)


def contains_i(haystack: str, needle: str) -> bool:
    """Case-insensitive substring test."""
    return needle.lower() in haystack.lower()


def starts_with(text: str, prefix: str) -> bool:
    """Return whether ``text`` begins with ``prefix``."""
    return text.startswith(prefix)


def read_line(stream: IO[str]) -> str | None:
    """Read one line without its newline; ``None`` at end of input."""
    line = stream.readline()
    if not line:
        return None
    newline = line.rfind("\n")
    if newline != -1:
        line = line[:newline]
    return line