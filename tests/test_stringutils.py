import io

import pytest

from topview.stringutils import (
    contains_i,
    get_token,
    read_line,
    split,
    starts_with,
    trim,
)


def test_trim_strips_spaces_tabs_newlines():
    assert trim("  \tabc\n ") == "abc"


def test_trim_keeps_inner_spaces():
    assert trim(" a b ") == "a b"


def test_trim_leaves_other_whitespace():
    assert trim("\rx\r") == "\rx\r"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("a b c", ["a", "b", "c"]),
        ("a b ", ["a", "b"]),
        ("", []),
        ("a  b", ["a", "", "b"]),
        (" a", ["", "a"]),
    ],
)
def test_split(text, expected):
    assert split(text, " ") == expected


def test_split_on_equals_keeps_all_fields():
    assert split("key=value=x", "=") == ["key", "value", "x"]


def test_split_join_round_trip():
    text = "fields=0 48 17 18"
    assert "=".join(split(text, "=")) == text


def test_get_token_picks_word():
    assert get_token("PID USER  NAME", 2) == "USER"
    assert get_token("PID USER  NAME", 3) == "NAME"


def test_get_token_missing_word_is_empty():
    assert get_token("a b", 3) == ""


def test_get_token_drops_newline():
    assert get_token(" x\n", 1) == "x"


def test_contains_i():
    assert contains_i("FireFox", "fox") is True
    assert contains_i("FireFox", "chrome") is False
    assert contains_i("anything", "") is True


def test_starts_with():
    assert starts_with("sort_key=46", "sort_key") is True
    assert starts_with("key", "sort_key") is False


def test_read_line_sequence():
    stream = io.StringIO("one\n\ntwo\nthree")
    assert read_line(stream) == "one"
    assert read_line(stream) == ""
    assert read_line(stream) == "two"
    assert read_line(stream) == "three"
    assert read_line(stream) is None


def test_read_line_long_line():
    long = "x" * 5000
    stream = io.StringIO(long + "\n")
    assert read_line(stream) == long