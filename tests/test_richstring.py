import pytest

from topview.richstring import Color, RichString


def test_append_builds_text_and_attrs():
    rs = RichString()
    rs.append(Color.METER_TEXT, "ab")
    rs.append(Color.METER_VALUE, "cd")
    assert rs.text == "abcd"
    assert len(rs) == 4
    assert rs.attr_at(1) is Color.METER_TEXT
    assert rs.attr_at(2) is Color.METER_VALUE


def test_write_replaces_content():
    rs = RichString()
    rs.append(Color.PROCESS, "hello world")
    rs.write(Color.SWAP, "hi")
    assert rs.text == "hi"
    assert [a for _, a in rs] == [Color.SWAP, Color.SWAP]


def test_unprintable_characters_become_question_marks():
    rs = RichString()
    rs.append(Color.PROCESS, "a\tb\x01")
    assert rs.text == "a?b?"


def test_set_attr_all():
    rs = RichString()
    rs.append(Color.PROCESS, "xyz")
    rs.set_attr(Color.PROCESS_TAG)
    assert all(attr is Color.PROCESS_TAG for _, attr in rs)
    assert rs.text == "xyz"


def test_set_attrn_clamps_finish():
    rs = RichString()
    rs.append(Color.PROCESS, "abcdef")
    rs.set_attrn(Color.PROCESS_BASENAME, 3, 100)
    attrs = [a for _, a in rs]
    assert attrs[:3] == [Color.PROCESS] * 3
    assert attrs[3:] == [Color.PROCESS_BASENAME] * 3


def test_set_attrn_negative_finish_touches_first():
    rs = RichString()
    rs.append(Color.PROCESS, "ab")
    rs.set_attrn(Color.SWAP, 0, -5)
    assert rs.attr_at(0) is Color.SWAP
    assert rs.attr_at(1) is Color.PROCESS


def test_find_char():
    rs = RichString()
    rs.append(Color.PROCESS, "/usr/bin/top")
    assert rs.find_char("/", 0) == 0
    assert rs.find_char("/", 1) == 4
    assert rs.find_char("q", 0) == -1


def test_prune_empties():
    rs = RichString()
    rs.append(Color.PROCESS, "data")
    rs.prune()
    assert rs.text == ""
    assert len(rs) == 0


def test_attr_at_out_of_range():
    rs = RichString()
    rs.append(Color.PROCESS, "a")
    with pytest.raises(IndexError):
        rs.attr_at(1)


def test_str_matches_text():
    rs = RichString()
    rs.append(Color.UPTIME, "up")
    assert str(rs) == rs.text