import pytest

from topmeter.crt import ERR, key_f
from topmeter.function_bar import FunctionBar
from topmeter.inc_set import (
    INCMODE_MAX,
    KEY_BACKSPACE,
    KEY_ESC,
    IncSet,
    IncType,
)
from topmeter.list_items import ListItem

VALUES = ["bash", "Python3", "sshd", "python-worker"]


def make_set():
    return IncSet(FunctionBar())


def type_text(inc, text, values=VALUES, selected=0):
    result = None
    for ch in text:
        result = inc.handle_key(ord(ch), values, selected)
        selected = result.selected
    return result


def test_search_selects_first_match_case_insensitive():
    inc = make_set()
    inc.activate(IncType.SEARCH)
    result = type_text(inc, "PYT")
    assert result.selected == VALUES.index("Python3")
    assert inc.found is True
    assert result.filter_changed is False


def test_search_no_match_keeps_selection():
    inc = make_set()
    inc.activate(IncType.SEARCH)
    result = type_text(inc, "zzz", selected=2)
    assert result.selected == 2
    assert inc.found is False


def test_f3_moves_to_next_match_and_wraps():
    inc = make_set()
    inc.activate(IncType.SEARCH)
    result = type_text(inc, "py")
    first = result.selected
    nxt = inc.handle_key(key_f(3), VALUES, first)
    assert nxt.selected == VALUES.index("python-worker")
    wrapped = inc.handle_key(key_f(3), VALUES, nxt.selected)
    assert wrapped.selected == first


def test_escape_leaves_search_and_resets():
    inc = make_set()
    inc.activate(IncType.SEARCH)
    type_text(inc, "ss")
    inc.handle_key(KEY_ESC, VALUES, 0)
    assert inc.active is None
    assert inc.modes[IncType.SEARCH].buffer == ""
    assert inc.current_bar() is inc.default_bar


def test_filter_typing_and_filtered_lines():
    inc = make_set()
    inc.activate(IncType.FILTER)
    result = type_text(inc, "python")
    assert result.filter_changed is True
    assert inc.filtering is True
    assert inc.filter == "python"
    lines = [ListItem(v) for v in VALUES]
    assert [line.value for line in inc.filtered(lines)] == ["Python3", "python-worker"]


def test_filter_backspace_to_empty_stops_filtering():
    inc = make_set()
    inc.activate(IncType.FILTER)
    type_text(inc, "ab")
    inc.handle_key(KEY_BACKSPACE, VALUES, 0)
    assert inc.filter == "a"
    result = inc.handle_key(KEY_BACKSPACE, VALUES, 0)
    assert result.filter_changed is True
    assert inc.filtering is False
    assert inc.filter is None


def test_filter_enter_keeps_filter_escape_clears():
    inc = make_set()
    inc.activate(IncType.FILTER)
    type_text(inc, "sh")
    inc.handle_key(13, VALUES, 0)
    assert inc.active is None
    assert inc.filter == "sh"
    inc.activate(IncType.FILTER)
    inc.handle_key(KEY_ESC, VALUES, 0)
    assert inc.filter is None
    lines = [ListItem(v) for v in VALUES]
    assert [line.value for line in inc.filtered(lines)] == VALUES


def test_buffer_is_limited():
    inc = make_set()
    inc.activate(IncType.SEARCH)
    type_text(inc, "x" * (INCMODE_MAX + 10))
    assert len(inc.modes[IncType.SEARCH].buffer) == INCMODE_MAX


def test_err_reports_change():
    inc = make_set()
    result = inc.handle_key(ERR, VALUES, 1)
    assert result.filter_changed is True
    assert result.selected == 1


def test_handle_key_without_active_mode():
    inc = make_set()
    with pytest.raises(RuntimeError):
        inc.handle_key(ord("a"), VALUES, 0)


def test_synthesize_event_follows_active_bar():
    inc = make_set()
    assert inc.synthesize_event(0) == key_f(1)
    bar = inc.activate(IncType.SEARCH)
    assert bar is inc.current_bar()
    assert inc.synthesize_event(0) == key_f(3)
    assert bar.text().endswith(" Search: ")