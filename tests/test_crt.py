import pytest

from topmeter.crt import (
    KEY_END,
    KEY_HOME,
    TreeStr,
    effective_delay,
    extra_key_sequences,
    horizontal_scroll_amount,
    key_alt,
    key_f,
    tree_strings,
)


def test_key_f_is_offset_from_f0():
    for n in (1, 5, 10, 22):
        assert key_f(n) - key_f(0) == n


def test_key_alt_follows_function_keys():
    assert key_alt("A") == key_f(64 - 26)
    assert key_alt("Z") - key_alt("A") == 25


@pytest.mark.parametrize("bad", ["a", "", "AB", "1"])
def test_key_alt_rejects_non_letters(bad):
    with pytest.raises(ValueError):
        key_alt(bad)


def test_ascii_tree_strings():
    assert tree_strings(False) == ("-", "|", "`", "`", ",", "+", "-")


def test_utf8_tree_strings():
    strings = tree_strings(True)
    assert strings[TreeStr.HORZ] == "\u2500"
    assert strings[TreeStr.OPEN] == "+"
    assert len(strings) == len(TreeStr)


def test_scroll_amount():
    assert horizontal_scroll_amount("linux") == 20
    assert horizontal_scroll_amount("xterm") == 5
    assert horizontal_scroll_amount(None) == 5


def test_xterm_sequences():
    seqs = extra_key_sequences("xterm-256color")
    assert seqs["\033OP"] == key_f(1)
    assert seqs["\033[17;2~"] == key_f(18)
    assert seqs["\033[H"] == KEY_HOME
    assert seqs["\033[8~"] == KEY_END
    assert seqs["\033z"] == key_alt("Z")


def test_vt220_matches_xterm():
    assert extra_key_sequences("vt220") == extra_key_sequences("xterm")


def test_other_terminals_have_no_sequences():
    assert extra_key_sequences("linux") == {}
    assert extra_key_sequences(None) == {}


def test_effective_delay():
    assert effective_delay(0) == 1
    assert effective_delay(15) == 15