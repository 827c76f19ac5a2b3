"""Terminal constants: key codes, tree-drawing strings and terminal quirks."""

from __future__ import annotations

from enum import IntEnum

ERR = -1

KEY_F0 = 0o410
KEY_HOME = 0o406
KEY_END = 0o550

SCROLL_WHEEL_V_AMOUNT = 10


class TreeStr(IntEnum):
    """Pieces used to draw the process tree."""

    HORZ = 0
    VERT = 1
    RTEE = 2
    BEND = 3
    TEND = 4
    OPEN = 5
    SHUT = 6


_TREE_ASCII = ("-", "|", "`", "`", ",", "+", "-")
_TREE_UTF8 = ("\u2500", "\u2502", "\u251c", "\u2514", "\u250c", "+", "\u2500")


def key_f(n: int) -> int:
    """Return the key code of function key n."""
    return KEY_F0 + n


KEY_WHEELUP = key_f(20)
KEY_WHEELDOWN = key_f(21)
KEY_RECLICK = key_f(22)


def key_alt(letter: str) -> int:
    """Return the synthetic key code for Alt plus an upper-case letter."""
    if len(letter) != 1 or not "A" <= letter <= "Z":
        raise ValueError(f"not an upper-case letter: {letter!r}")
    return key_f(64 - 26) + (ord(letter) - ord("A"))


def tree_strings(utf8: bool) -> tuple[str, ...]:
    """Return the tree-drawing strings, indexed by TreeStr."""
    return _TREE_UTF8 if utf8 else _TREE_ASCII


def horizontal_scroll_amount(term: str | None) -> int:
    """Return how many columns a horizontal scroll moves on this terminal."""
    return 20 if term == "linux" else 5


def extra_key_sequences(term: str | None) -> dict[str, int]:
    """Return escape sequences to bind to keys for terminals that need them."""
    if term is None or not (term.startswith("xterm") or term == "vt220"):
        return {}
    sequences = {
        "\033[H": KEY_HOME,
        "\033[F": KEY_END,
        "\033[7~": KEY_HOME,
        "\033[8~": KEY_END,
        "\033OP": key_f(1),
        "\033OQ": key_f(2),
        "\033OR": key_f(3),
        "\033OS": key_f(4),
        "\033[11~": key_f(1),
        "\033[12~": key_f(2),
        "\033[13~": key_f(3),
        "\033[14~": key_f(4),
        "\033[17;2~": key_f(18),
    }
    for code in range(ord("a"), ord("z") + 1):
        sequences["\033" + chr(code)] = key_alt(chr(code).upper())
    return sequences


def effective_delay(delay: int) -> int:
    """Return the refresh delay actually used; zero becomes one."""
    return 1 if delay == 0 else delay