"""Incremental search and filtering over the lines of a panel."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import IntEnum

from topmeter.crt import ERR, key_f
from topmeter.function_bar import FunctionBar
from topmeter.list_items import ListItem

INCMODE_MAX = 40

KEY_ESC = 27
KEY_BACKSPACE = 0o407
KEY_DEL = 127
KEY_RESIZE = 0o632


class IncType(IntEnum):
    """The two incremental modes."""

    SEARCH = 0
    FILTER = 1


def _contains_i(haystack: str, needle: str) -> bool:
    return needle.lower() in haystack.lower()


def _is_printable(ch: int) -> bool:
    return 32 <= ch < 127


@dataclass
class IncMode:
    """The typed text and function bar of one incremental mode."""

    bar: FunctionBar
    is_filter: bool
    buffer: str = ""

    def reset(self) -> None:
        """Clear the typed text."""
        self.buffer = ""


@dataclass
class KeyResult:
    """What a key press did: whether the filter changed, and the selection."""

    filter_changed: bool
    selected: int | None


def _search_mode() -> IncMode:
    bar = FunctionBar(["Next  ", "Cancel ", " Search: "], ["F3", "Esc", "  "], [key_f(3), KEY_ESC, ERR])
    return IncMode(bar, is_filter=False)


def _filter_mode() -> IncMode:
    bar = FunctionBar(["Done  ", "Clear ", " Filter: "], ["Enter", "Esc", "  "], [13, KEY_ESC, ERR])
    return IncMode(bar, is_filter=True)


@dataclass
class IncSet:
    """Search and filter state attached to a panel."""

    default_bar: FunctionBar
    modes: dict[IncType, IncMode] = field(init=False)
    active: IncMode | None = field(init=False, default=None)
    filtering: bool = field(init=False, default=False)
    found: bool = field(init=False, default=False)

    def __init__(self, default_bar: FunctionBar) -> None:
        self.default_bar = default_bar
        self.modes = {IncType.SEARCH: _search_mode(), IncType.FILTER: _filter_mode()}
        self.active = None
        self.filtering = False
        self.found = False

    @property
    def filter(self) -> str | None:
        """The active filter text, or None when not filtering."""
        return self.modes[IncType.FILTER].buffer if self.filtering else None

    def activate(self, inc_type: IncType) -> FunctionBar:
        """Enter the given mode and return the bar to show."""
        self.active = self.modes[IncType(inc_type)]
        return self.active.bar

    def _search(self, mode: IncMode, values: Sequence[str], selected: int | None) -> int | None:
        for i, value in enumerate(values):
            if _contains_i(value, mode.buffer):
                self.found = True
                return i
        self.found = False
        return selected

    def handle_key(self, ch: int, values: Sequence[str], selected: int | None) -> KeyResult:
        """Process a key typed in the active mode.

        ``values`` are the texts of the panel's lines and ``selected`` the
        index of its selected line; the result carries the new selection.
        """
        if ch == ERR:
            return KeyResult(True, selected)
        mode = self.active
        if mode is None:
            raise RuntimeError("no incremental mode is active")
        size = len(values)
        filter_changed = False
        do_search = True

        if ch == key_f(3):
            if size == 0:
                return KeyResult(True, selected)
            here = max(selected or 0, 0)
            i = here
            while True:
                i = (i + 1) % size
                if i == here:
                    break
                if _contains_i(values[i], mode.buffer):
                    selected = i
                    break
            do_search = False
        elif ch < 255 and _is_printable(ch):
            if len(mode.buffer) < INCMODE_MAX:
                mode.buffer += chr(ch)
                if mode.is_filter:
                    filter_changed = True
                    if len(mode.buffer) == 1:
                        self.filtering = True
        elif ch in (KEY_BACKSPACE, KEY_DEL):
            if mode.buffer:
                mode.buffer = mode.buffer[:-1]
                if mode.is_filter:
                    filter_changed = True
                    if not mode.buffer:
                        self.filtering = False
                        mode.reset()
            else:
                do_search = False
        elif ch == KEY_RESIZE:
            pass
        else:
            if mode.is_filter:
                filter_changed = True
                if ch == KEY_ESC:
                    self.filtering = False
                    mode.reset()
            else:
                mode.reset()
            self.active = None
            do_search = False

        if do_search:
            selected = self._search(mode, values, selected)
        return KeyResult(filter_changed, selected)

    def filtered(self, lines: Iterable[ListItem]) -> list[ListItem]:
        """Return the lines that pass the current filter."""
        needle = self.filter
        if needle is None:
            return list(lines)
        return [line for line in lines if _contains_i(line.value, needle)]

    def current_bar(self) -> FunctionBar:
        """Return the bar of the active mode, or the default bar."""
        return self.active.bar if self.active is not None else self.default_bar

    def synthesize_event(self, x: int) -> int:
        """Return the event a click at column x of the bar produces."""
        return self.current_bar().synthesize_event(x)