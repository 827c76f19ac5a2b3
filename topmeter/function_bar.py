"""The row of function-key labels at the bottom of the screen."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from topmeter.crt import ERR, key_f

_MAX_ITEMS = 15

_F_KEYS = ("F1", "F2", "F3", "F4", "F5", "F6", "F7", "F8", "F9", "F10")
_F_LABELS = ("      ",) * 10
_F_EVENTS = tuple(key_f(n) for n in range(1, 11))


class FunctionBar:
    """Key names, their labels and the events a click on each produces."""

    def __init__(
        self,
        functions: Sequence[str] | None = None,
        keys: Sequence[str] | None = None,
        events: Sequence[int] | None = None,
    ) -> None:
        labels = list(functions if functions is not None else _F_LABELS)[:_MAX_ITEMS]
        if keys and events:
            size = len(labels)
            self.keys = list(keys[:size])
            self.events = list(events[:size])
        else:
            self.keys = list(_F_KEYS)
            self.events = list(_F_EVENTS)
            size = len(_F_KEYS)
        labels += [""] * (size - len(labels))
        self.functions = labels
        self.size = size

    def _items(self) -> Iterator[tuple[str, str, int]]:
        return zip(self.keys, self.functions[: self.size], self.events)

    def set_label(self, event: int, text: str) -> None:
        """Replace the label of the first entry bound to event."""
        for i, bound in enumerate(self.events):
            if bound == event:
                self.functions[i] = text
                break

    def synthesize_event(self, pos: int) -> int:
        """Return the event of the entry under column pos, or ERR."""
        x = 0
        for key, label, event in self._items():
            x += len(key) + len(label)
            if pos < x:
                return event
        return ERR

    def text(self) -> str:
        """Return the bar as it reads on screen."""
        return "".join(key + label for key, label, _ in self._items())


def enter_esc_bar(enter: str, esc: str) -> FunctionBar:
    """Return a bar with Enter and Esc entries carrying the given labels."""
    return FunctionBar([enter, esc], ["Enter", "Esc"], [13, 27])