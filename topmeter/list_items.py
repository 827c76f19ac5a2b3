"""Plain and check-box list entries shown in selection panels."""

from __future__ import annotations

from dataclasses import dataclass

from topmeter.colors import ColorElement

Segment = tuple[ColorElement, str]

_MOVING_ASCII = "+ "
_MOVING_UTF8 = "\u2195 "


@dataclass(eq=False)
class ListItem:
    """A line of text with an integer key; ordered by its text."""

    value: str
    key: int = 0
    moving: bool = False

    def append(self, text: str) -> None:
        """Extend the item's text."""
        self.value += text

    def display(self, utf8: bool = False) -> list[Segment]:
        """Return the coloured segments that make up the item on screen."""
        segments: list[Segment] = []
        if self.moving:
            marker = _MOVING_UTF8 if utf8 else _MOVING_ASCII
            segments.append((ColorElement.DEFAULT_COLOR, marker))
        segments.append((ColorElement.DEFAULT_COLOR, self.value))
        return segments

    def __lt__(self, other: ListItem) -> bool:
        if not isinstance(other, ListItem):
            return NotImplemented
        return self.value < other.value


class CheckItem:
    """A labelled check box.

    The state lives either in the item itself or, when ``ref`` is given as
    ``(target, attribute)``, in that attribute of the target object.
    """

    def __init__(
        self,
        text: str,
        value: bool = False,
        ref: tuple[object, str] | None = None,
    ) -> None:
        self.text = text
        self.ref = ref
        self._value = False if ref is not None else bool(value)

    @property
    def checked(self) -> bool:
        """Whether the box is ticked."""
        if self.ref is not None:
            target, attribute = self.ref
            return bool(getattr(target, attribute))
        return self._value

    @checked.setter
    def checked(self, value: bool) -> None:
        if self.ref is not None:
            target, attribute = self.ref
            setattr(target, attribute, bool(value))
        else:
            self._value = bool(value)

    def toggle(self) -> bool:
        """Flip the box and return its new state."""
        self.checked = not self.checked
        return self.checked

    def display(self) -> list[Segment]:
        """Return the coloured segments that make up the item on screen."""
        return [
            (ColorElement.CHECK_BOX, "["),
            (ColorElement.CHECK_MARK, "x" if self.checked else " "),
            (ColorElement.CHECK_BOX, "] "),
            (ColorElement.CHECK_TEXT, self.text),
        ]

    def __repr__(self) -> str:
        return f"CheckItem({self.text!r}, checked={self.checked})"