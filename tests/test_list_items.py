from types import SimpleNamespace

import pytest

from topmeter.colors import ColorElement
from topmeter.list_items import CheckItem, ListItem


def test_append_extends_value():
    item = ListItem("abc", 3)
    item.append("def")
    assert item.value == "abc" + "def"
    assert item.key == 3


def test_display_plain():
    item = ListItem("hello")
    assert item.display() == [(ColorElement.DEFAULT_COLOR, "hello")]


@pytest.mark.parametrize("utf8, marker", [(False, "+ "), (True, "\u2195 ")])
def test_display_moving(utf8, marker):
    item = ListItem("cpu", moving=True)
    assert item.display(utf8) == [
        (ColorElement.DEFAULT_COLOR, marker),
        (ColorElement.DEFAULT_COLOR, "cpu"),
    ]


def test_items_sort_by_value():
    items = [ListItem("zeta"), ListItem("alpha"), ListItem("mid")]
    assert [i.value for i in sorted(items)] == ["alpha", "mid", "zeta"]


def test_check_item_by_value_toggles():
    item = CheckItem("Opt", True)
    assert item.checked is True
    assert item.toggle() is False
    assert item.checked is False


def test_check_item_by_ref_writes_through():
    target = SimpleNamespace(flag=False)
    item = CheckItem("Opt", value=True, ref=(target, "flag"))
    assert item.checked is False
    item.toggle()
    assert target.flag is True
    target.flag = False
    assert item.checked is False


def test_check_item_display():
    item = CheckItem("Tree view", True)
    assert item.display() == [
        (ColorElement.CHECK_BOX, "["),
        (ColorElement.CHECK_MARK, "x"),
        (ColorElement.CHECK_BOX, "] "),
        (ColorElement.CHECK_TEXT, "Tree view"),
    ]
    item.checked = False
    assert item.display()[1] == (ColorElement.CHECK_MARK, " ")