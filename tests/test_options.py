from types import SimpleNamespace

import pytest

from topmeter.colors import ColorScheme
from topmeter.options import (
    COLOR_SCHEME_NAMES,
    DISPLAY_OPTIONS,
    color_scheme_items,
    display_option_items,
    select_color_scheme,
    toggle_option,
)


def make_settings():
    values = {attribute: False for _, attribute in DISPLAY_OPTIONS}
    return SimpleNamespace(changed=False, color_scheme=0, **values)


def test_display_option_items_labels():
    items = display_option_items(make_settings())
    assert len(items) == len(DISPLAY_OPTIONS)
    assert items[0].text == "Tree view"
    assert items[-1].text == "Add guest time in CPU meter percentage"


def test_display_option_items_reflect_settings():
    settings = make_settings()
    settings.header_margin = True
    items = display_option_items(settings)
    checked = [item.text for item in items if item.checked]
    assert checked == ["Leave a margin around header"]


def test_toggle_option_updates_settings():
    settings = make_settings()
    items = display_option_items(settings)
    assert toggle_option(items, 0) is True
    assert settings.tree_view is True
    assert settings.changed is True
    assert toggle_option(items, 0) is False
    assert settings.tree_view is False


def test_toggle_option_out_of_range():
    items = display_option_items(make_settings())
    with pytest.raises(IndexError):
        toggle_option(items, len(items))


def test_color_scheme_items_one_checked():
    items = color_scheme_items(2)
    assert [item.text for item in items] == list(COLOR_SCHEME_NAMES)
    assert [i for i, item in enumerate(items) if item.checked] == [2]
    assert items[4].text == "MC"


def test_color_scheme_items_invalid():
    with pytest.raises(IndexError):
        color_scheme_items(len(COLOR_SCHEME_NAMES))


def test_select_color_scheme():
    settings = make_settings()
    items = color_scheme_items(0)
    result = select_color_scheme(items, settings, 5)
    assert result is ColorScheme.BLACKNIGHT
    assert settings.color_scheme == 5
    assert settings.changed is True
    assert [i for i, item in enumerate(items) if item.checked] == [5]