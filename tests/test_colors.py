import pytest

from topmeter.colors import (
    A_BOLD,
    A_DIM,
    A_NORMAL,
    A_REVERSE,
    BLACK,
    GRAY_BLACK,
    GRAY_BLACK_INDEX,
    MAGENTA,
    WHITE,
    ColorElement,
    ColorScheme,
    color_index,
    color_pair,
    pair_definitions,
    scheme_colors,
)


def test_color_indices_cover_64_distinct_slots():
    indices = {color_index(fg, bg) for fg in range(8) for bg in range(8)}
    assert indices == set(range(64))


def test_white_on_black_is_pair_zero():
    assert color_index(WHITE, BLACK) == 0
    assert color_pair(WHITE, BLACK) == 0


def test_color_pairs_are_distinct_and_ordered_like_indices():
    combos = [(fg, bg) for fg in range(8) for bg in range(8)]
    pairs = [color_pair(fg, bg) for fg, bg in combos]
    assert len(set(pairs)) == 64
    by_index = sorted(combos, key=lambda c: color_index(*c))
    by_pair = sorted(combos, key=lambda c: color_pair(*c))
    assert by_index == by_pair


def test_gray_black_is_magenta_pair():
    assert GRAY_BLACK == color_pair(MAGENTA, MAGENTA)
    assert GRAY_BLACK_INDEX == color_index(MAGENTA, MAGENTA)


@pytest.mark.parametrize("scheme", list(ColorScheme))
def test_every_scheme_covers_every_element(scheme):
    colors = scheme_colors(scheme)
    assert set(colors) == set(ColorElement)


def test_monochrome_uses_only_attributes():
    allowed = {A_NORMAL, A_BOLD, A_DIM, A_REVERSE, A_REVERSE | A_BOLD}
    colors = scheme_colors(ColorScheme.MONOCHROME)
    assert set(colors.values()) <= allowed
    assert colors[ColorElement.FUNCTION_BAR] == A_REVERSE
    assert colors[ColorElement.PROCESS_SHADOW] == A_DIM


def test_default_scheme_pinned_values():
    colors = scheme_colors(ColorScheme.DEFAULT)
    assert colors[ColorElement.PROCESS] == A_NORMAL
    assert colors[ColorElement.BAR_BORDER] == A_BOLD
    assert colors[ColorElement.PROCESS_SHADOW] == A_BOLD | GRAY_BLACK


def test_broken_gray_replaces_only_bold_gray():
    default = scheme_colors(ColorScheme.DEFAULT)
    broken = scheme_colors(ColorScheme.BROKENGRAY)
    shadow = A_BOLD | GRAY_BLACK
    for element in ColorElement:
        if default[element] == shadow:
            assert broken[element] == color_pair(WHITE, BLACK)
        else:
            assert broken[element] == default[element]
    assert shadow not in broken.values()


def test_scheme_colors_returns_a_copy():
    first = scheme_colors(ColorScheme.DEFAULT)
    first[ColorElement.PROCESS] = A_REVERSE
    assert scheme_colors(ColorScheme.DEFAULT)[ColorElement.PROCESS] == A_NORMAL


def test_unknown_scheme_raises():
    with pytest.raises(ValueError):
        scheme_colors(len(ColorScheme))
    with pytest.raises(ValueError):
        pair_definitions(-1, 8)


def test_pair_definitions_default_background():
    pairs = pair_definitions(ColorScheme.DEFAULT, 8)
    assert set(pairs) == set(range(64))
    for fg in range(8):
        for bg in range(8):
            index = color_index(fg, bg)
            if index == GRAY_BLACK_INDEX:
                continue
            got_fg, got_bg = pairs[index]
            assert got_fg == fg
            assert got_bg == (-1 if bg == 0 else bg)


def test_pair_definitions_black_night_never_uses_default_background():
    pairs = pair_definitions(ColorScheme.BLACKNIGHT, 8)
    assert all(bg >= 0 for _, bg in pairs.values())
    assert pairs[GRAY_BLACK_INDEX][1] == BLACK


def test_gray_pair_depends_on_color_count():
    assert pair_definitions(ColorScheme.DEFAULT, 256)[GRAY_BLACK_INDEX] == (8, -1)
    assert pair_definitions(ColorScheme.DEFAULT, 8)[GRAY_BLACK_INDEX] == (BLACK, -1)