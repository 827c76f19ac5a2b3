"""Colour schemes and colour-pair layout for the terminal display."""

from __future__ import annotations

from enum import IntEnum

# Terminal colour numbers.
BLACK = 0
RED = 1
GREEN = 2
YELLOW = 3
BLUE = 4
MAGENTA = 5
CYAN = 6
WHITE = 7

# Character attributes, with the bit layout used by curses.
A_NORMAL = 0
A_REVERSE = 1 << 18
A_DIM = 1 << 20
A_BOLD = 1 << 21

_PAIR_SHIFT = 8


class ColorScheme(IntEnum):
    """The selectable colour schemes."""

    DEFAULT = 0
    MONOCHROME = 1
    BLACKONWHITE = 2
    LIGHTTERMINAL = 3
    MIDNIGHT = 4
    BLACKNIGHT = 5
    BROKENGRAY = 6


class ColorElement(IntEnum):
    """Every screen element that has its own colour."""

    RESET_COLOR = 0
    DEFAULT_COLOR = 1
    FUNCTION_BAR = 2
    FUNCTION_KEY = 3
    FAILED_SEARCH = 4
    PANEL_HEADER_FOCUS = 5
    PANEL_HEADER_UNFOCUS = 6
    PANEL_SELECTION_FOCUS = 7
    PANEL_SELECTION_FOLLOW = 8
    PANEL_SELECTION_UNFOCUS = 9
    LARGE_NUMBER = 10
    METER_TEXT = 11
    METER_VALUE = 12
    LED_COLOR = 13
    UPTIME = 14
    BATTERY = 15
    TASKS_RUNNING = 16
    SWAP = 17
    PROCESS = 18
    PROCESS_SHADOW = 19
    PROCESS_TAG = 20
    PROCESS_MEGABYTES = 21
    PROCESS_TREE = 22
    PROCESS_R_STATE = 23
    PROCESS_D_STATE = 24
    PROCESS_BASENAME = 25
    PROCESS_HIGH_PRIORITY = 26
    PROCESS_LOW_PRIORITY = 27
    PROCESS_THREAD = 28
    PROCESS_THREAD_BASENAME = 29
    BAR_BORDER = 30
    BAR_SHADOW = 31
    GRAPH_1 = 32
    GRAPH_2 = 33
    MEMORY_USED = 34
    MEMORY_BUFFERS = 35
    MEMORY_BUFFERS_TEXT = 36
    MEMORY_CACHE = 37
    LOAD = 38
    LOAD_AVERAGE_FIFTEEN = 39
    LOAD_AVERAGE_FIVE = 40
    LOAD_AVERAGE_ONE = 41
    CHECK_BOX = 42
    CHECK_MARK = 43
    CHECK_TEXT = 44
    CLOCK = 45
    HELP_BOLD = 46
    HOSTNAME = 47
    CPU_NICE = 48
    CPU_NICE_TEXT = 49
    CPU_NORMAL = 50
    CPU_KERNEL = 51
    CPU_IOWAIT = 52
    CPU_IRQ = 53
    CPU_SOFTIRQ = 54
    CPU_STEAL = 55
    CPU_GUEST = 56


def color_index(fg: int, bg: int) -> int:
    """Return the colour-pair number used for a foreground/background pair."""
    return (7 - fg) * 8 + bg


def color_pair(fg: int, bg: int) -> int:
    """Return the attribute value selecting the pair for fg/bg."""
    return color_index(fg, bg) << _PAIR_SHIFT


GRAY_BLACK_INDEX = color_index(MAGENTA, MAGENTA)
GRAY_BLACK = color_pair(MAGENTA, MAGENTA)

_P = color_pair
_E = ColorElement

_DEFAULT = {
    _E.RESET_COLOR: _P(WHITE, BLACK),
    _E.DEFAULT_COLOR: _P(WHITE, BLACK),
    _E.FUNCTION_BAR: _P(BLACK, CYAN),
    _E.FUNCTION_KEY: _P(WHITE, BLACK),
    _E.PANEL_HEADER_FOCUS: _P(BLACK, GREEN),
    _E.PANEL_HEADER_UNFOCUS: _P(BLACK, GREEN),
    _E.PANEL_SELECTION_FOCUS: _P(BLACK, CYAN),
    _E.PANEL_SELECTION_FOLLOW: _P(BLACK, YELLOW),
    _E.PANEL_SELECTION_UNFOCUS: _P(BLACK, WHITE),
    _E.FAILED_SEARCH: _P(RED, CYAN),
    _E.UPTIME: A_BOLD | _P(CYAN, BLACK),
    _E.BATTERY: A_BOLD | _P(CYAN, BLACK),
    _E.LARGE_NUMBER: A_BOLD | _P(RED, BLACK),
    _E.METER_TEXT: _P(CYAN, BLACK),
    _E.METER_VALUE: A_BOLD | _P(CYAN, BLACK),
    _E.LED_COLOR: _P(GREEN, BLACK),
    _E.TASKS_RUNNING: A_BOLD | _P(GREEN, BLACK),
    _E.PROCESS: A_NORMAL,
    _E.PROCESS_SHADOW: A_BOLD | GRAY_BLACK,
    _E.PROCESS_TAG: A_BOLD | _P(YELLOW, BLACK),
    _E.PROCESS_MEGABYTES: _P(CYAN, BLACK),
    _E.PROCESS_BASENAME: A_BOLD | _P(CYAN, BLACK),
    _E.PROCESS_TREE: _P(CYAN, BLACK),
    _E.PROCESS_R_STATE: _P(GREEN, BLACK),
    _E.PROCESS_D_STATE: A_BOLD | _P(RED, BLACK),
    _E.PROCESS_HIGH_PRIORITY: _P(RED, BLACK),
    _E.PROCESS_LOW_PRIORITY: _P(GREEN, BLACK),
    _E.PROCESS_THREAD: _P(GREEN, BLACK),
    _E.PROCESS_THREAD_BASENAME: A_BOLD | _P(GREEN, BLACK),
    _E.BAR_BORDER: A_BOLD,
    _E.BAR_SHADOW: A_BOLD | GRAY_BLACK,
    _E.SWAP: _P(RED, BLACK),
    _E.GRAPH_1: A_BOLD | _P(CYAN, BLACK),
    _E.GRAPH_2: _P(CYAN, BLACK),
    _E.MEMORY_USED: _P(GREEN, BLACK),
    _E.MEMORY_BUFFERS: _P(BLUE, BLACK),
    _E.MEMORY_BUFFERS_TEXT: A_BOLD | _P(BLUE, BLACK),
    _E.MEMORY_CACHE: _P(YELLOW, BLACK),
    _E.LOAD_AVERAGE_FIFTEEN: _P(CYAN, BLACK),
    _E.LOAD_AVERAGE_FIVE: A_BOLD | _P(CYAN, BLACK),
    _E.LOAD_AVERAGE_ONE: A_BOLD | _P(WHITE, BLACK),
    _E.LOAD: A_BOLD,
    _E.HELP_BOLD: A_BOLD | _P(CYAN, BLACK),
    _E.CLOCK: A_BOLD,
    _E.CHECK_BOX: _P(CYAN, BLACK),
    _E.CHECK_MARK: A_BOLD,
    _E.CHECK_TEXT: A_NORMAL,
    _E.HOSTNAME: A_BOLD,
    _E.CPU_NICE: _P(BLUE, BLACK),
    _E.CPU_NICE_TEXT: A_BOLD | _P(BLUE, BLACK),
    _E.CPU_NORMAL: _P(GREEN, BLACK),
    _E.CPU_KERNEL: _P(RED, BLACK),
    _E.CPU_IOWAIT: A_BOLD | _P(BLACK, BLACK),
    _E.CPU_IRQ: _P(YELLOW, BLACK),
    _E.CPU_SOFTIRQ: _P(MAGENTA, BLACK),
    _E.CPU_STEAL: _P(CYAN, BLACK),
    _E.CPU_GUEST: _P(CYAN, BLACK),
}

_MONOCHROME = {
    _E.RESET_COLOR: A_NORMAL,
    _E.DEFAULT_COLOR: A_NORMAL,
    _E.FUNCTION_BAR: A_REVERSE,
    _E.FUNCTION_KEY: A_NORMAL,
    _E.PANEL_HEADER_FOCUS: A_REVERSE,
    _E.PANEL_HEADER_UNFOCUS: A_REVERSE,
    _E.PANEL_SELECTION_FOCUS: A_REVERSE,
    _E.PANEL_SELECTION_FOLLOW: A_REVERSE,
    _E.PANEL_SELECTION_UNFOCUS: A_BOLD,
    _E.FAILED_SEARCH: A_REVERSE | A_BOLD,
    _E.UPTIME: A_BOLD,
    _E.BATTERY: A_BOLD,
    _E.LARGE_NUMBER: A_BOLD,
    _E.METER_TEXT: A_NORMAL,
    _E.METER_VALUE: A_BOLD,
    _E.LED_COLOR: A_NORMAL,
    _E.TASKS_RUNNING: A_BOLD,
    _E.PROCESS: A_NORMAL,
    _E.PROCESS_SHADOW: A_DIM,
    _E.PROCESS_TAG: A_BOLD,
    _E.PROCESS_MEGABYTES: A_BOLD,
    _E.PROCESS_BASENAME: A_BOLD,
    _E.PROCESS_TREE: A_BOLD,
    _E.PROCESS_R_STATE: A_BOLD,
    _E.PROCESS_D_STATE: A_BOLD,
    _E.PROCESS_HIGH_PRIORITY: A_BOLD,
    _E.PROCESS_LOW_PRIORITY: A_DIM,
    _E.PROCESS_THREAD: A_BOLD,
    _E.PROCESS_THREAD_BASENAME: A_REVERSE,
    _E.BAR_BORDER: A_BOLD,
    _E.BAR_SHADOW: A_DIM,
    _E.SWAP: A_BOLD,
    _E.GRAPH_1: A_BOLD,
    _E.GRAPH_2: A_NORMAL,
    _E.MEMORY_USED: A_BOLD,
    _E.MEMORY_BUFFERS: A_NORMAL,
    _E.MEMORY_BUFFERS_TEXT: A_NORMAL,
    _E.MEMORY_CACHE: A_NORMAL,
    _E.LOAD_AVERAGE_FIFTEEN: A_DIM,
    _E.LOAD_AVERAGE_FIVE: A_NORMAL,
    _E.LOAD_AVERAGE_ONE: A_BOLD,
    _E.LOAD: A_BOLD,
    _E.HELP_BOLD: A_BOLD,
    _E.CLOCK: A_BOLD,
    _E.CHECK_BOX: A_BOLD,
    _E.CHECK_MARK: A_NORMAL,
    _E.CHECK_TEXT: A_NORMAL,
    _E.HOSTNAME: A_BOLD,
    _E.CPU_NICE: A_NORMAL,
    _E.CPU_NICE_TEXT: A_NORMAL,
    _E.CPU_NORMAL: A_BOLD,
    _E.CPU_KERNEL: A_BOLD,
    _E.CPU_IOWAIT: A_NORMAL,
    _E.CPU_IRQ: A_BOLD,
    _E.CPU_SOFTIRQ: A_BOLD,
    _E.CPU_STEAL: A_REVERSE,
    _E.CPU_GUEST: A_REVERSE,
}

_BLACKONWHITE = {
    _E.RESET_COLOR: _P(BLACK, WHITE),
    _E.DEFAULT_COLOR: _P(BLACK, WHITE),
    _E.FUNCTION_BAR: _P(BLACK, CYAN),
    _E.FUNCTION_KEY: _P(BLACK, WHITE),
    _E.PANEL_HEADER_FOCUS: _P(BLACK, GREEN),
    _E.PANEL_HEADER_UNFOCUS: _P(BLACK, GREEN),
    _E.PANEL_SELECTION_FOCUS: _P(BLACK, CYAN),
    _E.PANEL_SELECTION_FOLLOW: _P(BLACK, YELLOW),
    _E.PANEL_SELECTION_UNFOCUS: _P(BLUE, WHITE),
    _E.FAILED_SEARCH: _P(RED, CYAN),
    _E.UPTIME: _P(YELLOW, WHITE),
    _E.BATTERY: _P(YELLOW, WHITE),
    _E.LARGE_NUMBER: _P(RED, WHITE),
    _E.METER_TEXT: _P(BLUE, WHITE),
    _E.METER_VALUE: _P(BLACK, WHITE),
    _E.LED_COLOR: _P(GREEN, WHITE),
    _E.TASKS_RUNNING: _P(GREEN, WHITE),
    _E.PROCESS: _P(BLACK, WHITE),
    _E.PROCESS_SHADOW: A_BOLD | _P(BLACK, WHITE),
    _E.PROCESS_TAG: _P(WHITE, BLUE),
    _E.PROCESS_MEGABYTES: _P(BLUE, WHITE),
    _E.PROCESS_BASENAME: _P(BLUE, WHITE),
    _E.PROCESS_TREE: _P(GREEN, WHITE),
    _E.PROCESS_R_STATE: _P(GREEN, WHITE),
    _E.PROCESS_D_STATE: A_BOLD | _P(RED, WHITE),
    _E.PROCESS_HIGH_PRIORITY: _P(RED, WHITE),
    _E.PROCESS_LOW_PRIORITY: _P(GREEN, WHITE),
    _E.PROCESS_THREAD: _P(BLUE, WHITE),
    _E.PROCESS_THREAD_BASENAME: A_BOLD | _P(BLUE, WHITE),
    _E.BAR_BORDER: _P(BLUE, WHITE),
    _E.BAR_SHADOW: _P(BLACK, WHITE),
    _E.SWAP: _P(RED, WHITE),
    _E.GRAPH_1: A_BOLD | _P(BLUE, WHITE),
    _E.GRAPH_2: _P(BLUE, WHITE),
    _E.MEMORY_USED: _P(GREEN, WHITE),
    _E.MEMORY_BUFFERS: _P(CYAN, WHITE),
    _E.MEMORY_BUFFERS_TEXT: _P(CYAN, WHITE),
    _E.MEMORY_CACHE: _P(YELLOW, WHITE),
    _E.LOAD_AVERAGE_FIFTEEN: _P(BLACK, WHITE),
    _E.LOAD_AVERAGE_FIVE: _P(BLACK, WHITE),
    _E.LOAD_AVERAGE_ONE: _P(BLACK, WHITE),
    _E.LOAD: _P(BLACK, WHITE),
    _E.HELP_BOLD: _P(BLUE, WHITE),
    _E.CLOCK: _P(BLACK, WHITE),
    _E.CHECK_BOX: _P(BLUE, WHITE),
    _E.CHECK_MARK: _P(BLACK, WHITE),
    _E.CHECK_TEXT: _P(BLACK, WHITE),
    _E.HOSTNAME: _P(BLACK, WHITE),
    _E.CPU_NICE: _P(CYAN, WHITE),
    _E.CPU_NICE_TEXT: _P(CYAN, WHITE),
    _E.CPU_NORMAL: _P(GREEN, WHITE),
    _E.CPU_KERNEL: _P(RED, WHITE),
    _E.CPU_IOWAIT: A_BOLD | _P(BLACK, WHITE),
    _E.CPU_IRQ: _P(BLUE, WHITE),
    _E.CPU_SOFTIRQ: _P(BLUE, WHITE),
    _E.CPU_STEAL: _P(CYAN, WHITE),
    _E.CPU_GUEST: _P(CYAN, WHITE),
}

_LIGHTTERMINAL = {
    _E.RESET_COLOR: _P(BLACK, BLACK),
    _E.DEFAULT_COLOR: _P(BLACK, BLACK),
    _E.FUNCTION_BAR: _P(BLACK, CYAN),
    _E.FUNCTION_KEY: _P(BLACK, BLACK),
    _E.PANEL_HEADER_FOCUS: _P(BLACK, GREEN),
    _E.PANEL_HEADER_UNFOCUS: _P(BLACK, GREEN),
    _E.PANEL_SELECTION_FOCUS: _P(BLACK, CYAN),
    _E.PANEL_SELECTION_FOLLOW: _P(BLACK, YELLOW),
    _E.PANEL_SELECTION_UNFOCUS: _P(BLUE, BLACK),
    _E.FAILED_SEARCH: _P(RED, CYAN),
    _E.UPTIME: _P(YELLOW, BLACK),
    _E.BATTERY: _P(YELLOW, BLACK),
    _E.LARGE_NUMBER: _P(RED, BLACK),
    _E.METER_TEXT: _P(BLUE, BLACK),
    _E.METER_VALUE: _P(BLACK, BLACK),
    _E.LED_COLOR: _P(GREEN, BLACK),
    _E.TASKS_RUNNING: _P(GREEN, BLACK),
    _E.PROCESS: _P(BLACK, BLACK),
    _E.PROCESS_SHADOW: A_BOLD | GRAY_BLACK,
    _E.PROCESS_TAG: _P(WHITE, BLUE),
    _E.PROCESS_MEGABYTES: _P(BLUE, BLACK),
    _E.PROCESS_BASENAME: _P(GREEN, BLACK),
    _E.PROCESS_TREE: _P(BLUE, BLACK),
    _E.PROCESS_R_STATE: _P(GREEN, BLACK),
    _E.PROCESS_D_STATE: A_BOLD | _P(RED, BLACK),
    _E.PROCESS_HIGH_PRIORITY: _P(RED, BLACK),
    _E.PROCESS_LOW_PRIORITY: _P(GREEN, BLACK),
    _E.PROCESS_THREAD: _P(BLUE, BLACK),
    _E.PROCESS_THREAD_BASENAME: A_BOLD | _P(BLUE, BLACK),
    _E.BAR_BORDER: _P(BLUE, BLACK),
    _E.BAR_SHADOW: GRAY_BLACK,
    _E.SWAP: _P(RED, BLACK),
    _E.GRAPH_1: A_BOLD | _P(CYAN, BLACK),
    _E.GRAPH_2: _P(CYAN, BLACK),
    _E.MEMORY_USED: _P(GREEN, BLACK),
    _E.MEMORY_BUFFERS: _P(CYAN, BLACK),
    _E.MEMORY_BUFFERS_TEXT: _P(CYAN, BLACK),
    _E.MEMORY_CACHE: _P(YELLOW, BLACK),
    _E.LOAD_AVERAGE_FIFTEEN: _P(BLACK, BLACK),
    _E.LOAD_AVERAGE_FIVE: _P(BLACK, BLACK),
    _E.LOAD_AVERAGE_ONE: _P(BLACK, BLACK),
    _E.LOAD: _P(WHITE, BLACK),
    _E.HELP_BOLD: _P(BLUE, BLACK),
    _E.CLOCK: _P(WHITE, BLACK),
    _E.CHECK_BOX: _P(BLUE, BLACK),
    _E.CHECK_MARK: _P(BLACK, BLACK),
    _E.CHECK_TEXT: _P(BLACK, BLACK),
    _E.HOSTNAME: _P(WHITE, BLACK),
    _E.CPU_NICE: _P(CYAN, BLACK),
    _E.CPU_NICE_TEXT: _P(CYAN, BLACK),
    _E.CPU_NORMAL: _P(GREEN, BLACK),
    _E.CPU_KERNEL: _P(RED, BLACK),
    _E.CPU_IOWAIT: A_BOLD | _P(BLACK, BLACK),
    _E.CPU_IRQ: A_BOLD | _P(BLUE, BLACK),
    _E.CPU_SOFTIRQ: _P(BLUE, BLACK),
    _E.CPU_STEAL: _P(BLACK, BLACK),
    _E.CPU_GUEST: _P(BLACK, BLACK),
}

_MIDNIGHT = {
    _E.RESET_COLOR: _P(WHITE, BLUE),
    _E.DEFAULT_COLOR: _P(WHITE, BLUE),
    _E.FUNCTION_BAR: _P(BLACK, CYAN),
    _E.FUNCTION_KEY: A_NORMAL,
    _E.PANEL_HEADER_FOCUS: _P(BLACK, CYAN),
    _E.PANEL_HEADER_UNFOCUS: _P(BLACK, CYAN),
    _E.PANEL_SELECTION_FOCUS: _P(BLACK, WHITE),
    _E.PANEL_SELECTION_FOLLOW: _P(BLACK, YELLOW),
    _E.PANEL_SELECTION_UNFOCUS: A_BOLD | _P(YELLOW, BLUE),
    _E.FAILED_SEARCH: _P(RED, CYAN),
    _E.UPTIME: A_BOLD | _P(YELLOW, BLUE),
    _E.BATTERY: A_BOLD | _P(YELLOW, BLUE),
    _E.LARGE_NUMBER: A_BOLD | _P(RED, BLUE),
    _E.METER_TEXT: _P(CYAN, BLUE),
    _E.METER_VALUE: A_BOLD | _P(CYAN, BLUE),
    _E.LED_COLOR: _P(GREEN, BLUE),
    _E.TASKS_RUNNING: A_BOLD | _P(GREEN, BLUE),
    _E.PROCESS: _P(WHITE, BLUE),
    _E.PROCESS_SHADOW: A_BOLD | _P(BLACK, BLUE),
    _E.PROCESS_TAG: A_BOLD | _P(YELLOW, BLUE),
    _E.PROCESS_MEGABYTES: _P(CYAN, BLUE),
    _E.PROCESS_BASENAME: A_BOLD | _P(CYAN, BLUE),
    _E.PROCESS_TREE: _P(CYAN, BLUE),
    _E.PROCESS_R_STATE: _P(GREEN, BLUE),
    _E.PROCESS_D_STATE: A_BOLD | _P(RED, BLUE),
    _E.PROCESS_HIGH_PRIORITY: _P(RED, BLUE),
    _E.PROCESS_LOW_PRIORITY: _P(GREEN, BLUE),
    _E.PROCESS_THREAD: _P(GREEN, BLUE),
    _E.PROCESS_THREAD_BASENAME: A_BOLD | _P(GREEN, BLUE),
    _E.BAR_BORDER: A_BOLD | _P(YELLOW, BLUE),
    _E.BAR_SHADOW: _P(CYAN, BLUE),
    _E.SWAP: _P(RED, BLUE),
    _E.GRAPH_1: A_BOLD | _P(CYAN, BLUE),
    _E.GRAPH_2: _P(CYAN, BLUE),
    _E.MEMORY_USED: A_BOLD | _P(GREEN, BLUE),
    _E.MEMORY_BUFFERS: A_BOLD | _P(CYAN, BLUE),
    _E.MEMORY_BUFFERS_TEXT: A_BOLD | _P(CYAN, BLUE),
    _E.MEMORY_CACHE: A_BOLD | _P(YELLOW, BLUE),
    _E.LOAD_AVERAGE_FIFTEEN: A_BOLD | _P(BLACK, BLUE),
    _E.LOAD_AVERAGE_FIVE: A_NORMAL | _P(WHITE, BLUE),
    _E.LOAD_AVERAGE_ONE: A_BOLD | _P(WHITE, BLUE),
    _E.LOAD: A_BOLD | _P(WHITE, BLUE),
    _E.HELP_BOLD: A_BOLD | _P(CYAN, BLUE),
    _E.CLOCK: _P(WHITE, BLUE),
    _E.CHECK_BOX: _P(CYAN, BLUE),
    _E.CHECK_MARK: A_BOLD | _P(WHITE, BLUE),
    _E.CHECK_TEXT: A_NORMAL | _P(WHITE, BLUE),
    _E.HOSTNAME: _P(WHITE, BLUE),
    _E.CPU_NICE: A_BOLD | _P(CYAN, BLUE),
    _E.CPU_NICE_TEXT: A_BOLD | _P(CYAN, BLUE),
    _E.CPU_NORMAL: A_BOLD | _P(GREEN, BLUE),
    _E.CPU_KERNEL: A_BOLD | _P(RED, BLUE),
    _E.CPU_IOWAIT: A_BOLD | _P(BLUE, BLUE),
    _E.CPU_IRQ: A_BOLD | _P(BLACK, BLUE),
    _E.CPU_SOFTIRQ: _P(BLACK, BLUE),
    _E.CPU_STEAL: _P(WHITE, BLUE),
    _E.CPU_GUEST: _P(WHITE, BLUE),
}

_BLACKNIGHT = {
    _E.RESET_COLOR: _P(CYAN, BLACK),
    _E.DEFAULT_COLOR: _P(CYAN, BLACK),
    _E.FUNCTION_BAR: _P(BLACK, GREEN),
    _E.FUNCTION_KEY: _P(CYAN, BLACK),
    _E.PANEL_HEADER_FOCUS: _P(BLACK, GREEN),
    _E.PANEL_HEADER_UNFOCUS: _P(BLACK, GREEN),
    _E.PANEL_SELECTION_FOCUS: _P(BLACK, CYAN),
    _E.PANEL_SELECTION_FOLLOW: _P(BLACK, YELLOW),
    _E.PANEL_SELECTION_UNFOCUS: _P(BLACK, WHITE),
    _E.FAILED_SEARCH: _P(RED, CYAN),
    _E.UPTIME: _P(GREEN, BLACK),
    _E.BATTERY: _P(GREEN, BLACK),
    _E.LARGE_NUMBER: A_BOLD | _P(RED, BLACK),
    _E.METER_TEXT: _P(CYAN, BLACK),
    _E.METER_VALUE: _P(GREEN, BLACK),
    _E.LED_COLOR: _P(GREEN, BLACK),
    _E.TASKS_RUNNING: A_BOLD | _P(GREEN, BLACK),
    _E.PROCESS: _P(CYAN, BLACK),
    _E.PROCESS_SHADOW: A_BOLD | GRAY_BLACK,
    _E.PROCESS_TAG: A_BOLD | _P(YELLOW, BLACK),
    _E.PROCESS_MEGABYTES: A_BOLD | _P(GREEN, BLACK),
    _E.PROCESS_BASENAME: A_BOLD | _P(GREEN, BLACK),
    _E.PROCESS_TREE: _P(CYAN, BLACK),
    _E.PROCESS_THREAD: _P(GREEN, BLACK),
    _E.PROCESS_THREAD_BASENAME: A_BOLD | _P(BLUE, BLACK),
    _E.PROCESS_R_STATE: _P(GREEN, BLACK),
    _E.PROCESS_D_STATE: A_BOLD | _P(RED, BLACK),
    _E.PROCESS_HIGH_PRIORITY: _P(RED, BLACK),
    _E.PROCESS_LOW_PRIORITY: _P(GREEN, BLACK),
    _E.BAR_BORDER: A_BOLD | _P(GREEN, BLACK),
    _E.BAR_SHADOW: _P(CYAN, BLACK),
    _E.SWAP: _P(RED, BLACK),
    _E.GRAPH_1: A_BOLD | _P(GREEN, BLACK),
    _E.GRAPH_2: _P(GREEN, BLACK),
    _E.MEMORY_USED: _P(GREEN, BLACK),
    _E.MEMORY_BUFFERS: _P(BLUE, BLACK),
    _E.MEMORY_BUFFERS_TEXT: A_BOLD | _P(BLUE, BLACK),
    _E.MEMORY_CACHE: _P(YELLOW, BLACK),
    _E.LOAD_AVERAGE_FIFTEEN: _P(GREEN, BLACK),
    _E.LOAD_AVERAGE_FIVE: _P(GREEN, BLACK),
    _E.LOAD_AVERAGE_ONE: A_BOLD | _P(GREEN, BLACK),
    _E.LOAD: A_BOLD,
    _E.HELP_BOLD: A_BOLD | _P(CYAN, BLACK),
    _E.CLOCK: _P(GREEN, BLACK),
    _E.CHECK_BOX: _P(GREEN, BLACK),
    _E.CHECK_MARK: A_BOLD | _P(GREEN, BLACK),
    _E.CHECK_TEXT: _P(CYAN, BLACK),
    _E.HOSTNAME: _P(GREEN, BLACK),
    _E.CPU_NICE: _P(BLUE, BLACK),
    _E.CPU_NICE_TEXT: A_BOLD | _P(BLUE, BLACK),
    _E.CPU_NORMAL: _P(GREEN, BLACK),
    _E.CPU_KERNEL: _P(RED, BLACK),
    _E.CPU_IOWAIT: _P(YELLOW, BLACK),
    _E.CPU_IRQ: A_BOLD | _P(BLUE, BLACK),
    _E.CPU_SOFTIRQ: _P(BLUE, BLACK),
    _E.CPU_STEAL: _P(CYAN, BLACK),
    _E.CPU_GUEST: _P(CYAN, BLACK),
}


def _broken_gray() -> dict[ColorElement, int]:
    shadow = A_BOLD | GRAY_BLACK
    return {
        element: (_P(WHITE, BLACK) if value == shadow else value)
        for element, value in _DEFAULT.items()
    }


_SCHEMES = {
    ColorScheme.DEFAULT: _DEFAULT,
    ColorScheme.MONOCHROME: _MONOCHROME,
    ColorScheme.BLACKONWHITE: _BLACKONWHITE,
    ColorScheme.LIGHTTERMINAL: _LIGHTTERMINAL,
    ColorScheme.MIDNIGHT: _MIDNIGHT,
    ColorScheme.BLACKNIGHT: _BLACKNIGHT,
    ColorScheme.BROKENGRAY: _broken_gray(),
}


def scheme_colors(scheme: int) -> dict[ColorElement, int]:
    """Return the attribute of every element under the given scheme.

    Raises ValueError for an unknown scheme number.
    """
    table = _SCHEMES[ColorScheme(scheme)]
    return {element: table.get(element, 0) for element in ColorElement}


def pair_definitions(scheme: int, num_colors: int) -> dict[int, tuple[int, int]]:
    """Return the (foreground, background) of every colour pair for a scheme.

    A background of -1 means the terminal's default background.
    """
    scheme = ColorScheme(scheme)
    black_night = scheme == ColorScheme.BLACKNIGHT
    pairs: dict[int, tuple[int, int]] = {}
    for fg in range(8):
        for bg in range(8):
            actual_bg = bg if black_night or bg != 0 else -1
            pairs[color_index(fg, bg)] = (fg, actual_bg)
    gray_fg = 8 if num_colors > 8 else 0
    gray_bg = 0 if black_night else -1
    pairs[GRAY_BLACK_INDEX] = (gray_fg, gray_bg)
    return pairs