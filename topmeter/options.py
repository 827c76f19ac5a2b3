"""Entries of the display-options and colour-scheme setup pages."""

from __future__ import annotations

from collections.abc import Sequence

from topmeter.colors import ColorScheme
from topmeter.list_items import CheckItem

DISPLAY_OPTIONS: tuple[tuple[str, str], ...] = (
    ("Tree view", "tree_view"),
    ("Shadow other users' processes", "shadow_other_users"),
    ("Hide kernel threads", "hide_kernel_threads"),
    ("Hide userland process threads", "hide_userland_threads"),
    ("Display threads in a different color", "highlight_threads"),
    ("Show custom thread names", "show_thread_names"),
    ("Show program path", "show_program_path"),
    ('Highlight program "basename"', "highlight_base_name"),
    ("Highlight large numbers in memory counters", "highlight_megabytes"),
    ("Leave a margin around header", "header_margin"),
    (
        "Detailed CPU time (System/IO-Wait/Hard-IRQ/Soft-IRQ/Steal/Guest)",
        "detailed_cpu_time",
    ),
    ("Count CPUs from 0 instead of 1", "count_cpus_from_zero"),
    ("Update process names on every refresh", "update_process_names"),
    ("Add guest time in CPU meter percentage", "account_guest_in_cpu_meter"),
)

COLOR_SCHEME_NAMES: tuple[str, ...] = (
    "Default",
    "Monochromatic",
    "Black on White",
    "Light Terminal",
    "MC",
    "Black Night",
    "Broken Gray",
)


def display_option_items(settings: object) -> list[CheckItem]:
    """Return one check box per display option, bound to the settings."""
    return [CheckItem(label, ref=(settings, attribute)) for label, attribute in DISPLAY_OPTIONS]


def toggle_option(items: Sequence[CheckItem], index: int) -> bool:
    """Flip the option at index, mark its settings changed, return the new state."""
    item = items[index]
    state = item.toggle()
    if item.ref is not None:
        setattr(item.ref[0], "changed", True)
    return state


def _check_index(items_len: int, index: int) -> None:
    if not 0 <= index < items_len:
        raise IndexError(f"colour scheme index out of range: {index}")


def color_scheme_items(selected: int) -> list[CheckItem]:
    """Return one check box per colour scheme with the selected one ticked."""
    _check_index(len(COLOR_SCHEME_NAMES), selected)
    return [CheckItem(name, i == selected) for i, name in enumerate(COLOR_SCHEME_NAMES)]


def select_color_scheme(items: Sequence[CheckItem], settings: object, index: int) -> ColorScheme:
    """Tick only the scheme at index and store it in the settings."""
    _check_index(len(items), index)
    for item in items:
        item.checked = False
    items[index].checked = True
    setattr(settings, "color_scheme", index)
    setattr(settings, "changed", True)
    return ColorScheme(index)