"""CPU affinity of processes and the check-box list used to edit it."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, field

from topmeter.list_items import CheckItem


@dataclass
class Affinity:
    """The CPUs a process may run on, in the order they were added."""

    cpus: list[int] = field(default_factory=list)

    def add(self, cpu: int) -> None:
        """Allow the process to run on cpu."""
        self.cpus.append(cpu)

    def __iter__(self) -> Iterator[int]:
        return iter(self.cpus)

    def __len__(self) -> int:
        return len(self.cpus)


def get_affinity(pid: int, cpu_count: int) -> Affinity | None:
    """Return the affinity of pid among the first cpu_count CPUs.

    Returns None when the affinity cannot be read.
    """
    getter = getattr(os, "sched_getaffinity", None)
    if getter is None:
        return None
    try:
        allowed = getter(pid)
    except OSError:
        return None
    affinity = Affinity()
    for cpu in range(cpu_count):
        if cpu in allowed:
            affinity.add(cpu)
    return affinity


def set_affinity(pid: int, affinity: Affinity) -> bool:
    """Restrict pid to the CPUs of affinity; return whether that worked."""
    setter = getattr(os, "sched_setaffinity", None)
    if setter is None:
        return False
    try:
        setter(pid, set(affinity.cpus))
    except OSError:
        return False
    return True


def affinity_items(
    affinity: Affinity,
    cpu_count: int,
    cpu_id: Callable[[int], int],
) -> list[CheckItem]:
    """Return one check box per CPU, ticked where the affinity allows it.

    ``cpu_id`` gives the number shown for each zero-based CPU position.
    The affinity's CPUs are expected in ascending order.
    """
    items: list[CheckItem] = []
    cursor = 0
    cpus = affinity.cpus
    for i in range(cpu_count):
        checked = cursor < len(cpus) and cpus[cursor] == i
        if checked:
            cursor += 1
        items.append(CheckItem(str(cpu_id(i))[:8], checked))
    return items


def affinity_from_items(items: Sequence[CheckItem]) -> Affinity:
    """Return the affinity made of the positions of the ticked boxes."""
    affinity = Affinity()
    for i, item in enumerate(items):
        if item.checked:
            affinity.add(i)
    return affinity