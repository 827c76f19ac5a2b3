"""Colour schemes, key codes, function bar, incremental search, setup-page items and CPU affinity for a process viewer."""

__version__ = "0.1.0"