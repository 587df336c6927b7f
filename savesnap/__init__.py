"""Hotkey-driven snapshot and restore of a single save-game file."""

__version__ = "1.0.0"
