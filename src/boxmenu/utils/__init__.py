"""Utilities for boxmenu."""

from boxmenu.utils.exceptions import BoxMenuError, OutOfRangeError

__all__ = ["BoxMenuError", "OutOfRangeError"]
