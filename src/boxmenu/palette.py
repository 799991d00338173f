"""Semantic menu colors and their terminal styles."""

from enum import Enum
from typing import Optional


class MenuColor(Enum):
    """Semantic color tokens for menu text and status messages."""

    ERROR_MESSAGE = "error_message"
    EXCEPTION_MESSAGE = "exception_message"
    SUCCESS_MESSAGE = "success_message"
    INSTRUCTIONS_MESSAGE = "instructions_message"
    ACCOUNT = "account"
    TITLE = "title"
    # Strength indicators
    VERY_WEAK = "very_weak"
    WEAK = "weak"
    GOOD = "good"
    STRONG = "strong"
    VERY_STRONG = "very_strong"
    # Plain colors
    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    DEFAULT = "default"


# Token -> rich color name. DEFAULT maps to None (terminal default).
COLOR_STYLES: dict[MenuColor, Optional[str]] = {
    MenuColor.ERROR_MESSAGE: "bright_red",
    MenuColor.EXCEPTION_MESSAGE: "red",
    MenuColor.SUCCESS_MESSAGE: "bright_green",
    MenuColor.INSTRUCTIONS_MESSAGE: "green",
    MenuColor.ACCOUNT: "bright_magenta",
    MenuColor.TITLE: "blue",
    MenuColor.VERY_WEAK: "red",
    MenuColor.WEAK: "bright_red",
    MenuColor.GOOD: "bright_cyan",
    MenuColor.STRONG: "green",
    MenuColor.VERY_STRONG: "bright_green",
    MenuColor.RED: "bright_red",
    MenuColor.GREEN: "bright_green",
    MenuColor.BLUE: "bright_blue",
    MenuColor.DEFAULT: None,
}


def style_for(color: MenuColor) -> Optional[str]:
    """Return the rich style for a token, or None for the default color."""
    return COLOR_STYLES[color]

