"""boxmenu - Bordered, colorized terminal menus with validated selection input."""

from importlib.metadata import version

__version__ = version("boxmenu")

from boxmenu.messages import MessageKind, MessageQueue, StatusMessage
from boxmenu.models import Menu, MenuLine, MenuSelection, MenuTitle
from boxmenu.palette import MenuColor
from boxmenu.render import LayoutStyle, MenuRenderer
from boxmenu.selection import SelectionResult, get_valid_selection, match_selection
from boxmenu.utils.exceptions import BoxMenuError, OutOfRangeError

__all__ = [
    "BoxMenuError",
    "LayoutStyle",
    "Menu",
    "MenuColor",
    "MenuLine",
    "MenuRenderer",
    "MenuSelection",
    "MenuTitle",
    "MessageKind",
    "MessageQueue",
    "OutOfRangeError",
    "SelectionResult",
    "StatusMessage",
    "get_valid_selection",
    "match_selection",
]
