"""Validation of the user's menu choice."""

from typing import Callable, NamedTuple, Optional

from boxmenu.models import Menu
from boxmenu.render import MenuRenderer
from boxmenu.utils.constants import INVALID_CHOICE_TEMPLATE
from boxmenu.utils.debug import debug_input

ReadLine = Callable[[], str]


class SelectionResult(NamedTuple):
    """Outcome of one selection attempt.

    ``key`` is the normalized input when it matched an option and empty
    otherwise; ``errors`` then holds exactly one message.
    """

    key: str
    errors: list[str]

    @property
    def is_valid(self) -> bool:
        return bool(self.key)


def normalize_choice(raw: str) -> str:
    """Case-fold the raw input. Whitespace is kept as typed."""
    return raw.lower()


def match_selection(menu: Menu, raw: str) -> SelectionResult:
    """Match raw input against the menu's option keys, first match wins."""
    choice = normalize_choice(raw)
    for option in menu.get_selections():
        if normalize_choice(option.key) == choice:
            debug_input("choice matched", choice=choice)
            return SelectionResult(choice, [])

    debug_input("choice rejected", raw=repr(raw))
    return SelectionResult("", [INVALID_CHOICE_TEMPLATE.format(choice=choice)])


def get_valid_selection(
    menu: Menu,
    renderer: Optional[MenuRenderer] = None,
    read_line: Optional[ReadLine] = None,
) -> SelectionResult:
    """Prompt once, read one line and validate it against the menu.

    Does not retry; re-prompting after an invalid choice is up to the
    caller. EOFError from the input stream propagates.

    Args:
        menu: Menu whose selections are valid choices
        renderer: Renderer used to draw the prompt
        read_line: Reads one line; defaults to the renderer console's input()
    """
    renderer = renderer or MenuRenderer()
    renderer.draw_prompt(menu.get_prompt())
    if read_line is None:
        read_line = renderer.console.input
    return match_selection(menu, read_line())
