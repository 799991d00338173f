"""Layout and drawing of framed menus.

Every framed row is built as a rich ``Text`` so that only the content span
carries a color; borders, padding and dividers always use the terminal
default. Layout is recomputed from the menu and the current width on every
call, nothing is cached between renders.

Layout for a terminal ``width`` of 32 (``area = width - 2``)::

    +-----------------------------+      divider: corner, width - 3 fills, corner
    |          Main Menu           |     centered title
    +-----------------------------+
    | This is a test line          |     body line, one leading space
    +-----------------------------+
    | A    Awesomesauce!           |     key padded to 5 columns, then label
    +-----------------------------+
    Enter an option:                     prompt, unframed

Dividers are ``width - 1`` columns while framed rows are ``width`` columns,
so each right-hand corner sits one column left of the right border.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from rich.console import Console
from rich.text import Text

from boxmenu.messages import MessageQueue, StatusMessage
from boxmenu.models import Menu, MenuSelection
from boxmenu.palette import MenuColor, style_for
from boxmenu.utils.config import Config
from boxmenu.utils.constants import (
    BORDER_CHAR,
    BORDER_COLUMNS,
    CORNER_CHAR,
    DEFAULT_PROMPT,
    FILL_CHAR,
    KEY_COLUMN_WIDTH,
)
from boxmenu.utils.debug import debug_render


@dataclass(frozen=True)
class LayoutStyle:
    """Glyphs and defaults used when laying out a menu."""

    corner: str = CORNER_CHAR
    fill: str = FILL_CHAR
    border: str = BORDER_CHAR
    key_width: int = KEY_COLUMN_WIDTH
    default_prompt: str = DEFAULT_PROMPT


DEFAULT_STYLE = LayoutStyle()


def working_area(width: int) -> int:
    """Interior columns between the two vertical borders."""
    return width - BORDER_COLUMNS


def divider(width: int, style: LayoutStyle = DEFAULT_STYLE) -> Text:
    """Horizontal rule: corner, width - 3 fill characters, corner."""
    fill_count = max(0, width - 3)
    return Text(style.corner + style.fill * fill_count + style.corner)


def center_padding(text_length: int, area: int) -> tuple[int, int]:
    """Left and right padding that centers text_length columns in area.

    The left side is padded so the text ends at ``area // 2 + text_length // 2``;
    the right side gets ``area // 2 - text_length // 2`` plus one more column
    when area is odd. Both are clamped at zero.
    """
    half = area // 2
    left = half + text_length // 2 - text_length
    right = half - text_length // 2 + area % 2
    return max(0, left), max(0, right)


def frame_line(
    text: str,
    width: int,
    color: MenuColor = MenuColor.DEFAULT,
    centered: bool = False,
    style: LayoutStyle = DEFAULT_STYLE,
) -> Text:
    """Enclose text in vertical borders, padded to the working area."""
    # Measure what rich will print: control codes are stripped
    content = Text(text).plain
    length = len(content)
    area = working_area(width)
    if centered:
        left, right = center_padding(length, area)
    else:
        # One leading space after the left border
        left = 1
        right = max(0, area - (length + 1))
    if left + length + right > area:
        debug_render("line overflows working area", width=width, length=length)

    row = Text(style.border)
    row.append(" " * left)
    row.append(content, style=style_for(color))
    row.append(" " * right)
    row.append(style.border)
    return row


def selection_text(option: MenuSelection, style: LayoutStyle = DEFAULT_STYLE) -> str:
    """Option key padded to the key column, followed by its label."""
    return option.key.ljust(style.key_width) + option.label


def message_line(message: StatusMessage) -> Text:
    """Unframed status line, fully colored, with its tag."""
    return Text(message.format(), style=style_for(message.color))


class MenuRenderer:
    """Draws menus to a rich console.

    Args:
        console: Target console; a new stdout console when omitted
        style: Glyphs and defaults
        config: Settings for screen clearing and the headless fallback width
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        style: Optional[LayoutStyle] = None,
        config: Optional[Config] = None,
    ):
        self.console = console or Console()
        self.style = style or DEFAULT_STYLE
        self.config = config or Config()

    def terminal_width(self, width: Optional[int] = None) -> int:
        """Width to lay out for: explicit, else queried from the terminal."""
        if width is not None:
            return width
        if self.console.is_terminal:
            return self.console.size.width
        return self.config.fallback_width

    def build(
        self,
        menu: Menu,
        messages: Sequence[StatusMessage] = (),
        width: Optional[int] = None,
    ) -> list[Text]:
        """Lay out status messages and the framed menu sections.

        Returns the rows to write, without the prompt.
        """
        width = self.terminal_width(width)
        rows = [message_line(message) for message in messages]

        rows.append(divider(width, self.style))

        title = menu.get_title()
        if title.text:
            rows.append(
                frame_line(title.text, width, title.color, True, self.style)
            )
            rows.append(divider(width, self.style))

        lines = menu.get_lines()
        if lines:
            for line in lines:
                rows.append(frame_line(line.text, width, line.color, style=self.style))
            rows.append(divider(width, self.style))

        selections = menu.get_selections()
        if selections:
            rows.extend(self._selection_rows(selections, width))
            rows.append(divider(width, self.style))

        return rows

    def render(
        self,
        menu: Menu,
        messages: Optional[MessageQueue] = None,
        width: Optional[int] = None,
        with_prompt: bool = True,
    ) -> list[Text]:
        """Clear the screen and draw messages, menu and prompt.

        Pending messages are drained from the queue. Pass with_prompt=False
        when the prompt is drawn by get_valid_selection() instead. Returns
        the framed rows written before the prompt.
        """
        pending = messages.drain() if messages is not None else []
        width = self.terminal_width(width)
        rows = self.build(menu, pending, width)
        debug_render(
            "render",
            width=width,
            messages=len(pending),
            lines=menu.count_lines(),
            selections=menu.count_selections(),
        )

        if self.config.clear_screen:
            self.console.clear()
        for row in rows:
            self._write(row)
        if with_prompt:
            self.draw_prompt(menu.get_prompt())
        return rows

    def draw_divider(self, width: Optional[int] = None) -> None:
        self._write(divider(self.terminal_width(width), self.style))

    def draw_line(
        self,
        text: str,
        color: MenuColor = MenuColor.DEFAULT,
        centered: bool = False,
        width: Optional[int] = None,
    ) -> None:
        width = self.terminal_width(width)
        self._write(frame_line(text, width, color, centered, self.style))

    def draw_selections(
        self, options: Iterable[MenuSelection], width: Optional[int] = None
    ) -> None:
        for row in self._selection_rows(options, self.terminal_width(width)):
            self._write(row)

    def draw_prompt(self, text: str = "") -> None:
        """Write the prompt without borders or a trailing newline."""
        self._write(Text(text or self.style.default_prompt), end="")

    def draw_messages(self, messages: Iterable[StatusMessage]) -> None:
        for message in messages:
            self._write(message_line(message))

    def _selection_rows(
        self, options: Iterable[MenuSelection], width: int
    ) -> list[Text]:
        return [
            frame_line(
                selection_text(option, self.style),
                width,
                option.color,
                style=self.style,
            )
            for option in options
        ]

    def _write(self, row: Text, end: str = "\n") -> None:
        # soft_wrap stops rich from re-wrapping or cropping the row
        self.console.print(row, soft_wrap=True, end=end)
