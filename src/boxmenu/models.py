"""Menu data model: title, body lines, selections and prompt."""

from dataclasses import dataclass
from typing import Iterable, Optional, Union

from boxmenu.palette import MenuColor
from boxmenu.utils.debug import debug_model
from boxmenu.utils.exceptions import OutOfRangeError


@dataclass(frozen=True)
class MenuTitle:
    """Title shown centered at the top of the menu. Empty text hides it."""

    text: str = ""
    color: MenuColor = MenuColor.DEFAULT


@dataclass(frozen=True)
class MenuLine:
    """A body line of the menu."""

    text: str
    color: MenuColor = MenuColor.DEFAULT


@dataclass(frozen=True)
class MenuSelection:
    """A selectable option: the key the user types and its description."""

    key: str
    label: str
    color: MenuColor = MenuColor.DEFAULT


class Menu:
    """Menu contents.

    Lines and selections keep their insertion order, which is also the
    display order. Selection keys should be unique ignoring case; when
    they are not, the first one wins during validation.
    """

    def __init__(
        self,
        title: Union[MenuTitle, str, None] = None,
        prompt: str = "",
    ):
        self._title = MenuTitle()
        self._lines: list[MenuLine] = []
        self._selections: list[MenuSelection] = []
        self._prompt = prompt
        if title is not None:
            self.set_title(title)

    # Title

    def get_title(self) -> MenuTitle:
        return self._title

    def set_title(
        self,
        title: Union[MenuTitle, str],
        color: MenuColor = MenuColor.DEFAULT,
    ) -> None:
        """Set the title from a MenuTitle or from text and color."""
        if isinstance(title, MenuTitle):
            self._title = title
        else:
            self._title = MenuTitle(title or "", color)

    # Body lines

    def get_lines(self) -> list[MenuLine]:
        return list(self._lines)

    def set_lines(self, lines: Iterable[MenuLine]) -> None:
        self._lines = list(lines)

    def add_line(self, text: str, color: MenuColor = MenuColor.DEFAULT) -> int:
        """Append a body line. Returns the new line count."""
        self._lines.append(MenuLine(text, color))
        return len(self._lines)

    def add_lines(self, texts: Iterable[str]) -> int:
        """Append several default-colored lines. Returns the new line count."""
        self._lines.extend(MenuLine(text) for text in texts)
        return len(self._lines)

    def count_lines(self) -> int:
        return len(self._lines)

    def remove_line(self, pos: int) -> None:
        """Remove the line at pos.

        Raises:
            OutOfRangeError: pos is negative or not below count_lines()
        """
        size = len(self._lines)
        if pos < 0 or pos >= size:
            debug_model("remove_line out of range", pos=pos, size=size)
            raise OutOfRangeError(
                f"Line position {pos} out of range for {size} line(s)",
                position=pos,
                count=1,
                size=size,
            )
        del self._lines[pos]

    def remove_lines(self, start: int, count: int) -> None:
        """Remove count lines beginning at start.

        Nothing is removed when the range is invalid.

        Raises:
            OutOfRangeError: start or count is negative, or start + count
                exceeds count_lines()
        """
        size = len(self._lines)
        if start < 0 or count < 0 or start + count > size:
            debug_model(
                "remove_lines out of range", start=start, count=count, size=size
            )
            raise OutOfRangeError(
                f"Line range {start}..{start + count} out of range for {size} line(s)",
                position=start,
                count=count,
                size=size,
            )
        del self._lines[start : start + count]

    # Selections

    def get_selections(self) -> list[MenuSelection]:
        return list(self._selections)

    def set_selections(self, selections: Iterable[MenuSelection]) -> None:
        self._selections = list(selections)

    def add_selection(
        self,
        option: Union[MenuSelection, str],
        label: Optional[str] = None,
        color: MenuColor = MenuColor.DEFAULT,
    ) -> int:
        """Append a selection option. Returns the new selection count.

        Accepts either a ready MenuSelection or a key with its label:

            menu.add_selection(MenuSelection("A", "Add"))
            menu.add_selection("A", "Add", MenuColor.GREEN)
        """
        if isinstance(option, MenuSelection):
            selection = option
        else:
            if label is None:
                raise TypeError("add_selection() needs a label when given a key")
            selection = MenuSelection(option, label, color)
        self._selections.append(selection)
        return len(self._selections)

    def add_selections(self, selections: Iterable[MenuSelection]) -> int:
        """Append several selection options. Returns the new selection count."""
        self._selections.extend(selections)
        return len(self._selections)

    def count_selections(self) -> int:
        return len(self._selections)

    # Prompt

    def get_prompt(self) -> str:
        return self._prompt

    def set_prompt(self, prompt: str) -> None:
        self._prompt = prompt or ""
