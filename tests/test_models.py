"""Tests for the menu model."""

import pytest

from boxmenu.models import Menu, MenuLine, MenuSelection, MenuTitle
from boxmenu.palette import MenuColor
from boxmenu.utils.exceptions import OutOfRangeError


def _menu_with_lines(count: int) -> Menu:
    menu = Menu()
    menu.add_lines([f"line {i}" for i in range(count)])
    return menu


class TestTitle:
    def test_new_menu_has_empty_title(self):
        title = Menu().get_title()
        assert title.text == ""
        assert title.color is MenuColor.DEFAULT

    def test_set_title_from_text_and_color(self):
        menu = Menu()
        menu.set_title("Main Menu", MenuColor.TITLE)
        assert menu.get_title() == MenuTitle("Main Menu", MenuColor.TITLE)

    def test_set_title_from_title_object(self):
        menu = Menu()
        menu.set_title(MenuTitle("Accounts", MenuColor.ACCOUNT))
        assert menu.get_title().color is MenuColor.ACCOUNT

    def test_constructor_title(self):
        assert Menu("Main Menu").get_title().text == "Main Menu"


class TestLines:
    def test_add_line_returns_count(self):
        menu = Menu()
        assert menu.add_line("first") == 1
        assert menu.add_line("second", MenuColor.RED) == 2
        assert menu.get_lines()[1] == MenuLine("second", MenuColor.RED)

    def test_add_lines_uses_default_color(self):
        menu = Menu()
        assert menu.add_lines(["a", "b", "c"]) == 3
        assert all(line.color is MenuColor.DEFAULT for line in menu.get_lines())

    def test_lines_keep_insertion_order(self):
        menu = _menu_with_lines(3)
        assert [line.text for line in menu.get_lines()] == ["line 0", "line 1", "line 2"]

    def test_get_lines_returns_copy(self):
        menu = _menu_with_lines(2)
        menu.get_lines().clear()
        assert menu.count_lines() == 2

    def test_remove_line(self):
        menu = _menu_with_lines(3)
        menu.remove_line(1)
        assert [line.text for line in menu.get_lines()] == ["line 0", "line 2"]

    @pytest.mark.parametrize("pos", [-1, 3, 10])
    def test_remove_line_out_of_range(self, pos):
        menu = _menu_with_lines(3)
        with pytest.raises(OutOfRangeError) as exc_info:
            menu.remove_line(pos)
        assert exc_info.value.size == 3
        assert menu.count_lines() == 3

    def test_remove_line_from_empty_menu(self):
        with pytest.raises(OutOfRangeError):
            Menu().remove_line(0)

    def test_remove_lines(self):
        menu = _menu_with_lines(5)
        menu.remove_lines(1, 3)
        assert [line.text for line in menu.get_lines()] == ["line 0", "line 4"]

    def test_remove_lines_up_to_end(self):
        menu = _menu_with_lines(4)
        menu.remove_lines(2, 2)
        assert menu.count_lines() == 2

    def test_remove_zero_lines(self):
        menu = _menu_with_lines(2)
        menu.remove_lines(2, 0)
        assert menu.count_lines() == 2

    @pytest.mark.parametrize("start,count", [(3, 3), (0, 6), (-1, 1), (1, -1)])
    def test_remove_lines_out_of_range_leaves_menu_intact(self, start, count):
        menu = _menu_with_lines(5)
        with pytest.raises(OutOfRangeError):
            menu.remove_lines(start, count)
        assert menu.count_lines() == 5

    def test_set_lines(self):
        menu = Menu()
        menu.set_lines([MenuLine("x"), MenuLine("y", MenuColor.GOOD)])
        assert menu.count_lines() == 2


class TestSelections:
    def test_add_selection_object(self):
        menu = Menu()
        assert menu.add_selection(MenuSelection("A", "Add")) == 1
        assert menu.get_selections()[0].key == "A"

    def test_add_selection_from_parts(self):
        menu = Menu()
        menu.add_selection("B", "Browse", MenuColor.BLUE)
        assert menu.get_selections() == [MenuSelection("B", "Browse", MenuColor.BLUE)]

    def test_add_selection_key_without_label(self):
        with pytest.raises(TypeError):
            Menu().add_selection("A")

    def test_add_selections_returns_count(self):
        menu = Menu()
        menu.add_selection("A", "Add")
        count = menu.add_selections([MenuSelection("B", "Bee"), MenuSelection("C", "Sea")])
        assert count == 3
        assert menu.count_selections() == 3

    def test_duplicate_keys_are_kept(self):
        menu = Menu()
        menu.add_selections([MenuSelection("A", "one"), MenuSelection("a", "two")])
        assert menu.count_selections() == 2

    def test_set_selections(self):
        menu = Menu()
        menu.add_selection("A", "Add")
        menu.set_selections([MenuSelection("Q", "Quit")])
        assert [s.key for s in menu.get_selections()] == ["Q"]


class TestPrompt:
    def test_default_prompt_is_empty(self):
        assert Menu().get_prompt() == ""

    def test_set_prompt(self):
        menu = Menu()
        menu.set_prompt("Pick one: ")
        assert menu.get_prompt() == "Pick one: "
