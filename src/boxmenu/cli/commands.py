"""Command implementations for the boxmenu CLI."""

from typing import Optional

from rich.console import Console
from rich.markup import escape

from boxmenu.messages import MessageQueue
from boxmenu.models import Menu, MenuSelection
from boxmenu.palette import MenuColor
from boxmenu.render import MenuRenderer
from boxmenu.selection import ReadLine, get_valid_selection
from boxmenu.utils.config import Config, get_boxmenu_dir
from boxmenu.utils.debug import debug_input, log_error, reload_config

console = Console()

EXIT_KEY = "x"


def build_demo_menu() -> Menu:
    """The sample main menu."""
    menu = Menu()
    menu.set_title("Main Menu", MenuColor.BLUE)
    menu.add_line("This is a test line")
    menu.add_line("This is a second test line")
    menu.add_line(
        "This is a much longer, much more AWESOME, third line!", MenuColor.RED
    )
    menu.add_selection(MenuSelection("A", "Awesomesauce!", MenuColor.GREEN))
    menu.add_selection(MenuSelection("B", "Bawesome!", MenuColor.BLUE))
    menu.add_selection(MenuSelection("C", "Coolio!"))
    menu.add_selection("X", "Exit")
    return menu


def _label_for(menu: Menu, key: str) -> str:
    for option in menu.get_selections():
        if option.key.lower() == key:
            return option.label
    return key


def run_demo(
    renderer: MenuRenderer,
    width: Optional[int] = None,
    read_line: Optional[ReadLine] = None,
) -> int:
    """Render/select loop over the demo menu. Returns an exit code."""
    menu = build_demo_menu()
    messages = MessageQueue()

    while True:
        renderer.render(menu, messages, width, with_prompt=False)
        try:
            result = get_valid_selection(menu, renderer, read_line)
        except EOFError:
            renderer.console.print()
            return 0
        except KeyboardInterrupt:
            renderer.console.print()
            return 130

        if not result.is_valid:
            messages.errors(result.errors)
            continue
        if result.key == EXIT_KEY:
            debug_input("demo exit")
            return 0
        messages.success(f"You chose {_label_for(menu, result.key)}")


def cmd_demo(width: Optional[int], renderer: Optional[MenuRenderer] = None) -> int:
    """Run the interactive demo. Unexpected failures are logged, exit code 1."""
    try:
        return run_demo(renderer or MenuRenderer(console), width)
    except Exception as exc:
        log_error("cli", "demo failed", exc)
        return 1


def cmd_preview(width: Optional[int]) -> None:
    """Draw the demo menu once."""
    renderer = MenuRenderer(console)
    renderer.render(build_demo_menu(), width=width)
    console.print()


def cmd_debug(state: str) -> int:
    """Persist the debug toggle."""
    value = state.lower()
    if value not in ("on", "off"):
        console.print(f"[red]Expected 'on' or 'off', got '{escape(state)}'[/red]")
        return 2

    config = Config(get_boxmenu_dir())
    config.set_debug(value == "on")
    reload_config()
    console.print(f"Debug: {value}")
    return 0
