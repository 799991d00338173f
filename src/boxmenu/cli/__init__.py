"""CLI entry point for boxmenu.

Uses Typer for command routing with lazy loading.
"""

from typing import Optional

import typer

__all__ = ["app", "main"]

app = typer.Typer(
    name="boxmenu",
    help="Bordered terminal menus",
    no_args_is_help=False,
)


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """Run the demo menu if no command given."""
    if ctx.invoked_subcommand is None:
        from boxmenu.cli.commands import cmd_demo

        raise typer.Exit(cmd_demo(None))


@app.command()
def demo(
    width: Optional[int] = typer.Option(
        None, "--width", "-w", help="Layout width (default: terminal width)"
    ),
) -> None:
    """Run the interactive demo menu."""
    from boxmenu.cli.commands import cmd_demo

    raise typer.Exit(cmd_demo(width))


@app.command()
def preview(
    width: Optional[int] = typer.Option(
        None, "--width", "-w", help="Layout width (default: terminal width)"
    ),
) -> None:
    """Draw the demo menu once without reading input."""
    from boxmenu.cli.commands import cmd_preview

    cmd_preview(width)


@app.command()
def debug(
    state: str = typer.Argument(..., help="on or off"),
) -> None:
    """Turn debug logging on or off."""
    from boxmenu.cli.commands import cmd_debug

    raise typer.Exit(cmd_debug(state))
