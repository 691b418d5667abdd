"""Typer CLI application."""

import logging
import sys
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from simple_terminal.ansi.color import Color
from simple_terminal.ansi.constants import COLORS_16, RESET
from simple_terminal.ansi.style import Style
from simple_terminal.box.styles import BoxStyle
from simple_terminal.core.builder import ConsoleBuilder
from simple_terminal.core.config import ConsoleConfig, load_config
from simple_terminal.errors import SimpleTerminalError
from simple_terminal.prompt.choice import Choice
from simple_terminal.prompt.prompt import Prompt


def setup_logging(verbose: bool = False) -> None:
    """Send library log records to stderr through rich."""
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[handler],
        force=True,
    )


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="simple-terminal",
        help="Print styled text, rules and boxes, and try out interactive prompts.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console(stderr=True)

    def fail(message: str) -> typer.Exit:
        console.print(f"[red]{message}[/]")
        return typer.Exit(1)

    def builder_for(ctx: typer.Context) -> ConsoleBuilder:
        return ConsoleBuilder(ctx.obj)

    @app.callback()
    def root(
        ctx: typer.Context,
        config: Annotated[Optional[Path], typer.Option("--config", help="JSON config file")] = None,
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show debug logging")] = False,
    ) -> None:
        """Styled console output toolkit."""
        setup_logging(verbose)
        try:
            ctx.obj = load_config(config)
        except (ValueError, OSError) as exc:
            raise fail(f"Invalid configuration: {exc}")

    @app.command()
    def box(
        ctx: typer.Context,
        text: Annotated[str, typer.Argument(help="Box content ('-' reads standard input)")],
        title: Annotated[Optional[str], typer.Option("--title", "-t", help="Title row")] = None,
        style: Annotated[Optional[str], typer.Option("--style", "-s", help=f"One of: {', '.join(BoxStyle.names())}")] = None,
        indent: Annotated[int, typer.Option("--indent", "-i", help="Indentation level")] = 0,
    ) -> None:
        """Draw a box around some text."""
        content = sys.stdin.read().rstrip("\n") if text == "-" else text
        box_style = BoxStyle.from_name(style) if style else None
        try:
            builder_for(ctx).set_indent_level(indent).box(title, content, box_style).flush()
        except SimpleTerminalError as exc:
            raise fail(str(exc))

    @app.command()
    def rule(
        ctx: typer.Context,
        char: Annotated[str, typer.Option("--char", "-c", help="Character to repeat")] = "-",
        width: Annotated[Optional[int], typer.Option("--width", "-w", help="Rule width (config default if omitted)")] = None,
    ) -> None:
        """Draw a horizontal rule."""
        try:
            builder_for(ctx).rule(char, width).flush()
        except SimpleTerminalError as exc:
            raise fail(str(exc))

    @app.command()
    def palette(ctx: typer.Context) -> None:
        """Show the named colors and text styles."""
        cb = builder_for(ctx)
        cb.line("Colors:").indent()
        for name in COLORS_16:
            color = Color.from_name(name)
            cb.line(f"{color.fg}{name:<16}{RESET}{color.bg}    {RESET}")
        cb.dedent().line("Styles:").indent()
        for style in Style:
            if not style.name.startswith("RESET"):
                cb.line(f"{style!s}{style.name.lower()}{RESET}")
        cb.flush()

    @app.command("config")
    def show_config(ctx: typer.Context) -> None:
        """Show the effective configuration."""
        cfg: ConsoleConfig = ctx.obj
        out = Console()
        out.print("[bold cyan]Configuration[/]")
        out.print(f"  [bold]Rule width:[/]  {cfg.rule_width}")
        out.print(f"  [bold]Indent unit:[/] {cfg.indent_unit!r}")
        out.print(f"  [bold]Locale:[/]      {cfg.locale}")
        out.print(f"  [bold]Box style:[/]   {cfg.box_style.name or '(custom)'}")

    @app.command()
    def demo(ctx: typer.Context) -> None:
        """Walk through the interactive prompts."""
        cb = builder_for(ctx)
        prompt = Prompt(cb)
        try:
            name = prompt.ask("What is your name?", lambda s: bool(s and s.strip()), "Name cannot be empty")
            age = prompt.ask_int("How old are you?", lambda n: 0 <= n <= 150, "Age must be 0-150")
            style = prompt.ask_choice(
                "Pick a box style:",
                [Choice(n.capitalize(), BoxStyle.from_name(n)) for n in BoxStyle.names()],
            )
            shout = prompt.ask_yes_no("Shout it?")
        except EOFError:
            raise fail("Input ended before the demo finished")

        greeting = f"Hello {name.strip()}, age {age}!"
        cb.box("Demo", greeting.upper() if shout else greeting, style).flush()

    return app
