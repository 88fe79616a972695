"""Game commands including the interactive parsing loop."""

from typing import Optional

import typer
from rich.console import Console

from src.cli.display import (
    display_command,
    display_info,
    display_templates,
    display_welcome,
    prompt_input,
)
from src.config import get_settings
from src.parser.command_parser import get_default_parser

app = typer.Typer(help="Game commands")
console = Console()


@app.command()
def parse(
    words: Optional[list[str]] = typer.Argument(None, help="Command to parse, e.g. put red ball in box"),
) -> None:
    """Parse a single command and print the result."""
    settings = get_settings()
    command = get_default_parser().parse(" ".join(words or []))
    display_command(command, show_error_codes=settings.show_error_codes)

    if not command.ok:
        raise typer.Exit(1)


@app.command()
def play() -> None:
    """Start the interactive parsing loop."""
    settings = get_settings()
    parser = get_default_parser()

    display_welcome()
    display_info("Type commands. Use /quit to exit, /help for templates.")

    while True:
        console.print()
        try:
            player_input = prompt_input(settings.prompt)
        except (EOFError, KeyboardInterrupt):
            console.print()
            break

        if player_input.startswith("/"):
            cmd = player_input[1:].strip().lower()
            if cmd in ("quit", "exit", "q"):
                break
            elif cmd == "help":
                display_templates(parser.grammar)
            else:
                display_info(f"Unknown command: /{cmd}")
            continue

        display_command(parser.parse(player_input), show_error_codes=settings.show_error_codes)

    display_info("Goodbye.")
