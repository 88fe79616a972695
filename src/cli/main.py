"""Main CLI application for the command parser."""

import logging
from typing import Optional

import typer
from rich.logging import RichHandler

from src.cli.commands import game, world
from src.cli.display import console
from src.config import get_settings

# Create main app
app = typer.Typer(
    name="rpg-parse",
    help="Template-grammar command parser for a text adventure",
    add_completion=True,
)

# Add sub-commands
app.add_typer(game.app, name="game")
app.add_typer(world.app, name="world")


@app.command()
def play() -> None:
    """Quick start - open the interactive loop.

    This is a shortcut for 'rpg-parse game play'.
    """
    game.play()


@app.command()
def parse(
    words: Optional[list[str]] = typer.Argument(None, help="Command to parse, e.g. take red ball"),
) -> None:
    """Parse one command. Shortcut for 'rpg-parse game parse'."""
    game.parse(words=words)


@app.callback()
def main() -> None:
    """Command parser - turn player input into commands.

    Use 'rpg-parse play' to try commands interactively.
    """
    settings = get_settings()
    logging.basicConfig(
        level=settings.effective_log_level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


if __name__ == "__main__":
    app()
