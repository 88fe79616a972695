"""World and grammar information commands."""

import typer

from src.cli.display import display_objects, display_templates, display_words
from src.parser.command_parser import get_default_parser

app = typer.Typer(help="World and grammar information commands")


@app.command()
def templates() -> None:
    """List grammar templates and their actions."""
    display_templates(get_default_parser().grammar)


@app.command()
def words() -> None:
    """List the derived vocabulary."""
    parser = get_default_parser()
    display_words(parser.grammar, parser.world, parser.vocabulary)


@app.command()
def objects() -> None:
    """List game objects by kind."""
    display_objects(get_default_parser().world)
