"""Rich display helpers for CLI output."""

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from src.parser.command_types import Command, CommandError
from src.parser.grammar import GrammarCatalog
from src.parser.vocabulary import VocabularyIndex
from src.world.objects import WorldCatalog


# Shared console instance
console = Console()


def display_welcome() -> None:
    """Display welcome message."""
    console.print()
    console.print(Panel("[bold cyan]Command Parser[/bold cyan]", style="cyan"))
    console.print()


def display_info(message: str) -> None:
    """Display info message.

    Args:
        message: Info message.
    """
    console.print(f"[dim]{message}[/dim]")


def format_command(command: Command, show_error_codes: bool = True) -> str:
    """Render a command as a single line of Rich markup.

    Args:
        command: Parsed command or error.
        show_error_codes: Whether to append the raw code to error messages.

    Returns:
        Markup string.
    """
    if isinstance(command, CommandError):
        text = f"[bold red]{command.message}[/bold red]"
        if show_error_codes:
            text += f" [dim]({command.code})[/dim]"
        return text

    objects = ", ".join(f"[cyan]{obj}[/cyan]" for obj in command.objects)
    if objects:
        return f"[bold green]{command.action}[/bold green] {objects}"
    return f"[bold green]{command.action}[/bold green]"


def display_command(command: Command, show_error_codes: bool = True) -> None:
    """Display the outcome of parsing one line.

    Args:
        command: Parsed command or error.
        show_error_codes: Whether to append the raw code to error messages.
    """
    console.print(format_command(command, show_error_codes))


def display_templates(grammar: GrammarCatalog) -> None:
    """Display the grammar templates with their action identifiers.

    Args:
        grammar: Grammar to list.
    """
    table = Table(title="Command Templates", box=box.ROUNDED)
    table.add_column("Template", style="white")
    table.add_column("Action", style="green")

    for template in grammar.templates:
        table.add_row(str(template), template.action)

    console.print(table)


def display_words(grammar: GrammarCatalog, world: WorldCatalog, vocabulary: VocabularyIndex) -> None:
    """Display the derived word lists.

    Args:
        grammar: Source of verbs and prepositions.
        world: Source of adjectives and nouns.
        vocabulary: Full vocabulary.
    """
    table = Table(title="Vocabulary", box=box.ROUNDED)
    table.add_column("List", style="cyan")
    table.add_column("Words", style="white")

    table.add_row("Verbs", ", ".join(grammar.verbs))
    table.add_row("Prepositions", ", ".join(grammar.prepositions))
    table.add_row("Adjectives", ", ".join(world.adjectives))
    table.add_row("Nouns", ", ".join(world.nouns))
    table.add_row("Actions", ", ".join(grammar.actions))
    table.add_row("Slot kinds", ", ".join(grammar.slot_kinds))
    table.add_row("Errors", ", ".join(grammar.errors))
    table.add_row(f"All ({len(vocabulary)})", ", ".join(vocabulary.words))

    console.print(table)


def display_objects(world: WorldCatalog) -> None:
    """Display the game objects grouped by kind.

    Args:
        world: World to list.
    """
    table = Table(title="Game Objects", box=box.ROUNDED)
    table.add_column("Object", style="white")
    table.add_column("Noun", style="cyan")
    table.add_column("Kind", style="yellow")

    for kind in world.kinds:
        for obj in world.objects:
            if obj.kind == kind:
                table.add_row(obj.descriptor, obj.noun, obj.kind)

    console.print(table)


def prompt_input(prompt: str = "> ") -> str:
    """Get input from user with styled prompt.

    Args:
        prompt: Prompt string.

    Returns:
        User input.
    """
    return console.input(f"[bold cyan]{prompt}[/bold cyan]")
