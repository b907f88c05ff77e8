"""
Interactive prompts for the organize command.

Used when no source directory is given on the command line: asks for every
option in turn, re-asking until the directories entered actually exist.
"""

from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm, Prompt

from .. import __version__
from ..organization import OrganizeOptions

console = Console()


def print_banner() -> None:
    """Print the application banner."""
    console.print(
        Panel(
            "Group files into folders by shared name prefix",
            title=f"[bold cyan]AutoFolder v{__version__}[/bold cyan]",
            border_style="cyan",
        )
    )


def _clean_path(text: str) -> Path:
    """Strip whitespace and surrounding quotes from a pasted path."""
    return Path(text.strip().strip('"').strip("'")).expanduser()


def ask_for_source_directory() -> Path:
    """Ask for the source directory until an existing one is entered."""
    while True:
        text = Prompt.ask(
            "Enter the path to the source directory", default="", show_default=False
        )

        if not text.strip():
            console.print("[yellow]⚠ Directory path cannot be empty.[/yellow]")
            continue

        path = _clean_path(text)
        if path.is_dir():
            return path

        console.print("[red]✗ Directory not found. Please try again.[/red]")


def ask_for_destination_directory() -> Optional[Path]:
    """
    Ask for the destination directory.

    Returns:
        Existing directory, or None to organize inside the source directory
    """
    while True:
        text = Prompt.ask(
            "Enter the path to the destination directory "
            "(or leave blank to use the source directory)",
            default="",
            show_default=False,
        )

        if not text.strip():
            return None

        path = _clean_path(text)
        if path.is_dir():
            return path

        console.print("[red]✗ Directory not found. Please try again.[/red]")


def ask_for_options() -> OrganizeOptions:
    """Ask for every organize option interactively."""
    source = ask_for_source_directory()
    destination = ask_for_destination_directory()

    extension = Prompt.ask(
        "Enter the file extension to filter (or leave blank for all files)",
        default="",
        show_default=False,
    )
    delete_originals = Confirm.ask(
        "Delete original files after copy?", default=False
    )
    normalize = Confirm.ask(
        "Normalize group folder names? (remove spaces/symbols, use lowercase)",
        default=False,
    )
    dry_run = Confirm.ask("Simulate actions only (dry-run mode)?", default=False)

    return OrganizeOptions(
        source_directory=source,
        destination_directory=destination,
        extension_filter=extension.strip().lower() or None,
        delete_originals=delete_originals,
        normalize_group_names=normalize,
        dry_run=dry_run,
    )
