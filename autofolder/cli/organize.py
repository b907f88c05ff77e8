"""
CLI command for organizing files.

Groups the files of a directory into folders named after their shared
name prefix.
"""

import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from .. import __version__
from ..config import settings
from ..organization import FileOrganizer, OrganizeOptions, OrganizeResult
from ..shared import log_event, setup_logging
from .prompts import ask_for_options, print_banner

console = Console()


@click.command()
@click.argument(
    "source",
    required=False,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
)
@click.option(
    "--dest",
    "destination",
    type=click.Path(file_okay=False, path_type=Path),
    help="Create group folders here instead of inside SOURCE",
)
@click.option(
    "--ext",
    "extension",
    type=str,
    help="Only organize files with this extension (e.g. .mp4)",
)
@click.option(
    "--delete-originals",
    is_flag=True,
    default=False,
    help="Delete each original file after it was copied",
)
@click.option(
    "--normalize",
    is_flag=True,
    default=False,
    help="Normalize folder names (lowercase, dashes, no symbols)",
)
@click.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="Preview changes without executing (RECOMMENDED FIRST)",
)
@click.option(
    "-y",
    "--yes",
    is_flag=True,
    default=False,
    help="Don't ask: confirm deletes and skip the real run after a dry run",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    default=False,
    help="Verbose output",
)
@click.option(
    "-q",
    "--quiet",
    is_flag=True,
    default=False,
    help="Only show warnings and errors in the log output",
)
@click.version_option(version=__version__, prog_name="autofolder")
def organize(
    source: Optional[Path],
    destination: Optional[Path],
    extension: Optional[str],
    delete_originals: bool,
    normalize: bool,
    dry_run: bool,
    yes: bool,
    verbose: bool,
    quiet: bool,
) -> None:
    """
    Organize the files in SOURCE into folders by shared name prefix.

    Files whose names (without extension) share a prefix of at least three
    characters end up in the same folder, named after that prefix. Files
    that match nothing get a folder of their own. Without SOURCE, every
    option is asked for interactively.

    \b
    Examples:
        # DRY RUN (preview changes - always do this first!)
        autofolder ~/Downloads --dry-run

        # Copy videos into normalized folders elsewhere
        autofolder ~/Downloads --ext .mp4 --dest ~/Videos --normalize

        # Move files (deletes originals - be careful!)
        autofolder ~/Downloads --delete-originals

        # Interactive mode
        autofolder

    \b
    Grouping:
        video-ep01.mp4, video-ep02.mp4  ->  video-ep0/
        data1.csv, data2.pdf            ->  data/
        intro.mp4                       ->  intro/
    """
    setup_logging(verbose=verbose, quiet=quiet, default=settings.log_level)

    if source is None:
        print_banner()
        options = ask_for_options()
    else:
        options = OrganizeOptions(
            source_directory=source,
            destination_directory=destination,
            extension_filter=extension,
            delete_originals=delete_originals,
            normalize_group_names=normalize,
            dry_run=dry_run,
        )

    _display_configuration(options)

    if options.dry_run:
        console.print("\n[yellow]⚠ DRY RUN MODE - No files will be modified[/yellow]")
    elif options.delete_originals and not yes:
        console.print(
            "\n[red]⚠ WARNING: original files will be deleted after copying![/red]"
        )
        console.print("[yellow]Make sure you've tested with --dry-run first![/yellow]")
        if not click.confirm("Continue and delete originals?"):
            console.print("[yellow]Cancelled[/yellow]")
            return

    console.print()

    try:
        result = _run(options)

        if options.dry_run:
            console.print(
                "\n[cyan]🔍 Dry-run complete. No files were copied or deleted.[/cyan]"
            )
            if yes:
                return

            if click.confirm("Execute now for real using the same options?"):
                console.print("\n[yellow]Executing for real...[/yellow]\n")
                result = _run(options.model_copy(update={"dry_run": False}))
            else:
                console.print("\n[yellow]🚫 Operation cancelled by user.[/yellow]")
                return

        if result.has_failures():
            console.print(
                f"\n[yellow]⚠ Finished with {result.failed} failure(s)[/yellow]"
            )
        else:
            console.print(
                "\n[green]✅ File organization completed successfully![/green]"
            )

    except click.exceptions.Abort:
        raise
    except Exception as e:
        log_event(f"Error: {e}")
        console.print(f"\n[red]✗ Error: {e}[/red]")
        if verbose:
            console.print_exception()
        sys.exit(1)


def _run(options: OrganizeOptions) -> OrganizeResult:
    """Run the organizer and show its result."""
    result = FileOrganizer(options, show_progress=True).organize()
    _display_result(result)
    return result


def _display_configuration(options: OrganizeOptions) -> None:
    """Display the options a run will use."""
    console.print("\n[cyan]Organization Configuration:[/cyan]")
    console.print(f"  Source: {options.source_directory}")
    console.print(f"  Destination: {options.output_directory}")
    console.print(f"  Extension filter: {options.extension_filter or 'all files'}")
    console.print(f"  Delete originals: {'YES' if options.delete_originals else 'NO'}")
    console.print(
        f"  Normalize names: {'YES' if options.normalize_group_names else 'NO'}"
    )
    console.print(f"  Dry run: {'YES' if options.dry_run else 'NO'}")


def _display_result(result: OrganizeResult) -> None:
    """Display organization result."""
    console.print("\n[green]✓ Organization complete![/green]\n")

    if result.groups:
        groups = Table(title="Groups")
        groups.add_column("Folder", style="cyan")
        groups.add_column("Files", justify="right")
        groups.add_column("Processed", style="green", justify="right")
        groups.add_column("Failed", style="red", justify="right")

        for group in result.groups:
            groups.add_row(
                f"📁 {group.folder_name}",
                str(group.file_count),
                str(group.processed),
                str(group.failed),
            )

        console.print(groups)

    table = Table(title="Results")
    table.add_column("Metric", style="cyan")
    table.add_column("Count", style="green", justify="right")

    table.add_row("Total files", str(result.total_files))
    table.add_row("Processed", str(result.processed))
    table.add_row("Deleted", str(result.deleted))
    table.add_row("Failed", str(result.failed))
    table.add_row("Groups", str(result.group_count))

    console.print(table)
    console.print(
        f"Processed {result.processed} file(s) in {result.group_count} group(s)."
    )

    if result.dry_run:
        console.print("\n[yellow]This was a DRY RUN - no files were modified[/yellow]")

    # Show errors if any
    if result.errors:
        console.print("\n[red]Errors:[/red]")
        for error in result.errors[:10]:  # Show first 10
            console.print(f"  [red]• {error}[/red]")
        if len(result.errors) > 10:
            console.print(f"  [dim]... and {len(result.errors) - 10} more[/dim]")


if __name__ == "__main__":
    organize()
