"""
File utilities for AutoFolder.

Directory listing, extension handling, and logging setup shared by the
organizer and the CLI.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional

logger = logging.getLogger(__name__)


def normalize_extension(extension: Optional[str]) -> Optional[str]:
    """
    Normalize a user-supplied extension filter.

    Args:
        extension: Extension such as ".mp4", "MP4" or None

    Returns:
        Extension with a leading dot, or None if blank
    """
    if extension is None:
        return None

    extension = extension.strip()
    if not extension:
        return None

    if not extension.startswith("."):
        extension = f".{extension}"

    return extension


def matches_extension(file_path: Path, extension: Optional[str]) -> bool:
    """
    Check a file's extension against a filter, ignoring case.

    Args:
        file_path: Path to check
        extension: Extension with leading dot, or None to match everything

    Returns:
        True if the file passes the filter
    """
    if extension is None:
        return True
    return file_path.suffix.lower() == extension.lower()


def list_files(directory: Path) -> List[Path]:
    """
    List the regular files directly inside a directory.

    Subdirectories are not descended into. Results are sorted by name so
    grouping sees the files in a stable order.

    Args:
        directory: Directory to scan

    Returns:
        Sorted list of file paths

    Raises:
        FileNotFoundError: If the directory does not exist
        NotADirectoryError: If the path is not a directory
    """
    directory = Path(directory)
    if not directory.exists():
        raise FileNotFoundError(f"Directory not found: {directory}")
    if not directory.is_dir():
        raise NotADirectoryError(f"Not a directory: {directory}")

    files = sorted(
        (entry for entry in directory.iterdir() if entry.is_file()),
        key=lambda p: p.name,
    )
    logger.debug(f"Found {len(files)} files in {directory}")
    return files


def filter_by_extension(
    files: Iterable[Path], extension: Optional[str]
) -> List[Path]:
    """Keep only files whose extension matches the filter."""
    extension = normalize_extension(extension)
    return [f for f in files if matches_extension(f, extension)]


def setup_logging(
    verbose: bool = False, quiet: bool = False, default: str = "INFO"
) -> None:
    """
    Configure logging for the application.

    Args:
        verbose: If True, set logging level to DEBUG
        quiet: If True, set logging level to WARNING
        default: Level name used when neither flag is set
    """
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = getattr(logging, default.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
