"""
Organization module for grouping files into folders.

This module clusters the files of a directory by shared name prefix and
copies each cluster into its own folder, with safety features like dry-run
mode and per-file failure isolation.
"""

from .file_organizer import FileOrganizer, OrganizeOptions, organize
from .grouping import (
    MIN_PREFIX_LENGTH,
    FileGroup,
    build_groups,
    common_prefix,
    group_files_by_prefix,
)
from .naming import TERMINAL_SYMBOLS, normalize_group_name
from .report import (
    FileAction,
    FileOutcome,
    GroupSummary,
    OrganizeResult,
    OutcomeStatus,
)

__all__ = [
    "FileOrganizer",
    "OrganizeOptions",
    "organize",
    "MIN_PREFIX_LENGTH",
    "FileGroup",
    "build_groups",
    "common_prefix",
    "group_files_by_prefix",
    "TERMINAL_SYMBOLS",
    "normalize_group_name",
    "FileAction",
    "FileOutcome",
    "GroupSummary",
    "OrganizeResult",
    "OutcomeStatus",
]
