"""
Shared utilities for AutoFolder.

This module provides the filesystem helpers and the activity log used by
the organizer and the CLI.
"""

from .activity_log import ActivityLog, get_activity_log, log_event
from .file_utils import (
    filter_by_extension,
    list_files,
    matches_extension,
    normalize_extension,
    setup_logging,
)

__all__ = [
    "ActivityLog",
    "get_activity_log",
    "log_event",
    "filter_by_extension",
    "list_files",
    "matches_extension",
    "normalize_extension",
    "setup_logging",
]
