"""
Append-only activity log.

Records what AutoFolder did, one timestamped line per event. Writing is
best-effort: a log file that cannot be written never interrupts organizing.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config import settings

logger = logging.getLogger(__name__)
console = Console()

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class ActivityLog:
    """Timestamped, append-only event log backed by a text file."""

    def __init__(self, log_path: Optional[Path], enabled: bool = True):
        """
        Initialize activity log.

        Args:
            log_path: File to append to
            enabled: If False, events are only echoed, never written
        """
        self.log_path = Path(log_path) if log_path else None
        self.enabled = enabled and self.log_path is not None

    def format_line(self, message: str, when: Optional[datetime] = None) -> str:
        timestamp = (when or datetime.now()).strftime(TIMESTAMP_FORMAT)
        return f"[{timestamp}] {message}"

    def log(self, message: str, echo: bool = False) -> None:
        """
        Append a message to the log file.

        Args:
            message: Event description
            echo: Also print the line to the console
        """
        line = self.format_line(message)

        if self.enabled:
            try:
                with open(
                    self.log_path, "a", encoding="utf-8", errors="backslashreplace"
                ) as f:
                    f.write(line + "\n")
            except (OSError, ValueError) as e:
                logger.debug(f"Could not write activity log {self.log_path}: {e}")

        if echo:
            console.print(line, markup=False, highlight=False)


_default_log: Optional[ActivityLog] = None


def get_activity_log() -> ActivityLog:
    """Get the activity log configured by settings."""
    global _default_log
    if _default_log is None:
        _default_log = ActivityLog(
            settings.log_file, enabled=settings.activity_log_enabled
        )
    return _default_log


def log_event(message: str, echo: bool = False) -> None:
    """Append a message to the default activity log."""
    get_activity_log().log(message, echo=echo)
