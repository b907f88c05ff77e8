"""
Outcome reporting for organization runs.

Tracks every file action attempted during a run so the caller can show
per-file progress, per-group counts and totals.
"""

from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class FileAction(str, Enum):
    """Kind of filesystem action taken on a file."""

    COPY = "copy"
    DELETE = "delete"


class OutcomeStatus(str, Enum):
    """Status of a single file action."""

    COMPLETED = "completed"
    SIMULATED = "simulated"
    FAILED = "failed"


class FileOutcome(BaseModel):
    """A single file action and how it ended."""

    source_path: Path = Field(description="Original file path")
    target_path: Optional[Path] = Field(
        default=None, description="Copy destination (None for deletes)"
    )
    action: FileAction = Field(description="Action type (copy/delete)")
    status: OutcomeStatus = Field(description="Action status")
    timestamp: datetime = Field(
        default_factory=datetime.now,
        description="When the action finished",
    )
    error: Optional[str] = Field(default=None, description="Error detail if failed")

    model_config = ConfigDict(use_enum_values=True)

    def describe(self) -> str:
        """Human readable one-line description."""
        if self.status == OutcomeStatus.SIMULATED:
            verb = f"Would {self.action}"
        elif self.status == OutcomeStatus.FAILED:
            verb = f"Failed to {self.action}"
        elif self.action == FileAction.COPY:
            verb = "Copied"
        else:
            verb = "Deleted"

        if self.target_path is not None:
            line = f"{verb} {self.source_path} → {self.target_path}"
        else:
            line = f"{verb} {self.source_path}"

        if self.error:
            line = f"{line}: {self.error}"
        return line


class GroupSummary(BaseModel):
    """Per-group counts for a run."""

    key: str = Field(description="Discovered common prefix")
    folder_name: str = Field(description="Folder name used on disk")
    target_directory: Path = Field(description="Folder the files go into")
    file_count: int = Field(default=0, description="Members in the group")
    processed: int = Field(default=0, description="Members copied (or simulated)")
    failed: int = Field(default=0, description="Failed actions in the group")


class OrganizeResult(BaseModel):
    """Result of an organize run."""

    total_files: int = 0
    processed: int = 0
    failed: int = 0
    deleted: int = 0
    group_count: int = 0
    dry_run: bool = False
    groups: List[GroupSummary] = Field(default_factory=list)
    outcomes: List[FileOutcome] = Field(default_factory=list)
    errors: List[str] = Field(default_factory=list)

    def record(
        self, outcome: FileOutcome, group: Optional[GroupSummary] = None
    ) -> None:
        """
        Add a file outcome and update the counters.

        Args:
            outcome: Finished file action
            group: Group the file belongs to, if any
        """
        self.outcomes.append(outcome)

        if outcome.status == OutcomeStatus.FAILED:
            self.failed += 1
            self.errors.append(f"{outcome.source_path}: {outcome.error}")
            if group is not None:
                group.failed += 1
            return

        if outcome.action == FileAction.COPY:
            self.processed += 1
            if group is not None:
                group.processed += 1
        else:
            self.deleted += 1

    def has_failures(self) -> bool:
        """Check if any file action failed."""
        return self.failed > 0
