"""
File organizer for grouping files into folders.

Scans a directory, groups its files by shared name prefix and copies each
group into its own folder, with dry-run mode, optional deletion of the
originals and per-file failure isolation.
"""

import logging
import shutil
from pathlib import Path
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TextColumn,
    TimeRemainingColumn,
)

from ..shared.activity_log import ActivityLog, get_activity_log
from ..shared.file_utils import filter_by_extension, list_files, normalize_extension
from .grouping import FileGroup, build_groups
from .naming import normalize_group_name
from .report import (
    FileAction,
    FileOutcome,
    GroupSummary,
    OrganizeResult,
    OutcomeStatus,
)

logger = logging.getLogger(__name__)


class OrganizeOptions(BaseModel):
    """Options for a single organize run."""

    source_directory: Path = Field(description="Directory to scan for files")
    destination_directory: Optional[Path] = Field(
        default=None,
        description="Where group folders are created (defaults to source)",
    )
    extension_filter: Optional[str] = Field(
        default=None, description="Only organize files with this extension"
    )
    delete_originals: bool = Field(
        default=False, description="Delete each original after a successful copy"
    )
    normalize_group_names: bool = Field(
        default=False, description="Normalize folder names (lowercase, dashes)"
    )
    dry_run: bool = Field(
        default=False, description="Report actions without touching the filesystem"
    )

    model_config = ConfigDict(frozen=True)

    @field_validator("extension_filter")
    @classmethod
    def _normalize_extension(cls, value: Optional[str]) -> Optional[str]:
        return normalize_extension(value)

    @property
    def output_directory(self) -> Path:
        """Directory the group folders are created in."""
        return self.destination_directory or self.source_directory


class FileOrganizer:
    """Organize a directory's files into folders by shared name prefix."""

    def __init__(
        self,
        options: OrganizeOptions,
        activity_log: Optional[ActivityLog] = None,
        show_progress: bool = False,
    ):
        """
        Initialize file organizer.

        Args:
            options: Run options
            activity_log: Log for recording actions (defaults to the configured one)
            show_progress: Draw a progress bar on the console while organizing
        """
        self.options = options
        self.activity_log = activity_log or get_activity_log()
        self.show_progress = show_progress

    def scan(self) -> List[Path]:
        """
        List the files to organize.

        Returns:
            Files in the source directory that pass the extension filter

        Raises:
            FileNotFoundError: If the source directory does not exist
        """
        files = list_files(self.options.source_directory)
        return filter_by_extension(files, self.options.extension_filter)

    def folder_name(self, key: str) -> str:
        """
        Folder name for a group key.

        Args:
            key: Group key

        Returns:
            Normalized key if normalization is enabled, else the key itself
        """
        if not self.options.normalize_group_names:
            return key

        normalized = normalize_group_name(key)
        if not normalized:
            logger.debug(f"Key '{key}' normalizes to nothing, keeping it as is")
            return key
        return normalized

    def plan(self) -> List[Tuple[FileGroup, Path]]:
        """
        Group the files and work out each group's target folder.

        Returns:
            (group, target directory) pairs in group order
        """
        groups = build_groups(self.scan())
        output_directory = self.options.output_directory
        return [
            (group, output_directory / self.folder_name(group.key))
            for group in groups
        ]

    def organize(self) -> OrganizeResult:
        """
        Organize files according to the options.

        Returns:
            Organization result with per-file outcomes and totals
        """
        dry_run = self.options.dry_run
        logger.info(f"Starting organization ({'DRY RUN' if dry_run else 'LIVE'})")

        plan = self.plan()
        result = OrganizeResult(dry_run=dry_run)
        result.total_files = sum(len(group) for group, _ in plan)
        result.group_count = len(plan)

        logger.info(
            f"Processing {result.total_files} files in {result.group_count} groups"
        )
        self.activity_log.log(
            f"{'Dry run' if dry_run else 'Run'} started in "
            f"{self.options.source_directory} "
            f"({result.total_files} files, {result.group_count} groups)"
        )

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TextColumn("[progress.percentage]{task.percentage:>3.0f}%"),
            TimeRemainingColumn(),
            disable=not self.show_progress,
        ) as progress:
            task = progress.add_task("Organizing files...", total=result.total_files)

            for group, target_directory in plan:
                summary = GroupSummary(
                    key=group.key,
                    folder_name=target_directory.name,
                    target_directory=target_directory,
                    file_count=len(group),
                )
                result.groups.append(summary)

                self._process_group(group, target_directory, summary, result)
                progress.advance(task, len(group))

                message = (
                    f"Group '{summary.folder_name}' organized with "
                    f"{summary.processed} file(s)."
                )
                logger.info(message)
                self.activity_log.log(message)

        logger.info(
            f"Processed {result.processed} file(s) in {result.group_count} group(s), "
            f"{result.failed} failure(s)"
        )
        self.activity_log.log(
            f"{'Dry run' if dry_run else 'Run'} finished: {result.processed} file(s), "
            f"{result.group_count} group(s), {result.failed} failure(s)"
        )
        return result

    def _process_group(
        self,
        group: FileGroup,
        target_directory: Path,
        summary: GroupSummary,
        result: OrganizeResult,
    ) -> None:
        """
        Copy (and optionally delete) every member of one group.

        Args:
            group: Group to process
            target_directory: Folder the members are copied into
            summary: Group counters to update
            result: Run result to update
        """
        if not self.options.dry_run:
            try:
                target_directory.mkdir(parents=True, exist_ok=True)
            except Exception as e:
                logger.error(f"Error creating {target_directory}: {e}")
                for path in group.members:
                    self._record(
                        result,
                        summary,
                        FileOutcome(
                            source_path=path,
                            target_path=target_directory / Path(path).name,
                            action=FileAction.COPY,
                            status=OutcomeStatus.FAILED,
                            error=f"Could not create {target_directory}: {e}",
                        ),
                    )
                return

        for path in group.members:
            source_path = Path(path)
            target_path = target_directory / source_path.name

            copy_outcome = self._copy_file(source_path, target_path)
            self._record(result, summary, copy_outcome)

            copied = copy_outcome.status != OutcomeStatus.FAILED
            if self.options.delete_originals and copied:
                self._record(result, summary, self._delete_file(source_path))

    def _copy_file(self, source_path: Path, target_path: Path) -> FileOutcome:
        """Copy one file, overwriting the target."""
        if self.options.dry_run:
            return FileOutcome(
                source_path=source_path,
                target_path=target_path,
                action=FileAction.COPY,
                status=OutcomeStatus.SIMULATED,
            )

        try:
            shutil.copy2(source_path, target_path)
        except Exception as e:
            return FileOutcome(
                source_path=source_path,
                target_path=target_path,
                action=FileAction.COPY,
                status=OutcomeStatus.FAILED,
                error=str(e),
            )

        return FileOutcome(
            source_path=source_path,
            target_path=target_path,
            action=FileAction.COPY,
            status=OutcomeStatus.COMPLETED,
        )

    def _delete_file(self, source_path: Path) -> FileOutcome:
        """Delete one original file."""
        if self.options.dry_run:
            return FileOutcome(
                source_path=source_path,
                action=FileAction.DELETE,
                status=OutcomeStatus.SIMULATED,
            )

        try:
            source_path.unlink()
        except Exception as e:
            return FileOutcome(
                source_path=source_path,
                action=FileAction.DELETE,
                status=OutcomeStatus.FAILED,
                error=str(e),
            )

        return FileOutcome(
            source_path=source_path,
            action=FileAction.DELETE,
            status=OutcomeStatus.COMPLETED,
        )

    def _record(
        self, result: OrganizeResult, summary: GroupSummary, outcome: FileOutcome
    ) -> None:
        """Add an outcome to the result and report it."""
        result.record(outcome, summary)

        line = outcome.describe()
        if outcome.status == OutcomeStatus.FAILED:
            logger.error(line)
        elif outcome.status == OutcomeStatus.SIMULATED:
            logger.info(f"[DRY RUN] {line}")
        else:
            logger.info(line)
        self.activity_log.log(line)


def organize(
    source_directory: Path,
    destination_directory: Optional[Path] = None,
    extension_filter: Optional[str] = None,
    delete_originals: bool = False,
    normalize_group_names: bool = False,
    dry_run: bool = False,
) -> OrganizeResult:
    """
    Organize a directory's files into folders by shared name prefix.

    Args:
        source_directory: Directory to scan (must exist)
        destination_directory: Where to create group folders (None = source)
        extension_filter: Only organize files with this extension (None = all)
        delete_originals: Delete each original after it is copied
        normalize_group_names: Normalize folder names
        dry_run: Only report what would happen

    Returns:
        Organization result
    """
    options = OrganizeOptions(
        source_directory=source_directory,
        destination_directory=destination_directory,
        extension_filter=extension_filter,
        delete_originals=delete_originals,
        normalize_group_names=normalize_group_names,
        dry_run=dry_run,
    )
    return FileOrganizer(options).organize()
