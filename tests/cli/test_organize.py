"""Tests for organize CLI command."""

import shutil
from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from autofolder import __version__
from autofolder.cli.organize import organize
from autofolder.organization import FileOrganizer

pytestmark = pytest.mark.integration


def _group_dirs(directory: Path):
    return sorted(p.name for p in directory.iterdir() if p.is_dir())


class TestOrganizeCLI:
    """Test organize CLI command."""

    def test_organize_dry_run(self, source_dir):
        """Test organize with dry-run mode."""
        runner = CliRunner()
        result = runner.invoke(organize, [str(source_dir), "--dry-run", "--yes"])

        assert result.exit_code == 0
        assert "DRY RUN" in result.output
        assert "Organization complete" in result.output
        assert "Dry-run complete" in result.output

        # No group folders in dry-run
        assert _group_dirs(source_dir) == []

    def test_organize_dry_run_declined(self, source_dir):
        """Test declining the real run after a dry run."""
        runner = CliRunner()
        result = runner.invoke(organize, [str(source_dir), "--dry-run"], input="n\n")

        assert result.exit_code == 0
        assert "Execute now for real" in result.output
        assert "Operation cancelled by user" in result.output
        assert _group_dirs(source_dir) == []

    def test_organize_dry_run_then_real(self, source_dir):
        """Test confirming the real run after a dry run."""
        runner = CliRunner()
        result = runner.invoke(organize, [str(source_dir), "--dry-run"], input="y\n")

        assert result.exit_code == 0
        assert "Executing for real" in result.output
        assert "completed successfully" in result.output
        assert "data" in _group_dirs(source_dir)

    def test_organize_copy(self, source_dir, sample_files):
        """Test organize copies into group folders and keeps originals."""
        runner = CliRunner()
        result = runner.invoke(organize, [str(source_dir)])

        assert result.exit_code == 0
        assert "completed successfully" in result.output
        assert _group_dirs(source_dir) == [
            "aaa",
            "aab",
            "audio",
            "data",
            "report_final_2024 (Q",
            "slide",
        ]
        for name in sample_files:
            assert (source_dir / name).exists()

    def test_organize_shows_progress(self, source_dir):
        """Test the command asks the organizer for a progress bar."""
        runner = CliRunner()
        with patch(
            "autofolder.cli.organize.FileOrganizer", wraps=FileOrganizer
        ) as organizer_cls:
            result = runner.invoke(organize, [str(source_dir)])

        assert result.exit_code == 0
        assert organizer_cls.call_args.kwargs["show_progress"] is True

    def test_organize_with_all_options(self, source_dir, tmp_path):
        """Test destination, extension filter and normalization options."""
        dest_dir = tmp_path / "dest"

        runner = CliRunner()
        result = runner.invoke(
            organize,
            [
                str(source_dir),
                "--dest",
                str(dest_dir),
                "--ext",
                "docx",
                "--normalize",
            ],
        )

        assert result.exit_code == 0
        assert _group_dirs(dest_dir) == ["report-final-2024-q"]

    def test_organize_delete_with_confirmation(self, source_dir):
        """Test deleting originals after confirming."""
        runner = CliRunner()
        result = runner.invoke(
            organize, [str(source_dir), "--delete-originals"], input="y\n"
        )

        assert result.exit_code == 0
        assert "WARNING" in result.output
        assert not (source_dir / "data1.csv").exists()
        assert (source_dir / "data" / "data1.csv").exists()

    def test_organize_delete_cancelled(self, source_dir):
        """Test declining the delete confirmation changes nothing."""
        runner = CliRunner()
        result = runner.invoke(
            organize, [str(source_dir), "--delete-originals"], input="n\n"
        )

        assert result.exit_code == 0
        assert "Cancelled" in result.output
        assert (source_dir / "data1.csv").exists()
        assert _group_dirs(source_dir) == []

    def test_organize_delete_with_yes(self, source_dir):
        """Test --yes skips the delete confirmation."""
        runner = CliRunner()
        result = runner.invoke(
            organize, [str(source_dir), "--delete-originals", "--yes"]
        )

        assert result.exit_code == 0
        assert "Continue and delete originals?" not in result.output
        assert not (source_dir / "aaa.txt").exists()

    def test_organize_reports_failures(self, source_dir):
        """Test per-file failures are listed and the run still succeeds."""
        real_copy = shutil.copy2

        def copy(src, dst, *args, **kwargs):
            if Path(src).name == "audio.mp3":
                raise OSError(5, "Input/output error")
            return real_copy(src, dst, *args, **kwargs)

        runner = CliRunner()
        with patch(
            "autofolder.organization.file_organizer.shutil.copy2", side_effect=copy
        ):
            result = runner.invoke(organize, [str(source_dir)])

        assert result.exit_code == 0
        assert "Errors:" in result.output
        assert "1 failure(s)" in result.output
        assert (source_dir / "data" / "data2.pdf").exists()

    def test_organize_nonexistent_source(self, tmp_path):
        """Test organize with a source directory that does not exist."""
        runner = CliRunner()
        result = runner.invoke(organize, [str(tmp_path / "missing")])

        assert result.exit_code != 0

    def test_organize_unexpected_error(self, source_dir, isolated_activity_log):
        """Test an error from the organizer exits with status 1."""
        runner = CliRunner()
        with patch(
            "autofolder.cli.organize.FileOrganizer.organize",
            side_effect=RuntimeError("boom"),
        ):
            result = runner.invoke(organize, [str(source_dir)])

        assert result.exit_code == 1
        assert "Error: boom" in result.output
        assert "Error: boom" in isolated_activity_log.log_path.read_text()

    def test_organize_verbose_mode(self, source_dir):
        runner = CliRunner()
        result = runner.invoke(organize, [str(source_dir), "-v", "--dry-run", "-y"])

        assert result.exit_code == 0
        assert "Organization complete" in result.output

    def test_version(self):
        runner = CliRunner()
        result = runner.invoke(organize, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output


class TestInteractiveMode:
    """Test prompting for options when no source is given."""

    def test_interactive_run(self, source_dir):
        """Test answering every prompt runs the organizer."""
        answers = "\n".join(
            [
                str(source_dir),  # source
                "",  # destination (use source)
                ".docx",  # extension
                "n",  # delete originals
                "y",  # normalize
                "n",  # dry run
            ]
        )

        runner = CliRunner()
        result = runner.invoke(organize, [], input=answers + "\n")

        assert result.exit_code == 0
        assert f"AutoFolder v{__version__}" in result.output
        assert _group_dirs(source_dir) == ["report-final-2024-q"]

    def test_interactive_reasks_missing_source(self, source_dir, tmp_path):
        """Test an unknown source directory is asked for again."""
        answers = "\n".join(
            [
                "",  # empty source
                str(tmp_path / "missing"),  # unknown source
                f'"{source_dir}"',  # quoted source
                "",
                "",
                "n",
                "n",
                "y",  # dry run
                "n",  # don't execute for real
            ]
        )

        runner = CliRunner()
        result = runner.invoke(organize, [], input=answers + "\n")

        assert result.exit_code == 0
        assert "cannot be empty" in result.output
        assert "Directory not found" in result.output
        assert "Operation cancelled by user" in result.output
        assert _group_dirs(source_dir) == []
