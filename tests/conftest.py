"""
Pytest configuration and fixtures for autofolder tests.
"""

from pathlib import Path
from typing import Callable, Iterable, List

import pytest

from autofolder.shared import activity_log
from autofolder.shared.activity_log import ActivityLog

SAMPLE_FILES = [
    "data1.csv",
    "data2.pdf",
    "slide.pptx",
    "audio.mp3",
    "report_final_2024 (Q1).docx",
    "report_final_2024 (Q2).docx",
    "aaa.txt",
    "aab.txt",
]


def _make_files(directory: Path, names: Iterable[str]) -> List[Path]:
    directory.mkdir(parents=True, exist_ok=True)
    paths = []
    for name in names:
        path = directory / name
        path.write_text(f"content of {name}")
        paths.append(path)
    return paths


@pytest.fixture
def make_files() -> Callable[[Path, Iterable[str]], List[Path]]:
    """Factory creating files with distinct content in a directory."""
    return _make_files


@pytest.fixture
def sample_files() -> List[str]:
    """Names of the sample files."""
    return list(SAMPLE_FILES)


@pytest.fixture
def source_dir(tmp_path) -> Path:
    """Source directory populated with the sample files."""
    source = tmp_path / "source"
    _make_files(source, SAMPLE_FILES)
    return source


@pytest.fixture(autouse=True)
def isolated_activity_log(tmp_path, monkeypatch) -> ActivityLog:
    """Point the default activity log at a temporary file."""
    log = ActivityLog(tmp_path / "autofolder.log")
    monkeypatch.setattr(activity_log, "_default_log", log)
    return log
