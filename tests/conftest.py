"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

from tests.fixtures.course_fixtures import COURSE_FILES, write_files


@pytest.fixture
def course_dir(tmp_path: Path) -> Path:
    return write_files(tmp_path / "course", COURSE_FILES)


@pytest.fixture
def sample_track(course_dir: Path) -> Path:
    return course_dir / "track.toml"


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    out = tmp_path / "output"
    out.mkdir()
    return out
