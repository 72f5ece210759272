"""pytest fixtures for building zip files inside a test's temporary directory."""

from pathlib import Path

import pytest

from .builder import ZipBuilder


@pytest.fixture
def zip_folder(tmp_path: Path) -> Path:
    """A fresh, empty directory for the archives of one test."""
    folder = tmp_path / "zips"
    folder.mkdir()
    return folder


@pytest.fixture
def zip_builder(zip_folder: Path) -> ZipBuilder:
    """A :class:`ZipBuilder` that writes into ``zip_folder``."""
    return ZipBuilder(zip_folder)
