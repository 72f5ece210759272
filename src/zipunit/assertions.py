"""
zip 文件断言

Each assertion opens the archive once, checks one fact and closes it again.
Nothing is cached between calls, so an archive rewritten between two
assertions is always seen as it is on disk.

Failures are raised as subclasses of ``AssertionError`` whose messages start
with a fixed prefix, e.g. ``Expected to find entry [1.txt], but was not
found``. A missing archive always fails with ``ZIP file does not exist``.
"""

from __future__ import annotations

import os
import zipfile
from typing import Callable, List, Optional, TypeVar

from rich.pretty import pretty_repr

from .archive.zip_reader import find_entry, iter_zip_entries, read_entry, with_open_zip
from .config import DEFAULT_CONFIG, Config
from .errors import (
    CommentMismatch,
    ContentMismatch,
    EntryCountMismatch,
    EntryNotFound,
    NotADirectory,
    SizeMismatch,
    UnexpectedEntry,
)
from .model import ArchiveEntry, dir_name

T = TypeVar("T")

__all__ = [
    "ArchiveInspector",
    "assert_entry",
    "assert_entry_exists",
    "assert_entry_does_not_exist",
    "assert_entry_comment",
    "assert_entry_actual_size",
    "assert_number_of_entries_is",
    "assert_directory_exists",
    "assert_directory_entry_exist",
]


class ArchiveInspector:
    """Assertions against a single zip file on disk."""

    def __init__(self, zip_path: str | os.PathLike, config: Optional[Config] = None):
        self.zip_path = zip_path
        self.config = (config or DEFAULT_CONFIG).copy().validate()

    # ==================== 读取 ====================

    def _open(self, operation: Callable[[zipfile.ZipFile], T]) -> T:
        return with_open_zip(self.zip_path, operation)

    def _require(self, zf: zipfile.ZipFile, name: str) -> ArchiveEntry:
        entry = find_entry(zf, name, self.config.encoding)
        if entry is None:
            preview = pretty_repr(zf.namelist(), max_width=120, max_length=self.config.preview_limit)
            raise EntryNotFound(f"Expected to find entry [{name}], but was not found. Actual entries: {preview}")
        return entry

    def entries(self) -> List[ArchiveEntry]:
        """All entries in the order the codec lists them."""
        return self._open(lambda zf: list(iter_zip_entries(zf, self.config.encoding)))

    def read(self, name: str) -> bytes:
        def operation(zf: zipfile.ZipFile) -> bytes:
            self._require(zf, name)
            return read_entry(zf, name, self.config.buffer_size)

        return self._open(operation)

    # ==================== 断言 ====================

    def assert_entry_exists(self, name: str) -> None:
        self._open(lambda zf: self._require(zf, name))

    def assert_entry_does_not_exist(self, name: str) -> None:
        def operation(zf: zipfile.ZipFile) -> None:
            if find_entry(zf, name, self.config.encoding) is not None:
                raise UnexpectedEntry(
                    f"The entry [{name}] appears to exist and we did not expect the entry to exist"
                )

        self._open(operation)

    def assert_entry(self, name: str, expected: bytes | str) -> None:
        if isinstance(expected, str):
            expected = self.config.encode(expected)
        actual = self.read(name)
        if actual != bytes(expected):
            raise ContentMismatch(f"Expected content does not match for entry [{name}]")

    def assert_entry_comment(self, name: str, expected: Optional[str]) -> None:
        entry = self._open(lambda zf: self._require(zf, name))
        # 没有注释时 zipfile 返回空字节，None 与 "" 视为相同
        if (entry.comment or None) != (expected or None):
            raise CommentMismatch("The entry comment does not match")

    def assert_entry_actual_size(self, name: str, expected_size: int) -> None:
        entry = self._open(lambda zf: self._require(zf, name))
        if entry.size != expected_size:
            raise SizeMismatch("The entry expected size does not match")

    def assert_number_of_entries_is(self, expected_count: int) -> None:
        actual = self._open(lambda zf: sum(1 for _ in iter_zip_entries(zf, self.config.encoding)))
        if actual != expected_count:
            raise EntryCountMismatch(
                f"Number of entries do not match: expected {expected_count} but was {actual}"
            )

    def assert_directory_exists(self, path: str) -> None:
        directory = dir_name(path)
        entry = self._open(lambda zf: self._require(zf, directory))
        if not entry.is_dir:
            raise NotADirectory(f"It appears the entry [{path}] is not a directory")

    assert_directory_entry_exist = assert_directory_exists


# ==================== 函数式入口 ====================

def assert_entry_exists(zip_path: str | os.PathLike, name: str, config: Optional[Config] = None) -> None:
    """Fail unless ``name`` is an entry of the archive."""
    ArchiveInspector(zip_path, config).assert_entry_exists(name)


def assert_entry_does_not_exist(zip_path: str | os.PathLike, name: str, config: Optional[Config] = None) -> None:
    """Fail if an entry stored exactly as ``name`` exists."""
    ArchiveInspector(zip_path, config).assert_entry_does_not_exist(name)


def assert_entry(
    zip_path: str | os.PathLike, name: str, expected: bytes | str, config: Optional[Config] = None
) -> None:
    """Fail unless the decompressed content of ``name`` equals ``expected``.

    Text is encoded with the configured encoding before comparing.
    """
    ArchiveInspector(zip_path, config).assert_entry(name, expected)


def assert_entry_comment(
    zip_path: str | os.PathLike, name: str, expected: Optional[str], config: Optional[Config] = None
) -> None:
    ArchiveInspector(zip_path, config).assert_entry_comment(name, expected)


def assert_entry_actual_size(
    zip_path: str | os.PathLike, name: str, expected_size: int, config: Optional[Config] = None
) -> None:
    """Fail unless the uncompressed size of ``name`` is ``expected_size`` bytes."""
    ArchiveInspector(zip_path, config).assert_entry_actual_size(name, expected_size)


def assert_number_of_entries_is(
    zip_path: str | os.PathLike, expected_count: int, config: Optional[Config] = None
) -> None:
    ArchiveInspector(zip_path, config).assert_number_of_entries_is(expected_count)


def assert_directory_exists(zip_path: str | os.PathLike, path: str, config: Optional[Config] = None) -> None:
    """Fail unless ``path`` (with or without trailing ``/``) is a directory entry."""
    ArchiveInspector(zip_path, config).assert_directory_exists(path)


assert_directory_entry_exist = assert_directory_exists
