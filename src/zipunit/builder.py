"""
ZipBuilder - 按需构造测试用 zip 文件

Entries are collected in insertion order and written out on ``build()``.
The builder keeps its entries after a build, so the same fixture can be
written several times or extended between builds.
"""

from __future__ import annotations

import os
import threading
import time
from pathlib import Path
from typing import Optional, Tuple

from .archive.zip_writer import write_archive
from .config import DEFAULT_CONFIG, Config
from .errors import ConfigurationError
from .model import Content, EntrySpec

_stamp_lock = threading.Lock()
_last_stamp = 0


def unique_stamp() -> int:
    """Nanosecond timestamp, strictly increasing within the process."""
    global _last_stamp
    with _stamp_lock:
        _last_stamp = max(time.time_ns(), _last_stamp + 1)
        return _last_stamp


class ZipBuilder:
    """Fluent builder for zip fixtures.

    Args:
        folder: 目标目录；``build()`` 和 ``build("name.zip")`` 需要它
        config: 编码、缓冲区与压缩配置，默认使用包内默认配置

    Example::

        path = (
            ZipBuilder(tmp_path)
            .with_entry("1.txt", "content")
            .with_entry("2.bin", b"\\x01\\x02\\x03")
            .with_dir_entry("dir")
            .build()
        )
    """

    def __init__(self, folder: Optional[str | os.PathLike] = None, config: Optional[Config] = None):
        self.folder = Path(folder) if folder is not None else None
        self.config = (config or DEFAULT_CONFIG).copy().validate()
        self._entries: list[EntrySpec] = []

    @property
    def entries(self) -> Tuple[EntrySpec, ...]:
        return tuple(self._entries)

    def with_entry(self, entry: str | EntrySpec, content: Optional[Content] = None) -> "ZipBuilder":
        """Add a file entry.

        ``entry`` is either a name, in which case ``content`` (bytes, text
        or a binary stream) is required, or a ready-made :class:`EntrySpec`.
        """
        if isinstance(entry, EntrySpec):
            if content is not None:
                raise TypeError("content must not be given together with an EntrySpec")
            self._entries.append(entry)
            return self
        if content is None:
            raise TypeError(f"content is required for entry [{entry}], use with_dir_entry for directories")
        self._entries.append(EntrySpec(entry, content))
        return self

    def with_dir_entry(self, name: str) -> "ZipBuilder":
        self._entries.append(EntrySpec.directory(name))
        return self

    def clear(self) -> "ZipBuilder":
        self._entries.clear()
        return self

    def build(self, target: Optional[str | os.PathLike] = None) -> Path:
        """Write the accumulated entries and return the archive path.

        ``target`` may be:

        - ``None``: a generated unique ``<stamp>.zip`` inside ``folder``
        - a ``str``: a file name inside ``folder``
        - a path object (``pathlib.Path`` or any ``os.PathLike``): the
          exact location to write, ``folder`` is not needed

        Raises:
            ConfigurationError: a folder is needed but none was configured
            ArchiveBuildError: writing the archive failed
        """
        if target is None or isinstance(target, str):
            if self.folder is None:
                raise ConfigurationError(
                    "You need to provide a folder when constructing the builder and want to use this build method"
                )
            filename = target if target is not None else f"{unique_stamp()}.zip"
            path = self.folder / filename
        else:
            path = Path(target)
        return write_archive(path, self._entries, self.config)
