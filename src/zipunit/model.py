"""Entry records for the write side and the read side of a zip file."""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import BinaryIO, Union

Content = Union[bytes, bytearray, str, BinaryIO]


def dir_name(name: str) -> str:
    """Directory entries are stored with a trailing ``/``."""
    if name.endswith("/"):
        return name
    return name + "/"


class EntrySpec:
    """One entry waiting to be written by :class:`~zipunit.builder.ZipBuilder`.

    ``content`` of ``None`` marks a directory and its name always ends with
    ``/``. Text content is kept as text and encoded with the building
    archive's configured encoding, byte content is kept as-is and a stream
    is read (and closed) when the archive is built.
    """

    def __init__(
        self,
        name: str,
        content: Content | None = None,
        comment: str | None = None,
    ):
        if not name:
            raise ValueError("Entry name must not be empty")
        if content is None:
            name = dir_name(name)
        elif isinstance(content, bytearray):
            content = bytes(content)
        self.name = name
        self.content: bytes | str | BinaryIO | None = content
        self.comment = comment

    def __repr__(self) -> str:
        if self.is_dir:
            kind = "dir"
        elif self.is_stream:
            kind = "stream"
        elif isinstance(self.content, str):
            kind = f"{len(self.content)} chars"
        else:
            kind = f"{len(self.content)} bytes"
        return f"EntrySpec({self.name!r}, {kind}, comment={self.comment!r})"

    @classmethod
    def directory(cls, name: str, comment: str | None = None) -> "EntrySpec":
        return cls(dir_name(name), None, comment)

    @property
    def is_dir(self) -> bool:
        return self.content is None

    @property
    def is_stream(self) -> bool:
        return self.content is not None and not isinstance(self.content, (bytes, str))

    def open_content(self, encoding: str = "utf-8") -> BinaryIO:
        # text and bytes get a fresh reader per build so the entry stays reusable
        if self.content is None:
            raise ValueError(f"Directory entry [{self.name}] has no content")
        if isinstance(self.content, str):
            return io.BytesIO(self.content.encode(encoding))
        if isinstance(self.content, bytes):
            return io.BytesIO(self.content)
        return self.content


@dataclass
class ArchiveEntry:
    name: str
    is_dir: bool
    size: int
    compressed_size: int
    comment: str | None = None
