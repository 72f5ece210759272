from __future__ import annotations
import io
import os
import zipfile
from pathlib import Path
from typing import Callable, Iterator, TypeVar

from loguru import logger

from ..errors import ArchiveNotFound, ArchiveReadError
from ..model import ArchiveEntry
from .streams import close_quietly, copy_stream

T = TypeVar("T")


def assert_zip_exists(path: str | os.PathLike) -> Path:
    p = Path(path)
    if not p.exists():
        raise ArchiveNotFound(p)
    return p


def with_open_zip(path: str | os.PathLike, operation: Callable[[zipfile.ZipFile], T]) -> T:
    """Open the zip at ``path``, run ``operation`` on it and close it again.

    The archive is closed on every path and close errors are ignored.
    Assertion failures raised by ``operation`` propagate untouched, any
    other error from the codec is wrapped in :class:`ArchiveReadError`.
    """
    p = assert_zip_exists(path)
    zf = None
    try:
        zf = zipfile.ZipFile(p)
        logger.debug(f"Opened {p} ({len(zf.filelist)} entries)")
        return operation(zf)
    except AssertionError:
        raise
    except Exception as e:
        raise ArchiveReadError(p, e) from e
    finally:
        close_quietly(zf)


def to_archive_entry(info: zipfile.ZipInfo, encoding: str = "utf-8") -> ArchiveEntry:
    # zipfile 已经把文件名解码为 str；注释仍是原始字节
    comment = info.comment.decode(encoding, errors="replace") if info.comment else None
    return ArchiveEntry(
        name=info.filename,
        is_dir=info.is_dir(),
        size=info.file_size,
        compressed_size=info.compress_size,
        comment=comment,
    )


def find_entry(zf: zipfile.ZipFile, name: str, encoding: str = "utf-8") -> ArchiveEntry | None:
    """Direct lookup by stored name, ``None`` when absent."""
    try:
        info = zf.getinfo(name)
    except KeyError:
        return None
    return to_archive_entry(info, encoding)


def iter_zip_entries(zf: zipfile.ZipFile, encoding: str = "utf-8") -> Iterator[ArchiveEntry]:
    for info in zf.infolist():
        yield to_archive_entry(info, encoding)


def read_entry(zf: zipfile.ZipFile, name: str, buffer_size: int = 1024) -> bytes:
    """Read the decompressed content of ``name`` into memory."""
    output = io.BytesIO()
    source = zf.open(name)
    try:
        copy_stream(source, output, buffer_size)
    finally:
        close_quietly(source)
    return output.getvalue()
