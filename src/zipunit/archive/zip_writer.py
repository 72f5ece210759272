from __future__ import annotations
import os
import time
import zipfile
from pathlib import Path
from typing import Sequence

from loguru import logger

from ..config import Config
from ..errors import ArchiveBuildError
from ..model import EntrySpec
from .streams import close_quietly, copy_stream, finalizing

# drwxrwxr-x plus the MS-DOS directory flag, as zipfile.ZipFile.mkdir writes it
DIR_EXTERNAL_ATTR = (0o40775 << 16) | 0x10


def _zip_info(spec: EntrySpec, config: Config) -> zipfile.ZipInfo:
    info = zipfile.ZipInfo(spec.name, date_time=time.localtime(time.time())[:6])
    if spec.comment is not None:
        info.comment = config.encode(spec.comment)
    if spec.is_dir:
        info.compress_type = zipfile.ZIP_STORED
        info.external_attr = DIR_EXTERNAL_ATTR
    else:
        info.compress_type = config.compress_type()
    return info


def _write_entry(archive: zipfile.ZipFile, spec: EntrySpec, config: Config) -> None:
    info = _zip_info(spec, config)
    if spec.is_dir:
        archive.writestr(info, b"")
        return

    source = spec.open_content(config.encoding)
    try:
        with finalizing(archive.open(info, mode="w")) as target:
            copy_stream(source, target, config.buffer_size)
    finally:
        close_quietly(source)


def write_archive(path: str | os.PathLike, entries: Sequence[EntrySpec], config: Config) -> Path:
    """Write ``entries`` in order into a new zip file at ``path``.

    Each stream content source is closed once it has been read, whether
    or not the write succeeds. Any failure is reported as a single :class:`ArchiveBuildError`.
    """
    target = Path(path)
    pending = list(entries)
    try:
        with finalizing(zipfile.ZipFile(target, mode="w")) as archive:
            for spec in pending:
                _write_entry(archive, spec, config)
    except Exception as e:
        raise ArchiveBuildError(target, e) from e
    logger.debug(f"Wrote {len(pending)} entries to {target}")
    return target
