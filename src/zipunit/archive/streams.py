"""Stream helpers shared by the zip reader and writer."""

from __future__ import annotations

from contextlib import contextmanager
from typing import BinaryIO, Iterator, Protocol

from loguru import logger


class Closeable(Protocol):
    def close(self) -> None: ...


def close_quietly(resource: Closeable | None) -> None:
    """Close ``resource`` and discard any error raised while closing."""
    if resource is None:
        return
    try:
        resource.close()
    except Exception as e:
        logger.debug(f"Ignoring error while closing {resource!r}: {e!r}")


@contextmanager
def finalizing(resource: Closeable) -> Iterator[Closeable]:
    """Close ``resource`` when the block exits.

    A close error on the success path is raised, since closing is what
    finalizes an archive. If the block itself failed, the close is quiet
    so the original error is the one that propagates.
    """
    try:
        yield resource
    except BaseException:
        close_quietly(resource)
        raise
    resource.close()


def copy_stream(source: BinaryIO, target: BinaryIO, buffer_size: int = 1024) -> int:
    """Copy ``source`` into ``target`` in ``buffer_size`` chunks.

    Returns the number of bytes copied.
    """
    copied = 0
    while True:
        chunk = source.read(buffer_size)
        if not chunk:
            break
        target.write(chunk)
        copied += len(chunk)
    return copied
