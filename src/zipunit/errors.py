"""Failure types raised by the builder and the assertions."""

from __future__ import annotations

import os


class ZipUnitError(Exception):
    """Base class for zipunit errors that are not assertion failures."""


class ConfigurationError(ZipUnitError, AssertionError):
    """The builder or its configuration cannot be used as requested.

    Also an ``AssertionError`` so a misconfigured fixture fails the test
    the same way a broken precondition would.
    """


class ArchiveBuildError(ZipUnitError):
    """Raised when writing an archive fails."""

    def __init__(self, path: str | os.PathLike, error: BaseException):
        self.path = path
        self.error = error
        super().__init__(f"A problem occurred while building zip file {path}: {error}")


class ArchiveReadError(ZipUnitError):
    """Raised when an existing archive cannot be opened or read."""

    def __init__(self, path: str | os.PathLike, error: BaseException):
        self.path = path
        self.error = error
        super().__init__(f"A problem occurred while reading zip file {path}: {error}")


class AssertionMismatch(AssertionError):
    """An expectation about an archive did not hold."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ArchiveNotFound(AssertionMismatch):
    MESSAGE = "ZIP file does not exist"

    def __init__(self, path: str | os.PathLike):
        self.path = path
        super().__init__(self.MESSAGE)


class EntryNotFound(AssertionMismatch):
    pass


class UnexpectedEntry(AssertionMismatch):
    pass


class ContentMismatch(AssertionMismatch):
    pass


class CommentMismatch(AssertionMismatch):
    pass


class SizeMismatch(AssertionMismatch):
    pass


class EntryCountMismatch(AssertionMismatch):
    pass


class NotADirectory(AssertionMismatch):
    pass
