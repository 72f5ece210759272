"""zipunit - build zip fixtures and assert on zip files in tests.

The library logs through loguru but is disabled by default; call
``logger.enable("zipunit")`` to see its debug records.
"""

__version__ = "0.1.0"

from loguru import logger

from .assertions import (
    ArchiveInspector,
    assert_directory_entry_exist,
    assert_directory_exists,
    assert_entry,
    assert_entry_actual_size,
    assert_entry_comment,
    assert_entry_does_not_exist,
    assert_entry_exists,
    assert_number_of_entries_is,
)
from .builder import ZipBuilder
from .config import Config, load_config
from .errors import (
    ArchiveBuildError,
    ArchiveNotFound,
    ArchiveReadError,
    AssertionMismatch,
    ConfigurationError,
    ZipUnitError,
)
from .model import ArchiveEntry, EntrySpec

logger.disable(__name__)

__all__ = [
    "ArchiveBuildError",
    "ArchiveEntry",
    "ArchiveInspector",
    "ArchiveNotFound",
    "ArchiveReadError",
    "AssertionMismatch",
    "Config",
    "ConfigurationError",
    "EntrySpec",
    "ZipBuilder",
    "ZipUnitError",
    "assert_directory_entry_exist",
    "assert_directory_exists",
    "assert_entry",
    "assert_entry_actual_size",
    "assert_entry_comment",
    "assert_entry_does_not_exist",
    "assert_entry_exists",
    "assert_number_of_entries_is",
    "load_config",
]
