"""Archive module for zipunit - reading and writing zip files through zipfile."""

from .zip_reader import find_entry, iter_zip_entries, read_entry, with_open_zip
from .zip_writer import write_archive

__all__ = ["find_entry", "iter_zip_entries", "read_entry", "with_open_zip", "write_archive"]
