"""Flat-file line-record store.

Each logical file is a newline-delimited text file whose non-blank lines are
opaque records, addressable by 1-based position or by substring match.
"""

from rawdb.core.models import Page, RecordPath, StoreConfig
from rawdb.storage.store import RecordStore

__version__ = "1.0.0"

__all__ = [
    "Page",
    "RecordPath",
    "RecordStore",
    "StoreConfig",
    "__version__",
]
