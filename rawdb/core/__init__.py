"""Core models, path resolution and ordering for the record store."""

from rawdb.core.exceptions import (
    DuplicateRecordError,
    InvalidKeyError,
    InvalidRecordError,
    RecordError,
    RecordIOError,
    RecordNotFoundError,
)
from rawdb.core.models import Page, RecordPath, StoreConfig
from rawdb.core.paths import resolve_path, split_key
from rawdb.core.sorting import collation_key, sort_records

__all__ = [
    "DuplicateRecordError",
    "InvalidKeyError",
    "InvalidRecordError",
    "Page",
    "RecordError",
    "RecordIOError",
    "RecordNotFoundError",
    "RecordPath",
    "StoreConfig",
    "collation_key",
    "resolve_path",
    "sort_records",
    "split_key",
]
