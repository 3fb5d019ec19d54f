"""Record file storage.

- **RecordStore**: create, read, update and delete records of one file
- **backends**: in-memory and streaming read strategies chosen by file size
"""

from rawdb.storage.backends import (
    InMemoryLineSource,
    LineSource,
    StreamingLineSource,
    open_line_source,
)
from rawdb.storage.store import RecordStore

__all__ = [
    "InMemoryLineSource",
    "LineSource",
    "RecordStore",
    "StreamingLineSource",
    "open_line_source",
]
