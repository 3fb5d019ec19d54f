"""Read strategies for record files.

- **InMemoryLineSource**: reads the whole file and splits it
- **StreamingLineSource**: scans line by line for large files

``open_line_source`` probes the file size once and picks one of them. Both
yield identical records for identical content.
"""

import logging
import os
from pathlib import Path

from .base import LineSource, is_record
from .memory import InMemoryLineSource
from .streaming import StreamingLineSource

logger = logging.getLogger(__name__)


def open_line_source(path: Path | str, size_limit: int) -> LineSource:
    """Choose a line source for a file based on its size.

    Args:
        path: Record file path.
        size_limit: Files strictly larger than this many bytes are streamed.

    Returns:
        A line source bound to ``path``.

    Raises:
        OSError: If the file cannot be stat'ed (including when missing).
    """
    size = os.stat(path).st_size
    if size > size_limit:
        logger.debug("Streaming %s (%d bytes > %d)", path, size, size_limit)
        return StreamingLineSource(path)
    return InMemoryLineSource(path)


__all__ = [
    "InMemoryLineSource",
    "LineSource",
    "StreamingLineSource",
    "is_record",
    "open_line_source",
]
