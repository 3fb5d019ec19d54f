"""Streaming line source for files above the size limit."""

from collections.abc import Iterator
from pathlib import Path

from .base import LineSource


class StreamingLineSource(LineSource):
    """Scans the file line by line with bounded memory.

    The file handle lives inside the generator; closing the generator (or
    exhausting it) closes the file.
    """

    def __init__(self, path: Path | str, encoding: str = "utf-8"):
        super().__init__(path)
        self.encoding = encoding

    def _raw_lines(self) -> Iterator[str]:
        """Yield lines from an open handle, stripped of the terminator."""
        with open(self.path, encoding=self.encoding) as f:
            for line in f:
                yield line.removesuffix("\n")
