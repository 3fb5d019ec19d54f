"""Whole-file line source for files under the size limit."""

from collections.abc import Iterator
from pathlib import Path

from .base import LineSource


class InMemoryLineSource(LineSource):
    """Reads the file once and serves lines from the loaded text."""

    def __init__(self, path: Path | str, encoding: str = "utf-8"):
        super().__init__(path)
        self.encoding = encoding
        self._text: str | None = None

    def load(self) -> str:
        """Read the whole file, caching the text for later passes."""
        if self._text is None:
            self._text = self.path.read_text(encoding=self.encoding)
        return self._text

    def _raw_lines(self) -> Iterator[str]:
        """Split the loaded text on newlines."""
        yield from self.load().split("\n")

    def is_blank(self) -> bool:
        """Check whether the file holds no records at all."""
        return not self.load().strip()
