"""Base line-source interface."""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import closing
from pathlib import Path


def is_record(line: str) -> bool:
    """Check whether a raw line counts as a record (not blank)."""
    return bool(line.strip())


class LineSource(ABC):
    """Abstract read access to the records of one file.

    Implementations differ only in how raw lines are produced. Filtering,
    trimming and positional lookup live here so every strategy sees the
    same records.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)

    @abstractmethod
    def _raw_lines(self) -> Iterator[str]:
        """Yield the file's lines without their terminators."""
        pass

    def lines(self) -> Iterator[str]:
        """Yield non-blank lines exactly as stored."""
        with closing(self._raw_lines()) as raw:
            for line in raw:
                if is_record(line):
                    yield line

    def records(self) -> Iterator[str]:
        """Yield non-blank lines trimmed of surrounding whitespace."""
        with closing(self.lines()) as lines:
            for line in lines:
                yield line.strip()

    def all_records(self) -> list[str]:
        """Collect every record in file order."""
        with closing(self.records()) as records:
            return list(records)

    def record_at(self, index: int) -> str | None:
        """Get the record at a 1-based file position.

        Stops reading as soon as the position is reached.
        """
        if index < 1:
            return None

        with closing(self.records()) as records:
            for position, record in enumerate(records, start=1):
                if position == index:
                    return record
        return None

    def count(self) -> int:
        """Count records in the file."""
        with closing(self.records()) as records:
            return sum(1 for _ in records)
