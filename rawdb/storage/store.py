"""Record store: line-oriented access to one record file.

A store is bound to a single logical key. Every public operation reports
expected failures through its return value (``None``, ``False``, an empty
``Page`` or a failed ``OperationResult``) and never raises them.

Mutations read the whole file, change the line list in memory and rewrite
the file through a temporary file in the same directory. There is no locking:
two processes mutating the same file concurrently can lose one of the updates
(last writer wins).
"""

import logging
import shutil
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from rawdb.core.exceptions import (
    DuplicateRecordError,
    InvalidRecordError,
    RecordError,
    RecordIOError,
    RecordNotFoundError,
)
from rawdb.core.models import Page, RecordPath, StoreConfig
from rawdb.core.paths import resolve_path
from rawdb.core.sorting import sort_records
from rawdb.operations.results import OperationResult, ResultStatus
from rawdb.storage.backends import (
    InMemoryLineSource,
    LineSource,
    open_line_source,
)

logger = logging.getLogger(__name__)

ENCODING = "utf-8"


class RecordStore:
    """Create, read, update and delete line records in one file."""

    def __init__(self, key: str, config: StoreConfig | None = None):
        """Initialize the store for a logical key.

        Args:
            key: Hyphen-delimited logical key; the last segment names the file.
            config: Store configuration, defaults to ``StoreConfig()``.

        Raises:
            InvalidKeyError: If the key cannot name a file.
        """
        self.key = key
        self.config = config or StoreConfig()
        self.location: RecordPath = resolve_path(key, self.config)

    def __repr__(self) -> str:
        return f"RecordStore({self.key!r}, path={self.location.file_path!r})"

    @property
    def path(self) -> Path:
        """Path of the backing record file."""
        return Path(self.location.file_path)

    @property
    def directory(self) -> Path:
        """Directory holding the record file."""
        return Path(self.location.directory)

    # Create

    def create_row(self, record: str) -> OperationResult:
        """Append a record unless an equal one already exists.

        Equality ignores case and surrounding whitespace. The record is
        written exactly as given.
        """
        try:
            self._create(record)
        except InvalidRecordError as e:
            return self._failure(ResultStatus.VALIDATION_FAILED, "create_row", e)
        except DuplicateRecordError as e:
            return self._failure(ResultStatus.CONFLICT, "create_row", e)
        except RecordError as e:
            return self._failure(ResultStatus.ERROR, "create_row", e)

        logger.debug("Added row to %s", self.path)
        return OperationResult(
            status=ResultStatus.SUCCESS,
            message="Row added successfully",
            key=self.key,
        )

    def _create(self, record: str) -> None:
        if not record.strip():
            raise InvalidRecordError()

        self._ensure_directory()

        try:
            text = self.path.read_text(encoding=ENCODING)
        except FileNotFoundError:
            self._append(record)
            return
        except (OSError, UnicodeDecodeError) as e:
            raise RecordIOError(str(self.path), str(e)) from e

        candidate = record.strip().lower()
        if any(line.strip().lower() == candidate for line in text.split("\n")):
            raise DuplicateRecordError(record)

        # Keep the new record on its own line if the file was edited by hand
        separator = "\n" if text and not text.endswith("\n") else ""
        self._append(f"{separator}{record}")

    def _ensure_directory(self) -> None:
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise RecordIOError(str(self.directory), str(e)) from e

    def _append(self, text: str) -> None:
        data = self._encode(f"{text}\n")
        try:
            with open(self.path, "ab") as f:
                f.write(data)
        except OSError as e:
            raise RecordIOError(str(self.path), str(e)) from e

    def _encode(self, text: str) -> bytes:
        """Encode before any file is opened so bad text touches nothing."""
        try:
            return text.encode(ENCODING)
        except UnicodeError as e:
            raise RecordIOError(str(self.path), str(e)) from e

    # Read

    def get_paginated_rows(
        self, quantity: int = 10, asc: bool = True, page: int = 1
    ) -> Page:
        """Get one page of records in collation order.

        Args:
            quantity: Page size, at least 1.
            asc: Sort ascending when true, descending otherwise.
            page: 1-based page number.

        Returns:
            The page rows and the file's total record count. An empty page
            with a zero total when the file is missing or unreadable.
        """
        if quantity < 1 or page < 1:
            logger.debug("Rejected page request quantity=%r page=%r", quantity, page)
            return Page()

        try:
            with self._reading():
                records = self._source().all_records()
        except RecordError as e:
            self._log_failure("get_paginated_rows", e)
            return Page()

        start = (page - 1) * quantity
        ordered = sort_records(records, asc=asc)
        return Page(rows=tuple(ordered[start : start + quantity]), total=len(records))

    def get_index_row(self, index: int) -> str | None:
        """Get the trimmed record at a 1-based file position, or None."""
        try:
            with self._reading():
                return self._source().record_at(index)
        except RecordError as e:
            self._log_failure("get_index_row", e)
            return None

    def count_rows(self) -> int:
        """Count records in the file; 0 when it is missing or unreadable."""
        try:
            with self._reading():
                return self._source().count()
        except RecordError as e:
            self._log_failure("count_rows", e)
            return 0

    def _source(self) -> LineSource:
        return open_line_source(self.path, self.config.large_file_size_limit)

    @contextmanager
    def _reading(self) -> Iterator[None]:
        """Translate filesystem errors into record errors."""
        try:
            yield
        except FileNotFoundError as e:
            raise RecordNotFoundError(str(self.path)) from e
        except (OSError, UnicodeDecodeError) as e:
            raise RecordIOError(str(self.path), str(e)) from e

    # Delete / update

    def delete_by_index(self, index: int) -> bool:
        """Delete the record at a 1-based position."""
        try:
            lines = self._load_lines()
            del lines[self._check_index(index, lines)]
            self._save_lines(lines)
        except RecordError as e:
            self._log_failure("delete_by_index", e)
            return False

        logger.debug("Deleted row %d from %s", index, self.path)
        return True

    def delete_by_term(self, term: str) -> bool:
        """Delete the first record containing ``term``, ignoring case."""
        try:
            lines = self._load_lines()
            del lines[self._find_term(term, lines)]
            self._save_lines(lines)
        except RecordError as e:
            self._log_failure("delete_by_term", e)
            return False

        logger.debug("Deleted row matching %r from %s", term, self.path)
        return True

    def delete_all_by_term(self, term: str) -> int:
        """Delete every record containing ``term``, ignoring case.

        Returns:
            Number of records removed, 0 if none matched or the file is
            missing or unreadable.
        """
        needle = term.lower()
        try:
            lines = self._load_lines()
            kept = [line for line in lines if needle not in line.lower()]
            removed = len(lines) - len(kept)
            if not removed:
                raise RecordNotFoundError(f"term {term!r}")
            self._save_lines(kept)
        except RecordError as e:
            self._log_failure("delete_all_by_term", e)
            return 0

        logger.debug("Deleted %d rows matching %r from %s", removed, term, self.path)
        return removed

    def upgrade_by_index(self, index: int, new_data: str) -> bool:
        """Replace the record at a 1-based position with ``new_data``.

        The replacement is written as given.
        """
        try:
            lines = self._load_lines()
            lines[self._check_index(index, lines)] = new_data
            self._save_lines(lines)
        except RecordError as e:
            self._log_failure("upgrade_by_index", e)
            return False

        logger.debug("Updated row %d in %s", index, self.path)
        return True

    def upgrade_by_term(self, term: str, new_data: str) -> bool:
        """Replace the first record containing ``term`` with ``new_data``."""
        try:
            lines = self._load_lines()
            lines[self._find_term(term, lines)] = new_data
            self._save_lines(lines)
        except RecordError as e:
            self._log_failure("upgrade_by_term", e)
            return False

        logger.debug("Updated row matching %r in %s", term, self.path)
        return True

    def _load_lines(self) -> list[str]:
        """Read every non-blank line into memory regardless of file size.

        Raises:
            RecordNotFoundError: If the file is missing or holds no records.
            RecordIOError: If the file cannot be read.
        """
        source = InMemoryLineSource(self.path, encoding=ENCODING)
        with self._reading():
            if source.is_blank():
                raise RecordNotFoundError(f"records in {self.path}")
            return list(source.lines())

    def _save_lines(self, lines: list[str]) -> None:
        """Rewrite the file atomically with one trailing newline."""
        data = self._encode("\n".join(lines) + "\n")

        try:
            fd, temp_path = tempfile.mkstemp(dir=self.directory, suffix=".tmp")
        except OSError as e:
            raise RecordIOError(str(self.directory), str(e)) from e

        try:
            with open(fd, "wb") as f:
                f.write(data)
            shutil.copymode(self.path, temp_path)
            Path(temp_path).replace(self.path)
        except OSError as e:
            Path(temp_path).unlink(missing_ok=True)
            raise RecordIOError(str(self.path), str(e)) from e

    @staticmethod
    def _check_index(index: int, lines: list[str]) -> int:
        """Convert a 1-based position to a list offset."""
        if index < 1 or index > len(lines):
            raise RecordNotFoundError(f"index {index}")
        return index - 1

    @staticmethod
    def _find_term(term: str, lines: list[str]) -> int:
        """Offset of the first line containing ``term``, ignoring case."""
        needle = term.lower()
        for offset, line in enumerate(lines):
            if needle in line.lower():
                return offset
        raise RecordNotFoundError(f"term {term!r}")

    # Failure reporting

    def _failure(
        self, status: ResultStatus, operation: str, error: RecordError
    ) -> OperationResult:
        self._log_failure(operation, error)
        return OperationResult(
            status=status,
            message=str(error),
            key=self.key,
            errors=[str(error)],
        )

    def _log_failure(self, operation: str, error: RecordError) -> None:
        if isinstance(error, RecordIOError):
            logger.warning("%s failed for %s: %s", operation, self.key, error)
        else:
            logger.debug("%s failed for %s: %s", operation, self.key, error)
