"""Exception classes for the record store."""


class RecordError(Exception):
    """Base exception for record-related errors."""

    pass


class InvalidRecordError(RecordError, ValueError):
    """Raised when a record is empty or whitespace-only."""

    def __init__(self, message: str = "Record cannot be empty"):
        """Initialize with message."""
        super().__init__(message)


class InvalidKeyError(RecordError, ValueError):
    """Raised when a logical key cannot be mapped to a file."""

    def __init__(self, key: str, message: str):
        """Initialize with key and message."""
        self.key = key
        super().__init__(f"Invalid key {key!r}: {message}")


class DuplicateRecordError(RecordError):
    """Raised when a record already exists in the target file."""

    def __init__(self, record: str):
        """Initialize with the rejected record."""
        self.record = record
        super().__init__(f"Record already exists: {record.strip()}")


class RecordNotFoundError(RecordError):
    """Raised when no record matches an index or term."""

    def __init__(self, target: str):
        """Initialize with a description of what was looked up."""
        self.target = target
        super().__init__(f"Record not found: {target}")


class RecordIOError(RecordError):
    """Raised when a record file or directory cannot be read or written."""

    def __init__(self, path: str, details: str = ""):
        """Initialize with path and details."""
        self.path = path
        message = f"I/O failure at {path}"
        if details:
            message += f": {details}"
        super().__init__(message)
