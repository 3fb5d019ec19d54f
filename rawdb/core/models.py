"""Data models for the record store.

- StoreConfig: per-store settings (base directory, extension, size limit)
- RecordPath: physical location derived from a logical key
- Page: one page of sorted records plus the file's record count
"""

import msgspec

DEFAULT_BASE_DIR = "./data"
DEFAULT_FILE_EXTENSION = ".dat"
DEFAULT_LARGE_FILE_SIZE_LIMIT = 200_000
DEFAULT_KEY_DELIMITER = "-"


class StoreConfig(msgspec.Struct, frozen=True, kw_only=True):
    """Configuration shared by every store instance built from it.

    Files whose size is strictly greater than ``large_file_size_limit`` bytes
    are read with the streaming strategy.
    """

    base_dir: str = DEFAULT_BASE_DIR
    file_extension: str = DEFAULT_FILE_EXTENSION
    large_file_size_limit: int = DEFAULT_LARGE_FILE_SIZE_LIMIT
    key_delimiter: str = DEFAULT_KEY_DELIMITER

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.large_file_size_limit < 0:
            raise ValueError("large_file_size_limit must be non-negative")
        if not self.key_delimiter:
            raise ValueError("key_delimiter cannot be empty")

    @classmethod
    def from_dict(cls, data: dict) -> "StoreConfig":
        """Build a config from a plain mapping, ignoring unknown keys."""
        known = {k: v for k, v in data.items() if k in cls.__struct_fields__}
        try:
            return msgspec.convert(known, cls, strict=False)
        except msgspec.ValidationError as e:
            raise ValueError(f"Invalid store configuration: {e}") from e

    def to_dict(self) -> dict:
        """Convert to a plain dictionary."""
        return msgspec.to_builtins(self)


class RecordPath(msgspec.Struct, frozen=True):
    """Physical location of a record file."""

    directory: str
    file_name: str
    file_path: str
    segments: tuple[str, ...]


class Page(msgspec.Struct, frozen=True):
    """A page of sorted records.

    ``total`` counts every record in the file, not just the page.
    """

    rows: tuple[str, ...] = ()
    total: int = 0

    def __len__(self) -> int:
        return len(self.rows)

    @property
    def is_empty(self) -> bool:
        return not self.rows
