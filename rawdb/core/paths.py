"""Logical key to file path resolution."""

import os

from .exceptions import InvalidKeyError
from .models import RecordPath, StoreConfig


def split_key(key: str, delimiter: str = "-") -> tuple[str, ...]:
    """Split a logical key into its segments.

    Args:
        key: Logical key such as ``"users-admins-list"``.
        delimiter: Segment separator.

    Returns:
        The segments in order; the last one names the file.

    Raises:
        InvalidKeyError: If the key or its final segment is empty.
    """
    if not key:
        raise InvalidKeyError(key, "key cannot be empty")

    segments = tuple(key.split(delimiter))
    if not segments[-1]:
        raise InvalidKeyError(key, "final segment cannot be empty")

    return segments


def resolve_path(key: str, config: StoreConfig) -> RecordPath:
    """Derive directory, file name and full path for a logical key.

    Purely syntactic; touches nothing on disk.
    """
    segments = split_key(key, config.key_delimiter)
    file_name = f"{segments[-1]}{config.file_extension}"
    directory = os.path.join(config.base_dir, *segments[:-1])

    return RecordPath(
        directory=directory,
        file_name=file_name,
        file_path=os.path.join(directory, file_name),
        segments=segments,
    )
