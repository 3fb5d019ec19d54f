"""Shared fixtures for storage tests."""

import pytest

from rawdb.core.models import StoreConfig
from rawdb.storage.store import RecordStore


@pytest.fixture
def config(tmp_path):
    """Store config rooted in a temporary directory."""
    return StoreConfig(base_dir=str(tmp_path / "data"))


@pytest.fixture
def store(config):
    """Store for a nested key in the temporary data directory."""
    return RecordStore("fruits-list", config)


@pytest.fixture
def make_store(config):
    """Factory creating stores with the shared config."""

    def _make(key: str = "fruits-list", **overrides) -> RecordStore:
        cfg = StoreConfig(**{**config.to_dict(), **overrides})
        return RecordStore(key, cfg)

    return _make


@pytest.fixture
def write_lines(store):
    """Write raw content to the store's backing file."""

    def _write(*lines: str, content: str | None = None) -> None:
        store.path.parent.mkdir(parents=True, exist_ok=True)
        text = content if content is not None else "".join(f"{x}\n" for x in lines)
        store.path.write_text(text, encoding="utf-8")

    return _write


@pytest.fixture
def read_file(store):
    """Read the store's backing file verbatim."""

    def _read() -> str:
        return store.path.read_text(encoding="utf-8")

    return _read
