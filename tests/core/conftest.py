"""Shared fixtures for core tests."""

import pytest

from rawdb.core.models import StoreConfig


@pytest.fixture
def config():
    """Config with a relative base directory, for pure path tests."""
    return StoreConfig(base_dir="base", file_extension=".dat")
