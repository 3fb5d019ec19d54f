"""Pytest configuration and fixtures for CLI tests."""

import pytest
from click.testing import CliRunner


@pytest.fixture
def data_dir(tmp_path):
    """Data directory for CLI runs."""
    return tmp_path / "data"


@pytest.fixture
def cli_runner(data_dir, monkeypatch, tmp_path):
    """Click CLI test runner bound to an isolated data directory."""
    from rawdb.cli.main import cli

    # Keep user and project config files out of the tests
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.chdir(tmp_path)

    class RawDBCliRunner(CliRunner):
        def invoke(self, args, **kwargs):  # type: ignore
            """Invoke the rawdb CLI with the temporary data directory."""
            return super().invoke(cli, ["--data-dir", str(data_dir), *args], **kwargs)

    return RawDBCliRunner()


@pytest.fixture
def record_file(data_dir):
    """Path of the file backing the ``fruits-list`` key."""
    return data_dir / "fruits" / "list.dat"
