"""Main CLI entry point and application setup."""

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import click
from click.exceptions import Exit
from rich.console import Console
from rich.markup import escape

from rawdb import __version__
from rawdb.cli.commands import rows
from rawdb.cli.config import build_store_config, load_config
from rawdb.core.models import StoreConfig


@dataclass
class Context:
    """CLI context that holds shared resources."""

    store_config: StoreConfig
    console: Console
    config: dict[str, Any] = field(default_factory=dict)
    debug: bool = False


LOG_FORMAT = "%(levelname)s: %(message)s"
DEBUG_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def log_level(verbose: bool = False, quiet: bool = False, debug: bool = False) -> int:
    """Map the global CLI flags to a logging level; --quiet wins."""
    if quiet:
        return logging.WARNING
    if verbose or debug:
        return logging.DEBUG
    return logging.INFO


def setup_logging(
    verbose: bool = False, quiet: bool = False, debug: bool = False
) -> None:
    """Send log records to stderr so they never mix with printed rows."""
    logging.basicConfig(
        level=log_level(verbose, quiet, debug),
        format=DEBUG_LOG_FORMAT if debug else LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def create_console(no_color: bool = False, width: int | None = None) -> Console:
    """Create the console rows are printed to.

    Soft wrapping keeps a long record on one output line.
    """
    return Console(
        no_color=no_color,
        width=width or 120,
        soft_wrap=True,
        highlight=False,
        color_system=None if no_color else "auto",
    )


def _console(ctx: click.Context) -> Console | None:
    return getattr(ctx.obj, "console", None)


class RawDBGroup(click.Group):
    """Group that turns interrupts and unexpected errors into exit codes."""

    def invoke(self, ctx):
        try:
            return super().invoke(ctx)
        except KeyboardInterrupt:
            if console := _console(ctx):
                console.print("[yellow]Interrupted[/yellow]")
            ctx.exit(130)
        except (click.ClickException, click.Abort, Exit, SystemExit):
            raise
        except Exception as e:
            if getattr(ctx.obj, "debug", False):
                raise
            if console := _console(ctx):
                console.print(f"[red]Error:[/red] {escape(str(e))}")
            else:
                click.echo(f"Error: {e}", err=True)
            ctx.exit(1)


@click.group(cls=RawDBGroup)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-error output")
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.option("--debug", is_flag=True, help="Enable debug mode with full tracebacks")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file",
)
@click.option(
    "--data-dir",
    "-d",
    type=click.Path(file_okay=False, path_type=Path),
    help="Override data directory location",
)
@click.version_option(
    version=__version__, prog_name="rawdb", message="rawdb version %(version)s"
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    no_color: bool,
    debug: bool,
    config: Path | None,
    data_dir: Path | None,
) -> None:
    """Flat-file line record store.

    Each KEY names a text file: hyphen-separated segments become directories
    under the data directory and the last segment names the file, so
    "users-admins" is stored in ./data/users/admins.dat by default.
    """
    setup_logging(verbose=verbose, quiet=quiet, debug=debug)

    console = create_console(no_color=no_color)

    try:
        config_data = load_config(config)
        store_config = build_store_config(config_data, data_dir)
    except ValueError as e:
        if debug:
            raise
        click.echo(f"Error loading configuration: {e}", err=True)
        ctx.exit(1)

    ctx.obj = Context(
        store_config=store_config,
        console=console,
        config=config_data,
        debug=debug,
    )


cli.add_command(rows.add)
cli.add_command(rows.get)
cli.add_command(rows.get_index, name="get-index")
cli.add_command(rows.count)
cli.add_command(rows.delete_by_term, name="delete-by-term")
cli.add_command(rows.delete_by_index, name="delete-by-index")
cli.add_command(rows.update_by_index, name="update-by-index")
cli.add_command(rows.update_by_term, name="update-by-term")


def main() -> None:
    """Main entry point for the CLI application."""
    try:
        cli()
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
