"""Row management CLI commands."""

import click
from rich.markup import escape
from rich.table import Table

from rawdb.core.exceptions import InvalidKeyError
from rawdb.storage.store import RecordStore


def get_store(ctx: click.Context, key: str) -> RecordStore:
    """Build a record store for a logical key from the context config."""
    try:
        return RecordStore(key, ctx.obj.store_config)
    except InvalidKeyError as e:
        raise click.BadParameter(str(e), param_hint="KEY") from e


def _fail(ctx: click.Context, message: str) -> None:
    ctx.obj.console.print(f"[red]{escape(message)}[/red]")
    ctx.exit(1)


# Command: add
@click.command()
@click.argument("key")
@click.argument("row")
@click.pass_context
def add(ctx: click.Context, key: str, row: str) -> None:
    """Add ROW to the end of KEY unless it already exists."""
    result = get_store(ctx, key).create_row(row)

    if not result.success:
        _fail(ctx, f"Failed to add the row: {result.message}")

    ctx.obj.console.print("[green]✓[/green] Row added successfully!")


# Command: get
@click.command()
@click.argument("key")
@click.argument("page", type=click.IntRange(min=1), default=1)
@click.option(
    "--quantity",
    "-n",
    type=click.IntRange(min=1),
    default=10,
    show_default=True,
    help="Number of rows per page",
)
@click.option(
    "--asc/--desc", default=True, show_default=True, help="Sort direction"
)
@click.pass_context
def get(ctx: click.Context, key: str, page: int, quantity: int, asc: bool) -> None:
    """Show one PAGE of rows from KEY in sorted order."""
    console = ctx.obj.console
    result = get_store(ctx, key).get_paginated_rows(
        quantity=quantity, asc=asc, page=page
    )

    console.print(f"Total rows: {result.total}")
    if result.is_empty:
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Row")

    offset = (page - 1) * quantity
    for position, row in enumerate(result.rows, start=offset + 1):
        table.add_row(str(position), escape(row))

    console.print(table)


# Command: get-index
@click.command()
@click.argument("key")
@click.argument("index", type=int)
@click.pass_context
def get_index(ctx: click.Context, key: str, index: int) -> None:
    """Show the row at 1-based INDEX of KEY."""
    row = get_store(ctx, key).get_index_row(index)

    if row is None:
        _fail(ctx, f"No row found at index {index}")

    ctx.obj.console.print(f"Row {index}: {escape(row)}")


# Command: count
@click.command()
@click.argument("key")
@click.pass_context
def count(ctx: click.Context, key: str) -> None:
    """Show the number of rows stored in KEY."""
    ctx.obj.console.print(f"Total rows: {get_store(ctx, key).count_rows()}")


# Command: delete-by-term
@click.command()
@click.argument("key")
@click.argument("term")
@click.option(
    "--all", "delete_all", is_flag=True, help="Delete every row containing TERM"
)
@click.pass_context
def delete_by_term(ctx: click.Context, key: str, term: str, delete_all: bool) -> None:
    """Delete the first row of KEY that contains TERM."""
    store = get_store(ctx, key)

    if delete_all:
        removed = store.delete_all_by_term(term)
        if not removed:
            _fail(ctx, "No rows found to delete with the given term.")
        ctx.obj.console.print(f"[green]✓[/green] {removed} row(s) deleted successfully.")
        return

    if not store.delete_by_term(term):
        _fail(ctx, "No rows found to delete with the given term.")

    ctx.obj.console.print("[green]✓[/green] Row deleted successfully.")


# Command: delete-by-index
@click.command()
@click.argument("key")
@click.argument("index", type=int)
@click.pass_context
def delete_by_index(ctx: click.Context, key: str, index: int) -> None:
    """Delete the row at 1-based INDEX of KEY."""
    if not get_store(ctx, key).delete_by_index(index):
        _fail(ctx, f"Could not delete row {index}.")

    ctx.obj.console.print(f"[green]✓[/green] Row {index} deleted successfully.")


# Command: update-by-index
@click.command()
@click.argument("key")
@click.argument("index", type=int)
@click.argument("new_row")
@click.pass_context
def update_by_index(ctx: click.Context, key: str, index: int, new_row: str) -> None:
    """Replace the row at 1-based INDEX of KEY with NEW_ROW."""
    if not get_store(ctx, key).upgrade_by_index(index, new_row):
        _fail(ctx, f"Could not update row {index}.")

    ctx.obj.console.print(f"[green]✓[/green] Row {index} updated successfully.")


# Command: update-by-term
@click.command()
@click.argument("key")
@click.argument("term")
@click.argument("new_row")
@click.pass_context
def update_by_term(ctx: click.Context, key: str, term: str, new_row: str) -> None:
    """Replace the first row of KEY that contains TERM with NEW_ROW."""
    if not get_store(ctx, key).upgrade_by_term(term, new_row):
        _fail(ctx, "No row found to update with the given term.")

    ctx.obj.console.print("[green]✓[/green] Row updated successfully.")
