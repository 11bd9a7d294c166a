"""Command-line interface for spicerack."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

from spicerack.config import get_settings
from spicerack.db.snapshots import SqlSnapshotStore
from spicerack.errors import InvalidNameError
from spicerack.logging_utils import configure_logging
from spicerack.organizer import SpiceOrganizer

app = typer.Typer(help="Spice jar organizer commands.")

DEFAULT_USER = "local"

UserOption = typer.Option(DEFAULT_USER, "--user", "-u", help="Inventory owner to operate on.")


@app.callback()
def _setup() -> None:
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_format, [settings.api_token or ""])


def _load_organizer(user: str) -> tuple[SpiceOrganizer, SqlSnapshotStore]:
    store = SqlSnapshotStore(user)
    organizer = SpiceOrganizer()
    organizer.load_from(store)
    return organizer, store


def _save(organizer: SpiceOrganizer, store: SqlSnapshotStore) -> None:
    if not organizer.save_to(store):
        typer.secho("Failed to save inventory.", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


@app.command()
def search(
    query: str = typer.Argument(..., help="Partial or misspelled spice name."),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", min=1, help="Maximum suggestions."),
    catalog: Optional[Path] = typer.Option(None, "--catalog", help="Markdown catalog to search."),
) -> None:
    """Suggest catalog spices matching QUERY."""

    organizer = SpiceOrganizer()
    organizer.load_catalog(catalog)
    results = organizer.fuzzy_search(query, limit)
    if not results:
        typer.echo("No matches.")
        return
    for result in results:
        typer.echo(f"{result.score:7.2f}  {result.name}")


@app.command()
def add(
    names: list[str] = typer.Argument(..., help="Spice names to add, one jar each."),
    user: str = UserOption,
) -> None:
    """Add jars to the inventory."""

    organizer, store = _load_organizer(user)
    for name in names:
        try:
            entry = organizer.add_spice(name)
        except InvalidNameError as exc:
            typer.secho(str(exc), fg=typer.colors.YELLOW, err=True)
            continue
        typer.echo(f"Added {entry.name} ({entry.id})")
    _save(organizer, store)


@app.command()
def remove(
    entry_id: str = typer.Argument(..., help="Inventory entry id."),
    user: str = UserOption,
) -> None:
    """Remove one jar by id."""

    organizer, store = _load_organizer(user)
    if not organizer.remove_spice(entry_id):
        typer.secho(f"No jar with id {entry_id}.", fg=typer.colors.YELLOW, err=True)
        raise typer.Exit(code=1)
    _save(organizer, store)
    typer.echo(f"Removed {entry_id}")


@app.command("list")
def list_inventory(
    user: str = UserOption,
    as_json: bool = typer.Option(False, "--json", help="Print the saved snapshot as JSON."),
) -> None:
    """Show the jars currently in the inventory."""

    organizer, _ = _load_organizer(user)
    if as_json:
        typer.echo(json.dumps(organizer.snapshot().model_dump(mode="json"), indent=2))
        return
    for entry in organizer.inventory:
        typer.echo(f"{entry.id}  {entry.name}")
    typer.echo(f"{organizer.total_jars} jar(s)")


@app.command()
def reset(user: str = UserOption) -> None:
    """Forget the saved inventory and shelf settings."""

    organizer, store = _load_organizer(user)
    organizer.clear(store)
    typer.echo("Inventory cleared.")


@app.command()
def shelves(
    user: str = UserOption,
    count: Optional[int] = typer.Option(None, "--shelves", "-s", help="Number of shelves."),
    ignore_duplicates: Optional[bool] = typer.Option(
        None,
        "--ignore-duplicates/--count-duplicates",
        help="Count each distinct spice once when balancing.",
    ),
    save: bool = typer.Option(False, "--save", help="Remember the shelf settings."),
) -> None:
    """Print the balanced shelf layout."""

    organizer, store = _load_organizer(user)
    if count is not None:
        organizer.num_shelves = count
    if ignore_duplicates is not None:
        organizer.ignore_duplicates = ignore_duplicates
    for index, info in enumerate(organizer.calculate_items_per_shelf(), start=1):
        typer.echo(f"Shelf {index}: {info.range:<5} {info.count} jar(s)")
    if save:
        _save(organizer, store)


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host"),
    port: Optional[int] = typer.Option(None, "--port"),
    reload: bool = typer.Option(False, "--reload"),
) -> None:
    """Run the HTTP API."""

    from spicerack.server.run import serve as run_server

    run_server(host=host, port=port, reload=reload)


def main(argv: Optional[list[str]] = None) -> None:
    """Entry point for `python -m spicerack`."""
    app(prog_name="spicerack", args=argv)


if __name__ == "__main__":
    main()
