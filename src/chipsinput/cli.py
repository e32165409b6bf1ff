"""Typer-based CLI entry point."""

from __future__ import annotations

import functools
import json
import logging
from pathlib import Path
from typing import List

import typer
from rich.console import Console
from rich.table import Table

from .core.list_data_source import ListChipDataSource
from .errors import ChipNotFoundError, ChipsError, ChipSourceError
from .models.chip import Chip

app = typer.Typer(help="Inspect how candidate chips partition into a selection")
console = Console()


def load_chips(path: Path) -> list[Chip]:
    """Read a JSON list of ``{id, title, subtitle?, avatar_uri?}`` objects."""

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise ChipSourceError(f"Cannot read chips from {path}: {exc}") from exc
    if not isinstance(payload, list):
        raise ChipSourceError(f"{path} must contain a JSON list")

    chips: list[Chip] = []
    for index, entry in enumerate(payload):
        if not isinstance(entry, dict) or "id" not in entry or "title" not in entry:
            raise ChipSourceError(f"Entry {index} in {path} needs an 'id' and a 'title'")
        chips.append(
            Chip(
                id=entry["id"],
                title=str(entry["title"]),
                subtitle=entry.get("subtitle"),
                avatar_uri=entry.get("avatar_uri"),
                metadata=dict(entry.get("metadata") or {}),
            )
        )
    return chips


def _find_by_title(data_source: ListChipDataSource, title: str) -> Chip:
    for chip in data_source.get_filtered_chips():
        if chip.title == title:
            return chip
    raise ChipNotFoundError(f"No candidate titled {title!r}")


def _chips_table(title: str, chips: list[Chip]) -> Table:
    table = Table(title=f"{title} ({len(chips)})")
    table.add_column("ID")
    table.add_column("Title")
    table.add_column("Subtitle")
    table.add_column("Filterable")
    for chip in chips:
        chip_id = "(custom)" if chip.is_custom else str(chip.id)
        table.add_row(chip_id, chip.title, chip.subtitle or "", "yes" if chip.filterable else "no")
    return table


def _handle_errors(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except ChipsError as exc:
            typer.echo(f"Error: {exc}", err=True)
            raise typer.Exit(1) from exc

    return wrapper


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Log data source activity")) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@app.command()
@_handle_errors
def show(
    candidates: Path = typer.Argument(..., exists=True, dir_okay=False),
    take: List[str] = typer.Option([], "--take", "-t", help="Title of a candidate to select"),
    custom: List[str] = typer.Option([], "--custom", "-c", help="Text of a custom chip to add"),
) -> None:
    """Load candidates, apply selections and print the resulting partition."""

    data_source = ListChipDataSource()
    data_source.set_filterable_chips(load_chips(candidates))
    for title in take:
        data_source.take_chip(_find_by_title(data_source, title))
    for text in custom:
        if not text.strip():
            continue
        data_source.add_selected_chip(Chip.custom(text))

    console.print(_chips_table("Selected", data_source.get_selected_chips()))
    console.print(_chips_table("Candidates", data_source.get_filtered_chips()))


if __name__ == "__main__":
    app()
