# ABOUTME: The `embedmeta inspect` command for viewing normalized media metadata.
# ABOUTME: Loads a raw JSON property set, normalizes it and prints the record.

import json
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from embedmeta.cli.options import map_option, vocabulary_option
from embedmeta.media.loader import (
    MediaLoadError,
    load_raw_properties,
    parse_mapping_options,
)
from embedmeta.media.normalizer import normalize_media
from embedmeta.media.types import MetadataRecord
from embedmeta.media.vocabulary import CANONICAL_PROPERTIES

console = Console()


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@vocabulary_option
@map_option
@click.option(
    "--defaults/--no-defaults",
    default=True,
    help="Pre-fill every canonical property with an empty string.",
)
@click.option("--json", "as_json", is_flag=True, help="Print the record as JSON.")
def inspect(
    path: Path,
    vocabulary: str | None,
    mappings: tuple[str, ...],
    defaults: bool,
    as_json: bool,
) -> None:
    """Show the normalized metadata for a raw JSON property set."""
    try:
        raw = load_raw_properties(path)
        correspondences = parse_mapping_options(mappings)
    except MediaLoadError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(1) from exc

    record = normalize_media(
        raw, correspondences, vocabulary=vocabulary, fill_defaults=defaults
    )

    if as_json:
        click.echo(json.dumps(record.to_dict(), indent=2, ensure_ascii=False))
        return

    console.print(_record_table(record, title=path.name))


def _record_table(record: MetadataRecord, title: str) -> Table:
    """Canonical properties first, in canonical order, then the extras."""
    table = Table(title=title, show_header=False, pad_edge=False)
    table.add_column("Property", style="bold")
    table.add_column("Value")

    for name in CANONICAL_PROPERTIES:
        if record.has(name):
            table.add_row(name, _display(record.get(name)))

    extras = [(name, value) for name, value in record if name not in CANONICAL_PROPERTIES]
    if extras:
        table.add_section()
        for name, value in extras:
            table.add_row(f"[dim]{escape(name)}[/dim]", _display(value))

    return table


def _display(value: object) -> str:
    if value is None or value == "":
        return "[dim]empty[/dim]"
    return escape(str(value))
