# ABOUTME: The `embedmeta fields` command listing the canonical properties.
# ABOUTME: Shows which oEmbed and OpenGraph names feed each canonical property.

import click
from rich.console import Console
from rich.table import Table

from embedmeta.media.vocabulary import CANONICAL_PROPERTIES, source_names

console = Console()


@click.command()
def fields() -> None:
    """List canonical properties and their oEmbed/OpenGraph sources."""
    table = Table()
    table.add_column("Property", style="bold")
    table.add_column("oEmbed")
    table.add_column("OpenGraph")

    for name in CANONICAL_PROPERTIES:
        table.add_row(
            name,
            ", ".join(source_names("oembed", name)) or "[dim]-[/dim]",
            ", ".join(source_names("opengraph", name)) or "[dim]-[/dim]",
        )

    console.print(table)
