# ABOUTME: Shared Click options for embedmeta CLI commands.
# ABOUTME: Provides reusable decorators for vocabulary selection and field mappings.

import click

from embedmeta.media.vocabulary import VOCABULARIES

vocabulary_option = click.option(
    "--vocabulary",
    type=click.Choice(sorted(VOCABULARIES), case_sensitive=False),
    default=None,
    help="Upstream vocabulary the input uses (default: none, keys are taken as-is).",
)

map_option = click.option(
    "--map",
    "-m",
    "mappings",
    multiple=True,
    metavar="SOURCE=DEST",
    help="Copy SOURCE onto DEST. Repeatable; applied after the vocabulary's table.",
)
