# ABOUTME: CLI package for embedmeta, built on Click.
# ABOUTME: Defines the root command group and registers subcommands.

import click

from embedmeta.cli.commands import fields_cmd, inspect_cmd


@click.group()
@click.version_option(package_name="embedmeta")
def cli() -> None:
    """embedmeta - normalize embeddable media metadata."""


cli.add_command(inspect_cmd.inspect)
cli.add_command(fields_cmd.fields)
