"""CLI entry point for gql-explorer."""

from __future__ import annotations

import click
from dotenv import load_dotenv

from explorer.commands.query.cmd import query
from explorer.commands.schema.cmd import schema

load_dotenv()


@click.group()
@click.version_option(version="0.1.0", prog_name="gql-explorer")
def cli() -> None:
    """Build GraphQL queries by selecting fields from a schema."""


cli.add_command(query)
cli.add_command(schema)


if __name__ == "__main__":
    cli()
