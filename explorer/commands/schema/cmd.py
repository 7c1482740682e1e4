"""CLI commands for browsing a schema by path."""

from __future__ import annotations

import sys

import click
from rich.markup import escape
from rich.table import Table

from explorer.commands.query.cmd import load_schema_or_exit, operation_option, read_query, schema_option
from explorer.console import console, err_console


@click.group()
def schema() -> None:
    """Browse the schema the way the explorer sidebar does."""


@schema.command()
@click.argument("path")
@schema_option
@operation_option
@click.option(
    "-q",
    "--query",
    "query_file",
    default=None,
    type=click.Path(dir_okay=False, allow_dash=True),
    help="Query file to show selection state against",
)
def fields(path: str, schema_path: str, operation_name: str | None, query_file: str | None) -> None:
    """List the fields of the type at PATH (e.g. query.user)."""
    from explorer.engine import (
        are_all_type_fields_in_query,
        is_arg_in_query,
        is_field_in_query,
        resolve_field_type,
    )
    from explorer.engine.schema_walker import has_fields

    gql_schema = load_schema_or_exit(schema_path)
    type_ = resolve_field_type(path, gql_schema)
    if not has_fields(type_):
        err_console.print(f"[red]No type with fields at {path}[/red]")
        sys.exit(1)

    text = read_query(query_file) if query_file else None

    title = f"{path}: {type_.name}"  # type: ignore[union-attr]
    if text is not None and are_all_type_fields_in_query(text, path, gql_schema, operation_name):
        title += " (all selected)"

    table = Table(title=title)
    table.add_column("Field", style="cyan")
    table.add_column("Type")
    table.add_column("Arguments")
    if text is not None:
        table.add_column("Selected", justify="center")

    for name, field in type_.fields.items():  # type: ignore[union-attr]
        field_path = f"{path}.{name}"
        args: list[str] = []
        for arg_name, arg in field.args.items():
            label = escape(f"{arg_name}: {arg.type}")
            if text is not None and is_arg_in_query(text, field_path, arg_name, operation_name):
                label = f"[green]{label}[/green]"
            args.append(label)

        row = [name, escape(str(field.type)), ", ".join(args)]
        if text is not None:
            row.append("[green]x[/green]" if is_field_in_query(text, field_path, operation_name) else "")
        table.add_row(*row)

    console.print(table)
