"""CLI commands that edit a query file by schema path."""

from __future__ import annotations

from collections.abc import Callable
import json
from pathlib import Path
import sys

import click
from graphql import GraphQLSchema

from explorer.console import err_console
from explorer.engine.types import EditResult, VariableStub

SCHEMA_ENVVAR = "GQL_EXPLORER_SCHEMA"
OPERATION_ENVVAR = "GQL_EXPLORER_OPERATION"

query_file_argument = click.argument(
    "query_file", type=click.Path(dir_okay=False, allow_dash=True)
)
schema_option = click.option(
    "-s",
    "--schema",
    "schema_path",
    envvar=SCHEMA_ENVVAR,
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help=f"Schema file: SDL, or an introspection result (.json). Defaults to ${SCHEMA_ENVVAR}",
)
operation_option = click.option(
    "--operation",
    "operation_name",
    envvar=OPERATION_ENVVAR,
    default=None,
    help="Only edit the operation with this name",
)
in_place_option = click.option(
    "-i", "--in-place", is_flag=True, default=False, help="Write the result back to QUERY_FILE"
)
variables_option = click.option(
    "--variables",
    "variables_path",
    default=None,
    type=click.Path(dir_okay=False),
    help="Variables JSON file to merge newly declared variables into",
)


@click.group()
def query() -> None:
    """Edit a query file: select fields and arguments by schema path.

    \b
    Paths look like query.user.friends.name: the operation type, then
    field names. QUERY_FILE may be "-" for stdin; a missing file is
    treated as empty.
    """


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def load_schema_or_exit(schema_path: str) -> GraphQLSchema:
    from explorer.schema.loader import SchemaLoadError, load_schema

    try:
        return load_schema(schema_path)
    except SchemaLoadError as e:
        err_console.print(f"[red]{e}[/red]")
        sys.exit(1)


def read_query(query_file: str) -> str:
    if query_file == "-":
        return click.get_text_stream("stdin").read()
    path = Path(query_file)
    return path.read_text() if path.exists() else ""


def _write_query(query_file: str, text: str, in_place: bool) -> None:
    if in_place and query_file != "-":
        Path(query_file).write_text(text + "\n")
        err_console.print(f"[green]Updated {query_file}[/green]")
    else:
        click.echo(text)


def _merge_variables(
    variables_path: str | None,
    stubs: list[VariableStub],
    schema: GraphQLSchema,
) -> None:
    if not stubs:
        return

    if variables_path is None:
        for stub in stubs:
            err_console.print(f"  New variable: ${stub.name}: {stub.type}")
        return

    from explorer.variables.buffer import InvalidVariablesError, merge_variable_stubs

    path = Path(variables_path)
    current = path.read_text() if path.exists() else ""
    try:
        merged = merge_variable_stubs(current, stubs, schema)
    except InvalidVariablesError as e:
        err_console.print(f"[red]{variables_path}: {e}[/red]")
        sys.exit(1)

    path.write_text(merged + "\n")
    err_console.print(f"[green]Variables written to {variables_path}[/green]")


def _finish_edit(
    query_file: str,
    result: EditResult,
    schema: GraphQLSchema,
    in_place: bool,
    variables_path: str | None,
) -> None:
    _merge_variables(variables_path, result.variables, schema)
    _write_query(query_file, result.query, in_place)


def _exit_with(found: bool) -> None:
    click.echo("true" if found else "false")
    sys.exit(0 if found else 1)


# ---------------------------------------------------------------------------
# Field and argument edits
# ---------------------------------------------------------------------------


@query.command("add-field")
@query_file_argument
@click.argument("path")
@schema_option
@operation_option
@in_place_option
@variables_option
def add_field(
    query_file: str,
    path: str,
    schema_path: str,
    operation_name: str | None,
    in_place: bool,
    variables_path: str | None,
) -> None:
    """Select the field at PATH, binding its required arguments to variables."""
    from explorer.engine import add_field_to_query

    schema = load_schema_or_exit(schema_path)
    result = add_field_to_query(read_query(query_file), path, schema, operation_name)
    _finish_edit(query_file, result, schema, in_place, variables_path)


@query.command("remove-field")
@query_file_argument
@click.argument("path")
@operation_option
@in_place_option
def remove_field(
    query_file: str,
    path: str,
    operation_name: str | None,
    in_place: bool,
) -> None:
    """Deselect the field at PATH."""
    from explorer.engine import remove_field_from_query

    text = remove_field_from_query(read_query(query_file), path, operation_name)
    _write_query(query_file, text, in_place)


@query.command("add-arg")
@query_file_argument
@click.argument("path")
@click.argument("arg_name")
@schema_option
@operation_option
@in_place_option
@variables_option
def add_arg(
    query_file: str,
    path: str,
    arg_name: str,
    schema_path: str,
    operation_name: str | None,
    in_place: bool,
    variables_path: str | None,
) -> None:
    """Pass ARG_NAME to the field at PATH, bound to a new variable."""
    from explorer.engine import add_arg_to_field

    schema = load_schema_or_exit(schema_path)
    result = add_arg_to_field(read_query(query_file), path, arg_name, schema, operation_name)
    _finish_edit(query_file, result, schema, in_place, variables_path)


@query.command("remove-arg")
@query_file_argument
@click.argument("path")
@click.argument("arg_name")
@operation_option
@in_place_option
@click.option(
    "--keep-variables",
    is_flag=True,
    default=False,
    help="Keep the variable declaration even when nothing uses it any more",
)
def remove_arg(
    query_file: str,
    path: str,
    arg_name: str,
    operation_name: str | None,
    in_place: bool,
    keep_variables: bool,
) -> None:
    """Stop passing ARG_NAME to the field at PATH."""
    from explorer.engine import remove_arg_from_field

    text = remove_arg_from_field(
        read_query(query_file),
        path,
        arg_name,
        operation_name,
        prune_variables=not keep_variables,
    )
    _write_query(query_file, text, in_place)


# ---------------------------------------------------------------------------
# Bulk edits
# ---------------------------------------------------------------------------


def _bulk_add(
    adder: Callable[..., EditResult],
    query_file: str,
    path: str,
    schema_path: str,
    operation_name: str | None,
    in_place: bool,
    variables_path: str | None,
) -> None:
    schema = load_schema_or_exit(schema_path)
    result = adder(read_query(query_file), path, schema, operation_name)
    _finish_edit(query_file, result, schema, in_place, variables_path)


@query.command("add-all")
@query_file_argument
@click.argument("path")
@schema_option
@operation_option
@in_place_option
@variables_option
def add_all(
    query_file: str,
    path: str,
    schema_path: str,
    operation_name: str | None,
    in_place: bool,
    variables_path: str | None,
) -> None:
    """Select every field of the type at PATH."""
    from explorer.engine import add_all_type_fields_to_query

    _bulk_add(
        add_all_type_fields_to_query,
        query_file, path, schema_path, operation_name, in_place, variables_path,
    )


@query.command("add-all-recursive")
@query_file_argument
@click.argument("path")
@schema_option
@operation_option
@in_place_option
@variables_option
def add_all_recursive(
    query_file: str,
    path: str,
    schema_path: str,
    operation_name: str | None,
    in_place: bool,
    variables_path: str | None,
) -> None:
    """Select every field of the type at PATH and of the types below it."""
    from explorer.engine import add_all_type_fields_to_query_recursively

    _bulk_add(
        add_all_type_fields_to_query_recursively,
        query_file, path, schema_path, operation_name, in_place, variables_path,
    )


@query.command("add-scalars")
@query_file_argument
@click.argument("path")
@schema_option
@operation_option
@in_place_option
@variables_option
def add_scalars(
    query_file: str,
    path: str,
    schema_path: str,
    operation_name: str | None,
    in_place: bool,
    variables_path: str | None,
) -> None:
    """Select the scalar and enum fields of the type at PATH."""
    from explorer.engine import add_all_scalar_type_fields_to_query

    _bulk_add(
        add_all_scalar_type_fields_to_query,
        query_file, path, schema_path, operation_name, in_place, variables_path,
    )


@query.command("remove-all")
@query_file_argument
@click.argument("path")
@schema_option
@operation_option
@in_place_option
def remove_all(
    query_file: str,
    path: str,
    schema_path: str,
    operation_name: str | None,
    in_place: bool,
) -> None:
    """Deselect every field of the type at PATH."""
    from explorer.engine import remove_type_fields_from_query

    schema = load_schema_or_exit(schema_path)
    text = remove_type_fields_from_query(read_query(query_file), path, schema, operation_name)
    _write_query(query_file, text, in_place)


# ---------------------------------------------------------------------------
# Checks (exit status 0 when true, 1 when false)
# ---------------------------------------------------------------------------


@query.command("has-field")
@query_file_argument
@click.argument("path")
@operation_option
def has_field(query_file: str, path: str, operation_name: str | None) -> None:
    """Check whether the field at PATH is selected."""
    from explorer.engine import is_field_in_query

    _exit_with(is_field_in_query(read_query(query_file), path, operation_name))


@query.command("has-arg")
@query_file_argument
@click.argument("path")
@click.argument("arg_name")
@operation_option
def has_arg(query_file: str, path: str, arg_name: str, operation_name: str | None) -> None:
    """Check whether the field at PATH passes ARG_NAME."""
    from explorer.engine import is_arg_in_query

    _exit_with(is_arg_in_query(read_query(query_file), path, arg_name, operation_name))


@query.command("all-fields")
@query_file_argument
@click.argument("path")
@schema_option
@operation_option
def all_fields(query_file: str, path: str, schema_path: str, operation_name: str | None) -> None:
    """Check whether every field of the type at PATH is selected."""
    from explorer.engine import are_all_type_fields_in_query

    schema = load_schema_or_exit(schema_path)
    _exit_with(are_all_type_fields_in_query(read_query(query_file), path, schema, operation_name))


# ---------------------------------------------------------------------------
# Request payload
# ---------------------------------------------------------------------------


@query.command("payload")
@query_file_argument
@operation_option
@click.option(
    "--variables",
    "variables_path",
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help="Variables JSON file; without it every declared variable is sent as null",
)
@click.option(
    "--env",
    "env_path",
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help="JSON file of values for {{placeholders}} in the variables",
)
def payload(
    query_file: str,
    operation_name: str | None,
    variables_path: str | None,
    env_path: str | None,
) -> None:
    """Print the JSON request body for QUERY_FILE."""
    from explorer.formats.request import InvalidQueryError, build_request
    from explorer.variables.buffer import variables_template

    text = read_query(query_file)
    if variables_path:
        variables_text = Path(variables_path).read_text()
    else:
        variables_text = json.dumps(variables_template(text, operation_name))

    env = None
    if env_path:
        try:
            env = json.loads(Path(env_path).read_text())
        except json.JSONDecodeError as e:
            err_console.print(f"[red]Invalid JSON in {env_path}: {e}[/red]")
            sys.exit(1)

    try:
        request = build_request(text, variables_text, operation_name, env)
    except InvalidQueryError as e:
        err_console.print(f"[red]{e}[/red]")
        sys.exit(1)

    click.echo(request.model_dump_json(indent=2, by_alias=True))
