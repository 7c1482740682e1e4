"""Tests for the CLI commands."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner
from graphql import GraphQLSchema, print_schema
import pytest

from explorer.main import cli


@pytest.fixture
def schema_file(schema: GraphQLSchema, tmp_path: Path) -> Path:
    path = tmp_path / "schema.graphql"
    path.write_text(print_schema(schema))
    return path


@pytest.fixture
def query_file(tmp_path: Path) -> Path:
    return tmp_path / "query.graphql"


class TestAddFieldCommand:
    def test_prints_edited_query(self, schema_file: Path, query_file: Path):
        runner = CliRunner()
        result = runner.invoke(
            cli, ["query", "add-field", str(query_file), "query.version", "-s", str(schema_file)]
        )

        assert result.exit_code == 0, result.output
        assert "query NewQuery {\n  version\n}" in result.output
        assert not query_file.exists()

    def test_in_place_with_variables(self, schema_file: Path, query_file: Path, tmp_path: Path):
        variables_file = tmp_path / "variables.json"
        runner = CliRunner()
        result = runner.invoke(
            cli,
            [
                "query", "add-field", str(query_file), "query.user.name",
                "-s", str(schema_file), "-i", "--variables", str(variables_file),
            ],
        )

        assert result.exit_code == 0, result.output
        assert query_file.read_text() == (
            "query NewQuery($id: ID!) {\n  user(id: $id) {\n    name\n  }\n}\n"
        )
        assert json.loads(variables_file.read_text()) == {"id": ""}

    def test_schema_from_env(self, schema_file: Path, query_file: Path):
        query_file.write_text("query Q { version }")
        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["query", "add-field", str(query_file), "query.users"],
            env={"GQL_EXPLORER_SCHEMA": str(schema_file)},
        )

        assert result.exit_code == 0, result.output
        assert "query Q {\n  version\n  users\n}" in result.output

    def test_invalid_schema(self, query_file: Path, tmp_path: Path):
        bad = tmp_path / "bad.graphql"
        bad.write_text("type Query {")
        runner = CliRunner()
        result = runner.invoke(cli, ["query", "add-field", str(query_file), "query.a", "-s", str(bad)])

        assert result.exit_code == 1
        assert "Invalid schema SDL" in result.output

    def test_stdin(self, schema_file: Path):
        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["query", "add-field", "-", "query.version", "-s", str(schema_file)],
            input="query Q {}",
        )

        assert result.exit_code == 0, result.output
        assert "query Q {\n  version\n}" in result.output


class TestRemoveCommands:
    def test_remove_field_in_place(self, query_file: Path):
        query_file.write_text("query Q {\n  version\n}\n")
        runner = CliRunner()
        result = runner.invoke(cli, ["query", "remove-field", str(query_file), "query.version", "-i"])

        assert result.exit_code == 0, result.output
        assert query_file.read_text() == "query Q {}\n"

    def test_remove_arg_prunes_variable(self, query_file: Path):
        query_file.write_text("query Q($id: ID!) { user(id: $id) { name } }")
        runner = CliRunner()
        result = runner.invoke(cli, ["query", "remove-arg", str(query_file), "query.user", "id"])

        assert result.exit_code == 0, result.output
        assert "query Q {\n  user {\n    name\n  }\n}" in result.output

    def test_remove_arg_keep_variables(self, query_file: Path):
        query_file.write_text("query Q($id: ID!) { user(id: $id) { name } }")
        runner = CliRunner()
        result = runner.invoke(
            cli, ["query", "remove-arg", str(query_file), "query.user", "id", "--keep-variables"]
        )

        assert result.exit_code == 0, result.output
        assert "query Q($id: ID!) {" in result.output


class TestChecks:
    def test_has_field(self, query_file: Path):
        query_file.write_text("{ user(id: 1) { name } }")
        runner = CliRunner()

        found = runner.invoke(cli, ["query", "has-field", str(query_file), "query.user.name"])
        assert found.exit_code == 0
        assert "true" in found.output

        missing = runner.invoke(cli, ["query", "has-field", str(query_file), "query.user.id"])
        assert missing.exit_code == 1
        assert "false" in missing.output

    def test_has_arg(self, query_file: Path):
        query_file.write_text("{ user(id: 1) { name } }")
        runner = CliRunner()
        result = runner.invoke(cli, ["query", "has-arg", str(query_file), "query.user", "id"])
        assert result.exit_code == 0

    def test_all_fields(self, schema_file: Path, query_file: Path):
        query_file.write_text("{ post(id: 1) { title } }")
        runner = CliRunner()
        result = runner.invoke(
            cli, ["query", "all-fields", str(query_file), "query.post", "-s", str(schema_file)]
        )
        assert result.exit_code == 1


class TestBulkCommands:
    def test_add_scalars(self, schema_file: Path, query_file: Path):
        query_file.write_text("query Q { post(id: 1) }")
        runner = CliRunner()
        result = runner.invoke(
            cli, ["query", "add-scalars", str(query_file), "query.post", "-s", str(schema_file)]
        )

        assert result.exit_code == 0, result.output
        assert "post(id: 1) {\n    title\n  }" in result.output

    def test_remove_all(self, schema_file: Path, query_file: Path):
        query_file.write_text("query Q { post(id: 1) { title author { name } } }")
        runner = CliRunner()
        result = runner.invoke(
            cli, ["query", "remove-all", str(query_file), "query.post", "-s", str(schema_file)]
        )

        assert result.exit_code == 0, result.output
        assert "post(id: 1) {}" in result.output


class TestPayloadCommand:
    def test_payload(self, query_file: Path, tmp_path: Path):
        query_file.write_text("query A { a }\n\nquery B($t: String) { b(t: $t) }")
        variables_file = tmp_path / "variables.json"
        variables_file.write_text('{"t": "{{auth.token}}"}')
        env_file = tmp_path / "env.json"
        env_file.write_text('{"auth": {"token": "abc"}}')

        runner = CliRunner()
        result = runner.invoke(
            cli,
            [
                "query", "payload", str(query_file), "--operation", "B",
                "--variables", str(variables_file), "--env", str(env_file),
            ],
        )

        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert payload == {
            "query": "query B($t: String) {\n  b(t: $t)\n}",
            "variables": {"t": "abc"},
            "operationName": "B",
        }

    def test_declared_variables_default_to_null(self, query_file: Path):
        query_file.write_text("query A($x: Int) { a(x: $x) }\n\nquery B($t: String, $u: ID) { b }")
        runner = CliRunner()
        result = runner.invoke(cli, ["query", "payload", str(query_file), "--operation", "B"])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["variables"] == {"t": None, "u": None}

    def test_invalid_query(self, query_file: Path):
        query_file.write_text("query {")
        runner = CliRunner()
        result = runner.invoke(cli, ["query", "payload", str(query_file)])

        assert result.exit_code == 1
        assert "Query is not valid" in result.output


class TestSchemaFieldsCommand:
    def test_lists_fields(self, schema_file: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["schema", "fields", "query.post", "-s", str(schema_file)])

        assert result.exit_code == 0, result.output
        assert "title" in result.output
        assert "author" in result.output

    def test_all_selected(self, schema_file: Path, query_file: Path):
        query_file.write_text("{ post(id: 1) { title author { name } } }")
        runner = CliRunner()
        result = runner.invoke(
            cli, ["schema", "fields", "query.post", "-s", str(schema_file), "-q", str(query_file)]
        )

        assert result.exit_code == 0, result.output
        assert "all selected" in result.output

    def test_not_a_composite_path(self, schema_file: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["schema", "fields", "query.version", "-s", str(schema_file)])

        assert result.exit_code == 1
        assert "No type with fields" in result.output
