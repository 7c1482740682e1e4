"""Tests for loading schemas from SDL and introspection files."""

from __future__ import annotations

import json
from pathlib import Path

from graphql import GraphQLSchema, introspection_from_schema, print_schema
import pytest

from explorer.schema.loader import SchemaLoadError, load_schema, schema_from_introspection


class TestLoadSchema:
    def test_sdl_file(self, schema: GraphQLSchema, tmp_path: Path):
        path = tmp_path / "schema.graphql"
        path.write_text(print_schema(schema))
        loaded = load_schema(path)
        assert loaded.query_type is not None
        assert "user" in loaded.query_type.fields

    def test_introspection_file(self, schema: GraphQLSchema, tmp_path: Path):
        path = tmp_path / "schema.json"
        path.write_text(json.dumps(introspection_from_schema(schema)))
        loaded = load_schema(path)
        assert loaded.get_type("User") is not None

    def test_introspection_response_shape(self, schema: GraphQLSchema, tmp_path: Path):
        path = tmp_path / "schema.json"
        path.write_text(json.dumps({"data": introspection_from_schema(schema)}))
        loaded = load_schema(str(path))
        assert loaded.mutation_type is not None

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(SchemaLoadError):
            load_schema(tmp_path / "nope.graphql")

    def test_invalid_sdl(self, tmp_path: Path):
        path = tmp_path / "schema.graphql"
        path.write_text("type Query {")
        with pytest.raises(SchemaLoadError):
            load_schema(path)

    def test_invalid_json(self, tmp_path: Path):
        path = tmp_path / "schema.json"
        path.write_text("{nope")
        with pytest.raises(SchemaLoadError):
            load_schema(path)


class TestSchemaFromIntrospection:
    def test_missing_schema_key(self):
        with pytest.raises(SchemaLoadError):
            schema_from_introspection({"data": {}})
        with pytest.raises(SchemaLoadError):
            schema_from_introspection([])
