"""Executable GraphQL schema built from ``schema.graphql``."""

from pathlib import Path

from ariadne import load_schema_from_path, make_executable_schema

from .resolvers import bindables

SCHEMA_PATH = Path(__file__).resolve().parent / "schema.graphql"

type_defs = load_schema_from_path(str(SCHEMA_PATH))

schema = make_executable_schema(type_defs, *bindables, convert_names_case=True)
