from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from graphql import GraphQLInputObjectType, GraphQLSchema, build_schema
from hypothesis import strategies as st
from hypothesis.strategies import composite

from apollo_codegen.exporters.java.config import JavaCodegenConfig
from apollo_codegen.exporters.java.visitor import InputTypeVisitor

SCALAR_FIELD_TYPES = ["String", "String!", "Int", "Int!", "Boolean", "[Boolean]", "Float!", "[Float!]!", "ID!"]
REF_FIELD_TYPES = ["Ref", "Ref!", "[Ref]", "[Ref!]", "[Ref]!", "[Ref!]!"]

PACKAGE = "com.example"


class TestSchemaData:
    TESTS_DATA_DIR: Path = Path(__file__).parent / "data"
    FILTER_SCHEMA: Path = TESTS_DATA_DIR / "filter.graphql"
    SEARCH_SCHEMA_DIR: Path = TESTS_DATA_DIR / "search"
    INVALID_SCHEMA: Path = TESTS_DATA_DIR / "invalid.graphql"
    CODEGEN_CONFIG: Path = TESTS_DATA_DIR / "codegen.yaml"


@pytest.fixture(scope="module")
def filter_schema() -> GraphQLSchema:
    assert TestSchemaData.FILTER_SCHEMA.exists(), f"Missing test file: {TestSchemaData.FILTER_SCHEMA}"
    return build_schema(TestSchemaData.FILTER_SCHEMA.read_text())


@pytest.fixture(scope="module")
def search_schema() -> GraphQLSchema:
    schema_files = sorted(TestSchemaData.SEARCH_SCHEMA_DIR.glob("*.graphql"))
    return build_schema("\n".join(schema_file.read_text() for schema_file in schema_files))


@pytest.fixture
def config() -> JavaCodegenConfig:
    return JavaCodegenConfig(package=PACKAGE)


@pytest.fixture
def make_visitor(config: JavaCodegenConfig) -> Callable[[GraphQLSchema], InputTypeVisitor]:
    """Factory for a fresh visitor, one per generated class."""

    def _make(schema: GraphQLSchema) -> InputTypeVisitor:
        return InputTypeVisitor(schema, config)

    return _make


def get_input_type(schema: GraphQLSchema, name: str) -> GraphQLInputObjectType:
    input_type = schema.get_type(name)
    assert isinstance(input_type, GraphQLInputObjectType), f"{name} is not an input object type"
    return input_type


@composite
def input_type_schema_strategy(
    draw: Callable[[st.SearchStrategy[Any]], Any],
    field_types: list[str] | None = None,
) -> tuple[GraphQLSchema, list[str]]:
    """Generate a schema with a ``Holder`` input type whose fields use random wrappings."""
    types = draw(st.lists(st.sampled_from(field_types or SCALAR_FIELD_TYPES), min_size=1, max_size=6))
    fields = " ".join(f"f{index}: {field_type}" for index, field_type in enumerate(types))
    schema = build_schema(
        f"""
        input Holder {{ {fields} }}
        input Ref {{ value: Int }}
        """
    )
    return schema, types
