from pathlib import Path

from ariadne import load_schema_from_path
from graphql import (
    GraphQLField,
    GraphQLObjectType,
    GraphQLSchema,
    GraphQLString,
    build_schema,
    print_schema,
    validate_schema,
)

from apollo_codegen import log

GRAPHQL_GLOB = "*.graphql"


def resolve_graphql_files(paths: list[Path]) -> list[Path]:
    """Expand files and directories into the sorted, distinct ``.graphql`` files they name.

    Directories are searched recursively. Paths that do not exist are ignored.
    """
    graphql_files: set[Path] = set()
    for path in paths:
        if path.is_dir():
            graphql_files.update(path.rglob(GRAPHQL_GLOB))
        elif path.is_file():
            graphql_files.add(path)
    return sorted(graphql_files)


def read_schema_sources(graphql_files: list[Path]) -> str:
    """Concatenate the SDL of the given files; ariadne reports syntax errors per file."""
    return "\n".join(load_schema_from_path(graphql_file) for graphql_file in graphql_files)


def load_schema(graphql_schema_paths: Path | list[Path]) -> GraphQLSchema:
    """
    Build the schema the Java input types are generated from.

    Args:
        graphql_schema_paths: A schema file or directory, or a list of them

    Returns:
        GraphQLSchema: The built schema, with a placeholder ``Query`` type when the SDL has none

    Raises:
        GraphQLFileSyntaxError: If a file is not valid SDL
        TypeError: If the SDL references undefined types or is otherwise invalid
    """
    if isinstance(graphql_schema_paths, Path):
        graphql_schema_paths = [graphql_schema_paths]

    graphql_files = resolve_graphql_files(graphql_schema_paths)
    log.debug(f"Loading schema from {len(graphql_files)} file(s)")

    schema = build_schema(read_schema_sources(graphql_files))
    log.debug(f"Read schema: \n{print_schema(schema)}")
    return ensure_query(schema)


def check_correct_schema(schema: GraphQLSchema) -> list[str]:
    """Return one ``  - <message>`` line per schema validation error, empty for a valid schema."""
    return [f"  - {error.message}" for error in validate_schema(schema)]


def ensure_query(schema: GraphQLSchema) -> GraphQLSchema:
    """
    Return ``schema`` unchanged when it has a query root, otherwise a copy with a ``Query { ping: String }`` root.

    Input-only schemas are valid SDL but fail schema validation without a query root.
    """
    if schema.query_type:
        return schema

    log.debug("Schema has no Query type, adding a placeholder")
    query_type = GraphQLObjectType(name="Query", fields={"ping": GraphQLField(GraphQLString)})
    return GraphQLSchema(
        query=query_type,
        types=schema.type_map.values(),
        directives=schema.directives,
    )
