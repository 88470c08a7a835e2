from pathlib import Path

from graphql import GraphQLSchema

from apollo_codegen import log
from apollo_codegen.exporters.java.config import JavaCodegenConfig

from .transformer import JavaInputTypeTransformer


def transform(
    graphql_schema: GraphQLSchema,
    config: JavaCodegenConfig,
    type_names: list[str] | None = None,
) -> dict[str, str]:
    """
    Transform the input object types of a GraphQL schema to Apollo Android Java classes.

    Args:
        graphql_schema: The GraphQL schema object to transform
        config: Generator configuration (package, scalar mapping, writer methods)
        type_names: Optional names of the input object types to generate, all of them when omitted

    Returns:
        dict[str, str]: Mapping of class names to Java source files

    Raises:
        ValueError: If a requested type is missing or is not an input object type
        UnknownTypeError: If a field references a type the schema does not define
    """
    log.info(f"Transforming GraphQL schema to Java with {len(graphql_schema.type_map)} types")
    log.info(f"Using package: {config.package or '<working directory>'}")

    transformer = JavaInputTypeTransformer(graphql_schema, config, type_names)
    java_files = transformer.transform()

    log.info("Successfully converted GraphQL schema to Java")

    return java_files


def translate_to_java(
    schema: GraphQLSchema,
    package: str | None = None,
    scalars: dict[str, str] | None = None,
    type_names: list[str] | None = None,
    config: JavaCodegenConfig | None = None,
) -> dict[str, str]:
    """
    Translate the input object types of a GraphQL schema to Apollo Android Java classes.

    Args:
        schema: The GraphQL schema object
        package: Java package of the generated classes, overrides the config value
        scalars: Extra scalar to Java type mappings, merged over the config value
        type_names: Optional names of the input object types to generate
        config: Optional base generator configuration

    Returns:
        dict[str, str]: Mapping of class names to Java source files
    """
    base_config = config or JavaCodegenConfig()
    return transform(schema, base_config.with_overrides(package, scalars), type_names)


def write_java_files(java_files: dict[str, str], output_dir: Path) -> list[Path]:
    """
    Write generated Java files as ``<ClassName>.java`` into ``output_dir``.

    Args:
        java_files: Mapping of class names to Java source files
        output_dir: Directory of the generated package

    Returns:
        list[Path]: The written file paths
    """
    output_dir.mkdir(parents=True, exist_ok=True)

    written = []
    for class_name, content in java_files.items():
        path = output_dir / f"{class_name}.java"
        path.write_text(content, encoding="utf-8")
        log.debug(f"Wrote {path}")
        written.append(path)

    return written
