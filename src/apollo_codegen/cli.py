import logging
import sys
from pathlib import Path
from typing import Any

import rich_click as click
import yaml
from ariadne.exceptions import GraphQLFileSyntaxError
from graphql import (
    GraphQLError,
    GraphQLSchema,
    is_enum_type,
    is_input_object_type,
    is_scalar_type,
    is_specified_scalar_type,
)
from pydantic import ValidationError
from rich.traceback import install

from apollo_codegen import __version__, log
from apollo_codegen.exporters.java import translate_to_java, write_java_files
from apollo_codegen.exporters.java.config import FALLBACK_SCALAR_TYPE, load_codegen_config, parse_scalar_overrides
from apollo_codegen.exporters.java.package_name import build_package_name_from_path
from apollo_codegen.exporters.utils.extraction import get_all_named_types
from apollo_codegen.exporters.utils.schema_loader import check_correct_schema, load_schema, resolve_graphql_files


class PathResolverOption(click.Option):
    def process_value(self, ctx: click.Context, value: Any) -> list[Path] | None:
        value = super().process_value(ctx, value)
        if not value:
            return None
        paths = set(value)
        return resolve_graphql_files(list(paths))


schema_option = click.option(
    "--schema",
    "-s",
    "schemas",
    type=click.Path(exists=True, path_type=Path),
    cls=PathResolverOption,
    required=True,
    multiple=True,
    help="The GraphQL schema file or directory containing schema files. Can be specified multiple times.",
)


config_option = click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML file containing the generator configuration",
)


def assert_correct_schema(schema: GraphQLSchema) -> None:
    schema_errors = check_correct_schema(schema)
    if schema_errors:
        log.error("Schema validation failed:")
        for error in schema_errors:
            log.error(error)
        log.error(f"Found {len(schema_errors)} validation error(s). Please fix the schema before generating.")
        sys.exit(1)


def load_checked_schema(schemas: list[Path]) -> GraphQLSchema:
    try:
        graphql_schema = load_schema(schemas)
    except (GraphQLError, GraphQLFileSyntaxError, TypeError) as e:
        log.error(f"Invalid schema: {e}")
        sys.exit(1)
    assert_correct_schema(graphql_schema)
    return graphql_schema


@click.group(context_settings={"auto_envvar_prefix": "APOLLO_CODEGEN"})
@click.option(
    "-l",
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default="INFO",
    help="Log level",
    show_default=True,
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    help="Log file",
)
@click.version_option(__version__)
def cli(log_level: str, log_file: Path | None) -> None:
    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w")
        file_handler.setFormatter(logging.Formatter("%(asctime)s:%(levelname)s:%(message)s"))
        log.addHandler(file_handler)

    log.setLevel(log_level.upper())
    if log_level.upper() == "DEBUG":
        _ = install(show_locals=True)


@click.group()
def generate() -> None:
    """Generate commands."""
    pass


@click.group()
def stats() -> None:
    """Stats commands."""
    pass


# Generate -> java
# ----------
@generate.command
@schema_option
@config_option
@click.option(
    "--output",
    "-o",
    type=click.Path(file_okay=False, writable=True, path_type=Path),
    required=True,
    help="Directory the generated Java files are written to",
)
@click.option(
    "--package",
    "-p",
    type=str,
    help="Java package of the generated classes. Inferred from the output directory when omitted.",
)
@click.option(
    "--scalar",
    "scalars",
    type=str,
    multiple=True,
    help="Custom scalar mapping as NAME=JavaType. Can be specified multiple times.",
)
@click.option(
    "--type",
    "-t",
    "type_names",
    type=str,
    multiple=True,
    help="Input object type to generate. Can be specified multiple times, defaults to all input types.",
)
@click.option(
    "--dry-run",
    is_flag=True,
    help="Print the generated sources instead of writing files",
)
def java(
    schemas: list[Path],
    config_path: Path | None,
    output: Path,
    package: str | None,
    scalars: tuple[str, ...],
    type_names: tuple[str, ...],
    dry_run: bool,
) -> None:
    """Generate Apollo Android Java input types from a given GraphQL schema."""
    graphql_schema = load_checked_schema(schemas)

    try:
        config = load_codegen_config(config_path)
        if package is None and not config.package:
            package = build_package_name_from_path(str(output))
            log.info(f"Inferred package '{package}' from {output}")
        config = config.with_overrides(package, parse_scalar_overrides(scalars))
        log.key_value("Package", config.package or "<working directory>")

        java_files = translate_to_java(graphql_schema, config=config, type_names=list(type_names) or None)

        if dry_run:
            for class_name, content in java_files.items():
                log.rule(f"{class_name}.java")
                click.echo(content)
            log.hint("Use without --dry-run to actually write files")
            return

        written = write_java_files(java_files, output)
        log.success(f"Generated {len(written)} Java input types under {output}")
        for path in written:
            log.list_item(path.name, style="dim")

    except (yaml.YAMLError, ValidationError, TypeError) as e:
        log.error(f"Invalid configuration: {e}")
        sys.exit(1)
    except OSError as e:
        log.error(f"File I/O error: {e}")
        sys.exit(1)
    except ValueError as e:
        log.error(f"Generation failed: {e}")
        sys.exit(1)


# stats -> graphql
# ----------
@stats.command(name="graphql")
@schema_option
@config_option
def stats_graphql(schemas: list[Path], config_path: Path | None) -> None:
    """Count the types relevant for input type generation and show the scalar mapping."""
    graphql_schema = load_checked_schema(schemas)
    try:
        config = load_codegen_config(config_path)
    except (yaml.YAMLError, ValidationError, TypeError) as e:
        log.error(f"Invalid configuration: {e}")
        sys.exit(1)

    type_counts: dict[str, Any] = {
        "input_object": 0,
        "enum": 0,
        "scalar": 0,
        "custom_scalars": {},
    }
    for named_type in get_all_named_types(graphql_schema):
        if is_input_object_type(named_type):
            type_counts["input_object"] += 1
        elif is_enum_type(named_type):
            type_counts["enum"] += 1
        elif is_scalar_type(named_type):
            type_counts["scalar"] += 1
            if not is_specified_scalar_type(named_type):
                type_counts["custom_scalars"][named_type.name] = config.scalars.get(
                    named_type.name, FALLBACK_SCALAR_TYPE
                )

    log.rule("GraphQL Schema Type Counts")
    log.print_dict(type_counts)


cli.add_command(generate)
cli.add_command(stats)

if __name__ == "__main__":
    cli()
