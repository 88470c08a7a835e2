from pathlib import Path
from typing import Any, cast

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from apollo_codegen import log

JAVA_SCALARS = {
    "ID": "String",
    "String": "String",
    "Boolean": "Boolean",
    "Int": "Integer",
    "Float": "Double",
}

FALLBACK_SCALAR_TYPE = "Object"

SCALAR_TO_WRITER_METHOD = {
    "ID": "writeString",
    "String": "writeString",
    "Int": "writeInt",
    "Boolean": "writeBoolean",
    "Float": "writeDouble",
}


class WriterMethods(BaseModel):
    """Names of the field-writer methods the generated marshaller calls."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    scalars: dict[str, str] = Field(default_factory=lambda: dict(SCALAR_TO_WRITER_METHOD))
    enum: str = "writeString"
    input_object: str = "writeObject"
    list: str = "writeList"
    custom: str = "writeCustom"

    def for_scalar(self, scalar_name: str) -> str:
        return self.scalars.get(scalar_name, self.custom)


class JavaCodegenConfig(BaseModel):
    """Configuration of the Java input type generator."""

    model_config = ConfigDict(extra="forbid")

    package: str = ""
    scalars: dict[str, str] = Field(default_factory=lambda: dict(JAVA_SCALARS))
    writer_methods: WriterMethods = Field(default_factory=WriterMethods)
    list_type: str = "List"
    generated_annotation: str = "Apollo GraphQL"

    @field_validator("scalars")
    @classmethod
    def merge_default_scalars(cls, scalars: dict[str, str]) -> dict[str, str]:
        return {**JAVA_SCALARS, **scalars}

    @field_validator("package")
    @classmethod
    def validate_package(cls, package: str) -> str:
        package = package.strip()
        if package and any(not part.isidentifier() for part in package.split(".")):
            raise ValueError(f"Invalid Java package name '{package}'")
        return package

    def with_overrides(self, package: str | None = None, scalars: dict[str, str] | None = None) -> "JavaCodegenConfig":
        """Return a copy of the configuration with CLI-level overrides applied."""
        data = self.model_dump()
        if package is not None:
            data["package"] = package
        if scalars:
            data["scalars"] = {**self.scalars, **scalars}
        return JavaCodegenConfig.model_validate(data)


def load_codegen_config(config_path: Path | None) -> JavaCodegenConfig:
    """
    Load and validate a generator configuration from a YAML file.

    Args:
        config_path: Path to the YAML configuration file, or None for the defaults.

    Returns:
        A validated JavaCodegenConfig.

    Raises:
        OSError: If the file cannot be read.
        yaml.YAMLError: If the file is not valid YAML.
        TypeError: If the YAML root is not a mapping.
        ValidationError: If validation against JavaCodegenConfig fails.
    """
    if config_path is None:
        log.debug("No codegen config provided")
        return JavaCodegenConfig()

    raw: Any
    with config_path.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)

    log.debug(f"Loaded codegen config from {config_path}")

    # Treat empty file or explicit YAML null as "defaults"
    if raw is None or raw == {}:
        return JavaCodegenConfig()

    if not isinstance(raw, dict):
        raise TypeError(f"Codegen config root must be a mapping (YAML object), got {type(raw).__name__}")

    return JavaCodegenConfig.model_validate(cast(dict[str, Any], raw))


def parse_scalar_overrides(values: tuple[str, ...] | list[str]) -> dict[str, str]:
    """Parse ``Name=JavaType`` pairs given on the command line."""
    scalars: dict[str, str] = {}
    for value in values:
        name, separator, java_type = value.partition("=")
        if not separator or not name.strip() or not java_type.strip():
            raise ValueError(f"Invalid scalar mapping '{value}', expected NAME=JavaType")
        scalars[name.strip()] = java_type.strip()
    return scalars
