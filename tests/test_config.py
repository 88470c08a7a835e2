import logging
from pathlib import Path
from typing import Any

import pytest
from pydantic import ValidationError

from apollo_codegen import log
from apollo_codegen.exporters.java.config import (
    JAVA_SCALARS,
    JavaCodegenConfig,
    WriterMethods,
    load_codegen_config,
    parse_scalar_overrides,
)
from tests.conftest import TestSchemaData


class TestJavaCodegenConfig:
    def test_defaults(self) -> None:
        config = JavaCodegenConfig()

        assert config.package == ""
        assert config.scalars == JAVA_SCALARS
        assert config.list_type == "List"
        assert config.generated_annotation == "Apollo GraphQL"
        assert config.writer_methods.for_scalar("Int") == "writeInt"
        assert config.writer_methods.for_scalar("DateTime") == "writeCustom"

    def test_scalars_are_merged_over_defaults(self) -> None:
        config = JavaCodegenConfig(scalars={"DateTime": "String", "Float": "Float"})

        assert config.scalars["DateTime"] == "String"
        assert config.scalars["Float"] == "Float"
        assert config.scalars["Int"] == "Integer"

    @pytest.mark.parametrize("package", ["com.example", "type", "com.example.v2", " com.example "])
    def test_valid_package(self, package: str) -> None:
        assert JavaCodegenConfig(package=package).package == package.strip()

    @pytest.mark.parametrize("package", ["com..example", "com.1example", "com.example-app", "com.example."])
    def test_invalid_package(self, package: str) -> None:
        with pytest.raises(ValidationError, match="Invalid Java package name"):
            JavaCodegenConfig(package=package)

    def test_unknown_keys_are_rejected(self) -> None:
        config: Any = {"packge": "com.example"}
        with pytest.raises(ValidationError):
            JavaCodegenConfig(**config)

    def test_writer_methods_are_frozen(self) -> None:
        writer_methods = WriterMethods()
        with pytest.raises(ValidationError):
            writer_methods.enum = "writeEnum"  # type: ignore[misc]

    def test_with_overrides(self) -> None:
        config = JavaCodegenConfig(package="com.example", scalars={"DateTime": "String"})

        overridden = config.with_overrides("com.other", {"Upload": "Object", "DateTime": "Long"})

        assert overridden.package == "com.other"
        assert overridden.scalars["DateTime"] == "Long"
        assert overridden.scalars["Upload"] == "Object"
        assert config.package == "com.example"
        assert config.scalars["DateTime"] == "String"

    def test_with_overrides_keeps_unset_values(self) -> None:
        config = JavaCodegenConfig(package="com.example", list_type="java.util.List")

        overridden = config.with_overrides()

        assert overridden == config


class TestLoadCodegenConfig:
    def test_no_path_returns_defaults(self) -> None:
        assert load_codegen_config(None) == JavaCodegenConfig()

    def test_load_yaml(self) -> None:
        config = load_codegen_config(TestSchemaData.CODEGEN_CONFIG)

        assert config.package == "com.example.type"
        assert config.scalars["DateTime"] == "String"
        assert config.writer_methods.for_scalar("DateTime") == "writeString"

    @pytest.mark.parametrize("content", ["", "null\n", "{}\n"])
    def test_empty_yaml_returns_defaults(self, tmp_path: Path, content: str) -> None:
        config_path = tmp_path / "codegen.yaml"
        config_path.write_text(content)

        assert load_codegen_config(config_path) == JavaCodegenConfig()

    def test_non_mapping_root(self, tmp_path: Path) -> None:
        config_path = tmp_path / "codegen.yaml"
        config_path.write_text("- com.example\n")

        with pytest.raises(TypeError, match="must be a mapping"):
            load_codegen_config(config_path)

    def test_invalid_values(self, tmp_path: Path) -> None:
        config_path = tmp_path / "codegen.yaml"
        config_path.write_text("package: com.1example\n")

        with pytest.raises(ValidationError):
            load_codegen_config(config_path)


class TestParseScalarOverrides:
    def test_pairs(self) -> None:
        assert parse_scalar_overrides(["DateTime=String", " Upload = Object "]) == {
            "DateTime": "String",
            "Upload": "Object",
        }

    def test_last_pair_wins(self) -> None:
        assert parse_scalar_overrides(("DateTime=String", "DateTime=Long")) == {"DateTime": "Long"}

    @pytest.mark.parametrize("value", ["DateTime", "DateTime=", "=String", " = "])
    def test_invalid_pair(self, value: str) -> None:
        with pytest.raises(ValueError, match="expected NAME=JavaType"):
            parse_scalar_overrides([value])


def test_load_logs_config_path() -> None:
    records: list[logging.LogRecord] = []
    handler = logging.Handler()
    handler.emit = records.append  # type: ignore[method-assign]
    previous_level = log.level
    log.addHandler(handler)
    log.setLevel(logging.DEBUG)
    try:
        load_codegen_config(TestSchemaData.CODEGEN_CONFIG)
    finally:
        log.removeHandler(handler)
        log.setLevel(previous_level)

    (record,) = [record for record in records if record.getMessage().startswith("Loaded codegen config")]
    assert record.msg == f"Loaded codegen config from {TestSchemaData.CODEGEN_CONFIG}"
    assert not record.args
