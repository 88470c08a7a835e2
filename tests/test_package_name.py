from pathlib import Path

import pytest

from apollo_codegen.exporters.java.package_name import build_package_name_from_path, default_package_name


@pytest.mark.parametrize(
    "path,expected",
    [
        ("app/src/main/java/com/example/graphql", "com.example.graphql"),
        ("/home/dev/app/src/main/kotlin/com/example", "com.example"),
        ("src/main/java/type", "type"),
        ("./src/main/java/com/example/", "com.example"),
        ("app\\src\\main\\java\\com\\example", "com.example"),
        ("com/example/type", "com.example.type"),
        ("generated", "generated"),
        ("src/main/java", ""),
        ("", ""),
    ],
)
def test_build_package_name_from_path(path: str, expected: str) -> None:
    assert build_package_name_from_path(path) == expected


def test_first_source_root_wins() -> None:
    assert build_package_name_from_path("src/main/java/src/main/java/com") == "src.main.java.com"


def test_default_package_name(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    package_dir = tmp_path / "app" / "src" / "main" / "java" / "org" / "sample"
    package_dir.mkdir(parents=True)
    monkeypatch.chdir(package_dir)

    assert default_package_name() == "org.sample"
