from pathlib import Path, PurePosixPath

SOURCE_ROOT_PARTS = ("src", "main")


def build_package_name_from_path(path: str) -> str:
    """Infer a Java package name from a directory path.

    Everything up to and including a ``src/main/<language>`` segment is dropped, so
    ``app/src/main/java/com/example/graphql`` becomes ``com.example.graphql``. Paths
    without such a segment are joined as they are.

    Args:
        path: Directory path, absolute or relative

    Returns:
        The dotted package name, empty for an empty path
    """
    parts = [part for part in PurePosixPath(path.replace("\\", "/")).parts if part not in ("/", ".", "")]

    for index in range(len(parts) - len(SOURCE_ROOT_PARTS)):
        if tuple(parts[index : index + len(SOURCE_ROOT_PARTS)]) == SOURCE_ROOT_PARTS:
            parts = parts[index + len(SOURCE_ROOT_PARTS) + 1 :]
            break

    return ".".join(parts)


def default_package_name() -> str:
    """Package used when none is configured, inferred from the working directory."""
    return build_package_name_from_path(str(Path.cwd()))
