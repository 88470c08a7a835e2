"""Java import bookkeeping for generated Apollo Android classes."""

from collections.abc import Iterable, Iterator

IMPORTS = {
    # Primitives
    "String": "java.lang.String",
    "Boolean": "java.lang.Boolean",
    "Integer": "java.lang.Integer",
    "Object": "java.lang.Object",
    "Float": "java.lang.Float",
    "Double": "java.lang.Double",
    "Long": "java.lang.Long",
    # Java base
    "List": "java.util.List",
    "IOException": "java.io.IOException",
    # Annotations
    "Nonnull": "javax.annotation.Nonnull",
    "Nullable": "javax.annotation.Nullable",
    "Override": "java.lang.Override",
    "Generated": "javax.annotation.Generated",
    # Apollo Android
    "Input": "com.apollographql.apollo.api.Input",
    "InputType": "com.apollographql.apollo.api.InputType",
    "InputFieldMarshaller": "com.apollographql.apollo.api.InputFieldMarshaller",
    "InputFieldWriter": "com.apollographql.apollo.api.InputFieldWriter",
    "Utils": "com.apollographql.apollo.api.internal.Utils",
}


class ImportSet:
    """
    Accumulator of the distinct fully qualified names a generated class needs.

    The set only grows. A new instance is created for every generated class.
    """

    def __init__(self, names: Iterable[str] = ()) -> None:
        self._names: set[str] = set(names)

    def add(self, qualified_name: str) -> None:
        self._names.add(qualified_name)

    def add_known(self, simple_name: str) -> bool:
        """Record the import of a well-known Java type.

        Args:
            simple_name: Simple Java type name such as ``List`` or ``Nullable``

        Returns:
            True if the name is a known type and was recorded, False otherwise
        """
        qualified_name = IMPORTS.get(simple_name)
        if qualified_name is None:
            return False
        self._names.add(qualified_name)
        return True

    def merge(self, other: "ImportSet") -> None:
        self._names.update(other._names)

    def statements(self) -> list[str]:
        """Return the sorted ``import ...;`` lines for every recorded name."""
        return [f"import {name};" for name in self]

    def __contains__(self, qualified_name: object) -> bool:
        return qualified_name in self._names

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._names))

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"ImportSet({sorted(self._names)!r})"
