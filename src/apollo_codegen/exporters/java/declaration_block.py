"""Java declaration block printer."""

from functools import cache
from typing import Literal

from jinja2 import Environment, PackageLoader, select_autoescape

Access = Literal["public", "protected", "private", ""]
Kind = Literal["class", "interface", "enum"]


@cache
def template_environment() -> Environment:
    return Environment(
        loader=PackageLoader("apollo_codegen.exporters.java", "templates"),
        autoescape=select_autoescape(),
        trim_blocks=True,
        lstrip_blocks=True,
    )


class JavaDeclarationBlock:
    """
    Fluent builder for a Java type declaration.

    The body is supplied as already indented text; the block only lays out
    annotations, modifiers, name, implemented interfaces and braces.
    """

    def __init__(self) -> None:
        self._name = ""
        self._access: Access = ""
        self._final = False
        self._static = False
        self._kind: Kind = "class"
        self._annotations: list[str] = []
        self._implements: list[str] = []
        self._block = ""

    def with_name(self, name: str) -> "JavaDeclarationBlock":
        self._name = name
        return self

    def access(self, access: Access) -> "JavaDeclarationBlock":
        self._access = access
        return self

    def final(self) -> "JavaDeclarationBlock":
        self._final = True
        return self

    def static(self) -> "JavaDeclarationBlock":
        self._static = True
        return self

    def as_kind(self, kind: Kind) -> "JavaDeclarationBlock":
        self._kind = kind
        return self

    def annotate(self, annotations: list[str]) -> "JavaDeclarationBlock":
        self._annotations.extend(annotations)
        return self

    def implements(self, interfaces: list[str]) -> "JavaDeclarationBlock":
        self._implements.extend(interfaces)
        return self

    def with_block(self, block: str) -> "JavaDeclarationBlock":
        self._block = block
        return self

    @property
    def signature(self) -> str:
        if not self._name:
            raise ValueError("A Java declaration block needs a name")

        parts = [self._access] if self._access else []
        if self._static:
            parts.append("static")
        if self._final:
            parts.append("final")
        parts.extend([self._kind, self._name])
        if self._implements:
            parts.append(f"implements {', '.join(self._implements)}")
        return " ".join(parts)

    @property
    def string(self) -> str:
        template = template_environment().get_template("declaration_block.j2")
        return template.render(annotations=self._annotations, signature=self.signature, block=self._block)


def render_java_file(package: str, imports: list[str], source: str) -> str:
    """Lay out a complete ``.java`` file: package line, import block and the class."""
    template = template_environment().get_template("java_file.j2")
    return template.render(package=package, imports=imports, source=source) + "\n"
