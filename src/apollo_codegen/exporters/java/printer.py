from collections.abc import Iterable

from apollo_codegen.exporters.java.models import FieldWrite, GuardedBlock, ListWrite, Statement

INDENT = "  "
ITEM_VARIABLE = "$item"


def indent(text: str, count: int = 1) -> str:
    return f"{INDENT * count}{text}"


def indent_multiline(text: str, count: int = 1) -> str:
    """Indent every non-empty line of ``text`` by ``count`` levels."""
    return "\n".join(indent(line, count) if line else line for line in text.split("\n"))


class MarshallerPrinter:
    """Renders marshaller statements as Java source lines."""

    def __init__(self, writer_variable: str = "writer") -> None:
        self.writer_variable = writer_variable

    def print(self, statements: Iterable[Statement], depth: int = 0) -> str:
        lines: list[str] = []
        for statement in statements:
            lines.extend(self._print_statement(statement))
        return "\n".join(indent(line, depth) if line else line for line in lines)

    def _print_statement(self, statement: Statement) -> list[str]:
        if isinstance(statement, FieldWrite):
            return [f"{self.writer_variable}.{statement.call.render()};"]
        if isinstance(statement, ListWrite):
            return self._print_list_write(statement)
        if isinstance(statement, GuardedBlock):
            return self._print_guarded_block(statement)
        raise TypeError(f"Unsupported marshaller statement: {type(statement).__name__}")

    def _print_guarded_block(self, block: GuardedBlock) -> list[str]:
        lines = [f"if ({block.field_name}.defined) {{"]
        for statement in block.body:
            lines.extend(indent(line) for line in self._print_statement(statement))
        lines.append("}")
        return lines

    def _print_list_write(self, list_write: ListWrite) -> list[str]:
        list_writer = "new InputFieldWriter.ListWriter() {"
        if list_write.nullable_source:
            head = f'"{list_write.field_name}", {list_write.source} != null ? {list_writer}'
            tail = "} : null);"
        else:
            head = f'"{list_write.field_name}", {list_writer}'
            tail = "});"

        return [
            f"{self.writer_variable}.{list_write.list_method}({head}",
            indent("@Override"),
            indent("public void write(InputFieldWriter.ListItemWriter listItemWriter) throws IOException {"),
            indent(f"for ({list_write.item_type} {ITEM_VARIABLE} : {list_write.source}) {{", 2),
            indent(f"listItemWriter.{list_write.item_call.render()};", 3),
            indent("}", 2),
            indent("}"),
            tail,
        ]
