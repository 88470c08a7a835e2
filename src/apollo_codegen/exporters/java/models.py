"""Models for the Java input type generator.

The marshaller is described by a small tree of statement nodes (field write, list
write, guarded block) that the visitor builds and ``MarshallerPrinter`` renders.
"""

from dataclasses import dataclass, field
from enum import Enum

from graphql import GraphQLInputType
from pydantic import BaseModel, Field


class FieldKind(str, Enum):
    SCALAR = "scalar"
    ENUM = "enum"
    INPUT_OBJECT = "input_object"


@dataclass(frozen=True)
class FieldDescriptor:
    """Per-field facts derived while emitting one input object type."""

    name: str
    graphql_type: GraphQLInputType
    java_type: str
    item_type: str
    schema_type_name: str
    kind: FieldKind
    is_required: bool
    is_list: bool


@dataclass(frozen=True)
class WriterCall:
    """A call on the field writer, e.g. ``writeInt("limit", limit.value)``."""

    method: str
    arguments: tuple[str, ...] = ()

    def render(self) -> str:
        return f"{self.method}({', '.join(self.arguments)})"


@dataclass(frozen=True)
class FieldWrite:
    call: WriterCall


@dataclass(frozen=True)
class ListWrite:
    """Writes a list field through an anonymous ``InputFieldWriter.ListWriter``."""

    field_name: str
    source: str
    nullable_source: bool
    item_type: str
    item_call: WriterCall
    list_method: str = "writeList"


@dataclass(frozen=True)
class GuardedBlock:
    """Statements that only run when an optional field is defined."""

    field_name: str
    body: tuple["Statement", ...] = field(default_factory=tuple)


Statement = FieldWrite | ListWrite | GuardedBlock


class GeneratedClass(BaseModel):
    """A generated Java input type class and the imports it requires."""

    name: str
    package: str = ""
    private_fields: list[str] = Field(default_factory=list)
    constructor: str = ""
    getters: list[str] = Field(default_factory=list)
    builder_getter: str = ""
    marshaller: str = ""
    builder: str = ""
    imports: list[str] = Field(default_factory=list)
    source: str = ""

    @property
    def body(self) -> str:
        """Class body text in member order: fields, constructor, getters, builder(), marshaller, Builder."""
        return "\n".join(
            [
                *self.private_fields,
                "",
                self.constructor,
                "",
                *self.getters,
                "",
                self.builder_getter,
                "",
                self.marshaller,
                "",
                self.builder,
            ]
        )
