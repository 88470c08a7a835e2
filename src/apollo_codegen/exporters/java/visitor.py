from typing import Any, cast

from graphql import (
    GraphQLInputField,
    GraphQLInputObjectType,
    GraphQLInputType,
    GraphQLList,
    GraphQLNamedType,
    GraphQLNonNull,
    GraphQLSchema,
    GraphQLType,
    get_named_type,
    is_enum_type,
    is_input_object_type,
    is_list_type,
    is_non_null_type,
    is_scalar_type,
)

from apollo_codegen import log
from apollo_codegen.exporters.java.config import FALLBACK_SCALAR_TYPE, JavaCodegenConfig
from apollo_codegen.exporters.java.declaration_block import JavaDeclarationBlock
from apollo_codegen.exporters.java.imports import ImportSet
from apollo_codegen.exporters.java.models import (
    FieldDescriptor,
    FieldKind,
    FieldWrite,
    GeneratedClass,
    GuardedBlock,
    ListWrite,
    Statement,
    WriterCall,
)
from apollo_codegen.exporters.java.package_name import default_package_name
from apollo_codegen.exporters.java.printer import ITEM_VARIABLE, MarshallerPrinter, indent, indent_multiline

BUILDER_CLASS_NAME = "Builder"


class UnknownTypeError(ValueError):
    """Raised when a field references a named type the schema does not define."""

    def __init__(self, type_name: str) -> None:
        super().__init__(f"Type '{type_name}' is not defined in the schema")
        self.type_name = type_name


def wrap_type_with_modifiers(base_type: str, graphql_type: GraphQLType, list_type: str = "List") -> str:
    """Wrap ``base_type`` in ``list_type<...>`` once per list level of ``graphql_type``."""
    if is_non_null_type(graphql_type):
        return wrap_type_with_modifiers(base_type, cast(GraphQLNonNull[Any], graphql_type).of_type, list_type)
    if is_list_type(graphql_type):
        inner_type = wrap_type_with_modifiers(base_type, cast(GraphQLList[Any], graphql_type).of_type, list_type)
        return f"{list_type}<{inner_type}>"
    return base_type


def contains_list(graphql_type: GraphQLType) -> bool:
    if is_non_null_type(graphql_type):
        return contains_list(cast(GraphQLNonNull[Any], graphql_type).of_type)
    return is_list_type(graphql_type)


class InputTypeVisitor:
    """
    Emits the Java source of one Apollo Android input type class.

    Every emission step records the imports it needs in ``imports``. Create one
    visitor per generated class; the import set is never reset.
    """

    def __init__(
        self,
        graphql_schema: GraphQLSchema,
        config: JavaCodegenConfig | None = None,
        imports: ImportSet | None = None,
    ):
        self.graphql_schema = graphql_schema
        self.config = config or JavaCodegenConfig()
        self.package = self.config.package or default_package_name()
        self.imports = imports if imports is not None else ImportSet()
        self.printer = MarshallerPrinter()

    def _lookup_named_type(self, graphql_type: GraphQLType) -> GraphQLNamedType:
        type_name = get_named_type(graphql_type).name
        schema_type = self.graphql_schema.get_type(type_name)
        if schema_type is None:
            raise UnknownTypeError(type_name)
        return schema_type

    def resolve_type(self, graphql_type: GraphQLType, wrap_collections: bool = True) -> str:
        """Map a (possibly wrapped) GraphQL type to its Java type name."""
        schema_type = self._lookup_named_type(graphql_type)
        type_to_use = schema_type.name

        if is_scalar_type(schema_type):
            type_to_use = self.config.scalars.get(schema_type.name, FALLBACK_SCALAR_TYPE)
            if schema_type.name not in self.config.scalars:
                log.debug(f"Scalar '{schema_type.name}' has no Java mapping, using {FALLBACK_SCALAR_TYPE}")
            self.imports.add_known(type_to_use)
        elif is_input_object_type(schema_type):
            self.imports.add(f"{self.package}.{schema_type.name}" if self.package else schema_type.name)

        if wrap_collections and contains_list(graphql_type):
            self.imports.add_known("List")
            return wrap_type_with_modifiers(type_to_use, graphql_type, self.config.list_type)

        return type_to_use

    def build_field_descriptor(self, name: str, field: GraphQLInputField) -> FieldDescriptor:
        schema_type = self._lookup_named_type(field.type)

        if is_scalar_type(schema_type):
            kind = FieldKind.SCALAR
        elif is_enum_type(schema_type):
            kind = FieldKind.ENUM
        elif is_input_object_type(schema_type):
            kind = FieldKind.INPUT_OBJECT
        else:
            raise ValueError(f"Field '{name}' has type '{schema_type.name}', which is not an input type")

        return FieldDescriptor(
            name=name,
            graphql_type=cast(GraphQLInputType, field.type),
            java_type=self.resolve_type(field.type),
            item_type=self.resolve_type(field.type, wrap_collections=False),
            schema_type_name=schema_type.name,
            kind=kind,
            is_required=is_non_null_type(field.type),
            is_list=contains_list(field.type),
        )

    def describe_field(self, descriptor: FieldDescriptor, use_optional_wrapper: bool = True) -> str:
        """Return the ``<Type> <name>`` declaration of a field.

        Required fields are annotated ``@Nonnull``. Optional fields are boxed in
        ``Input<...>`` unless ``use_optional_wrapper`` is False.
        """
        if descriptor.is_required:
            self.imports.add_known("Nonnull")
            return f"@Nonnull {descriptor.java_type} {descriptor.name}"

        if use_optional_wrapper:
            self.imports.add_known("Input")
            return f"Input<{descriptor.java_type}> {descriptor.name}"

        return f"{descriptor.java_type} {descriptor.name}"

    def build_private_fields(self, descriptors: list[FieldDescriptor]) -> list[str]:
        return [indent(f"private final {self.describe_field(descriptor)};") for descriptor in descriptors]

    def build_constructor(self, class_name: str, descriptors: list[FieldDescriptor]) -> str:
        parameters = ", ".join(self.describe_field(descriptor) for descriptor in descriptors)
        assignments = [indent(f"this.{descriptor.name} = {descriptor.name};") for descriptor in descriptors]
        return indent_multiline("\n".join([f"{class_name}({parameters}) {{", *assignments, "}"]))

    def build_getters(self, descriptors: list[FieldDescriptor]) -> list[str]:
        getters = []
        for descriptor in descriptors:
            nullable = ""
            if not descriptor.is_required:
                self.imports.add_known("Nullable")
                nullable = "@Nullable "
            getters.append(
                indent(f"public {nullable}{self.describe_field(descriptor)}() {{ return this.{descriptor.name}; }}")
            )
        return getters

    def _field_value(self, descriptor: FieldDescriptor) -> str:
        return descriptor.name if descriptor.is_required else f"{descriptor.name}.value"

    def build_writer_call(self, descriptor: FieldDescriptor, list_item_call: bool = False) -> WriterCall:
        """Choose the field-writer call for a field, or for one item of a list field."""
        writer_methods = self.config.writer_methods

        if descriptor.kind is FieldKind.INPUT_OBJECT:
            if list_item_call:
                return WriterCall(writer_methods.input_object, (f"{ITEM_VARIABLE}.marshaller()",))
            if descriptor.is_required:
                value = f"{descriptor.name}.marshaller()"
            else:
                value = f"{descriptor.name}.value != null ? {descriptor.name}.value.marshaller() : null"
            return WriterCall(writer_methods.input_object, (f'"{descriptor.name}"', value))

        if descriptor.kind is FieldKind.ENUM:
            method = writer_methods.enum
        else:
            method = writer_methods.for_scalar(descriptor.schema_type_name)
            if method == writer_methods.custom:
                log.debug(f"Field '{descriptor.name}' uses custom scalar '{descriptor.schema_type_name}'")

        if list_item_call:
            return WriterCall(method, (ITEM_VARIABLE,))
        return WriterCall(method, (f'"{descriptor.name}"', self._field_value(descriptor)))

    def build_field_marshaller(self, descriptor: FieldDescriptor) -> Statement:
        """Build the marshaller statement for a single field."""
        statement: Statement
        if descriptor.is_list:
            statement = ListWrite(
                field_name=descriptor.name,
                source=self._field_value(descriptor),
                nullable_source=not descriptor.is_required,
                item_type=descriptor.item_type,
                item_call=self.build_writer_call(descriptor, list_item_call=True),
                list_method=self.config.writer_methods.list,
            )
        else:
            statement = FieldWrite(self.build_writer_call(descriptor))

        if descriptor.is_required:
            return statement
        return GuardedBlock(descriptor.name, (statement,))

    def build_marshaller(self, descriptors: list[FieldDescriptor]) -> str:
        for simple_name in ("Override", "IOException", "InputFieldWriter", "InputFieldMarshaller"):
            self.imports.add_known(simple_name)

        statements = [self.build_field_marshaller(descriptor) for descriptor in descriptors]
        method = "\n".join(
            [
                "@Override",
                "public InputFieldMarshaller marshaller() {",
                indent("return new InputFieldMarshaller() {"),
                indent("@Override", 2),
                indent("public void marshal(InputFieldWriter writer) throws IOException {", 2),
                *([self.printer.print(statements, depth=3)] if statements else []),
                indent("}", 2),
                indent("};"),
                "}",
            ]
        )
        return indent_multiline(method)

    def build_builder(self, class_name: str, descriptors: list[FieldDescriptor]) -> str:
        private_fields = [
            indent(f"private {self.describe_field(descriptor)}{'' if descriptor.is_required else ' = Input.absent()'};")
            for descriptor in descriptors
        ]

        setters = []
        for descriptor in descriptors:
            parameter = self.describe_field(descriptor, use_optional_wrapper=False)
            if descriptor.is_required:
                value = descriptor.name
            else:
                self.imports.add_known("Nullable")
                parameter = f"@Nullable {parameter}"
                value = f"Input.fromNullable({descriptor.name})"
            setter = "\n".join(
                [
                    "",
                    f"public {BUILDER_CLASS_NAME} {descriptor.name}({parameter}) {{",
                    indent(f"this.{descriptor.name} = {value};"),
                    indent("return this;"),
                    "}",
                ]
            )
            setters.append(indent_multiline(setter))

        null_checks = []
        for descriptor in descriptors:
            if descriptor.is_required:
                self.imports.add_known("Utils")
                null_checks.append(indent(f'Utils.checkNotNull({descriptor.name}, "{descriptor.name} == null");'))

        arguments = ", ".join(descriptor.name for descriptor in descriptors)
        build_method = indent_multiline(
            "\n".join(
                [
                    f"public {class_name} build() {{",
                    *null_checks,
                    indent(f"return new {class_name}({arguments});"),
                    "}",
                ]
            )
        )

        constructor = "\n" + indent(f"{BUILDER_CLASS_NAME}() {{}}")
        body = "\n".join([*private_fields, constructor, *setters, "", build_method])

        return indent_multiline(
            JavaDeclarationBlock()
            .with_name(BUILDER_CLASS_NAME)
            .access("public")
            .final()
            .static()
            .with_block(body)
            .as_kind("class")
            .string
        )

    def visit_input_object_type(self, input_type: GraphQLInputObjectType) -> GeneratedClass:
        """Generate the complete Java class of an input object type."""
        class_name = input_type.name
        log.debug(f"Generating Java input type {class_name} with {len(input_type.fields)} fields")

        self.imports.add_known("InputType")
        self.imports.add_known("Generated")

        descriptors = [self.build_field_descriptor(name, field) for name, field in input_type.fields.items()]

        builder_getter = f"public static {BUILDER_CLASS_NAME} builder() {{ return new {BUILDER_CLASS_NAME}(); }}"
        generated = GeneratedClass(
            name=class_name,
            package=self.package,
            private_fields=self.build_private_fields(descriptors),
            constructor=self.build_constructor(class_name, descriptors),
            getters=self.build_getters(descriptors),
            builder_getter=indent(builder_getter),
            marshaller=self.build_marshaller(descriptors),
            builder=self.build_builder(class_name, descriptors),
        )
        generated.source = (
            JavaDeclarationBlock()
            .annotate([f'Generated("{self.config.generated_annotation}")'])
            .access("public")
            .final()
            .as_kind("class")
            .with_name(class_name)
            .with_block(generated.body)
            .implements(["InputType"])
            .string
        )
        generated.imports = self.imports.statements()
        return generated
