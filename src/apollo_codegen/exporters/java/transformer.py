from typing import cast

from graphql import GraphQLInputObjectType, GraphQLSchema, is_input_object_type

from apollo_codegen import log
from apollo_codegen.exporters.java.config import JavaCodegenConfig
from apollo_codegen.exporters.java.declaration_block import render_java_file
from apollo_codegen.exporters.java.models import GeneratedClass
from apollo_codegen.exporters.java.package_name import default_package_name
from apollo_codegen.exporters.java.visitor import InputTypeVisitor
from apollo_codegen.exporters.utils.extraction import get_all_input_object_types


class JavaInputTypeTransformer:
    """
    Transformer class to convert GraphQL input object types to Apollo Android Java classes.

    Each input object type is generated by its own InputTypeVisitor, so imports never
    leak from one class into another.
    """

    def __init__(
        self,
        graphql_schema: GraphQLSchema,
        config: JavaCodegenConfig | None = None,
        type_names: list[str] | None = None,
    ):
        self.graphql_schema = graphql_schema
        self.config = config or JavaCodegenConfig()
        if not self.config.package:
            package = default_package_name()
            log.info(f"No package configured, using '{package}' from the working directory")
            self.config = self.config.model_copy(update={"package": package})
        self.type_names = type_names

    def select_input_types(self) -> list[GraphQLInputObjectType]:
        """Return the input object types to generate, in schema order or in the requested order."""
        if not self.type_names:
            return get_all_input_object_types(self.graphql_schema)

        selected: list[GraphQLInputObjectType] = []
        for type_name in dict.fromkeys(self.type_names):
            graphql_type = self.graphql_schema.get_type(type_name)
            if graphql_type is None:
                raise ValueError(f"Type '{type_name}' not found in schema")
            if not is_input_object_type(graphql_type):
                raise ValueError(f"Type '{type_name}' is not an input object type")
            selected.append(cast(GraphQLInputObjectType, graphql_type))
        return selected

    def generate_classes(self) -> list[GeneratedClass]:
        input_types = self.select_input_types()
        log.debug(f"Found {len(input_types)} input object types to generate")
        return [InputTypeVisitor(self.graphql_schema, self.config).visit_input_object_type(t) for t in input_types]

    def transform(self) -> dict[str, str]:
        """
        Generate one Java source file per input object type.

        Returns:
            dict[str, str]: Mapping of class names to the content of their ``.java`` files.
        """
        log.info("Starting GraphQL to Java input type generation")

        files = {
            generated.name: render_java_file(generated.package, generated.imports, generated.source)
            for generated in self.generate_classes()
        }

        log.info(f"Successfully generated {len(files)} Java input types")
        return files
