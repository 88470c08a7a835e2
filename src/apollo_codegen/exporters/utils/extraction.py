from graphql import GraphQLInputObjectType, GraphQLNamedType, GraphQLSchema, is_input_object_type, is_introspection_type


def get_all_named_types(schema: GraphQLSchema) -> list[GraphQLNamedType]:
    """
    Return the named types a schema defines or references, without the ``__*`` introspection types.

    Args:
        schema (GraphQLSchema): The schema to read.
    Returns:
        list[GraphQLNamedType]: Named types in ``type_map`` order.
    """
    return [named_type for named_type in schema.type_map.values() if not is_introspection_type(named_type)]


def get_all_input_object_types(schema: GraphQLSchema) -> list[GraphQLInputObjectType]:
    """Return the input object types of a schema in declaration order."""
    return [named_type for named_type in get_all_named_types(schema) if is_input_object_type(named_type)]
