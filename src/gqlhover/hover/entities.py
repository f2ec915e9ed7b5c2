"""
Semantic entities produced by the annotator.

``HoverEntity`` is a closed union: the formatter handles each member
explicitly and ``None`` means no hover.
"""

from dataclasses import dataclass
from typing import Optional, Union

from graphql import (
    GraphQLArgument,
    GraphQLDirective,
    GraphQLEnumType,
    GraphQLEnumValue,
    GraphQLField,
    GraphQLInputField,
    GraphQLInputObjectType,
    GraphQLNamedType,
)
from graphql.language import TypeNode


@dataclass(frozen=True)
class FieldInfo:
    """A selected field, keyed by its real name (never the alias)."""
    parent_type: GraphQLNamedType
    field_name: str
    field: GraphQLField


@dataclass(frozen=True)
class ArgumentInfo:
    """
    An argument definition.

    ``owner`` is the rendered prefix: ``Type.field`` for field arguments,
    ``@directive`` for directive arguments.
    """
    owner: str
    argument_name: str
    argument: GraphQLArgument


@dataclass(frozen=True)
class DirectiveInfo:
    """A directive used in the document, resolved from the schema registry."""
    directive: GraphQLDirective


@dataclass(frozen=True)
class EnumValueInfo:
    """An enum literal resolved against its (unwrapped) input enum type."""
    enum_type: GraphQLEnumType
    value_name: str
    value: GraphQLEnumValue


@dataclass(frozen=True)
class InputFieldInfo:
    """A field of an input object literal."""
    input_type: GraphQLInputObjectType
    field_name: str
    field: GraphQLInputField


@dataclass(frozen=True)
class TypeInfo:
    """A named type reference, e.g. in a variable definition or type condition."""
    type: GraphQLNamedType


@dataclass(frozen=True)
class VariableTypeInfo:
    """The declared type of a variable, taken from the operation header."""
    variable_name: str
    type_node: TypeNode


HoverEntity = Optional[
    Union[
        FieldInfo,
        ArgumentInfo,
        DirectiveInfo,
        EnumValueInfo,
        InputFieldInfo,
        TypeInfo,
        VariableTypeInfo,
    ]
]
