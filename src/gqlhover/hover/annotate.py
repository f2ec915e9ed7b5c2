"""
Semantic Annotator.

Replays the type-checking rules of GraphQL validation along an ancestor
chain. Each step produces a new ``TypeCursor``; nothing is mutated, so one
schema can serve any number of concurrent hover requests.

The entity for the hovered node is chosen by node kind. When the node (or
one of its names) cannot be resolved against the schema, the closest
ancestor that does resolve is used instead.
"""

import logging
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional, Sequence

from graphql import (
    GraphQLArgument,
    GraphQLDirective,
    GraphQLEnumType,
    GraphQLEnumValue,
    GraphQLField,
    GraphQLInputField,
    GraphQLInputObjectType,
    GraphQLInputType,
    GraphQLInterfaceType,
    GraphQLNamedType,
    GraphQLObjectType,
    GraphQLSchema,
    SchemaMetaFieldDef,
    TypeMetaFieldDef,
    TypeNameMetaFieldDef,
    get_named_type,
    get_nullable_type,
    is_composite_type,
    is_enum_type,
    is_input_object_type,
    is_list_type,
    type_from_ast,
)
from graphql.language import (
    ArgumentNode,
    DirectiveNode,
    EnumValueNode,
    FieldNode,
    FragmentDefinitionNode,
    InlineFragmentNode,
    ListValueNode,
    NamedTypeNode,
    Node,
    ObjectFieldNode,
    OperationDefinitionNode,
    OperationType,
    TypeNode,
    VariableDefinitionNode,
    VariableNode,
)

from .entities import (
    ArgumentInfo,
    DirectiveInfo,
    EnumValueInfo,
    FieldInfo,
    HoverEntity,
    InputFieldInfo,
    TypeInfo,
    VariableTypeInfo,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TypeCursor:
    """
    Type information accumulated while descending the ancestor chain.

    ``composite_type`` is the type fields are looked up on. ``field_def`` is
    only set while the enclosing Field resolved; an unknown field name
    clears it together with ``composite_type``.
    """

    operation: Optional[OperationDefinitionNode] = None
    composite_type: Optional[GraphQLNamedType] = None
    parent_type: Optional[GraphQLNamedType] = None
    field_name: Optional[str] = None
    field_def: Optional[GraphQLField] = None
    directive: Optional[GraphQLDirective] = None
    argument_name: Optional[str] = None
    argument: Optional[GraphQLArgument] = None
    input_type: Optional[GraphQLInputType] = None
    input_object: Optional[GraphQLInputObjectType] = None
    input_field_name: Optional[str] = None
    input_field: Optional[GraphQLInputField] = None
    enum_type: Optional[GraphQLEnumType] = None
    enum_value_name: Optional[str] = None
    enum_value: Optional[GraphQLEnumValue] = None
    named_type: Optional[GraphQLNamedType] = None
    variable_name: Optional[str] = None
    variable_type: Optional[TypeNode] = None


# Values that only make sense inside one argument/input field
_VALUE_RESET: Dict[str, Any] = {
    "argument_name": None,
    "argument": None,
    "input_type": None,
    "input_object": None,
    "input_field_name": None,
    "input_field": None,
    "enum_type": None,
    "enum_value_name": None,
    "enum_value": None,
    "variable_name": None,
    "variable_type": None,
}


def root_type(schema: GraphQLSchema, operation: OperationType) -> Optional[GraphQLObjectType]:
    """Root object type for an operation kind, if the schema defines one."""
    if operation == OperationType.MUTATION:
        return schema.mutation_type
    if operation == OperationType.SUBSCRIPTION:
        return schema.subscription_type
    return schema.query_type


def field_definition(
    schema: GraphQLSchema, parent_type: Optional[GraphQLNamedType], name: str
) -> Optional[GraphQLField]:
    """
    Look up a field the way the executor does, including meta fields.

    ``__schema`` and ``__type`` exist only on the query root; ``__typename``
    exists on every composite type, unions included.
    """
    if parent_type is None:
        return None
    if name == "__schema" and parent_type is schema.query_type:
        return SchemaMetaFieldDef
    if name == "__type" and parent_type is schema.query_type:
        return TypeMetaFieldDef
    if name == "__typename" and is_composite_type(parent_type):
        return TypeNameMetaFieldDef
    if isinstance(parent_type, (GraphQLObjectType, GraphQLInterfaceType)):
        return parent_type.fields.get(name)
    return None


def _composite_or_none(type_: Any) -> Optional[GraphQLNamedType]:
    named = get_named_type(type_) if type_ is not None else None
    return named if is_composite_type(named) else None


def _declared_variable_type(
    operation: Optional[OperationDefinitionNode], name: str
) -> Optional[TypeNode]:
    if operation is None:
        return None
    for definition in operation.variable_definitions or ():
        if definition.variable.name.value == name:
            return definition.type
    return None


def enter(
    schema: GraphQLSchema, cursor: TypeCursor, node: Node, parent: Optional[Node]
) -> TypeCursor:
    """
    Return the cursor after descending into ``node``.

    Args:
        schema: The schema the document is checked against.
        cursor: Cursor for the parent node.
        node: The node being entered.
        parent: The node's immediate parent in the chain.
    """
    if isinstance(node, OperationDefinitionNode):
        return replace(
            cursor,
            operation=node,
            composite_type=root_type(schema, node.operation),
        )

    if isinstance(node, (FragmentDefinitionNode, InlineFragmentNode)):
        if node.type_condition is None:
            return cursor
        condition = schema.get_type(node.type_condition.name.value)
        return replace(cursor, composite_type=_composite_or_none(condition))

    if isinstance(node, FieldNode):
        name = node.name.value
        field = field_definition(schema, cursor.composite_type, name)
        if field is None:
            logger.debug(f"Field '{name}' not found on {cursor.composite_type}")
            return replace(
                cursor,
                composite_type=None,
                parent_type=None,
                field_name=None,
                field_def=None,
                directive=None,
                named_type=None,
                **_VALUE_RESET,
            )
        return replace(
            cursor,
            composite_type=_composite_or_none(field.type),
            parent_type=cursor.composite_type,
            field_name=name,
            field_def=field,
            directive=None,
            named_type=None,
            **_VALUE_RESET,
        )

    if isinstance(node, DirectiveNode):
        directive = schema.get_directive(node.name.value)
        if directive is None:
            logger.debug(f"Directive '@{node.name.value}' not found")
        return replace(cursor, directive=directive, **_VALUE_RESET)

    if isinstance(node, ArgumentNode):
        name = node.name.value
        if isinstance(parent, DirectiveNode):
            arguments = cursor.directive.args if cursor.directive else {}
        else:
            arguments = cursor.field_def.args if cursor.field_def else {}
        argument = arguments.get(name)
        return replace(
            cursor,
            **{
                **_VALUE_RESET,
                "argument_name": name,
                "argument": argument,
                "input_type": argument.type if argument else None,
            },
        )

    if isinstance(node, VariableDefinitionNode):
        return replace(
            cursor,
            **{
                **_VALUE_RESET,
                "variable_name": node.variable.name.value,
                "variable_type": node.type,
                "input_type": type_from_ast(schema, node.type),
            },
        )

    if isinstance(node, VariableNode):
        name = node.name.value
        if isinstance(parent, VariableDefinitionNode):
            declared = parent.type
        else:
            declared = _declared_variable_type(cursor.operation, name)
        return replace(cursor, variable_name=name, variable_type=declared)

    if isinstance(node, ListValueNode):
        list_type = get_nullable_type(cursor.input_type) if cursor.input_type else None
        item_type = list_type.of_type if is_list_type(list_type) else list_type
        return replace(cursor, input_type=item_type)

    if isinstance(node, ObjectFieldNode):
        name = node.name.value
        object_type = get_named_type(cursor.input_type) if cursor.input_type else None
        input_field = object_type.fields.get(name) if is_input_object_type(object_type) else None
        return replace(
            cursor,
            input_object=object_type if input_field else None,
            input_field_name=name,
            input_field=input_field,
            input_type=input_field.type if input_field else None,
        )

    if isinstance(node, EnumValueNode):
        enum_type = get_named_type(cursor.input_type) if cursor.input_type else None
        if not is_enum_type(enum_type):
            return replace(cursor, enum_type=None, enum_value_name=None, enum_value=None)
        return replace(
            cursor,
            enum_type=enum_type,
            enum_value_name=node.value,
            enum_value=enum_type.values.get(node.value),
        )

    if isinstance(node, NamedTypeNode):
        return replace(cursor, named_type=schema.get_type(node.name.value))

    return cursor


def select_entity(node: Node, cursor: TypeCursor, parent: Optional[Node]) -> HoverEntity:
    """
    Pick the semantic entity for ``node`` given the cursor at that node.

    Node kinds map to entities in the order enum value, argument, input
    field, directive, field, named type, variable type. Nodes without a
    meaning of their own (names, selection sets, punctuation, scalar
    literals) yield None.
    """
    if isinstance(node, EnumValueNode):
        if cursor.enum_value is not None:
            return EnumValueInfo(cursor.enum_type, cursor.enum_value_name, cursor.enum_value)
        return None

    if isinstance(node, ArgumentNode):
        if cursor.argument is None:
            return None
        if isinstance(parent, DirectiveNode):
            if cursor.directive is None:
                return None
            owner = f"@{cursor.directive.name}"
        else:
            owner = f"{cursor.parent_type.name}.{cursor.field_name}"
        return ArgumentInfo(owner, cursor.argument_name, cursor.argument)

    if isinstance(node, ObjectFieldNode):
        if cursor.input_field is not None:
            return InputFieldInfo(cursor.input_object, cursor.input_field_name, cursor.input_field)
        return None

    if isinstance(node, DirectiveNode):
        return DirectiveInfo(cursor.directive) if cursor.directive else None

    if isinstance(node, FieldNode):
        if cursor.field_def is not None:
            return FieldInfo(cursor.parent_type, cursor.field_name, cursor.field_def)
        return None

    if isinstance(node, NamedTypeNode):
        return TypeInfo(cursor.named_type) if cursor.named_type else None

    if isinstance(node, (VariableNode, VariableDefinitionNode)):
        if cursor.variable_type is not None:
            return VariableTypeInfo(cursor.variable_name, cursor.variable_type)
        return None

    return None


def annotate(schema: GraphQLSchema, chain: Sequence[Node]) -> Sequence[TypeCursor]:
    """Cursor for every node in the chain, root first."""
    cursors = []
    cursor = TypeCursor()
    parent: Optional[Node] = None
    for node in chain:
        cursor = enter(schema, cursor, node, parent)
        cursors.append(cursor)
        parent = node
    return cursors


def resolve_entity(schema: GraphQLSchema, chain: Sequence[Node]) -> HoverEntity:
    """
    Resolve the hover entity for the leaf of ``chain``.

    Walks back from the leaf until a node yields an entity, so unresolvable
    names degrade to the closest meaningful ancestor.
    """
    cursors = annotate(schema, chain)
    for index in range(len(chain) - 1, -1, -1):
        parent = chain[index - 1] if index > 0 else None
        entity = select_entity(chain[index], cursors[index], parent)
        if entity is not None:
            if index != len(chain) - 1:
                logger.debug(f"Hover degraded from {chain[-1].kind} to {chain[index].kind}")
            return entity
    return None
