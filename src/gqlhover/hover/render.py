"""
Content Formatter.

Turns a ``HoverEntity`` into the text shown in the editor: a signature line,
optionally followed by a blank line and either the description or a
deprecation notice. Never raises; missing optional data just drops the
second section.
"""

from typing import Any, Optional

from graphql import is_list_type, is_non_null_type
from graphql.language import ListTypeNode, NonNullTypeNode, TypeNode

from ..config import MARKDOWN_FENCE
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

SECTION_SEPARATOR = "\n\n"
DEPRECATED_PREFIX = "Deprecated: "


def render_type(type_: Any) -> str:
    """Render a schema type reference: ``[Inner]`` for lists, ``Inner!`` for non-null."""
    if is_non_null_type(type_):
        return f"{render_type(type_.of_type)}!"
    if is_list_type(type_):
        return f"[{render_type(type_.of_type)}]"
    return type_.name


def render_type_node(node: TypeNode) -> str:
    """Render a type reference as written in the document."""
    if isinstance(node, NonNullTypeNode):
        return f"{render_type_node(node.type)}!"
    if isinstance(node, ListTypeNode):
        return f"[{render_type_node(node.type)}]"
    return node.name.value


def documentation(definition: Any) -> Optional[str]:
    """
    The second hover section for a definition.

    A non-empty description wins; otherwise a deprecation notice when the
    definition is deprecated, even with an empty reason.
    """
    description = getattr(definition, "description", None)
    if description:
        return description
    reason = getattr(definition, "deprecation_reason", None)
    if reason is not None:
        return f"{DEPRECATED_PREFIX}{reason}"
    return None


def signature(entity: HoverEntity) -> str:
    """The first hover line for an entity; empty for None."""
    if isinstance(entity, FieldInfo):
        return f"{entity.parent_type.name}.{entity.field_name}: {render_type(entity.field.type)}"
    if isinstance(entity, ArgumentInfo):
        return f"{entity.owner}({entity.argument_name}: {render_type(entity.argument.type)})"
    if isinstance(entity, EnumValueInfo):
        return f"{entity.enum_type.name}.{entity.value_name}"
    if isinstance(entity, InputFieldInfo):
        return f"{entity.input_type.name}.{entity.field_name}: {render_type(entity.field.type)}"
    if isinstance(entity, DirectiveInfo):
        return f"@{entity.directive.name}"
    if isinstance(entity, TypeInfo):
        return entity.type.name
    if isinstance(entity, VariableTypeInfo):
        return render_type_node(entity.type_node)
    return ""


def _documented(entity: HoverEntity) -> Any:
    if isinstance(entity, FieldInfo):
        return entity.field
    if isinstance(entity, ArgumentInfo):
        return entity.argument
    if isinstance(entity, EnumValueInfo):
        return entity.value
    if isinstance(entity, InputFieldInfo):
        return entity.field
    if isinstance(entity, DirectiveInfo):
        return entity.directive
    if isinstance(entity, TypeInfo):
        return entity.type
    # Variable hovers show the declared type only
    return None


def format_hover(entity: HoverEntity, use_markdown: bool = False) -> str:
    """
    Render hover content for an entity.

    Args:
        entity: Result of the annotator, or None.
        use_markdown: Fence the signature in a ```graphql block.

    Returns:
        str: The hover text, or ``""`` when there is nothing to show.
    """
    if entity is None:
        return ""

    text = signature(entity)
    if use_markdown:
        text = f"{MARKDOWN_FENCE}graphql\n{text}\n{MARKDOWN_FENCE}"

    section = documentation(_documented(entity))
    if section is None:
        return text
    return f"{text}{SECTION_SEPARATOR}{section}"
