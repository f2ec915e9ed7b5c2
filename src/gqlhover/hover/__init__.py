"""
Hover pipeline: offsets, position resolution, annotation and formatting.
"""

from .annotate import TypeCursor, annotate, resolve_entity
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
from .locate import ancestor_chain
from .offsets import Position, offset_at
from .render import format_hover, render_type, render_type_node
from .service import get_hover_information, resolve_hover_entity

__all__ = [
    "ArgumentInfo",
    "DirectiveInfo",
    "EnumValueInfo",
    "FieldInfo",
    "HoverEntity",
    "InputFieldInfo",
    "Position",
    "TypeCursor",
    "TypeInfo",
    "VariableTypeInfo",
    "ancestor_chain",
    "annotate",
    "format_hover",
    "get_hover_information",
    "offset_at",
    "render_type",
    "render_type_node",
    "resolve_entity",
    "resolve_hover_entity",
]
