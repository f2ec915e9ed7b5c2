"""
gqlhover - Hover information for GraphQL query documents.

Given a schema, the text of a query document and a cursor position, gqlhover
finds the field, argument, directive, enum value, type or variable under the
cursor and renders its signature and documentation.

Key Components:
- core: schema/document loading and error types
- hover: position resolution, type annotation and formatting
- cli: the ``gqlhover`` command
- lsp: a pygls language server exposing textDocument/hover

Usage:
    from graphql import build_schema
    from gqlhover import Position, get_hover_information

    schema = build_schema(sdl)
    text = get_hover_information(schema, "query { thing }", Position(0, 9))
"""

__version__ = "0.1.0"

from .config import HoverConfig, load_config
from .hover import Position, get_hover_information, resolve_hover_entity

__all__ = [
    "__version__",
    "HoverConfig",
    "Position",
    "get_hover_information",
    "load_config",
    "resolve_hover_entity",
]
