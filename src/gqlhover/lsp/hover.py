"""
Hover Logic.

Bridges textDocument/hover requests to the hover core.
"""

from typing import Optional

from graphql import GraphQLSchema
from lsprotocol.types import Hover, Position

from gqlhover.config import HoverConfig
from gqlhover.hover.service import get_hover_information

from .utils import to_hover


def resolve_hover(
    source: str,
    position: Position,
    schema: Optional[GraphQLSchema],
    config: HoverConfig,
) -> Optional[Hover]:
    """
    Handle a textDocument/hover request.

    Args:
        source: Current text of the document.
        position: Cursor position (line, character).
        schema: Schema for the workspace, or None if none is configured.
        config: Formatting options.

    Returns:
        Hover | None: Hover content if anything resolves at the position.
    """
    if schema is None:
        return None

    content = get_hover_information(schema, source, position, config)
    if not content:
        return None

    return to_hover(content, config.use_markdown)
