"""
Hover Resolution.

Single entry point tying the pipeline together:
parse -> offset -> ancestor chain -> semantic entity -> formatted text.
"""

import logging
from typing import Optional

from graphql import GraphQLSchema

from ..config import HoverConfig
from ..core.schema import parse_document
from .annotate import resolve_entity
from .entities import HoverEntity
from .locate import ancestor_chain
from .offsets import offset_at
from .render import format_hover

logger = logging.getLogger(__name__)


def resolve_hover_entity(schema: GraphQLSchema, document_text: str, position) -> HoverEntity:
    """
    Resolve the semantic entity under the cursor without formatting it.

    Returns None when the document does not parse or nothing under the
    cursor resolves against the schema.
    """
    parsed = parse_document(document_text)
    if parsed.is_err():
        logger.debug(f"Document does not parse, no hover: {parsed.error.message}")
        return None

    offset = offset_at(document_text, position)
    chain = ancestor_chain(parsed.unwrap(), offset)
    return resolve_entity(schema, chain)


def get_hover_information(
    schema: GraphQLSchema,
    document_text: str,
    position,
    config: Optional[HoverConfig] = None,
) -> str:
    """
    Compute hover text for a position in a query document.

    Args:
        schema: Validated schema the document is written against.
        document_text: Full text of one query/mutation/subscription document.
        position: Zero-based cursor, any object with ``line`` and ``character``.
        config: Formatting options. Defaults to plain text.

    Returns:
        str: Hover content, or ``""`` when there is nothing to show. This
        function does not raise.
    """
    if config is None:
        config = HoverConfig()
    if len(document_text) > config.max_document_chars:
        logger.debug(f"Document exceeds {config.max_document_chars} chars, no hover")
        return ""

    try:
        entity = resolve_hover_entity(schema, document_text, position)
        return format_hover(entity, use_markdown=config.use_markdown)
    except Exception as e:
        logger.error(f"Hover resolution failed: {e}", exc_info=True)
        return ""
