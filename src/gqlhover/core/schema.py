"""
Schema and Document Loading.

Thin wrappers around graphql-core that turn files on disk into a validated
``GraphQLSchema`` or a located ``DocumentNode``. Failures come back as
``Err`` values so the CLI and language server can report them without
catching graphql-core exceptions themselves.
"""

import json
import logging
from pathlib import Path
from typing import Union

from graphql import (
    DocumentNode,
    GraphQLError,
    GraphQLSchema,
    build_client_schema,
    build_schema,
    parse,
    validate_schema,
)

from .exceptions import DocumentLoadError, SchemaLoadError
from .result import Err, Ok, Result

logger = logging.getLogger(__name__)

SDL_SUFFIXES = (".graphql", ".graphqls", ".gql")


def build_schema_from_introspection(data: dict) -> GraphQLSchema:
    """
    Build a schema from an introspection result.

    Accepts either ``{"__schema": ...}`` or the full response envelope
    ``{"data": {"__schema": ...}}``.
    """
    if "data" in data and "__schema" in data["data"]:
        data = data["data"]
    return build_client_schema(data)


def schema_from_source(source: str, path: str = "<string>") -> Result[GraphQLSchema, SchemaLoadError]:
    """
    Build and validate a schema from SDL or introspection JSON text.

    JSON is detected by a leading ``{``; everything else is treated as SDL.
    """
    try:
        if source.lstrip().startswith("{"):
            schema = build_schema_from_introspection(json.loads(source))
        else:
            schema = build_schema(source)
    except (GraphQLError, TypeError, ValueError) as e:
        return Err(SchemaLoadError(path, str(e)))

    errors = validate_schema(schema)
    if errors:
        return Err(SchemaLoadError(path, "; ".join(error.message for error in errors)))

    logger.debug(f"Loaded schema from {path} ({len(schema.type_map)} types)")
    return Ok(schema)


def load_schema(path: Union[str, Path]) -> Result[GraphQLSchema, SchemaLoadError]:
    """
    Load a schema file from disk.

    Args:
        path: ``.graphql``/``.gql`` SDL file or an introspection ``.json`` file.

    Returns:
        Result: ``Ok(GraphQLSchema)`` or ``Err(SchemaLoadError)``.
    """
    schema_path = Path(path)
    if not schema_path.is_file():
        return Err(SchemaLoadError(str(schema_path), "file not found"))

    try:
        source = schema_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        return Err(SchemaLoadError(str(schema_path), str(e)))

    return schema_from_source(source, str(schema_path))


def read_document(path: Union[str, Path]) -> Result[str, DocumentLoadError]:
    """Read a query document as text."""
    doc_path = Path(path)
    try:
        return Ok(doc_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        return Err(DocumentLoadError(str(doc_path), str(e)))


def parse_document(source: str) -> Result[DocumentNode, GraphQLError]:
    """Parse query text into a location-annotated document."""
    try:
        return Ok(parse(source))
    except GraphQLError as e:
        return Err(e)
