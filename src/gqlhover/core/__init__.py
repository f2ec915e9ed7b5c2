"""
gqlhover Core Module.

Loading helpers and shared error types:
    - load_schema / schema_from_source: build a validated GraphQLSchema
    - read_document / parse_document: query text and its syntax tree
    - Ok / Err: explicit results returned by the loaders
"""

from .exceptions import ConfigError, DocumentLoadError, GqlHoverError, SchemaLoadError
from .result import Err, Ok, Result
from .schema import load_schema, parse_document, read_document, schema_from_source

__all__ = [
    "ConfigError",
    "DocumentLoadError",
    "Err",
    "GqlHoverError",
    "Ok",
    "Result",
    "SchemaLoadError",
    "load_schema",
    "parse_document",
    "read_document",
    "schema_from_source",
]
