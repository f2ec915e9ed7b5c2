"""
Schema State Manager.

Keeps the schema used by the language server and reloads it when the file
on disk changes. The hover core itself holds no state between requests.
"""

import logging
from pathlib import Path
from typing import Optional

from graphql import GraphQLSchema

from gqlhover.core.schema import load_schema

logger = logging.getLogger("gqlhover-lsp")


class SchemaManager:
    """
    Owns the schema for one workspace.

    The schema is treated as read-only once built, so every hover request
    can share it without coordination.
    """

    def __init__(self, schema_path: Optional[Path] = None):
        """
        Initialize the manager.

        Args:
            schema_path: SDL or introspection JSON file. None disables hover.
        """
        self.schema_path = schema_path.resolve() if schema_path else None
        self._schema: Optional[GraphQLSchema] = None
        self._mtime: Optional[float] = None

    def get_schema(self) -> Optional[GraphQLSchema]:
        """
        Return the current schema, rebuilding it if the file changed.

        A file that fails to load keeps the last good schema in place.
        """
        if self.schema_path is None:
            return None

        try:
            mtime = self.schema_path.stat().st_mtime
        except OSError:
            logger.error(f"Schema NOT FOUND at {self.schema_path}")
            return self._schema

        if self._schema is not None and mtime == self._mtime:
            return self._schema

        result = load_schema(self.schema_path)
        if result.is_err():
            logger.error(f"Failed to load schema: {result.error}")
            return self._schema

        self._schema = result.unwrap()
        self._mtime = mtime
        logger.info(f"Loaded schema: {len(self._schema.type_map)} types from {self.schema_path}")
        return self._schema
