"""
LSP Server implementation for gqlhover.

This server acts as the bridge between the IDE and the hover core.
It uses pygls to handle the Language Server Protocol, including document
synchronization.
"""

import logging
from pathlib import Path
from typing import Optional

from lsprotocol.types import (
    INITIALIZE,
    TEXT_DOCUMENT_HOVER,
    Hover,
    HoverParams,
    InitializeParams,
)
from pygls.lsp.server import LanguageServer

from gqlhover import __version__
from gqlhover.config import HoverConfig, apply_log_level, load_config
from gqlhover.core.exceptions import ConfigError

from .hover import resolve_hover
from .manager import SchemaManager
from .utils import uri_to_path

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
logger = logging.getLogger("gqlhover-lsp")

server = LanguageServer("gqlhover-lsp", f"v{__version__}")

# Global state
schema_manager: Optional[SchemaManager] = None
config: HoverConfig = HoverConfig()


def _schema_path(root: Optional[Path], options, settings: HoverConfig) -> Optional[Path]:
    """Schema from initializationOptions first, then the config file."""
    candidate = None
    if isinstance(options, dict) and options.get("schema"):
        candidate = Path(options["schema"])
    elif settings.schema_path:
        candidate = Path(settings.schema_path)

    if candidate is None:
        return None
    if not candidate.is_absolute() and root is not None:
        candidate = root / candidate
    return candidate


@server.feature(INITIALIZE)
def initialize(ls: LanguageServer, params: InitializeParams):
    """
    Handle the initialization request from the client.
    Reads .gqlhover.yaml from the workspace root and loads the schema.
    """
    global schema_manager, config

    root_uri = params.root_uri or params.root_path
    root = None
    if root_uri:
        root = uri_to_path(root_uri) if "://" in root_uri else Path(root_uri).resolve()

    try:
        config = load_config(root)
    except ConfigError as e:
        logger.warning(f"{e}. Using default settings.")
        config = HoverConfig()
    apply_log_level(config)

    options = params.initialization_options
    if isinstance(options, dict) and "markdown" in options:
        config = config.model_copy(update={"use_markdown": bool(options["markdown"])})

    schema_path = _schema_path(root, options, config)
    if schema_path is None:
        logger.warning("No schema configured. Hover is disabled.")
    else:
        logger.info(f"Initializing gqlhover LSP with schema: {schema_path}")

    schema_manager = SchemaManager(schema_path)
    schema_manager.get_schema()


@server.feature(TEXT_DOCUMENT_HOVER)
def hover(ls: LanguageServer, params: HoverParams) -> Optional[Hover]:
    """Handle hover events."""
    if not schema_manager:
        return None

    document = ls.workspace.get_text_document(params.text_document.uri)
    # Clients count columns in UTF-16 code units, the core counts code points
    position = document.position_codec.position_from_client_units(document.lines, params.position)
    return resolve_hover(document.source, position, schema_manager.get_schema(), config)


def main():
    """Entry point for the LSP server."""
    server.start_io()


if __name__ == "__main__":
    main()
