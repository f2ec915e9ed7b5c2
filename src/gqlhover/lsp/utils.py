"""
LSP Utilities.

Helper functions for URI handling and hover payloads.
"""

import urllib.parse
from pathlib import Path

from lsprotocol.types import Hover, MarkupContent, MarkupKind


def uri_to_path(uri: str) -> Path:
    """
    Convert an LSP URI to a local file system path.

    Handles decoding (e.g., %20 -> space) and file:// stripping.

    Args:
        uri: The URI string (e.g., 'file:///Users/marcus/code/my%20app.graphql').

    Returns:
        Path: The corresponding absolute Path object.
    """
    parsed = urllib.parse.urlparse(uri)
    path_str = urllib.parse.unquote(parsed.path)
    return Path(path_str).resolve()


def to_hover(content: str, use_markdown: bool) -> Hover:
    """Wrap hover text in the matching markup kind."""
    kind = MarkupKind.Markdown if use_markdown else MarkupKind.PlainText
    return Hover(contents=MarkupContent(kind=kind, value=content))
