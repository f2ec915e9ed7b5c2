"""
Exception hierarchy for gqlhover.

Hover resolution itself never raises; these cover the loading edges
(configuration, schema files) that the CLI and language server report.
"""


class GqlHoverError(Exception):
    """Base class for all gqlhover errors."""


class ConfigError(GqlHoverError):
    """Raised when a configuration file cannot be read or validated."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid config {path}: {reason}")


class SchemaLoadError(GqlHoverError):
    """A schema file could not be read or built into a type graph."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load schema {path}: {reason}")


class DocumentLoadError(GqlHoverError):
    """A query document could not be read from disk."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read document {path}: {reason}")
