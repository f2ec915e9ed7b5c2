"""
Global Configuration and Defaults.

Module-level defaults plus the ``HoverConfig`` model read from
``.gqlhover.yaml``. The hover core only consults ``use_markdown``; the
remaining keys configure the CLI and the language server.
"""

import logging
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .core.exceptions import ConfigError

logger = logging.getLogger(__name__)

# --- Defaults ---
CONFIG_FILE_NAME = ".gqlhover.yaml"

# Documents larger than this are not parsed for hover (generated payloads)
MAX_DOCUMENT_CHARS = 1_000_000

DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Loggers that follow the configured level
LOGGER_NAMES = ("gqlhover", "gqlhover-lsp")

MARKDOWN_FENCE = "```"


class HoverConfig(BaseModel):
    """
    Settings shared by the CLI and the language server.

    Attributes:
        schema_path: SDL or introspection JSON file to resolve hovers against.
        use_markdown: Fence the signature line in a ```graphql block.
        max_document_chars: Larger documents produce no hover.
        log_level: Level name for the ``gqlhover`` loggers.
    """

    schema_path: Optional[str] = None
    use_markdown: bool = False
    max_document_chars: int = MAX_DOCUMENT_CHARS
    log_level: str = DEFAULT_LOG_LEVEL

    model_config = ConfigDict(frozen=True, extra="ignore")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level


def apply_log_level(config: HoverConfig) -> None:
    """Set the ``gqlhover`` and ``gqlhover-lsp`` loggers to the configured level."""
    for name in LOGGER_NAMES:
        logging.getLogger(name).setLevel(config.log_level)


def load_config(path: Union[str, Path, None] = None) -> HoverConfig:
    """
    Load configuration from YAML, falling back to defaults.

    Args:
        path: Config file, or a directory containing ``.gqlhover.yaml``.
            Defaults to the current directory.

    Returns:
        HoverConfig: Parsed settings. A missing file yields the defaults.

    Raises:
        ConfigError: If the file is not valid YAML or has invalid values.
    """
    config_path = Path(path) if path is not None else Path.cwd()
    if config_path.is_dir():
        config_path = config_path / CONFIG_FILE_NAME

    if not config_path.exists():
        logger.debug(f"No config at {config_path}, using defaults")
        return HoverConfig()

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(str(config_path), str(e)) from e

    if not isinstance(data, dict):
        raise ConfigError(str(config_path), "top-level value must be a mapping")

    try:
        config = HoverConfig(**data)
    except ValidationError as e:
        raise ConfigError(str(config_path), str(e)) from e

    # Relative schema paths are relative to the config file
    if config.schema_path and not Path(config.schema_path).is_absolute():
        resolved = (config_path.parent / config.schema_path).resolve()
        config = config.model_copy(update={"schema_path": str(resolved)})

    return config
