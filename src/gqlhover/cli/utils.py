"""
CLI Utilities - Shared helper functions for command line operations.

Formatted printing and the schema/config loading used by several commands.
"""

import sys
from typing import Optional

import click
from graphql import GraphQLSchema

from ..config import HoverConfig, apply_log_level, load_config
from ..core.exceptions import ConfigError
from ..core.schema import load_schema


def echo_error(message: str) -> None:
    """
    Print an error message with a red cross.

    Args:
        message (str): The error message to display.
    """
    click.echo(click.style(f"❌ {message}", fg="red"), err=True)


def echo_warning(message: str) -> None:
    """
    Print a warning message with a yellow alert symbol.

    Args:
        message (str): The warning message to display.
    """
    click.echo(click.style(f"⚠️  {message}", fg="yellow"))


def load_config_or_exit(config_path: Optional[str]) -> HoverConfig:
    """Load settings and apply their log level, exiting with status 1 on an invalid config file."""
    try:
        config = load_config(config_path)
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(1)
    apply_log_level(config)
    return config


def load_schema_or_exit(schema_path: Optional[str]) -> GraphQLSchema:
    """Load a schema, exiting with status 1 if it is missing or invalid."""
    if not schema_path:
        echo_error("No schema given. Pass --schema or set schema_path in .gqlhover.yaml")
        sys.exit(1)

    result = load_schema(schema_path)
    if result.is_err():
        echo_error(str(result.error))
        sys.exit(1)
    return result.unwrap()
