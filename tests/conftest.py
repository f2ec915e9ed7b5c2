"""Shared fixtures: the hover test schema, a cursor helper and logger cleanup."""

import logging
from pathlib import Path

import pytest
from graphql import build_schema

from gqlhover.config import LOGGER_NAMES
from gqlhover.hover import Position

SCHEMA_PATH = Path(__file__).parent / "schema" / "hover_test_schema.graphql"


@pytest.fixture(scope="session")
def schema_path() -> Path:
    return SCHEMA_PATH


@pytest.fixture(scope="session")
def schema():
    return build_schema(SCHEMA_PATH.read_text(encoding="utf-8"))


def position_of(text: str, token: str, shift: int = 0, occurrence: int = 1) -> Position:
    """Position of the n-th occurrence of ``token`` plus ``shift`` characters."""
    index = -1
    for _ in range(occurrence):
        index = text.index(token, index + 1)
    index += shift
    line = text.count("\n", 0, index)
    character = index - (text.rfind("\n", 0, index) + 1)
    return Position(line, character)


@pytest.fixture
def cursor_at():
    return position_of


@pytest.fixture
def restore_log_levels():
    """Undo logger level changes made by config loading."""
    saved = {name: logging.getLogger(name).level for name in LOGGER_NAMES}
    yield
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)
