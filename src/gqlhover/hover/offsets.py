"""
Offset conversion between editor positions and source offsets.
"""

from typing import NamedTuple


class Position(NamedTuple):
    """Zero-based cursor position. Any object with ``line``/``character`` works."""

    line: int
    character: int


def offset_at(text: str, position) -> int:
    """
    Map a (line, character) position to a linear character offset.

    Lines are split on ``"\\n"``. A character past the end of its line clamps
    to the line end and a line past the last one clamps to the end of the
    text, so this never raises.
    """
    lines = text.split("\n")
    line = max(position.line, 0)
    if line >= len(lines):
        return len(text)

    preceding = sum(len(prior) + 1 for prior in lines[:line])
    character = min(max(position.character, 0), len(lines[line]))
    return preceding + character
