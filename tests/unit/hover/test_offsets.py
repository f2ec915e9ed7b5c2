"""Unit tests for position to offset conversion."""

from lsprotocol.types import Position as LspPosition

from gqlhover.hover.offsets import Position, offset_at


class TestOffsetAt:
    def test_single_line(self):
        assert offset_at("query { thing }", Position(0, 8)) == 8

    def test_multi_line_counts_newlines(self):
        text = "ab\ncde\nf"
        assert offset_at(text, Position(1, 1)) == 4
        assert offset_at(text, Position(2, 0)) == 7

    def test_character_clamps_to_line_end(self):
        text = "ab\ncd"
        assert offset_at(text, Position(0, 99)) == 2
        assert offset_at(text, Position(1, 99)) == 5

    def test_line_past_end_clamps_to_document_end(self):
        text = "ab\ncd"
        assert offset_at(text, Position(7, 0)) == len(text)

    def test_negative_values_clamp_to_zero(self):
        assert offset_at("abc", Position(-1, -5)) == 0

    def test_carriage_return_counts_as_a_character(self):
        # Only "\n" splits lines; "\r" stays part of the preceding line
        assert offset_at("ab\r\ncd", Position(1, 1)) == 5

    def test_empty_text(self):
        assert offset_at("", Position(0, 3)) == 0

    def test_accepts_lsp_position(self):
        assert offset_at("ab\ncd", LspPosition(line=1, character=1)) == 4
