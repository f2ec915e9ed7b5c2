"""
Unit tests for the language server hover path.
"""

import logging
import os
from unittest.mock import MagicMock

import pytest
from lsprotocol.types import (
    ClientCapabilities,
    HoverParams,
    InitializeParams,
    MarkupKind,
    Position,
    TextDocumentIdentifier,
)

from pygls.workspace import TextDocument

from gqlhover.config import HoverConfig
from gqlhover.lsp import server as server_module
from gqlhover.lsp.hover import resolve_hover
from gqlhover.lsp.manager import SchemaManager
from gqlhover.lsp.utils import uri_to_path

QUERY = "query { thing { testField } }"
DOCUMENT_URI = "file:///tmp/query.graphql"


class TestResolveHover:
    def test_plain_text_hover(self, schema):
        hover = resolve_hover(QUERY, Position(line=0, character=20), schema, HoverConfig())

        assert hover is not None
        assert hover.contents.kind == MarkupKind.PlainText
        assert hover.contents.value.startswith("TestType.testField: String")

    def test_markdown_hover(self, schema):
        config = HoverConfig(use_markdown=True)
        hover = resolve_hover(QUERY, Position(line=0, character=10), schema, config)

        assert hover.contents.kind == MarkupKind.Markdown
        assert hover.contents.value.startswith("```graphql")

    def test_no_schema(self):
        assert resolve_hover(QUERY, Position(line=0, character=20), None, HoverConfig()) is None

    def test_nothing_under_cursor(self, schema):
        assert resolve_hover(QUERY, Position(line=0, character=1), schema, HoverConfig()) is None


class TestSchemaManager:
    def test_loads_schema(self, schema_path):
        manager = SchemaManager(schema_path)
        schema = manager.get_schema()
        assert schema is not None
        assert manager.get_schema() is schema

    def test_no_schema_path(self):
        assert SchemaManager(None).get_schema() is None

    def test_reloads_when_file_changes(self, tmp_path):
        path = tmp_path / "schema.graphql"
        path.write_text("type Query { a: String }")
        manager = SchemaManager(path)
        first = manager.get_schema()

        path.write_text("type Query { b: Int }")
        stat = path.stat()
        os.utime(path, (stat.st_atime, stat.st_mtime + 10))

        second = manager.get_schema()
        assert second is not first
        assert "b" in second.query_type.fields

    def test_keeps_last_good_schema(self, tmp_path):
        path = tmp_path / "schema.graphql"
        path.write_text("type Query { a: String }")
        manager = SchemaManager(path)
        first = manager.get_schema()

        path.write_text("type Query {")
        stat = path.stat()
        os.utime(path, (stat.st_atime, stat.st_mtime + 10))

        assert manager.get_schema() is first

    def test_missing_file(self, tmp_path):
        assert SchemaManager(tmp_path / "nope.graphql").get_schema() is None


class TestServerHandlers:
    @pytest.fixture(autouse=True)
    def isolated_state(self, monkeypatch):
        monkeypatch.setattr(server_module, "schema_manager", None)
        monkeypatch.setattr(server_module, "config", HoverConfig())

    def _hover_params(self, line: int, character: int) -> HoverParams:
        return HoverParams(
            text_document=TextDocumentIdentifier(uri=DOCUMENT_URI),
            position=Position(line=line, character=character),
        )

    def _client_with(self, source: str) -> MagicMock:
        ls = MagicMock()
        ls.workspace.get_text_document.return_value = TextDocument(DOCUMENT_URI, source=source)
        return ls

    def _initialize(self, root, options=None) -> None:
        params = InitializeParams(
            capabilities=ClientCapabilities(),
            process_id=None,
            root_uri=root.as_uri(),
            initialization_options=options,
        )
        server_module.initialize(MagicMock(), params)

    def test_hover_before_initialize(self):
        assert server_module.hover(MagicMock(), self._hover_params(0, 20)) is None

    def test_initialize_then_hover(self, tmp_path, schema_path):
        (tmp_path / "schema.graphql").write_text(schema_path.read_text())
        params = InitializeParams(
            capabilities=ClientCapabilities(),
            process_id=None,
            root_uri=tmp_path.as_uri(),
            initialization_options={"schema": "schema.graphql"},
        )
        server_module.initialize(MagicMock(), params)

        ls = self._client_with(QUERY)
        hover = server_module.hover(ls, self._hover_params(0, 10))

        assert hover.contents.value == (
            "Query.thing: TestType\n\nThis is field documentation for Query.thing"
        )
        ls.workspace.get_text_document.assert_called_once_with(DOCUMENT_URI)

    def test_initialize_reads_config_file(self, tmp_path, schema_path):
        (tmp_path / ".gqlhover.yaml").write_text(
            f"schema_path: {schema_path}\nuse_markdown: true\n"
        )
        params = InitializeParams(
            capabilities=ClientCapabilities(), process_id=None, root_uri=tmp_path.as_uri()
        )
        server_module.initialize(MagicMock(), params)

        assert server_module.config.use_markdown is True
        assert server_module.schema_manager.get_schema() is not None

    def test_initialize_without_schema(self, tmp_path):
        params = InitializeParams(
            capabilities=ClientCapabilities(), process_id=None, root_uri=tmp_path.as_uri()
        )
        server_module.initialize(MagicMock(), params)

        ls = self._client_with(QUERY)
        assert server_module.hover(ls, self._hover_params(0, 10)) is None

    def test_hover_columns_are_utf16(self, tmp_path, schema_path):
        # Each emoji is one character but two UTF-16 code units
        source = 'query($a: String = "' + "\U0001F600" * 6 + '") { cluck thing { testField } }'
        self._initialize(tmp_path, {"schema": str(schema_path)})

        character = source.index("cluck") + 6 + 1
        hover = server_module.hover(self._client_with(source), self._hover_params(0, character))

        assert hover.contents.value == "Query.cluck: Chicken"

    def test_hover_after_surrogate_pair_on_other_line(self, tmp_path, schema_path):
        source = '# \U0001F600\nquery { thing { testField } }'
        self._initialize(tmp_path, {"schema": str(schema_path)})

        hover = server_module.hover(self._client_with(source), self._hover_params(1, 10))

        assert hover.contents.value.startswith("Query.thing: TestType")

    @pytest.mark.usefixtures("restore_log_levels")
    def test_initialize_applies_log_level(self, tmp_path):
        (tmp_path / ".gqlhover.yaml").write_text("log_level: DEBUG\n")
        self._initialize(tmp_path)

        assert server_module.config.log_level == "DEBUG"
        assert logging.getLogger("gqlhover-lsp").level == logging.DEBUG
        assert logging.getLogger("gqlhover").level == logging.DEBUG


class TestUtils:
    def test_uri_to_path_decodes(self, tmp_path):
        target = tmp_path / "my app.graphql"
        assert uri_to_path(target.as_uri()) == target.resolve()
