"""Unit tests for the Ok/Err result type."""

import pytest

from gqlhover.core.exceptions import SchemaLoadError
from gqlhover.core.result import Err, Ok


class TestResult:
    def test_ok(self):
        result = Ok(3)
        assert result.is_ok() and not result.is_err()
        assert result.unwrap() == 3

    def test_err_unwrap_raises_with_error(self):
        result = Err(SchemaLoadError("schema.graphql", "file not found"))
        assert result.is_err() and not result.is_ok()
        with pytest.raises(ValueError, match="file not found"):
            result.unwrap()
