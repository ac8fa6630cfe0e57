"""Tests for FetchResult."""

from __future__ import annotations

from kubereport.constants.enums import FetchState
from kubereport.controllers.base import FetchResult
from kubereport.report.errors import FetchError


class TestFetchResult:
    """Tests for FetchResult dataclass."""

    def test_success(self) -> None:
        result = FetchResult(data=[1, 2], duration_ms=3.5)
        assert result.ok
        assert result.state is FetchState.SUCCESS
        assert result.error is None

    def test_error_keeps_data(self) -> None:
        error = FetchError("node", "HTTP 500 Internal Server Error")
        result = FetchResult(data=[], error=error)
        assert not result.ok
        assert result.state is FetchState.ERROR
        assert result.data == []
        assert result.error is error
