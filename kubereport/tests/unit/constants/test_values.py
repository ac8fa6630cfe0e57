"""Unit tests for sentinel strings and formatting tokens in constants/values.py."""

from __future__ import annotations

import re
from datetime import datetime

import pytest

from kubereport.constants import values
from kubereport.constants.values import (
    EVENTS_UNAVAILABLE,
    LOGS_UNAVAILABLE,
    NO_EVENTS,
    NO_LABELS,
    NO_PVCS,
    NO_TAINTS,
    NODE_DETAIL_UNAVAILABLE,
    PVCS_UNAVAILABLE,
    REPORT_TIMESTAMP_FORMAT,
    UNKNOWN,
)

# =============================================================================
# Sentinels
# =============================================================================

SENTINELS = [
    name
    for name in values.__all__
    if name.startswith(("NO_", "NOT_")) or name.endswith("_UNAVAILABLE") or name == "UNKNOWN"
]


class TestSentinels:
    """Sentinels replace absent or unfetchable data and must be non-empty."""

    @pytest.mark.parametrize("name", SENTINELS)
    def test_sentinel_is_non_empty_string(self, name: str) -> None:
        value = getattr(values, name)
        assert isinstance(value, str)
        assert value.strip()

    def test_sentinels_are_distinct(self) -> None:
        sentinel_values = [getattr(values, name) for name in SENTINELS]
        assert len(sentinel_values) == len(set(sentinel_values))

    def test_absent_data_sentinels(self) -> None:
        assert NO_LABELS == "No labels"
        assert NO_TAINTS == "No taints"
        assert NO_EVENTS == "No events"
        assert NO_PVCS == "No PVCs associated with this pod"
        assert UNKNOWN == "Unknown"

    def test_fetch_failure_sentinels_differ_from_absent_data(self) -> None:
        for failure in (EVENTS_UNAVAILABLE, LOGS_UNAVAILABLE, PVCS_UNAVAILABLE, NODE_DETAIL_UNAVAILABLE):
            assert failure.startswith("Unable to fetch")


# =============================================================================
# Formatting tokens
# =============================================================================


class TestFormattingTokens:
    """Test formatting tokens."""

    def test_report_timestamp_format(self) -> None:
        stamp = datetime(2006, 1, 2, 15, 4, 5).strftime(REPORT_TIMESTAMP_FORMAT)
        assert stamp == "01-02-2006_15-04-05"

    def test_report_timestamp_is_filename_safe(self) -> None:
        stamp = datetime(2026, 12, 31, 23, 59, 59).strftime(REPORT_TIMESTAMP_FORMAT)
        assert re.fullmatch(r"[0-9_-]+", stamp)

    def test_all_exports_exist(self) -> None:
        for name in values.__all__:
            assert hasattr(values, name)
