"""Tests for field formatter."""

from __future__ import annotations

import pytest

from kubereport.constants.values import (
    NO_ADDRESSES,
    NO_CONTAINERS,
    NO_EVENTS,
    NO_LABELS,
    NO_LOGS,
    NO_PVCS,
    NO_TAINTS,
    UNKNOWN,
)
from kubereport.controllers.cluster.parsers.field_formatter import (
    filter_events_by_sub_object,
    format_bool,
    format_capacity,
    format_containers,
    format_events,
    format_internal_addresses,
    format_labels,
    format_log_lines,
    format_simple_pvc_names,
    format_taints,
)
from kubereport.models.core.resources import (
    Event,
    LogLine,
    NodeAddress,
    PersistentVolumeClaim,
    Taint,
)


def _event(message: str, reason: str, kind: str = "", name: str = "") -> Event:
    return Event(message=message, reason=reason, sub_object_kind=kind, sub_object_name=name)


class TestFormatLabels:
    """Tests for format_labels."""

    def test_empty(self) -> None:
        assert format_labels({}) == NO_LABELS

    def test_single(self) -> None:
        assert format_labels({"app": "web"}) == "app:web"

    def test_keeps_source_order(self) -> None:
        assert format_labels({"tier": "front", "app": "web"}) == "tier:front, app:web"

    def test_each_pair_once_without_trailing_separator(self) -> None:
        labels = {
            "app.kubernetes.io/name": "frontend",
            "app.kubernetes.io/instance": "shop-prod",
            "pod-template-hash": "7d9f8c6b5",
        }

        text = format_labels(labels)
        pairs = text.split(", ")

        assert set(pairs) == {f"{key}:{value}" for key, value in labels.items()}
        assert len(pairs) == len(labels)
        assert not text.endswith(",")
        assert not text.endswith(" ")

    def test_repeated_calls_are_stable(self) -> None:
        labels = {"tier": "front", "app": "web"}
        assert format_labels(labels) == format_labels(labels)
        assert labels == {"tier": "front", "app": "web"}


class TestFormatTaints:
    """Tests for format_taints."""

    def test_empty(self) -> None:
        assert format_taints([]) == NO_TAINTS

    def test_effect_is_not_rendered(self) -> None:
        taints = [
            Taint(key="dedicated", value="web", effect="NoSchedule"),
            Taint(key="gpu", value="true", effect="NoExecute"),
        ]
        assert format_taints(taints) == "dedicated:web, gpu:true"

    def test_repeated_calls_are_stable(self) -> None:
        taints = [Taint(key="dedicated", value="web"), Taint(key="gpu", value="true")]
        first = format_taints(taints)
        assert format_taints(taints) == first == "dedicated:web, gpu:true"


class TestFormatInternalAddresses:
    """Tests for format_internal_addresses."""

    def test_empty(self) -> None:
        assert format_internal_addresses([]) == NO_ADDRESSES

    def test_only_internal_ips(self) -> None:
        addresses = [
            NodeAddress(type="Hostname", address="node-a"),
            NodeAddress(type="InternalIP", address="10.0.0.5"),
            NodeAddress(type="ExternalIP", address="203.0.113.9"),
            NodeAddress(type="InternalIP", address="fd00::5"),
        ]
        assert format_internal_addresses(addresses) == "10.0.0.5, fd00::5"

    def test_no_internal_ip_yields_empty_string(self) -> None:
        assert format_internal_addresses([NodeAddress(type="Hostname", address="node-a")]) == ""


class TestFormatEvents:
    """Tests for format_events."""

    def test_empty(self) -> None:
        assert format_events([]) == [NO_EVENTS]

    def test_message_and_reason(self) -> None:
        events = [_event("Pulled image", "Pulled"), _event("Started", "Started")]
        assert format_events(events) == [
            "Pulled image, Reason: Pulled",
            "Started, Reason: Started",
        ]

    def test_repeated_calls_are_stable(self) -> None:
        events = [_event("Pulled image", "Pulled")]
        assert format_events(events) == format_events(events) == ["Pulled image, Reason: Pulled"]


class TestFormatSimplePvcNames:
    """Tests for format_simple_pvc_names."""

    def test_empty(self) -> None:
        assert format_simple_pvc_names([]) == NO_PVCS

    def test_names(self) -> None:
        claims = [
            PersistentVolumeClaim.model_validate({"objectMeta": {"name": "data-1"}}),
            PersistentVolumeClaim.model_validate({"objectMeta": {"name": "data-2"}}),
        ]
        assert format_simple_pvc_names(claims) == "data-1, data-2"


class TestFilterEventsBySubObject:
    """Tests for filter_events_by_sub_object."""

    @pytest.fixture
    def events(self) -> list[Event]:
        return [
            _event("a", "A", "PersistentVolumeClaim", "data-1"),
            _event("b", "B", "Pod", "data-1"),
            _event("c", "C", "PersistentVolumeClaim", "data-2"),
            _event("d", "D", "PersistentVolumeClaim", "data-1"),
        ]

    def test_matches_kind_and_name_in_order(self, events: list[Event]) -> None:
        matched = filter_events_by_sub_object(events, "PersistentVolumeClaim", "data-1")
        assert [event.message for event in matched] == ["a", "d"]

    def test_no_match_is_empty(self, events: list[Event]) -> None:
        assert filter_events_by_sub_object(events, "PersistentVolumeClaim", "data-9") == []

    def test_filtered_empty_formats_to_sentinel(self, events: list[Event]) -> None:
        matched = filter_events_by_sub_object(events, "Node", "data-1")
        assert format_events(matched) == [NO_EVENTS]


class TestFormatContainersAndLogs:
    """Tests for format_containers and format_log_lines."""

    def test_containers_empty(self) -> None:
        assert format_containers([]) == [NO_CONTAINERS]

    def test_containers(self) -> None:
        assert format_containers(["nginx:1.25", "envoy:1.30"]) == ["nginx:1.25", "envoy:1.30"]

    def test_logs_empty(self) -> None:
        assert format_log_lines([]) == [NO_LOGS]

    def test_log_lines(self) -> None:
        logs = [LogLine(timestamp="2026-01-02T03:00:00Z", content="server started")]
        assert format_log_lines(logs) == ["2026-01-02T03:00:00Z | server started"]


class TestScalarFormatters:
    """Tests for format_bool and format_capacity."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(True, "true"), (False, "false"), (None, "unknown")],
    )
    def test_format_bool(self, value: bool | None, expected: str) -> None:
        assert format_bool(value) == expected

    def test_capacity(self) -> None:
        assert format_capacity({"storage": "10Gi"}) == "10Gi"

    def test_capacity_missing(self) -> None:
        assert format_capacity({}) == UNKNOWN
