"""Field formatter - turns resource records into display fields.

All functions are pure. A display field is either one string or an ordered
list of strings and is never empty: absent data yields a sentinel.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from kubereport.constants.values import (
    EVENT_REASON_SEPARATOR,
    FIELD_SEPARATOR,
    INTERNAL_IP_ADDRESS_TYPE,
    KEY_VALUE_SEPARATOR,
    LOG_LINE_SEPARATOR,
    NO_ADDRESSES,
    NO_CONTAINERS,
    NO_EVENTS,
    NO_LABELS,
    NO_LOGS,
    NO_PVCS,
    NO_TAINTS,
    UNKNOWN,
)
from kubereport.models.core.resources import (
    Event,
    LogLine,
    NodeAddress,
    PersistentVolumeClaim,
    Taint,
)

DisplayField = str | list[str]


def _join_pairs(pairs: Iterable[tuple[str, str]]) -> str:
    return FIELD_SEPARATOR.join(f"{key}{KEY_VALUE_SEPARATOR}{value}" for key, value in pairs)


def format_labels(labels: Mapping[str, str]) -> str:
    """Join labels as ``key:value`` pairs.

    Pairs follow the mapping's iteration order, which for decoded records is
    the order of the API payload. Not sorted.
    """
    if not labels:
        return NO_LABELS
    return _join_pairs(labels.items())


def format_taints(taints: Sequence[Taint]) -> str:
    if not taints:
        return NO_TAINTS
    return _join_pairs((taint.key, taint.value) for taint in taints)


def format_internal_addresses(addresses: Sequence[NodeAddress]) -> str:
    """Join the InternalIP addresses.

    An empty list yields the "No addresses" sentinel; a list without any
    InternalIP entry yields an empty string.
    """
    if not addresses:
        return NO_ADDRESSES
    return FIELD_SEPARATOR.join(
        address.address
        for address in addresses
        if address.type == INTERNAL_IP_ADDRESS_TYPE
    )


def format_events(events: Sequence[Event]) -> list[str]:
    if not events:
        return [NO_EVENTS]
    return [f"{event.message}{EVENT_REASON_SEPARATOR}{event.reason}" for event in events]


def format_simple_pvc_names(claims: Sequence[PersistentVolumeClaim]) -> str:
    if not claims:
        return NO_PVCS
    return FIELD_SEPARATOR.join(claim.name for claim in claims)


def filter_events_by_sub_object(events: Sequence[Event], kind: str, name: str) -> list[Event]:
    """Return events about one object, in source order. May be empty."""
    return [
        event
        for event in events
        if event.sub_object_kind == kind and event.sub_object_name == name
    ]


def format_containers(images: Sequence[str]) -> list[str]:
    if not images:
        return [NO_CONTAINERS]
    return list(images)


def format_log_lines(logs: Sequence[LogLine]) -> list[str]:
    if not logs:
        return [NO_LOGS]
    return [f"{line.timestamp}{LOG_LINE_SEPARATOR}{line.content}" for line in logs]


def format_bool(value: bool | None) -> str:
    """Render a tri-state flag: ``true``, ``false`` or ``unknown``."""
    if value is None:
        return UNKNOWN.lower()
    return "true" if value else "false"


def format_capacity(capacity: Mapping[str, str], resource: str = "storage") -> str:
    return capacity.get(resource) or UNKNOWN
