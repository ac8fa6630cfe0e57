"""Layout registry - semantic field names mapped to page anchors.

Anchors are millimetre positions on an A4 portrait page measured from the
top-left corner. The registry is built once at import time and is read-only.
Field names are prefixed with the page they belong to (``poddetail.labels``
lives on the pod detail template).
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from types import MappingProxyType

from kubereport.constants.enums import TemplateKind


@dataclass(frozen=True)
class Anchor:
    """Text position on a page.

    ``height`` bounds the text box of multi-line fields; None lets the box
    run to the bottom page margin.
    """

    x: float
    y: float
    height: float | None = None


class LayoutError(Exception):
    """Raised when the registry does not cover the fields a page stamps."""


class UnknownAnchorError(LayoutError, KeyError):
    """Raised when resolving a field name that has no anchor."""

    def __str__(self) -> str:
        return f"no anchor registered for field {self.args[0]!r}"


FIELD_PREFIXES: MappingProxyType[str, TemplateKind] = MappingProxyType(
    {
        "title": TemplateKind.TITLE,
        "poddetail": TemplateKind.POD_DETAIL,
        "podlogs": TemplateKind.POD_LOGS,
        "node": TemplateKind.NODE_DETAIL,
        "pvc": TemplateKind.PVC_DETAIL,
    }
)

ANCHORS: MappingProxyType[str, Anchor] = MappingProxyType(
    {
        # Title page
        "title.generated": Anchor(30, 60),
        "title.namespace": Anchor(30, 80),
        # Pod detail
        "poddetail.name": Anchor(60, 33),
        "poddetail.labels": Anchor(30, 50),
        "poddetail.taints": Anchor(30, 70),
        "poddetail.containers": Anchor(30, 90, height=28),
        "poddetail.pvc": Anchor(30, 130),
        "poddetail.nodes": Anchor(30, 150),
        "poddetail.events": Anchor(30, 170),
        # Pod logs
        "podlogs.name": Anchor(60, 33),
        "podlogs.logs": Anchor(30, 50),
        # Persistent volume claim
        "pvc.name": Anchor(60, 33),
        "pvc.state": Anchor(30, 50),
        "pvc.storageclass": Anchor(30, 70),
        "pvc.volume": Anchor(30, 90),
        "pvc.labels": Anchor(30, 110),
        "pvc.capacity": Anchor(30, 130),
        "pvc.events": Anchor(30, 150),
        # Node
        "node.name": Anchor(65, 33),
        "node.labels": Anchor(30, 50),
        "node.taints": Anchor(30, 70),
        "node.osimage": Anchor(30, 90),
        "node.ip": Anchor(30, 110),
        "node.schedulable": Anchor(70, 120),
        "node.state.networkunavailable": Anchor(90, 137),
        "node.state.memorypressure": Anchor(90, 147),
        "node.state.diskpressure": Anchor(90, 157),
        "node.state.pidpressure": Anchor(90, 167),
        "node.state.ready": Anchor(90, 177),
        "node.events": Anchor(30, 195),
    }
)


def resolve(field_name: str) -> Anchor:
    """Return the anchor of a field; unknown names raise UnknownAnchorError."""
    try:
        return ANCHORS[field_name]
    except KeyError:
        raise UnknownAnchorError(field_name) from None


def template_for(field_name: str) -> TemplateKind:
    """Return the template a field is stamped on."""
    prefix = field_name.split(".", 1)[0]
    try:
        return FIELD_PREFIXES[prefix]
    except KeyError:
        raise UnknownAnchorError(field_name) from None


def fields_for(template: TemplateKind) -> tuple[str, ...]:
    return tuple(name for name in ANCHORS if template_for(name) is template)


def validate_layout(field_names: Iterable[str]) -> None:
    """Check that every field name has an anchor.

    Raises:
        LayoutError: listing all missing field names.
    """
    missing = sorted({name for name in field_names if name not in ANCHORS})
    if missing:
        raise LayoutError(f"fields without anchors: {', '.join(missing)}")
