"""Read-only resource records decoded from the remote read API.

Field names follow the API's camelCase JSON through aliases. Records are
frozen: report composition only reads them.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class _Record(BaseModel):
    """Base for all API records."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # The API serializes empty slices and maps as null; fall back to defaults.
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class ObjectMeta(_Record):
    """Identity and labels shared by every resource."""

    name: str = ""
    namespace: str = ""
    labels: dict[str, str] = Field(default_factory=dict)


class _MetaRecord(_Record):
    object_meta: ObjectMeta = Field(default_factory=ObjectMeta, alias="objectMeta")

    @property
    def name(self) -> str:
        return self.object_meta.name

    @property
    def labels(self) -> dict[str, str]:
        return self.object_meta.labels


# =============================================================================
# Pods and logs
# =============================================================================


class Pod(_MetaRecord):
    """Pod list entry."""

    status: str = ""
    node_name: str = Field(default="", alias="nodeName")
    container_images: list[str] = Field(default_factory=list, alias="containerImages")


class PodList(_Record):
    pods: list[Pod] = Field(default_factory=list)


class LogLine(_Record):
    timestamp: str = ""
    content: str = ""


class LogDetails(_Record):
    """Log lines of one pod, oldest first."""

    logs: list[LogLine] = Field(default_factory=list)


# =============================================================================
# Events
# =============================================================================


class Event(_MetaRecord):
    """Single event; ``sub_object_*`` reference the object the event is about."""

    message: str = ""
    reason: str = ""
    type: str = ""
    sub_object_kind: str = Field(default="", alias="objectKind")
    sub_object_name: str = Field(default="", alias="objectName")


class EventList(_Record):
    events: list[Event] = Field(default_factory=list)


# =============================================================================
# Nodes
# =============================================================================


class Taint(_Record):
    key: str = ""
    value: str = ""
    effect: str = ""


class NodeAddress(_Record):
    type: str = ""
    address: str = ""


class NodeCondition(_Record):
    type: str = ""
    status: str = ""
    reason: str = ""
    message: str = ""


class NodeSystemInfo(_Record):
    os_image: str = Field(default="", alias="osImage")


class Node(_MetaRecord):
    """Node list entry."""

    ready: str = ""


class NodeList(_Record):
    nodes: list[Node] = Field(default_factory=list)


class NodeDetail(_MetaRecord):
    """Detailed node record with addresses, taints and conditions."""

    ready: str = ""
    unschedulable: bool = False
    node_info: NodeSystemInfo = Field(default_factory=NodeSystemInfo, alias="nodeInfo")
    conditions: list[NodeCondition] = Field(default_factory=list)
    taints: list[Taint] = Field(default_factory=list)
    addresses: list[NodeAddress] = Field(default_factory=list)
    event_list: EventList = Field(default_factory=EventList, alias="eventList")


# =============================================================================
# Persistent volume claims
# =============================================================================


class PersistentVolumeClaim(_MetaRecord):
    status: str = ""
    volume: str = ""
    storage_class: str | None = Field(default=None, alias="storageClass")
    capacity: dict[str, str] = Field(default_factory=dict)
    access_modes: list[str] = Field(default_factory=list, alias="accessModes")


class PersistentVolumeClaimList(_Record):
    items: list[PersistentVolumeClaim] = Field(default_factory=list)


# =============================================================================
# Namespaces
# =============================================================================


class Namespace(_MetaRecord):
    phase: str = ""


class NamespaceList(_Record):
    namespaces: list[Namespace] = Field(default_factory=list)

    def contains(self, name: str) -> bool:
        return any(namespace.name == name for namespace in self.namespaces)
