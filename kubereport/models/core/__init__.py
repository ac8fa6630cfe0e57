"""Core resource record models."""

from kubereport.models.core.resources import (
    Event,
    EventList,
    LogDetails,
    LogLine,
    Namespace,
    NamespaceList,
    Node,
    NodeAddress,
    NodeCondition,
    NodeDetail,
    NodeList,
    NodeSystemInfo,
    ObjectMeta,
    PersistentVolumeClaim,
    PersistentVolumeClaimList,
    Pod,
    PodList,
    Taint,
)

__all__ = [
    "Event",
    "EventList",
    "LogDetails",
    "LogLine",
    "Namespace",
    "NamespaceList",
    "Node",
    "NodeAddress",
    "NodeCondition",
    "NodeDetail",
    "NodeList",
    "NodeSystemInfo",
    "ObjectMeta",
    "PersistentVolumeClaim",
    "PersistentVolumeClaimList",
    "Pod",
    "PodList",
    "Taint",
]
