"""All enum definitions for report composition.

This module consolidates all enumerations used throughout the package.
"""

from enum import Enum

# =============================================================================
# Remote API Enums
# =============================================================================

class CollectionKind(Enum):
    """Resource collections served by the remote read API."""

    POD = "pod"
    NODE = "node"
    PERSISTENT_VOLUME_CLAIM = "persistentvolumeclaim"
    EVENT = "event"
    LOG = "log"
    NAMESPACE = "namespace"


class ConditionType(Enum):
    """Well-known node condition types scanned for the node page."""

    READY = "Ready"
    MEMORY_PRESSURE = "MemoryPressure"
    DISK_PRESSURE = "DiskPressure"
    PID_PRESSURE = "PIDPressure"
    NETWORK_UNAVAILABLE = "NetworkUnavailable"


# =============================================================================
# Report Enums
# =============================================================================

class TemplateKind(Enum):
    """Page background templates, valued by file stem."""

    TITLE = "title_page"
    POD_DETAIL = "pod_detail"
    POD_LOGS = "pod_logs"
    NODE_DETAIL = "node_detail"
    PVC_DETAIL = "pvc_detail"

    @property
    def file_name(self) -> str:
        return f"{self.value}.pdf"


class ReportKind(Enum):
    """Report kinds that can be generated.

    The label is used as the leading part of the generated file name.
    """

    HEALTH_CHECK = "healthcheck"
    TEST = "test"

    @property
    def label(self) -> str:
        return _REPORT_KIND_LABELS[self]

    @property
    def display_name(self) -> str:
        return _REPORT_KIND_DISPLAY_NAMES[self]


_REPORT_KIND_LABELS = {
    ReportKind.HEALTH_CHECK: "HealthCheck",
    ReportKind.TEST: "Test",
}

_REPORT_KIND_DISPLAY_NAMES = {
    ReportKind.HEALTH_CHECK: "Health Check Report",
    ReportKind.TEST: "Test Report",
}


# =============================================================================
# Fetch State Enums
# =============================================================================

class FetchState(Enum):
    """Data fetch state values."""

    SUCCESS = "success"
    ERROR = "error"
