"""Scalar constants for report composition.

Sentinel strings substituted into display fields when data is absent or
could not be fetched, plus fixed formatting tokens.
"""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_NAME: Final = "kubereport"

# ============================================================================
# Absent-data sentinels
# ============================================================================

NO_LABELS: Final = "No labels"
NO_TAINTS: Final = "No taints"
NO_ADDRESSES: Final = "No addresses"
NO_INTERNAL_IP: Final = "No internal IP"
NO_EVENTS: Final = "No events"
NO_PVCS: Final = "No PVCs associated with this pod"
NO_CONTAINERS: Final = "No containers"
NO_LOGS: Final = "No logs"
NO_STORAGE_CLASS: Final = "No storage class"
NO_VOLUME: Final = "No volume bound"
NOT_SCHEDULED: Final = "Not scheduled"
UNKNOWN: Final = "Unknown"

# ============================================================================
# Fetch-failure sentinels
# ============================================================================

EVENTS_UNAVAILABLE: Final = "Unable to fetch events"
LOGS_UNAVAILABLE: Final = "Unable to fetch logs"
PVCS_UNAVAILABLE: Final = "Unable to fetch PVCs"
NODE_DETAIL_UNAVAILABLE: Final = "Unable to fetch node detail"

# ============================================================================
# Formatting tokens
# ============================================================================

FIELD_SEPARATOR: Final = ", "
KEY_VALUE_SEPARATOR: Final = ":"
EVENT_REASON_SEPARATOR: Final = ", Reason: "
LOG_LINE_SEPARATOR: Final = " | "
INTERNAL_IP_ADDRESS_TYPE: Final = "InternalIP"
PVC_OBJECT_KIND: Final = "PersistentVolumeClaim"

# Report file timestamp, e.g. 10-19-2026_14-05-09
REPORT_TIMESTAMP_FORMAT: Final = "%m-%d-%Y_%H-%M-%S"
TITLE_TIMESTAMP_FORMAT: Final = "%Y-%m-%d %H:%M:%S %Z"
REPORT_FILE_EXTENSION: Final = ".pdf"

TEST_REPORT_NAMESPACE: Final = "SAMPLE-NAMESPACE"

__all__ = [
    "APP_NAME",
    "EVENTS_UNAVAILABLE",
    "EVENT_REASON_SEPARATOR",
    "FIELD_SEPARATOR",
    "INTERNAL_IP_ADDRESS_TYPE",
    "KEY_VALUE_SEPARATOR",
    "LOGS_UNAVAILABLE",
    "LOG_LINE_SEPARATOR",
    "NODE_DETAIL_UNAVAILABLE",
    "NOT_SCHEDULED",
    "NO_ADDRESSES",
    "NO_CONTAINERS",
    "NO_EVENTS",
    "NO_INTERNAL_IP",
    "NO_LABELS",
    "NO_LOGS",
    "NO_PVCS",
    "NO_STORAGE_CLASS",
    "NO_TAINTS",
    "NO_VOLUME",
    "PVCS_UNAVAILABLE",
    "PVC_OBJECT_KIND",
    "REPORT_FILE_EXTENSION",
    "REPORT_TIMESTAMP_FORMAT",
    "TEST_REPORT_NAMESPACE",
    "TITLE_TIMESTAMP_FORMAT",
    "UNKNOWN",
]
