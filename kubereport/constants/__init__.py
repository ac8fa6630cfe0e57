"""Constants module for kubereport.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Sentinel strings and formatting tokens (Final)
- timeouts.py: Timeout values (seconds)
- limits.py: Page geometry and validation ranges
- defaults.py: Default values for settings
"""

from kubereport.constants.defaults import (
    API_HOST_DEFAULT,
    API_PORT_DEFAULT,
    REPORT_DIR_DEFAULT,
    TEMPLATE_DIR_DEFAULT,
)
from kubereport.constants.enums import (
    CollectionKind,
    ConditionType,
    FetchState,
    ReportKind,
    TemplateKind,
)
from kubereport.constants.limits import (
    PAGE_HEIGHT_MM,
    PAGE_WIDTH_MM,
)
from kubereport.constants.timeouts import API_REQUEST_TIMEOUT
from kubereport.constants.values import (
    APP_NAME,
    NO_EVENTS,
    NO_LABELS,
    NO_PVCS,
    NO_TAINTS,
)

__all__ = [
    # Application
    "APP_NAME",
    # Defaults
    "API_HOST_DEFAULT",
    "API_PORT_DEFAULT",
    # Timeouts
    "API_REQUEST_TIMEOUT",
    # Sentinels
    "NO_EVENTS",
    "NO_LABELS",
    "NO_PVCS",
    "NO_TAINTS",
    # Page geometry
    "PAGE_HEIGHT_MM",
    "PAGE_WIDTH_MM",
    "REPORT_DIR_DEFAULT",
    "TEMPLATE_DIR_DEFAULT",
    # Enums
    "CollectionKind",
    "ConditionType",
    "FetchState",
    "ReportKind",
    "TemplateKind",
]
