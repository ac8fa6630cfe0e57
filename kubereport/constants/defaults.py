"""Default values for settings.

All default values used by the ReportSettings model.
"""

from typing import Final

# ============================================================================
# Remote API defaults
# ============================================================================

API_HOST_DEFAULT: Final = "localhost"
API_PORT_DEFAULT: Final = 9090
API_PATH_PREFIX: Final = "/api/v1/"

# ============================================================================
# Report store and template defaults
# ============================================================================

REPORT_DIR_DEFAULT: Final = "/tmp/pdf"
TEMPLATE_DIR_DEFAULT: Final = "templates"

# ============================================================================
# Rendering defaults
# ============================================================================

FONT_NAME_DEFAULT: Final = "Helvetica"
FONT_SIZE_DEFAULT: Final = 12
LINE_STEP_MM_DEFAULT: Final = 5.0

# ============================================================================
# Fetch defaults
# ============================================================================

NODE_DETAIL_WORKERS_DEFAULT: Final = 1

__all__ = [
    "API_HOST_DEFAULT",
    "API_PATH_PREFIX",
    "API_PORT_DEFAULT",
    "FONT_NAME_DEFAULT",
    "FONT_SIZE_DEFAULT",
    "LINE_STEP_MM_DEFAULT",
    "NODE_DETAIL_WORKERS_DEFAULT",
    "REPORT_DIR_DEFAULT",
    "TEMPLATE_DIR_DEFAULT",
]
