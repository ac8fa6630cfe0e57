"""Limit and page geometry constants.

All page measurements are millimetres on an A4 portrait page.
"""

from typing import Final

# ============================================================================
# Page geometry
# ============================================================================

PAGE_WIDTH_MM: Final = 210.0
PAGE_HEIGHT_MM: Final = 297.0
PAGE_RIGHT_MARGIN_MM: Final = 20.0
PAGE_BOTTOM_MARGIN_MM: Final = 20.0

# ============================================================================
# Validation limits
# ============================================================================

FONT_SIZE_MIN: Final = 6
FONT_SIZE_MAX: Final = 24
LINE_STEP_MM_MIN: Final = 2.0
NODE_DETAIL_WORKERS_MIN: Final = 1
NODE_DETAIL_WORKERS_MAX: Final = 8

__all__ = [
    "FONT_SIZE_MAX",
    "FONT_SIZE_MIN",
    "LINE_STEP_MM_MIN",
    "NODE_DETAIL_WORKERS_MAX",
    "NODE_DETAIL_WORKERS_MIN",
    "PAGE_BOTTOM_MARGIN_MM",
    "PAGE_HEIGHT_MM",
    "PAGE_RIGHT_MARGIN_MM",
    "PAGE_WIDTH_MM",
]
