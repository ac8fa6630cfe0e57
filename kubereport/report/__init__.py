"""Report composition: layout, page composition, storage and orchestration.

Import the orchestrator from ``kubereport.report.orchestrator``; this package
only re-exports the error taxonomy, which the fetch layer depends on.
"""

from kubereport.report.errors import (
    FetchError,
    RenderError,
    ReportError,
    ScopeNotFoundError,
    StoreError,
)

__all__ = [
    "FetchError",
    "RenderError",
    "ReportError",
    "ScopeNotFoundError",
    "StoreError",
]
