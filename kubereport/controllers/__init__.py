"""Controllers module for kubereport.

Fetchers read resource collections from the remote API; parsers turn the
records into display data for the report pages.
"""

from __future__ import annotations

from kubereport.controllers.base import FetchResult
from kubereport.controllers.cluster import NodeIndicators, NodeParser, ResourceClient

__all__ = [
    "FetchResult",
    "NodeIndicators",
    "NodeParser",
    "ResourceClient",
]
