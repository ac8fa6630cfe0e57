"""Init file for cluster module."""

from kubereport.controllers.cluster.fetchers import ResourceClient
from kubereport.controllers.cluster.parsers import NodeIndicators, NodeParser

__all__ = ["NodeIndicators", "NodeParser", "ResourceClient"]
