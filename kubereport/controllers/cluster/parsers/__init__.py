"""Parsers turning resource records into display data."""

from kubereport.controllers.cluster.parsers.node_parser import NodeIndicators, NodeParser

__all__ = ["NodeIndicators", "NodeParser"]
