"""Fetchers for cluster resource collections."""

from kubereport.controllers.cluster.fetchers.resource_client import ResourceClient

__all__ = ["ResourceClient"]
