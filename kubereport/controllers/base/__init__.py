"""Base classes for controllers."""

from kubereport.controllers.base.base_controller import FetchResult

__all__ = ["FetchResult"]
