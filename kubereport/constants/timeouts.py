"""Timeout constants for remote API requests (seconds)."""

from typing import Final

API_REQUEST_TIMEOUT: Final = 30.0

__all__ = ["API_REQUEST_TIMEOUT"]
