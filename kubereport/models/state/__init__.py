"""Settings state models."""

from kubereport.models.state.settings import (
    ClientConfig,
    ConfigError,
    ConfigLoadError,
    ReportSettings,
    load_settings,
)

__all__ = [
    "ClientConfig",
    "ConfigError",
    "ConfigLoadError",
    "ReportSettings",
    "load_settings",
]
