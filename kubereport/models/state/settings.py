"""Report settings models and YAML loading."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from kubereport.constants.defaults import (
    API_HOST_DEFAULT,
    API_PATH_PREFIX,
    API_PORT_DEFAULT,
    FONT_NAME_DEFAULT,
    FONT_SIZE_DEFAULT,
    LINE_STEP_MM_DEFAULT,
    NODE_DETAIL_WORKERS_DEFAULT,
    REPORT_DIR_DEFAULT,
    TEMPLATE_DIR_DEFAULT,
)
from kubereport.constants.limits import (
    FONT_SIZE_MAX,
    FONT_SIZE_MIN,
    LINE_STEP_MM_MIN,
    NODE_DETAIL_WORKERS_MAX,
    NODE_DETAIL_WORKERS_MIN,
)
from kubereport.constants.timeouts import API_REQUEST_TIMEOUT

logger = logging.getLogger(__name__)


class ReportSettings(BaseModel):
    """Report generation settings with validation."""

    model_config = ConfigDict(populate_by_name=True)

    # Remote read API
    api_host: str = API_HOST_DEFAULT
    api_port: int = Field(default=API_PORT_DEFAULT, ge=1, le=65535)
    secure: bool = False
    verify_tls: bool = True
    request_timeout: float = Field(default=API_REQUEST_TIMEOUT, gt=0)

    # Paths
    report_dir: str = REPORT_DIR_DEFAULT
    template_dir: str = TEMPLATE_DIR_DEFAULT

    # Rendering
    font_name: str = FONT_NAME_DEFAULT
    font_size: int = Field(default=FONT_SIZE_DEFAULT, ge=FONT_SIZE_MIN, le=FONT_SIZE_MAX)
    line_step_mm: float = Field(default=LINE_STEP_MM_DEFAULT, ge=LINE_STEP_MM_MIN)
    # TrueType file registered under font_name, for text outside Latin-1
    font_path: str | None = None

    # Node detail fetches; 1 keeps the pipeline fully sequential
    node_detail_workers: int = Field(
        default=NODE_DETAIL_WORKERS_DEFAULT,
        ge=NODE_DETAIL_WORKERS_MIN,
        le=NODE_DETAIL_WORKERS_MAX,
    )

    @property
    def api_base_url(self) -> str:
        scheme = "https" if self.secure else "http"
        return f"{scheme}://{self.api_host}:{self.api_port}{API_PATH_PREFIX}"

    def client_config(self, bearer_token: str | None = None) -> ClientConfig:
        """Build the immutable client configuration for one report run."""
        return ClientConfig(
            base_url=self.api_base_url,
            bearer_token=bearer_token or None,
            timeout=self.request_timeout,
            verify_tls=self.verify_tls,
        )


class ClientConfig(BaseModel):
    """Per-run resource client configuration. Never mutated after creation."""

    model_config = ConfigDict(frozen=True)

    base_url: str
    bearer_token: str | None = Field(default=None, repr=False)
    timeout: float = API_REQUEST_TIMEOUT
    verify_tls: bool = True


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""


def load_settings(path: str | Path | None = None, **overrides: Any) -> ReportSettings:
    """Load settings from an optional YAML file, then apply overrides.

    Overrides whose value is None are ignored so unset CLI flags keep the
    file (or default) value.
    """
    data: dict[str, Any] = {}
    if path is not None:
        config_path = Path(path)
        try:
            with open(config_path) as handle:
                loaded = yaml.safe_load(handle) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigLoadError(f"Cannot read settings file {config_path}: {exc}") from exc
        if not isinstance(loaded, dict):
            raise ConfigLoadError(f"Settings file {config_path} must contain a mapping")
        data.update(loaded)
        logger.debug("Loaded settings from %s", config_path)

    data.update({key: value for key, value in overrides.items() if value is not None})

    try:
        return ReportSettings.model_validate(data)
    except ValidationError as exc:
        raise ConfigLoadError(f"Invalid settings: {exc}") from exc
