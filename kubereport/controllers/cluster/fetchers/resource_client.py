"""Resource client - fetches and decodes collections from the remote read API."""

from __future__ import annotations

import http.client
import json
import logging
import ssl
import time
import urllib.error
import urllib.parse
import urllib.request
from collections.abc import Callable
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from kubereport.constants.enums import CollectionKind
from kubereport.controllers.base import FetchResult
from kubereport.models.core.resources import (
    EventList,
    LogDetails,
    NamespaceList,
    NodeDetail,
    NodeList,
    PersistentVolumeClaimList,
    PodList,
)
from kubereport.models.state.settings import ClientConfig
from kubereport.report.errors import FetchError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class ResourceClient:
    """Reads resource collections with one GET request per call.

    No retries and no pagination. Failures never raise: they come back as a
    ``FetchResult`` holding the empty collection and a ``FetchError``.
    The client keeps no state besides its frozen ``ClientConfig``, so each
    report run builds its own instance and credentials never cross runs.
    """

    def __init__(
        self,
        config: ClientConfig,
        urlopen_func: Callable[..., Any] = urllib.request.urlopen,
    ) -> None:
        """Initialize resource client.

        Args:
            config: Immutable per-run client configuration
            urlopen_func: Function performing the request, ``urlopen`` compatible
        """
        self.config = config
        self._urlopen = urlopen_func
        self._ssl_context: ssl.SSLContext | None = None
        if config.base_url.startswith("https") and not config.verify_tls:
            self._ssl_context = ssl.create_default_context()
            self._ssl_context.check_hostname = False
            self._ssl_context.verify_mode = ssl.CERT_NONE

    # ------------------------------------------------------------------
    # Collections
    # ------------------------------------------------------------------

    def fetch_pods(self, namespace: str) -> FetchResult[PodList]:
        return self._fetch(PodList, CollectionKind.POD, namespace)

    def fetch_pod_logs(self, namespace: str, pod: str) -> FetchResult[LogDetails]:
        return self._fetch(LogDetails, CollectionKind.LOG, namespace, pod)

    def fetch_pod_events(self, namespace: str, pod: str) -> FetchResult[EventList]:
        return self._fetch(EventList, CollectionKind.POD, namespace, pod, "event")

    def fetch_pod_claims(
        self, namespace: str, pod: str
    ) -> FetchResult[PersistentVolumeClaimList]:
        return self._fetch(
            PersistentVolumeClaimList,
            CollectionKind.POD,
            namespace,
            pod,
            CollectionKind.PERSISTENT_VOLUME_CLAIM.value,
        )

    def fetch_nodes(self) -> FetchResult[NodeList]:
        return self._fetch(NodeList, CollectionKind.NODE)

    def fetch_node_detail(self, node_name: str) -> FetchResult[NodeDetail]:
        return self._fetch(NodeDetail, CollectionKind.NODE, node_name)

    def fetch_claims(self, namespace: str) -> FetchResult[PersistentVolumeClaimList]:
        return self._fetch(
            PersistentVolumeClaimList, CollectionKind.PERSISTENT_VOLUME_CLAIM, namespace
        )

    def fetch_events(self, namespace: str) -> FetchResult[EventList]:
        return self._fetch(EventList, CollectionKind.EVENT, namespace)

    def fetch_namespaces(self) -> FetchResult[NamespaceList]:
        return self._fetch(NamespaceList, CollectionKind.NAMESPACE)

    def namespace_exists(self, namespace: str) -> FetchResult[bool]:
        """Look the namespace up in the namespace collection."""
        result = self.fetch_namespaces()
        if not result.ok:
            return FetchResult(data=False, error=result.error, duration_ms=result.duration_ms)
        return FetchResult(data=result.data.contains(namespace), duration_ms=result.duration_ms)

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def build_path(self, kind: CollectionKind, *segments: str) -> str:
        quoted = [urllib.parse.quote(segment, safe="") for segment in segments]
        return "/".join([kind.value, *quoted])

    def _build_request(self, path: str) -> urllib.request.Request:
        headers = {"Accept": "application/json"}
        if self.config.bearer_token:
            headers["Authorization"] = f"Bearer {self.config.bearer_token}"
        return urllib.request.Request(
            url=f"{self.config.base_url}{path}", method="GET", headers=headers
        )

    def _get_json(self, path: str) -> Any:
        request = self._build_request(path)
        try:
            with self._urlopen(
                request, timeout=self.config.timeout, context=self._ssl_context
            ) as response:
                body = response.read()
        except urllib.error.HTTPError as exc:
            raise FetchError(path, f"HTTP {exc.code} {exc.reason}") from exc
        except urllib.error.URLError as exc:
            raise FetchError(path, str(exc.reason)) from exc
        except http.client.HTTPException as exc:
            raise FetchError(path, f"{type(exc).__name__}: {exc}") from exc
        except OSError as exc:
            raise FetchError(path, str(exc) or type(exc).__name__) from exc

        try:
            return json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise FetchError(path, f"invalid JSON body: {exc}") from exc

    def _fetch(
        self, model: type[ModelT], kind: CollectionKind, *segments: str
    ) -> FetchResult[ModelT]:
        path = self.build_path(kind, *segments)
        started = time.monotonic()
        try:
            payload = self._get_json(path)
            data = model.model_validate(payload)
        except FetchError as exc:
            logger.warning("Error fetching %s: %s", path, exc.reason)
            return FetchResult(data=model(), error=exc, duration_ms=_elapsed_ms(started))
        except ValidationError as exc:
            error = FetchError(path, f"unexpected {model.__name__} schema: {exc.error_count()} errors")
            error.__cause__ = exc
            logger.warning("Error decoding %s: %s", path, error.reason)
            return FetchResult(data=model(), error=error, duration_ms=_elapsed_ms(started))

        logger.debug("Fetched %s in %.1fms", path, _elapsed_ms(started))
        return FetchResult(data=data, duration_ms=_elapsed_ms(started))


def _elapsed_ms(started: float) -> float:
    return (time.monotonic() - started) * 1000
