"""Report orchestrator - runs the health check pipeline for one namespace.

A run validates the namespace, imports the page templates, renders the
title page, then one section per resource family (pods, nodes, claims) in
that order, and finally writes the document to the report store.

Fetch failures inside a section never abort the run: the affected field
shows an "Unable to fetch ..." sentinel and the run continues. Only a
missing namespace, a rendering failure or a storage failure escape.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from types import MappingProxyType

from kubereport.constants.enums import ReportKind
from kubereport.constants.values import (
    EVENTS_UNAVAILABLE,
    LOGS_UNAVAILABLE,
    NO_INTERNAL_IP,
    NO_STORAGE_CLASS,
    NO_TAINTS,
    NO_VOLUME,
    NODE_DETAIL_UNAVAILABLE,
    NOT_SCHEDULED,
    PVC_OBJECT_KIND,
    PVCS_UNAVAILABLE,
    TEST_REPORT_NAMESPACE,
    UNKNOWN,
)
from kubereport.controllers.base import FetchResult
from kubereport.controllers.cluster.fetchers import ResourceClient
from kubereport.controllers.cluster.parsers.field_formatter import (
    filter_events_by_sub_object,
    format_capacity,
    format_containers,
    format_events,
    format_internal_addresses,
    format_labels,
    format_log_lines,
    format_simple_pvc_names,
    format_taints,
)
from kubereport.controllers.cluster.parsers.node_parser import NodeParser
from kubereport.models.core.resources import Node, NodeDetail, Pod
from kubereport.models.state.settings import ClientConfig, ReportSettings
from kubereport.report.composer import PageComposer, ReportDocument, TemplateSet
from kubereport.report.errors import ScopeNotFoundError
from kubereport.report.store import ReportStore

logger = logging.getLogger(__name__)

REPORT_KINDS: MappingProxyType[str, str] = MappingProxyType(
    {kind.value: kind.display_name for kind in ReportKind}
)


def _local_now() -> datetime:
    return datetime.now().astimezone()


class _HealthCheckRun:
    """State of a single health check run.

    Holds the run's client, document and node detail cache. Nothing here is
    shared with other runs.
    """

    def __init__(
        self,
        client: ResourceClient,
        composer: PageComposer,
        namespace: str,
        node_parser: NodeParser,
        node_detail_workers: int,
    ) -> None:
        self.client = client
        self.composer = composer
        self.namespace = namespace
        self.node_parser = node_parser
        self.node_detail_workers = node_detail_workers
        self.doc = ReportDocument()
        self._node_details: dict[str, FetchResult[NodeDetail]] = {}

    # ------------------------------------------------------------------
    # Node detail cache
    # ------------------------------------------------------------------

    def node_detail(self, node_name: str) -> FetchResult[NodeDetail]:
        if node_name not in self._node_details:
            self._node_details[node_name] = self.client.fetch_node_detail(node_name)
        return self._node_details[node_name]

    def prefetch_node_details(self, node_names: list[str]) -> None:
        """Fetch missing node details through a bounded worker pool.

        Does nothing with a single worker; details are then fetched one by
        one as node pages are rendered.
        """
        missing = [name for name in dict.fromkeys(node_names) if name not in self._node_details]
        if self.node_detail_workers <= 1 or len(missing) <= 1:
            return
        workers = min(self.node_detail_workers, len(missing))
        logger.debug("Prefetching %d node details with %d workers", len(missing), workers)
        with ThreadPoolExecutor(max_workers=workers) as pool:
            results = list(pool.map(self.client.fetch_node_detail, missing))
        for name, result in zip(missing, results):
            self._node_details[name] = result

    # ------------------------------------------------------------------
    # Sections
    # ------------------------------------------------------------------

    def add_title(self, generated_at: datetime) -> None:
        self.composer.add_title_page(self.doc, self.namespace, generated_at)

    def add_pods(self) -> int:
        result = self.client.fetch_pods(self.namespace)
        if not result.ok:
            logger.warning("Skipping pod section for %s: %s", self.namespace, result.error)
            return 0
        for pod in result.data.pods:
            self._add_pod(pod)
        return len(result.data.pods)

    def _add_pod(self, pod: Pod) -> None:
        logs = self.client.fetch_pod_logs(self.namespace, pod.name)
        events = self.client.fetch_pod_events(self.namespace, pod.name)
        claims = self.client.fetch_pod_claims(self.namespace, pod.name)

        if pod.node_name:
            node_name = pod.node_name
            detail = self.node_detail(node_name)
            taints = format_taints(detail.data.taints) if detail.ok else NODE_DETAIL_UNAVAILABLE
        else:
            node_name = NOT_SCHEDULED
            taints = NO_TAINTS

        self.composer.add_pod_detail_page(
            self.doc,
            pod_name=pod.name,
            labels=format_labels(pod.labels),
            taints=taints,
            containers=format_containers(pod.container_images),
            pvc_names=format_simple_pvc_names(claims.data.items) if claims.ok else PVCS_UNAVAILABLE,
            node_name=node_name,
            events=format_events(events.data.events) if events.ok else [EVENTS_UNAVAILABLE],
        )
        self.composer.add_pod_logs_page(
            self.doc,
            pod_name=pod.name,
            logs=format_log_lines(logs.data.logs) if logs.ok else [LOGS_UNAVAILABLE],
        )

    def add_nodes(self) -> int:
        result = self.client.fetch_nodes()
        if not result.ok:
            logger.warning("Skipping node section: %s", result.error)
            return 0
        nodes = result.data.nodes
        self.prefetch_node_details([node.name for node in nodes])
        for node in nodes:
            self._add_node(node)
        return len(nodes)

    def _add_node(self, node: Node) -> None:
        detail_result = self.node_detail(node.name)
        if detail_result.ok:
            detail = detail_result.data
            indicators = self.node_parser.parse_indicators(detail, fallback_ready=node.ready)
            taints = format_taints(detail.taints)
            os_image = detail.node_info.os_image or UNKNOWN
            internal_ips = format_internal_addresses(detail.addresses) or NO_INTERNAL_IP
            events = format_events(detail.event_list.events)
        else:
            indicators = self.node_parser.unavailable_indicators(fallback_ready=node.ready)
            taints = os_image = internal_ips = NODE_DETAIL_UNAVAILABLE
            events = [EVENTS_UNAVAILABLE]

        self.composer.add_node_page(
            self.doc,
            node_name=node.name,
            labels=format_labels(node.labels),
            taints=taints,
            os_image=os_image,
            internal_ips=internal_ips,
            schedulable=indicators.schedulable,
            network_unavailable=indicators.network_unavailable,
            memory_pressure=indicators.memory_pressure,
            disk_pressure=indicators.disk_pressure,
            pid_pressure=indicators.pid_pressure,
            ready=indicators.ready,
            events=events,
        )

    def add_claims(self) -> int:
        result = self.client.fetch_claims(self.namespace)
        if not result.ok:
            logger.warning("Skipping claim section for %s: %s", self.namespace, result.error)
            return 0
        claims = result.data.items
        if not claims:
            return 0

        events = self.client.fetch_events(self.namespace)
        for claim in claims:
            if events.ok:
                claim_events = format_events(
                    filter_events_by_sub_object(events.data.events, PVC_OBJECT_KIND, claim.name)
                )
            else:
                claim_events = [EVENTS_UNAVAILABLE]
            self.composer.add_pvc_page(
                self.doc,
                pvc_name=claim.name,
                state=claim.status or UNKNOWN,
                storage_class=claim.storage_class or NO_STORAGE_CLASS,
                volume=claim.volume or NO_VOLUME,
                labels=format_labels(claim.labels),
                capacity=format_capacity(claim.capacity),
                events=claim_events,
            )
        return len(claims)


class ReportGenerator:
    """Generates report files from the remote read API.

    The generator only holds settings. Every run builds its own client from
    a frozen ``ClientConfig`` so concurrent runs never share credentials or
    documents.
    """

    def __init__(
        self,
        settings: ReportSettings,
        *,
        client_factory: Callable[[ClientConfig], ResourceClient] = ResourceClient,
        clock: Callable[[], datetime] = _local_now,
        node_parser: NodeParser | None = None,
    ) -> None:
        """Initialize report generator.

        Args:
            settings: Report settings
            client_factory: Builds the per-run resource client
            clock: Returns the run timestamp used for the title and file name
            node_parser: Parser for node indicators
        """
        self.settings = settings
        self._client_factory = client_factory
        self._clock = clock
        self._node_parser = node_parser or NodeParser()

    def _composer(self) -> PageComposer:
        templates = TemplateSet.load(self.settings.template_dir)
        return PageComposer(
            templates,
            font_name=self.settings.font_name,
            font_size=self.settings.font_size,
            line_step_mm=self.settings.line_step_mm,
            font_path=self.settings.font_path,
        )

    def _finalize(
        self, doc: ReportDocument, kind: ReportKind, scope: str, generated_at: datetime
    ) -> str:
        content = doc.to_bytes()
        store = ReportStore(self.settings.report_dir)
        return store.write(kind.label, scope, generated_at, content)

    def generate_health_check_report(self, namespace: str, bearer_token: str | None = None) -> str:
        """Generate the health check report of one namespace.

        Args:
            namespace: Namespace to report on
            bearer_token: Optional token sent with every request of this run

        Returns:
            File name of the report inside the report directory.

        Raises:
            ScopeNotFoundError: namespace absent or lookup failed.
            RenderError: template import, drawing or serialization failed.
            StoreError: the report file could not be written.
        """
        generated_at = self._clock()
        client = self._client_factory(self.settings.client_config(bearer_token))

        logger.info("Generating health check report for namespace %s", namespace)
        exists = client.namespace_exists(namespace)
        if not exists.ok:
            raise ScopeNotFoundError(
                namespace, detail=f"lookup failed: {exists.error.reason}"
            ) from exists.error
        if not exists.data:
            raise ScopeNotFoundError(namespace)

        run = _HealthCheckRun(
            client,
            self._composer(),
            namespace,
            self._node_parser,
            self.settings.node_detail_workers,
        )
        run.add_title(generated_at)
        pods = run.add_pods()
        nodes = run.add_nodes()
        claims = run.add_claims()
        logger.info(
            "Rendered %d pages for %s (%d pods, %d nodes, %d claims)",
            run.doc.page_count,
            namespace,
            pods,
            nodes,
            claims,
        )
        return self._finalize(run.doc, ReportKind.HEALTH_CHECK, namespace, generated_at)

    def generate_test_report(self) -> str:
        """Render one page of every kind with fixed sample values.

        Does not contact the API. Useful to check templates and fonts.
        """
        generated_at = self._clock()
        composer = self._composer()
        doc = ReportDocument()

        composer.add_title_page(doc, TEST_REPORT_NAMESPACE, generated_at)
        composer.add_pod_detail_page(
            doc,
            pod_name="SAMPLE-POD-ABCDEF1234567890",
            labels="LABEL1:VALUE1, LABEL2:VALUE2, LABEL3:VALUE3",
            taints="TAINT1:VALUE1, TAINT2:VALUE2",
            containers=["CONTAINER-IMAGE-1:latest", "CONTAINER-IMAGE-2:1.0.0"],
            pvc_names="SAMPLE-PVC-1",
            node_name="NODE1",
            events=["EVENT1, Reason: REASON1", "EVENT2, Reason: REASON2", "EVENT3, Reason: REASON3"],
        )
        composer.add_pod_logs_page(
            doc,
            pod_name="SAMPLE-POD-ABCDEF1234567890",
            logs=[f"2006-01-02T15:04:0{index}Z | SAMPLE LOG LINE {index}" for index in range(1, 6)],
        )
        composer.add_node_page(
            doc,
            node_name="NODE1",
            labels="LABEL1:VALUE1, LABEL2:VALUE2",
            taints="TAINT1:VALUE1",
            os_image="Linux Shminux 22.04 LTS",
            internal_ips="123.123.123.123",
            schedulable=True,
            network_unavailable=False,
            memory_pressure=False,
            disk_pressure=False,
            pid_pressure=False,
            ready="True",
            events=["EVENT1, Reason: REASON1"],
        )
        composer.add_pvc_page(
            doc,
            pvc_name="SAMPLE-PVC-1",
            state="bound",
            storage_class="local-storage",
            volume="SAMPLE-PV-1",
            labels="LABEL1:VALUE1",
            capacity="100Ti",
            events=["EVENT1, Reason: REASON1"],
        )
        logger.info("Rendered test report with %d pages", doc.page_count)
        return self._finalize(doc, ReportKind.TEST, TEST_REPORT_NAMESPACE, generated_at)
