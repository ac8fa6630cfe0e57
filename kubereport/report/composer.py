"""Page composer - stamps display fields onto imported page templates.

Each page is a fresh A4 page of the in-progress document: the template is
merged in as background, then a text overlay drawn with the ReportLab canvas
is merged on top.

Sequence fields use a bounded text box: lines are wrapped to the box width
and drawn with a fixed leading from the anchor down to the box bottom.
Lines that do not fit are replaced by a "... (N more lines)" marker, so
nothing is drawn past the page margin. Scalar fields stay on one line and
are cut with an ellipsis when wider than their box.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Sequence
from datetime import datetime
from io import BytesIO
from pathlib import Path

from pypdf import PageObject, PdfReader, PdfWriter
from pypdf.errors import PyPdfError
from reportlab.lib.units import mm
from reportlab.lib.utils import simpleSplit
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFError, TTFont
from reportlab.pdfgen.canvas import Canvas

from kubereport.constants.defaults import (
    FONT_NAME_DEFAULT,
    FONT_SIZE_DEFAULT,
    LINE_STEP_MM_DEFAULT,
)
from kubereport.constants.enums import TemplateKind
from kubereport.constants.limits import (
    PAGE_BOTTOM_MARGIN_MM,
    PAGE_HEIGHT_MM,
    PAGE_RIGHT_MARGIN_MM,
    PAGE_WIDTH_MM,
)
from kubereport.constants.values import TITLE_TIMESTAMP_FORMAT
from kubereport.controllers.cluster.parsers.field_formatter import format_bool
from kubereport.report.errors import RenderError
from kubereport.report.layout import resolve, validate_layout

logger = logging.getLogger(__name__)

PAGE_WIDTH_PT = PAGE_WIDTH_MM * mm
PAGE_HEIGHT_PT = PAGE_HEIGHT_MM * mm

ELLIPSIS = "..."


def fit_to_box(lines: Sequence[str], capacity: int) -> list[str]:
    """Cut lines down to the box capacity, ending with an overflow marker."""
    if len(lines) <= capacity:
        return list(lines)
    hidden = len(lines) - capacity + 1
    return [*lines[: capacity - 1], f"... ({hidden} more lines)"]


class TemplateSet:
    """Page templates imported once per report run."""

    def __init__(self, pages: dict[TemplateKind, PageObject]) -> None:
        missing = [kind.value for kind in TemplateKind if kind not in pages]
        if missing:
            raise RenderError(f"missing page templates: {', '.join(missing)}")
        self._pages = pages

    @classmethod
    def load(cls, directory: str | Path) -> TemplateSet:
        """Import the first page of every template file in a directory.

        Raises:
            RenderError: when a template file is missing, unreadable or empty.
        """
        template_dir = Path(directory)
        pages: dict[TemplateKind, PageObject] = {}
        for kind in TemplateKind:
            path = template_dir / kind.file_name
            try:
                reader = PdfReader(path)
                pages[kind] = reader.pages[0]
            except (OSError, PyPdfError, IndexError) as exc:
                raise RenderError(f"cannot import template {path}: {exc}") from exc
            logger.debug("Imported template %s", path)
        return cls(pages)

    def get(self, kind: TemplateKind) -> PageObject:
        return self._pages[kind]


class ReportDocument:
    """Ordered pages of one report run. Pages are only ever appended."""

    def __init__(self) -> None:
        self._writer = PdfWriter()

    @property
    def page_count(self) -> int:
        return len(self._writer.pages)

    def new_page(self) -> PageObject:
        return self._writer.add_blank_page(width=PAGE_WIDTH_PT, height=PAGE_HEIGHT_PT)

    def to_bytes(self) -> bytes:
        """Serialize the document.

        Raises:
            RenderError: when the PDF writer fails.
        """
        buffer = BytesIO()
        try:
            self._writer.write(buffer)
        except (PyPdfError, OSError, ValueError) as exc:
            raise RenderError(f"cannot serialize report: {exc}") from exc
        return buffer.getvalue()


class PageComposer:
    """Stamps display fields at their layout anchors, one page per call."""

    STAMPED_FIELDS = (
        "title.generated",
        "title.namespace",
        "poddetail.name",
        "poddetail.labels",
        "poddetail.taints",
        "poddetail.containers",
        "poddetail.pvc",
        "poddetail.nodes",
        "poddetail.events",
        "podlogs.name",
        "podlogs.logs",
        "node.name",
        "node.labels",
        "node.taints",
        "node.osimage",
        "node.ip",
        "node.schedulable",
        "node.state.networkunavailable",
        "node.state.memorypressure",
        "node.state.diskpressure",
        "node.state.pidpressure",
        "node.state.ready",
        "node.events",
        "pvc.name",
        "pvc.state",
        "pvc.storageclass",
        "pvc.volume",
        "pvc.labels",
        "pvc.capacity",
        "pvc.events",
    )

    def __init__(
        self,
        templates: TemplateSet,
        *,
        font_name: str = FONT_NAME_DEFAULT,
        font_size: int = FONT_SIZE_DEFAULT,
        line_step_mm: float = LINE_STEP_MM_DEFAULT,
        font_path: str | Path | None = None,
    ) -> None:
        """Initialize page composer.

        Args:
            templates: Imported page templates
            font_name: Font for all stamped text
            font_size: Font size in points
            line_step_mm: Leading of sequence fields
            font_path: TrueType file registered under ``font_name``; None
                uses a built-in font
        """
        validate_layout(self.STAMPED_FIELDS)
        if font_path is not None:
            try:
                pdfmetrics.registerFont(TTFont(font_name, str(font_path)))
            except (TTFError, OSError) as exc:
                raise RenderError(f"cannot load font {font_path}: {exc}") from exc
        try:
            pdfmetrics.getFont(font_name)
        except KeyError as exc:
            raise RenderError(f"unknown font {font_name!r}") from exc
        self.templates = templates
        self.font_name = font_name
        self.font_size = font_size
        self.line_step_mm = line_step_mm

    # ------------------------------------------------------------------
    # Pages
    # ------------------------------------------------------------------

    def add_title_page(self, doc: ReportDocument, namespace: str, generated_at: datetime) -> None:
        def draw(canvas: Canvas) -> None:
            self._draw_text(canvas, "title.generated", generated_at.strftime(TITLE_TIMESTAMP_FORMAT).strip())
            self._draw_text(canvas, "title.namespace", namespace)

        self._compose(doc, TemplateKind.TITLE, draw)

    def add_pod_detail_page(
        self,
        doc: ReportDocument,
        pod_name: str,
        labels: str,
        taints: str,
        containers: Sequence[str],
        pvc_names: str,
        node_name: str,
        events: Sequence[str],
    ) -> None:
        def draw(canvas: Canvas) -> None:
            self._draw_text(canvas, "poddetail.name", pod_name)
            self._draw_text(canvas, "poddetail.labels", labels)
            self._draw_text(canvas, "poddetail.taints", taints)
            self._draw_block(canvas, "poddetail.containers", containers)
            self._draw_text(canvas, "poddetail.pvc", pvc_names)
            self._draw_text(canvas, "poddetail.nodes", node_name)
            self._draw_block(canvas, "poddetail.events", events)

        self._compose(doc, TemplateKind.POD_DETAIL, draw)

    def add_pod_logs_page(self, doc: ReportDocument, pod_name: str, logs: Sequence[str]) -> None:
        def draw(canvas: Canvas) -> None:
            self._draw_text(canvas, "podlogs.name", pod_name)
            self._draw_block(canvas, "podlogs.logs", logs)

        self._compose(doc, TemplateKind.POD_LOGS, draw)

    def add_node_page(
        self,
        doc: ReportDocument,
        node_name: str,
        labels: str,
        taints: str,
        os_image: str,
        internal_ips: str,
        schedulable: bool | None,
        network_unavailable: bool | None,
        memory_pressure: bool | None,
        disk_pressure: bool | None,
        pid_pressure: bool | None,
        ready: str,
        events: Sequence[str],
    ) -> None:
        def draw(canvas: Canvas) -> None:
            self._draw_text(canvas, "node.name", node_name)
            self._draw_text(canvas, "node.labels", labels)
            self._draw_text(canvas, "node.taints", taints)
            self._draw_text(canvas, "node.osimage", os_image)
            self._draw_text(canvas, "node.ip", internal_ips)
            self._draw_text(canvas, "node.schedulable", format_bool(schedulable))
            self._draw_text(canvas, "node.state.networkunavailable", format_bool(network_unavailable))
            self._draw_text(canvas, "node.state.memorypressure", format_bool(memory_pressure))
            self._draw_text(canvas, "node.state.diskpressure", format_bool(disk_pressure))
            self._draw_text(canvas, "node.state.pidpressure", format_bool(pid_pressure))
            self._draw_text(canvas, "node.state.ready", ready)
            self._draw_block(canvas, "node.events", events)

        self._compose(doc, TemplateKind.NODE_DETAIL, draw)

    def add_pvc_page(
        self,
        doc: ReportDocument,
        pvc_name: str,
        state: str,
        storage_class: str,
        volume: str,
        labels: str,
        capacity: str,
        events: Sequence[str],
    ) -> None:
        def draw(canvas: Canvas) -> None:
            self._draw_text(canvas, "pvc.name", pvc_name)
            self._draw_text(canvas, "pvc.state", state)
            self._draw_text(canvas, "pvc.storageclass", storage_class)
            self._draw_text(canvas, "pvc.volume", volume)
            self._draw_text(canvas, "pvc.labels", labels)
            self._draw_text(canvas, "pvc.capacity", capacity)
            self._draw_block(canvas, "pvc.events", events)

        self._compose(doc, TemplateKind.PVC_DETAIL, draw)

    # ------------------------------------------------------------------
    # Text layout
    # ------------------------------------------------------------------

    def box_capacity(self, field_name: str) -> int:
        """Number of lines that fit in a field's text box."""
        anchor = resolve(field_name)
        bottom = PAGE_HEIGHT_MM - PAGE_BOTTOM_MARGIN_MM
        if anchor.height is not None:
            bottom = min(bottom, anchor.y + anchor.height)
        return max(1, math.floor((bottom - anchor.y) / self.line_step_mm + 1e-9) + 1)

    @staticmethod
    def box_width(field_name: str) -> float:
        """Width in points from a field's anchor to the right page margin."""
        return (PAGE_WIDTH_MM - PAGE_RIGHT_MARGIN_MM - resolve(field_name).x) * mm

    def fit_line(self, field_name: str, text: str) -> str:
        """Cut a scalar field to its box width, ending with an ellipsis."""
        width_pt = self.box_width(field_name)

        def width(value: str) -> float:
            return pdfmetrics.stringWidth(value, self.font_name, self.font_size)

        if width(text) <= width_pt:
            return text
        logger.warning("Field %s is wider than its box; truncating", field_name)
        cut = text
        while cut and width(cut + ELLIPSIS) > width_pt:
            cut = cut[:-1]
        return f"{cut.rstrip()}{ELLIPSIS}"

    def layout_lines(self, field_name: str, lines: Sequence[str]) -> list[str]:
        """Wrap a sequence field to its box width and cut it to the box height."""
        width_pt = self.box_width(field_name)
        wrapped: list[str] = []
        for paragraph in "\n".join(lines).split("\n"):
            wrapped.extend(simpleSplit(paragraph, self.font_name, self.font_size, width_pt) or [""])

        capacity = self.box_capacity(field_name)
        if len(wrapped) > capacity:
            logger.warning(
                "Field %s has %d lines, box holds %d; truncating",
                field_name,
                len(wrapped),
                capacity,
            )
        return fit_to_box(wrapped, capacity)

    @staticmethod
    def _baseline(y_mm: float) -> float:
        return (PAGE_HEIGHT_MM - y_mm) * mm

    def _draw_text(self, canvas: Canvas, field_name: str, text: str) -> None:
        anchor = resolve(field_name)
        canvas.drawString(anchor.x * mm, self._baseline(anchor.y), self.fit_line(field_name, text))

    def _draw_block(self, canvas: Canvas, field_name: str, lines: Sequence[str]) -> None:
        anchor = resolve(field_name)
        for index, line in enumerate(self.layout_lines(field_name, lines)):
            canvas.drawString(
                anchor.x * mm, self._baseline(anchor.y + index * self.line_step_mm), line
            )

    # ------------------------------------------------------------------
    # Page assembly
    # ------------------------------------------------------------------

    def _render_overlay(self, draw: Callable[[Canvas], None]) -> PageObject:
        buffer = BytesIO()
        canvas = Canvas(buffer, pagesize=(PAGE_WIDTH_PT, PAGE_HEIGHT_PT))
        canvas.setFont(self.font_name, self.font_size)
        draw(canvas)
        canvas.showPage()
        canvas.save()
        buffer.seek(0)
        return PdfReader(buffer).pages[0]

    def _compose(
        self,
        doc: ReportDocument,
        template_kind: TemplateKind,
        draw: Callable[[Canvas], None],
    ) -> None:
        page = doc.new_page()
        try:
            page.merge_page(self.templates.get(template_kind))
            page.merge_page(self._render_overlay(draw))
        except (PyPdfError, OSError, ValueError) as exc:
            raise RenderError(f"cannot render {template_kind.value} page: {exc}") from exc
        logger.debug("Rendered %s page %d", template_kind.value, doc.page_count)
