"""Default page templates.

Writes the five background templates with a heading and a caption for every
anchored field. Captions sit above the field, or to its left for fields
anchored right of the left column (names and node state flags).
"""

from __future__ import annotations

import logging
from pathlib import Path

from reportlab.lib.units import mm
from reportlab.pdfgen.canvas import Canvas

from kubereport.constants.enums import TemplateKind
from kubereport.constants.limits import PAGE_HEIGHT_MM, PAGE_RIGHT_MARGIN_MM, PAGE_WIDTH_MM
from kubereport.report.errors import RenderError
from kubereport.report.layout import fields_for, resolve, validate_layout

logger = logging.getLogger(__name__)

LEFT_COLUMN_MM = 30.0
CAPTION_OFFSET_MM = 6.0
HEADING_Y_MM = 20.0
RULE_Y_MM = 38.0

FONT_BOLD = "Helvetica-Bold"
FS_HEADING = 16
FS_CAPTION = 9
FS_INLINE_CAPTION = 12

HEADINGS: dict[TemplateKind, str] = {
    TemplateKind.TITLE: "Kubernetes Health Check Report",
    TemplateKind.POD_DETAIL: "Pod Detail",
    TemplateKind.POD_LOGS: "Pod Logs",
    TemplateKind.NODE_DETAIL: "Node Detail",
    TemplateKind.PVC_DETAIL: "Persistent Volume Claim",
}

CAPTIONS: dict[str, str] = {
    "title.generated": "Generated",
    "title.namespace": "Namespace",
    "poddetail.name": "Pod:",
    "poddetail.labels": "Labels",
    "poddetail.taints": "Node taints",
    "poddetail.containers": "Containers",
    "poddetail.pvc": "Persistent volume claims",
    "poddetail.nodes": "Node",
    "poddetail.events": "Events",
    "podlogs.name": "Pod:",
    "podlogs.logs": "Log lines",
    "pvc.name": "Claim:",
    "pvc.state": "Status",
    "pvc.storageclass": "Storage class",
    "pvc.volume": "Volume",
    "pvc.labels": "Labels",
    "pvc.capacity": "Capacity",
    "pvc.events": "Events",
    "node.name": "Node:",
    "node.labels": "Labels",
    "node.taints": "Taints",
    "node.osimage": "OS image",
    "node.ip": "Internal IP",
    "node.schedulable": "Schedulable:",
    "node.state.networkunavailable": "Network unavailable:",
    "node.state.memorypressure": "Memory pressure:",
    "node.state.diskpressure": "Disk pressure:",
    "node.state.pidpressure": "PID pressure:",
    "node.state.ready": "Ready:",
    "node.events": "Events",
}


def _y(y_mm: float) -> float:
    return (PAGE_HEIGHT_MM - y_mm) * mm


def draw_template(canvas: Canvas, kind: TemplateKind) -> None:
    """Draw heading, rule and field captions of one template."""
    canvas.setFont(FONT_BOLD, FS_HEADING)
    canvas.drawString(LEFT_COLUMN_MM * mm, _y(HEADING_Y_MM), HEADINGS[kind])
    if kind is not TemplateKind.TITLE:
        canvas.line(
            LEFT_COLUMN_MM * mm,
            _y(RULE_Y_MM),
            (PAGE_WIDTH_MM - PAGE_RIGHT_MARGIN_MM) * mm,
            _y(RULE_Y_MM),
        )

    for field_name in fields_for(kind):
        anchor = resolve(field_name)
        caption = CAPTIONS[field_name]
        if anchor.x > LEFT_COLUMN_MM:
            canvas.setFont(FONT_BOLD, FS_INLINE_CAPTION)
            canvas.drawString(LEFT_COLUMN_MM * mm, _y(anchor.y), caption)
        else:
            canvas.setFont(FONT_BOLD, FS_CAPTION)
            canvas.drawString(anchor.x * mm, _y(anchor.y - CAPTION_OFFSET_MM), caption)


def write_default_templates(directory: str | Path) -> list[Path]:
    """Write all five templates into a directory, replacing existing files.

    Raises:
        RenderError: when a template cannot be written.
    """
    validate_layout(CAPTIONS)
    target = Path(directory)
    written: list[Path] = []
    try:
        target.mkdir(parents=True, exist_ok=True)
        for kind in TemplateKind:
            path = target / kind.file_name
            canvas = Canvas(str(path), pagesize=(PAGE_WIDTH_MM * mm, PAGE_HEIGHT_MM * mm))
            canvas.setTitle(HEADINGS[kind])
            draw_template(canvas, kind)
            canvas.showPage()
            canvas.save()
            written.append(path)
            logger.debug("Wrote template %s", path)
    except OSError as exc:
        raise RenderError(f"cannot write templates to {target}: {exc}") from exc
    return written
