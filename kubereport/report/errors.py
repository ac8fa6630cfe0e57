"""Report run error taxonomy.

Every error carries the pipeline stage it came from so a caller can tell a
missing namespace from a rendering or storage problem.
"""

from __future__ import annotations


class ReportError(Exception):
    """Base exception for report runs."""

    stage = "report"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.stage}: {self.message}"


class ScopeNotFoundError(ReportError):
    """Raised when the requested namespace does not exist."""

    stage = "validate"

    def __init__(self, namespace: str, detail: str | None = None) -> None:
        message = f"namespace {namespace!r} not found"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
        self.namespace = namespace


class FetchError(ReportError):
    """A collection or detail fetch failed (transport or decode)."""

    stage = "fetch"

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"GET {path} failed: {reason}")
        self.path = path
        self.reason = reason


class RenderError(ReportError):
    """Template import, page drawing or document serialization failed."""

    stage = "render"


class StoreError(ReportError):
    """Writing the finished report file failed."""

    stage = "store"
