"""Result wrapper shared by resource fetchers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from kubereport.constants.enums import FetchState
from kubereport.report.errors import FetchError

T = TypeVar("T")


@dataclass
class FetchResult(Generic[T]):
    """Result of a single fetch.

    ``data`` is always usable: on failure it holds the empty value of the
    expected collection and ``error`` says why.
    """

    data: T
    error: FetchError | None = None
    duration_ms: float = 0.0

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def state(self) -> FetchState:
        return FetchState.SUCCESS if self.ok else FetchState.ERROR
