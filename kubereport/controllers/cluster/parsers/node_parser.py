"""Node parser - derives node page indicators from a node detail record."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass

from kubereport.constants.enums import ConditionType
from kubereport.constants.values import UNKNOWN
from kubereport.models.core.resources import NodeCondition, NodeDetail

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NodeIndicators:
    """Pressure, availability and readiness indicators of one node.

    Pressure flags are tri-state: None means the condition was not reported.
    """

    schedulable: bool | None
    network_unavailable: bool | None
    memory_pressure: bool | None
    disk_pressure: bool | None
    pid_pressure: bool | None
    ready: str


class NodeParser:
    """Parses node conditions into page indicators.

    Condition types are expected to be unique per node. When a type repeats,
    the first occurrence in scan order wins and the duplicate is logged as a
    data-quality issue.
    """

    _PRESSURE_CONDITIONS = (
        ConditionType.NETWORK_UNAVAILABLE,
        ConditionType.MEMORY_PRESSURE,
        ConditionType.DISK_PRESSURE,
        ConditionType.PID_PRESSURE,
    )

    def find_condition(
        self, conditions: Sequence[NodeCondition], condition_type: ConditionType
    ) -> NodeCondition | None:
        """Return the first condition of the given type."""
        for condition in conditions:
            if condition.type == condition_type.value:
                return condition
        return None

    def duplicate_condition_types(self, conditions: Sequence[NodeCondition]) -> list[str]:
        counts = Counter(condition.type for condition in conditions)
        return [condition_type for condition_type, count in counts.items() if count > 1]

    def _condition_flag(
        self, conditions: Sequence[NodeCondition], condition_type: ConditionType
    ) -> bool | None:
        condition = self.find_condition(conditions, condition_type)
        if condition is None or condition.status not in ("True", "False"):
            return None
        return condition.status == "True"

    def parse_indicators(self, detail: NodeDetail, fallback_ready: str = "") -> NodeIndicators:
        """Derive indicators for the node page.

        Args:
            detail: Node detail record
            fallback_ready: Readiness from the node list, used when the
                detail carries no Ready condition

        Returns:
            NodeIndicators for the node.
        """
        conditions = detail.conditions
        duplicates = self.duplicate_condition_types(conditions)
        if duplicates:
            logger.warning(
                "Node %s reports duplicate condition types %s; using first occurrence",
                detail.name,
                ", ".join(sorted(duplicates)),
            )

        flags = {
            condition_type: self._condition_flag(conditions, condition_type)
            for condition_type in self._PRESSURE_CONDITIONS
        }
        ready_condition = self.find_condition(conditions, ConditionType.READY)
        if ready_condition is not None and ready_condition.status:
            ready = ready_condition.status
        else:
            ready = fallback_ready or detail.ready or UNKNOWN

        return NodeIndicators(
            schedulable=not detail.unschedulable,
            network_unavailable=flags[ConditionType.NETWORK_UNAVAILABLE],
            memory_pressure=flags[ConditionType.MEMORY_PRESSURE],
            disk_pressure=flags[ConditionType.DISK_PRESSURE],
            pid_pressure=flags[ConditionType.PID_PRESSURE],
            ready=ready,
        )

    def unavailable_indicators(self, fallback_ready: str = "") -> NodeIndicators:
        """Indicators for a node whose detail could not be fetched."""
        return NodeIndicators(
            schedulable=None,
            network_unavailable=None,
            memory_pressure=None,
            disk_pressure=None,
            pid_pressure=None,
            ready=fallback_ready or UNKNOWN,
        )
