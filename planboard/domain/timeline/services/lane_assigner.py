"""
Lane Assignment Domain Service

Lays out overlapping tasks on a resource row as vertically stacked lanes.
Each task takes the lowest lane that is free over its whole span, with tasks
considered in input order so earlier tasks win the low lanes. Resources are
independent: every resource key gets its own occupancy map.
"""

from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import Protocol, TypeVar

from planboard.core.observability import LANE_CLAMPS, get_logger

from ...shared.exceptions import ValidationError
from ..entities.task import StackedTask, TimelineTask
from ..events.domain_events import DensityWarning
from ..value_objects.lane_assignment import LaneAssignment
from .occupancy import OccupancyMap

logger = get_logger(__name__)

DEFAULT_LANE_CEILING = 10


class _HasResource(Protocol):
    @property
    def resource_id(self) -> str: ...


R = TypeVar("R", bound=_HasResource)


def group_by_resource(items: Iterable[R]) -> dict[str, list[R]]:
    """
    Partition items by resource key.

    Groups appear in first-seen order and keep input order inside each group.
    """
    groups: dict[str, list[R]] = {}
    for item in items:
        groups.setdefault(item.resource_id, []).append(item)
    return groups


@dataclass
class LaneLayout:
    """Result of a lane assignment run, in the same order as the input."""

    stacked_tasks: list[StackedTask]
    lane_ceiling: int
    warnings: list[DensityWarning] = field(default_factory=list)

    def __iter__(self) -> Iterator[StackedTask]:
        return iter(self.stacked_tasks)

    def __len__(self) -> int:
        return len(self.stacked_tasks)

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)

    @property
    def clamped_tasks(self) -> list[StackedTask]:
        return [stacked for stacked in self.stacked_tasks if stacked.is_clamped]

    def lane_of(self, task_id: str) -> int | None:
        for stacked in self.stacked_tasks:
            if stacked.id == task_id:
                return stacked.lane
        return None

    def by_resource(self) -> dict[str, list[StackedTask]]:
        return group_by_resource(self.stacked_tasks)

    def lanes_used(self, resource_id: str) -> int:
        """Number of display rows needed for a resource (0 if it has no tasks)."""
        lanes = [s.lane for s in self.stacked_tasks if s.resource_id == resource_id]
        return max(lanes) + 1 if lanes else 0

    def lanes_by_resource(self) -> dict[str, int]:
        return {
            resource_id: max(s.lane for s in stacked) + 1
            for resource_id, stacked in self.by_resource().items()
        }


class LaneAssigner:
    """
    Assigns stack levels to timeline tasks.

    Lanes ``0 .. lane_ceiling - 1`` are searched. A task that fits none of
    them is given ``lane_ceiling`` as an overflow lane without claiming any
    occupancy, and a ``DensityWarning`` is recorded, logged, counted and
    passed to ``on_clamp`` when one is supplied.
    """

    def __init__(
        self,
        lane_ceiling: int = DEFAULT_LANE_CEILING,
        on_clamp: Callable[[DensityWarning], None] | None = None,
    ) -> None:
        if lane_ceiling < 1:
            raise ValidationError(
                "lane_ceiling",
                lane_ceiling,
                "must be at least 1",
                "INVALID_LANE_CEILING",
            )
        self._lane_ceiling = lane_ceiling
        self._on_clamp = on_clamp

    @property
    def lane_ceiling(self) -> int:
        return self._lane_ceiling

    def assign(self, tasks: Sequence[TimelineTask]) -> LaneLayout:
        """
        Assign a lane to every task.

        Args:
            tasks: Tasks in priority order; may mix several resources

        Returns:
            LaneLayout with one StackedTask per input task, in input order
        """
        occupancy_by_resource: dict[str, OccupancyMap] = {}
        stacked_tasks: list[StackedTask] = []
        warnings: list[DensityWarning] = []

        for task in tasks:
            occupancy = occupancy_by_resource.setdefault(
                task.resource_id, OccupancyMap()
            )
            lane = occupancy.first_free_lane(task.span, self._lane_ceiling)

            if lane is None:
                assignment = LaneAssignment.clamped(self._lane_ceiling)
                warning = DensityWarning(
                    resource_id=task.resource_id,
                    task_id=task.id,
                    lane_ceiling=self._lane_ceiling,
                    start_index=task.start_index,
                    end_index=task.end_index,
                )
                warnings.append(warning)
                self._report_clamp(warning)
            else:
                occupancy.claim(lane, task.span)
                assignment = LaneAssignment.placed(lane)

            stacked_tasks.append(task.with_lane(assignment))

        return LaneLayout(
            stacked_tasks=stacked_tasks,
            lane_ceiling=self._lane_ceiling,
            warnings=warnings,
        )

    def _report_clamp(self, warning: DensityWarning) -> None:
        LANE_CLAMPS.inc()
        logger.warning(
            "Lane ceiling reached, task clamped",
            resource_id=warning.resource_id,
            task_id=warning.task_id,
            lane_ceiling=warning.lane_ceiling,
            start_index=warning.start_index,
            end_index=warning.end_index,
        )
        if self._on_clamp is not None:
            self._on_clamp(warning)


def assign_lanes(
    tasks: Sequence[TimelineTask],
    lane_ceiling: int = DEFAULT_LANE_CEILING,
    on_clamp: Callable[[DensityWarning], None] | None = None,
) -> LaneLayout:
    """Convenience wrapper around ``LaneAssigner(...).assign(tasks)``."""
    return LaneAssigner(lane_ceiling=lane_ceiling, on_clamp=on_clamp).assign(tasks)
