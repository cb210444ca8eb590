"""Checks a lane layout against the no-overlap-per-lane invariant."""

from collections.abc import Iterable

from ..entities.task import StackedTask


def find_lane_conflicts(stacked_tasks: Iterable[StackedTask]) -> list[str]:
    """
    Report every pair of tasks sharing a resource and lane that overlap.

    Clamped tasks share the overflow lane by construction and are skipped.

    Returns:
        List of violations; empty when the layout is valid
    """
    by_lane: dict[tuple[str, int], list[StackedTask]] = {}
    for stacked in stacked_tasks:
        if stacked.is_clamped:
            continue
        by_lane.setdefault((stacked.resource_id, stacked.lane), []).append(stacked)

    violations = []
    for (resource_id, lane), lane_tasks in by_lane.items():
        for i, first in enumerate(lane_tasks):
            for second in lane_tasks[i + 1 :]:
                if first.span.overlaps_with(second.span):
                    violations.append(
                        f"Resource {resource_id} lane {lane}: task {first.id} "
                        f"({first.span}) overlaps task {second.id} ({second.span})"
                    )

    return violations
