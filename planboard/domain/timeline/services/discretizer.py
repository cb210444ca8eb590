"""
Date-to-unit discretization.

Maps calendar-dated tasks onto the unit indices of a timeline window. A unit
is covered when the task starts before the unit ends and ends on or after the
unit starts; the task spans from its first covered unit to its last.
"""

from collections.abc import Iterable

from ..entities.task import ScheduledTask, TimelineTask
from .timeline_window import TimelineWindow


def discretize(task: ScheduledTask, window: TimelineWindow) -> TimelineTask | None:
    """
    Position a scheduled task on the window.

    Returns:
        TimelineTask spanning the covered units, or None if the task does not
        touch any displayed unit
    """
    start_index: int | None = None
    end_index: int | None = None

    for index in range(len(window)):
        unit_start, unit_end = window.unit_bounds(index)
        if task.start_date < unit_end and task.end_date >= unit_start:
            if start_index is None:
                start_index = index
            end_index = index
        elif start_index is not None:
            break

    if start_index is None or end_index is None:
        return None

    return TimelineTask.create(
        task_id=task.id,
        resource_id=task.resource_id,
        start_index=start_index,
        end_index=min(end_index, len(window) - 1),
        name=task.label,
    )


def discretize_all(
    tasks: Iterable[ScheduledTask], window: TimelineWindow
) -> tuple[list[TimelineTask], list[str]]:
    """
    Discretize many tasks, keeping input order.

    Returns:
        Visible timeline tasks and the ids of tasks outside the window
    """
    visible: list[TimelineTask] = []
    hidden_ids: list[str] = []
    for task in tasks:
        timeline_task = discretize(task, window)
        if timeline_task is None:
            hidden_ids.append(task.id)
        else:
            visible.append(timeline_task)
    return visible, hidden_ids
