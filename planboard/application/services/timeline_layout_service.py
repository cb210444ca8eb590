"""
Timeline Layout Application Service

Runs the planning board layout pipeline for API requests: validate the
incoming tasks, place dated tasks on the timeline window, assign lanes per
resource and compute block geometry.
"""

from collections import Counter
from collections.abc import Callable, Sequence
from datetime import date
from typing import TypeVar

from planboard.application.dtos import (
    BlockResponse,
    BoardLayoutRequest,
    BoardLayoutResponse,
    DensityWarningResponse,
    LaneAssignmentRequest,
    LaneAssignmentResponse,
    ScheduledTaskInput,
    StackedTaskResponse,
    TimelineWindowResponse,
    UnitTaskInput,
)
from planboard.core.config import settings
from planboard.core.observability import get_logger, monitor_performance
from planboard.domain.shared.exceptions import (
    BusinessRuleError,
    MultipleValidationError,
    ValidationError,
)
from planboard.domain.timeline import (
    DensityWarning,
    LaneAssigner,
    RowHeightLevel,
    ScheduledTask,
    TimelineTask,
    TimelineViewMode,
    build_timeline_window,
    compute_block_geometry,
    discretize_all,
)

logger = get_logger(__name__)

In = TypeVar("In")
Out = TypeVar("Out")


def _build_all(items: Sequence[In], factory: Callable[[In], Out]) -> list[Out]:
    """Build domain objects, reporting every invalid item at once."""
    built: list[Out] = []
    errors: list[ValidationError] = []

    for item in items:
        try:
            built.append(factory(item))
        except ValidationError as e:
            errors.append(e)

    if len(errors) == 1:
        raise errors[0]
    if errors:
        raise MultipleValidationError(errors)
    return built


def _ensure_unique_ids(task_ids: list[str]) -> None:
    duplicates = sorted(task_id for task_id, n in Counter(task_ids).items() if n > 1)
    if duplicates:
        raise BusinessRuleError(
            "Task ids must be unique within a layout",
            {"duplicate_ids": ", ".join(duplicates)},
        )


def build_timeline_tasks(items: Sequence[UnitTaskInput]) -> list[TimelineTask]:
    tasks = _build_all(
        items,
        lambda item: TimelineTask.create(
            task_id=item.id,
            resource_id=item.resource_id,
            start_index=item.start_index,
            end_index=item.end_index,
            name=item.name,
        ),
    )
    _ensure_unique_ids([task.id for task in tasks])
    return tasks


def build_scheduled_tasks(items: Sequence[ScheduledTaskInput]) -> list[ScheduledTask]:
    tasks = _build_all(
        items,
        lambda item: ScheduledTask.create(
            task_id=item.id,
            resource_id=item.resource_id,
            start_date=item.start_date,
            end_date=item.end_date,
            label=item.label,
        ),
    )
    _ensure_unique_ids([task.id for task in tasks])
    return tasks


class TimelineLayoutService:
    """Application service for planning board layout."""

    def __init__(
        self,
        lane_ceiling: int | None = None,
        on_clamp: Callable[[DensityWarning], None] | None = None,
    ) -> None:
        self._lane_ceiling = (
            lane_ceiling if lane_ceiling is not None else settings.LANE_CEILING
        )
        self._on_clamp = on_clamp

    def _assigner(self, lane_ceiling: int | None) -> LaneAssigner:
        if lane_ceiling is None:
            lane_ceiling = self._lane_ceiling
        return LaneAssigner(lane_ceiling=lane_ceiling, on_clamp=self._on_clamp)

    @monitor_performance("lane_assignment")
    def assign_lanes(self, request: LaneAssignmentRequest) -> LaneAssignmentResponse:
        """
        Assign lanes to tasks that are already positioned on unit indices.

        Raises:
            ValidationError: If a task has a blank key or an inverted span
            MultipleValidationError: If several tasks are invalid
            BusinessRuleError: If task ids are not unique
        """
        tasks = build_timeline_tasks(request.tasks)
        layout = self._assigner(request.lane_ceiling).assign(tasks)

        logger.info(
            "Lanes assigned",
            task_count=len(layout),
            resource_count=len(layout.by_resource()),
            clamped_count=len(layout.warnings),
        )

        return LaneAssignmentResponse(
            lane_ceiling=layout.lane_ceiling,
            tasks=[StackedTaskResponse.from_domain(s) for s in layout],
            lanes_by_resource=layout.lanes_by_resource(),
            warnings=[DensityWarningResponse.from_event(w) for w in layout.warnings],
        )

    @monitor_performance("board_layout")
    def build_layout(self, request: BoardLayoutRequest) -> BoardLayoutResponse:
        """
        Lay out dated tasks on a planning board.

        Tasks that do not touch the displayed window are reported in
        ``hidden_task_ids`` and take no part in lane assignment.
        """
        view_mode = request.view_mode or TimelineViewMode(settings.DEFAULT_VIEW_MODE)
        zoom = request.zoom if request.zoom is not None else settings.DEFAULT_ZOOM
        level = request.row_height_level or RowHeightLevel(
            settings.DEFAULT_ROW_HEIGHT_LEVEL
        )
        row_heights = level.heights

        window = build_timeline_window(view_mode, request.reference_date, zoom)
        scheduled = build_scheduled_tasks(request.tasks)
        visible, hidden_ids = discretize_all(scheduled, window)
        layout = self._assigner(request.lane_ceiling).assign(visible)

        labels = {task.id: task.label for task in scheduled}
        blocks = []
        for stacked in layout:
            geometry = compute_block_geometry(
                stacked, window.unit_cell_width, row_heights
            )
            blocks.append(
                BlockResponse(
                    id=stacked.id,
                    resource_id=stacked.resource_id,
                    label=labels[stacked.id],
                    start_index=stacked.span.start_index,
                    end_index=stacked.span.end_index,
                    lane=stacked.lane,
                    status=stacked.assignment.status,
                    **geometry.to_dict(),
                )
            )

        logger.info(
            "Board layout built",
            view_mode=view_mode.value,
            unit_count=len(window),
            visible_count=len(visible),
            hidden_count=len(hidden_ids),
            clamped_count=len(layout.warnings),
        )

        return BoardLayoutResponse(
            view_mode=view_mode,
            unit_cell_width=window.unit_cell_width,
            unit_count=len(window),
            window_start=window.start,
            window_end=window.end,
            row_heights=row_heights.to_dict(),
            lane_ceiling=layout.lane_ceiling,
            blocks=blocks,
            hidden_task_ids=hidden_ids,
            lanes_by_resource=layout.lanes_by_resource(),
            warnings=[DensityWarningResponse.from_event(w) for w in layout.warnings],
        )

    def describe_window(
        self,
        view_mode: TimelineViewMode | None = None,
        reference_date: date | None = None,
        zoom: float | None = None,
    ) -> TimelineWindowResponse:
        view_mode = view_mode or TimelineViewMode(settings.DEFAULT_VIEW_MODE)
        window = build_timeline_window(
            view_mode,
            reference_date or date.today(),
            zoom if zoom is not None else settings.DEFAULT_ZOOM,
        )
        return TimelineWindowResponse(
            view_mode=window.view_mode,
            unit_cell_width=window.unit_cell_width,
            unit_count=len(window),
            units=list(window.units),
        )
