"""
Timeline Data Transfer Objects.

This module contains DTOs for planning board layout operations: lane
assignment over unit-indexed tasks, full board layout over dated tasks, and
timeline window descriptions.
"""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from planboard.core.config import settings
from planboard.domain.timeline import (
    DensityWarning,
    PlacementStatus,
    RowHeightLevel,
    StackedTask,
    TimelineViewMode,
)


class UnitTaskInput(BaseModel):
    """DTO for a task already positioned on timeline unit indices."""

    id: str = Field(..., min_length=1, max_length=100, description="Task ID")
    resource_id: str = Field(
        ..., min_length=1, max_length=100, description="Line or machine key"
    )
    start_index: int = Field(
        ..., ge=0, lt=settings.MAX_TIMELINE_UNITS, description="First covered unit"
    )
    end_index: int = Field(
        ...,
        ge=0,
        lt=settings.MAX_TIMELINE_UNITS,
        description="Last covered unit (inclusive)",
    )
    name: str = Field("", max_length=200, description="Display name")


class LaneAssignmentRequest(BaseModel):
    """DTO for a lane assignment request."""

    tasks: list[UnitTaskInput] = Field(
        ...,
        max_length=settings.MAX_TASKS_PER_REQUEST,
        description="Tasks in priority order; earlier tasks get lower lanes",
    )
    lane_ceiling: int | None = Field(
        None, ge=1, le=100, description="Override for the configured lane ceiling"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "tasks": [
                    {"id": "A", "resource_id": "LINE-01", "start_index": 0, "end_index": 3},
                    {"id": "B", "resource_id": "LINE-01", "start_index": 2, "end_index": 5},
                    {"id": "C", "resource_id": "LINE-02", "start_index": 1, "end_index": 4},
                ],
                "lane_ceiling": 10,
            }
        }
    )


class DensityWarningResponse(BaseModel):
    """DTO for a task clamped at the lane ceiling."""

    resource_id: str
    task_id: str
    lane_ceiling: int
    start_index: int
    end_index: int
    message: str

    @classmethod
    def from_event(cls, warning: DensityWarning) -> "DensityWarningResponse":
        return cls(**warning.to_dict())


class StackedTaskResponse(BaseModel):
    """DTO for a task with its assigned lane."""

    id: str
    resource_id: str
    name: str
    start_index: int
    end_index: int
    lane: int
    status: PlacementStatus

    @classmethod
    def from_domain(cls, stacked: StackedTask) -> "StackedTaskResponse":
        return cls(
            id=stacked.id,
            resource_id=stacked.resource_id,
            name=stacked.task.name,
            start_index=stacked.span.start_index,
            end_index=stacked.span.end_index,
            lane=stacked.lane,
            status=stacked.assignment.status,
        )


class LaneAssignmentResponse(BaseModel):
    """DTO for lane assignment results."""

    lane_ceiling: int
    tasks: list[StackedTaskResponse]
    lanes_by_resource: dict[str, int]
    warnings: list[DensityWarningResponse]


class ScheduledTaskInput(BaseModel):
    """DTO for a task allocated to a line between two dates."""

    id: str = Field(..., min_length=1, max_length=100, description="Task ID")
    resource_id: str = Field(
        ..., min_length=1, max_length=100, description="Line or machine key"
    )
    label: str = Field("", max_length=200, description="Display label")
    start_date: datetime | date = Field(..., description="Planned start")
    end_date: datetime | date = Field(..., description="Planned end")


class BoardLayoutRequest(BaseModel):
    """DTO for a full planning board layout request."""

    tasks: list[ScheduledTaskInput] = Field(
        ..., max_length=settings.MAX_TASKS_PER_REQUEST
    )
    reference_date: date = Field(..., description="Day the board is centred on")
    view_mode: TimelineViewMode | None = Field(
        None, description="Board granularity (defaults to configuration)"
    )
    zoom: float | None = Field(None, gt=0, le=400, description="Zoom level, 50 = 100%")
    row_height_level: RowHeightLevel | None = None
    lane_ceiling: int | None = Field(None, ge=1, le=100)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "reference_date": "2024-03-04",
                "view_mode": "daily",
                "zoom": 50,
                "row_height_level": "medium",
                "tasks": [
                    {
                        "id": "PO-1001",
                        "resource_id": "LINE-01",
                        "label": "Acme / Polo shirt",
                        "start_date": "2024-03-04",
                        "end_date": "2024-03-08",
                    },
                    {
                        "id": "PO-1002",
                        "resource_id": "LINE-01",
                        "label": "Acme / Chino",
                        "start_date": "2024-03-06",
                        "end_date": "2024-03-12",
                    },
                ],
            }
        }
    )


class BlockResponse(BaseModel):
    """DTO for a positioned task block on the board."""

    id: str
    resource_id: str
    label: str
    start_index: int
    end_index: int
    lane: int
    status: PlacementStatus
    left: float
    width: float
    top: float
    height: float


class BoardLayoutResponse(BaseModel):
    """DTO for a laid out planning board."""

    view_mode: TimelineViewMode
    unit_cell_width: float
    unit_count: int
    window_start: datetime
    window_end: datetime
    row_heights: dict[str, int]
    lane_ceiling: int
    blocks: list[BlockResponse]
    hidden_task_ids: list[str]
    lanes_by_resource: dict[str, int]
    warnings: list[DensityWarningResponse]


class TimelineWindowResponse(BaseModel):
    """DTO describing the displayed units of a board."""

    view_mode: TimelineViewMode
    unit_cell_width: float
    unit_count: int
    units: list[datetime]
