from .timeline_dtos import (
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

__all__ = [
    "BlockResponse",
    "BoardLayoutRequest",
    "BoardLayoutResponse",
    "DensityWarningResponse",
    "LaneAssignmentRequest",
    "LaneAssignmentResponse",
    "ScheduledTaskInput",
    "StackedTaskResponse",
    "TimelineWindowResponse",
    "UnitTaskInput",
]
