"""
Planning Board Timeline Domain

Tasks allocated to production lines, their position on the board's time
axis, and the lane layout that keeps overlapping tasks visually apart.
"""

from .entities import ScheduledTask, StackedTask, TimelineTask
from .events import DensityWarning
from .services import (
    DEFAULT_LANE_CEILING,
    BlockGeometry,
    LaneAssigner,
    LaneLayout,
    OccupancyMap,
    TimelineWindow,
    assign_lanes,
    build_timeline_window,
    compute_block_geometry,
    discretize,
    discretize_all,
    find_lane_conflicts,
    group_by_resource,
)
from .value_objects import (
    LaneAssignment,
    PlacementStatus,
    RowHeightLevel,
    RowHeights,
    TimelineViewMode,
    UnitSpan,
)

__all__ = [
    # Entities
    "ScheduledTask",
    "StackedTask",
    "TimelineTask",
    # Events
    "DensityWarning",
    # Value Objects
    "LaneAssignment",
    "PlacementStatus",
    "RowHeightLevel",
    "RowHeights",
    "TimelineViewMode",
    "UnitSpan",
    # Domain Services
    "BlockGeometry",
    "DEFAULT_LANE_CEILING",
    "LaneAssigner",
    "LaneLayout",
    "OccupancyMap",
    "TimelineWindow",
    "assign_lanes",
    "build_timeline_window",
    "compute_block_geometry",
    "discretize",
    "discretize_all",
    "find_lane_conflicts",
    "group_by_resource",
]
