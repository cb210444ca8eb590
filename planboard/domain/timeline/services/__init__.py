"""Domain services for the planning board timeline."""

from .block_geometry import BlockGeometry, compute_block_geometry
from .discretizer import discretize, discretize_all
from .lane_assigner import (
    DEFAULT_LANE_CEILING,
    LaneAssigner,
    LaneLayout,
    assign_lanes,
    group_by_resource,
)
from .lane_validator import find_lane_conflicts
from .occupancy import OccupancyMap
from .timeline_window import TimelineWindow, build_timeline_window

__all__ = [
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
