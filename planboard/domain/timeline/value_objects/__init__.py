"""Value objects for the planning board timeline."""

from .enums import PlacementStatus, RowHeightLevel, TimelineViewMode
from .lane_assignment import LaneAssignment
from .moments import as_naive_datetime, start_of_day
from .row_heights import ROW_HEIGHT_CONFIG, RowHeights
from .unit_span import UnitSpan

__all__ = [
    "LaneAssignment",
    "PlacementStatus",
    "ROW_HEIGHT_CONFIG",
    "RowHeightLevel",
    "RowHeights",
    "TimelineViewMode",
    "UnitSpan",
    "as_naive_datetime",
    "start_of_day",
]
