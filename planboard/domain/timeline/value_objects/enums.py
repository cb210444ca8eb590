"""Domain enums for the planning board timeline."""

from enum import Enum

from .row_heights import ROW_HEIGHT_CONFIG, RowHeights


class TimelineViewMode(str, Enum):
    """Granularity of the planning board time axis."""

    HOURLY = "hourly"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"

    @property
    def is_hourly(self) -> bool:
        """Hourly boards use one-hour units; every other mode uses days."""
        return self is TimelineViewMode.HOURLY

    @property
    def base_cell_width(self) -> int:
        """Unit cell width in pixels at the reference zoom level."""
        return 25 if self.is_hourly else 40


class RowHeightLevel(str, Enum):
    """Density setting for resource rows."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"

    @property
    def heights(self) -> RowHeights:
        return ROW_HEIGHT_CONFIG[self.value]


class PlacementStatus(str, Enum):
    """Outcome of placing a task on a lane."""

    PLACED = "placed"  # lowest free lane below the ceiling
    CLAMPED = "clamped"  # no free lane below the ceiling; parked on the ceiling
