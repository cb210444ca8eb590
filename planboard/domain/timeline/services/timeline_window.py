"""
Timeline Window

The sequence of displayed time units of the planning board and the pixel
width of each unit cell. Hourly boards show two full days of hours; the day
based modes show every day from the week eight weeks before the reference
date through the week three months after it, weeks starting on Monday.
"""

import calendar
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from ..value_objects.enums import TimelineViewMode
from ..value_objects.moments import as_naive_datetime, start_of_day

REFERENCE_ZOOM = 50.0
MIN_CELL_WIDTH = 5.0
HOURLY_SPAN_DAYS = 2
WEEKS_BEFORE_REFERENCE = 8
MONTHS_AFTER_REFERENCE = 3


def _start_of_week(moment: datetime) -> datetime:
    return start_of_day(moment) - timedelta(days=moment.weekday())


def _add_months(moment: datetime, months: int) -> datetime:
    month_index = moment.month - 1 + months
    year = moment.year + month_index // 12
    month = month_index % 12 + 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


@dataclass(frozen=True)
class TimelineWindow:
    """Displayed units of a planning board, oldest first."""

    view_mode: TimelineViewMode
    units: tuple[datetime, ...]
    unit_cell_width: float

    def __len__(self) -> int:
        return len(self.units)

    @property
    def start(self) -> datetime:
        return self.unit_bounds(0)[0]

    @property
    def end(self) -> datetime:
        """Exclusive end of the last unit."""
        return self.unit_bounds(len(self.units) - 1)[1]

    def unit_bounds(self, index: int) -> tuple[datetime, datetime]:
        """
        Half-open ``[start, end)`` bounds of a unit.

        Hourly units last one hour; all other modes use whole calendar days.
        """
        unit = self.units[index]
        if self.view_mode.is_hourly:
            return unit, unit + timedelta(hours=1)
        day_start = start_of_day(unit)
        return day_start, day_start + timedelta(days=1)

    def index_of(self, moment: date | datetime) -> int | None:
        """Index of the unit containing the moment, or None if outside."""
        moment = as_naive_datetime(moment)
        for index in range(len(self.units)):
            unit_start, unit_end = self.unit_bounds(index)
            if unit_start <= moment < unit_end:
                return index
        return None


def build_timeline_window(
    view_mode: TimelineViewMode | str,
    reference_date: date | datetime,
    zoom: float = REFERENCE_ZOOM,
) -> TimelineWindow:
    """
    Build the displayed units for a view mode around a reference date.

    Args:
        view_mode: Board granularity
        reference_date: Day the board is centred on
        zoom: Zoom level; 50 is the reference zoom

    Returns:
        TimelineWindow with units and cell width
    """
    view_mode = TimelineViewMode(view_mode)
    reference = start_of_day(reference_date)

    if view_mode.is_hourly:
        units = tuple(
            reference + timedelta(hours=hour) for hour in range(24 * HOURLY_SPAN_DAYS)
        )
    else:
        range_start = _start_of_week(
            reference - timedelta(weeks=WEEKS_BEFORE_REFERENCE)
        )
        range_end = _start_of_week(
            _add_months(reference, MONTHS_AFTER_REFERENCE)
        ) + timedelta(days=6)
        day_count = (range_end - range_start).days + 1
        units = tuple(range_start + timedelta(days=day) for day in range(day_count))

    unit_cell_width = max(
        MIN_CELL_WIDTH, view_mode.base_cell_width * (zoom / REFERENCE_ZOOM)
    )
    return TimelineWindow(
        view_mode=view_mode, units=units, unit_cell_width=unit_cell_width
    )
