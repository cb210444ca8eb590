"""Per-resource record of which lanes are claimed at each time unit."""

from collections import defaultdict

from ..value_objects.unit_span import UnitSpan


class OccupancyMap:
    """
    Lanes already claimed at each unit of a single resource row.

    Only lives for one layout computation; one instance per resource key.
    """

    def __init__(self) -> None:
        self._claimed: defaultdict[int, set[int]] = defaultdict(set)

    def is_free(self, lane: int, span: UnitSpan) -> bool:
        """True if no unit of the span has the lane claimed."""
        for unit in span.units():
            claimed = self._claimed.get(unit)
            if claimed is not None and lane in claimed:
                return False
        return True

    def first_free_lane(self, span: UnitSpan, lane_ceiling: int) -> int | None:
        """Lowest lane below the ceiling that is free over the whole span."""
        for lane in range(lane_ceiling):
            if self.is_free(lane, span):
                return lane
        return None

    def claim(self, lane: int, span: UnitSpan) -> None:
        for unit in span.units():
            self._claimed[unit].add(lane)
