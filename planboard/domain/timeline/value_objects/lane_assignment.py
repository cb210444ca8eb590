"""
Lane Assignment Value Object

The stack level given to a task, together with whether it was a genuine
placement or a clamp at the lane ceiling.
"""

from dataclasses import dataclass

from ...shared.exceptions import ValidationError
from .enums import PlacementStatus


@dataclass(frozen=True)
class LaneAssignment:
    """A non-negative lane index and how it was obtained."""

    lane: int
    status: PlacementStatus = PlacementStatus.PLACED

    def __post_init__(self) -> None:
        if self.lane < 0:
            raise ValidationError("lane", self.lane, "must be non-negative")

    @classmethod
    def placed(cls, lane: int) -> "LaneAssignment":
        return cls(lane=lane, status=PlacementStatus.PLACED)

    @classmethod
    def clamped(cls, lane_ceiling: int) -> "LaneAssignment":
        """Overflow assignment for a task that found no free lane."""
        return cls(lane=lane_ceiling, status=PlacementStatus.CLAMPED)

    @property
    def is_clamped(self) -> bool:
        return self.status is PlacementStatus.CLAMPED
