"""
Domain Events

Events raised while laying out the planning board.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4


@dataclass(frozen=True)
class DensityWarning:
    """
    Raised when a task cannot be placed below the lane ceiling.

    The task is parked on the ceiling lane, which it may share with other
    clamped tasks, so the board under-represents how crowded the resource is
    over that span.
    """

    resource_id: str
    task_id: str
    lane_ceiling: int
    start_index: int
    end_index: int
    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=datetime.now)

    @property
    def message(self) -> str:
        return (
            f"Task {self.task_id} on resource {self.resource_id} "
            f"(units {self.start_index}-{self.end_index}) overlaps at least "
            f"{self.lane_ceiling} other tasks and was clamped to lane "
            f"{self.lane_ceiling}"
        )

    def to_dict(self) -> dict[str, str | int]:
        return {
            "resource_id": self.resource_id,
            "task_id": self.task_id,
            "lane_ceiling": self.lane_ceiling,
            "start_index": self.start_index,
            "end_index": self.end_index,
            "message": self.message,
        }
