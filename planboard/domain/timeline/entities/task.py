"""
Timeline Task Entities

A ``ScheduledTask`` is an order allocation on a production line expressed in
calendar time. Once mapped onto a timeline window it becomes a
``TimelineTask`` whose position is a span of unit indices, and after lane
assignment a ``StackedTask``.
"""

from dataclasses import dataclass
from datetime import date, datetime

from ...shared.exceptions import ValidationError
from ..value_objects.lane_assignment import LaneAssignment
from ..value_objects.moments import as_naive_datetime
from ..value_objects.unit_span import UnitSpan


def _require_text(field_name: str, value: str) -> None:
    if not value or not value.strip():
        raise ValidationError(field_name, value, "must not be empty", "REQUIRED_FIELD")


@dataclass(frozen=True)
class ScheduledTask:
    """A task allocated to a resource between two calendar moments."""

    id: str
    resource_id: str
    start_date: datetime
    end_date: datetime
    label: str = ""

    def __post_init__(self) -> None:
        _require_text("id", self.id)
        _require_text("resource_id", self.resource_id)
        # frozen: normalize through object.__setattr__
        object.__setattr__(self, "start_date", as_naive_datetime(self.start_date))
        object.__setattr__(self, "end_date", as_naive_datetime(self.end_date))
        if self.end_date < self.start_date:
            raise ValidationError(
                "end_date",
                self.end_date.isoformat(),
                f"must not be before start_date {self.start_date.isoformat()}",
                "INVERTED_DATE_RANGE",
            )

    @classmethod
    def create(
        cls,
        task_id: str,
        resource_id: str,
        start_date: date | datetime,
        end_date: date | datetime,
        label: str = "",
    ) -> "ScheduledTask":
        return cls(
            id=task_id,
            resource_id=resource_id,
            start_date=start_date,  # type: ignore[arg-type]
            end_date=end_date,  # type: ignore[arg-type]
            label=label,
        )


@dataclass(frozen=True)
class TimelineTask:
    """A task positioned on a resource row as an inclusive span of units."""

    id: str
    resource_id: str
    span: UnitSpan
    name: str = ""

    def __post_init__(self) -> None:
        _require_text("id", self.id)
        _require_text("resource_id", self.resource_id)

    @classmethod
    def create(
        cls,
        task_id: str,
        resource_id: str,
        start_index: int,
        end_index: int,
        name: str = "",
    ) -> "TimelineTask":
        """
        Create a TimelineTask from raw unit indices.

        Raises:
            ValidationError: If the identifiers are blank or the span is invalid
        """
        return cls(
            id=task_id,
            resource_id=resource_id,
            span=UnitSpan(start_index, end_index),
            name=name,
        )

    @property
    def start_index(self) -> int:
        return self.span.start_index

    @property
    def end_index(self) -> int:
        return self.span.end_index

    def overlaps(self, other: "TimelineTask") -> bool:
        """True when both tasks sit on the same resource and share a unit."""
        return self.resource_id == other.resource_id and self.span.overlaps_with(
            other.span
        )

    def with_lane(self, assignment: LaneAssignment) -> "StackedTask":
        return StackedTask(task=self, assignment=assignment)


@dataclass(frozen=True)
class StackedTask:
    """A timeline task annotated with its lane."""

    task: TimelineTask
    assignment: LaneAssignment

    @property
    def id(self) -> str:
        return self.task.id

    @property
    def resource_id(self) -> str:
        return self.task.resource_id

    @property
    def span(self) -> UnitSpan:
        return self.task.span

    @property
    def lane(self) -> int:
        return self.assignment.lane

    @property
    def is_clamped(self) -> bool:
        return self.assignment.is_clamped
