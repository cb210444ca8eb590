"""
Unit Span Value Object

An inclusive range of discrete time-unit indices on a planning board timeline.
A span that starts and ends on the same index covers exactly one unit.
"""

from ...shared.exceptions import ValidationError


class UnitSpan:
    """
    Inclusive ``[start_index, end_index]`` range of timeline units.

    Indices refer to positions in the displayed unit sequence of a timeline
    window (hours or days), so they are never negative.
    """

    __slots__ = ("_start_index", "_end_index")

    def __init__(self, start_index: int, end_index: int) -> None:
        """
        Initialize a UnitSpan.

        Args:
            start_index: First covered unit
            end_index: Last covered unit (inclusive)

        Raises:
            ValidationError: If the span is negative or inverted
        """
        if start_index < 0:
            raise ValidationError(
                "start_index",
                start_index,
                "must be non-negative",
                "NEGATIVE_UNIT_INDEX",
            )
        if start_index > end_index:
            raise ValidationError(
                "end_index",
                end_index,
                f"must not be before start_index {start_index}",
                "INVERTED_UNIT_SPAN",
            )
        self._start_index = start_index
        self._end_index = end_index

    @property
    def start_index(self) -> int:
        return self._start_index

    @property
    def end_index(self) -> int:
        return self._end_index

    @property
    def unit_count(self) -> int:
        """Number of units covered, counting both ends."""
        return self._end_index - self._start_index + 1

    def units(self) -> range:
        """Every unit index covered by the span, in order."""
        return range(self._start_index, self._end_index + 1)

    def contains(self, index: int) -> bool:
        return self._start_index <= index <= self._end_index

    def overlaps_with(self, other: "UnitSpan") -> bool:
        """
        Check whether two spans share at least one unit.

        Spans that merely touch (one ends on the unit the other starts on)
        share that unit and therefore overlap.
        """
        return (
            self._start_index <= other._end_index
            and other._start_index <= self._end_index
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnitSpan):
            return False
        return (
            self._start_index == other._start_index
            and self._end_index == other._end_index
        )

    def __hash__(self) -> int:
        return hash((self._start_index, self._end_index))

    def __str__(self) -> str:
        return f"{self._start_index}-{self._end_index}"

    def __repr__(self) -> str:
        return f"UnitSpan(start_index={self._start_index}, end_index={self._end_index})"
