"""Row height metrics for the planning board, in pixels."""

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class RowHeights:
    """Pixel metrics of one resource row at a given row height level."""

    header_unit: int
    main_unit: int
    sub_unit: int
    unscheduled_item: int
    task_top_margin: int
    task_inner_height_reduction: int
    target_unit: int
    group_header_unit: int

    @property
    def task_height(self) -> int:
        """Height of a task block on lane 0."""
        return self.main_unit - self.task_inner_height_reduction

    def to_dict(self) -> dict[str, int]:
        return asdict(self)


ROW_HEIGHT_CONFIG: dict[str, RowHeights] = {
    "small": RowHeights(
        header_unit=24,
        main_unit=30,
        sub_unit=16,
        unscheduled_item=32,
        task_top_margin=2,
        task_inner_height_reduction=4,
        target_unit=20,
        group_header_unit=24,
    ),
    "medium": RowHeights(
        header_unit=32,
        main_unit=48,
        sub_unit=20,
        unscheduled_item=40,
        task_top_margin=4,
        task_inner_height_reduction=8,
        target_unit=28,
        group_header_unit=28,
    ),
    "large": RowHeights(
        header_unit=40,
        main_unit=60,
        sub_unit=24,
        unscheduled_item=48,
        task_top_margin=6,
        task_inner_height_reduction=12,
        target_unit=32,
        group_header_unit=32,
    ),
}
