"""
Block geometry for stacked tasks.

Turns a lane assignment into the pixel box of a task block inside its
resource row. Blocks on higher lanes shrink slightly and are offset down by
their own height plus a fixed gap.
"""

from dataclasses import asdict, dataclass

from ..entities.task import StackedTask
from ..value_objects.row_heights import RowHeights

MIN_BLOCK_HEIGHT = 12
HEIGHT_REDUCTION_PER_LANE = 2
MAX_HEIGHT_REDUCTION = 8
LANE_GAP = 2


@dataclass(frozen=True)
class BlockGeometry:
    left: float
    width: float
    top: float
    height: float

    def to_dict(self) -> dict[str, float]:
        return asdict(self)


def compute_block_geometry(
    stacked_task: StackedTask, unit_cell_width: float, row_heights: RowHeights
) -> BlockGeometry:
    """
    Compute the pixel box of a stacked task.

    Args:
        stacked_task: Task with its lane
        unit_cell_width: Width of one timeline unit in pixels
        row_heights: Metrics of the resource row

    Returns:
        BlockGeometry relative to the top-left corner of the row
    """
    span = stacked_task.span
    lane = stacked_task.lane

    left = span.start_index * unit_cell_width
    width = span.unit_count * unit_cell_width
    height = max(
        MIN_BLOCK_HEIGHT,
        row_heights.task_height
        - min(lane * HEIGHT_REDUCTION_PER_LANE, MAX_HEIGHT_REDUCTION),
    )
    top = row_heights.task_top_margin + lane * (height + LANE_GAP)

    return BlockGeometry(left=left, width=width, top=top, height=height)
