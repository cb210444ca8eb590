"""
Timeline API routes.

Endpoints the planning board calls to stack overlapping tasks into lanes and
to position task blocks on its time axis.
"""

from datetime import date

from fastapi import APIRouter, HTTPException, Query

from planboard.api.deps import LayoutServiceDep
from planboard.application.dtos import (
    BoardLayoutRequest,
    BoardLayoutResponse,
    LaneAssignmentRequest,
    LaneAssignmentResponse,
    TimelineWindowResponse,
)
from planboard.core.observability import get_logger
from planboard.domain.shared.exceptions import DomainError
from planboard.domain.timeline import TimelineViewMode

logger = get_logger(__name__)
router = APIRouter()


@router.post("/lanes", summary="Assign lanes to unit-indexed tasks")
def assign_lanes(
    request: LaneAssignmentRequest, service: LayoutServiceDep
) -> LaneAssignmentResponse:
    """
    Stack tasks into lanes so that no two tasks on the same resource and lane
    share a time unit.

    Tasks are processed in the order given; earlier tasks get lower lanes.
    Tasks that exceed the lane ceiling are returned with status ``clamped``
    and listed in ``warnings``.
    """
    try:
        return service.assign_lanes(request)
    except DomainError as e:
        logger.info("Lane assignment rejected", error=e.message)
        raise HTTPException(status_code=422, detail=e.to_dict())


@router.post("/layout", summary="Lay out dated tasks on the planning board")
def build_layout(
    request: BoardLayoutRequest, service: LayoutServiceDep
) -> BoardLayoutResponse:
    """
    Position dated tasks on the board's time axis, assign lanes per line and
    return the pixel geometry of every visible block.
    """
    try:
        return service.build_layout(request)
    except DomainError as e:
        logger.info("Board layout rejected", error=e.message)
        raise HTTPException(status_code=422, detail=e.to_dict())


@router.get("/window", summary="Describe the displayed time units")
async def get_window(
    service: LayoutServiceDep,
    view_mode: TimelineViewMode | None = Query(None, description="Board granularity"),
    reference_date: date | None = Query(None, description="Defaults to today"),
    zoom: float | None = Query(None, gt=0, le=400, description="50 = 100%"),
) -> TimelineWindowResponse:
    return service.describe_window(
        view_mode=view_mode, reference_date=reference_date, zoom=zoom
    )
