"""API dependencies for FastAPI routes."""

from typing import Annotated

from fastapi import Depends

from planboard.application.services import TimelineLayoutService


def get_layout_service() -> TimelineLayoutService:
    return TimelineLayoutService()


LayoutServiceDep = Annotated[TimelineLayoutService, Depends(get_layout_service)]
