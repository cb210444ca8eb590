"""
Health Check API Routes
"""

from datetime import datetime, timezone

from fastapi import APIRouter

from planboard.core.config import settings

router = APIRouter()


@router.get("/health", summary="Service health")
async def get_health_status() -> dict[str, str | int]:
    return {
        "status": "healthy",
        "project": settings.PROJECT_NAME,
        "environment": settings.ENVIRONMENT,
        "lane_ceiling": settings.LANE_CEILING,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
