from .timeline_layout_service import (
    TimelineLayoutService,
    build_scheduled_tasks,
    build_timeline_tasks,
)

__all__ = ["TimelineLayoutService", "build_scheduled_tasks", "build_timeline_tasks"]
