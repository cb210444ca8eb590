from .task import ScheduledTask, StackedTask, TimelineTask

__all__ = ["ScheduledTask", "StackedTask", "TimelineTask"]
