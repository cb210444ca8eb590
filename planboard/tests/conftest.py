from collections.abc import Generator
from datetime import date

import pytest
from fastapi.testclient import TestClient

from planboard.domain.timeline import (
    TimelineTask,
    TimelineViewMode,
    TimelineWindow,
    build_timeline_window,
)
from planboard.main import app


@pytest.fixture(scope="module")
def client() -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c


@pytest.fixture
def overlapping_tasks() -> list[TimelineTask]:
    """Five tasks on one line: three mutually overlapping, then a later pair."""
    return [
        TimelineTask.create("A", "R1", 0, 3, "Task A"),
        TimelineTask.create("B", "R1", 2, 5, "Task B"),
        TimelineTask.create("C", "R1", 1, 4, "Task C"),
        TimelineTask.create("D", "R1", 6, 8, "Task D"),
        TimelineTask.create("E", "R1", 7, 9, "Task E"),
    ]


@pytest.fixture
def reference_date() -> date:
    return date(2024, 3, 6)  # a Wednesday


@pytest.fixture
def daily_window(reference_date: date) -> TimelineWindow:
    return build_timeline_window(TimelineViewMode.DAILY, reference_date)


@pytest.fixture
def hourly_window(reference_date: date) -> TimelineWindow:
    return build_timeline_window(TimelineViewMode.HOURLY, reference_date)
