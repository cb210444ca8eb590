"""
Unit Tests for mapping calendar tasks onto timeline units.
"""

from datetime import date, datetime, timezone

import pytest

from planboard.domain.timeline import ScheduledTask, discretize, discretize_all


def scheduled(task_id, start, end, resource_id="LINE-01"):
    return ScheduledTask.create(task_id, resource_id, start, end, f"Order {task_id}")


class TestDiscretizeDaily:
    @pytest.mark.parametrize(
        "start,end,expected",
        [
            (date(2024, 3, 6), date(2024, 3, 8), (58, 60)),
            (date(2024, 3, 6), date(2024, 3, 6), (58, 58)),
            (datetime(2024, 3, 6, 9), datetime(2024, 3, 6, 17), (58, 58)),
            (date(2023, 12, 20), date(2024, 1, 10), (0, 2)),
            (date(2024, 6, 5), date(2024, 7, 1), (149, 153)),
        ],
    )
    def test_span_covers_touched_days(self, daily_window, start, end, expected):
        timeline_task = discretize(scheduled("PO-1", start, end), daily_window)

        assert timeline_task is not None
        assert (timeline_task.start_index, timeline_task.end_index) == expected
        assert timeline_task.name == "Order PO-1"
        assert timeline_task.resource_id == "LINE-01"

    def test_task_outside_window_is_hidden(self, daily_window):
        task = scheduled("PO-9", date(2023, 12, 1), date(2023, 12, 31))

        assert discretize(task, daily_window) is None


class TestDiscretizeHourly:
    def test_partial_hours_are_covered(self, hourly_window):
        task = scheduled(
            "PO-1", datetime(2024, 3, 6, 8, 30), datetime(2024, 3, 6, 10, 0)
        )

        timeline_task = discretize(task, hourly_window)

        assert (timeline_task.start_index, timeline_task.end_index) == (8, 10)

    def test_aware_datetimes(self, hourly_window):
        task = scheduled(
            "PO-1",
            datetime(2024, 3, 6, 8, 30, tzinfo=timezone.utc),
            datetime(2024, 3, 6, 10, 0, tzinfo=timezone.utc),
        )

        timeline_task = discretize(task, hourly_window)

        assert (timeline_task.start_index, timeline_task.end_index) == (8, 10)

    def test_task_after_window_is_hidden(self, hourly_window):
        task = scheduled("PO-1", datetime(2024, 3, 8, 1), datetime(2024, 3, 8, 3))

        assert discretize(task, hourly_window) is None


class TestDiscretizeAll:
    def test_splits_visible_and_hidden(self, daily_window):
        tasks = [
            scheduled("PO-1", date(2024, 3, 6), date(2024, 3, 8)),
            scheduled("PO-2", date(2023, 1, 2), date(2023, 1, 9)),
            scheduled("PO-3", date(2024, 3, 7), date(2024, 3, 9), "LINE-02"),
        ]

        visible, hidden_ids = discretize_all(tasks, daily_window)

        assert [task.id for task in visible] == ["PO-1", "PO-3"]
        assert hidden_ids == ["PO-2"]
