"""
Unit Tests for the lane assignment domain service.

Covers the stacking scenarios of the planning board, resource isolation, the
lane ceiling clamp and the LaneLayout helpers.
"""

import pytest
from prometheus_client import REGISTRY

from planboard.domain.shared.exceptions import ValidationError
from planboard.domain.timeline import (
    DEFAULT_LANE_CEILING,
    DensityWarning,
    LaneAssigner,
    OccupancyMap,
    PlacementStatus,
    TimelineTask,
    UnitSpan,
    assign_lanes,
    find_lane_conflicts,
    group_by_resource,
)


def lanes(layout) -> dict[str, int]:
    return {stacked.id: stacked.lane for stacked in layout}


class TestOccupancyMap:
    def test_claim_and_query(self):
        occupancy = OccupancyMap()
        occupancy.claim(0, UnitSpan(2, 4))

        assert not occupancy.is_free(0, UnitSpan(4, 6))
        assert occupancy.is_free(0, UnitSpan(5, 6))
        assert occupancy.is_free(1, UnitSpan(2, 4))

    def test_first_free_lane(self):
        occupancy = OccupancyMap()
        occupancy.claim(0, UnitSpan(0, 3))
        occupancy.claim(1, UnitSpan(2, 5))

        assert occupancy.first_free_lane(UnitSpan(1, 4), lane_ceiling=10) == 2
        assert occupancy.first_free_lane(UnitSpan(4, 4), lane_ceiling=10) == 0
        assert occupancy.first_free_lane(UnitSpan(2, 2), lane_ceiling=2) is None


class TestLaneAssignmentScenarios:
    def test_overlapping_tasks_are_stacked_in_input_order(self, overlapping_tasks):
        """A(0-3) B(2-5) C(1-4) D(6-8) E(7-9) stack as 0, 1, 2, 0, 1."""
        layout = assign_lanes(overlapping_tasks)

        assert lanes(layout) == {"A": 0, "B": 1, "C": 2, "D": 0, "E": 1}
        assert [stacked.id for stacked in layout] == ["A", "B", "C", "D", "E"]
        assert find_lane_conflicts(layout) == []
        assert not layout.has_warnings

    def test_input_order_decides_priority(self, overlapping_tasks):
        layout = assign_lanes(list(reversed(overlapping_tasks)))

        assert lanes(layout) == {"E": 0, "D": 1, "C": 0, "B": 1, "A": 2}
        assert find_lane_conflicts(layout) == []

    def test_disjoint_task_gets_lane_zero(self):
        tasks = [
            TimelineTask.create("A", "R1", 0, 3),
            TimelineTask.create("B", "R1", 1, 2),
            TimelineTask.create("C", "R1", 10, 12),
        ]

        assert assign_lanes(tasks).lane_of("C") == 0

    def test_zero_length_tasks_occupy_one_unit(self):
        tasks = [
            TimelineTask.create("A", "R1", 4, 4),
            TimelineTask.create("B", "R1", 4, 4),
            TimelineTask.create("C", "R1", 5, 5),
        ]

        assert lanes(assign_lanes(tasks)) == {"A": 0, "B": 1, "C": 0}

    def test_tasks_touching_on_a_unit_overlap(self):
        tasks = [
            TimelineTask.create("A", "R1", 0, 3),
            TimelineTask.create("B", "R1", 3, 6),
        ]

        assert lanes(assign_lanes(tasks)) == {"A": 0, "B": 1}

    @pytest.mark.parametrize("chain_length", [2, 5, 25])
    def test_staircase_never_needs_more_than_two_lanes(self, chain_length):
        tasks = [
            TimelineTask.create(f"T{i}", "R1", 2 * i, 2 * i + 2)
            for i in range(chain_length)
        ]

        layout = assign_lanes(tasks)

        assert layout.lanes_used("R1") == 2
        assert [stacked.lane for stacked in layout] == [
            i % 2 for i in range(chain_length)
        ]

    @pytest.mark.parametrize("count", [1, 4, DEFAULT_LANE_CEILING])
    def test_identical_tasks_need_one_lane_each(self, count):
        tasks = [TimelineTask.create(f"T{i}", "R1", 3, 8) for i in range(count)]

        layout = assign_lanes(tasks)

        assert [stacked.lane for stacked in layout] == list(range(count))
        assert layout.lanes_used("R1") == count
        assert not layout.has_warnings

    def test_assignment_is_deterministic(self, overlapping_tasks):
        first = assign_lanes(overlapping_tasks)
        second = assign_lanes(overlapping_tasks)

        assert lanes(first) == lanes(second)

    def test_empty_input(self):
        layout = assign_lanes([])

        assert len(layout) == 0
        assert layout.lanes_by_resource() == {}
        assert layout.lanes_used("R1") == 0


class TestResourceIsolation:
    def test_resources_do_not_share_lanes(self):
        tasks = [
            TimelineTask.create("A", "LINE-01", 0, 5),
            TimelineTask.create("B", "LINE-02", 0, 5),
            TimelineTask.create("C", "LINE-01", 2, 3),
            TimelineTask.create("D", "LINE-02", 6, 7),
        ]

        layout = assign_lanes(tasks)

        assert lanes(layout) == {"A": 0, "B": 0, "C": 1, "D": 0}
        assert layout.lanes_by_resource() == {"LINE-01": 2, "LINE-02": 1}

    def test_other_resources_do_not_change_lanes(self, overlapping_tasks):
        noise = [TimelineTask.create(f"N{i}", "R2", 0, 9) for i in range(6)]
        interleaved = [task for pair in zip(noise, overlapping_tasks) for task in pair]
        interleaved.append(noise[-1])

        alone = lanes(assign_lanes(overlapping_tasks))
        mixed = lanes(assign_lanes(interleaved))

        assert {k: v for k, v in mixed.items() if not k.startswith("N")} == alone

    def test_group_by_resource_keeps_order(self):
        tasks = [
            TimelineTask.create("A", "LINE-02", 0, 1),
            TimelineTask.create("B", "LINE-01", 0, 1),
            TimelineTask.create("C", "LINE-02", 2, 3),
        ]

        groups = group_by_resource(tasks)

        assert list(groups) == ["LINE-02", "LINE-01"]
        assert [task.id for task in groups["LINE-02"]] == ["A", "C"]


class TestLaneCeiling:
    def test_tasks_beyond_ceiling_are_clamped(self):
        tasks = [TimelineTask.create(f"T{i}", "R1", 0, 4) for i in range(13)]

        layout = assign_lanes(tasks, lane_ceiling=10)

        assert [stacked.lane for stacked in layout] == list(range(10)) + [10, 10, 10]
        assert [stacked.id for stacked in layout.clamped_tasks] == ["T10", "T11", "T12"]
        assert all(
            stacked.assignment.status is PlacementStatus.CLAMPED
            for stacked in layout.clamped_tasks
        )
        assert layout.has_warnings
        assert [warning.task_id for warning in layout.warnings] == ["T10", "T11", "T12"]

    def test_clamped_task_does_not_claim_occupancy(self):
        tasks = [
            TimelineTask.create("A", "R1", 0, 5),
            TimelineTask.create("B", "R1", 2, 3),
            TimelineTask.create("C", "R1", 6, 7),
            TimelineTask.create("D", "R1", 4, 6),
        ]

        layout = assign_lanes(tasks, lane_ceiling=1)

        assert lanes(layout) == {"A": 0, "B": 1, "C": 0, "D": 1}
        assert [stacked.id for stacked in layout.clamped_tasks] == ["B", "D"]
        assert find_lane_conflicts(layout) == []

    def test_warning_describes_clamp(self):
        tasks = [
            TimelineTask.create("A", "LINE-07", 1, 3),
            TimelineTask.create("B", "LINE-07", 2, 4),
        ]

        warning = assign_lanes(tasks, lane_ceiling=1).warnings[0]

        assert isinstance(warning, DensityWarning)
        assert warning.to_dict() == {
            "resource_id": "LINE-07",
            "task_id": "B",
            "lane_ceiling": 1,
            "start_index": 2,
            "end_index": 4,
            "message": warning.message,
        }
        assert "clamped to lane 1" in warning.message

    def test_on_clamp_callback_receives_each_warning(self):
        received: list[DensityWarning] = []
        tasks = [TimelineTask.create(f"T{i}", "R1", 0, 0) for i in range(4)]

        layout = LaneAssigner(lane_ceiling=2, on_clamp=received.append).assign(tasks)

        assert received == layout.warnings
        assert len(received) == 2

    def test_clamp_is_counted(self):
        before = REGISTRY.get_sample_value("planboard_lane_clamps_total") or 0.0
        tasks = [TimelineTask.create(f"T{i}", "R1", 0, 2) for i in range(3)]

        assign_lanes(tasks, lane_ceiling=1)

        after = REGISTRY.get_sample_value("planboard_lane_clamps_total")
        assert after == before + 2

    def test_ceiling_must_be_positive(self):
        with pytest.raises(ValidationError) as exc_info:
            LaneAssigner(lane_ceiling=0)

        assert exc_info.value.error_code == "INVALID_LANE_CEILING"


class TestLaneLayoutHelpers:
    def test_lane_of_unknown_task(self, overlapping_tasks):
        assert assign_lanes(overlapping_tasks).lane_of("missing") is None

    def test_by_resource(self):
        tasks = [
            TimelineTask.create("A", "LINE-01", 0, 1),
            TimelineTask.create("B", "LINE-02", 0, 1),
        ]

        grouped = assign_lanes(tasks).by_resource()

        assert {key: [s.id for s in value] for key, value in grouped.items()} == {
            "LINE-01": ["A"],
            "LINE-02": ["B"],
        }
