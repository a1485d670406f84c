"""Unit tests for status aggregation."""

from wbs_engine.engine import count_by_status, flatten, summarize
from wbs_engine.models import TaskNode, TaskStats


class TestCountByStatus:
    def test_counts_every_node(self, wbs_forest):
        counts = count_by_status(flatten(wbs_forest))
        assert counts == {"완료": 6, "진행중": 4, "계획중": 2, "해야할 일": 1}

    def test_keys_in_first_seen_order(self, wbs_forest):
        assert list(count_by_status(flatten(wbs_forest))) == ["완료", "진행중", "계획중", "해야할 일"]

    def test_empty(self):
        assert count_by_status([]) == {}


class TestSummarize:
    def test_sample_project(self, wbs_forest):
        stats = summarize(flatten(wbs_forest))
        assert stats.total == 13
        assert stats.completed == 6
        assert stats.in_progress == 4
        assert stats.planned == 3  # 계획중 2 + 해야할 일 1
        assert stats.other == 0
        assert stats.completion_rate == 46.2

    def test_total_equals_sum_of_counts(self, wbs_forest):
        stats = summarize(flatten(wbs_forest))
        assert stats.total == sum(stats.counts.values()) == len(flatten(wbs_forest))

    def test_empty_forest(self):
        stats = summarize(flatten([]))
        assert stats.total == 0
        assert stats.completion_rate == 0.0

    def test_parent_counted_as_own_unit(self, scenario_forest):
        # 부모 1개 + 자식 2개 모두 계획중
        stats = summarize(flatten(scenario_forest))
        assert stats.planned == 3
        assert stats.completion_rate == 0.0

    def test_unknown_status_goes_to_other(self):
        tasks = [
            TaskNode(id="a", name="보류 작업", start_date="2024-01-01", end_date="2024-01-02", status="보류"),
            TaskNode(id="b", name="완료 작업", start_date="2024-01-01", end_date="2024-01-02", status="완료"),
        ]
        stats = summarize(tasks)
        assert stats.counts["보류"] == 1
        assert stats.other == 1
        assert stats.completion_rate == 50.0

    def test_accepts_generator(self, wbs_forest):
        stats = summarize(task for task in flatten(wbs_forest))
        assert stats.total == 13

    def test_serialises_in_camel_case(self, wbs_forest):
        data = summarize(flatten(wbs_forest)).model_dump(by_alias=True)
        assert data["inProgress"] == 4
        assert data["completionRate"] == 46.2
        assert data["total"] == 13


class TestTaskStats:
    def test_counters_derived_from_counts(self):
        stats = TaskStats(counts={"완료": 2, "진행중": 1, "계획중": 1, "해야할 일": 3, "보류": 1})
        assert stats.completed == 2
        assert stats.in_progress == 1
        assert stats.planned == 4
        assert stats.other == 1
        assert stats.total == 8

    def test_counters_cannot_be_set_apart_from_counts(self):
        stats = TaskStats(counts={"완료": 1}, completed=5)
        assert stats.completed == 1
        assert stats.other == 0
        assert stats.completion_rate == 100.0

    def test_all_done(self):
        assert TaskStats(counts={"완료": 4}).completion_rate == 100.0

    def test_rounding_to_one_decimal(self):
        assert TaskStats(counts={"완료": 1, "진행중": 2}).completion_rate == 33.3

    def test_empty_counts(self):
        stats = TaskStats()
        assert stats.total == 0
        assert stats.planned == 0
        assert stats.completion_rate == 0.0
