"""Unit tests for the multi-project timeline."""

from datetime import date

import pytest

from wbs_engine.engine import build_month_axis, build_timeline
from wbs_engine.models import ProjectTasks, TaskNode


@pytest.fixture
def projects(wbs_forest):
    summer = TaskNode(
        id="1", name="1. 여름 캠페인", start_date=date(2024, 6, 1), end_date=date(2024, 6, 30),
        status="해야할 일",
    )
    return [
        ProjectTasks(id="p1", name="웹사이트 리뉴얼", status="진행중", tasks=wbs_forest),
        ProjectTasks(id="p2", name="마케팅", tasks=[summer]),
    ]


class TestBuildTimeline:
    def test_groups_in_input_order(self, projects):
        timeline = build_timeline(projects)
        assert [group.project_id for group in timeline.groups] == ["p1", "p2"]
        assert timeline.groups[0].project_name == "웹사이트 리뉴얼"

    def test_top_level_only_by_default(self, projects):
        timeline = build_timeline(projects)
        assert [row.id for row in timeline.groups[0].rows] == ["1", "2", "3"]

    def test_max_depth(self, projects):
        timeline = build_timeline(projects, max_depth=1)
        assert len(timeline.groups[0].rows) == 9

    def test_axis_inferred_from_all_projects(self, projects):
        timeline = build_timeline(projects)
        assert timeline.axis.origin == date(2024, 1, 1)
        assert timeline.axis.end == date(2024, 6, 30)

    def test_given_axis_used(self, projects, jan_to_may_axis):
        timeline = build_timeline(projects, axis=jan_to_may_axis)
        assert timeline.axis == jan_to_may_axis
        # 축 밖 작업은 어느 버킷에도 걸치지 않음
        assert timeline.groups[1].rows[0].in_buckets == [False] * 5

    def test_row_span_uses_average_month(self, projects, jan_to_may_axis):
        timeline = build_timeline(projects, axis=jan_to_may_axis)
        development = timeline.groups[0].rows[2]
        assert development.id == "3"
        assert development.span.offset == 1
        assert development.in_buckets == [False, False, True, True, True]

    def test_row_colors(self, projects):
        row = build_timeline(projects).groups[0].rows[1]
        assert row.status_color == "bg-blue-100 text-blue-800"
        assert row.progress_color == "bg-blue-500"

    def test_empty_project_with_axis(self):
        timeline = build_timeline(
            [ProjectTasks(id="p", name="빈 프로젝트")], axis=build_month_axis(2024, 1, 3),
        )
        assert timeline.groups[0].rows == []

    def test_no_tasks_and_no_axis_uses_current_month(self):
        timeline = build_timeline([ProjectTasks(id="p", name="빈 프로젝트")], default_months=3)
        today = date.today()
        assert timeline.axis.size == 3
        assert (timeline.axis.buckets[0].year, timeline.axis.buckets[0].month) == (today.year, today.month)
        assert timeline.groups[0].rows == []

    def test_no_projects(self):
        timeline = build_timeline([])
        assert timeline.groups == []
        assert timeline.axis.size == 5
