"""WBS 엔진: 순회, 집계, 투영, 펼침 상태, 참조 해석, 변경."""

from .expansion import ExpansionState, LevelFilter
from .traversal import (
    VisibleTask,
    iter_with_depth,
    flatten,
    flatten_visible,
    find_by_id,
    find_parent,
    depth_map,
    count_nodes,
)
from .aggregation import count_by_status, summarize
from .projection import (
    AVERAGE_DAYS_PER_MONTH,
    DEFAULT_MIN_BAR_WIDTH,
    build_month_axis,
    month_axis_between,
    current_month_axis,
    infer_month_axis,
    intersects_bucket,
    bucket_index,
    position_within_axis,
    day_span_within_axis,
    bucket_header_layout,
    project_task,
)
from .adapter import resolve_assignment, tasks_for_assignee
from .mutation import update_progress, update_date, update_status, update_assignee
from .palette import theme_color, status_color, progress_color
from .quality import (
    find_invalid_intervals,
    find_duplicate_ids,
    find_level_mismatches,
    build_quality_report,
)
from .gantt import build_gantt_rows
from .timeline import build_timeline

__all__ = [
    "ExpansionState",
    "LevelFilter",
    "VisibleTask",
    "iter_with_depth",
    "flatten",
    "flatten_visible",
    "find_by_id",
    "find_parent",
    "depth_map",
    "count_nodes",
    "count_by_status",
    "summarize",
    "AVERAGE_DAYS_PER_MONTH",
    "DEFAULT_MIN_BAR_WIDTH",
    "build_month_axis",
    "month_axis_between",
    "current_month_axis",
    "infer_month_axis",
    "intersects_bucket",
    "bucket_index",
    "position_within_axis",
    "day_span_within_axis",
    "bucket_header_layout",
    "project_task",
    "resolve_assignment",
    "tasks_for_assignee",
    "update_progress",
    "update_date",
    "update_status",
    "update_assignee",
    "theme_color",
    "status_color",
    "progress_color",
    "find_invalid_intervals",
    "find_duplicate_ids",
    "find_level_mismatches",
    "build_quality_report",
    "build_gantt_rows",
    "build_timeline",
]
