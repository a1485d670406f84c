"""WBS 간트 화면 행 구성."""

from typing import Optional

from wbs_engine.models import Forest, GanttRow, MonthAxis

from .expansion import ExpansionState, LevelFilter
from .palette import progress_color, status_color, theme_color
from .projection import DEFAULT_MIN_BAR_WIDTH, day_span_within_axis, intersects_bucket
from .traversal import flatten_visible


def build_gantt_rows(
    forest: Forest,
    expansion: ExpansionState,
    axis: MonthAxis,
    level_filter: Optional[LevelFilter] = None,
    min_width: float = DEFAULT_MIN_BAR_WIDTH,
) -> list[GanttRow]:
    """
    펼침 상태와 레벨 필터를 반영한 간트 행 목록을 만듭니다.

    레벨 필터에 걸러진 상위 작업이라도 펼쳐져 있으면 하위 작업은 계속 표시됩니다.
    막대는 하위 작업이 없는 리프 작업에만 붙습니다.
    """
    level_filter = level_filter if level_filter is not None else LevelFilter()

    rows = []
    for node, depth in flatten_visible(forest, expansion):
        if not level_filter.allows(node.level):
            continue
        rows.append(GanttRow(
            id=node.id,
            name=node.name,
            level=node.level,
            depth=depth,
            has_children=node.has_children,
            expanded=expansion.is_expanded(node.id),
            status=node.status,
            progress=node.progress,
            assignee=node.assignee,
            color=theme_color(node.id, node.level),
            status_color=status_color(node.status),
            progress_color=progress_color(node.progress),
            in_buckets=[intersects_bucket(node, bucket) for bucket in axis.buckets],
            bar=None if node.has_children else day_span_within_axis(node, axis, min_width),
        ))
    return rows
