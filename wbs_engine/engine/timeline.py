"""여러 프로젝트를 한 축 위에 모으는 타임라인 구성."""

import logging
from typing import Optional, Sequence

from wbs_engine.models import (
    MonthAxis,
    ProjectTasks,
    Timeline,
    TimelineGroup,
    TimelineRow,
)

from .palette import progress_color, status_color
from .projection import (
    AVERAGE_DAYS_PER_MONTH,
    DEFAULT_MIN_BAR_WIDTH,
    current_month_axis,
    infer_month_axis,
    project_task,
)
from .traversal import iter_with_depth

logger = logging.getLogger(__name__)


def build_timeline(
    projects: Sequence[ProjectTasks],
    axis: Optional[MonthAxis] = None,
    max_depth: int = 0,
    days_per_unit: float = AVERAGE_DAYS_PER_MONTH,
    min_width: float = DEFAULT_MIN_BAR_WIDTH,
    default_months: int = 5,
) -> Timeline:
    """
    프로젝트별 작업을 하나의 월 축에 투영합니다.

    Args:
        projects: 프로젝트 목록 (입력 순서대로 그룹이 만들어짐)
        axis: 월 축. 없으면 포함되는 모든 작업을 덮도록 추론하고,
            작업이 하나도 없으면 이번 달부터 default_months개월
        max_depth: 포함할 최대 깊이 (0이면 최상위 작업만)
        days_per_unit: 막대 배치에 쓰는 평균 월 일수
        min_width: 최소 막대 너비 (버킷 단위)
        default_months: 추론할 작업이 없을 때의 축 길이
    """
    selected = [
        (project, [task for task, depth in iter_with_depth(project.tasks) if depth <= max_depth])
        for project in projects
    ]
    if axis is None:
        included = [task for _, tasks in selected for task in tasks]
        if included:
            axis = infer_month_axis(included)
        else:
            axis = current_month_axis(default_months)
        logger.debug(
            f"[Timeline] 축 추론: {axis.buckets[0].label} ~ {axis.buckets[-1].label}"
        )

    groups = []
    for project, tasks in selected:
        rows = []
        for task in tasks:
            projection = project_task(task, axis, days_per_unit=days_per_unit, min_width=min_width)
            rows.append(TimelineRow(
                id=task.id,
                name=task.name,
                level=task.level,
                status=task.status,
                progress=task.progress,
                assignee=task.assignee,
                status_color=status_color(task.status),
                progress_color=progress_color(task.progress),
                in_buckets=projection.in_buckets,
                span=projection.span,
            ))
        groups.append(TimelineGroup(project_id=project.id, project_name=project.name, rows=rows))

    return Timeline(axis=axis, groups=groups)
