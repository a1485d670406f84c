"""
WBS 작업 트리 API입니다.
요청마다 작업 포레스트를 받아 평면화, 집계, 간트 배치, 변경 결과를 돌려줍니다.
서버는 작업 데이터를 저장하지 않습니다.
"""

import logging
from typing import Optional, Union

from fastapi import APIRouter, HTTPException
from pydantic import Field

from wbs_engine.api.common import (
    CamelModel,
    ForestRequest,
    dump,
    dump_forest,
    resolve_axis,
    task_summary,
    warn_invalid_intervals,
)
from wbs_engine.config import get_settings
from wbs_engine.engine import (
    ExpansionState,
    LevelFilter,
    bucket_header_layout,
    build_gantt_rows,
    build_quality_report,
    find_by_id,
    find_parent,
    flatten,
    flatten_visible,
    summarize,
    update_assignee,
    update_date,
    update_progress,
    update_status,
)
from wbs_engine.models import AxisSpec

logger = logging.getLogger(__name__)

router = APIRouter()


class VisibleRequest(ForestRequest):
    """펼침 상태를 함께 보내는 요청."""
    expanded_ids: list[str] = Field(default_factory=list, description="펼쳐진 작업 ID")


class GanttRequest(VisibleRequest):
    """간트 행 구성 요청."""
    axis: Optional[AxisSpec] = Field(None, description="월 축 (없으면 작업 기간으로 추론)")
    levels: Optional[list[int]] = Field(None, description="표시할 레벨 (없으면 설정 기본값)")


class ToggleRequest(CamelModel):
    """펼침 토글 요청."""
    expanded_ids: list[str] = Field(default_factory=list)
    task_id: str


class ProgressMutation(ForestRequest):
    task_id: str
    value: Union[int, float]


class DateMutation(ForestRequest):
    task_id: str
    field: str = Field(..., description="startDate 또는 endDate")
    value: str = Field(..., description="YYYY-MM-DD 또는 YYYYMMDD")


class StatusMutation(ForestRequest):
    task_id: str
    status: str


class AssigneeMutation(ForestRequest):
    task_id: str
    assignee: Optional[str] = None
    assignee_id: Optional[str] = None


@router.post("/flatten")
async def flatten_tasks(request: ForestRequest) -> dict:
    """전체 작업을 전위 순서로 평면화합니다 (표 뷰, 통계용)."""
    tasks = flatten(request.tasks)
    return {
        "total": len(tasks),
        "tasks": [task_summary(task) for task in tasks],
    }


@router.post("/visible")
async def visible_tasks(request: VisibleRequest) -> dict:
    """펼침 상태를 반영한 트리 행과 깊이를 반환합니다."""
    expansion = ExpansionState(request.expanded_ids)
    rows = []
    for node, depth in flatten_visible(request.tasks, expansion):
        row = task_summary(node)
        row["depth"] = depth
        row["expanded"] = expansion.is_expanded(node.id)
        rows.append(row)
    return {"total": len(rows), "rows": rows}


@router.post("/tasks/{task_id}")
async def get_task(task_id: str, request: ForestRequest) -> dict:
    """ID로 작업을 찾습니다 (하위 작업 포함)."""
    task = find_by_id(request.tasks, task_id)
    if task is None:
        raise HTTPException(status_code=404, detail=f"작업을 찾을 수 없습니다: {task_id}")
    return dump(task)


@router.post("/tasks/{task_id}/parent")
async def get_parent_task(task_id: str, request: ForestRequest) -> dict:
    """작업의 상위 작업을 찾습니다."""
    parent = find_parent(request.tasks, task_id)
    if parent is None:
        raise HTTPException(status_code=404, detail=f"상위 작업이 없습니다: {task_id}")
    return task_summary(parent)


@router.post("/stats")
async def task_stats(request: ForestRequest) -> dict:
    """상태별 작업 수와 완료율을 계산합니다."""
    return dump(summarize(flatten(request.tasks)))


@router.post("/gantt")
async def gantt_rows(request: GanttRequest) -> dict:
    """간트 차트의 월 헤더와 작업 행을 구성합니다."""
    settings = get_settings()
    axis = resolve_axis(request.axis, request.tasks)
    levels = request.levels if request.levels is not None else settings.default_level_filter

    rows = build_gantt_rows(
        request.tasks,
        ExpansionState(request.expanded_ids),
        axis,
        level_filter=LevelFilter(levels),
        min_width=settings.min_bar_width,
    )
    return {
        "headers": [dump(header) for header in bucket_header_layout(axis)],
        "rows": [dump(row) for row in rows],
        "invalidIntervals": warn_invalid_intervals(request.tasks),
    }


@router.post("/validate")
async def validate_tasks(request: ForestRequest) -> dict:
    """중복 ID, 뒤집힌 기간, 레벨 불일치 등 데이터 품질을 점검합니다."""
    report = build_quality_report(request.tasks)
    warn_invalid_intervals(request.tasks)
    if report.duplicate_ids:
        logger.warning(f"[DataQuality] 중복 작업 ID: {report.duplicate_ids}")
    return dump(report)


@router.post("/toggle")
async def toggle_expansion(request: ToggleRequest) -> dict:
    """작업 하나의 펼침 상태를 뒤집습니다."""
    expansion = ExpansionState(request.expanded_ids).toggle(request.task_id)
    return {"expandedIds": sorted(expansion.ids)}


def _mutation_response(tasks, task_id: str) -> dict:
    return {
        "found": find_by_id(tasks, task_id) is not None,
        "tasks": dump_forest(tasks),
    }


@router.post("/mutations/progress")
async def mutate_progress(request: ProgressMutation) -> dict:
    """진행률 변경 (0~100으로 보정)."""
    tasks = update_progress(request.tasks, request.task_id, request.value)
    return _mutation_response(tasks, request.task_id)


@router.post("/mutations/date")
async def mutate_date(request: DateMutation) -> dict:
    """시작일/종료일 변경."""
    tasks = update_date(request.tasks, request.task_id, request.field, request.value)
    warn_invalid_intervals(tasks)
    return _mutation_response(tasks, request.task_id)


@router.post("/mutations/status")
async def mutate_status(request: StatusMutation) -> dict:
    """상태 라벨 변경."""
    tasks = update_status(request.tasks, request.task_id, request.status)
    return _mutation_response(tasks, request.task_id)


@router.post("/mutations/assignee")
async def mutate_assignee(request: AssigneeMutation) -> dict:
    """담당자 변경."""
    tasks = update_assignee(request.tasks, request.task_id, request.assignee, request.assignee_id)
    return _mutation_response(tasks, request.task_id)
