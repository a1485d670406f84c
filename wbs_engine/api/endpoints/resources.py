"""
리소스 관리 화면용 API입니다.
구성원과 WBS 작업을 연결하기 위해 작업 ID 또는 담당자 정보로 작업을 찾습니다.
"""

from typing import Optional

from fastapi import APIRouter, HTTPException

from wbs_engine.api.common import ForestRequest, dump, task_summary
from wbs_engine.engine import flatten, resolve_assignment, tasks_for_assignee
from wbs_engine.exceptions import InputValidationError
from wbs_engine.models import AssigneeRef

router = APIRouter()


class AssignmentRequest(ForestRequest):
    """작업 ID 또는 담당자(식별자 우선, 없으면 이름)로 찾는 요청."""
    task_id: Optional[str] = None
    assignee_id: Optional[str] = None
    name: Optional[str] = None


def _assignee_ref(request: AssignmentRequest) -> AssigneeRef:
    if not request.assignee_id and not request.name:
        raise InputValidationError(
            "assigneeId 또는 name 중 하나는 필요합니다",
            details={"fields": ["assigneeId", "name"]},
        )
    return AssigneeRef(assignee_id=request.assignee_id, name=request.name)


@router.post("/resolve")
async def resolve_task(request: AssignmentRequest) -> dict:
    """참조에 해당하는 첫 작업을 반환합니다 (작업 ID가 있으면 ID로 찾음)."""
    ref = request.task_id if request.task_id else _assignee_ref(request)
    task = resolve_assignment(flatten(request.tasks), ref)
    if task is None:
        raise HTTPException(status_code=404, detail="연결할 작업을 찾을 수 없습니다")
    return dump(task)


@router.post("/assignments")
async def assigned_tasks(request: AssignmentRequest) -> dict:
    """담당자에게 배정된 모든 작업을 반환합니다."""
    tasks = tasks_for_assignee(flatten(request.tasks), _assignee_ref(request))
    return {
        "total": len(tasks),
        "tasks": [task_summary(task) for task in tasks],
    }
