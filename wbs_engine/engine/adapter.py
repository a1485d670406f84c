"""다른 화면(리소스 관리 등)을 위한 작업 참조 해석기."""

from typing import Iterable, Optional, Union

from wbs_engine.models import AssigneeRef, TaskNode


def _matches(task: TaskNode, ref: AssigneeRef) -> bool:
    if ref.assignee_id and task.assignee_id:
        return task.assignee_id == ref.assignee_id
    # 어느 한쪽에 식별자가 없을 때만 이름 정확 일치 (대소문자 구분)
    return ref.name is not None and task.assignee == ref.name


def resolve_assignment(
    tasks: Iterable[TaskNode],
    ref: Union[str, AssigneeRef],
) -> Optional[TaskNode]:
    """
    평면화된 작업 목록에서 참조에 해당하는 첫 작업을 찾습니다.

    Args:
        tasks: 평면화된 작업 목록
        ref: 작업 ID 문자열 또는 담당자 참조

    Returns:
        일치하는 첫 작업, 없으면 None
    """
    if isinstance(ref, str):
        return next((task for task in tasks if task.id == ref), None)
    return next((task for task in tasks if _matches(task, ref)), None)


def tasks_for_assignee(tasks: Iterable[TaskNode], ref: AssigneeRef) -> list[TaskNode]:
    """담당자에게 배정된 모든 작업 (입력 순서 유지)."""
    return [task for task in tasks if _matches(task, ref)]
