"""상태별 집계 엔진.

평면화된 작업 목록의 모든 노드를 한 번씩 셉니다. 하위 작업이 있는 상위 작업도
자기 자신의 작업 단위로 집계됩니다. 자식 진행률을 부모로 올려 계산(roll-up)하지 않습니다.
"""

from typing import Iterable

from wbs_engine.models import TaskNode, TaskStats


def count_by_status(tasks: Iterable[TaskNode]) -> dict[str, int]:
    """상태 라벨별 작업 수. 키는 처음 등장한 순서를 따릅니다."""
    counts: dict[str, int] = {}
    for task in tasks:
        counts[task.status] = counts.get(task.status, 0) + 1
    return counts


def summarize(tasks: Iterable[TaskNode]) -> TaskStats:
    """평면화된 작업 목록으로부터 요약 통계를 만듭니다."""
    return TaskStats(counts=count_by_status(tasks))
