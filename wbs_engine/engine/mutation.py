"""작업 트리 변경 (copy-on-write).

모든 변경 함수는 새 포레스트를 반환하며 입력 포레스트는 절대 수정하지 않습니다.
루트에서 대상 노드까지의 경로만 복사하고, 나머지 하위 트리는 그대로 공유합니다.
"""

import logging
from datetime import date
from typing import Callable, Optional, Union

from wbs_engine.exceptions import MutationError
from wbs_engine.models import Forest, TaskNode, clamp_progress
from wbs_engine.utils.validation import parse_task_date

logger = logging.getLogger(__name__)


DATE_FIELDS = {
    "start_date": "start_date",
    "startDate": "start_date",
    "end_date": "end_date",
    "endDate": "end_date",
}


def _replace_node(
    forest: Forest,
    task_id: str,
    updater: Callable[[TaskNode], TaskNode],
) -> list[TaskNode]:
    """ID가 일치하는 첫 노드(전위 순서)를 updater 결과로 바꾼 새 포레스트."""
    replaced = False

    def rebuild(nodes: Forest) -> Optional[tuple[TaskNode, ...]]:
        # 변경이 없으면 None을 돌려 상위에서 기존 튜플을 재사용하게 함
        nonlocal replaced
        for index, node in enumerate(nodes):
            if node.id == task_id:
                new_node = updater(node)
            elif node.children:
                new_children = rebuild(node.children)
                if new_children is None:
                    continue
                new_node = node.model_copy(update={"children": new_children})
            else:
                continue
            replaced = True
            return tuple(nodes[:index]) + (new_node,) + tuple(nodes[index + 1:])
        return None

    result = rebuild(forest)
    if not replaced:
        logger.debug(f"[Mutation] 대상 작업을 찾을 수 없음: {task_id}")
        return list(forest)
    return list(result)


def update_progress(forest: Forest, task_id: str, new_value: Union[int, float, str]) -> list[TaskNode]:
    """진행률을 변경합니다. 0~100 범위 밖의 값은 보정됩니다."""
    try:
        progress = clamp_progress(new_value)
    except (TypeError, ValueError, OverflowError) as exc:
        raise MutationError(
            f"진행률은 숫자여야 합니다: {new_value!r}",
            details={"task_id": task_id, "value": str(new_value)},
        ) from exc
    return _replace_node(
        forest, task_id, lambda node: node.model_copy(update={"progress": progress})
    )


def update_date(
    forest: Forest,
    task_id: str,
    field: str,
    new_value: Union[date, str],
) -> list[TaskNode]:
    """
    시작일 또는 종료일을 변경합니다.

    시작일이 종료일보다 늦어지더라도 자동 보정하지 않습니다.

    Args:
        forest: 원본 포레스트
        task_id: 대상 작업 ID
        field: "start_date"/"startDate" 또는 "end_date"/"endDate"
        new_value: date 또는 YYYY-MM-DD / YYYYMMDD 문자열

    Raises:
        MutationError: 지원하지 않는 필드
        InputValidationError: 날짜 형식 오류
    """
    attribute = DATE_FIELDS.get(field)
    if attribute is None:
        raise MutationError(
            f"변경할 수 없는 날짜 필드입니다: {field}",
            details={"field": field, "allowed": sorted(DATE_FIELDS)},
        )
    value = parse_task_date(new_value)

    def apply(node: TaskNode) -> TaskNode:
        updated = node.model_copy(update={attribute: value})
        if not updated.has_valid_interval:
            logger.info(
                f"[Mutation] 시작일이 종료일보다 늦은 작업: {node.id} "
                f"({updated.start_date} ~ {updated.end_date})"
            )
        return updated

    return _replace_node(forest, task_id, apply)


def update_status(forest: Forest, task_id: str, new_status: str) -> list[TaskNode]:
    """상태 라벨을 변경합니다. 상태는 불투명한 문자열로 취급합니다."""
    status = getattr(new_status, "value", new_status)
    if not isinstance(status, str) or not status.strip():
        raise MutationError(
            "상태 값이 비어있습니다",
            details={"task_id": task_id},
        )
    return _replace_node(
        forest, task_id, lambda node: node.model_copy(update={"status": status})
    )


def update_assignee(
    forest: Forest,
    task_id: str,
    assignee: Optional[str],
    assignee_id: Optional[str] = None,
) -> list[TaskNode]:
    """담당자를 변경합니다. 이름과 식별자를 함께 교체합니다."""
    return _replace_node(
        forest,
        task_id,
        lambda node: node.model_copy(update={"assignee": assignee, "assignee_id": assignee_id}),
    )
