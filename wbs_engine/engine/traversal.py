"""작업 트리 순회 유틸리티.

모든 함수는 순수 함수이며, 전위(pre-order) 깊이 우선 순서를 따릅니다.
부모가 자식보다 먼저, 자식은 배열 순서대로 방문됩니다.
순회는 명시적 스택을 사용하므로 재귀 한도와 무관하게 동작합니다.
"""

from typing import Iterator, NamedTuple, Optional

from wbs_engine.models import Forest, TaskNode

from .expansion import ExpansionState


class VisibleTask(NamedTuple):
    """화면에 보이는 작업과 그 깊이 (최상위 = 0)."""
    node: TaskNode
    depth: int


def iter_with_depth(forest: Forest) -> Iterator[tuple[TaskNode, int]]:
    """전체 트리를 (노드, 깊이) 쌍으로 전위 순회합니다."""
    stack: list[tuple[TaskNode, int]] = [(task, 0) for task in reversed(forest)]
    while stack:
        node, depth = stack.pop()
        yield node, depth
        # 역순으로 쌓아야 원래 자식 순서대로 꺼내짐
        stack.extend((child, depth + 1) for child in reversed(node.children))


def flatten(forest: Forest) -> list[TaskNode]:
    """
    포레스트를 전위 순서의 평면 목록으로 변환합니다.

    모든 노드는 정확히 한 번 포함됩니다. 빈 포레스트는 빈 목록을 반환합니다.
    """
    return [node for node, _ in iter_with_depth(forest)]


def flatten_visible(forest: Forest, expansion: ExpansionState) -> list[VisibleTask]:
    """
    펼침 상태를 반영하여 화면에 보이는 작업만 평면화합니다.

    노드의 ID가 펼침 상태에 있을 때만 자식들이 출력됩니다.
    깊이는 같은 순회 중에 계산되며 최상위 작업이 0입니다.
    """
    rows: list[VisibleTask] = []
    stack: list[tuple[TaskNode, int]] = [(task, 0) for task in reversed(forest)]
    while stack:
        node, depth = stack.pop()
        rows.append(VisibleTask(node, depth))
        if node.children and node.id in expansion:
            stack.extend((child, depth + 1) for child in reversed(node.children))
    return rows


def find_by_id(forest: Forest, task_id: str) -> Optional[TaskNode]:
    """
    ID로 작업을 찾습니다 (깊이 우선, 첫 일치에서 중단).

    ID가 중복된 경우 전위 순서상 먼저 나오는 노드를 반환합니다.
    찾지 못하면 None을 반환합니다.
    """
    for node, _ in iter_with_depth(forest):
        if node.id == task_id:
            return node
    return None


def find_parent(forest: Forest, task_id: str) -> Optional[TaskNode]:
    """작업의 직계 상위 작업을 찾습니다. 최상위 작업이거나 없는 ID면 None."""
    for node, _ in iter_with_depth(forest):
        for child in node.children:
            if child.id == task_id:
                return node
    return None


def depth_map(forest: Forest) -> dict[str, int]:
    """작업 ID별 실제 깊이. 중복 ID는 먼저 나온 노드의 깊이를 유지합니다."""
    depths: dict[str, int] = {}
    for node, depth in iter_with_depth(forest):
        depths.setdefault(node.id, depth)
    return depths


def count_nodes(forest: Forest) -> int:
    """전체 노드 수를 재귀적으로 셉니다."""
    return sum(1 + count_nodes(task.children) for task in forest)
