"""펼침/선택 상태.

작업 트리와 독립된 불변 집합입니다. 트리를 다시 불러와도 선택 상태는 유지되며,
더 이상 존재하지 않는 ID는 아무 영향도 주지 않습니다.
"""

from typing import Iterable, Iterator


class _ToggleSet:
    """toggle로만 조작되는 불변 집합의 공통 구현."""

    __slots__ = ("_items",)

    def __init__(self, items: Iterable = ()):
        self._items = frozenset(items)

    def toggle(self, item):
        """없으면 추가, 있으면 제거한 새 상태를 반환합니다."""
        return type(self)(self._items ^ {item})

    def __contains__(self, item) -> bool:
        return item in self._items

    def __iter__(self) -> Iterator:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._items == other._items

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._items))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({sorted(self._items)!r})"


class ExpansionState(_ToggleSet):
    """현재 펼쳐진 작업 ID 집합."""

    @property
    def ids(self) -> frozenset[str]:
        return self._items

    def is_expanded(self, task_id: str) -> bool:
        return task_id in self._items


class LevelFilter(_ToggleSet):
    """간트 화면에 표시할 레벨 집합 (기본: 1~5)."""

    DEFAULT_LEVELS = (1, 2, 3, 4, 5)

    def __init__(self, levels: Iterable[int] = DEFAULT_LEVELS):
        super().__init__(levels)

    @property
    def levels(self) -> frozenset[int]:
        return self._items

    def allows(self, level: int) -> bool:
        return level in self._items
