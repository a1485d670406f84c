"""WBS 작업 노드 모델.

작업 트리는 부모가 자식 목록을 소유하는 재귀 구조이며, 부모 역참조는 두지 않습니다.
모든 노드는 불변(frozen)이므로 변경은 항상 새 트리를 만드는 방식(copy-on-write)으로만 수행됩니다.
"""

import math
from datetime import date
from enum import Enum
from typing import Any, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


PROGRESS_MIN = 0
PROGRESS_MAX = 100


class TaskStatus(str, Enum):
    """화면에서 관찰되는 작업 상태 라벨.

    엔진은 상태를 불투명한 문자열로 다루며, 집계와 색상 매핑에만 사용합니다.
    """
    PLANNED = "계획중"
    IN_PROGRESS = "진행중"
    DONE = "완료"
    TODO = "해야할 일"  # 일부 화면에서만 쓰이는 과도기 라벨
    DELAYED = "지연"


def clamp_progress(value: Any) -> int:
    """
    진행률을 0~100 범위의 정수로 보정합니다.

    범위 밖의 값(무한대 포함)은 경계값으로 보정하고, 소수점 이하는 버립니다.

    Raises:
        ValueError: 숫자로 해석할 수 없거나 NaN인 경우
        TypeError: 숫자나 문자열이 아닌 경우
    """
    if isinstance(value, int):
        return max(PROGRESS_MIN, min(PROGRESS_MAX, value))
    number = float(value)
    if math.isnan(number):
        raise ValueError("진행률은 NaN일 수 없습니다")
    return int(max(PROGRESS_MIN, min(PROGRESS_MAX, number)))


class TaskNode(BaseModel):
    """WBS 작업 노드 (유일한 엔티티)."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    id: str = Field(..., min_length=1, description="작업 ID (예: 1-2-3)")
    name: str = Field(..., min_length=1, description="작업명")
    level: int = Field(1, ge=1, description="작성자가 지정한 계층 레벨")
    start_date: date = Field(..., description="시작일")
    end_date: date = Field(..., description="종료일")
    assignee: Optional[str] = Field(None, description="담당자 표시 이름")
    assignee_id: Optional[str] = Field(None, description="담당자 식별자")
    status: str = Field(TaskStatus.PLANNED.value, description="작업 상태")
    progress: int = Field(0, description="진행률 (0~100)")
    description: Optional[str] = Field(None, description="작업 설명")
    children: tuple["TaskNode", ...] = Field(default_factory=tuple, description="하위 작업")

    @field_validator("progress", mode="before")
    @classmethod
    def _clamp_progress(cls, value: Any) -> int:
        return clamp_progress(value)

    @field_validator("status", mode="before")
    @classmethod
    def _status_label(cls, value: Any) -> Any:
        if isinstance(value, Enum):
            return value.value
        return value

    @field_validator("children", mode="before")
    @classmethod
    def _children_or_empty(cls, value: Any) -> Any:
        # children 필드가 null로 오는 경우도 리프로 취급
        return () if value is None else value

    @property
    def is_leaf(self) -> bool:
        """하위 작업이 없으면 리프."""
        return not self.children

    @property
    def has_children(self) -> bool:
        return bool(self.children)

    @property
    def has_valid_interval(self) -> bool:
        """시작일이 종료일보다 늦지 않은지 여부."""
        return self.start_date <= self.end_date

    @property
    def duration_days(self) -> int:
        """양 끝을 포함한 기간 (일). 구간이 뒤집힌 경우 0 이하가 될 수 있습니다."""
        return (self.end_date - self.start_date).days + 1


TaskNode.model_rebuild()

Forest = Sequence[TaskNode]
"""최상위 작업들의 순서 있는 모음."""


class ProjectTasks(BaseModel):
    """타임라인 화면에서 프로젝트 하나가 제공하는 작업 묶음."""

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    id: str = Field(..., description="프로젝트 ID")
    name: str = Field(..., min_length=1, description="프로젝트명")
    status: Optional[str] = Field(None, description="프로젝트 상태")
    tasks: list[TaskNode] = Field(default_factory=list, description="프로젝트의 작업 포레스트")
