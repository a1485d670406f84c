"""집계 및 데이터 품질 보고 모델."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel

from .task import TaskStatus


PLANNED_LABELS = frozenset({TaskStatus.PLANNED.value, TaskStatus.TODO.value})


class TaskStats(BaseModel):
    """
    상태별 작업 수 요약.

    저장되는 값은 상태별 카운트뿐이며, 완료/진행중/계획 수와 완료율은 모두
    카운트에서 계산됩니다.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    counts: dict[str, int] = Field(default_factory=dict, description="상태 라벨별 작업 수")

    @computed_field
    @property
    def completed(self) -> int:
        return self.counts.get(TaskStatus.DONE.value, 0)

    @computed_field
    @property
    def in_progress(self) -> int:
        return self.counts.get(TaskStatus.IN_PROGRESS.value, 0)

    @computed_field
    @property
    def planned(self) -> int:
        """계획중 + 해야할 일 작업 수."""
        return sum(count for label, count in self.counts.items() if label in PLANNED_LABELS)

    @computed_field
    @property
    def total(self) -> int:
        return sum(self.counts.values())

    @computed_field
    @property
    def other(self) -> int:
        """알려진 세 분류 어디에도 속하지 않는 작업 수."""
        return self.total - self.completed - self.in_progress - self.planned

    @computed_field
    @property
    def completion_rate(self) -> float:
        """완료율 (%, 소수점 한 자리)."""
        if self.total == 0:
            return 0.0
        return round(self.completed / self.total * 100, 1)


class IntervalIssue(BaseModel):
    """시작일이 종료일보다 늦은 작업."""

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    task_id: str
    start_date: date
    end_date: date


class DataQualityReport(BaseModel):
    """입력 포레스트의 데이터 품질 점검 결과."""

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    total_tasks: int = 0
    invalid_intervals: list[IntervalIssue] = Field(default_factory=list)
    duplicate_ids: list[str] = Field(default_factory=list)
    level_mismatches: list[str] = Field(
        default_factory=list,
        description="지정된 level이 실제 깊이(depth + 1)와 다른 작업 ID",
    )

    @computed_field
    @property
    def is_clean(self) -> bool:
        return not (self.invalid_intervals or self.duplicate_ids or self.level_mismatches)
