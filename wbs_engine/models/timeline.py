"""타임라인(월 축) 및 간트 배치 모델."""

import calendar
from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator
from pydantic.alias_generators import to_camel


class MonthBucket(BaseModel):
    """달력 기준 한 달 구간 (간트 차트의 한 열)."""

    model_config = ConfigDict(frozen=True)

    year: int = Field(..., ge=1, le=9999, description="연도")
    month: int = Field(..., ge=1, le=12, description="월 (1~12)")

    @computed_field
    @property
    def label(self) -> str:
        return f"{self.year}년 {self.month}월"

    @property
    def start(self) -> date:
        """해당 월 1일."""
        return date(self.year, self.month, 1)

    @property
    def end(self) -> date:
        """해당 월 말일 (달력 정확)."""
        return date(self.year, self.month, calendar.monthrange(self.year, self.month)[1])

    @property
    def days(self) -> int:
        return calendar.monthrange(self.year, self.month)[1]

    def next(self) -> "MonthBucket":
        if self.month == 12:
            return MonthBucket(year=self.year + 1, month=1)
        return MonthBucket(year=self.year, month=self.month + 1)


class MonthAxis(BaseModel):
    """연속된 월 버킷의 순서 있는 모음."""

    model_config = ConfigDict(frozen=True)

    buckets: tuple[MonthBucket, ...] = Field(..., min_length=1, description="월 버킷 목록")

    @model_validator(mode="after")
    def _check_contiguous(self) -> "MonthAxis":
        for previous, current in zip(self.buckets, self.buckets[1:]):
            if previous.next() != current:
                raise ValueError(
                    f"월 버킷이 연속적이지 않습니다: {previous.label} 다음에 {current.label}"
                )
        return self

    @property
    def origin(self) -> date:
        """축의 시작일 (첫 버킷의 1일)."""
        return self.buckets[0].start

    @property
    def end(self) -> date:
        """축의 종료일 (마지막 버킷의 말일)."""
        return self.buckets[-1].end

    @property
    def total_days(self) -> int:
        return (self.end - self.origin).days + 1

    @property
    def size(self) -> int:
        return len(self.buckets)


class AxisSpec(BaseModel):
    """요청 본문에서 축을 지정하는 방법 (시작 연월 + 개월 수)."""

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    start_year: int = Field(..., ge=1, le=9999)
    start_month: int = Field(..., ge=1, le=12)
    months: Optional[int] = Field(None, ge=1, le=240, description="개월 수 (미지정 시 기본값)")


class BarSpan(BaseModel):
    """축 위 막대의 시작 위치와 너비."""

    offset: float = Field(..., description="축 시작점으로부터의 오프셋")
    width: float = Field(..., description="막대 너비")
    clamped: bool = Field(False, description="축 시작/최소 너비로 보정되었는지 여부")


class BucketHeader(BaseModel):
    """월 헤더 한 칸의 배치 (축 전체 대비 %)."""

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    label: str
    year: int
    month: int
    left_percent: float
    width_percent: float


class TaskProjection(BaseModel):
    """한 작업을 축에 투영한 결과."""

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    task_id: str
    in_buckets: list[bool] = Field(default_factory=list, description="버킷별 교차 여부")
    span: BarSpan
    visible: bool = Field(True, description="축 범위 안에 한 버킷이라도 걸치는지 여부")


class GanttRow(BaseModel):
    """간트 화면의 한 행."""

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    id: str
    name: str
    level: int
    depth: int
    has_children: bool
    expanded: bool
    status: str
    progress: int
    assignee: Optional[str] = None
    color: str
    status_color: str
    progress_color: str
    in_buckets: list[bool] = Field(default_factory=list)
    bar: Optional[BarSpan] = Field(None, description="리프 작업만 막대를 가짐 (축 대비 %)")


class TimelineRow(BaseModel):
    """타임라인 화면의 한 작업 행."""

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    id: str
    name: str
    level: int
    status: str
    progress: int
    assignee: Optional[str] = None
    status_color: str
    progress_color: str
    in_buckets: list[bool] = Field(default_factory=list)
    span: BarSpan


class TimelineGroup(BaseModel):
    """프로젝트별로 묶인 타임라인 행."""

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    project_id: str
    project_name: str
    rows: list[TimelineRow] = Field(default_factory=list)


class Timeline(BaseModel):
    """여러 프로젝트를 한 축 위에 모은 타임라인."""

    axis: MonthAxis
    groups: list[TimelineGroup] = Field(default_factory=list)
