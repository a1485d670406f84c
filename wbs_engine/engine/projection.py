"""날짜 → 배치 투영기.

작업의 [시작일, 종료일] 구간을 고정된 월 축 위의 위치로 변환합니다.
두 가지 정밀도가 의도적으로 공존합니다.

- 버킷 소속 판정(intersects_bucket): 달력 기준 정확한 월 경계를 사용합니다.
- 막대 배치(position_within_axis): 한 달을 평균 30.44일로 근사합니다.
  따라서 월 초에 시작하는 작업이 이전 버킷 인덱스로 계산될 수 있습니다.

두 계산을 하나로 합치면 막대 위치나 소속 판정이 바뀌므로 별도 함수로 유지합니다.
모든 함수는 순수 함수이며 작업을 변경하지 않습니다.
"""

import math
from datetime import date
from typing import Iterable, Optional

from pydantic import ValidationError

from wbs_engine.exceptions import AxisDefinitionError
from wbs_engine.models import (
    BarSpan,
    BucketHeader,
    MonthAxis,
    MonthBucket,
    TaskNode,
    TaskProjection,
)


AVERAGE_DAYS_PER_MONTH = 30.44
DEFAULT_MIN_BAR_WIDTH = 0.2  # 버킷 너비 대비


# ==================== 축 구성 ====================

def build_month_axis(start_year: int, start_month: int, count: int) -> MonthAxis:
    """시작 연월부터 count개월의 연속된 축을 만듭니다."""
    if count < 1:
        raise AxisDefinitionError(
            "축은 최소 1개월 이상이어야 합니다",
            details={"count": count},
        )
    try:
        bucket = MonthBucket(year=start_year, month=start_month)
    except ValidationError as exc:
        raise AxisDefinitionError(
            f"유효하지 않은 시작 연월입니다: {start_year}-{start_month}",
            details={"start_year": start_year, "start_month": start_month},
        ) from exc

    buckets = [bucket]
    for _ in range(count - 1):
        bucket = bucket.next()
        buckets.append(bucket)
    return MonthAxis(buckets=tuple(buckets))


def month_axis_between(start: date, end: date) -> MonthAxis:
    """start가 속한 월부터 end가 속한 월까지의 축."""
    if end < start:
        raise AxisDefinitionError(
            "축 종료일이 시작일보다 빠릅니다",
            details={"start": start.isoformat(), "end": end.isoformat()},
        )
    count = (end.year - start.year) * 12 + (end.month - start.month) + 1
    return build_month_axis(start.year, start.month, count)


def current_month_axis(count: int, today: Optional[date] = None) -> MonthAxis:
    """이번 달부터 count개월의 축. 작업이 없어 추론할 수 없을 때 사용합니다."""
    today = today or date.today()
    return build_month_axis(today.year, today.month, count)


def infer_month_axis(tasks: Iterable[TaskNode]) -> MonthAxis:
    """작업들의 가장 이른 날짜부터 가장 늦은 날짜까지 덮는 축을 추론합니다."""
    earliest = None
    latest = None
    for task in tasks:
        # 구간이 뒤집힌 작업도 축 안에 들어오도록 양 끝을 모두 고려
        low, high = sorted((task.start_date, task.end_date))
        earliest = low if earliest is None else min(earliest, low)
        latest = high if latest is None else max(latest, high)

    if earliest is None or latest is None:
        raise AxisDefinitionError("작업이 없어 축을 추론할 수 없습니다")
    return month_axis_between(earliest, latest)


# ==================== 버킷 소속 (정확) ====================

def intersects_bucket(task: TaskNode, bucket: MonthBucket) -> bool:
    """작업 구간과 월 버킷이 겹치는지 여부 (양 끝 포함)."""
    return task.start_date <= bucket.end and task.end_date >= bucket.start


# ==================== 막대 배치 (근사) ====================

def bucket_index(axis_origin: date, day: date, days_per_unit: float = AVERAGE_DAYS_PER_MONTH) -> int:
    """축 시작점 기준 평균 월 길이로 환산한 버킷 인덱스 (음수 가능)."""
    return math.floor((day - axis_origin).days / days_per_unit)


def position_within_axis(
    task: TaskNode,
    axis_origin: date,
    bucket_width: float = 1.0,
    days_per_unit: float = AVERAGE_DAYS_PER_MONTH,
    min_width: float = DEFAULT_MIN_BAR_WIDTH,
) -> BarSpan:
    """
    작업 막대의 오프셋과 너비를 계산합니다.

    오프셋 = 시작 버킷 인덱스 × 버킷 너비,
    너비 = (종료 버킷 인덱스 - 시작 버킷 인덱스 + 1) × 버킷 너비.

    Args:
        task: 배치할 작업
        axis_origin: 축 시작일
        bucket_width: 버킷 하나의 너비 (단위 자유: %, px, 칸 등)
        days_per_unit: 버킷 하나에 해당하는 평균 일수
        min_width: 최소 막대 너비 (버킷 너비 대비)

    Returns:
        BarSpan: 축 시작 이전 작업은 오프셋 0으로, 뒤집힌 구간은 최소 너비로 보정됨
    """
    start_index = bucket_index(axis_origin, task.start_date, days_per_unit)
    end_index = bucket_index(axis_origin, task.end_date, days_per_unit)
    clamped = False

    if start_index < 0:
        start_index = 0
        clamped = True

    width = (end_index - start_index + 1) * bucket_width
    minimum = min_width * bucket_width
    if width < minimum:
        width = minimum
        clamped = True

    return BarSpan(offset=start_index * bucket_width, width=width, clamped=clamped)


def day_span_within_axis(
    task: TaskNode,
    axis: MonthAxis,
    min_width: float = DEFAULT_MIN_BAR_WIDTH,
) -> BarSpan:
    """
    일 단위 정밀도로 축 전체 대비 막대 위치를 % 로 계산합니다.

    WBS 간트 화면의 리프 작업 막대에 사용됩니다. min_width는 버킷 하나의
    평균 너비 대비 비율입니다.
    """
    total_days = axis.total_days
    start_days = (task.start_date - axis.origin).days
    end_days = (task.end_date - axis.origin).days
    clamped = False

    if start_days < 0:
        start_days = 0
        clamped = True

    width = (end_days - start_days + 1) / total_days * 100
    minimum = min_width * 100 / axis.size
    if width < minimum:
        width = minimum
        clamped = True

    return BarSpan(offset=start_days / total_days * 100, width=width, clamped=clamped)


def bucket_header_layout(axis: MonthAxis) -> list[BucketHeader]:
    """월 헤더 각 칸의 위치와 너비 (축 전체 일수 대비 %)."""
    total_days = axis.total_days
    headers = []
    for bucket in axis.buckets:
        left_days = (bucket.start - axis.origin).days
        headers.append(BucketHeader(
            label=bucket.label,
            year=bucket.year,
            month=bucket.month,
            left_percent=left_days / total_days * 100,
            width_percent=bucket.days / total_days * 100,
        ))
    return headers


def project_task(
    task: TaskNode,
    axis: MonthAxis,
    days_per_unit: float = AVERAGE_DAYS_PER_MONTH,
    min_width: float = DEFAULT_MIN_BAR_WIDTH,
) -> TaskProjection:
    """버킷별 소속 여부와 근사 막대 배치를 한 번에 계산합니다."""
    in_buckets = [intersects_bucket(task, bucket) for bucket in axis.buckets]
    span = position_within_axis(
        task,
        axis.origin,
        days_per_unit=days_per_unit,
        min_width=min_width,
    )
    return TaskProjection(
        task_id=task.id,
        in_buckets=in_buckets,
        span=span,
        visible=any(in_buckets),
    )
