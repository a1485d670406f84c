"""
여러 프로젝트의 작업을 하나의 월 축에 모아 보여주는 타임라인 API입니다.
"""

from typing import Optional

from fastapi import APIRouter
from pydantic import Field

from wbs_engine.api.common import CamelModel, dump
from wbs_engine.config import get_settings
from wbs_engine.engine import bucket_header_layout, build_month_axis, build_timeline
from wbs_engine.models import AxisSpec, ProjectTasks

router = APIRouter()


class TimelineRequest(CamelModel):
    """타임라인 구성 요청."""
    projects: list[ProjectTasks] = Field(default_factory=list, description="프로젝트별 작업")
    axis: Optional[AxisSpec] = Field(None, description="월 축 (없으면 작업 기간으로 추론)")
    max_depth: int = Field(0, ge=0, le=10, description="포함할 최대 깊이 (0 = Lv1 작업만)")


@router.post("")
async def project_timeline(request: TimelineRequest) -> dict:
    """
    프로젝트별로 묶인 작업 행과 월 헤더를 반환합니다.

    막대 위치는 평균 월 길이(근사치) 기준 버킷 단위이며,
    버킷별 표시 여부(inBuckets)는 달력 기준으로 정확하게 계산됩니다.
    """
    settings = get_settings()
    axis = None
    if request.axis is not None:
        months = request.axis.months or settings.default_axis_months
        axis = build_month_axis(request.axis.start_year, request.axis.start_month, months)

    timeline = build_timeline(
        request.projects,
        axis=axis,
        max_depth=request.max_depth,
        days_per_unit=settings.days_per_month,
        min_width=settings.min_bar_width,
        default_months=settings.default_axis_months,
    )
    return {
        "headers": [dump(header) for header in bucket_header_layout(timeline.axis)],
        "groups": [dump(group) for group in timeline.groups],
    }
