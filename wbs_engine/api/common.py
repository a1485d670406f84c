"""엔드포인트 공통 요청 모델과 변환 헬퍼."""

import logging
from typing import Any, Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from wbs_engine.config import get_settings
from wbs_engine.engine import (
    build_month_axis,
    current_month_axis,
    find_invalid_intervals,
    flatten,
    infer_month_axis,
)
from wbs_engine.models import AxisSpec, Forest, MonthAxis, TaskNode

logger = logging.getLogger(__name__)


class CamelModel(BaseModel):
    """camelCase 본문과 snake_case 이름을 모두 받는 요청 모델."""

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)


class ForestRequest(CamelModel):
    """작업 포레스트를 담은 요청."""
    tasks: list[TaskNode] = Field(default_factory=list, description="최상위 작업 목록")


def dump(model: BaseModel, **kwargs: Any) -> dict:
    """API 응답용 JSON 호환 dict (camelCase)."""
    return model.model_dump(mode="json", by_alias=True, **kwargs)


def task_summary(task: TaskNode) -> dict:
    """하위 작업을 제외한 작업 요약."""
    data = dump(task, exclude={"children"})
    data["hasChildren"] = task.has_children
    return data


def dump_forest(forest: Iterable[TaskNode]) -> list[dict]:
    return [dump(task) for task in forest]


def resolve_axis(spec: Optional[AxisSpec], forest: Forest) -> MonthAxis:
    """
    요청에 축이 있으면 그대로 만들고, 없으면 작업 전체를 덮도록 추론합니다.
    작업도 없으면 이번 달부터 기본 개월 수만큼의 축을 사용합니다.
    """
    settings = get_settings()
    if spec is None:
        tasks = flatten(forest)
        if not tasks:
            return current_month_axis(settings.default_axis_months)
        return infer_month_axis(tasks)
    months = spec.months or settings.default_axis_months
    return build_month_axis(spec.start_year, spec.start_month, months)


def warn_invalid_intervals(forest: Forest) -> list[str]:
    """시작일이 종료일보다 늦은 작업을 경고 로그로 남기고 ID 목록을 반환합니다."""
    issues = find_invalid_intervals(forest)
    for issue in issues:
        logger.warning(
            f"[DataQuality] 시작일이 종료일보다 늦은 작업: {issue.task_id} "
            f"({issue.start_date} ~ {issue.end_date})"
        )
    return [issue.task_id for issue in issues]
