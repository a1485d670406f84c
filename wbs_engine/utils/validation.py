"""입력 유효성 검증 유틸리티.

날짜 입력은 YYYY-MM-DD 또는 자릿수 입력칸에서 모은 YYYYMMDD 형식을 받습니다.
"""

import re
from datetime import date
from typing import Union

from wbs_engine.exceptions import InputValidationError


COMPACT_DATE_PATTERN = re.compile(r"^\d{8}$")


def parse_compact_date(value: str) -> date:
    """
    8자리 YYYYMMDD 문자열을 날짜로 변환합니다.

    - 월은 01~12, 일은 01~31 범위여야 합니다.
    - 범위는 맞지만 달력에 없는 날짜(예: 20240230)도 거부합니다.

    Raises:
        InputValidationError: 형식 또는 범위 오류. details["invalid_parts"]에
            비워야 할 부분("month", "day")이 담깁니다.
    """
    text = value.strip() if value else ""
    if not COMPACT_DATE_PATTERN.match(text):
        raise InputValidationError(
            "날짜는 8자리 숫자(YYYYMMDD)여야 합니다",
            details={"value": value},
        )

    year, month, day = int(text[:4]), int(text[4:6]), int(text[6:8])
    invalid_parts = []
    if month < 1 or month > 12:
        invalid_parts.append("month")
    if day < 1 or day > 31:
        invalid_parts.append("day")
    if invalid_parts:
        raise InputValidationError(
            "월은 01-12, 일은 01-31 사이의 값이어야 합니다",
            details={"value": value, "invalid_parts": invalid_parts},
        )

    try:
        return date(year, month, day)
    except ValueError as exc:
        raise InputValidationError(
            f"존재하지 않는 날짜입니다: {text}",
            details={"value": value, "invalid_parts": ["day"]},
        ) from exc


def parse_task_date(value: Union[date, str]) -> date:
    """date, YYYY-MM-DD, YYYYMMDD 중 하나를 날짜로 변환합니다."""
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise InputValidationError(
            "날짜는 문자열 또는 date 여야 합니다",
            details={"value": repr(value)},
        )

    text = value.strip()
    if COMPACT_DATE_PATTERN.match(text):
        return parse_compact_date(text)
    try:
        return date.fromisoformat(text)
    except ValueError as exc:
        raise InputValidationError(
            f"날짜 형식이 올바르지 않습니다 (YYYY-MM-DD): {value}",
            details={"value": value},
        ) from exc

