"""API 에러 응답 본문."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field

from wbs_engine.exceptions import WBSEngineError


class ErrorResponse(BaseModel):
    """
    엔진 예외를 감싼 JSON 에러 본문.

    날짜 입력 오류의 경우 details["invalid_parts"]에 다시 입력해야 할 부분
    ("month", "day")이 담기므로 화면에서 해당 입력칸만 비울 수 있습니다.
    """

    error_code: str = Field(description="ERR_INPUT_001 / ERR_AXIS_001 / ERR_MUT_001 / ERR_INTERNAL")
    message: str
    details: Optional[Any] = None
    path: Optional[str] = Field(None, description="실패한 요청 경로")
    timestamp: datetime = Field(default_factory=datetime.now)

    @classmethod
    def from_exception(cls, exc: WBSEngineError, path: Optional[str] = None) -> "ErrorResponse":
        return cls(error_code=exc.error_code, message=exc.message, details=exc.details, path=path)
