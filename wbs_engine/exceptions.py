"""
WBS 엔진 커스텀 예외 계층입니다.
호출 측 입력 오류를 구조화된 에러 코드와 메시지로 제공합니다.

조회 실패(NotFound)는 예외가 아니라 None 반환으로 표현합니다.
"""

from typing import Optional, Any


class WBSEngineError(Exception):
    """WBS 엔진 기본 예외 클래스."""

    def __init__(
        self,
        message: str,
        error_code: str = "ERR_UNKNOWN",
        details: Optional[Any] = None,
    ):
        self.message = message
        self.error_code = error_code
        self.details = details
        super().__init__(self.message)


class InputValidationError(WBSEngineError):
    """입력 유효성 검증 에러 (400 응답)."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_INPUT_001", details=details)


class AxisDefinitionError(WBSEngineError):
    """타임라인 축 정의 에러 (개월 수, 시작 월 등)."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_AXIS_001", details=details)


class MutationError(WBSEngineError):
    """작업 트리 변경 요청 에러 (지원하지 않는 필드 등)."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_MUT_001", details=details)
