"""
헬스 체크(Health Check) 엔드포인트입니다.
서버가 살아서 정상적으로 응답하는지 확인하는 용도입니다.
"""

from fastapi import APIRouter

from wbs_engine.config import get_settings

router = APIRouter()


@router.get("")
async def health_check():
    """
    기본 상태 확인 함수.
    서버가 켜져 있으면 {"status": "healthy"}를 반환합니다.
    """
    return {"status": "healthy"}


@router.get("/detail")
async def health_check_detail():
    """
    상세 상태 확인 함수.
    현재 배치 관련 설정값도 같이 보여줍니다.
    """
    settings = get_settings()
    return {
        "status": "healthy",
        "config": {
            "days_per_month": settings.days_per_month,  # 막대 배치용 평균 월 일수
            "min_bar_width": settings.min_bar_width,  # 최소 막대 너비 (버킷 단위)
            "default_axis_months": settings.default_axis_months,
            "default_level_filter": settings.default_level_filter,
        }
    }
