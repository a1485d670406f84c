"""
API 라우터 설정 파일입니다.
각 기능별로 나누어진 API 주소들을 하나로 모으는 역할을 합니다.
"""

from fastapi import APIRouter

from wbs_engine.api.endpoints import health, wbs, timeline, resources

# 메인 API 라우터 생성
api_router = APIRouter()

# 헬스 체크 엔드포인트: 서버 상태 확인용 (/health)
api_router.include_router(
    health.router,
    prefix="/health",
    tags=["health"]
)

# WBS 엔드포인트: 평면화, 통계, 간트, 변경 (/wbs)
api_router.include_router(
    wbs.router,
    prefix="/wbs",
    tags=["wbs"]
)

# 타임라인 엔드포인트: 여러 프로젝트 통합 일정 (/timeline)
api_router.include_router(
    timeline.router,
    prefix="/timeline",
    tags=["timeline"]
)

# 리소스 엔드포인트: 구성원-작업 연결 (/resources)
api_router.include_router(
    resources.router,
    prefix="/resources",
    tags=["resources"]
)
