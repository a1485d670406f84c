"""
WBS 엔진 서비스의 메인 진입점 파일입니다.
웹 서버 애플리케이션을 생성하고 설정하는 역할을 담당합니다.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from wbs_engine import __version__
from wbs_engine.config import get_settings
from wbs_engine.api.router import api_router
from wbs_engine.exceptions import (
    AxisDefinitionError,
    InputValidationError,
    MutationError,
    WBSEngineError,
)
from wbs_engine.models import ErrorResponse

# 로깅 설정
logging.basicConfig(
    level=get_settings().log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# 호출 측 입력 오류로 보고 400을 돌려줄 예외들
CLIENT_ERRORS = (InputValidationError, AxisDefinitionError, MutationError)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    애플리케이션의 생명주기(시작과 종료)를 관리하는 함수입니다.
    """
    settings = get_settings()
    logger.info(f"WBS 엔진이 다음 주소에서 시작됩니다: {settings.host}:{settings.port}")
    logger.info(
        f"막대 배치 기준: 평균 {settings.days_per_month}일/월, 최소 너비 {settings.min_bar_width}"
    )

    yield

    logger.info("WBS 엔진이 종료됩니다")


def create_app() -> FastAPI:
    """
    FastAPI 웹 애플리케이션을 생성하고 설정하는 함수입니다.

    주요 기능:
    1. 기본 앱 정보 설정 (제목, 설명 등)
    2. CORS 설정 (프론트엔드와의 통신 허용 설정)
    3. API 라우터 연결 (기능별 주소 연결)
    """
    settings = get_settings()

    app = FastAPI(
        title="WBS 엔진",
        description="작업 트리 평면화, 상태 집계, 간트/타임라인 배치 계산",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # CORS 미들웨어 설정: 프론트엔드 웹페이지가 이 서버에 접속할 수 있도록 허용
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 글로벌 예외 핸들러: 커스텀 예외를 구조화된 JSON 응답으로 변환
    @app.exception_handler(WBSEngineError)
    async def engine_error_handler(request: Request, exc: WBSEngineError):
        status_code = 400 if isinstance(exc, CLIENT_ERRORS) else 500
        body = ErrorResponse.from_exception(exc, path=request.url.path)
        return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))

    @app.exception_handler(Exception)
    async def general_error_handler(request: Request, exc: Exception):
        logger.error(f"처리되지 않은 예외: {exc}", exc_info=True)
        body = ErrorResponse(
            error_code="ERR_INTERNAL",
            message="내부 서버 오류가 발생했습니다",
            path=request.url.path,
        )
        return JSONResponse(status_code=500, content=body.model_dump(mode="json"))

    # API 라우터 포함: /api/v1 주소 아래에 모든 기능을 연결합니다.
    app.include_router(api_router, prefix="/api/v1")

    return app


# 애플리케이션 인스턴스 생성
app = create_app()


@app.get("/")
async def root():
    """
    루트 엔드포인트: 서버의 기본 정보를 반환합니다.
    """
    return {
        "name": "WBS 엔진",
        "version": __version__,
        "description": "작업 트리 평면화, 상태 집계, 간트/타임라인 배치 계산",
        "docs": "/docs",
        "api": "/api/v1",
    }


# 이 파일을 직접 실행했을 때 서버를 구동시키는 코드입니다.
if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(
        "wbs_engine.main:app",
        host=settings.host,
        port=settings.port,
        reload=True,
    )
