from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    WBS 엔진 서비스의 설정을 관리하는 클래스입니다.
    환경 변수(.env 파일)에서 설정값을 읽어옵니다.
    """

    # 서버 설정: 서버가 실행될 주소와 포트 번호
    host: str = "0.0.0.0"  # 모든 외부 접속 허용
    port: int = 8000
    allowed_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    log_level: str = "INFO"

    # 간트/타임라인 배치 설정
    days_per_month: float = 30.44  # 월 버킷 환산용 평균 일수 (근사치)
    min_bar_width: float = 0.2  # 최소 막대 너비 (버킷 단위)
    default_axis_months: int = 5  # 축을 지정하지 않았을 때의 기본 개월 수
    default_level_filter: list[int] = [1, 2, 3, 4, 5]

    class Config:
        # 설정을 읽어올 파일 지정
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_prefix = "WBS_"


@lru_cache()
def get_settings() -> Settings:
    """
    설정을 가져오는 함수입니다.
    @lru_cache를 사용하여 한 번 읽은 설정은 메모리에 저장해두고 재사용합니다.
    """
    return Settings()
