"""애플리케이션 환경 설정 모듈.

Application configuration module using pydantic-settings.
All settings can be overridden via environment variables or a .env file.
"""

from pathlib import Path

from pydantic_settings import BaseSettings

# .env 파일 절대 경로 - CWD와 무관하게 항상 프로젝트 루트의 .env를 참조
# Absolute path to .env file - resolved against the project root, not CWD
_ENV_FILE: Path = Path(__file__).resolve().parent.parent / ".env"


class Settings(BaseSettings):
    """애플리케이션 전역 설정 - 환경 변수 기반 구성.

    Global application settings loaded from environment variables.

    Attributes:
        DATABASE_URL: 비동기 DB 연결 문자열 (Async connection string; aiosqlite or asyncpg)
        DEBUG: 디버그 모드 플래그 (Debug mode flag, enables SQL echo)
        APP_NAME: 애플리케이션 표시 이름 (Application display name)
        DEFAULT_PAGE_SIZE: 기본 페이지 크기 (Default limit for paged queries)
        MAX_PAGE_SIZE: 최대 페이지 크기 (Upper bound accepted by the API)
        AXIOM_API_TOKEN: Axiom API 토큰 (Axiom ingest token)
        AXIOM_DATASET: Axiom 데이터셋 이름 (Axiom dataset for request logs)
    """

    # 데이터베이스 - 기본은 로컬 SQLite 파일, 운영은 postgresql+asyncpg
    DATABASE_URL: str = "sqlite+aiosqlite:///./querypractice.db"

    # 앱 메타데이터 - Application metadata
    APP_NAME: str = "Query Practice API"
    DEBUG: bool = False  # True이면 SQLAlchemy SQL 로그 출력 (Enables SQL echo when True)

    # 페이지네이션 - offset/limit defaults for list endpoints
    DEFAULT_PAGE_SIZE: int = 20
    MAX_PAGE_SIZE: int = 100

    # Axiom 로깅 설정 - Axiom observability platform settings
    AXIOM_API_TOKEN: str = ""
    AXIOM_DATASET: str = ""

    model_config = {"env_file": _ENV_FILE, "env_file_encoding": "utf-8"}


# 전역 설정 싱글턴 인스턴스 - Global settings singleton instance
settings: Settings = Settings()
