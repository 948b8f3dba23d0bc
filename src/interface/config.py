"""환경 변수 기반 애플리케이션 설정."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_TIMEOUT = 30.0
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000


@dataclass(frozen=True)
class AppConfig:
    """실행에 필요한 설정 값.

    프로세스 전역 상태 없이 진입점에서 만들어 의존성 조립 함수로 넘긴다.

    Attributes:
        dart_api_key: DART API 인증키 (DART_API_KEY)
        api_timeout: DART API 요청 타임아웃 초 (DART_API_TIMEOUT)
        account_keywords_path: 계정과목 키워드 TOML 경로 (ACCOUNT_KEYWORDS_PATH)
        host: HTTP 서버 호스트 (HOST)
        port: HTTP 서버 포트 (PORT)
        log_level: 로그 레벨 (LOG_LEVEL)
    """
    dart_api_key: Optional[str]
    api_timeout: float = DEFAULT_TIMEOUT
    account_keywords_path: Optional[str] = None
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> "AppConfig":
        """.env 파일과 환경 변수에서 설정을 읽는다."""
        if load_env_file:
            load_dotenv()

        return cls(
            dart_api_key=(os.getenv("DART_API_KEY") or "").strip() or None,
            api_timeout=float(os.getenv("DART_API_TIMEOUT", DEFAULT_TIMEOUT)),
            account_keywords_path=os.getenv("ACCOUNT_KEYWORDS_PATH") or None,
            host=os.getenv("HOST", DEFAULT_HOST),
            port=int(os.getenv("PORT", DEFAULT_PORT)),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
