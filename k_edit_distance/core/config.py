# 환경설정 모듈
# - 로그 레벨, 서버 주소, 입력 길이 상한 등 환경변수로 덮어쓰기 가능

import os
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from ..utils.log import LOG_LEVELS


def _env_list(name: str, default: str) -> List[str]:
    raw = os.getenv(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


class Settings(BaseModel):
    # 로깅
    log_level: str = Field(
        default_factory=lambda: os.getenv("KED_LOG_LEVEL", "INFO"), validate_default=True
    )
    log_format: str = Field(default_factory=lambda: os.getenv(
        "KED_LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    ))
    # 지정하면 콘솔과 함께 파일에도 기록
    log_file: Optional[str] = Field(default_factory=lambda: os.getenv("KED_LOG_FILE") or None)

    # 서버
    host: str = Field(default_factory=lambda: os.getenv("KED_HOST", "0.0.0.0"))
    port: int = Field(default_factory=lambda: int(os.getenv("KED_PORT", "8000")))
    cors_origins: List[str] = Field(default_factory=lambda: _env_list("KED_CORS_ORIGINS", "*"))

    # API 입력 문자열 최대 길이 (라이브러리 함수 자체는 제한 없음)
    max_text_length: int = Field(default_factory=lambda: int(os.getenv("KED_MAX_TEXT_LENGTH", "256")))

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, v):
        # 시작 전에 잘못된 레벨을 걸러낸다
        name = v.strip().upper()
        if name not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return name


settings = Settings()


def refresh_settings() -> Settings:
    """
    환경변수 변경 후 런타임 갱신하려면 호출.
    입력 길이 상한은 다음 요청부터, 로그 설정은 다음 앱 시작(lifespan)부터 반영된다.
    CORS origin 은 앱을 만들 때 고정되므로 create_app() 으로 새로 만든 앱에만 반영된다.
    """
    global settings
    settings = Settings()
    return settings
