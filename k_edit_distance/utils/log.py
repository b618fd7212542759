# k_edit_distance/utils/log.py
# 로깅 설정 유틸리티

import logging
import sys
from typing import List, Optional

PACKAGE_LOGGERS = [
    "k_edit_distance.service.phonetic",
    "k_edit_distance.routers.similarity",
    "k_edit_distance.app",
]

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# 이전 호출에서 붙인 핸들러 (다시 호출하면 교체)
_installed: List[logging.Handler] = []


def parse_level(level: str) -> int:
    """레벨 이름 -> logging 숫자 레벨. 모르는 이름이면 ValueError"""
    name = level.strip().upper()
    if name not in LOG_LEVELS:
        raise ValueError(f"unknown log level: {level!r} (expected one of {', '.join(LOG_LEVELS)})")
    return getattr(logging, name)


def setup_logging(
    level: str = "INFO",
    format_string: Optional[str] = None,
    log_file: Optional[str] = None
) -> None:
    """
    패키지 로깅을 설정합니다. 여러 번 호출해도 핸들러는 한 벌만 남습니다.

    Args:
        level: 로깅 레벨 (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: 로그 포맷 문자열
        log_file: 로그 파일 경로 (None이면 콘솔만)
    """
    numeric_level = parse_level(level)
    formatter = logging.Formatter(
        format_string or "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    root_logger = logging.getLogger()
    while _installed:
        handler = _installed.pop()
        root_logger.removeHandler(handler)
        handler.close()

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
        _installed.append(handler)

    root_logger.setLevel(numeric_level)
    for logger_name in PACKAGE_LOGGERS:
        logging.getLogger(logger_name).setLevel(numeric_level)
