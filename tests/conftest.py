"""
tests/conftest.py - 공통 픽스처
"""
import logging

import pytest
from fastapi.testclient import TestClient

from k_edit_distance.app import app
from k_edit_distance.core import config
from k_edit_distance.utils.log import PACKAGE_LOGGERS

# 벤치마크에 쓰이던 단어 목록
WORDS = [
    "국어",
    "숙어",
    "나무가지",
    "신문",
    "검은색",
    "분홍색",
    "진공청소기",
    "택시",
    "모시금자라남생이잎벌레",
]


@pytest.fixture
def words():
    return list(WORDS)


@pytest.fixture
def restore_root_logger():
    """setup_logging 이 붙인 핸들러/레벨 원복"""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    package_levels = {name: logging.getLogger(name).level for name in PACKAGE_LOGGERS}
    yield root
    for name, lvl in package_levels.items():
        logging.getLogger(name).setLevel(lvl)
    # pytest 의 캡처 핸들러는 건드리지 않는다
    for h in list(root.handlers):
        if h not in handlers and type(h) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(h)
            h.close()
    root.setLevel(level)


@pytest.fixture
def fresh_settings(monkeypatch):
    """환경변수를 바꾼 뒤 settings 를 다시 읽고, 끝나면 원래대로 돌린다"""
    def _apply(**env):
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        return config.refresh_settings()

    yield _apply
    monkeypatch.undo()
    config.refresh_settings()


@pytest.fixture
def client(restore_root_logger):
    with TestClient(app) as c:
        yield c
