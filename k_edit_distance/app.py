"""
K-Edit-Distance FastAPI Server

자음 정규화 편집 거리 계산을 HTTP로 노출하는 얇은 래퍼
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .core import config
from .routers.similarity import router as similarity_router
from .utils.log import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 생명주기 관리"""
    settings = config.settings
    setup_logging(settings.log_level, settings.log_format, settings.log_file)
    logger.info("K-Edit-Distance server starting (max_text_length=%d)", settings.max_text_length)
    yield
    logger.info("K-Edit-Distance server stopped")


def create_app() -> FastAPI:
    app = FastAPI(title="K-Edit-Distance", version=__version__, lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.settings.cors_origins, allow_methods=["*"], allow_headers=["*"],
    )

    @app.get("/v1/health")
    async def health():
        return {"status": "ok", "version": app.version}

    app.include_router(similarity_router, prefix="/v1")
    return app


app = create_app()
