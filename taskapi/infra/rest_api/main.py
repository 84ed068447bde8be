from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from taskapi.infra.config import Settings
from taskapi.infra.di import DIContainer
from taskapi.infra.logging_config import LoggingMiddleware, configure_logging, get_logger
from taskapi.infra.tortoise_client.database import open_database
from taskapi.domain.exception.domain_exceptions import DomainError

from .routers.users import router as users_router
from .routers.auth import router as auth_router
from .routers.tasks import router as tasks_router
from .schemas import HealthResponse
from .error_handlers import (
    handle_validation_exception,
    handle_domain_exception,
    handle_http_exception,
    handle_generic_error,
)

API_VERSION = "0.1.0"

logger = get_logger("app")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    アプリケーションを組み立てる

    DBコネクションは lifespan の中で開かれ、DIコンテナ経由でリポジトリに渡される。
    終了時（例外発生時を含む）には必ず閉じられる。
    """
    settings = settings or Settings()
    configure_logging(settings.log_level, settings.log_file)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Application starting up", extra={"environment": settings.environment})
        async with open_database(settings) as db:
            app.state.container = DIContainer(db, settings)
            yield
        logger.info("Application shutdown complete")

    app = FastAPI(
        title="User Task Service API",
        version=API_VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Add logging middleware
    app.add_middleware(LoggingMiddleware)

    # CORS 設定（環境設定に基づく）
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Origin", "X-Requested-With", "Content-Type", "Accept", "Authorization"],
    )

    # 各機能モジュールのルーター登録
    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(tasks_router)

    @app.get("/health", response_model=HealthResponse)
    async def health_check():
        """ヘルスチェックエンドポイント"""
        return HealthResponse(status="OK", timestamp=datetime.now(timezone.utc).isoformat())

    # エラーハンドラーの登録
    app.add_exception_handler(DomainError, handle_domain_exception)
    app.add_exception_handler(RequestValidationError, handle_validation_exception)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_generic_error)

    return app
