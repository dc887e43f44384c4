from contextlib import asynccontextmanager

from fastapi import FastAPI
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from app.api.routers import api_router
from app.core.config import settings
from app.core.exceptions import register_exception_handlers
from app.core.limiter import limiter
from app.core.logging import get_logger, setup_logging
from app.core.middleware import RequestLoggingMiddleware
from app.infra.github.client import close_client as close_github_client

setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """프로덕션 설정 검증 후 시작, 종료 시 GitHub 클라이언트 정리"""
    if settings.is_production:
        errors = settings.validate_for_production()
        if errors:
            raise RuntimeError(f"프로덕션 설정 누락: {', '.join(errors)}")

    logger.info(
        "PR 영상 서비스 시작 environment=%s provider=%s video=%dx%d@%dfps frames=%d",
        settings.environment,
        settings.llm_provider,
        settings.video_width,
        settings.video_height,
        settings.video_fps,
        settings.video_total_frames,
    )
    try:
        yield
    finally:
        await close_github_client()
        logger.info("PR 영상 서비스 종료")


def create_app() -> FastAPI:
    docs_enabled = not settings.is_production
    application = FastAPI(
        title="PR Video Service",
        version="1.0.0",
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
        lifespan=lifespan,
    )

    application.state.limiter = limiter
    application.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    application.add_middleware(SlowAPIMiddleware)
    application.add_middleware(RequestLoggingMiddleware)

    register_exception_handlers(application)
    application.include_router(api_router)

    @application.get("/health")
    async def health_check():
        return {"status": "UP"}

    return application


app = create_app()
