"""
HTTP 요청 로깅 미들웨어

요청마다 request_id를 정하고 응답에 X-Request-ID, X-Response-Time 헤더를 붙인다.
4xx는 warning, 5xx는 error 레벨로 남긴다.
"""

import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from app.core.context import clear_context, set_request_id
from app.core.logging import get_logger

logger = get_logger(__name__)

UNLOGGED_PATHS = frozenset({"/health", "/favicon.ico"})
UNLOGGED_PREFIXES = ("/docs", "/redoc", "/openapi.json")


def _is_unlogged(path: str) -> bool:
    return path in UNLOGGED_PATHS or path.startswith(UNLOGGED_PREFIXES)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """request_id 부여와 요청 결과 로깅"""

    async def dispatch(self, request: Request, call_next) -> Response:
        path = request.url.path
        if _is_unlogged(path):
            return await call_next(request)

        request_id = set_request_id(request.headers.get("X-Request-ID"))
        request.state.request_id = request_id
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                "요청 처리 중 예외 method=%s path=%s error=%s duration_ms=%.2f",
                request.method,
                path,
                type(e).__name__,
                _elapsed_ms(started),
            )
            raise
        finally:
            clear_context()

        duration_ms = _elapsed_ms(started)
        status = response.status_code
        log = logger.error if status >= 500 else logger.warning if status >= 400 else logger.info
        log(
            "요청 완료 method=%s path=%s status=%d duration_ms=%.2f",
            request.method,
            path,
            status,
            duration_ms,
            request_id=request_id,
        )

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Response-Time"] = f"{duration_ms:.2f}ms"
        return response


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)
