from enum import Enum

from fastapi import Request
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.core.context import get_request_id
from app.core.logging import get_logger

logger = get_logger(__name__)


class ErrorCode(str, Enum):
    """API 에러 응답의 error_code 값"""

    INVALID_REFERENCE = "INVALID_REFERENCE"
    MALFORMED_DIFF = "MALFORMED_DIFF"
    GITHUB_API_ERROR = "GITHUB_API_ERROR"
    NARRATION_UNAVAILABLE = "NARRATION_UNAVAILABLE"
    COMPOSITION_PRECONDITION = "COMPOSITION_PRECONDITION"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class CustomException(Exception):
    """HTTP 상태 코드와 에러 코드를 가진 서비스 예외

    하위 클래스는 status_code, error_code, message만 지정하고
    호출부는 상황별 detail만 넘긴다.
    """

    status_code: int = 500
    error_code: ErrorCode = ErrorCode.INTERNAL_ERROR
    message: str = "요청을 처리하지 못했습니다"

    def __init__(self, detail: str | None = None):
        self.detail = detail
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"{self.message}: {self.detail}" if self.detail else self.message


class InvalidReferenceError(CustomException):
    status_code = 400
    error_code = ErrorCode.INVALID_REFERENCE
    message = "유효하지 않은 PR URL입니다"


class MalformedDiffError(CustomException):
    status_code = 422
    error_code = ErrorCode.MALFORMED_DIFF
    message = "diff를 파싱할 수 없습니다"


class GitHubAPIError(CustomException):
    status_code = 502
    error_code = ErrorCode.GITHUB_API_ERROR
    message = "GitHub API 호출에 실패했습니다"


class NarrationUnavailableError(CustomException):
    """LLM 나레이션 실패, 분석 흐름에서는 폴백으로 흡수됨"""

    status_code = 502
    error_code = ErrorCode.NARRATION_UNAVAILABLE
    message = "나레이션 생성에 실패했습니다"


class CompositionPreconditionError(CustomException):
    status_code = 400
    error_code = ErrorCode.COMPOSITION_PRECONDITION
    message = "타임라인 구성 조건이 올바르지 않습니다"


class AnalysisFailedError(CustomException):
    message = "PR 분석에 실패했습니다"


# 워크플로우 상태의 error_code로 예외 복원
ERRORS_BY_CODE: dict[str, type[CustomException]] = {
    error.error_code: error
    for error in (
        InvalidReferenceError,
        MalformedDiffError,
        GitHubAPIError,
        NarrationUnavailableError,
        CompositionPreconditionError,
    )
}


def register_exception_handlers(app):
    @app.exception_handler(CustomException)
    async def custom_exception_handler(request: Request, exc: CustomException):
        log = logger.error if exc.status_code >= 500 else logger.warning
        log(
            "요청 처리 실패 path=%s error_code=%s detail=%s",
            request.url.path,
            exc.error_code.value,
            exc.detail,
        )

        content = {
            "error_code": exc.error_code,
            "message": exc.message,
            "request_id": get_request_id(),
        }
        if exc.detail and not settings.is_production:
            content["detail"] = exc.detail

        return JSONResponse(status_code=exc.status_code, content=content)
