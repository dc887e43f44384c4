"""
요청 및 PR 분석 컨텍스트

- request_id: HTTP 요청 식별자, X-Request-ID 헤더로 전달
- pr_ref: 분석 중인 PR (owner/repo#number)
- stage: 분석 워크플로우 단계 (collect, parse, narrate, assemble)

contextvars 기반이므로 동시에 처리되는 요청끼리 섞이지 않음
"""

import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)
_pr_ref: ContextVar[str | None] = ContextVar("pr_ref", default=None)
_stage: ContextVar[str | None] = ContextVar("stage", default=None)


def get_request_id() -> str | None:
    return _request_id.get()


def set_request_id(request_id: str | None = None) -> str:
    """request_id 설정, 값이 없으면 12자리 hex 생성"""
    request_id = request_id or uuid.uuid4().hex[:12]
    _request_id.set(request_id)
    return request_id


def get_pr_ref() -> str | None:
    return _pr_ref.get()


def set_pr_ref(pr_ref: str | None) -> None:
    _pr_ref.set(pr_ref)


def get_stage() -> str | None:
    return _stage.get()


@contextmanager
def analysis_stage(stage: str) -> Iterator[None]:
    """블록 안의 로그에 워크플로우 단계 표시, 종료 시 이전 단계로 복원"""
    token = _stage.set(stage)
    try:
        yield
    finally:
        _stage.reset(token)


def current_context() -> dict[str, str]:
    """설정된 컨텍스트 값만 모아 반환"""
    values = {
        "request_id": _request_id.get(),
        "pr_ref": _pr_ref.get(),
        "stage": _stage.get(),
    }
    return {key: value for key, value in values.items() if value}


def clear_context() -> None:
    for var in (_request_id, _pr_ref, _stage):
        var.set(None)
