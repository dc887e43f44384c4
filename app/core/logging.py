"""
structlog 기반 로깅 설정

개발 환경은 컬러 콘솔, 프로덕션 또는 LOG_JSON=true이면 JSON 한 줄 출력.
모든 로그에 request_id, pr_ref, stage 컨텍스트가 붙고
GitHub 토큰과 API 키는 마스킹된다.
"""

import logging
import re
import sys

import structlog

from app.core.config import settings
from app.core.context import current_context

MASK = "***"

# 값 전체를 가리는 필드
SENSITIVE_KEYS = frozenset({"github_token", "authorization", "api_key", "token"})

# 문자열 안에 섞인 토큰
SENSITIVE_PATTERNS = [
    (re.compile(r"(Bearer\s+)[^\s]+", re.IGNORECASE), rf"\1{MASK}"),
    (re.compile(r"(token\s+)[^\s]+", re.IGNORECASE), rf"\1{MASK}"),
    (re.compile(r"\b(gh[pousr]_)[A-Za-z0-9]+"), rf"\1{MASK}"),
    (re.compile(r"\b(github_pat_)[A-Za-z0-9_]+"), rf"\1{MASK}"),
    (re.compile(r"(api[_-]?key=)[^&\s]+", re.IGNORECASE), rf"\1{MASK}"),
]

QUIET_LOGGERS = (
    "httpcore",
    "httpx",
    "langfuse",
    "langchain",
    "langgraph",
    "openai",
    "google_genai",
    "anyio",
)


def _mask_sensitive_data(value: str) -> str:
    for pattern, replacement in SENSITIVE_PATTERNS:
        value = pattern.sub(replacement, value)
    return value


def add_context_processor(logger: logging.Logger, method_name: str, event_dict: dict) -> dict:
    """컨텍스트 값 주입, 호출부에서 직접 넘긴 값이 우선"""
    for key, value in current_context().items():
        event_dict.setdefault(key, value)
    return event_dict


def mask_sensitive_processor(logger: logging.Logger, method_name: str, event_dict: dict) -> dict:
    """민감 필드는 항상, 본문 속 토큰 패턴은 프로덕션에서만 마스킹"""
    for key, value in event_dict.items():
        if key in SENSITIVE_KEYS and value:
            event_dict[key] = MASK
        elif settings.is_production and isinstance(value, str):
            event_dict[key] = _mask_sensitive_data(value)
    return event_dict


def _use_json() -> bool:
    return settings.is_production or settings.log_json


def _shared_processors() -> list:
    processors: list = [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        add_context_processor,
        mask_sensitive_processor,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    if _use_json():
        processors.append(structlog.processors.format_exc_info)
    return processors


def setup_logging(level: str | None = None) -> None:
    """structlog와 표준 logging을 같은 포맷으로 연결"""
    log_level = getattr(logging, (level or settings.log_level).upper(), logging.INFO)
    processors = _shared_processors()

    structlog.configure(
        processors=[*processors, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if _use_json()
        else structlog.dev.ConsoleRenderer(colors=True)
    )
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=processors,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)

    # uvicorn 로그도 루트 핸들러로 출력
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(name).handlers.clear()

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
