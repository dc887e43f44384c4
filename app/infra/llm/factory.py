from typing import Literal

from app.core.config import settings
from app.core.logging import get_logger
from app.infra.llm.base import BaseLLMClient
from app.infra.llm.providers import GeminiClient, OpenAIClient, VLLMClient

logger = get_logger(__name__)

LLMProvider = Literal["openai", "vllm", "gemini"]

PROVIDERS: dict[str, type[BaseLLMClient]] = {
    "openai": OpenAIClient,
    "vllm": VLLMClient,
    "gemini": GeminiClient,
}

_narrator_client: BaseLLMClient | None = None


def get_narrator_client() -> BaseLLMClient:
    """나레이션용 LLM 클라이언트 반환

    Raises:
        ValueError: 지원하지 않는 프로바이더이거나 필수 설정이 없는 경우
    """
    global _narrator_client

    if _narrator_client is not None:
        return _narrator_client

    provider = settings.llm_provider.lower()
    client_class = PROVIDERS.get(provider)
    if client_class is None:
        raise ValueError(f"지원하지 않는 LLM 프로바이더: {provider}")

    _narrator_client = client_class()
    logger.info(
        "나레이션 클라이언트 초기화 provider=%s model=%s",
        provider,
        _narrator_client.get_model_name(),
    )
    return _narrator_client


def reset_clients() -> None:
    """클라이언트 캐시 초기화 - 테스트용"""
    global _narrator_client
    _narrator_client = None
