from app.infra.llm.base import BaseLLMClient
from app.infra.llm.client import request_narration
from app.infra.llm.factory import get_narrator_client, reset_clients
from app.infra.llm.providers import GeminiClient, OpenAIClient, VLLMClient

__all__ = [
    "BaseLLMClient",
    "OpenAIClient",
    "VLLMClient",
    "GeminiClient",
    "get_narrator_client",
    "reset_clients",
    "request_narration",
]
