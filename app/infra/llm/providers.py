from langchain_core.language_models import BaseChatModel
from langchain_google_genai import ChatGoogleGenerativeAI
from langchain_openai import ChatOpenAI

from app.core.config import settings
from app.infra.llm.base import BaseLLMClient, require_setting


class OpenAIClient(BaseLLMClient):
    def get_model_name(self) -> str:
        return settings.openai_model

    def _build_model(self) -> BaseChatModel:
        return ChatOpenAI(
            model=settings.openai_model,
            api_key=require_setting(settings.openai_api_key, "OPENAI_API_KEY"),
            timeout=settings.openai_timeout,
            temperature=settings.narration_temperature,
            max_tokens=settings.narration_max_tokens,
        )


class VLLMClient(BaseLLMClient):
    """OpenAI 호환 API를 제공하는 vLLM/RunPod 엔드포인트"""

    def get_model_name(self) -> str:
        return settings.vllm_model

    def _build_model(self) -> BaseChatModel:
        return ChatOpenAI(
            model=settings.vllm_model,
            api_key=settings.vllm_api_key,
            base_url=require_setting(settings.vllm_api_url, "VLLM_API_URL"),
            timeout=settings.vllm_timeout,
            temperature=settings.narration_temperature,
            max_tokens=settings.narration_max_tokens,
        )


class GeminiClient(BaseLLMClient):
    def get_model_name(self) -> str:
        return settings.gemini_model

    def _build_model(self) -> BaseChatModel:
        return ChatGoogleGenerativeAI(
            model=settings.gemini_model,
            google_api_key=require_setting(settings.gemini_api_key, "GEMINI_API_KEY"),
            timeout=settings.gemini_timeout,
            temperature=settings.narration_temperature,
            max_output_tokens=settings.narration_max_tokens,
        )
