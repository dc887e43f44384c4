from abc import ABC, abstractmethod

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import BaseMessage


class BaseLLMClient(ABC):
    """나레이션용 LLM 클라이언트

    하위 클래스는 설정 검증과 채팅 모델 생성만 담당한다.
    모델은 생성 시 한 번 만들어 재사용한다.
    """

    def __init__(self):
        self._model = self._build_model()

    @abstractmethod
    def _build_model(self) -> BaseChatModel:
        """설정값으로 LangChain 채팅 모델 생성, 필수 설정이 없으면 ValueError"""

    @abstractmethod
    def get_model_name(self) -> str:
        pass

    def get_chat_model(self) -> BaseChatModel:
        return self._model

    async def complete(self, messages: list[BaseMessage], config: dict | None = None) -> str:
        """메시지를 보내고 응답 텍스트 반환"""
        response = await self._model.ainvoke(messages, config=config)
        return message_text(response)


def require_setting(value: str, env_name: str) -> str:
    if not value:
        raise ValueError(f"{env_name}가 설정되지 않았습니다")
    return value


def message_text(message: BaseMessage) -> str:
    """AIMessage content에서 텍스트만 추출

    Gemini 등은 content를 파트 리스트로 돌려주므로 텍스트 파트만 이어 붙인다.
    """
    content = message.content
    if isinstance(content, str):
        return content

    parts = []
    for part in content:
        if isinstance(part, str):
            parts.append(part)
        elif isinstance(part, dict) and part.get("type") == "text":
            parts.append(part.get("text", ""))
    return "".join(parts)
