import asyncio
import os

from langchain_core.messages import HumanMessage, SystemMessage
from langfuse.langchain import CallbackHandler

from app.core.config import settings
from app.core.exceptions import NarrationUnavailableError
from app.core.logging import get_logger
from app.domain.analysis.prompts import NARRATION_HUMAN, NARRATION_SYSTEM, NO_DESCRIPTION
from app.domain.analysis.schemas import FileChange
from app.infra.llm.factory import get_narrator_client

logger = get_logger(__name__)

if settings.langfuse_public_key:
    os.environ["LANGFUSE_PUBLIC_KEY"] = settings.langfuse_public_key
if settings.langfuse_secret_key:
    os.environ["LANGFUSE_SECRET_KEY"] = settings.langfuse_secret_key
if settings.langfuse_base_url:
    os.environ["LANGFUSE_HOST"] = settings.langfuse_base_url


def get_langfuse_handler() -> CallbackHandler | None:
    """Langfuse 콜백 핸들러 반환"""
    if not settings.langfuse_public_key or not settings.langfuse_secret_key:
        return None

    return CallbackHandler()


def format_file_list(files: list[FileChange]) -> str:
    """변경 파일 목록을 프롬프트용 텍스트로 포맷"""
    if not files:
        return "- (none)"
    return "\n".join(f"- {f.path} (+{f.additions}/-{f.deletions})" for f in files)


def build_narration_messages(
    title: str,
    body: str | None,
    files: list[FileChange],
    diff_excerpt: str,
) -> list:
    """나레이션 요청 메시지 생성"""
    human_content = NARRATION_HUMAN.format(
        title=title,
        body=body or NO_DESCRIPTION,
        files=format_file_list(files),
        diff_excerpt=diff_excerpt,
    )
    return [
        SystemMessage(content=NARRATION_SYSTEM),
        HumanMessage(content=human_content),
    ]


async def request_narration(
    title: str,
    body: str | None,
    files: list[FileChange],
    diff_excerpt: str,
    session_id: str | None = None,
) -> str:
    """LLM에 PR 나레이션을 요청하고 응답 텍스트 반환

    Raises:
        NarrationUnavailableError: 클라이언트 초기화, 호출, 타임아웃 실패 시
    """
    logger.debug("나레이션 요청 files=%d excerpt=%d", len(files), len(diff_excerpt))

    try:
        client = get_narrator_client()
    except ValueError as e:
        raise NarrationUnavailableError(str(e)) from e

    messages = build_narration_messages(title, body, files, diff_excerpt)
    try:
        langfuse_handler = get_langfuse_handler()
        config = {
            "callbacks": [langfuse_handler] if langfuse_handler else [],
            "metadata": {
                "langfuse_session_id": session_id,
                "langfuse_tags": ["pr-video", "narration"],
            },
        }
        text = await asyncio.wait_for(
            client.complete(messages, config=config),
            timeout=settings.narration_timeout,
        )
    except asyncio.TimeoutError as e:
        raise NarrationUnavailableError(f"타임아웃 {settings.narration_timeout}초") from e
    except Exception as e:
        raise NarrationUnavailableError(f"{type(e).__name__}: {e}") from e

    logger.debug("나레이션 응답 수신 model=%s length=%d", client.get_model_name(), len(text))
    return text
