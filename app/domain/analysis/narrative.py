import json

from pydantic import ValidationError

from app.core.config import settings
from app.core.exceptions import NarrationUnavailableError
from app.core.logging import get_logger
from app.domain.analysis.constants import FRONTEND_STYLE_EXTENSIONS, MAX_KEY_FILES
from app.domain.analysis.schemas import AIAnalysis, FileChange, NarrationResult
from app.infra.llm.client import request_narration

logger = get_logger(__name__)


def extract_json_object(text: str) -> str | None:
    """텍스트에서 처음 등장하는 균형 잡힌 JSON 객체 부분 문자열 추출

    문자열 리터럴 안의 중괄호는 깊이 계산에서 제외한다.
    """
    start = text.find("{")
    while start != -1:
        depth = 0
        in_string = False
        escaped = False
        for idx in range(start, len(text)):
            char = text[idx]
            if in_string:
                if escaped:
                    escaped = False
                elif char == "\\":
                    escaped = True
                elif char == '"':
                    in_string = False
            elif char == '"':
                in_string = True
            elif char == "{":
                depth += 1
            elif char == "}":
                depth -= 1
                if depth == 0:
                    return text[start : idx + 1]
        # 닫히지 않은 객체는 다음 여는 괄호부터 재시도
        start = text.find("{", start + 1)
    return None


def parse_narration_response(text: str) -> AIAnalysis:
    """LLM 응답 텍스트를 AIAnalysis로 변환

    JSON 객체로 파싱되면 모델 응답으로 쓰고, 타입이 맞지 않는 필드만 기본값으로 둔다.

    Raises:
        NarrationUnavailableError: JSON 객체가 없거나 파싱할 수 없는 경우
    """
    candidate = extract_json_object(text)
    if candidate is None:
        raise NarrationUnavailableError("응답에 JSON 객체 없음")

    try:
        data = json.loads(candidate)
    except json.JSONDecodeError as e:
        raise NarrationUnavailableError(f"JSON 파싱 실패: {e.msg}") from e

    try:
        return AIAnalysis.model_validate(data)
    except ValidationError as e:
        invalid = {error["loc"][0] for error in e.errors() if error["loc"]}
        logger.warning("나레이션 응답 필드 기본값 대체 fields=%s", sorted(invalid))
        return AIAnalysis.model_validate({k: v for k, v in data.items() if k not in invalid})


def fallback_analysis(title: str, files: list[FileChange]) -> AIAnalysis:
    """LLM 없이 만드는 결정적 나레이션"""
    total_additions = sum(f.additions for f in files)
    return AIAnalysis(
        is_frontend=any(f.path.endswith(FRONTEND_STYLE_EXTENSIONS) for f in files),
        narration=(
            f'This PR "{title}" modifies {len(files)} files '
            f"with {total_additions} additions."
        ),
        key_files=[f.path for f in files[:MAX_KEY_FILES]],
    )


async def synthesize_narrative(
    title: str,
    body: str | None,
    files: list[FileChange],
    raw_diff: str,
    session_id: str | None = None,
) -> NarrationResult:
    """PR 나레이션 생성, 실패하면 휴리스틱으로 대체

    Args:
        title: PR 제목
        body: PR 본문
        files: 변경 파일 통계
        raw_diff: 원본 diff 텍스트, 앞부분만 프롬프트에 포함
        session_id: Langfuse 세션 ID

    Returns:
        source가 "model" 또는 "fallback"인 나레이션 결과
    """
    diff_excerpt = raw_diff[: settings.narration_diff_max_chars]

    try:
        text = await request_narration(title, body, files, diff_excerpt, session_id)
        analysis = parse_narration_response(text)
    except NarrationUnavailableError as e:
        logger.warning("나레이션 폴백 사용 reason=%s", e.detail or e.message)
        return NarrationResult(source="fallback", analysis=fallback_analysis(title, files))

    logger.info(
        "나레이션 생성 완료 frontend=%s key_files=%d",
        analysis.is_frontend,
        len(analysis.key_files),
    )
    return NarrationResult(source="model", analysis=analysis)
