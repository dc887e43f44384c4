from langgraph.graph.state import CompiledStateGraph

from app.core.context import set_pr_ref
from app.core.exceptions import ERRORS_BY_CODE, AnalysisFailedError
from app.core.logging import get_logger
from app.domain.analysis.schemas import AnalysisRecord, AnalysisState
from app.domain.analysis.workflow import create_analysis_workflow
from app.infra.github.client import parse_pr_url

logger = get_logger(__name__)

_workflow: CompiledStateGraph | None = None


def get_analysis_workflow() -> CompiledStateGraph:
    """컴파일된 분석 워크플로우 반환"""
    global _workflow

    if _workflow is None:
        _workflow = create_analysis_workflow()
    return _workflow


def _raise_for_state(state: AnalysisState) -> None:
    """워크플로우 상태에 남은 에러를 예외로 변환"""
    error_code = state.get("error_code")
    if not error_code:
        return

    error_class = ERRORS_BY_CODE.get(error_code, AnalysisFailedError)
    raise error_class(state.get("error_message"))


async def analyze_pull_request(
    pr_url: str,
    github_token: str | None = None,
    session_id: str | None = None,
) -> AnalysisRecord:
    """PR URL을 분석해 AnalysisRecord 생성.

    Args:
        pr_url: GitHub PR URL
        github_token: GitHub 토큰, 없으면 설정값 사용
        session_id: Langfuse 세션 ID

    Returns:
        분석 결과

    Raises:
        InvalidReferenceError: PR URL 형식 오류
        GitHubAPIError: PR 또는 diff 조회 실패
        MalformedDiffError: diff 파싱 실패
    """
    reference = parse_pr_url(pr_url)
    set_pr_ref(str(reference))
    logger.info("PR 분석 시작 pr=%s", reference)

    state = await get_analysis_workflow().ainvoke(
        AnalysisState(
            reference=reference,
            github_token=github_token,
            session_id=session_id,
        )
    )
    _raise_for_state(state)

    record = state["record"]
    logger.info("PR 분석 완료 pr=%s files=%d", reference, len(record.files))
    return record
