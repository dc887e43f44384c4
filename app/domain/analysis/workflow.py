import asyncio
import functools
from collections.abc import Awaitable, Callable
from typing import Literal

import httpx
from langgraph.graph import END, StateGraph
from langgraph.graph.state import CompiledStateGraph

from app.core.context import analysis_stage
from app.core.exceptions import ErrorCode, MalformedDiffError
from app.core.logging import get_logger
from app.domain.analysis.assembler import assemble_analysis
from app.domain.analysis.diff_parser import parse_unified_diff, to_file_change
from app.domain.analysis.narrative import synthesize_narrative
from app.domain.analysis.sampling import extract_diff_sample, select_key_file
from app.domain.analysis.schemas import AnalysisState
from app.infra.github.client import get_pull, get_pull_diff

logger = get_logger(__name__)


async def collect_node(state: AnalysisState) -> AnalysisState:
    """수집 노드: PR 메타데이터와 diff를 동시에 조회"""
    reference = state["reference"]
    token = state.get("github_token")
    logger.info("collect_node 시작 pr=%s", reference)

    try:
        metadata, raw_diff = await asyncio.gather(
            get_pull(reference, token),
            get_pull_diff(reference, token),
        )
    except httpx.HTTPStatusError as e:
        status_code = e.response.status_code
        logger.error("collect_node HTTP 오류 status=%d", status_code)
        return {
            **state,
            "error_code": ErrorCode.GITHUB_API_ERROR,
            "error_message": f"GitHub API 오류: HTTP {status_code}",
        }
    except httpx.RequestError as e:
        logger.error("collect_node 요청 실패 error=%s", type(e).__name__)
        return {
            **state,
            "error_code": ErrorCode.GITHUB_API_ERROR,
            "error_message": f"GitHub 요청 실패: {type(e).__name__}",
        }

    logger.info("collect_node 완료 title=%s diff_chars=%d", metadata.title, len(raw_diff))
    return {**state, "metadata": metadata, "raw_diff": raw_diff}


async def parse_node(state: AnalysisState) -> AnalysisState:
    """파싱 노드: diff 파싱, 파일 통계, 대표 파일 샘플 추출"""
    try:
        parsed_files = parse_unified_diff(state["raw_diff"])
    except MalformedDiffError as e:
        logger.error("parse_node diff 파싱 실패 detail=%s", e.detail)
        return {
            **state,
            "error_code": ErrorCode.MALFORMED_DIFF,
            "error_message": e.detail or e.message,
        }

    file_changes = [to_file_change(f) for f in parsed_files]
    diff_sample = extract_diff_sample(select_key_file(parsed_files))

    logger.info(
        "parse_node 완료 files=%d sample=%s lines=%d",
        len(file_changes),
        diff_sample.file_name,
        len(diff_sample.lines),
    )
    return {
        **state,
        "parsed_files": parsed_files,
        "file_changes": file_changes,
        "diff_sample": diff_sample,
    }


async def narrate_node(state: AnalysisState) -> AnalysisState:
    """나레이션 노드: 실패해도 폴백 결과를 채우므로 에러를 남기지 않음"""
    metadata = state["metadata"]
    narration = await synthesize_narrative(
        title=metadata.title,
        body=metadata.body,
        files=state["file_changes"],
        raw_diff=state["raw_diff"],
        session_id=state.get("session_id"),
    )
    return {**state, "narration": narration}


async def assemble_node(state: AnalysisState) -> AnalysisState:
    """병합 노드: 최종 AnalysisRecord 생성"""
    record = assemble_analysis(
        reference=state["reference"],
        metadata=state["metadata"],
        files=state["file_changes"],
        diff_sample=state["diff_sample"],
        narration=state["narration"],
    )
    return {**state, "record": record}


Node = Callable[[AnalysisState], Awaitable[AnalysisState]]


def _staged(stage: str, node: Node) -> Node:
    """노드 실행 동안 로그 컨텍스트에 단계 이름 설정"""

    @functools.wraps(node)
    async def wrapper(state: AnalysisState) -> AnalysisState:
        with analysis_stage(stage):
            return await node(state)

    return wrapper


def should_parse(state: AnalysisState) -> Literal["parse", "end"]:
    """수집 실패 시 종료"""
    if state.get("error_code"):
        return "end"
    return "parse"


def should_narrate(state: AnalysisState) -> Literal["narrate", "end"]:
    """파싱 실패 시 부분 결과 없이 종료"""
    if state.get("error_code"):
        return "end"
    return "narrate"


def create_analysis_workflow() -> CompiledStateGraph:
    """PR 분석 워크플로우 생성"""
    workflow = StateGraph(AnalysisState)

    workflow.add_node("collect", _staged("collect", collect_node))
    workflow.add_node("parse", _staged("parse", parse_node))
    workflow.add_node("narrate", _staged("narrate", narrate_node))
    workflow.add_node("assemble", _staged("assemble", assemble_node))

    workflow.set_entry_point("collect")

    workflow.add_conditional_edges(
        "collect",
        should_parse,
        {
            "parse": "parse",
            "end": END,
        },
    )

    workflow.add_conditional_edges(
        "parse",
        should_narrate,
        {
            "narrate": "narrate",
            "end": END,
        },
    )

    workflow.add_edge("narrate", "assemble")
    workflow.add_edge("assemble", END)

    return workflow.compile()
