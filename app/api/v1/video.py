from fastapi import APIRouter, Request

from app.api.v1.schemas import (
    AnalyzeRequest,
    DemoUrlRequest,
    DemoUrlResponse,
    FrameRequest,
    TimelineRequest,
    TimelineResponse,
)
from app.core.config import settings
from app.core.context import get_request_id
from app.core.limiter import limiter
from app.core.logging import get_logger
from app.domain.analysis.demo import build_demo_url, suggest_demo_routes
from app.domain.analysis.schemas import AnalysisRecord
from app.domain.analysis.service import analyze_pull_request
from app.domain.timeline.composer import compose_timeline
from app.domain.timeline.frames import describe_frame
from app.domain.timeline.schemas import FrameDescription

router = APIRouter(prefix="/video", tags=["video"])
logger = get_logger(__name__)


def _resolve_geometry(body: TimelineRequest) -> tuple[int, int]:
    """요청값이 없으면 설정의 기본 fps/프레임 수 사용"""
    fps = settings.video_fps if body.fps is None else body.fps
    total_frames = settings.video_total_frames if body.total_frames is None else body.total_frames
    return fps, total_frames


@router.post("/analysis", response_model=AnalysisRecord)
@limiter.limit(settings.analysis_rate_limit)
async def analyze(request: Request, body: AnalyzeRequest) -> AnalysisRecord:
    return await analyze_pull_request(
        pr_url=body.pr_url,
        github_token=body.github_token,
        session_id=get_request_id(),
    )


@router.post("/timeline", response_model=TimelineResponse)
async def build_timeline(body: TimelineRequest) -> TimelineResponse:
    fps, total_frames = _resolve_geometry(body)
    segments = compose_timeline(body.analysis, fps, total_frames, body.recording_src)

    return TimelineResponse(
        fps=fps,
        total_frames=total_frames,
        width=settings.video_width,
        height=settings.video_height,
        segments=segments,
    )


@router.post("/frame", response_model=FrameDescription)
async def render_frame(body: FrameRequest) -> FrameDescription:
    fps, total_frames = _resolve_geometry(body)
    segments = compose_timeline(body.analysis, fps, total_frames, body.recording_src)

    if body.frame >= total_frames:
        logger.warning("영상 범위를 벗어난 프레임 요청 frame=%d total=%d", body.frame, total_frames)

    return describe_frame(
        segments,
        frame=body.frame,
        fps=fps,
        width=settings.video_width,
        height=settings.video_height,
    )


@router.post("/demo-url", response_model=DemoUrlResponse)
async def demo_url(body: DemoUrlRequest) -> DemoUrlResponse:
    routes = suggest_demo_routes(body.analysis.files)
    return DemoUrlResponse(url=build_demo_url(body.base_url, routes), routes=routes)
