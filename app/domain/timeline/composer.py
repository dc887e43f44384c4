from app.core.exceptions import CompositionPreconditionError
from app.core.logging import get_logger
from app.domain.analysis.schemas import AnalysisRecord
from app.domain.timeline.schemas import (
    CaptionPayload,
    DemoPayload,
    DiffPayload,
    FileListPayload,
    IntroPayload,
    OutroPayload,
    SegmentPayload,
    StatsPayload,
    TimelineSegment,
)

logger = get_logger(__name__)

# 구간 길이 (초)
INTRO_SECONDS = 2
FILE_LIST_SECONDS = 3
DIFF_SECONDS = 5
DEMO_SECONDS = 10
STATS_SECONDS = 3
OUTRO_SECONDS = 2

MAX_LISTED_FILES = 8
MAX_DIFF_LINES = 15


def _body_payloads(
    record: AnalysisRecord,
    fps: int,
    recording_src: str | None,
) -> list[tuple[int, SegmentPayload]]:
    """Intro부터 Stats까지 순서대로 (길이, payload) 목록 생성"""
    if recording_src:
        middle_frames = DEMO_SECONDS * fps
        middle: SegmentPayload = DemoPayload(src=recording_src, duration_frames=middle_frames)
    else:
        middle_frames = DIFF_SECONDS * fps
        middle = DiffPayload(
            file_name=record.diff_sample.file_name,
            lines=record.diff_sample.lines[:MAX_DIFF_LINES],
        )

    return [
        (
            INTRO_SECONDS * fps,
            IntroPayload(title=record.title, repo_id=record.repo_id, pr_number=record.pr_number),
        ),
        (
            FILE_LIST_SECONDS * fps,
            FileListPayload(files=record.files[:MAX_LISTED_FILES], total_files=len(record.files)),
        ),
        (middle_frames, middle),
        (
            STATS_SECONDS * fps,
            StatsPayload(
                additions=record.total_additions,
                deletions=record.total_deletions,
                files_changed=len(record.files),
            ),
        ),
    ]


def compose_timeline(
    record: AnalysisRecord,
    fps: int,
    total_frames: int,
    recording_src: str | None = None,
) -> list[TimelineSegment]:
    """분석 결과로 영상 구간 계획 생성.

    본문 구간(Intro, FileList, Diff 또는 Demo, Stats)은 0프레임부터 이어 붙이고,
    Outro는 영상 끝에 맞춰 배치하며, Caption은 Intro 종료부터 Outro 시작까지 덮는다.
    녹화본이 있으면 Diff 대신 Demo를 넣는다.

    Args:
        record: 분석 결과
        fps: 초당 프레임 수
        total_frames: 영상 전체 프레임 수
        recording_src: 데모 녹화 경로 또는 URL

    Returns:
        본문 구간, Outro, Caption 순서의 구간 목록

    Raises:
        CompositionPreconditionError: fps 또는 total_frames가 0 이하
    """
    if fps <= 0:
        raise CompositionPreconditionError(f"fps는 양수여야 합니다: {fps}")
    if total_frames <= 0:
        raise CompositionPreconditionError(f"total_frames는 양수여야 합니다: {total_frames}")

    segments = []
    cursor = 0
    for duration, payload in _body_payloads(record, fps, recording_src):
        segments.append(
            TimelineSegment(
                name=payload.kind,
                start_frame=cursor,
                duration_frames=duration,
                payload=payload,
            )
        )
        cursor += duration

    intro_frames = INTRO_SECONDS * fps
    outro_frames = min(OUTRO_SECONDS * fps, total_frames)
    outro_start = total_frames - outro_frames

    if cursor > outro_start:
        logger.warning(
            "본문 구간이 Outro와 겹침 body_end=%d outro_start=%d total=%d",
            cursor,
            outro_start,
            total_frames,
        )

    segments.append(
        TimelineSegment(
            name="outro",
            start_frame=outro_start,
            duration_frames=outro_frames,
            payload=OutroPayload(pr_number=record.pr_number, author=record.author),
        )
    )
    segments.append(
        TimelineSegment(
            name="caption",
            start_frame=intro_frames,
            duration_frames=max(outro_start - intro_frames, 0),
            payload=CaptionPayload(text=record.narration),
        )
    )

    logger.debug(
        "타임라인 구성 완료 segments=%d fps=%d total=%d demo=%s",
        len(segments),
        fps,
        total_frames,
        bool(recording_src),
    )
    return segments
