from app.domain.timeline.renderers import RENDERERS
from app.domain.timeline.schemas import FrameDescription, SegmentLayer, TimelineSegment
from app.domain.timeline.theme import COLORS


def describe_frame(
    segments: list[TimelineSegment],
    frame: int,
    fps: int,
    width: int,
    height: int,
) -> FrameDescription:
    """전역 프레임에서 활성화된 구간들을 렌더링.

    구간 목록 순서대로 레이어를 쌓으므로 마지막에 오는 Caption이 위에 그려진다.
    각 구간은 자신의 시작 프레임 기준 로컬 프레임으로 렌더링된다.
    """
    layers = []
    for segment in segments:
        if not segment.contains(frame):
            continue

        local_frame = frame - segment.start_frame
        render = RENDERERS[segment.payload.kind]
        layers.append(
            SegmentLayer(
                segment=segment.name,
                local_frame=local_frame,
                elements=render(segment.payload, local_frame, fps),
            )
        )

    return FrameDescription(
        frame=frame,
        fps=fps,
        width=width,
        height=height,
        background=COLORS["background"],
        layers=layers,
    )
