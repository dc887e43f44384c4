from typing import Annotated, Literal, Union

from pydantic import Field

from app.domain.analysis.schemas import DiffLine, FileChange
from app.domain.analysis.schemas.base import FrozenModel

SegmentName = Literal["intro", "file_list", "diff", "demo", "stats", "outro", "caption"]


class IntroPayload(FrozenModel):
    kind: Literal["intro"] = "intro"
    title: str
    repo_id: str
    pr_number: int


class FileListPayload(FrozenModel):
    kind: Literal["file_list"] = "file_list"
    files: list[FileChange]
    total_files: int


class DiffPayload(FrozenModel):
    kind: Literal["diff"] = "diff"
    file_name: str
    lines: list[DiffLine]


class DemoPayload(FrozenModel):
    kind: Literal["demo"] = "demo"
    src: str
    duration_frames: int


class StatsPayload(FrozenModel):
    kind: Literal["stats"] = "stats"
    additions: int
    deletions: int
    files_changed: int


class OutroPayload(FrozenModel):
    kind: Literal["outro"] = "outro"
    pr_number: int
    author: str


class CaptionPayload(FrozenModel):
    kind: Literal["caption"] = "caption"
    text: str


SegmentPayload = Annotated[
    Union[
        IntroPayload,
        FileListPayload,
        DiffPayload,
        DemoPayload,
        StatsPayload,
        OutroPayload,
        CaptionPayload,
    ],
    Field(discriminator="kind"),
]


class TimelineSegment(FrozenModel):
    """영상의 한 구간 - [start_frame, end_frame) 동안 payload를 렌더링"""

    name: SegmentName
    start_frame: int = Field(ge=0)
    duration_frames: int = Field(ge=0)
    payload: SegmentPayload

    @property
    def end_frame(self) -> int:
        return self.start_frame + self.duration_frames

    def contains(self, frame: int) -> bool:
        return self.start_frame <= frame < self.end_frame


class VisualElement(FrozenModel):
    """렌더러에 독립적인 화면 요소"""

    id: str
    type: Literal["box", "text", "video"]
    text: str | None = None
    src: str | None = None
    opacity: float = 1.0
    translate_x: float = 0.0
    translate_y: float = 0.0
    scale: float = 1.0
    style: dict[str, str | int | float] = Field(default_factory=dict)


class SegmentLayer(FrozenModel):
    """한 프레임에서 활성화된 구간의 렌더링 결과"""

    segment: SegmentName
    local_frame: int
    elements: list[VisualElement]


class FrameDescription(FrozenModel):
    """한 프레임 전체 화면 설명"""

    frame: int
    fps: int
    width: int
    height: int
    background: str
    layers: list[SegmentLayer]
