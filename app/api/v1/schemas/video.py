"""PR 영상 API 스키마."""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from app.domain.analysis.schemas import AnalysisRecord
from app.domain.timeline.schemas import TimelineSegment


class VideoSchema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AnalyzeRequest(VideoSchema):
    """PR 분석 요청."""

    pr_url: str = Field(min_length=1)
    github_token: str | None = None


class TimelineRequest(VideoSchema):
    """타임라인 구성 요청, fps/total_frames가 없으면 설정값 사용."""

    analysis: AnalysisRecord
    recording_src: str | None = None
    fps: int | None = None
    total_frames: int | None = None


class FrameRequest(TimelineRequest):
    """단일 프레임 설명 요청."""

    frame: int = Field(ge=0)


class TimelineResponse(VideoSchema):
    """타임라인 구성 응답."""

    fps: int
    total_frames: int
    width: int
    height: int
    segments: list[TimelineSegment]


class DemoUrlRequest(VideoSchema):
    """데모 URL 생성 요청."""

    analysis: AnalysisRecord
    base_url: str

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url은 http:// 또는 https://로 시작해야 합니다")
        return v


class DemoUrlResponse(VideoSchema):
    """데모 URL 생성 응답."""

    url: str
    routes: list[str]
