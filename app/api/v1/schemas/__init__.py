from app.api.v1.schemas.video import (
    AnalyzeRequest,
    DemoUrlRequest,
    DemoUrlResponse,
    FrameRequest,
    TimelineRequest,
    TimelineResponse,
)

__all__ = [
    "AnalyzeRequest",
    "DemoUrlRequest",
    "DemoUrlResponse",
    "FrameRequest",
    "TimelineRequest",
    "TimelineResponse",
]
