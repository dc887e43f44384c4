"""구간별 렌더러

각 렌더러는 (payload, 구간 기준 프레임, fps)만으로 화면 요소 목록을 만든다.
"""

import math
from typing import Callable

from app.domain.timeline.animation import interpolate, spring
from app.domain.timeline.schemas import (
    CaptionPayload,
    DemoPayload,
    DiffPayload,
    FileListPayload,
    IntroPayload,
    OutroPayload,
    StatsPayload,
    VisualElement,
)
from app.domain.timeline.theme import (
    COLORS,
    FONTS,
    LINE_BACKGROUNDS,
    LINE_INDICATOR_COLORS,
    LINE_INDICATORS,
    STATUS_COLORS,
    STATUS_LABELS,
)

FILE_ROW_BASE_DELAY = 10
FILE_ROW_STAGGER = 5
DIFF_LINE_STAGGER = 3
STATS_CARD_STAGGER = 8
DEMO_FADE_OUT_SECONDS = 1.5


def _opacity(progress: float) -> float:
    return interpolate(progress, [0, 1], [0, 1])


def render_intro(payload: IntroPayload, frame: int, fps: int) -> list[VisualElement]:
    title_spring = spring(frame, fps, damping=15)
    repo_spring = spring(frame - 10, fps, damping=15)

    return [
        VisualElement(
            id="intro.repo",
            type="text",
            text=payload.repo_id,
            opacity=_opacity(repo_spring),
            translate_y=interpolate(repo_spring, [0, 1], [-20, 0]),
            style={"color": COLORS["text_muted"], "fontFamily": FONTS["mono"], "fontSize": 18},
        ),
        VisualElement(
            id="intro.title",
            type="text",
            text=payload.title,
            opacity=_opacity(title_spring),
            scale=interpolate(title_spring, [0, 1], [0.9, 1]),
            style={
                "color": COLORS["text"],
                "fontFamily": FONTS["sans"],
                "fontSize": 48,
                "fontWeight": 700,
            },
        ),
        VisualElement(
            id="intro.badge",
            type="text",
            text=f"#{payload.pr_number}",
            opacity=_opacity(repo_spring),
            style={
                "color": "#fff",
                "backgroundColor": COLORS["accent"],
                "fontFamily": FONTS["mono"],
                "fontSize": 16,
            },
        ),
    ]


def render_file_list(payload: FileListPayload, frame: int, fps: int) -> list[VisualElement]:
    header_spring = spring(frame, fps, damping=20)
    suffix = "" if payload.total_files == 1 else "s"

    elements = [
        VisualElement(
            id="file_list.header",
            type="text",
            text=f"Files Changed ({payload.total_files} file{suffix})",
            opacity=_opacity(header_spring),
            style={"color": COLORS["text"], "fontFamily": FONTS["sans"], "fontSize": 14},
        )
    ]
    for i, file in enumerate(payload.files):
        row_spring = spring(frame - (FILE_ROW_BASE_DELAY + i * FILE_ROW_STAGGER), fps, damping=15)
        counts = []
        if file.additions > 0:
            counts.append(f"+{file.additions}")
        if file.deletions > 0:
            counts.append(f"-{file.deletions}")

        elements.append(
            VisualElement(
                id=f"file_list.row.{i}",
                type="text",
                text=" ".join([STATUS_LABELS[file.status], file.path, *counts]),
                opacity=_opacity(row_spring),
                translate_x=interpolate(row_spring, [0, 1], [-30, 0]),
                style={
                    "color": STATUS_COLORS[file.status],
                    "fontFamily": FONTS["mono"],
                    "fontSize": 14,
                    "backgroundColor": "transparent" if i % 2 == 0 else COLORS["surface_light"],
                },
            )
        )
    return elements


def render_diff(payload: DiffPayload, frame: int, fps: int) -> list[VisualElement]:
    container_spring = spring(frame, fps, damping=20)

    elements = [
        VisualElement(
            id="diff.container",
            type="box",
            text=payload.file_name,
            opacity=_opacity(container_spring),
            scale=interpolate(container_spring, [0, 1], [0.95, 1]),
            style={"backgroundColor": COLORS["surface"], "borderColor": COLORS["border"]},
        )
    ]
    for i, line in enumerate(payload.lines):
        line_spring = spring(frame - i * DIFF_LINE_STAGGER, fps, damping=15)
        number = "" if line.line_number is None else str(line.line_number)
        elements.append(
            VisualElement(
                id=f"diff.line.{i}",
                type="text",
                text=f"{number:>4} {LINE_INDICATORS[line.kind]} {line.content}",
                opacity=_opacity(line_spring),
                translate_x=interpolate(line_spring, [0, 1], [-20, 0]),
                style={
                    "color": COLORS["text"],
                    "indicatorColor": LINE_INDICATOR_COLORS[line.kind],
                    "backgroundColor": LINE_BACKGROUNDS[line.kind],
                    "fontFamily": FONTS["mono"],
                    "fontSize": 14,
                },
            )
        )
    return elements


def render_demo(payload: DemoPayload, frame: int, fps: int) -> list[VisualElement]:
    fade_in = spring(frame, fps, damping=20)
    fade_out_start = payload.duration_frames - fps * DEMO_FADE_OUT_SECONDS
    fade_out = interpolate(frame, [fade_out_start, payload.duration_frames], [1, 0])

    return [
        VisualElement(
            id="demo.video",
            type="video",
            src=payload.src,
            opacity=min(_opacity(fade_in), fade_out),
            scale=interpolate(fade_in, [0, 1], [0.95, 1]),
            style={"width": 1600, "height": 900, "borderColor": COLORS["border"]},
        )
    ]


def render_stats(payload: StatsPayload, frame: int, fps: int) -> list[VisualElement]:
    cards = [
        ("files_changed", "Files Changed", payload.files_changed, "", COLORS["accent"]),
        ("additions", "Additions", payload.additions, "+", COLORS["success"]),
        ("deletions", "Deletions", payload.deletions, "-", COLORS["danger"]),
    ]

    elements = []
    for i, (key, label, value, sign, color) in enumerate(cards):
        delay = i * STATS_CARD_STAGGER
        card_spring = spring(frame - delay, fps, damping=12)
        progress = interpolate(frame - delay, [0, fps], [0, 1])
        # 0.5는 올림
        count = math.floor(value * progress + 0.5)

        elements.append(
            VisualElement(
                id=f"stats.{key}",
                type="text",
                text=f"{sign}{count} {label}",
                opacity=_opacity(card_spring),
                scale=interpolate(card_spring, [0, 1], [0.5, 1]),
                translate_y=interpolate(card_spring, [0, 1], [20, 0]),
                style={"color": color, "fontFamily": FONTS["mono"], "fontSize": 36},
            )
        )
    return elements


def render_outro(payload: OutroPayload, frame: int, fps: int) -> list[VisualElement]:
    opacity = _opacity(spring(frame, fps, damping=15))

    return [
        VisualElement(
            id="outro.pr",
            type="text",
            text=f"PR #{payload.pr_number}",
            opacity=opacity,
            style={"color": COLORS["success"], "fontFamily": FONTS["mono"], "fontSize": 32},
        ),
        VisualElement(
            id="outro.author",
            type="text",
            text=f"by {payload.author}",
            opacity=opacity,
            style={"color": COLORS["text_muted"], "fontFamily": FONTS["sans"], "fontSize": 18},
        ),
    ]


def render_caption(payload: CaptionPayload, frame: int, fps: int) -> list[VisualElement]:
    caption_spring = spring(frame, fps, damping=15)

    return [
        VisualElement(
            id="caption.text",
            type="text",
            text=payload.text,
            opacity=_opacity(caption_spring),
            translate_y=interpolate(caption_spring, [0, 1], [10, 0]),
            style={
                "color": "#fff",
                "backgroundColor": "rgba(0, 0, 0, 0.85)",
                "fontFamily": FONTS["sans"],
                "fontSize": 20,
            },
        )
    ]


RENDERERS: dict[str, Callable[..., list[VisualElement]]] = {
    "intro": render_intro,
    "file_list": render_file_list,
    "diff": render_diff,
    "demo": render_demo,
    "stats": render_stats,
    "outro": render_outro,
    "caption": render_caption,
}
