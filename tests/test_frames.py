"""프레임 설명 테스트"""

import pytest

from app.domain.timeline.composer import compose_timeline
from app.domain.timeline.frames import describe_frame


@pytest.fixture
def segments(sample_record):
    return compose_timeline(sample_record, fps=30, total_frames=450)


def _describe(segments, frame):
    return describe_frame(segments, frame, fps=30, width=1920, height=1080)


class TestDescribeFrame:
    """describe_frame 함수 테스트"""

    @pytest.mark.parametrize(
        "frame,expected_layers",
        [
            (0, ["intro"]),
            (59, ["intro"]),
            (60, ["file_list", "caption"]),
            (150, ["diff", "caption"]),
            (389, ["stats", "caption"]),
            (390, ["outro"]),
            (449, ["outro"]),
            (450, []),
        ],
    )
    def test_active_layers(self, segments, frame, expected_layers):
        """활성 구간만 구성 순서대로, Caption은 마지막"""
        description = _describe(segments, frame)

        assert [layer.segment for layer in description.layers] == expected_layers

    def test_local_frames(self, segments):
        """각 레이어는 구간 시작 기준 로컬 프레임"""
        description = _describe(segments, 100)

        assert [(layer.segment, layer.local_frame) for layer in description.layers] == [
            ("file_list", 40),
            ("caption", 40),
        ]

    def test_frame_geometry(self, segments):
        """프레임 정보와 배경색"""
        description = _describe(segments, 0)

        assert description.frame == 0
        assert description.fps == 30
        assert (description.width, description.height) == (1920, 1080)
        assert description.background == "#0d1117"

    def test_demo_frame(self, sample_record):
        """녹화가 있으면 Demo 레이어에 비디오 요소"""
        segments = compose_timeline(sample_record, 30, 600, recording_src="demo.mp4")

        description = _describe(segments, 200)

        demo_layer = description.layers[0]
        assert demo_layer.segment == "demo"
        assert demo_layer.elements[0].type == "video"
        assert demo_layer.elements[0].src == "demo.mp4"

    def test_frames_are_independent(self, segments):
        """프레임 계산 순서와 무관하게 같은 결과"""
        forward = [_describe(segments, f) for f in (10, 200, 400)]
        backward = [_describe(segments, f) for f in (400, 200, 10)][::-1]

        assert forward == backward

    def test_serializes_camel_case(self, segments):
        """JSON 직렬화는 camelCase"""
        data = _describe(segments, 70).model_dump(by_alias=True)

        layer = data["layers"][0]
        assert layer["localFrame"] == 10
        assert "translateX" in layer["elements"][1]
