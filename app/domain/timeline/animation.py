"""스프링/선형 보간 기반 애니메이션 모델

모든 함수는 (프레임, fps) 만으로 값을 계산하며 프레임 사이에 상태를 두지 않는다.
"""

import math
from typing import Literal, Sequence

Extrapolation = Literal["clamp", "extend"]

DEFAULT_MASS = 1.0
DEFAULT_STIFFNESS = 100.0
DEFAULT_DAMPING = 10.0


def spring(
    frame: float,
    fps: int,
    damping: float = DEFAULT_DAMPING,
    mass: float = DEFAULT_MASS,
    stiffness: float = DEFAULT_STIFFNESS,
) -> float:
    """0에서 1로 향하는 감쇠 스프링의 진행도.

    초기 속도 0인 감쇠 조화 진동자의 해석해를 사용한다.
    감쇠비가 1보다 작으면 1을 살짝 넘었다가 돌아온다.

    Args:
        frame: 애니메이션 시작 기준 프레임, 0 이하이면 0 반환
        fps: 초당 프레임 수
        damping: 감쇠 계수
        mass: 질량
        stiffness: 강성

    Returns:
        스프링 진행도
    """
    if frame <= 0:
        return 0.0

    t = frame / fps
    omega = math.sqrt(stiffness / mass)
    zeta = damping / (2 * math.sqrt(stiffness * mass))

    if math.isclose(zeta, 1.0):
        return 1 - math.exp(-omega * t) * (1 + omega * t)

    if zeta < 1:
        omega_d = omega * math.sqrt(1 - zeta**2)
        envelope = math.exp(-zeta * omega * t)
        return 1 - envelope * (
            math.cos(omega_d * t) + (zeta * omega / omega_d) * math.sin(omega_d * t)
        )

    root = omega * math.sqrt(zeta**2 - 1)
    r1 = -zeta * omega + root
    r2 = -zeta * omega - root
    return 1 + (r2 * math.exp(r1 * t) - r1 * math.exp(r2 * t)) / (r1 - r2)


def interpolate(
    value: float,
    input_range: Sequence[float],
    output_range: Sequence[float],
    extrapolate_left: Extrapolation = "clamp",
    extrapolate_right: Extrapolation = "clamp",
) -> float:
    """구간별 선형 보간.

    input_range는 오름차순이어야 하며 output_range와 길이가 같아야 한다.
    범위 밖의 값은 기본적으로 경계값으로 고정된다.
    """
    if len(input_range) != len(output_range) or len(input_range) < 2:
        raise ValueError("input_range와 output_range는 같은 길이(2 이상)여야 합니다")

    if value <= input_range[0] and extrapolate_left == "clamp":
        return float(output_range[0])
    if value >= input_range[-1] and extrapolate_right == "clamp":
        return float(output_range[-1])

    # 값이 속한 구간, 범위 밖이면 양 끝 구간으로 외삽
    idx = 1
    while idx < len(input_range) - 1 and value > input_range[idx]:
        idx += 1

    in_start, in_end = input_range[idx - 1], input_range[idx]
    out_start, out_end = output_range[idx - 1], output_range[idx]
    if in_end == in_start:
        return float(out_end)

    ratio = (value - in_start) / (in_end - in_start)
    return out_start + ratio * (out_end - out_start)
