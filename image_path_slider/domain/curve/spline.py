"""열린 3차 베지어 스플라인 제어점 계산.

n+1개의 매듭점을 지나는 구간별 3차 베지어 곡선이
내부 매듭점에서 1차 미분까지 연속(C1)이 되도록
각 구간의 제어점 쌍을 구한다.
"""

from __future__ import annotations

from collections.abc import Sequence

from image_path_slider.domain.exceptions import InsufficientKnotsError
from image_path_slider.domain.value_objects.point import Point
from image_path_slider.domain.value_objects.segment import BezierSegment


def get_curve_control_points(
    knots: Sequence[Point],
) -> tuple[list[Point], list[Point]]:
    """매듭점 시퀀스에 대한 구간별 제어점을 계산한다.

    Args:
        knots: 정규화된 매듭점 시퀀스 (길이 2 이상).

    Returns:
        (first_control_points, second_control_points) 튜플.
        각 리스트의 길이는 len(knots) - 1 이며, 인덱스 i는
        knots[i] ~ knots[i + 1] 구간에 대응한다.

    Raises:
        InsufficientKnotsError: 매듭점이 2개 미만일 때.
    """
    n = len(knots) - 1
    if n < 1:
        raise InsufficientKnotsError(
            f'At least two knots are required, got {len(knots)}'
        )

    if n == 1:
        # 직선: 3P1 = 2P0 + P3, P2 = 2P1 - P0
        p0, p3 = knots
        first = Point(
            x=(2 * p0.x + p3.x) / 3,
            y=(2 * p0.y + p3.y) / 3,
        )
        second = Point(x=2 * first.x - p0.x, y=2 * first.y - p0.y)
        return [first], [second]

    xs = solve_first_control_points(_build_rhs([k.x for k in knots]))
    ys = solve_first_control_points(_build_rhs([k.y for k in knots]))

    first_control_points = [Point(x=x, y=y) for x, y in zip(xs, ys)]
    second_control_points: list[Point] = []
    for i in range(n - 1):
        second_control_points.append(Point(
            x=2 * knots[i + 1].x - xs[i + 1],
            y=2 * knots[i + 1].y - ys[i + 1],
        ))
    second_control_points.append(Point(
        x=(knots[n].x + xs[n - 1]) / 2,
        y=(knots[n].y + ys[n - 1]) / 2,
    ))

    return first_control_points, second_control_points


def solve_first_control_points(rhs: Sequence[float]) -> list[float]:
    """첫 번째 제어점 한 좌표축에 대한 삼중대각 방정식을 푼다.

    계수 행렬은 고정 형태이다: 대각 성분은 첫 행 2, 마지막 행 3.5,
    나머지 4이고 비대각 성분은 모두 1.
    Thomas 알고리즘으로 O(n)에 푼다.

    Args:
        rhs: 우변 벡터 (길이 n >= 1).

    Returns:
        해 벡터 (길이 n).
    """
    n = len(rhs)
    x = [0.0] * n
    tmp = [0.0] * n

    b = 2.0
    x[0] = rhs[0] / b
    # 분해 및 전진 대입
    for i in range(1, n):
        tmp[i] = 1 / b
        b = (4.0 if i < n - 1 else 3.5) - tmp[i]
        x[i] = (rhs[i] - x[i - 1]) / b
    # 후진 대입
    for i in range(1, n):
        x[n - i - 1] -= tmp[n - i] * x[n - i]

    return x


def bezier_segments(knots: Sequence[Point]) -> list[BezierSegment]:
    """매듭점과 계산된 제어점으로 구간별 BezierSegment를 만든다."""
    first, second = get_curve_control_points(knots)
    return [
        BezierSegment(
            start=knots[i],
            control1=first[i],
            control2=second[i],
            end=knots[i + 1],
        )
        for i in range(len(knots) - 1)
    ]


def _build_rhs(coords: Sequence[float]) -> list[float]:
    """한 좌표축의 우변 벡터를 구성한다 (n >= 2)."""
    n = len(coords) - 1
    rhs = [0.0] * n
    rhs[0] = coords[0] + 2 * coords[1]
    for i in range(1, n - 1):
        rhs[i] = 4 * coords[i] + 2 * coords[i + 1]
    rhs[n - 1] = (8 * coords[n - 1] + coords[n]) / 2.0
    return rhs
