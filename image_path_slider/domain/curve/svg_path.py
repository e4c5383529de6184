"""편집기 미리보기용 SVG path 문자열 생성."""

from __future__ import annotations

from collections.abc import Sequence

from image_path_slider.domain.curve.spline import get_curve_control_points
from image_path_slider.domain.value_objects.point import Point


def create_smooth_path(
    knots: Sequence[Point],
    scale_x: float = 100.0,
    scale_y: float = 100.0,
    control_points: tuple[
        Sequence[Point], Sequence[Point]
    ] | None = None,
) -> str:
    """매듭점을 지나는 부드러운 곡선을 SVG path 데이터로 변환한다.

    Args:
        knots: 정규화된 매듭점 시퀀스 (길이 2 이상).
        scale_x: x 좌표 배율.
        scale_y: y 좌표 배율.
        control_points: 미리 계산된 (first, second) 제어점.
            None이면 매듭점으로부터 계산한다.

    Returns:
        'M x y C c1x c1y c2x c2y x y ...' 형식 문자열.
    """
    if control_points is None:
        control_points = get_curve_control_points(knots)
    first, second = control_points

    def fmt(point: Point) -> str:
        return f'{_number(point.x * scale_x)} {_number(point.y * scale_y)}'

    commands = [f'M {fmt(knots[0])}']
    for i in range(len(knots) - 1):
        commands.append(
            f'C {fmt(first[i])} {fmt(second[i])} {fmt(knots[i + 1])}'
        )
    return ' '.join(commands)


def _number(value: float) -> str:
    """SVG 좌표 숫자를 간결하게 포맷한다 (50.0 → '50')."""
    text = f'{value:.6f}'.rstrip('0').rstrip('.')
    return '0' if text == '-0' else text
