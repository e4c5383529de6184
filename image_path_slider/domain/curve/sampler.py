"""스크롤 진행률에 대응하는 곡선 위 x 좌표 샘플링."""

from __future__ import annotations

from collections.abc import Sequence

from image_path_slider.domain.curve.bezier import cubic_bezier
from image_path_slider.domain.value_objects.point import Point


def interpolate_x(
    knots: Sequence[Point],
    first_control_points: Sequence[Point],
    second_control_points: Sequence[Point],
    progress: float,
) -> float:
    """진행률 p (0.0~1.0)에서 곡선의 x 비율을 구한다.

    처음부터 선형 탐색하여 y >= p 인 첫 매듭점을 찾고, 그 직전
    매듭점과의 구간에서 y를 선형 재정규화한 t로 베지어를 평가한다.
    찾지 못하면 마지막 구간 끝(경로 완료)으로 취급한다.

    Args:
        knots: 정규화된 매듭점 시퀀스.
        first_control_points: 구간별 첫 번째 제어점.
        second_control_points: 구간별 두 번째 제어점.
        progress: 스크롤 진행률.

    Returns:
        이미지 너비 대비 x 비율.
    """
    i = 0
    while i < len(knots) and knots[i].y < progress:
        i += 1

    if i == 0:
        return knots[0].x

    if i == len(knots):
        # 경로 완료
        return knots[-1].x

    start = knots[i - 1]
    end = knots[i]
    t = local_parameter(progress, start.y, end.y)

    return cubic_bezier(
        t,
        start.x,
        first_control_points[i - 1].x,
        second_control_points[i - 1].x,
        end.x,
    )


def local_parameter(progress: float, y0: float, y1: float) -> float:
    """구간 [y0, y1] 안에서 progress의 상대 위치를 [0, 1]로 제한해 반환한다.

    높이가 0인 구간은 0.0을 반환한다.
    """
    height = y1 - y0
    if height == 0:
        return 0.0
    return max(0.0, min(1.0, (progress - y0) / height))
