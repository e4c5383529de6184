"""작성자 입력 점 목록을 매듭점 시퀀스로 정규화한다."""

from __future__ import annotations

from collections.abc import Iterable

from image_path_slider.domain.value_objects.point import Point

EDGE_TOLERANCE = 0.01

DEFAULT_PATH: tuple[Point, ...] = (
    Point(x=0.5, y=0.0),
    Point(x=0.5, y=1.0),
)


def normalize_path(
    points: Iterable[Point] | None,
    edge_tolerance: float = EDGE_TOLERANCE,
) -> tuple[Point, ...]:
    """점 목록을 y 오름차순 매듭점 시퀀스로 정규화한다.

    점이 2개 미만이면 기본 수직 경로를 반환한다.
    첫 점이 y=0, 마지막 점이 y=1 근처(edge_tolerance 이내)가 아니면
    같은 x를 가진 합성 점을 앞/뒤에 추가한다.
    y가 같은 점들은 입력 순서를 유지한다 (안정 정렬).

    Args:
        points: 작성자가 입력한 점 목록. 원본은 변경하지 않는다.
        edge_tolerance: 경계(y=0, y=1) 판정 허용 오차.

    Returns:
        y 오름차순으로 정렬된 매듭점 튜플 (길이 2 이상).
    """
    knots = sorted(points or (), key=lambda p: p.y)

    if len(knots) < 2:
        return DEFAULT_PATH

    first = knots[0]
    last = knots[-1]
    if first.y > edge_tolerance:
        knots.insert(0, Point(x=first.x, y=0.0))
    if last.y < 1.0 - edge_tolerance:
        knots.append(Point(x=last.x, y=1.0))

    return tuple(knots)
