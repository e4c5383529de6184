"""3차 베지어 구간 값 객체."""

from dataclasses import dataclass

from image_path_slider.domain.curve.bezier import (
    cubic_bezier,
    cubic_bezier_derivative,
)
from image_path_slider.domain.value_objects.point import Point


@dataclass(frozen=True)
class BezierSegment:
    """두 매듭점 사이의 3차 베지어 구간.

    Args:
        start: 시작 매듭점.
        control1: 시작점 쪽 제어점.
        control2: 끝점 쪽 제어점.
        end: 끝 매듭점.
    """

    start: Point
    control1: Point
    control2: Point
    end: Point

    def point_at(self, t: float) -> Point:
        """매개변수 t (0.0~1.0)에서의 곡선 위 점을 반환한다."""
        return Point(x=self.x_at(t), y=self.y_at(t))

    def x_at(self, t: float) -> float:
        return cubic_bezier(
            t, self.start.x, self.control1.x, self.control2.x, self.end.x
        )

    def y_at(self, t: float) -> float:
        return cubic_bezier(
            t, self.start.y, self.control1.y, self.control2.y, self.end.y
        )

    def derivative_at(self, t: float) -> Point:
        """매개변수 t에서의 접선 벡터 (dx/dt, dy/dt)를 반환한다."""
        return Point(
            x=cubic_bezier_derivative(
                t, self.start.x, self.control1.x,
                self.control2.x, self.end.x,
            ),
            y=cubic_bezier_derivative(
                t, self.start.y, self.control1.y,
                self.control2.y, self.end.y,
            ),
        )
