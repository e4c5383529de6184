"""작성자 경로와 파생된 스플라인을 묶는 엔티티."""

from __future__ import annotations

from collections.abc import Iterable
import logging

from image_path_slider.domain.curve.normalizer import (
    EDGE_TOLERANCE,
    normalize_path,
)
from image_path_slider.domain.curve.sampler import interpolate_x
from image_path_slider.domain.curve.spline import get_curve_control_points
from image_path_slider.domain.curve.svg_path import create_smooth_path
from image_path_slider.domain.value_objects.point import Point
from image_path_slider.domain.value_objects.segment import BezierSegment

logger = logging.getLogger(__name__)


class CurvePath:
    """작성자가 입력한 점 목록과 그로부터 계산된 곡선.

    점 목록이 바뀌면 매듭점과 제어점을 통째로 다시 계산한다.
    부분 갱신은 하지 않는다.

    Args:
        points: 작성자 입력 점 목록 (정렬 여부 무관).
        edge_tolerance: 경계 판정 허용 오차.
    """

    def __init__(
        self,
        points: Iterable[Point] | None = None,
        edge_tolerance: float = EDGE_TOLERANCE,
    ) -> None:
        self._edge_tolerance = edge_tolerance
        self._points: tuple[Point, ...] = ()
        self._knots: tuple[Point, ...] = ()
        self._first: tuple[Point, ...] = ()
        self._second: tuple[Point, ...] = ()
        self.set_points(points)

    def set_points(self, points: Iterable[Point] | None) -> None:
        """점 목록을 교체하고 곡선을 다시 계산한다."""
        self._points = tuple(points or ())
        self._knots = normalize_path(self._points, self._edge_tolerance)
        first, second = get_curve_control_points(self._knots)
        self._first = tuple(first)
        self._second = tuple(second)
        logger.debug(
            'Curve recomputed: %d points -> %d knots',
            len(self._points), len(self._knots),
        )

    @property
    def points(self) -> tuple[Point, ...]:
        return self._points

    @property
    def knots(self) -> tuple[Point, ...]:
        return self._knots

    @property
    def first_control_points(self) -> tuple[Point, ...]:
        return self._first

    @property
    def second_control_points(self) -> tuple[Point, ...]:
        return self._second

    @property
    def segment_count(self) -> int:
        return len(self._knots) - 1

    def segment(self, index: int) -> BezierSegment:
        """index 번째 구간의 BezierSegment를 반환한다."""
        return BezierSegment(
            start=self._knots[index],
            control1=self._first[index],
            control2=self._second[index],
            end=self._knots[index + 1],
        )

    def segments(self) -> list[BezierSegment]:
        return [self.segment(i) for i in range(self.segment_count)]

    def sample_x(self, progress: float) -> float:
        """진행률에 대응하는 x 비율을 반환한다."""
        return interpolate_x(
            self._knots, self._first, self._second, progress
        )

    def svg_path(self, scale_x: float = 100.0, scale_y: float = 100.0) -> str:
        """미리보기용 SVG path 문자열을 반환한다."""
        return create_smooth_path(
            self._knots, scale_x, scale_y, (self._first, self._second)
        )
