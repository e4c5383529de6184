"""경로 편집 유스케이스.

편집기 화면에서의 점 추가/제거와 곡선 미리보기를 담당한다.
편집 결과(원본 점 목록)의 저장은 호스트가 담당한다.
"""

from __future__ import annotations

from collections.abc import Iterable
import logging

from image_path_slider.domain.entities.curve_path import CurvePath
from image_path_slider.domain.exceptions import (
    InvalidPointError,
    PointIndexError,
)
from image_path_slider.domain.value_objects.point import Point
from image_path_slider.domain.value_objects.viewport import BoundingBox
from image_path_slider.usecase.ports.config_port import PathConfig

logger = logging.getLogger(__name__)


class EditPath:
    """작성자 점 목록 편집기.

    Args:
        points: 초기 점 목록.
        config: 경로 설정. None이면 기본값.
    """

    def __init__(
        self,
        points: Iterable[Point] | None = None,
        config: PathConfig | None = None,
    ) -> None:
        self._config = config or PathConfig()
        self._points: list[Point] = list(points or ())
        self._curve = CurvePath(self._points, self._config.edge_tolerance)

    @property
    def points(self) -> list[Point]:
        """현재 점 목록의 복사본."""
        return list(self._points)

    @property
    def curve(self) -> CurvePath:
        return self._curve

    def add_point_at(
        self, click_x: float, click_y: float, box: BoundingBox
    ) -> list[Point]:
        """박스 내 클릭 좌표를 점으로 추가한다.

        추가 후 점 목록은 y 오름차순으로 정렬된다.

        Args:
            click_x: 클릭 x 좌표 (px, 페이지 기준).
            click_y: 클릭 y 좌표 (px, 페이지 기준).
            box: 편집 영역.

        Returns:
            갱신된 점 목록.

        Raises:
            InvalidPointError: 편집 영역의 너비나 높이가 0일 때.
        """
        if box.width == 0 or box.height == 0:
            raise InvalidPointError(
                f'Cannot place a point in an empty box '
                f'({box.width}x{box.height})'
            )
        point = Point(
            x=(click_x - box.left) / box.width,
            y=(click_y - box.top) / box.height,
        )
        self._points = sorted([*self._points, point], key=lambda p: p.y)
        self._curve.set_points(self._points)
        logger.debug('Point added: (%.3f, %.3f)', point.x, point.y)
        return self.points

    def remove_point(self, index: int) -> list[Point]:
        """index 위치의 점을 제거한다.

        Args:
            index: 제거할 점의 인덱스.

        Returns:
            갱신된 점 목록.

        Raises:
            PointIndexError: 인덱스가 범위를 벗어났을 때.
        """
        if not 0 <= index < len(self._points):
            raise PointIndexError(
                f'Point index {index} out of range '
                f'(0..{len(self._points) - 1})'
            )
        removed = self._points.pop(index)
        self._curve.set_points(self._points)
        logger.debug('Point removed: (%.3f, %.3f)', removed.x, removed.y)
        return self.points

    def preview_svg(self) -> str:
        """정규화된 경로의 미리보기 SVG path 문자열을 반환한다."""
        return self._curve.svg_path(
            self._config.svg_scale_x, self._config.svg_scale_y
        )
