"""이미지 경로 슬라이더 값 객체 (불변, 동등성 기반 비교)."""

from image_path_slider.domain.value_objects.point import Point
from image_path_slider.domain.value_objects.segment import BezierSegment
from image_path_slider.domain.value_objects.viewport import (
    BoundingBox,
    ViewportGeometry,
)

__all__ = [
    'BezierSegment',
    'BoundingBox',
    'Point',
    'ViewportGeometry',
]
