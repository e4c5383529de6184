"""이미지 경로 슬라이더 도메인 엔티티."""

from image_path_slider.domain.entities.curve_path import CurvePath

__all__ = ['CurvePath']
