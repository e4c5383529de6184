"""인메모리 페이지 배치 구현체."""

from __future__ import annotations

from dataclasses import replace
import logging

from image_path_slider.domain.value_objects.viewport import ViewportGeometry
from image_path_slider.usecase.ports.geometry_provider import GeometryProvider

logger = logging.getLogger(__name__)


class InMemoryGeometryProvider(GeometryProvider):
    """GeometryProvider의 인메모리 구현체.

    문서 내 이미지 요소의 절대 위치를 보관하고, 스크롤 오프셋이
    바뀔 때 뷰포트 기준 top을 다시 계산한다.

    Args:
        element_offset_top: 문서 기준 이미지 요소 top (px).
        element_height: 이미지 요소 높이 (px).
        element_width: 이미지 요소 너비 (px).
        scroll_height: 문서 전체 높이 (px).
        viewport_width: 뷰포트 너비 (px).
        viewport_height: 뷰포트 높이 (px).
        scroll_top: 초기 스크롤 오프셋 (px).
    """

    def __init__(
        self,
        element_offset_top: float,
        element_height: float,
        element_width: float,
        scroll_height: float,
        viewport_width: float,
        viewport_height: float,
        scroll_top: float = 0.0,
    ) -> None:
        self._element_offset_top = element_offset_top
        self._geometry: ViewportGeometry | None = ViewportGeometry(
            element_top=element_offset_top - scroll_top,
            element_height=element_height,
            element_width=element_width,
            scroll_top=scroll_top,
            scroll_height=scroll_height,
            viewport_width=viewport_width,
            viewport_height=viewport_height,
        )

    def get_geometry(self) -> ViewportGeometry | None:
        return self._geometry

    @property
    def max_scroll_top(self) -> float:
        """스크롤 가능한 최대 오프셋 (px)."""
        if self._geometry is None:
            return 0.0
        return max(
            0.0,
            self._geometry.scroll_height - self._geometry.viewport_height,
        )

    def scroll_to(self, scroll_top: float) -> None:
        """스크롤 오프셋을 [0, max_scroll_top] 범위로 제한해 변경한다."""
        if self._geometry is None:
            return
        scroll_top = max(0.0, min(self.max_scroll_top, scroll_top))
        self._geometry = replace(
            self._geometry,
            scroll_top=scroll_top,
            element_top=self._element_offset_top - scroll_top,
        )
        logger.debug("Scrolled to %.1f", scroll_top)

    def resize(self, viewport_width: float, viewport_height: float) -> None:
        """뷰포트 크기를 변경한다."""
        if self._geometry is None:
            return
        self._geometry = replace(
            self._geometry,
            viewport_width=viewport_width,
            viewport_height=viewport_height,
        )

    def detach(self) -> None:
        """이미지 요소가 제거된 상태로 만든다."""
        self._geometry = None
