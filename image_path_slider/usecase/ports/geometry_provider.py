"""뷰포트 배치 제공 포트 인터페이스.

실제 레이아웃 엔진(브라우저 DOM 등) 없이 애니메이션 로직을
테스트할 수 있도록 배치 측정을 추상화한다.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from image_path_slider.domain.value_objects.viewport import ViewportGeometry


class GeometryProvider(ABC):
    """뷰포트/요소 배치 측정 인터페이스."""

    @abstractmethod
    def get_geometry(self) -> ViewportGeometry | None:
        """현재 배치를 측정한다.

        Returns:
            현재 배치 또는 요소가 아직 없으면 None.
        """
