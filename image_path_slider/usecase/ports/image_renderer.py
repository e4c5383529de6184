"""이미지 렌더러 포트 인터페이스."""

from abc import ABC, abstractmethod


class ImageRenderer(ABC):
    """계산된 가로 이동량을 이미지에 적용하는 인터페이스."""

    @abstractmethod
    def apply_translation(self, offset_px: float) -> None:
        """이미지를 가로로 offset_px 만큼 이동시킨다.

        Args:
            offset_px: 가로 이동량 (px).
        """
