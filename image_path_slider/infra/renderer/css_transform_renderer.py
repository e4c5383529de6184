"""CSS transform 문자열 렌더러."""

from __future__ import annotations

from collections.abc import Callable

from image_path_slider.usecase.ports.image_renderer import ImageRenderer


def format_translate_x(offset_px: float) -> str:
    """가로 이동량을 CSS translateX() 값으로 포맷한다."""
    return f"translateX({offset_px:.2f}px)"


class CssTransformRenderer(ImageRenderer):
    """ImageRenderer의 CSS transform 구현체.

    이동량을 'translateX(<offset>px)' 문자열로 변환하여 sink에 전달한다.
    sink가 없으면 마지막 값만 보관한다.

    Args:
        sink: transform 문자열을 받을 콜백.
    """

    def __init__(self, sink: Callable[[str], None] | None = None) -> None:
        self._sink = sink
        self._last_transform: str | None = None
        self._last_offset: float | None = None

    @property
    def last_transform(self) -> str | None:
        return self._last_transform

    @property
    def last_offset(self) -> float | None:
        return self._last_offset

    def apply_translation(self, offset_px: float) -> None:
        transform = format_translate_x(offset_px)
        self._last_offset = offset_px
        self._last_transform = transform
        if self._sink is not None:
            self._sink(transform)
