"""이미지 렌더러 인프라 (ImageRenderer 구현)."""

from image_path_slider.infra.renderer.css_transform_renderer import (
    CssTransformRenderer,
)

__all__ = ["CssTransformRenderer"]
