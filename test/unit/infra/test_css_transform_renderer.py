"""CssTransformRenderer 단위 테스트."""

from image_path_slider.infra.renderer import CssTransformRenderer
from image_path_slider.infra.renderer.css_transform_renderer import (
    format_translate_x,
)


class TestFormatTranslateX:
    def test_format(self):
        assert format_translate_x(100.0) == 'translateX(100.00px)'
        assert format_translate_x(-12.346) == 'translateX(-12.35px)'


class TestCssTransformRenderer:
    def test_forwards_to_sink(self):
        received = []
        renderer = CssTransformRenderer(sink=received.append)

        renderer.apply_translation(50.0)
        renderer.apply_translation(25.5)

        assert received == ['translateX(50.00px)', 'translateX(25.50px)']

    def test_keeps_last_value_without_sink(self):
        renderer = CssTransformRenderer()
        assert renderer.last_transform is None

        renderer.apply_translation(-3.0)

        assert renderer.last_offset == -3.0
        assert renderer.last_transform == 'translateX(-3.00px)'
