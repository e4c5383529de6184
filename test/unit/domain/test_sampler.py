"""베지어 공식 및 진행률 샘플링 단위 테스트."""

import pytest

from image_path_slider.domain.curve.bezier import (
    cubic_bezier,
    cubic_bezier_derivative,
)
from image_path_slider.domain.curve.normalizer import DEFAULT_PATH
from image_path_slider.domain.curve.sampler import (
    interpolate_x,
    local_parameter,
)
from image_path_slider.domain.curve.spline import get_curve_control_points
from image_path_slider.domain.value_objects.point import Point


class TestCubicBezier:
    def test_endpoints(self):
        assert cubic_bezier(0.0, 1.0, 5.0, -3.0, 2.0) == 1.0
        assert cubic_bezier(1.0, 1.0, 5.0, -3.0, 2.0) == 2.0

    def test_constant(self):
        assert cubic_bezier(0.37, 0.5, 0.5, 0.5, 0.5) == pytest.approx(0.5)

    def test_derivative_of_linear(self):
        # 제어점이 1/3, 2/3 지점이면 속도는 일정하다
        for t in (0.0, 0.3, 1.0):
            assert cubic_bezier_derivative(
                t, 0.0, 1 / 3, 2 / 3, 1.0
            ) == pytest.approx(1.0)


class TestLocalParameter:
    @pytest.mark.parametrize(
        "progress, expected",
        [(0.25, 0.5), (0.0, 0.0), (0.5, 1.0), (-1.0, 0.0), (2.0, 1.0)],
    )
    def test_clamped(self, progress, expected):
        assert local_parameter(progress, 0.0, 0.5) == pytest.approx(expected)

    def test_zero_height_interval(self):
        assert local_parameter(0.5, 0.5, 0.5) == 0.0


class TestInterpolateX:
    @pytest.fixture
    def curve(self, three_knots):
        first, second = get_curve_control_points(three_knots)
        return three_knots, first, second

    def test_start_returns_first_knot_x(self, curve):
        assert interpolate_x(*curve, 0.0) == pytest.approx(0.2)

    def test_end_returns_last_knot_x(self, curve):
        assert interpolate_x(*curve, 1.0) == pytest.approx(0.3)

    def test_beyond_end_is_completion(self, curve):
        assert interpolate_x(*curve, 1.5) == pytest.approx(0.3)

    def test_interior_knot(self, curve):
        assert interpolate_x(*curve, 0.5) == pytest.approx(0.8)

    def test_inside_first_interval(self, curve):
        assert interpolate_x(*curve, 0.25) == pytest.approx(0.603125)

    def test_no_jump_at_interval_boundary(self, curve):
        before = interpolate_x(*curve, 0.5 - 1e-9)
        after = interpolate_x(*curve, 0.5 + 1e-9)
        assert before == pytest.approx(after, abs=1e-6)

    def test_dense_sampling_is_continuous(self, wavy_knots):
        first, second = get_curve_control_points(wavy_knots)
        samples = [
            interpolate_x(wavy_knots, first, second, i / 1000)
            for i in range(1001)
        ]
        jumps = [abs(b - a) for a, b in zip(samples, samples[1:])]
        assert max(jumps) < 0.05

    def test_default_path_is_constant(self):
        first, second = get_curve_control_points(DEFAULT_PATH)
        for p in (0.0, 0.3, 0.7, 1.0):
            assert interpolate_x(
                DEFAULT_PATH, first, second, p
            ) == pytest.approx(0.5)

    def test_duplicate_y_does_not_raise(self):
        knots = [
            Point(x=0.5, y=0.0),
            Point(x=0.2, y=0.5),
            Point(x=0.8, y=0.5),
            Point(x=0.5, y=1.0),
        ]
        first, second = get_curve_control_points(knots)
        x = interpolate_x(knots, first, second, 0.5)
        assert x == pytest.approx(0.2)

    def test_flat_final_interval_completes_path(self):
        # 0.995는 경계 허용 오차 이내라 y=1 점이 추가되지 않는다
        knots = [
            Point(x=0.5, y=0.0),
            Point(x=0.3, y=0.995),
            Point(x=0.7, y=0.995),
        ]
        first, second = get_curve_control_points(knots)
        assert interpolate_x(knots, first, second, 1.0) == pytest.approx(0.7)
