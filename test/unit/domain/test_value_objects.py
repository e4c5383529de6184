"""값 객체 단위 테스트."""

import pytest

from image_path_slider.domain.value_objects.point import Point
from image_path_slider.domain.value_objects.segment import BezierSegment
from image_path_slider.domain.value_objects.viewport import BoundingBox


class TestPoint:
    def test_frozen(self):
        p = Point(x=0.1, y=0.2)
        try:
            p.x = 0.9
            assert False, 'Should raise FrozenInstanceError'
        except AttributeError:
            pass

    def test_equality(self):
        assert Point(x=0.1, y=0.2) == Point(x=0.1, y=0.2)
        assert Point(x=0.1, y=0.2) != Point(x=0.1, y=0.3)

    def test_as_dict(self):
        assert Point(x=0.25, y=0.75).as_dict() == {'x': 0.25, 'y': 0.75}


class TestBezierSegment:
    @pytest.fixture
    def segment(self):
        return BezierSegment(
            start=Point(x=0.0, y=0.0),
            control1=Point(x=0.0, y=1.0),
            control2=Point(x=1.0, y=1.0),
            end=Point(x=1.0, y=0.0),
        )

    def test_endpoints(self, segment):
        assert segment.point_at(0.0) == segment.start
        assert segment.point_at(1.0) == segment.end

    def test_midpoint(self, segment):
        mid = segment.point_at(0.5)
        assert mid.x == pytest.approx(0.5)
        assert mid.y == pytest.approx(0.75)

    def test_derivative_at_endpoints(self, segment):
        # B'(0) = 3(C1 - P0), B'(1) = 3(P3 - C2)
        assert segment.derivative_at(0.0) == Point(x=0.0, y=3.0)
        assert segment.derivative_at(1.0) == Point(x=0.0, y=-3.0)


class TestBoundingBox:
    def test_construction(self):
        box = BoundingBox(left=10.0, top=20.0, width=300.0, height=200.0)
        assert box.width == 300.0
        assert box.height == 200.0
