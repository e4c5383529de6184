"""공통 테스트 fixture."""

import pytest

from image_path_slider.domain.value_objects.point import Point
from image_path_slider.domain.value_objects.viewport import ViewportGeometry
from image_path_slider.usecase.ports.config_port import (
    AnimationConfig,
    PathConfig,
    SliderConfig,
)


@pytest.fixture
def three_knots():
    return (
        Point(x=0.2, y=0.0),
        Point(x=0.8, y=0.5),
        Point(x=0.3, y=1.0),
    )


@pytest.fixture
def wavy_knots():
    return (
        Point(x=0.1, y=0.0),
        Point(x=0.9, y=0.15),
        Point(x=0.2, y=0.4),
        Point(x=0.7, y=0.55),
        Point(x=0.4, y=0.8),
        Point(x=0.6, y=1.0),
    )


@pytest.fixture
def unsorted_points():
    return [
        Point(x=0.7, y=0.6),
        Point(x=0.3, y=0.2),
        Point(x=0.5, y=0.4),
    ]


@pytest.fixture
def sample_geometry():
    return ViewportGeometry(
        element_top=400.0,
        element_height=1000.0,
        element_width=1000.0,
        scroll_top=0.0,
        scroll_height=5000.0,
        viewport_width=1200.0,
        viewport_height=800.0,
    )


@pytest.fixture
def sample_config():
    return SliderConfig(
        animation=AnimationConfig(damping=10.0, tolerance_px=1.0),
        path=PathConfig(edge_tolerance=0.01),
    )
