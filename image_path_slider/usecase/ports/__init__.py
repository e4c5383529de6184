"""유스케이스 포트 인터페이스 (ABC).

infra 레이어에서 구현해야 하는 추상 인터페이스를 정의한다.
"""

from image_path_slider.usecase.ports.config_port import (
    AnimationConfig,
    ConfigPort,
    PathConfig,
    SliderConfig,
)
from image_path_slider.usecase.ports.frame_scheduler import FrameScheduler
from image_path_slider.usecase.ports.geometry_provider import GeometryProvider
from image_path_slider.usecase.ports.image_renderer import ImageRenderer

__all__ = [
    "AnimationConfig",
    "ConfigPort",
    "FrameScheduler",
    "GeometryProvider",
    "ImageRenderer",
    "PathConfig",
    "SliderConfig",
]
