"""설정 포트 인터페이스.

슬라이더 설정의 로딩을 추상화한다.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass(frozen=True)
class AnimationConfig:
    """스크롤 애니메이션 설정.

    Args:
        damping: 프레임마다 남은 거리를 나누는 감쇠 계수 (> 0).
        tolerance_px: 이 거리 이내로 수렴하면 프레임 예약을 멈춘다 (px).
        frame_interval_sec: 프레임 간격 (초).
    """

    damping: float = 10.0
    tolerance_px: float = 1.0
    frame_interval_sec: float = 1 / 60


@dataclass(frozen=True)
class PathConfig:
    """경로 정규화 및 미리보기 설정.

    Args:
        edge_tolerance: y=0, y=1 경계 판정 허용 오차.
        svg_scale_x: 미리보기 SVG x 배율.
        svg_scale_y: 미리보기 SVG y 배율.
    """

    edge_tolerance: float = 0.01
    svg_scale_x: float = 100.0
    svg_scale_y: float = 100.0


@dataclass(frozen=True)
class SliderConfig:
    """슬라이더 전체 설정."""

    animation: AnimationConfig = field(default_factory=AnimationConfig)
    path: PathConfig = field(default_factory=PathConfig)


class ConfigPort(ABC):
    """설정 로더 인터페이스."""

    @abstractmethod
    def load(self) -> SliderConfig:
        """설정을 로드한다.

        Returns:
            슬라이더 설정.

        Raises:
            ConfigError: 설정 값이 유효하지 않을 때.
        """
