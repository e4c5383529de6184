"""YAML 파일 기반 설정 로더 구현체."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from image_path_slider.domain.exceptions import ConfigError
from image_path_slider.usecase.ports.config_port import (
    AnimationConfig,
    ConfigPort,
    PathConfig,
    SliderConfig,
)

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG_PATH = (
    Path(__file__).resolve().parent.parent.parent
    / "config"
    / "default_params.yaml"
)


class YamlConfigLoader(ConfigPort):
    """ConfigPort의 YAML 파일 구현체.

    YAML 파일에서 설정을 읽어 SliderConfig로 변환한다.
    파일이 없거나 형식이 잘못되면 기본값을 사용한다.

    Args:
        config_path: YAML 설정 파일 경로. None이면 기본 경로 사용.
    """

    def __init__(self, config_path: Path | None = None) -> None:
        self._path = Path(config_path) if config_path else _DEFAULT_CONFIG_PATH

    def load(self) -> SliderConfig:
        """YAML 파일에서 설정을 로드한다."""
        params = self._extract_params(self._read_yaml())

        animation_data = params.get("animation") or {}
        path_data = params.get("path") or {}
        defaults = SliderConfig()

        config = SliderConfig(
            animation=AnimationConfig(
                damping=float(animation_data.get(
                    "damping", defaults.animation.damping
                )),
                tolerance_px=float(animation_data.get(
                    "tolerance_px", defaults.animation.tolerance_px
                )),
                frame_interval_sec=float(animation_data.get(
                    "frame_interval_sec",
                    defaults.animation.frame_interval_sec,
                )),
            ),
            path=PathConfig(
                edge_tolerance=float(path_data.get(
                    "edge_tolerance", defaults.path.edge_tolerance
                )),
                svg_scale_x=float(path_data.get(
                    "svg_scale_x", defaults.path.svg_scale_x
                )),
                svg_scale_y=float(path_data.get(
                    "svg_scale_y", defaults.path.svg_scale_y
                )),
            ),
        )
        self._validate(config)

        logger.info("Config loaded from %s", self._path)
        return config

    def _read_yaml(self) -> dict[str, Any]:
        """YAML 파일을 dict로 읽는다."""
        if not self._path.exists():
            logger.warning(
                "Config file not found: %s, using defaults", self._path
            )
            return {}

        with open(self._path, encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict):
            logger.warning("Invalid YAML format, using defaults")
            return {}

        return data

    def _extract_params(self, raw: dict[str, Any]) -> dict[str, Any]:
        """최상위 image_path_slider 키가 있으면 그 하위를 사용한다."""
        node_data = raw.get("image_path_slider", raw)
        if isinstance(node_data, dict):
            return node_data
        return {}

    def _validate(self, config: SliderConfig) -> None:
        """설정 값의 유효 범위를 검사한다."""
        animation = config.animation
        if animation.damping <= 0:
            raise ConfigError(
                f"animation.damping must be > 0, got {animation.damping}"
            )
        if animation.tolerance_px < 0:
            raise ConfigError(
                "animation.tolerance_px must be >= 0, "
                f"got {animation.tolerance_px}"
            )
        if animation.frame_interval_sec < 0:
            raise ConfigError(
                "animation.frame_interval_sec must be >= 0, "
                f"got {animation.frame_interval_sec}"
            )
        if not 0 <= config.path.edge_tolerance < 0.5:
            raise ConfigError(
                "path.edge_tolerance must be in [0, 0.5), "
                f"got {config.path.edge_tolerance}"
            )
