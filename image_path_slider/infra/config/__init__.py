"""설정 로더 인프라 (ConfigPort 구현)."""

from image_path_slider.infra.config.yaml_config_loader import YamlConfigLoader

__all__ = ["YamlConfigLoader"]
