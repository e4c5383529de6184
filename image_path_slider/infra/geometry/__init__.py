"""뷰포트 배치 인프라 (GeometryProvider 구현)."""

from image_path_slider.infra.geometry.in_memory_geometry_provider import (
    InMemoryGeometryProvider,
)

__all__ = ["InMemoryGeometryProvider"]
