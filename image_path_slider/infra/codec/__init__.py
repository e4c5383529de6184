"""호스트 속성 값 ↔ 도메인 점 변환."""

from image_path_slider.infra.codec.point_codec import (
    decode_points,
    encode_points,
    load_points_file,
)

__all__ = ["decode_points", "encode_points", "load_points_file"]
