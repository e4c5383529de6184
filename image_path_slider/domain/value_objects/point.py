"""경로 점 값 객체."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """단위 박스 내의 2차원 점.

    Args:
        x: 가로 위치 비율 (0.0~1.0).
        y: 세로 위치 비율 (0.0~1.0).
    """

    x: float
    y: float

    def as_dict(self) -> dict[str, float]:
        """호스트 속성 값 형식({'x', 'y'})으로 변환한다."""
        return {'x': self.x, 'y': self.y}
