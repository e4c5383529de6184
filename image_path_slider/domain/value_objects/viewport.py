"""뷰포트/요소 배치 관련 값 객체."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ViewportGeometry:
    """스크롤 이벤트 시점의 요소 배치 및 문서 스크롤 상태.

    Args:
        element_top: 뷰포트 상단 기준 이미지 요소의 top (px).
        element_height: 이미지 요소 높이 (px).
        element_width: 이미지 요소 너비 (px).
        scroll_top: 문서 스크롤 오프셋 (px).
        scroll_height: 문서 전체 높이 (px).
        viewport_width: 뷰포트 너비 (px).
        viewport_height: 뷰포트 높이 (px).
    """

    element_top: float
    element_height: float
    element_width: float
    scroll_top: float
    scroll_height: float
    viewport_width: float
    viewport_height: float


@dataclass(frozen=True)
class BoundingBox:
    """편집기에서 클릭 좌표를 정규화할 때 쓰는 사각 영역.

    Args:
        left: 좌측 좌표 (px).
        top: 상단 좌표 (px).
        width: 너비 (px).
        height: 높이 (px).
    """

    left: float
    top: float
    width: float
    height: float
