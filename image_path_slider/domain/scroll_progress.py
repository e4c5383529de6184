"""뷰포트 배치로부터 스크롤 진행률을 계산한다."""

from image_path_slider.domain.value_objects.viewport import ViewportGeometry


def compute_scroll_progress(geometry: ViewportGeometry) -> float:
    """뷰포트 중앙이 이미지 요소를 통과한 비율을 반환한다.

    문서 끝 근처에서 뷰포트 중앙이 요소 하단에 도달할 수 없는 경우,
    도달할 수 없는 만큼(offset_end)을 요소 높이에서 빼서
    마지막 스크롤 위치에서 진행률이 1이 되도록 한다.

    Args:
        geometry: 현재 뷰포트/요소 배치.

    Returns:
        0.0~1.0 범위의 진행률.
    """
    half_viewport = geometry.viewport_height / 2
    element_bottom = (
        geometry.element_top + geometry.scroll_top + geometry.element_height
    )
    max_top_pos = geometry.scroll_height - half_viewport
    offset_end = max(0.0, element_bottom - max_top_pos)

    travel = geometry.element_height - offset_end
    if travel <= 0:
        return 1.0

    progress = (-geometry.element_top + half_viewport) / travel
    return max(0.0, min(1.0, progress))
