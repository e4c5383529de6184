"""스크롤 기반 이미지 슬라이드 유스케이스.

스크롤/리사이즈 이벤트마다 진행률을 곡선에 대입해 목표 x를 구하고,
감쇠 애니메이션으로 이미지를 목표 위치까지 이동시킨다.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
import logging
import time
from typing import Any

from image_path_slider.domain.entities.curve_path import CurvePath
from image_path_slider.domain.scroll_progress import compute_scroll_progress
from image_path_slider.domain.value_objects.point import Point
from image_path_slider.usecase.ports.config_port import AnimationConfig
from image_path_slider.usecase.ports.frame_scheduler import FrameScheduler
from image_path_slider.usecase.ports.geometry_provider import GeometryProvider
from image_path_slider.usecase.ports.image_renderer import ImageRenderer

logger = logging.getLogger(__name__)


class SlideImage:
    """위젯 인스턴스 하나의 슬라이드 애니메이션.

    마지막 위치/갱신 시각/예약 프레임은 모두 인스턴스 상태이므로
    한 페이지에 여러 위젯이 있어도 서로 간섭하지 않는다.

    Args:
        path: 이미지가 따라갈 곡선.
        geometry_provider: 뷰포트 배치 측정 포트.
        scheduler: 애니메이션 프레임 스케줄러.
        renderer: 이동량을 적용할 렌더러.
        config: 애니메이션 설정. None이면 기본값.
        time_source: 현재 시각 함수 (초).
    """

    def __init__(
        self,
        path: CurvePath,
        geometry_provider: GeometryProvider,
        scheduler: FrameScheduler,
        renderer: ImageRenderer,
        config: AnimationConfig | None = None,
        time_source: Callable[[], float] = time.monotonic,
    ) -> None:
        self._path = path
        self._geometry_provider = geometry_provider
        self._scheduler = scheduler
        self._renderer = renderer
        self._config = config or AnimationConfig()
        self._time_source = time_source

        self._last_x: float | None = None
        self._last_update = 0.0
        self._pending_frame: Any = None

    @property
    def path(self) -> CurvePath:
        return self._path

    @property
    def current_x(self) -> float | None:
        """마지막으로 표시한 x 위치 (px). 아직 갱신 전이면 None."""
        return self._last_x

    @property
    def last_update(self) -> float:
        return self._last_update

    @property
    def is_animating(self) -> bool:
        """다음 프레임이 예약되어 있는지 여부."""
        return self._pending_frame is not None

    # -- 생명주기 --

    def start(self) -> None:
        """초기 위치를 계산하여 적용한다."""
        logger.info(
            'Slide animation started (%d knots)', len(self._path.knots)
        )
        self.handle_update()

    def stop(self) -> None:
        """예약된 프레임을 취소한다."""
        self._cancel_pending()
        logger.info('Slide animation stopped')

    # -- 이벤트 훅 --

    def on_scroll(self) -> None:
        self.handle_update()

    def on_resize(self) -> None:
        self.handle_update()

    def set_points(self, points: Iterable[Point] | None) -> None:
        """경로 점 목록을 교체하고 위치를 다시 계산한다."""
        self._path.set_points(points)
        self.handle_update()

    # -- 애니메이션 --

    def handle_update(self) -> None:
        """목표 위치를 다시 계산하고 한 프레임만큼 이동한다.

        이전에 예약된 프레임은 항상 먼저 취소하므로 애니메이션
        체인이 겹치지 않는다. 목표와의 거리가 허용 오차보다 크면
        다음 프레임을 예약한다.
        """
        self._cancel_pending()

        geometry = self._geometry_provider.get_geometry()
        if geometry is None:
            logger.debug('No geometry available, skipping update')
            return

        progress = compute_scroll_progress(geometry)
        desired_x = self._path.sample_x(progress) * geometry.element_width

        if self._last_x is None:
            x = desired_x
        else:
            x = self._last_x + (desired_x - self._last_x) / (
                self._config.damping
            )

        self._last_update = self._time_source()
        self._last_x = x

        offset = geometry.viewport_width / 2 - x
        self._renderer.apply_translation(offset)

        if abs(desired_x - x) > self._config.tolerance_px:
            self._pending_frame = self._scheduler.request_frame(
                self._on_frame
            )
        logger.debug(
            'progress=%.4f desired_x=%.2f x=%.2f offset=%.2f',
            progress, desired_x, x, offset,
        )

    def _on_frame(self) -> None:
        self._pending_frame = None
        self.handle_update()

    def _cancel_pending(self) -> None:
        if self._pending_frame is not None:
            self._scheduler.cancel_frame(self._pending_frame)
            self._pending_frame = None
