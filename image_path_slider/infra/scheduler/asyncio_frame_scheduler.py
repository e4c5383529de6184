"""asyncio 이벤트 루프 기반 프레임 스케줄러."""

from __future__ import annotations

import asyncio
from collections.abc import Callable

from image_path_slider.usecase.ports.frame_scheduler import FrameScheduler


class AsyncioFrameScheduler(FrameScheduler):
    """FrameScheduler의 asyncio 구현체.

    loop.call_later()로 다음 프레임을 예약한다.

    Args:
        frame_interval_sec: 프레임 간격 (초).
        loop: 사용할 이벤트 루프. None이면 실행 중인 루프를 사용한다.
    """

    def __init__(
        self,
        frame_interval_sec: float = 1 / 60,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        self._interval = frame_interval_sec
        self._loop = loop

    def request_frame(
        self, callback: Callable[[], None]
    ) -> asyncio.TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(self._interval, callback)

    def cancel_frame(self, handle: asyncio.TimerHandle) -> None:
        if handle is not None:
            handle.cancel()
