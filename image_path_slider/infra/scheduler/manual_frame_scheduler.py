"""수동 진행 프레임 스케줄러 구현체."""

from __future__ import annotations

from collections.abc import Callable
import itertools
import logging

from image_path_slider.usecase.ports.frame_scheduler import FrameScheduler

logger = logging.getLogger(__name__)


class ManualFrameScheduler(FrameScheduler):
    """FrameScheduler의 인메모리 구현체.

    예약된 콜백은 run_pending() 호출 시에만 실행된다.
    테스트와 CLI 시뮬레이션에서 프레임을 결정적으로 진행할 때 사용한다.
    """

    def __init__(self) -> None:
        self._ids = itertools.count(1)
        self._pending: dict[int, Callable[[], None]] = {}
        self._frames_run = 0

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    @property
    def frames_run(self) -> int:
        return self._frames_run

    def request_frame(self, callback: Callable[[], None]) -> int:
        handle = next(self._ids)
        self._pending[handle] = callback
        return handle

    def cancel_frame(self, handle: int) -> None:
        self._pending.pop(handle, None)

    def run_pending(self) -> int:
        """현재 예약된 프레임을 한 번씩 실행한다.

        실행 중에 새로 예약된 프레임은 다음 호출에서 실행된다.

        Returns:
            실행한 프레임 수.
        """
        batch = list(self._pending.items())
        self._pending.clear()
        for _, callback in batch:
            callback()
        self._frames_run += len(batch)
        return len(batch)

    def run_until_idle(self, max_frames: int = 10_000) -> int:
        """예약된 프레임이 없을 때까지 실행한다.

        Args:
            max_frames: 최대 실행 프레임 수.

        Returns:
            실행한 프레임 수.
        """
        total = 0
        while self._pending and total < max_frames:
            total += self.run_pending()
        if self._pending:
            logger.warning(
                "Frame limit reached with %d frame(s) still pending",
                len(self._pending),
            )
        return total
