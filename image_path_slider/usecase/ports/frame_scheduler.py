"""애니메이션 프레임 스케줄러 포트 인터페이스."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any


class FrameScheduler(ABC):
    """다음 애니메이션 프레임 예약/취소 인터페이스."""

    @abstractmethod
    def request_frame(self, callback: Callable[[], None]) -> Any:
        """다음 프레임에 callback 호출을 예약한다.

        Args:
            callback: 프레임 시점에 호출할 함수.

        Returns:
            cancel_frame()에 넘길 예약 핸들.
        """

    @abstractmethod
    def cancel_frame(self, handle: Any) -> None:
        """예약된 프레임을 취소한다.

        이미 실행되었거나 취소된 핸들은 무시한다.

        Args:
            handle: request_frame()이 반환한 핸들.
        """
