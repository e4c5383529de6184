"""애니메이션 프레임 스케줄러 인프라 (FrameScheduler 구현)."""

from image_path_slider.infra.scheduler.asyncio_frame_scheduler import (
    AsyncioFrameScheduler,
)
from image_path_slider.infra.scheduler.manual_frame_scheduler import (
    ManualFrameScheduler,
)

__all__ = ["AsyncioFrameScheduler", "ManualFrameScheduler"]
