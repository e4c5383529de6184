"""프레임 스케줄러 구현체 단위 테스트."""

import asyncio

from image_path_slider.infra.scheduler.asyncio_frame_scheduler import (
    AsyncioFrameScheduler,
)
from image_path_slider.infra.scheduler.manual_frame_scheduler import (
    ManualFrameScheduler,
)


class TestManualFrameScheduler:
    def test_callback_runs_only_when_stepped(self):
        scheduler = ManualFrameScheduler()
        calls = []
        scheduler.request_frame(lambda: calls.append(1))

        assert calls == []
        assert scheduler.run_pending() == 1
        assert calls == [1]
        assert scheduler.frames_run == 1

    def test_cancel(self):
        scheduler = ManualFrameScheduler()
        calls = []
        handle = scheduler.request_frame(lambda: calls.append(1))

        scheduler.cancel_frame(handle)

        assert scheduler.run_pending() == 0
        assert calls == []

    def test_cancel_unknown_handle_is_ignored(self):
        scheduler = ManualFrameScheduler()
        scheduler.cancel_frame(999)
        assert scheduler.pending_count == 0

    def test_frames_requested_during_run_wait_for_next_step(self):
        scheduler = ManualFrameScheduler()
        calls = []

        def chain():
            calls.append(1)
            if len(calls) < 3:
                scheduler.request_frame(chain)

        scheduler.request_frame(chain)

        assert scheduler.run_pending() == 1
        assert scheduler.pending_count == 1
        assert scheduler.run_until_idle() == 2
        assert len(calls) == 3

    def test_run_until_idle_respects_limit(self):
        scheduler = ManualFrameScheduler()

        def forever():
            scheduler.request_frame(forever)

        scheduler.request_frame(forever)

        assert scheduler.run_until_idle(max_frames=5) == 5
        assert scheduler.pending_count == 1


class TestAsyncioFrameScheduler:
    def test_runs_callback_on_loop(self):
        async def scenario():
            scheduler = AsyncioFrameScheduler(frame_interval_sec=0.0)
            done = asyncio.Event()
            scheduler.request_frame(done.set)
            await asyncio.wait_for(done.wait(), timeout=1.0)
            return done.is_set()

        assert asyncio.run(scenario())

    def test_cancel(self):
        async def scenario():
            scheduler = AsyncioFrameScheduler(frame_interval_sec=0.01)
            calls = []
            handle = scheduler.request_frame(lambda: calls.append(1))
            scheduler.cancel_frame(handle)
            await asyncio.sleep(0.05)
            return calls

        assert asyncio.run(scenario()) == []

    def test_explicit_loop(self):
        loop = asyncio.new_event_loop()
        try:
            scheduler = AsyncioFrameScheduler(0.0, loop=loop)
            calls = []
            scheduler.request_frame(lambda: calls.append(1))
            loop.run_until_complete(asyncio.sleep(0.01))
            assert calls == [1]
        finally:
            loop.close()
