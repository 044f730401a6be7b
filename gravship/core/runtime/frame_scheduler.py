"""
frame_scheduler.py
------------------
Runs frame callbacks once per display refresh.

Responsibilities:
- Queue callbacks with request_frame(); each runs exactly once
- Pace frames at the refresh rate, or a fixed fallback rate without vsync
- Keep frames strictly serialized: callbacks requested during frame N run in N+1
"""

import time

import pygame

from gravship.core.debug.debug_logger import DebugLogger
from gravship.core.runtime.game_settings import Debug, Display, Scheduler


class FrameScheduler:
    """
    Cooperative, single-threaded frame pump.

    Usage:
        def animate():
            scheduler.request_frame(animate)
            ...

        scheduler.request_frame(animate)
        scheduler.run(handle_events, present)
    """

    def __init__(self, vsync=False):
        """
        Args:
            vsync: True if display flips block on the refresh signal
        """
        self.rate = Display.FPS if vsync else Scheduler.FALLBACK_RATE
        self.clock = pygame.time.Clock()
        self.running = False
        self.frame_count = 0

        # Double buffer so requests made mid-frame wait for the next frame
        self._pending = []
        self._spare = []

        self._last_perf_warn_time = 0.0

        DebugLogger.init_entry("FrameScheduler")
        DebugLogger.init_sub(f"Pacing at {self.rate} Hz ({'vsync' if vsync else 'fallback timer'})")

    # ===========================================================
    # Scheduling
    # ===========================================================

    def request_frame(self, callback):
        """Run callback once at the next frame."""
        self._pending.append(callback)

    def has_pending(self):
        return bool(self._pending)

    def run_frame(self):
        """Invoke every callback queued before this frame began."""
        callbacks = self._pending
        self._pending = self._spare
        try:
            for callback in callbacks:
                callback()
        finally:
            # Callbacks after a failing one are dropped with the frame
            callbacks.clear()
            self._spare = callbacks
            self.frame_count += 1

    def stop(self):
        """Stop after the current frame. Pending callbacks are dropped."""
        self.running = False
        self._pending.clear()
        DebugLogger.system("Frame loop stopped")

    # ===========================================================
    # Loop
    # ===========================================================

    def run(self, handle_events, present):
        """
        Pump frames until stop() is called or nothing is scheduled.

        Args:
            handle_events: Called before each frame to drain the event queue
            present: Called after each frame's callbacks to show the result
        """
        self.running = True
        DebugLogger.section("Frame Loop")

        while self.running and self._pending:
            self.clock.tick(self.rate)

            handle_events()
            if not self.running:
                break

            start = time.perf_counter()
            self.run_frame()
            present()
            self._check_frame_time((time.perf_counter() - start) * 1000)

        self.running = False

    def _check_frame_time(self, frame_time_ms):
        """Warn about slow frames, at most once per second."""
        if frame_time_ms <= Debug.FRAME_TIME_WARNING:
            return
        now = time.perf_counter()
        if now - self._last_perf_warn_time > 1.0:
            self._last_perf_warn_time = now
            DebugLogger.warn(f"Slow frame: {frame_time_ms:.2f} ms", category="timing")
