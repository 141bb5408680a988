# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Explicitly stepped frame source.

Behaves like a browser's requestAnimationFrame: callbacks requested while
a frame is running are deferred to the following frame. Frames only
advance when the host calls advance(), which makes headless runs exact.
"""
from typing import Callable

from orbit_visualizer.ports import FrameSource


class ManualFrameClock(FrameSource):
    """Single-threaded frame source advanced by the caller."""

    def __init__(self) -> None:
        self._pending: list[Callable[[], None]] = []
        self.frame_count = 0

    @property
    def pending(self) -> int:
        """Number of callbacks waiting for the next frame."""
        return len(self._pending)

    def request_frame(self, callback: Callable[[], None]) -> None:
        self._pending.append(callback)

    def advance(self, frames: int = 1) -> int:
        """
        Run ``frames`` display frames.

        Returns:
            Total number of frames run since creation.
        """
        if frames < 0:
            raise ValueError(f"frames must be >= 0, got {frames}")
        for _ in range(frames):
            callbacks, self._pending = self._pending, []
            for callback in callbacks:
                callback()
            self.frame_count += 1
        return self.frame_count
