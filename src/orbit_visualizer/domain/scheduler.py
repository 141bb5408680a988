# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Per-frame animation driver.

Each tick spins the central body, advances every registered satellite's
true anomaly by its speed, and pushes the new marker positions to the
renderer. The registry is re-read on every tick, so satellites added or
deleted between ticks take effect on the next one.

Ticks are driven by a host FrameSource (one callback per display frame)
and run to completion; edits happen between ticks, never during one.
"""
import logging
from dataclasses import dataclass
from enum import Enum

from orbit_visualizer.ports import FrameSource

from .registry import SatelliteRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnimationConfig:
    """Immutable animation settings."""
    spin_increment_rad: float = 0.002   # central body spin per tick
    central_body_tilt_rad: float = 0.41  # axial tilt about Z


class SchedulerState(Enum):
    RUNNING = "running"
    STOPPED = "stopped"


class CancellationToken:
    """One-way stop flag shared between a scheduler run and its pending frame."""

    def __init__(self) -> None:
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True


class AnimationScheduler:
    """Advances all satellites once per frame until stopped."""

    def __init__(
        self,
        registry: SatelliteRegistry,
        frame_source: FrameSource | None = None,
        config: AnimationConfig = AnimationConfig(),
    ) -> None:
        self.registry = registry
        self.frame_source = frame_source
        self.config = config
        self.state = SchedulerState.STOPPED
        self.spin_angle_rad = 0.0
        self.tick_count = 0
        self._token: CancellationToken | None = None
        self._frame_pending = False

    @property
    def running(self) -> bool:
        return self.state is SchedulerState.RUNNING

    def start(self) -> CancellationToken:
        """
        Enter RUNNING and schedule the first tick.

        Calling start() while already running with a frame pending returns
        the current token. A failed tick stops the run.

        Raises:
            RuntimeError: no frame source to schedule ticks on.
        """
        if self.running and self._token is not None and self._frame_pending:
            return self._token
        if self.frame_source is None:
            raise RuntimeError("AnimationScheduler.start() requires a frame source")
        if self._token is not None:
            self._token.cancel()

        token = CancellationToken()
        self._token = token
        self.state = SchedulerState.RUNNING
        self._orient_central_body()
        logger.info("Animation started with %d satellite(s)", len(self.registry))
        self._request_frame(token)
        return token

    def stop(self) -> None:
        """Cancel the current run. A pending frame callback becomes a no-op."""
        if self._token is not None:
            self._token.cancel()
        if self.running:
            logger.info("Animation stopped after %d tick(s)", self.tick_count)
        self.state = SchedulerState.STOPPED

    def _request_frame(self, token: CancellationToken) -> None:
        self.frame_source.request_frame(lambda: self._on_frame(token))
        self._frame_pending = True

    def _on_frame(self, token: CancellationToken) -> None:
        if token is self._token:
            self._frame_pending = False
        if token.cancelled:
            return
        try:
            self.tick()
        except Exception:
            logger.error("Animation tick %d failed, stopping", self.tick_count + 1)
            self.stop()
            raise
        if not token.cancelled:
            self._request_frame(token)

    def tick(self) -> None:
        """Run one animation step over every satellite currently registered."""
        self.spin_angle_rad += self.config.spin_increment_rad
        self._orient_central_body()

        renderer = self.registry.renderer
        for entity in self.registry:
            position = entity.advance()
            if renderer is not None and entity.marker_handle is not None:
                renderer.set_position(entity.marker_handle, position)

        self.tick_count += 1

    def _orient_central_body(self) -> None:
        renderer = self.registry.renderer
        if renderer is not None:
            renderer.orient_central_body(
                self.config.central_body_tilt_rad, self.spin_angle_rad,
            )
