# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interfaces for the display host.

The orbit core never draws anything itself. Adapters implement these to
provide a scene (markers, paths, central body), a per-frame callback
source, and scenario/scene file I/O.
"""
from typing import Any, Callable, Protocol, runtime_checkable

from orbit_visualizer.domain.orbit_geometry import Vector3
from orbit_visualizer.domain.satellite import SatelliteParams


@runtime_checkable
class RenderingCollaborator(Protocol):
    """Port for the scene that displays satellites and their orbits."""

    def create_marker(self, satellite_id: str, color: str, position: Vector3) -> Any:
        """Add a point marker and return its handle."""
        ...

    def create_path(self, satellite_id: str, color: str, points: list[Vector3]) -> Any:
        """Add a closed orbit polyline through ``points`` and return its handle."""
        ...

    def set_position(self, marker: Any, position: Vector3) -> None:
        """Move a marker."""
        ...

    def set_color(self, handle: Any, color: str) -> None:
        """Recolor a marker or path."""
        ...

    def release(self, handle: Any) -> None:
        """Remove a marker or path from the scene."""
        ...

    def orient_central_body(self, tilt_rad: float, spin_rad: float) -> None:
        """Set the central body's axial tilt and spin angle."""
        ...


@runtime_checkable
class FrameSource(Protocol):
    """Port for the host's per-frame callback registration."""

    def request_frame(self, callback: Callable[[], None]) -> None:
        """Invoke ``callback`` once, on the next display frame."""
        ...


@runtime_checkable
class ScenarioReader(Protocol):
    """Port for reading an initial set of satellites."""

    def read_scenario(self, path: str) -> list[SatelliteParams]:
        """Read and parse a scenario file."""
        ...


@runtime_checkable
class SceneWriter(Protocol):
    """Port for writing a scene snapshot."""

    def write_scene(self, scene: dict[str, Any], path: str) -> None:
        """Write a scene document to file."""
        ...
