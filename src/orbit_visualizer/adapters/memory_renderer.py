# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Headless rendering adapter.

Keeps the scene as plain records instead of drawing it: one marker and one
closed path per satellite plus the central body orientation. Used for
batch runs from the command line and for inspecting what a real display
would show.
"""
import logging
from dataclasses import dataclass, field
from typing import Any

from orbit_visualizer.ports import RenderingCollaborator
from orbit_visualizer.domain.orbit_geometry import Vector3

logger = logging.getLogger(__name__)


@dataclass
class MarkerNode:
    """A satellite's point marker."""
    handle: str
    satellite_id: str
    color: str
    position: Vector3


@dataclass
class PathNode:
    """A satellite's orbit polyline. Always drawn as a closed loop."""
    handle: str
    satellite_id: str
    color: str
    points: list[Vector3] = field(default_factory=list)
    closed: bool = True


class InMemoryRenderer(RenderingCollaborator):
    """Scene graph held in memory."""

    def __init__(self) -> None:
        self.nodes: dict[str, MarkerNode | PathNode] = {}
        self.central_body_tilt_rad = 0.0
        self.central_body_spin_rad = 0.0
        self._counter = 0

    def _next_handle(self, kind: str) -> str:
        self._counter += 1
        return f"{kind}-{self._counter}"

    def _node(self, handle: Any) -> MarkerNode | PathNode:
        if handle not in self.nodes:
            raise KeyError(f"Scene node not found: {handle}")
        return self.nodes[handle]

    def create_marker(self, satellite_id: str, color: str, position: Vector3) -> str:
        handle = self._next_handle("marker")
        self.nodes[handle] = MarkerNode(
            handle=handle, satellite_id=satellite_id,
            color=color, position=position,
        )
        return handle

    def create_path(self, satellite_id: str, color: str, points: list[Vector3]) -> str:
        handle = self._next_handle("path")
        self.nodes[handle] = PathNode(
            handle=handle, satellite_id=satellite_id,
            color=color, points=list(points),
        )
        return handle

    def set_position(self, marker: Any, position: Vector3) -> None:
        node = self._node(marker)
        if not isinstance(node, MarkerNode):
            raise TypeError(f"{marker} is not a marker")
        node.position = position

    def set_color(self, handle: Any, color: str) -> None:
        self._node(handle).color = color

    def release(self, handle: Any) -> None:
        """Remove a node. Raises KeyError if not found."""
        self._node(handle)
        del self.nodes[handle]
        logger.debug("Released %s", handle)

    def orient_central_body(self, tilt_rad: float, spin_rad: float) -> None:
        self.central_body_tilt_rad = tilt_rad
        self.central_body_spin_rad = spin_rad

    def markers(self) -> list[MarkerNode]:
        return [n for n in self.nodes.values() if isinstance(n, MarkerNode)]

    def paths(self) -> list[PathNode]:
        return [n for n in self.nodes.values() if isinstance(n, PathNode)]

    def marker_for(self, satellite_id: str) -> MarkerNode:
        """Marker of a satellite. Raises KeyError if it has none."""
        for node in self.markers():
            if node.satellite_id == satellite_id:
                return node
        raise KeyError(f"No marker for satellite: {satellite_id}")

    def path_for(self, satellite_id: str) -> PathNode:
        """Path of a satellite. Raises KeyError if it has none."""
        for node in self.paths():
            if node.satellite_id == satellite_id:
                return node
        raise KeyError(f"No path for satellite: {satellite_id}")
