# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Satellite registry.

Insertion-ordered collection of live satellites with create / update /
recolor / delete. Every operation runs to completion before returning and
before any listener is notified, so the registry is never observed
half-updated. Order only affects presentation; satellites are propagated
independently.
"""
import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Callable, Iterator

from orbit_visualizer.ports import RenderingCollaborator

from .orbital_elements import (
    ELEMENT_FIELDS,
    ORBIT_SHAPE_FIELDS,
    InvalidElementError,
    OrbitalElementSet,
    validate_elements,
)
from .orbit_geometry import propagate_position, solve_orbit_path
from .satellite import SatelliteEntity, SatelliteParams, canonical_field

logger = logging.getLogger(__name__)


class NotFoundError(KeyError):
    """Satellite identity not present in the registry."""


class RegistryEventKind(Enum):
    CREATED = "created"
    UPDATED = "updated"
    RECOLORED = "recolored"
    DELETED = "deleted"


@dataclass(frozen=True)
class RegistryEvent:
    """Lifecycle notification emitted after a registry operation completes."""
    kind: RegistryEventKind
    satellite_id: str
    changed_fields: tuple[str, ...] = ()


RegistryListener = Callable[[RegistryEvent], None]


class SatelliteRegistry:
    """Owns all live satellites and keeps their paths consistent with their elements."""

    def __init__(
        self,
        renderer: RenderingCollaborator | None = None,
        strict: bool = False,
    ) -> None:
        self.renderer = renderer
        self.strict = strict
        self._satellites: dict[str, SatelliteEntity] = {}
        self._listeners: list[RegistryListener] = []
        self._counter = 0

    def _next_id(self) -> str:
        self._counter += 1
        return f"sat-{self._counter}"

    @staticmethod
    def _key(ref: SatelliteEntity | str) -> str:
        if isinstance(ref, SatelliteEntity):
            return ref.satellite_id
        return ref

    def __len__(self) -> int:
        return len(self._satellites)

    def __iter__(self) -> Iterator[SatelliteEntity]:
        # Snapshot so listeners and callers may mutate during iteration.
        return iter(list(self._satellites.values()))

    def __contains__(self, ref: object) -> bool:
        if not isinstance(ref, (SatelliteEntity, str)):
            return False
        return self._key(ref) in self._satellites

    def ids(self) -> list[str]:
        """Satellite identities in insertion order."""
        return list(self._satellites)

    def get(self, ref: SatelliteEntity | str) -> SatelliteEntity:
        """Look up a live satellite. Raises NotFoundError if not found."""
        key = self._key(ref)
        try:
            return self._satellites[key]
        except KeyError:
            raise NotFoundError(f"Satellite not found: {key}") from None

    # --- observers ---

    def subscribe(self, listener: RegistryListener) -> Callable[[], None]:
        """Register a lifecycle listener. Returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _emit(self, kind: RegistryEventKind, satellite_id: str, changed: tuple[str, ...] = ()) -> None:
        event = RegistryEvent(kind=kind, satellite_id=satellite_id, changed_fields=changed)
        for listener in list(self._listeners):
            listener(event)

    def _check(self, elements: OrbitalElementSet, label: str) -> None:
        if not self.strict:
            return
        try:
            validate_elements(elements)
        except InvalidElementError as e:
            logger.warning("Rejected elements for %s: %s", label, e)
            raise

    # --- lifecycle ---

    def create(self, params: SatelliteParams) -> SatelliteEntity:
        """
        Add a satellite at the end of the registry.

        Assigns a fresh identity, solves its orbit path, computes its
        initial position and asks the renderer (if any) for a marker and a
        path.

        Raises:
            InvalidElementError: strict mode and the elements are degenerate.
        """
        self._check(params.elements, params.name)
        satellite_id = self._next_id()

        entity = SatelliteEntity(
            satellite_id=satellite_id,
            name=params.name,
            color=params.color,
            speed=params.speed,
            elements=params.elements,
            path=solve_orbit_path(params.elements),
            position=propagate_position(params.elements),
        )
        if self.renderer is not None:
            entity.marker_handle = self.renderer.create_marker(
                satellite_id, entity.color, entity.position,
            )
            try:
                entity.path_handle = self.renderer.create_path(
                    satellite_id, entity.color, entity.path,
                )
            except Exception:
                self.renderer.release(entity.marker_handle)
                raise

        self._satellites[satellite_id] = entity
        logger.debug("Created %s (%s)", satellite_id, entity.name)
        self._emit(RegistryEventKind.CREATED, satellite_id)
        return entity

    def update(self, ref: SatelliteEntity | str, **changes: Any) -> SatelliteEntity:
        """
        Merge field changes into a satellite.

        Element fields, ``name`` and ``speed`` are accepted; panel aliases
        such as ``semiMajorAxis`` are mapped to their canonical names.
        Shape changes regenerate the path from scratch; a true anomaly
        change only moves the marker.

        Raises:
            NotFoundError: satellite is not in the registry.
            ValueError: unknown field, or ``color`` (use recolor).
            InvalidElementError: strict mode and the merged elements are degenerate.
        """
        entity = self.get(ref)

        canonical = {canonical_field(k): v for k, v in changes.items()}
        if "color" in canonical:
            raise ValueError("Use recolor() to change a satellite's color")

        element_changes = {
            k: float(v) for k, v in canonical.items() if k in ELEMENT_FIELDS
        }
        new_elements = replace(entity.elements, **element_changes)
        new_name = str(canonical["name"]) if "name" in canonical else entity.name
        new_speed = float(canonical["speed"]) if "speed" in canonical else entity.speed
        self._check(new_elements, entity.satellite_id)

        # Commit only after every value has converted.
        entity.elements = new_elements
        entity.name = new_name
        entity.speed = new_speed

        shape_changed = bool(ORBIT_SHAPE_FIELDS.intersection(element_changes))
        if shape_changed:
            self._regenerate_path(entity)
        if element_changes:
            entity.position = propagate_position(entity.elements)
            if self.renderer is not None and entity.marker_handle is not None:
                self.renderer.set_position(entity.marker_handle, entity.position)

        changed = tuple(sorted(canonical))
        logger.debug("Updated %s: %s", entity.satellite_id, ", ".join(changed))
        self._emit(RegistryEventKind.UPDATED, entity.satellite_id, changed)
        return entity

    def _regenerate_path(self, entity: SatelliteEntity) -> None:
        entity.path = solve_orbit_path(entity.elements)
        if self.renderer is None:
            return
        if entity.path_handle is not None:
            self.renderer.release(entity.path_handle)
        entity.path_handle = self.renderer.create_path(
            entity.satellite_id, entity.color, entity.path,
        )

    def recolor(self, ref: SatelliteEntity | str, color: str) -> SatelliteEntity:
        """
        Change a satellite's display color on both marker and path.

        Geometry is left untouched. Raises NotFoundError if not found.
        """
        entity = self.get(ref)
        entity.color = color
        if self.renderer is not None:
            for handle in (entity.marker_handle, entity.path_handle):
                if handle is not None:
                    self.renderer.set_color(handle, color)
        self._emit(RegistryEventKind.RECOLORED, entity.satellite_id, ("color",))
        return entity

    def delete(self, ref: SatelliteEntity | str) -> None:
        """
        Remove a satellite and release its visual handles.

        Raises:
            NotFoundError: satellite is not (or no longer) in the registry.
        """
        key = self._key(ref)
        if key not in self._satellites:
            raise NotFoundError(f"Satellite not found: {key}")
        entity = self._satellites.pop(key)

        if self.renderer is not None:
            for handle in (entity.marker_handle, entity.path_handle):
                if handle is not None:
                    self.renderer.release(handle)
        entity.marker_handle = None
        entity.path_handle = None

        logger.debug("Deleted %s (%s)", key, entity.name)
        self._emit(RegistryEventKind.DELETED, key)
