# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Control-panel binding for the satellite registry.

Holds the values of the "add satellite" panel, clamps slider edits into
the panel ranges, and keeps one panel per live satellite in sync by
subscribing to registry lifecycle events. Panels are never built from
inside a registry operation; they follow the CREATED / UPDATED /
RECOLORED / DELETED events.
"""
import logging
from dataclasses import dataclass, field
from typing import Any

from orbit_visualizer.domain.registry import (
    RegistryEvent,
    RegistryEventKind,
    SatelliteRegistry,
)
from orbit_visualizer.domain.satellite import (
    DEFAULT_SATELLITE_PARAMS,
    SatelliteEntity,
    SatelliteParams,
    canonical_field,
)

logger = logging.getLogger(__name__)

# Slider bounds of the control panel (inclusive).
FIELD_RANGES: dict[str, tuple[float, float]] = {
    "semi_major_axis": (1.0, 50.0),
    "eccentricity": (0.0, 1.0),
    "inclination_deg": (0.0, 180.0),
    "raan_deg": (0.0, 360.0),
    "arg_periapsis_deg": (0.0, 360.0),
    "true_anomaly_deg": (0.0, 360.0),
    "speed": (0.001, 0.1),
}


def clamp_field(name: str, value: Any) -> Any:
    """Clamp a numeric panel value into its slider range; other fields pass through."""
    bounds = FIELD_RANGES.get(name)
    if bounds is None:
        return value
    lo, hi = bounds
    return min(max(float(value), lo), hi)


@dataclass
class SatellitePanel:
    """Per-satellite panel: a title and the field values it displays."""
    satellite_id: str
    title: str
    values: dict[str, Any] = field(default_factory=dict)


class ParameterBinding:
    """Routes panel edits into the registry and mirrors registry state back into panels."""

    def __init__(
        self,
        registry: SatelliteRegistry,
        defaults: SatelliteParams = DEFAULT_SATELLITE_PARAMS,
    ) -> None:
        self.registry = registry
        self.controls: dict[str, Any] = defaults.to_fields()
        self.panels: dict[str, SatellitePanel] = {}
        self._unsubscribe = registry.subscribe(self._on_registry_event)
        for entity in registry:
            self._refresh_panel(entity)

    def close(self) -> None:
        """Stop following registry events."""
        self._unsubscribe()

    # --- "add satellite" panel ---

    def set_control(self, name: str, value: Any) -> Any:
        """Edit a field of the add panel. Returns the stored (clamped) value."""
        key = canonical_field(name)
        stored = clamp_field(key, value)
        self.controls[key] = stored
        return stored

    def current_params(self) -> SatelliteParams:
        return SatelliteParams.from_fields(self.controls)

    # --- edit entry points ---

    def on_add(self, params: SatelliteParams | None = None) -> SatelliteEntity:
        """Create a satellite from ``params`` or, by default, the add panel values."""
        if params is None:
            params = self.current_params()
        return self.registry.create(params)

    def on_element_changed(
        self,
        satellite: SatelliteEntity | str,
        name: str,
        value: Any,
    ) -> SatelliteEntity:
        """
        Apply a single-field edit from a satellite's panel.

        Element, ``speed`` and ``name`` edits go through update(); ``color``
        is forwarded to on_color_changed.

        Raises:
            ValueError: unknown field.
            NotFoundError: satellite no longer exists.
        """
        key = canonical_field(name)
        if key == "color":
            return self.on_color_changed(satellite, value)
        return self.registry.update(satellite, **{key: clamp_field(key, value)})

    def on_color_changed(self, satellite: SatelliteEntity | str, value: str) -> SatelliteEntity:
        return self.registry.recolor(satellite, value)

    def on_delete(self, satellite: SatelliteEntity | str) -> None:
        self.registry.delete(satellite)

    # --- registry events ---

    def _refresh_panel(self, entity: SatelliteEntity) -> None:
        values = entity.to_params().to_fields()
        panel = self.panels.get(entity.satellite_id)
        if panel is None:
            self.panels[entity.satellite_id] = SatellitePanel(
                satellite_id=entity.satellite_id,
                title=entity.name,
                values=values,
            )
            return
        panel.title = entity.name
        panel.values = values

    def _on_registry_event(self, event: RegistryEvent) -> None:
        if event.kind is RegistryEventKind.DELETED:
            if self.panels.pop(event.satellite_id, None) is not None:
                logger.debug("Destroyed panel for %s", event.satellite_id)
            return
        self._refresh_panel(self.registry.get(event.satellite_id))
