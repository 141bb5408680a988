# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Satellite records.

SatelliteParams is the immutable creation payload (what the "add" panel
holds); SatelliteEntity is the live, mutable record owned by the registry.
"""
from dataclasses import dataclass, field, fields, replace
from typing import Any, Mapping

from .orbital_elements import ELEMENT_FIELDS, OrbitalElementSet
from .orbit_geometry import Vector3, propagate_position

DISPLAY_FIELDS: tuple[str, ...] = ("name", "color", "speed")

# Control-panel field names accepted alongside the snake_case names.
FIELD_ALIASES: dict[str, str] = {
    "semiMajorAxis": "semi_major_axis",
    "inclination": "inclination_deg",
    "raan": "raan_deg",
    "argPeriapsis": "arg_periapsis_deg",
    "trueAnomaly": "true_anomaly_deg",
}


def canonical_field(name: str) -> str:
    """
    Map a panel or snake_case field name to its canonical name.

    Raises:
        ValueError: name is neither an element nor a display field.
    """
    canonical = FIELD_ALIASES.get(name, name)
    if canonical not in ELEMENT_FIELDS and canonical not in DISPLAY_FIELDS:
        raise ValueError(f"Unknown satellite field: {name!r}")
    return canonical


@dataclass(frozen=True)
class SatelliteParams:
    """Everything needed to create a satellite."""
    elements: OrbitalElementSet
    name: str = "Satellite 1"
    color: str = "#ff0000"
    speed: float = 0.01

    @classmethod
    def from_fields(
        cls,
        values: Mapping[str, Any],
        base: "SatelliteParams | None" = None,
    ) -> "SatelliteParams":
        """
        Build params from a flat field mapping.

        Missing fields fall back to ``base`` (default: DEFAULT_SATELLITE_PARAMS).

        Raises:
            ValueError: unknown field name.
        """
        if base is None:
            base = DEFAULT_SATELLITE_PARAMS
        element_changes: dict[str, float] = {}
        display_changes: dict[str, Any] = {}
        for key, value in values.items():
            name = canonical_field(key)
            if name in ELEMENT_FIELDS:
                element_changes[name] = float(value)
            elif name == "speed":
                display_changes[name] = float(value)
            else:
                display_changes[name] = str(value)
        return replace(
            base,
            elements=replace(base.elements, **element_changes),
            **display_changes,
        )

    def to_fields(self) -> dict[str, Any]:
        """Flat field mapping (snake_case), inverse of from_fields."""
        values: dict[str, Any] = {"name": self.name}
        for f in fields(self.elements):
            values[f.name] = getattr(self.elements, f.name)
        values["speed"] = self.speed
        values["color"] = self.color
        return values


DEFAULT_SATELLITE_PARAMS = SatelliteParams(
    elements=OrbitalElementSet(semi_major_axis=10.0),
)


@dataclass
class SatelliteEntity:
    """
    A live satellite.

    ``marker_handle`` and ``path_handle`` are opaque handles issued by the
    rendering collaborator; the entity only keeps them so they can be
    updated and released.
    """
    satellite_id: str
    name: str
    color: str
    speed: float
    elements: OrbitalElementSet
    path: list[Vector3] = field(default_factory=list)
    position: Vector3 = (0.0, 0.0, 0.0)
    marker_handle: Any = None
    path_handle: Any = None

    def advance(self) -> Vector3:
        """Step the true anomaly by ``speed`` degrees and recompute position."""
        self.elements = replace(
            self.elements,
            true_anomaly_deg=self.elements.true_anomaly_deg + self.speed,
        )
        self.position = propagate_position(self.elements)
        return self.position

    def to_params(self) -> SatelliteParams:
        return SatelliteParams(
            elements=self.elements,
            name=self.name,
            color=self.color,
            speed=self.speed,
        )
