# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Scene serialization.

Pure functions turning live satellites into plain dicts suitable for JSON.
Non-finite coordinates from degenerate orbits are passed through as-is.
"""
from typing import Any, Iterable

from .orbit_geometry import Vector3
from .satellite import SatelliteEntity


def format_vector(vec: Vector3, digits: int | None = None) -> list[float]:
    """
    Convert a position tuple to a JSON list, optionally rounded.

    Args:
        vec: (x, y, z) position.
        digits: Decimal places to round to, or None for full precision.
    """
    if digits is None:
        return [vec[0], vec[1], vec[2]]
    return [round(vec[0], digits), round(vec[1], digits), round(vec[2], digits)]


def satellite_record(
    entity: SatelliteEntity,
    include_path: bool = True,
    digits: int | None = None,
) -> dict[str, Any]:
    """
    Build a plain-dict record for one satellite.

    Element keys use the control-panel names (semiMajorAxis, trueAnomaly, ...).
    """
    e = entity.elements
    record: dict[str, Any] = {
        "id": entity.satellite_id,
        "name": entity.name,
        "color": entity.color,
        "speed": entity.speed,
        "semiMajorAxis": e.semi_major_axis,
        "eccentricity": e.eccentricity,
        "inclination": e.inclination_deg,
        "raan": e.raan_deg,
        "argPeriapsis": e.arg_periapsis_deg,
        "trueAnomaly": e.true_anomaly_deg,
        "position": format_vector(entity.position, digits),
    }
    if include_path:
        record["path"] = [format_vector(p, digits) for p in entity.path]
    return record


def build_scene_document(
    satellites: Iterable[SatelliteEntity],
    tick_count: int,
    spin_angle_rad: float,
    tilt_rad: float,
    include_paths: bool = True,
    digits: int | None = None,
) -> dict[str, Any]:
    """Build a scene snapshot: central body orientation plus every satellite."""
    return {
        "tick": tick_count,
        "centralBody": {
            "tiltRad": tilt_rad,
            "spinRad": spin_angle_rad,
        },
        "satellites": [
            satellite_record(s, include_path=include_paths, digits=digits)
            for s in satellites
        ],
    }
