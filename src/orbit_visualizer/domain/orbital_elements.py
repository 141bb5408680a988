# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Classical orbital element sets.

Angles are stored in degrees, exactly as entered on the control panel.
The true anomaly is never range-reduced; it grows without bound while a
satellite is animated.
"""
import math
from dataclasses import dataclass, fields

import numpy as np

# Edits to any of these fields change the ellipse itself and require the
# path to be regenerated. True anomaly only moves the marker.
ORBIT_SHAPE_FIELDS: frozenset[str] = frozenset({
    "semi_major_axis",
    "eccentricity",
    "inclination_deg",
    "raan_deg",
    "arg_periapsis_deg",
})


class InvalidElementError(ValueError):
    """Orbital elements that do not describe a bounded ellipse."""


@dataclass(frozen=True)
class OrbitalElementSet:
    """Immutable Keplerian element set (angles in degrees)."""
    semi_major_axis: float
    eccentricity: float = 0.0
    inclination_deg: float = 0.0
    raan_deg: float = 0.0
    arg_periapsis_deg: float = 0.0
    true_anomaly_deg: float = 0.0


ELEMENT_FIELDS: tuple[str, ...] = tuple(f.name for f in fields(OrbitalElementSet))

ORBIT_SAMPLE_STEP_RAD: float = 0.05


def sample_anomalies(step_rad: float = ORBIT_SAMPLE_STEP_RAD) -> np.ndarray:
    """
    Anomalies (radians) at which an orbit path is sampled.

    Accumulates θ += step from 0 while θ ≤ 2π. Samples are the running
    sum, not k·step; the two differ in the last bits.
    """
    if step_rad <= 0:
        raise ValueError(f"step_rad must be > 0, got {step_rad}")
    thetas = []
    theta = 0.0
    while theta <= 2 * math.pi:
        thetas.append(theta)
        theta += step_rad
    return np.array(thetas, dtype=float)


def validate_elements(
    elements: OrbitalElementSet,
    sample_step_rad: float = ORBIT_SAMPLE_STEP_RAD,
) -> None:
    """
    Reject element sets that produce unbounded or undefined geometry.

    Args:
        elements: Element set to check.
        sample_step_rad: Anomaly step used for path sampling; every sampled
            anomaly is checked for a vanishing conic denominator.

    Raises:
        InvalidElementError: a ≤ 0, e outside [0, 1), non-finite values,
            or 1 + e·cos(θ) within machine epsilon of zero.
    """
    for name in ELEMENT_FIELDS:
        value = getattr(elements, name)
        if not math.isfinite(value):
            raise InvalidElementError(f"{name} must be finite, got {value}")

    a = elements.semi_major_axis
    e = elements.eccentricity
    if a <= 0:
        raise InvalidElementError(f"semi_major_axis must be > 0, got {a}")
    if e < 0 or e >= 1:
        raise InvalidElementError(f"eccentricity must be in [0, 1), got {e}")

    thetas = sample_anomalies(sample_step_rad)
    denominators = 1.0 + e * np.cos(thetas)
    if np.min(np.abs(denominators)) <= np.finfo(float).eps:
        raise InvalidElementError(
            f"conic denominator vanishes for eccentricity {e}"
        )
