# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Orbit geometry: sampled orbit paths and single-point propagation.

Both the path solver and the position propagator evaluate the polar conic
equation in the orbital plane and then orient the result with the same
three sequential single-axis rotations:

    1. about X by the inclination
    2. about Y by the RAAN        (applied to the already-rotated vector)
    3. about Z by the arg. of periapsis  (applied to that result)

This is not the aerospace 3-1-3 Euler sequence. Existing outputs depend on
this exact order.

Degenerate elements (e ≥ 1, a ≤ 0) are not rejected here; they produce
inf/NaN coordinates which flow through to the caller unchanged.
"""
import math

import numpy as np

from .orbital_elements import ORBIT_SAMPLE_STEP_RAD, OrbitalElementSet, sample_anomalies

Vector3 = tuple[float, float, float]

_SAMPLE_ANOMALIES = sample_anomalies()
_SAMPLE_ANOMALIES.setflags(write=False)

ORBIT_PATH_POINT_COUNT: int = len(_SAMPLE_ANOMALIES)


def conic_radius(semi_major_axis: float, eccentricity: float, theta_rad):
    """
    Orbital radius from the polar conic equation.

    r = a·(1 − e²) / (1 + e·cos θ)

    Accepts a scalar or an array of anomalies. A vanishing denominator
    yields ±inf/NaN instead of raising.
    """
    theta = np.asarray(theta_rad, dtype=float)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return (
            semi_major_axis * (1 - eccentricity * eccentricity)
            / (1 + eccentricity * np.cos(theta))
        )


def _rotate_x(points: np.ndarray, angle_rad: float) -> np.ndarray:
    c, s = math.cos(angle_rad), math.sin(angle_rad)
    x, y, z = points[:, 0], points[:, 1], points[:, 2]
    return np.column_stack((x, c * y - s * z, s * y + c * z))


def _rotate_y(points: np.ndarray, angle_rad: float) -> np.ndarray:
    c, s = math.cos(angle_rad), math.sin(angle_rad)
    x, y, z = points[:, 0], points[:, 1], points[:, 2]
    return np.column_stack((c * x + s * z, y, -s * x + c * z))


def _rotate_z(points: np.ndarray, angle_rad: float) -> np.ndarray:
    c, s = math.cos(angle_rad), math.sin(angle_rad)
    x, y, z = points[:, 0], points[:, 1], points[:, 2]
    return np.column_stack((c * x - s * y, s * x + c * y, z))


def orient_in_space(
    points: np.ndarray,
    inclination_rad: float,
    raan_rad: float,
    arg_periapsis_rad: float,
) -> np.ndarray:
    """
    Rotate orbital-plane points into the scene frame.

    Args:
        points: (N, 3) array of orbital-plane positions.
        inclination_rad: Rotation about X, applied first.
        raan_rad: Rotation about Y, applied to the X-rotated points.
        arg_periapsis_rad: Rotation about Z, applied last.

    Returns:
        (N, 3) array of rotated positions.
    """
    with np.errstate(invalid="ignore", over="ignore"):
        rotated = _rotate_x(points, inclination_rad)
        rotated = _rotate_y(rotated, raan_rad)
        return _rotate_z(rotated, arg_periapsis_rad)


def _orbit_points(elements: OrbitalElementSet, thetas: np.ndarray) -> np.ndarray:
    r = conic_radius(elements.semi_major_axis, elements.eccentricity, thetas)
    with np.errstate(invalid="ignore", over="ignore"):
        in_plane = np.column_stack((
            r * np.cos(thetas),
            r * np.sin(thetas),
            np.zeros_like(thetas),
        ))
    return orient_in_space(
        in_plane,
        math.radians(elements.inclination_deg),
        math.radians(elements.raan_deg),
        math.radians(elements.arg_periapsis_deg),
    )


def solve_orbit_path(elements: OrbitalElementSet) -> list[Vector3]:
    """
    Sample the full ellipse described by an element set.

    The path is open: the first point is at θ = 0 and the last at the final
    sample before 2π. Closing the loop is left to whoever draws it.
    The element set's true anomaly is ignored.

    Args:
        elements: Orbital elements (angles in degrees).

    Returns:
        ORBIT_PATH_POINT_COUNT (x, y, z) tuples in scene units.
    """
    points = _orbit_points(elements, _SAMPLE_ANOMALIES)
    return [(x, y, z) for x, y, z in points.tolist()]


def propagate_position(elements: OrbitalElementSet) -> Vector3:
    """
    Position of a satellite at the element set's true anomaly.

    Uses the same radius formula and rotation sequence as
    solve_orbit_path. The anomaly is not wrapped; sin/cos periodicity makes
    any magnitude valid.
    """
    theta = np.array([math.radians(elements.true_anomaly_deg)])
    x, y, z = _orbit_points(elements, theta)[0].tolist()
    return (x, y, z)
