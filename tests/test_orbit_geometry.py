# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for orbit path solving and single-point propagation."""
import math
import warnings

import numpy as np
import pytest

from orbit_visualizer.domain.orbital_elements import OrbitalElementSet
from orbit_visualizer.domain.orbit_geometry import (
    ORBIT_PATH_POINT_COUNT,
    ORBIT_SAMPLE_STEP_RAD,
    conic_radius,
    orient_in_space,
    propagate_position,
    sample_anomalies,
    solve_orbit_path,
)


_ELEMENT_CASES = [
    # (a, e, i, raan, argp, label)
    (10.0, 0.0, 0.0, 0.0, 0.0, "equatorial circle"),
    (10.0, 0.5, 0.0, 0.0, 0.0, "equatorial ellipse"),
    (25.0, 0.2, 45.0, 30.0, 60.0, "tilted ellipse"),
    (1.0, 0.9, 180.0, 360.0, 270.0, "eccentric retrograde"),
    (50.0, 0.01, 97.4, 200.0, 15.0, "near-circular polar"),
]


def _elements(a, e, i=0.0, raan=0.0, argp=0.0, nu=0.0):
    return OrbitalElementSet(
        semi_major_axis=a, eccentricity=e, inclination_deg=i,
        raan_deg=raan, arg_periapsis_deg=argp, true_anomaly_deg=nu,
    )


def _norm(v):
    return math.sqrt(sum(c * c for c in v))


class TestConicRadius:
    """Radius from the polar conic equation."""

    @pytest.mark.parametrize("a,e", [(10.0, 0.0), (10.0, 0.5), (3.0, 0.99), (42.0, 0.25)])
    def test_periapsis(self, a, e):
        assert conic_radius(a, e, 0.0) == pytest.approx(a * (1 - e))

    @pytest.mark.parametrize("a,e", [(10.0, 0.0), (10.0, 0.5), (3.0, 0.99), (42.0, 0.25)])
    def test_apoapsis(self, a, e):
        assert conic_radius(a, e, math.pi) == pytest.approx(a * (1 + e))

    def test_array_input(self):
        r = conic_radius(10.0, 0.5, np.array([0.0, math.pi]))
        assert r.shape == (2,)
        assert r[0] == pytest.approx(5.0)
        assert r[1] == pytest.approx(15.0)

    def test_vanishing_denominator_does_not_raise(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            r = conic_radius(10.0, 1.0, math.pi)
        assert math.isnan(r)


class TestSampling:
    """Fixed path sampling, independent of the elements."""

    def test_point_count_constant(self):
        assert ORBIT_PATH_POINT_COUNT == math.ceil(2 * math.pi / ORBIT_SAMPLE_STEP_RAD)
        assert ORBIT_PATH_POINT_COUNT == 126

    @pytest.mark.parametrize("a,e,i,raan,argp,label", _ELEMENT_CASES)
    def test_solve_returns_fixed_count(self, a, e, i, raan, argp, label):
        path = solve_orbit_path(_elements(a, e, i, raan, argp))
        assert len(path) == ORBIT_PATH_POINT_COUNT, label

    def test_samples_start_at_zero_and_stay_below_two_pi(self):
        thetas = sample_anomalies()
        assert thetas[0] == 0.0
        assert thetas[-1] <= 2 * math.pi
        assert thetas[-1] + ORBIT_SAMPLE_STEP_RAD > 2 * math.pi

    def test_samples_are_running_sum(self):
        thetas = sample_anomalies()
        theta = 0.0
        for sample in thetas:
            assert sample == theta
            theta += ORBIT_SAMPLE_STEP_RAD

    def test_path_is_open(self):
        path = solve_orbit_path(_elements(10.0, 0.3))
        assert path[0] != path[-1]

    def test_true_anomaly_ignored(self):
        assert solve_orbit_path(_elements(10.0, 0.3, 20, 30, 40, nu=0.0)) == \
            solve_orbit_path(_elements(10.0, 0.3, 20, 30, 40, nu=123.0))

    def test_first_point_is_periapsis(self):
        path = solve_orbit_path(_elements(10.0, 0.5))
        assert path[0] == pytest.approx((5.0, 0.0, 0.0))

    @pytest.mark.parametrize("a,e,i,raan,argp,label", _ELEMENT_CASES)
    def test_point_radii_follow_conic(self, a, e, i, raan, argp, label):
        path = solve_orbit_path(_elements(a, e, i, raan, argp))
        for theta, point in zip(sample_anomalies(), path):
            assert _norm(point) == pytest.approx(float(conic_radius(a, e, theta)), rel=1e-12), label

    def test_points_are_python_floats(self):
        x, y, z = solve_orbit_path(_elements(10.0, 0.1))[3]
        assert all(type(c) is float for c in (x, y, z))


class TestPropagation:
    """Single-point propagation at the true anomaly."""

    def test_circular_at_zero(self):
        assert propagate_position(_elements(10.0, 0.0)) == (10.0, 0.0, 0.0)

    def test_apoapsis_of_ellipse(self):
        x, y, z = propagate_position(_elements(10.0, 0.5, nu=180.0))
        assert x == pytest.approx(-15.0)
        assert y == pytest.approx(0.0, abs=1e-12)
        assert z == pytest.approx(0.0, abs=1e-12)

    @pytest.mark.parametrize("nu", [0.0, 17.5, 90.0, 180.0, 271.3, -45.0])
    @pytest.mark.parametrize("a,e,i,raan,argp,label", _ELEMENT_CASES)
    def test_periodic_in_true_anomaly(self, a, e, i, raan, argp, label, nu):
        p1 = propagate_position(_elements(a, e, i, raan, argp, nu))
        p2 = propagate_position(_elements(a, e, i, raan, argp, nu + 360.0))
        assert p2 == pytest.approx(p1, rel=1e-9, abs=1e-9), label

    def test_large_unwrapped_anomaly(self):
        p_small = propagate_position(_elements(10.0, 0.2, 30, 40, 50, nu=45.0))
        p_large = propagate_position(_elements(10.0, 0.2, 30, 40, 50, nu=45.0 + 360.0 * 1000))
        assert p_large == pytest.approx(p_small, abs=1e-9)

    @pytest.mark.parametrize("a,e,i,raan,argp,label", _ELEMENT_CASES)
    def test_deterministic(self, a, e, i, raan, argp, label):
        elements = _elements(a, e, i, raan, argp, nu=77.7)
        assert propagate_position(elements) == propagate_position(elements)
        assert solve_orbit_path(elements) == solve_orbit_path(elements)

    @pytest.mark.parametrize("a,e,i,raan,argp,label", _ELEMENT_CASES)
    def test_matches_path_samples(self, a, e, i, raan, argp, label):
        path = solve_orbit_path(_elements(a, e, i, raan, argp))
        thetas = sample_anomalies()
        for k in (0, 10, 63, 125):
            nu_deg = math.degrees(thetas[k])
            pos = propagate_position(_elements(a, e, i, raan, argp, nu_deg))
            assert pos == pytest.approx(path[k], rel=1e-9, abs=1e-9), label

    def test_degenerate_eccentricity_yields_nan_silently(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            pos = propagate_position(_elements(10.0, 1.0, nu=180.0))
        assert all(math.isnan(c) for c in pos)

    def test_hyperbolic_elements_not_rejected(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            path = solve_orbit_path(_elements(10.0, 2.0))
        assert len(path) == ORBIT_PATH_POINT_COUNT


class TestRotationSequence:
    """X (inclination), then Y (RAAN), then Z (arg. of periapsis), each on the previous result."""

    def test_inclination_rotates_about_x(self):
        pos = propagate_position(_elements(10.0, 0.0, i=90.0, nu=90.0))
        assert pos == pytest.approx((0.0, 0.0, 10.0), abs=1e-12)

    def test_raan_rotates_about_y(self):
        pos = propagate_position(_elements(10.0, 0.0, raan=90.0))
        assert pos == pytest.approx((0.0, 0.0, -10.0), abs=1e-12)

    def test_arg_periapsis_rotates_about_z(self):
        pos = propagate_position(_elements(10.0, 0.0, argp=90.0))
        assert pos == pytest.approx((0.0, 10.0, 0.0), abs=1e-12)

    def test_sequential_composition(self):
        # (0, 10, 0) -X90-> (0, 0, 10) -Y90-> (10, 0, 0) -Z90-> (0, 10, 0)
        pos = propagate_position(_elements(10.0, 0.0, i=90.0, raan=90.0, argp=90.0, nu=90.0))
        assert pos == pytest.approx((0.0, 10.0, 0.0), abs=1e-12)

    def test_order_is_not_z_first(self):
        # Z-first would give (0, -10, 0) for the same inputs.
        pos = propagate_position(_elements(10.0, 0.0, i=90.0, raan=90.0, argp=90.0, nu=90.0))
        assert pos != pytest.approx((0.0, -10.0, 0.0), abs=1e-6)

    def test_orient_preserves_norm(self):
        points = np.array([[3.0, 4.0, 0.0], [1.0, -2.0, 0.5]])
        rotated = orient_in_space(points, 0.3, 1.1, -2.4)
        for before, after in zip(points, rotated):
            assert np.linalg.norm(after) == pytest.approx(np.linalg.norm(before))

    def test_zero_angles_are_identity(self):
        points = np.array([[3.0, 4.0, 0.0]])
        rotated = orient_in_space(points, 0.0, 0.0, 0.0)
        assert rotated.tolist() == [[3.0, 4.0, 0.0]]
