# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Orbit Visualizer

Compute, maintain and animate elliptical satellite orbits defined by
classical orbital elements. Includes the orbit path solver, single-point
propagation, an observable satellite registry, a cancellable per-frame
animation scheduler, control-panel bindings, and headless scene export.
"""

from orbit_visualizer.domain.orbital_elements import (
    OrbitalElementSet,
    InvalidElementError,
    ORBIT_SHAPE_FIELDS,
    validate_elements,
)
from orbit_visualizer.domain.orbit_geometry import (
    Vector3,
    ORBIT_SAMPLE_STEP_RAD,
    ORBIT_PATH_POINT_COUNT,
    conic_radius,
    orient_in_space,
    sample_anomalies,
    solve_orbit_path,
    propagate_position,
)
from orbit_visualizer.domain.satellite import (
    SatelliteParams,
    SatelliteEntity,
    DEFAULT_SATELLITE_PARAMS,
    canonical_field,
)
from orbit_visualizer.domain.registry import (
    SatelliteRegistry,
    NotFoundError,
    RegistryEvent,
    RegistryEventKind,
)
from orbit_visualizer.domain.scheduler import (
    AnimationConfig,
    AnimationScheduler,
    CancellationToken,
    SchedulerState,
)
from orbit_visualizer.domain.serialization import (
    satellite_record,
    build_scene_document,
)

__version__ = "1.0.0"

__all__ = [
    "OrbitalElementSet",
    "InvalidElementError",
    "ORBIT_SHAPE_FIELDS",
    "validate_elements",
    "Vector3",
    "ORBIT_SAMPLE_STEP_RAD",
    "ORBIT_PATH_POINT_COUNT",
    "conic_radius",
    "orient_in_space",
    "sample_anomalies",
    "solve_orbit_path",
    "propagate_position",
    "SatelliteParams",
    "SatelliteEntity",
    "DEFAULT_SATELLITE_PARAMS",
    "canonical_field",
    "SatelliteRegistry",
    "NotFoundError",
    "RegistryEvent",
    "RegistryEventKind",
    "AnimationConfig",
    "AnimationScheduler",
    "CancellationToken",
    "SchedulerState",
    "satellite_record",
    "build_scene_document",
]
