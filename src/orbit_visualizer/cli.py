# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Command-line interface for headless orbit animation.

Usage:
    # One default satellite (a=10, e=0), 600 frames, summary on stdout
    orbit-visualizer

    # Satellites from a scenario file, scene snapshot written as JSON
    orbit-visualizer --scenario sats.json --frames 100 --output scene.json

    # Reject degenerate elements (a <= 0, e >= 1) instead of animating NaNs
    orbit-visualizer --scenario sats.json --strict
"""
import argparse
import json
import logging
import sys

from orbit_visualizer.domain.registry import SatelliteRegistry
from orbit_visualizer.domain.scheduler import AnimationConfig, AnimationScheduler
from orbit_visualizer.domain.serialization import build_scene_document
from orbit_visualizer.adapters.frame_clock import ManualFrameClock
from orbit_visualizer.adapters.json_io import JsonScenarioReader, JsonSceneWriter
from orbit_visualizer.adapters.memory_renderer import InMemoryRenderer
from orbit_visualizer.adapters.parameter_binding import ParameterBinding

logger = logging.getLogger(__name__)


def run(
    scenario_path: str | None = None,
    frames: int = 600,
    strict: bool = False,
    config: AnimationConfig = AnimationConfig(),
) -> tuple[SatelliteRegistry, AnimationScheduler, InMemoryRenderer]:
    """
    Build a scene, animate it for a number of frames, and stop.

    Without a scenario a single satellite is added from the control-panel
    defaults.

    Returns:
        (registry, scheduler, renderer) after the last frame.
    """
    renderer = InMemoryRenderer()
    registry = SatelliteRegistry(renderer=renderer, strict=strict)
    binding = ParameterBinding(registry)

    if scenario_path:
        for params in JsonScenarioReader().read_scenario(scenario_path):
            binding.on_add(params)
    else:
        binding.on_add()
    logger.info("Loaded %d satellite(s)", len(registry))

    clock = ManualFrameClock()
    scheduler = AnimationScheduler(registry, clock, config)
    scheduler.start()
    clock.advance(frames)
    scheduler.stop()
    binding.close()
    return registry, scheduler, renderer


def _print_summary(registry: SatelliteRegistry, scheduler: AnimationScheduler) -> None:
    print(f"After {scheduler.tick_count} ticks:")
    for sat in registry:
        x, y, z = sat.position
        print(
            f"  {sat.satellite_id} {sat.name}: "
            f"trueAnomaly={sat.elements.true_anomaly_deg:.4f}° "
            f"position=({x:.4f}, {y:.4f}, {z:.4f})"
        )


def main():
    parser = argparse.ArgumentParser(
        description="Animate Keplerian satellite orbits headlessly and export the scene"
    )
    parser.add_argument(
        '--scenario', '-s',
        help="JSON file with a list of satellites (control-panel field names)"
    )
    parser.add_argument(
        '--frames', '-n', type=int, default=600,
        help="Number of animation frames to run (default: 600)"
    )
    parser.add_argument(
        '--output', '-o',
        help="Write the final scene snapshot to this JSON file"
    )
    parser.add_argument(
        '--digits', type=int, default=None,
        help="Round exported coordinates to this many decimals"
    )
    parser.add_argument(
        '--no-paths', action='store_true', default=False,
        help="Omit orbit path points from the exported scene"
    )
    parser.add_argument(
        '--strict', action='store_true', default=False,
        help="Reject degenerate orbital elements (a <= 0, e >= 1)"
    )
    parser.add_argument(
        '--log-level', default='WARNING',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help="Logging verbosity (default: WARNING)"
    )

    args = parser.parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.frames < 0:
        parser.error("--frames must be >= 0")

    try:
        registry, scheduler, renderer = run(
            scenario_path=args.scenario,
            frames=args.frames,
            strict=args.strict,
        )
    except FileNotFoundError:
        print(f"Error: Scenario file not found: {args.scenario}", file=sys.stderr)
        sys.exit(1)
    except json.JSONDecodeError as e:
        print(f"Error: Invalid scenario JSON: {e}", file=sys.stderr)
        sys.exit(1)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.output:
        scene = build_scene_document(
            registry,
            tick_count=scheduler.tick_count,
            spin_angle_rad=renderer.central_body_spin_rad,
            tilt_rad=renderer.central_body_tilt_rad,
            include_paths=not args.no_paths,
            digits=args.digits,
        )
        JsonSceneWriter().write_scene(scene, args.output)
        print(f"Wrote scene with {len(registry)} satellites to {args.output}")
    else:
        _print_summary(registry, scheduler)


if __name__ == '__main__':
    main()
