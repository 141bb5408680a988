# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
JSON scenario and scene file I/O adapter.

A scenario is either a list of satellite objects or an object with a
``satellites`` list. Each satellite uses control-panel field names
(``semiMajorAxis``, ``trueAnomaly``, ...) or their snake_case forms;
missing fields take the panel defaults.
"""
import json
from typing import Any

from orbit_visualizer.ports import ScenarioReader, SceneWriter
from orbit_visualizer.domain.satellite import SatelliteParams


class JsonScenarioReader(ScenarioReader):
    """Reads satellite parameters from JSON files."""

    def read_scenario(self, path: str) -> list[SatelliteParams]:
        with open(path, encoding='utf-8') as f:
            data = json.load(f)
        return parse_scenario(data)


def parse_scenario(data: Any) -> list[SatelliteParams]:
    """
    Convert decoded scenario JSON to SatelliteParams.

    Raises:
        ValueError: wrong top-level shape, non-object entries, or unknown fields.
    """
    if isinstance(data, dict):
        data = data.get('satellites', [])
    if not isinstance(data, list):
        raise ValueError("Scenario must be a list of satellites or an object with 'satellites'")

    params: list[SatelliteParams] = []
    for index, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise ValueError(f"Satellite entry {index} must be an object, got {type(entry).__name__}")
        params.append(SatelliteParams.from_fields(entry))
    return params


class JsonSceneWriter(SceneWriter):
    """Writes scene snapshots to JSON files."""

    def write_scene(self, scene: dict[str, Any], path: str) -> None:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(scene, f, indent=2, ensure_ascii=False)
