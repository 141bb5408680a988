# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for JSON scenario and scene I/O."""
import json
from pathlib import Path

import pytest

from orbit_visualizer.ports import ScenarioReader, SceneWriter
from orbit_visualizer.adapters.json_io import (
    JsonScenarioReader,
    JsonSceneWriter,
    parse_scenario,
)


class TestParseScenario:

    def test_list_form(self):
        params = parse_scenario([
            {"name": "A", "semiMajorAxis": 5, "eccentricity": 0.1, "color": "#00ff00"},
            {"name": "B", "trueAnomaly": 90, "speed": 0.05},
        ])
        assert [p.name for p in params] == ["A", "B"]
        assert params[0].elements.semi_major_axis == 5.0
        assert params[0].elements.eccentricity == 0.1
        assert params[1].elements.true_anomaly_deg == 90.0
        assert params[1].elements.semi_major_axis == 10.0
        assert params[1].speed == 0.05

    def test_object_form(self):
        params = parse_scenario({"satellites": [{"name": "A"}]})
        assert len(params) == 1

    def test_empty_object(self):
        assert parse_scenario({}) == []

    def test_snake_case_fields(self):
        params = parse_scenario([{"arg_periapsis_deg": 30.0, "raan_deg": 10.0}])
        assert params[0].elements.arg_periapsis_deg == 30.0
        assert params[0].elements.raan_deg == 10.0

    def test_wrong_top_level(self):
        with pytest.raises(ValueError, match="Scenario"):
            parse_scenario("satellites")

    def test_non_object_entry(self):
        with pytest.raises(ValueError, match="entry 1"):
            parse_scenario([{"name": "A"}, 42])

    def test_unknown_field(self):
        with pytest.raises(ValueError):
            parse_scenario([{"altitude": 400}])


class TestJsonFiles:

    def test_adapters_implement_ports(self):
        assert isinstance(JsonScenarioReader(), ScenarioReader)
        assert isinstance(JsonSceneWriter(), SceneWriter)

    def test_read_scenario(self, tmp_path):
        path = tmp_path / "sats.json"
        path.write_text(json.dumps([{"name": "ISS-ish", "semiMajorAxis": 6.8}]), encoding="utf-8")
        params = JsonScenarioReader().read_scenario(str(path))
        assert params[0].name == "ISS-ish"
        assert params[0].elements.semi_major_axis == 6.8

    def test_read_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            JsonScenarioReader().read_scenario(str(tmp_path / "missing.json"))

    def test_write_scene(self, tmp_path):
        path = tmp_path / "scene.json"
        scene = {"tick": 3, "satellites": [{"name": "Ω"}]}
        JsonSceneWriter().write_scene(scene, str(path))
        text = path.read_text(encoding="utf-8")
        assert "Ω" in text
        assert json.loads(text) == scene


class TestBundledScenario:

    def test_example_scenario_loads(self):
        path = Path(__file__).resolve().parent.parent / "examples" / "scenario.json"
        params = JsonScenarioReader().read_scenario(str(path))
        assert [p.name for p in params] == ["Low circular", "Molniya-like", "Geostationary"]
        assert params[1].elements.eccentricity == 0.74
        assert params[2].elements.true_anomaly_deg == 180.0
