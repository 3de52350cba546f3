# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""CLI tests: argument handling, error exits and export dispatch."""
import json
import sys

import pytest

from orbit_tracer.cli import format_elements, main, run
from orbit_tracer.domain.orbit_propagation import PropagationConfig
from orbit_tracer.domain.orbital_mechanics import Attractor
from orbit_tracer.domain.scenario import Scenario


@pytest.fixture
def scenario_path(tmp_path):
    """Unit circular orbit: G = M = r = v = 1, period 2*pi."""
    data = {
        "Entities": [
            {"Name": "Earth", "Mass": 1.0, "Position": "0;0;0"},
            {"Name": "Satellite", "Position": "1;0;0", "Velocity": "0;0;1"},
        ],
        "Propagation": {"GravitationalConstant": 1.0, "TimeStep": 0.01, "MaxSteps": 2000},
    }
    path = tmp_path / "scenario.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


class TestRun:

    def test_run_returns_trace_and_elements(self):
        scenario = Scenario(
            name="probe",
            initial_position=(1.0, 0.0, 0.0),
            initial_velocity=(0.0, 1.3, 0.0),
            config=PropagationConfig(
                attractor=Attractor(mass=1.0, gravitational_constant=1.0),
                time_step=0.005, max_steps=20_000,
            ),
        )
        trace, elements = run(scenario)
        assert trace.revolution_complete
        assert 0.0 < elements.eccentricity < 1.0

    def test_format_elements_marks_undefined(self):
        scenario = Scenario(
            name="probe",
            initial_position=(1.0, 0.0, 0.0),
            initial_velocity=(0.0, 1.0, 0.0),
            config=PropagationConfig(
                attractor=Attractor(mass=1.0, gravitational_constant=1.0),
                time_step=0.01, max_steps=2_000,
            ),
        )
        _, elements = run(scenario)
        text = format_elements(elements)
        assert "Eccentricity" in text
        assert "undefined" in text


class TestCliMain:

    def test_prints_elements(self, scenario_path, capsys, monkeypatch):
        monkeypatch.setattr(sys, 'argv', ['orbit-tracer', '-i', scenario_path])
        main()
        captured = capsys.readouterr()
        assert "Traced" in captured.out
        assert "Semi-major axis" in captured.out
        assert "revolution not completed" not in captured.err

    def test_missing_input_file(self, tmp_path, capsys, monkeypatch):
        missing = str(tmp_path / "missing.json")
        monkeypatch.setattr(sys, 'argv', ['orbit-tracer', '-i', missing])
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 1
        assert "not found" in capsys.readouterr().err.lower()

    def test_malformed_json(self, tmp_path, capsys, monkeypatch):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        monkeypatch.setattr(sys, 'argv', ['orbit-tracer', '-i', str(path)])
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 1
        assert "Error" in capsys.readouterr().err

    @pytest.mark.parametrize("data", [
        [],
        {"Entities": ["Earth"]},
        {
            "Entities": [
                {"Name": "Earth", "Mass": 1.0},
                {"Name": "Satellite", "Position": "1;0;0", "Velocity": "0;0;1"},
            ],
            "Propagation": [],
        },
    ])
    def test_malformed_scenario_structure(self, tmp_path, capsys, monkeypatch, data):
        path = tmp_path / "scenario.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        monkeypatch.setattr(sys, 'argv', ['orbit-tracer', '-i', str(path)])
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 1
        assert "Error" in capsys.readouterr().err

    @pytest.mark.parametrize("flag", ['--export-csv', '--export-elements'])
    def test_export_to_missing_directory(self, scenario_path, tmp_path, capsys, monkeypatch, flag):
        target = str(tmp_path / "no_such_dir" / "out.dat")
        monkeypatch.setattr(sys, 'argv', ['orbit-tracer', '-i', scenario_path, flag, target])
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 1
        captured = capsys.readouterr()
        assert "Semi-major axis" in captured.out
        assert "Export failed" in captured.err

    def test_unknown_body(self, scenario_path, capsys, monkeypatch):
        monkeypatch.setattr(sys, 'argv', ['orbit-tracer', '-i', scenario_path, '--body', 'Probe'])
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 1
        assert "Probe" in capsys.readouterr().err

    def test_strict_equatorial_fails(self, scenario_path, capsys, monkeypatch):
        monkeypatch.setattr(sys, 'argv', ['orbit-tracer', '-i', scenario_path, '--strict'])
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 1
        assert "undefined" in capsys.readouterr().err

    def test_partial_arc_warning(self, scenario_path, capsys, monkeypatch):
        monkeypatch.setattr(
            sys, 'argv', ['orbit-tracer', '-i', scenario_path, '--max-steps', '10'],
        )
        main()
        captured = capsys.readouterr()
        assert "revolution not completed" in captured.err
        assert "Traced 10 samples" in captured.out

    def test_invalid_time_step_override(self, scenario_path, capsys, monkeypatch):
        monkeypatch.setattr(
            sys, 'argv', ['orbit-tracer', '-i', scenario_path, '--time-step', '-1'],
        )
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 1

    def test_exports(self, scenario_path, tmp_path, capsys, monkeypatch):
        csv_path = tmp_path / "trace.csv"
        elements_path = tmp_path / "elements.json"
        monkeypatch.setattr(sys, 'argv', [
            'orbit-tracer', '-i', scenario_path,
            '--export-csv', str(csv_path),
            '--export-elements', str(elements_path),
        ])
        main()
        assert csv_path.exists()
        data = json.loads(elements_path.read_text(encoding="utf-8"))
        assert data["inclination_deg"] == pytest.approx(0.0, abs=1e-9)
        assert data["from_complete_revolution"] is True
        out = capsys.readouterr().out
        assert f"Exported orbital elements to {elements_path}" in out
