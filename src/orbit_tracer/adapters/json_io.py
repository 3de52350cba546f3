# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
JSON scenario and element-set I/O adapter.

Reads propagation scenarios from simulation JSON files and writes
orbital element sets as JSON.
"""
import json
from dataclasses import asdict
from typing import Any

from orbit_tracer.domain.orbit_propagation import PropagationConfig
from orbit_tracer.domain.orbital_elements import OrbitalElements
from orbit_tracer.domain.orbital_mechanics import Attractor, PhysicalConstants
from orbit_tracer.domain.scenario import (
    DEFAULT_MAX_STEPS,
    DEFAULT_TIME_STEP_S,
    Scenario,
)
from orbit_tracer.domain.serialization import parse_vector
from orbit_tracer.ports import ElementsWriter, ScenarioReader


def _find_entity(sim_data: dict, entity_name: str) -> dict:
    entities = sim_data.get('Entities', [])
    if not isinstance(entities, list):
        raise ValueError(f"'Entities' must be a list, got {type(entities).__name__}")
    for entity in entities:
        if not isinstance(entity, dict):
            raise ValueError(f"Entity entries must be objects, got {entity!r}")
        if entity.get('Name') == entity_name:
            return entity
    raise ValueError(f"Entity '{entity_name}' not found in simulation data")


def _require(entity: dict, key: str) -> Any:
    if key not in entity:
        raise ValueError(f"Entity '{entity.get('Name')}' has no '{key}' field")
    return entity[key]


def _as_float(value: Any, label: str) -> float:
    if isinstance(value, bool):
        raise ValueError(f"{label} must be a number, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{label} must be a number, got {value!r}") from None


class JsonScenarioReader(ScenarioReader):
    """Reads propagation scenarios from simulation JSON files."""

    def read_simulation(self, path: str) -> dict[str, Any]:
        with open(path, encoding='utf-8') as f:
            return json.load(f)

    def build_scenario(
        self,
        sim_data: dict,
        body_name: str = "Satellite",
        attractor_name: str = "Earth",
    ) -> Scenario:
        if not isinstance(sim_data, dict):
            raise ValueError(
                f"Simulation data must be a JSON object, got {type(sim_data).__name__}"
            )
        attractor_entity = _find_entity(sim_data, attractor_name)
        body_entity = _find_entity(sim_data, body_name)
        settings = sim_data.get('Propagation', {})
        if not isinstance(settings, dict):
            raise ValueError(
                f"'Propagation' must be an object, got {type(settings).__name__}"
            )

        attractor = Attractor(
            mass=_as_float(_require(attractor_entity, 'Mass'), f"{attractor_name} Mass"),
            gravitational_constant=_as_float(
                settings.get('GravitationalConstant', PhysicalConstants.G),
                "GravitationalConstant",
            ),
            position=parse_vector(attractor_entity.get('Position', "0;0;0")),
        )
        max_steps = settings.get('MaxSteps', DEFAULT_MAX_STEPS)
        if isinstance(max_steps, bool) or not isinstance(max_steps, int):
            raise ValueError(f"MaxSteps must be an integer, got {max_steps!r}")
        config = PropagationConfig(
            attractor=attractor,
            time_step=_as_float(settings.get('TimeStep', DEFAULT_TIME_STEP_S), "TimeStep"),
            max_steps=max_steps,
        )
        return Scenario(
            name=body_name,
            initial_position=parse_vector(_require(body_entity, 'Position')),
            initial_velocity=parse_vector(_require(body_entity, 'Velocity')),
            config=config,
        )

    def read_scenario(
        self,
        path: str,
        body_name: str = "Satellite",
        attractor_name: str = "Earth",
    ) -> Scenario:
        sim = self.read_simulation(path)
        return self.build_scenario(sim, body_name=body_name, attractor_name=attractor_name)


class JsonElementsWriter(ElementsWriter):
    """Writes orbital element sets to JSON files."""

    def write_elements(self, elements: OrbitalElements, path: str) -> None:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(asdict(elements), f, indent=2, ensure_ascii=False)
