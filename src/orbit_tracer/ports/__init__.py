# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interfaces for scenario input and trajectory output.

Adapters implement these to handle different file formats.
"""
from typing import Protocol, runtime_checkable

from orbit_tracer.domain.orbit_propagation import OrbitTrace
from orbit_tracer.domain.orbital_elements import OrbitalElements
from orbit_tracer.domain.scenario import Scenario


@runtime_checkable
class ScenarioReader(Protocol):
    """Port for reading a propagation scenario."""

    def read_scenario(
        self,
        path: str,
        body_name: str = "Satellite",
        attractor_name: str = "Earth",
    ) -> Scenario:
        """Read a scenario file and build the initial state and config."""
        ...


@runtime_checkable
class TraceExporter(Protocol):
    """Port for exporting a propagated trajectory to file."""

    def export(self, trace: OrbitTrace, path: str) -> int:
        """
        Write the trace samples to a file.

        Returns:
            Number of samples written.
        """
        ...


@runtime_checkable
class ElementsWriter(Protocol):
    """Port for writing an orbital element set."""

    def write_elements(self, elements: OrbitalElements, path: str) -> None:
        """Write the element set to a file."""
        ...
