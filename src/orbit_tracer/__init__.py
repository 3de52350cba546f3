# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Orbit Tracer

Propagate a body around a fixed central attractor for exactly one
revolution with a fixed-step Euler integrator, and derive the classical
orbital elements (apoapsis, periapsis, semi-major axis, eccentricity,
inclination, ascending node, argument of periapsis) from the trace.
"""

from orbit_tracer.domain.errors import DegenerateInputError
from orbit_tracer.domain.vector import (
    Vec3,
    vec_add,
    vec_sub,
    vec_scale,
    vec_dot,
    vec_cross,
    vec_norm,
    vec_normalize,
)
from orbit_tracer.domain.orbital_mechanics import (
    PhysicalConstants,
    Attractor,
    specific_angular_momentum,
    eccentricity_vector,
    true_anomaly_deg,
    specific_orbital_energy,
    circular_speed,
)
from orbit_tracer.domain.gravity import (
    ForceModel,
    CentralGravity,
    gravitational_acceleration,
)
from orbit_tracer.domain.orbit_propagation import (
    PropagationConfig,
    StateSample,
    OrbitTrace,
    RevolutionPhase,
    RevolutionTracker,
    euler_step,
    propagate_orbit,
    relative_energy_drift,
)
from orbit_tracer.domain.orbital_elements import (
    OrbitalElements,
    inclination_deg,
    longitude_of_ascending_node_deg,
    argument_of_periapsis_deg,
    extract_orbital_elements,
    elements_from_trace,
)
from orbit_tracer.domain.scenario import Scenario

__version__ = "0.1.0"

__all__ = [
    "DegenerateInputError",
    "Vec3",
    "vec_add",
    "vec_sub",
    "vec_scale",
    "vec_dot",
    "vec_cross",
    "vec_norm",
    "vec_normalize",
    "PhysicalConstants",
    "Attractor",
    "specific_angular_momentum",
    "eccentricity_vector",
    "true_anomaly_deg",
    "specific_orbital_energy",
    "circular_speed",
    "ForceModel",
    "CentralGravity",
    "gravitational_acceleration",
    "PropagationConfig",
    "StateSample",
    "OrbitTrace",
    "RevolutionPhase",
    "RevolutionTracker",
    "euler_step",
    "propagate_orbit",
    "relative_energy_drift",
    "OrbitalElements",
    "inclination_deg",
    "longitude_of_ascending_node_deg",
    "argument_of_periapsis_deg",
    "extract_orbital_elements",
    "elements_from_trace",
    "Scenario",
]
