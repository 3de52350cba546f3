# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Central-body gravity force model.

a = G·M / d² along the unit vector from the body to the attractor.
"""
from typing import Protocol, runtime_checkable

import numpy as np

from orbit_tracer.domain.errors import DegenerateInputError
from orbit_tracer.domain.orbital_mechanics import Attractor
from orbit_tracer.domain.vector import Vec3, as_vec3


@runtime_checkable
class ForceModel(Protocol):
    """Structural typing port for acceleration sources."""

    def acceleration(
        self,
        position: Vec3,
        velocity: Vec3,
    ) -> Vec3: ...


def _acceleration_array(position: np.ndarray, attractor: Attractor) -> np.ndarray:
    direction = np.asarray(attractor.position) - position
    distance = float(np.linalg.norm(direction))
    if distance == 0.0:
        raise DegenerateInputError(
            f"Body at {tuple(position.tolist())} coincides with the attractor; "
            "gravitational acceleration is undefined"
        )
    magnitude = attractor.mu / (distance * distance)
    return direction / distance * magnitude


def gravitational_acceleration(position: Vec3, attractor: Attractor) -> Vec3:
    """
    Gravitational acceleration exerted by the attractor on a body.

    Args:
        position: Body position (same frame as attractor.position).
        attractor: Central body.

    Returns:
        Acceleration vector pointing at the attractor.

    Raises:
        DegenerateInputError: If the body and attractor coincide.
    """
    return as_vec3(_acceleration_array(np.asarray(position, dtype=np.float64), attractor))


class CentralGravity:
    """Point-mass gravity of a single fixed attractor."""

    def __init__(self, attractor: Attractor) -> None:
        self._attractor = attractor

    @property
    def attractor(self) -> Attractor:
        return self._attractor

    def acceleration(
        self,
        position: Vec3,
        velocity: Vec3,
    ) -> Vec3:
        return gravitational_acceleration(position, self._attractor)
