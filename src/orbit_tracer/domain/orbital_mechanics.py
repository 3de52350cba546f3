# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Orbital mechanics functions.

Two-body state-vector quantities relative to a fixed attractor:
angular momentum, eccentricity vector, true anomaly and
specific orbital energy. Angles are returned in degrees.
"""
import math
from dataclasses import dataclass

import numpy as np

from orbit_tracer.domain.errors import DegenerateInputError
from orbit_tracer.domain.vector import (
    ORIGIN,
    Vec3,
    as_vec3,
    vec_cross,
    vec_dot,
    vec_norm,
    vec_normalize,
    vec_scale,
    vec_sub,
)


@dataclass(frozen=True)
class _PhysicalConstants:
    """Reference physical constants (CODATA 2018 / IAU values)."""
    G: float = 6.67430e-11              # m³/(kg·s²) — Newtonian constant of gravitation
    M_EARTH: float = 5.9722e24          # kg
    R_EARTH: float = 6_371_000.0        # m — mean radius


PhysicalConstants: _PhysicalConstants = _PhysicalConstants()

# Below these magnitudes the eccentricity / node directions carry no information.
CIRCULAR_TOLERANCE = 1e-10
EQUATORIAL_TOLERANCE = 1e-10


@dataclass(frozen=True)
class Attractor:
    """Fixed central body: mass, gravitational constant and position."""
    mass: float
    gravitational_constant: float = PhysicalConstants.G
    position: Vec3 = ORIGIN

    def __post_init__(self) -> None:
        if not (math.isfinite(self.mass) and self.mass > 0.0):
            raise ValueError(f"mass must be positive and finite, got {self.mass}")
        if not (math.isfinite(self.gravitational_constant)
                and self.gravitational_constant > 0.0):
            raise ValueError(
                "gravitational_constant must be positive and finite, "
                f"got {self.gravitational_constant}"
            )
        object.__setattr__(self, "position", as_vec3(self.position))

    @property
    def mu(self) -> float:
        """Standard gravitational parameter G·M."""
        return self.gravitational_constant * self.mass


# --- Array-level kernels (used inside the propagation loop) ---

def _relative(position: np.ndarray, attractor: Attractor) -> np.ndarray:
    return position - np.asarray(attractor.position)


def _eccentricity_vector(r: np.ndarray, v: np.ndarray, mu: float) -> np.ndarray:
    """e = (v × h) / mu − r̂."""
    h = np.cross(r, v)
    return np.cross(v, h) / mu - r / np.linalg.norm(r)


def _node_vector(h: np.ndarray) -> np.ndarray:
    """n = ẑ × h = (−h_y, h_x, 0)."""
    return np.array([-h[1], h[0], 0.0])


def _angle_deg(cos_value: float) -> float:
    # Rounding can push the cosine a hair outside [-1, 1].
    return float(np.degrees(np.arccos(np.clip(cos_value, -1.0, 1.0))))


def _true_anomaly_deg(r: np.ndarray, v: np.ndarray, mu: float) -> float:
    r_mag = float(np.linalg.norm(r))
    e_vec = _eccentricity_vector(r, v, mu)
    e_mag = float(np.linalg.norm(e_vec))

    if e_mag > CIRCULAR_TOLERANCE:
        nu = _angle_deg(float(np.dot(e_vec, r)) / (e_mag * r_mag))
        if float(np.dot(r, v)) < 0.0:
            nu = 360.0 - nu
        return nu % 360.0

    # Circular: fall back to argument of latitude, or true longitude
    # when the orbit is also equatorial.
    h = np.cross(r, v)
    n = _node_vector(h)
    n_mag = float(np.linalg.norm(n))
    h_mag = float(np.linalg.norm(h))
    if h_mag > 0.0 and n_mag / h_mag > EQUATORIAL_TOLERANCE:
        u = _angle_deg(float(np.dot(n, r)) / (n_mag * r_mag))
        if r[2] < 0.0:
            u = 360.0 - u
        return u % 360.0

    lon = _angle_deg(float(r[0]) / r_mag)
    if r[1] < 0.0:
        lon = 360.0 - lon
    return lon % 360.0


# --- Public tuple API ---

def relative_position(position: Vec3, attractor: Attractor) -> Vec3:
    """Position of the body relative to the attractor."""
    return vec_sub(position, attractor.position)


def specific_angular_momentum(
    position: Vec3,
    velocity: Vec3,
    attractor: Attractor,
) -> Vec3:
    """h = r × v with r measured from the attractor."""
    return vec_cross(relative_position(position, attractor), velocity)


def eccentricity_vector(
    position: Vec3,
    velocity: Vec3,
    attractor: Attractor,
) -> Vec3:
    """
    Eccentricity vector e = (v × h) / mu − r̂.

    Points from the attractor towards periapsis; |e| is the eccentricity.

    Raises:
        DegenerateInputError: If the body sits on the attractor.
    """
    r = relative_position(position, attractor)
    if vec_norm(r) == 0.0:
        raise DegenerateInputError("Body position coincides with the attractor")
    h = vec_cross(r, velocity)
    return vec_sub(vec_scale(vec_cross(velocity, h), 1.0 / attractor.mu), vec_normalize(r))


def true_anomaly_deg(
    position: Vec3,
    velocity: Vec3,
    attractor: Attractor,
) -> float:
    """
    True anomaly in degrees, in [0, 360).

    nu = arccos(e·r / (|e||r|)), mirrored to 360 − nu while the body is
    approaching periapsis (r·v < 0). For circular orbits the eccentricity
    vector has no direction, so the argument of latitude is returned
    instead (true longitude if the orbit is also equatorial).

    Raises:
        DegenerateInputError: If the body sits on the attractor.
    """
    r = _relative(np.asarray(position, dtype=np.float64), attractor)
    if float(np.linalg.norm(r)) == 0.0:
        raise DegenerateInputError("Body position coincides with the attractor")
    return _true_anomaly_deg(r, np.asarray(velocity, dtype=np.float64), attractor.mu)


def specific_orbital_energy(
    position: Vec3,
    velocity: Vec3,
    attractor: Attractor,
) -> float:
    """Specific orbital energy E = v²/2 − mu/r. Negative for bound orbits."""
    r = vec_norm(relative_position(position, attractor))
    if r == 0.0:
        raise DegenerateInputError("Body position coincides with the attractor")
    return 0.5 * vec_dot(velocity, velocity) - attractor.mu / r


def circular_speed(radius: float, attractor: Attractor) -> float:
    """Speed of a circular orbit at the given radius: sqrt(mu / r)."""
    if radius <= 0.0:
        raise ValueError(f"radius must be positive, got {radius}")
    return math.sqrt(attractor.mu / radius)
