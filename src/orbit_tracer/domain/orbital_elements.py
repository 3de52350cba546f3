# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Classical orbital elements from a propagated trajectory.

Size and shape (apoapsis, periapsis, semi-major axis, eccentricity) come
from the radius extremes over all samples. Orientation (inclination,
ascending node, argument of periapsis) comes from the final sample's
state vector.
"""
import logging
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from orbit_tracer.domain.errors import DegenerateInputError
from orbit_tracer.domain.orbit_propagation import OrbitTrace, StateSample
from orbit_tracer.domain.orbital_mechanics import (
    CIRCULAR_TOLERANCE,
    EQUATORIAL_TOLERANCE,
    Attractor,
    _angle_deg,
    _eccentricity_vector,
    _node_vector,
    _relative,
)
from orbit_tracer.domain.vector import Vec3

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OrbitalElements:
    """Keplerian element set. Angles in degrees, distances in input units.

    The node and argument of periapsis are None when the orbit shape
    leaves them undefined (equatorial or circular orbits).
    """
    apoapsis: float
    periapsis: float
    semi_major_axis: float
    eccentricity: float
    inclination_deg: float
    longitude_of_ascending_node_deg: float | None
    argument_of_periapsis_deg: float | None
    from_complete_revolution: bool = True


def _state_arrays(
    position: Vec3,
    velocity: Vec3,
    attractor: Attractor,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    r = _relative(np.asarray(position, dtype=np.float64), attractor)
    v = np.asarray(velocity, dtype=np.float64)
    h = np.cross(r, v)
    if float(np.linalg.norm(r)) == 0.0:
        raise DegenerateInputError("Body position coincides with the attractor")
    if float(np.linalg.norm(h)) == 0.0:
        raise DegenerateInputError("Zero angular momentum: orbital plane is undefined")
    return r, v, h


def inclination_deg(position: Vec3, velocity: Vec3, attractor: Attractor) -> float:
    """Inclination i = arccos(h_z / |h|), in [0, 180]."""
    _, _, h = _state_arrays(position, velocity, attractor)
    return _angle_deg(float(h[2]) / float(np.linalg.norm(h)))


def longitude_of_ascending_node_deg(
    position: Vec3,
    velocity: Vec3,
    attractor: Attractor,
) -> float:
    """
    Longitude of the ascending node in [0, 360).

    Omega = arccos(n_x / |n|), mirrored to 360 − Omega when n_y < 0.

    Raises:
        DegenerateInputError: For equatorial orbits, where n vanishes.
    """
    _, _, h = _state_arrays(position, velocity, attractor)
    n = _node_vector(h)
    n_mag = float(np.linalg.norm(n))
    if n_mag <= EQUATORIAL_TOLERANCE * float(np.linalg.norm(h)):
        raise DegenerateInputError(
            "Equatorial orbit: ascending node is undefined"
        )
    node = _angle_deg(float(n[0]) / n_mag)
    if n[1] < 0.0:
        node = 360.0 - node
    return node % 360.0


def argument_of_periapsis_deg(
    position: Vec3,
    velocity: Vec3,
    attractor: Attractor,
) -> float:
    """
    Argument of periapsis in [0, 360).

    omega = arccos(n·e / (|n||e|)), mirrored to 360 − omega when e_z < 0
    (periapsis below the reference plane).

    Raises:
        DegenerateInputError: For equatorial or circular orbits.
    """
    r, v, h = _state_arrays(position, velocity, attractor)
    n = _node_vector(h)
    n_mag = float(np.linalg.norm(n))
    if n_mag <= EQUATORIAL_TOLERANCE * float(np.linalg.norm(h)):
        raise DegenerateInputError(
            "Equatorial orbit: argument of periapsis is undefined"
        )
    e_vec = _eccentricity_vector(r, v, attractor.mu)
    e_mag = float(np.linalg.norm(e_vec))
    if e_mag <= CIRCULAR_TOLERANCE:
        raise DegenerateInputError(
            "Circular orbit: argument of periapsis is undefined"
        )
    omega = _angle_deg(float(np.dot(n, e_vec)) / (n_mag * e_mag))
    if e_vec[2] < 0.0:
        omega = 360.0 - omega
    return omega % 360.0


def _optional_angle(fn, sample: StateSample, attractor: Attractor, strict: bool) -> float | None:
    try:
        return fn(sample.position, sample.velocity, attractor)
    except DegenerateInputError as exc:
        if strict:
            raise
        logger.warning("%s; reporting it as undefined", exc)
        return None


def extract_orbital_elements(
    samples: Sequence[StateSample],
    attractor: Attractor,
    strict: bool = False,
    from_complete_revolution: bool = True,
) -> OrbitalElements:
    """
    Derive the classical orbital elements from a sample sequence.

    Args:
        samples: Time-ordered samples of one propagation run.
        attractor: The attractor used for that run.
        strict: Raise instead of returning None for undefined angles.
        from_complete_revolution: Whether the samples cover a full orbit;
            copied onto the result.

    Returns:
        OrbitalElements.

    Raises:
        DegenerateInputError: Empty samples, zero angular momentum in the
            final sample, or (strict) undefined node / periapsis angles.
    """
    if len(samples) == 0:
        raise DegenerateInputError("Cannot extract orbital elements from zero samples")

    radii = np.array([s.radius for s in samples], dtype=np.float64)
    apoapsis = float(np.max(radii))
    periapsis = float(np.min(radii))
    total = apoapsis + periapsis
    if total == 0.0:
        raise DegenerateInputError("All samples coincide with the attractor")

    last = samples[-1]
    inclination = inclination_deg(last.position, last.velocity, attractor)
    node = _optional_angle(longitude_of_ascending_node_deg, last, attractor, strict)
    argp = _optional_angle(argument_of_periapsis_deg, last, attractor, strict)

    if not from_complete_revolution:
        logger.warning(
            "Orbital elements derived from a partial arc of %d samples",
            len(samples),
        )

    return OrbitalElements(
        apoapsis=apoapsis,
        periapsis=periapsis,
        semi_major_axis=total / 2.0,
        eccentricity=(apoapsis - periapsis) / total,
        inclination_deg=inclination,
        longitude_of_ascending_node_deg=node,
        argument_of_periapsis_deg=argp,
        from_complete_revolution=from_complete_revolution,
    )


def elements_from_trace(trace: OrbitTrace, strict: bool = False) -> OrbitalElements:
    """Orbital elements of a propagation result."""
    return extract_orbital_elements(
        trace.samples,
        trace.config.attractor,
        strict=strict,
        from_complete_revolution=trace.revolution_complete,
    )
