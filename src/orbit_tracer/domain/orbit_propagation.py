# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Fixed-step orbit propagation over exactly one revolution.

Semi-implicit (velocity-first) Euler integration under a central-body
force model. Integration stops as soon as the body has swept a full
revolution around the attractor, or when the step budget runs out.
"""
import logging
import math
import numbers
from dataclasses import dataclass
from enum import Enum
from typing import Callable

import numpy as np

from orbit_tracer.domain.errors import DegenerateInputError
from orbit_tracer.domain.gravity import ForceModel, _acceleration_array
from orbit_tracer.domain.orbital_mechanics import (
    Attractor,
    _true_anomaly_deg,
    specific_orbital_energy,
)
from orbit_tracer.domain.vector import Vec3, as_vec3

logger = logging.getLogger(__name__)


# --- Types ---

@dataclass(frozen=True)
class PropagationConfig:
    """Integration parameters for a single propagation run."""
    attractor: Attractor
    time_step: float
    max_steps: int

    def __post_init__(self) -> None:
        if not (math.isfinite(self.time_step) and self.time_step > 0.0):
            raise ValueError(f"time_step must be positive and finite, got {self.time_step}")
        if isinstance(self.max_steps, bool) or not isinstance(self.max_steps, numbers.Integral):
            raise ValueError(f"max_steps must be an integer, got {self.max_steps!r}")
        if self.max_steps < 1:
            raise ValueError(f"max_steps must be at least 1, got {self.max_steps}")


@dataclass(frozen=True)
class StateSample:
    """Body state recorded at one integration step."""
    step: int
    time_s: float
    true_anomaly_deg: float
    position: Vec3
    velocity: Vec3
    radius: float
    tangential_speed: float


@dataclass(frozen=True)
class OrbitTrace:
    """Result of a propagation run.

    ``samples`` holds only the states actually produced; its length is
    never larger than ``config.max_steps``.
    """
    samples: tuple[StateSample, ...]
    config: PropagationConfig
    revolution_complete: bool
    swept_angle_deg: float

    def __len__(self) -> int:
        return len(self.samples)

    @property
    def is_partial_arc(self) -> bool:
        """True when the step budget ran out before a full revolution."""
        return not self.revolution_complete

    @property
    def final_sample(self) -> StateSample:
        return self.samples[-1]

    def positions(self) -> list[Vec3]:
        """Sample positions in time order, ready to draw as a polyline."""
        return [s.position for s in self.samples]


class RevolutionPhase(Enum):
    OUTBOUND = "outbound"
    INBOUND = "inbound"
    COMPLETE = "complete"


class RevolutionTracker:
    """Two-phase revolution detector.

    Accumulates the signed angle swept by the relative position vector
    about the initial angular momentum direction. The body is OUTBOUND
    until it has swept half a turn, INBOUND until it has swept a full
    turn, then COMPLETE.
    """

    def __init__(
        self,
        initial_relative_position: np.ndarray,
        angular_momentum: np.ndarray,
    ) -> None:
        h_mag = float(np.linalg.norm(angular_momentum))
        if h_mag == 0.0:
            raise DegenerateInputError(
                "Zero angular momentum: rectilinear trajectory has no revolution"
            )
        self._normal = np.asarray(angular_momentum, dtype=np.float64) / h_mag
        self._previous = np.asarray(initial_relative_position, dtype=np.float64)
        self._swept_deg = 0.0
        self._phase = RevolutionPhase.OUTBOUND

    @property
    def phase(self) -> RevolutionPhase:
        return self._phase

    @property
    def swept_angle_deg(self) -> float:
        return self._swept_deg

    def update(self, relative_position: np.ndarray) -> RevolutionPhase:
        """Advance the tracker to a new relative position."""
        current = np.asarray(relative_position, dtype=np.float64)
        sin_part = float(np.dot(np.cross(self._previous, current), self._normal))
        cos_part = float(np.dot(self._previous, current))
        self._swept_deg += math.degrees(math.atan2(sin_part, cos_part))
        self._previous = current

        if self._phase is RevolutionPhase.OUTBOUND and self._swept_deg >= 180.0:
            self._phase = RevolutionPhase.INBOUND
        elif self._phase is RevolutionPhase.INBOUND and self._swept_deg >= 360.0:
            self._phase = RevolutionPhase.COMPLETE
        return self._phase


# --- Integrator ---

def euler_step(
    position: np.ndarray,
    velocity: np.ndarray,
    h: float,
    accel_fn: Callable[[np.ndarray, np.ndarray], np.ndarray],
) -> tuple[np.ndarray, np.ndarray]:
    """Single semi-implicit Euler step.

    The velocity is kicked first and the position drifts with the
    updated velocity:

        v' = v + a(x) * h
        x' = x + v' * h

    Args:
        position: Current position.
        velocity: Current velocity.
        h: Step size (seconds).
        accel_fn: Acceleration function a(pos, vel) -> acceleration.

    Returns:
        (position_new, velocity_new) as ndarrays.
    """
    pos = np.asarray(position, dtype=np.float64)
    vel = np.asarray(velocity, dtype=np.float64)
    acc = np.asarray(accel_fn(pos, vel), dtype=np.float64)
    vel_new = vel + acc * h
    pos_new = pos + vel_new * h
    return pos_new, vel_new


def _make_sample(
    step: int,
    time_s: float,
    true_anomaly: float,
    pos: np.ndarray,
    vel: np.ndarray,
    attractor_pos: np.ndarray,
) -> StateSample:
    return StateSample(
        step=step,
        time_s=time_s,
        true_anomaly_deg=true_anomaly,
        position=as_vec3(pos),
        velocity=as_vec3(vel),
        radius=float(np.linalg.norm(pos - attractor_pos)),
        tangential_speed=float(np.linalg.norm(vel)),
    )


# --- Main propagation function ---

def propagate_orbit(
    initial_position: Vec3,
    initial_velocity: Vec3,
    config: PropagationConfig,
    force_model: ForceModel | None = None,
) -> OrbitTrace:
    """Propagate a body for one revolution around the attractor.

    1. Record the initial state as sample 0
    2. Step with semi-implicit Euler until the revolution tracker reports
       a full turn or ``max_steps`` samples exist
    3. The state that closes the revolution is not recorded

    Args:
        initial_position: Body position at t = 0.
        initial_velocity: Body velocity at t = 0.
        config: Attractor, time step and step budget.
        force_model: Acceleration source. Defaults to point-mass gravity
            of ``config.attractor``.

    Returns:
        OrbitTrace with the recorded samples and the completion flag.

    Raises:
        DegenerateInputError: If the body starts on the attractor, has zero
            angular momentum, or later collides with the attractor.
    """
    attractor = config.attractor
    mu = attractor.mu
    h = config.time_step
    attractor_pos = np.asarray(attractor.position, dtype=np.float64)

    if force_model is None:
        def accel_fn(p: np.ndarray, v: np.ndarray) -> np.ndarray:
            return _acceleration_array(p, attractor)
    else:
        def accel_fn(p: np.ndarray, v: np.ndarray) -> np.ndarray:
            return np.asarray(force_model.acceleration(as_vec3(p), as_vec3(v)))

    pos = np.asarray(as_vec3(initial_position), dtype=np.float64)
    vel = np.asarray(as_vec3(initial_velocity), dtype=np.float64)
    r_rel = pos - attractor_pos
    if float(np.linalg.norm(r_rel)) == 0.0:
        raise DegenerateInputError("Initial position coincides with the attractor")

    tracker = RevolutionTracker(r_rel, np.cross(r_rel, vel))
    samples: list[StateSample] = [
        _make_sample(0, 0.0, _true_anomaly_deg(r_rel, vel, mu), pos, vel, attractor_pos),
    ]

    completed = False
    while len(samples) < config.max_steps:
        pos, vel = euler_step(pos, vel, h, accel_fn)
        r_rel = pos - attractor_pos
        if float(np.linalg.norm(r_rel)) == 0.0:
            raise DegenerateInputError(
                f"Body collided with the attractor at step {len(samples)}"
            )

        if tracker.update(r_rel) is RevolutionPhase.COMPLETE:
            completed = True
            break

        step = len(samples)
        samples.append(_make_sample(
            step, step * h, _true_anomaly_deg(r_rel, vel, mu), pos, vel, attractor_pos,
        ))

    if completed:
        logger.debug(
            "Revolution completed after %d samples (%.3f s)",
            len(samples), len(samples) * h,
        )
    else:
        logger.warning(
            "Step budget of %d exhausted before one revolution "
            "(swept %.2f deg); result is a partial arc",
            config.max_steps, tracker.swept_angle_deg,
        )

    return OrbitTrace(
        samples=tuple(samples),
        config=config,
        revolution_complete=completed,
        swept_angle_deg=tracker.swept_angle_deg,
    )


def relative_energy_drift(trace: OrbitTrace) -> float:
    """Largest relative deviation of specific energy from its initial value.

    max_i |E_i − E_0| / |E_0| over all samples. Zero for a single sample.
    """
    attractor = trace.config.attractor
    first = trace.samples[0]
    e0 = specific_orbital_energy(first.position, first.velocity, attractor)
    if e0 == 0.0:
        raise DegenerateInputError("Initial specific energy is zero (parabolic trajectory)")
    worst = 0.0
    for sample in trace.samples[1:]:
        e = specific_orbital_energy(sample.position, sample.velocity, attractor)
        worst = max(worst, abs(e - e0) / abs(e0))
    return worst
