# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Propagation scenario: initial body state plus integration settings.
"""
from dataclasses import dataclass, replace

from orbit_tracer.domain.orbit_propagation import PropagationConfig
from orbit_tracer.domain.vector import Vec3

DEFAULT_TIME_STEP_S = 1.0
DEFAULT_MAX_STEPS = 100_000


@dataclass(frozen=True)
class Scenario:
    """A named body with its initial state and propagation settings."""
    name: str
    initial_position: Vec3
    initial_velocity: Vec3
    config: PropagationConfig

    def with_overrides(
        self,
        time_step: float | None = None,
        max_steps: int | None = None,
    ) -> "Scenario":
        """Copy of this scenario with the given integration settings replaced."""
        config = self.config
        if time_step is not None:
            config = replace(config, time_step=time_step)
        if max_steps is not None:
            config = replace(config, max_steps=max_steps)
        return replace(self, config=config)
