# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for the central gravity force model."""
import math

import pytest

from orbit_tracer.domain.errors import DegenerateInputError
from orbit_tracer.domain.gravity import (
    CentralGravity,
    ForceModel,
    gravitational_acceleration,
)
from orbit_tracer.domain.orbital_mechanics import Attractor, PhysicalConstants


@pytest.fixture
def unit_attractor():
    return Attractor(mass=1.0, gravitational_constant=1.0)


class TestGravitationalAcceleration:

    def test_inverse_square_magnitude(self, unit_attractor):
        a1 = gravitational_acceleration((1.0, 0.0, 0.0), unit_attractor)
        a2 = gravitational_acceleration((2.0, 0.0, 0.0), unit_attractor)
        assert math.hypot(*a1) == pytest.approx(1.0)
        assert math.hypot(*a2) == pytest.approx(0.25)

    def test_points_at_attractor(self, unit_attractor):
        a = gravitational_acceleration((0.0, 3.0, 4.0), unit_attractor)
        # direction -(0, 0.6, 0.8), magnitude 1/25
        assert a == pytest.approx((0.0, -0.6 / 25.0, -0.8 / 25.0))

    def test_offset_attractor(self):
        attractor = Attractor(mass=2.0, gravitational_constant=0.5, position=(10.0, 0.0, 0.0))
        a = gravitational_acceleration((12.0, 0.0, 0.0), attractor)
        assert a == pytest.approx((-0.25, 0.0, 0.0))

    def test_earth_surface_gravity(self):
        attractor = Attractor(mass=PhysicalConstants.M_EARTH)
        a = gravitational_acceleration((PhysicalConstants.R_EARTH, 0.0, 0.0), attractor)
        assert math.hypot(*a) == pytest.approx(9.82, abs=0.02)

    def test_coincident_positions_raise(self, unit_attractor):
        with pytest.raises(DegenerateInputError):
            gravitational_acceleration((0.0, 0.0, 0.0), unit_attractor)


class TestCentralGravity:

    def test_satisfies_force_model_protocol(self, unit_attractor):
        assert isinstance(CentralGravity(unit_attractor), ForceModel)

    def test_ignores_velocity(self, unit_attractor):
        model = CentralGravity(unit_attractor)
        a1 = model.acceleration((1.0, 1.0, 0.0), (0.0, 0.0, 0.0))
        a2 = model.acceleration((1.0, 1.0, 0.0), (5.0, -3.0, 2.0))
        assert a1 == a2
        assert model.attractor is unit_attractor
