# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for the 3-vector helpers."""
import math

import numpy as np
import pytest

from orbit_tracer.domain.vector import (
    ORIGIN,
    as_vec3,
    vec_add,
    vec_cross,
    vec_dot,
    vec_norm,
    vec_normalize,
    vec_scale,
    vec_sub,
)


class TestVectorHelpers:

    def test_as_vec3_returns_float_tuple(self):
        v = as_vec3(np.array([1, 2, 3]))
        assert v == (1.0, 2.0, 3.0)
        assert all(type(c) is float for c in v)

    def test_as_vec3_rejects_wrong_length(self):
        with pytest.raises(ValueError):
            as_vec3([1.0, 2.0])

    def test_add_sub_scale(self):
        a = (1.0, 2.0, 3.0)
        b = (0.5, -1.0, 4.0)
        assert vec_add(a, b) == (1.5, 1.0, 7.0)
        assert vec_sub(a, b) == (0.5, 3.0, -1.0)
        assert vec_scale(a, 2.0) == (2.0, 4.0, 6.0)

    def test_dot_and_cross(self):
        x = (1.0, 0.0, 0.0)
        y = (0.0, 1.0, 0.0)
        assert vec_dot(x, y) == 0.0
        assert vec_cross(x, y) == (0.0, 0.0, 1.0)
        assert vec_cross(y, x) == (0.0, 0.0, -1.0)

    def test_norm_and_normalize(self):
        v = (3.0, 4.0, 0.0)
        assert vec_norm(v) == 5.0
        unit = vec_normalize(v)
        assert math.isclose(vec_norm(unit), 1.0)
        assert unit == pytest.approx((0.6, 0.8, 0.0))

    def test_normalize_zero_raises(self):
        with pytest.raises(ValueError):
            vec_normalize(ORIGIN)
