# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Three-component vector helpers backed by NumPy.

Vectors are plain immutable 3-tuples of floats. Every helper converts to
an ndarray, does the arithmetic, and hands a tuple back.
"""
import numpy as np

Vec3 = tuple[float, float, float]

ORIGIN: Vec3 = (0.0, 0.0, 0.0)


def as_vec3(values) -> Vec3:
    """Coerce any 3-element sequence or array to a float 3-tuple."""
    arr = np.asarray(values, dtype=np.float64)
    if arr.shape != (3,):
        raise ValueError(f"Expected 3 components, got shape {arr.shape}")
    return (float(arr[0]), float(arr[1]), float(arr[2]))


def vec_add(a: Vec3, b: Vec3) -> Vec3:
    """a + b."""
    return as_vec3(np.asarray(a) + np.asarray(b))


def vec_sub(a: Vec3, b: Vec3) -> Vec3:
    """a - b."""
    return as_vec3(np.asarray(a) - np.asarray(b))


def vec_scale(a: Vec3, scalar: float) -> Vec3:
    """Scale every component of a by scalar."""
    return as_vec3(np.asarray(a) * scalar)


def vec_dot(a: Vec3, b: Vec3) -> float:
    """Dot product a . b."""
    return float(np.dot(a, b))


def vec_cross(a: Vec3, b: Vec3) -> Vec3:
    """Right-handed cross product a x b."""
    return as_vec3(np.cross(a, b))


def vec_norm(a: Vec3) -> float:
    """Euclidean magnitude |a|."""
    return float(np.linalg.norm(a))


def vec_normalize(a: Vec3) -> Vec3:
    """Unit vector along a.

    Raises:
        ValueError: If a has zero length.
    """
    n = vec_norm(a)
    if n == 0.0:
        raise ValueError("Cannot normalize a zero-length vector")
    return as_vec3(np.asarray(a) / n)
