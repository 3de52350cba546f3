# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Simulation-compatible vector serialization.

Scene files store vectors as semicolon-delimited strings in a Y-up frame.
The inertial frame used by the domain is Z-up, so Y and Z are swapped on
the way in and out.
No external dependencies.
"""
import math

from orbit_tracer.domain.vector import Vec3


def parse_vector(text: str) -> Vec3:
    """
    Parse a simulation vector string into an inertial-frame vector.

    Simulation "x;y;z" → inertial (x, z, y)

    Args:
        text: Semicolon-delimited vector with three numeric components.

    Returns:
        Vector in the inertial (Z-up) frame.

    Raises:
        ValueError: If the string does not hold three finite numbers.
    """
    parts = [p.strip() for p in str(text).split(';')]
    if len(parts) != 3:
        raise ValueError(f"Expected 3 semicolon-separated components, got {text!r}")
    try:
        x, y, z = (float(p) for p in parts)
    except ValueError:
        raise ValueError(f"Non-numeric vector component in {text!r}") from None
    if not all(math.isfinite(c) for c in (x, y, z)):
        raise ValueError(f"Non-finite vector component in {text!r}")
    return (x, z, y)


def format_vector(vec: Vec3, decimals: int = 6) -> str:
    """
    Format an inertial-frame vector as a simulation string.

    Inertial (x, y, z) → Simulation "x;z;y"
    """
    x, y, z = vec[0], vec[1], vec[2]
    return f"{x:.{decimals}f};{z:.{decimals}f};{y:.{decimals}f}"
