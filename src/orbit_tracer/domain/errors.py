# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Domain error types."""


class DegenerateInputError(ValueError):
    """Orbit geometry is undefined for the given state.

    Raised for coincident body/attractor positions, rectilinear
    trajectories (zero angular momentum), empty sample sequences, and,
    in strict element extraction, zero eccentricity or node vectors.
    """
