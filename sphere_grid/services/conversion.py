"""Spherical to Cartesian conversion.

Axes Y and Z are swapped relative to the usual math notation: Y points up and
Z points forward, which is what game engines and most renderers expect.
``theta`` is the longitude angle and ``phi`` the latitude angle, both measured
with a quarter-turn bias so that zero offsets land on the forward (+Z) axis.
"""

from __future__ import annotations

import math
from typing import NamedTuple

import numpy as np

HALF_PI = math.pi / 2.0


class Point3(NamedTuple):
    x: float
    y: float
    z: float


ORIGIN = Point3(0.0, 0.0, 0.0)


def spherical_to_cartesian(radius: float, theta: float, phi: float) -> Point3:
    """Convert a single ``(radius, theta, phi)`` triple to a :class:`Point3`."""
    sin_phi = math.sin(phi)
    return Point3(
        x=radius * sin_phi * math.cos(theta),
        y=radius * math.cos(phi),
        z=radius * sin_phi * math.sin(theta),
    )


def spherical_to_cartesian_array(radius, theta, phi) -> np.ndarray:
    """Vectorised :func:`spherical_to_cartesian`.

    Inputs broadcast against each other; the result has the broadcast shape
    with a trailing axis of length 3 holding ``x, y, z`` as float64.
    """
    radius, theta, phi = np.broadcast_arrays(
        np.asarray(radius, dtype=np.float64),
        np.asarray(theta, dtype=np.float64),
        np.asarray(phi, dtype=np.float64),
    )
    sin_phi = np.sin(phi)
    return np.stack(
        [
            radius * sin_phi * np.cos(theta),
            radius * np.cos(phi),
            radius * sin_phi * np.sin(theta),
        ],
        axis=-1,
    )
