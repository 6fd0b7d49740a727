"""Raw-buffer adapter over :mod:`sphere_grid`.

This is the only place that deals with caller-supplied C memory; everything
behind it works on bounds-checked numpy arrays.
"""

from __future__ import annotations

from sphere_grid import BufferSizeError

from .bindings import (
    Coordinates,
    CoordinatesF32,
    allocate,
    count_points,
    generate_points,
)

__all__ = [
    "BufferSizeError",
    "Coordinates",
    "CoordinatesF32",
    "allocate",
    "count_points",
    "generate_points",
]
