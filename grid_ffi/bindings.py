"""Raw-buffer entry points for hosts that hand over C memory.

Callers first ask :func:`count_points` how many :class:`Coordinates` the
region must hold, allocate it (for example with :func:`allocate`), then call
:func:`generate_points` with a pointer to the region and its length. The
length is checked against :func:`count_points` before anything is written; a
short region raises :class:`BufferSizeError` instead of being overrun. The
pointer and the length are trusted to describe the same region, which the
caller is responsible for.
"""

from __future__ import annotations

import ctypes
import logging
from typing import Optional

import numpy as np

from sphere_grid import (
    BufferSizeError,
    GridConfigError,
    count_points as _count_grid,
    fill_points,
    resolve_grid_config,
)
from sphere_grid.constants import DEFAULT_PRECISION, DEFAULT_RESOLUTION_MODE

logger = logging.getLogger(__name__)


class Coordinates(ctypes.Structure):
    """Cartesian point stored as three C doubles."""

    _fields_ = [
        ("x", ctypes.c_double),
        ("y", ctypes.c_double),
        ("z", ctypes.c_double),
    ]


class CoordinatesF32(ctypes.Structure):
    """Cartesian point stored as three C floats."""

    _fields_ = [
        ("x", ctypes.c_float),
        ("y", ctypes.c_float),
        ("z", ctypes.c_float),
    ]


_SCALARS = {
    Coordinates: ctypes.c_double,
    CoordinatesF32: ctypes.c_float,
}

_STRUCTS = {
    "float64": Coordinates,
    "float32": CoordinatesF32,
}


def allocate(count: int, precision: Optional[str] = None) -> ctypes.Array:
    """Return a zeroed ctypes array of ``count`` coordinate structures."""
    precision = precision or DEFAULT_PRECISION
    struct = _STRUCTS.get(precision)
    if struct is None:
        raise GridConfigError(f"precision must be one of {sorted(_STRUCTS)}, got {precision!r}")
    return (struct * count)()


def count_points(
    dimensionality: int,
    radius_resolution: float,
    radius_range: float,
    longitude_resolution: float = 0,
    longitude_range: float = 0.0,
    latitude_resolution: float = 0,
    latitude_range: float = 0.0,
    *,
    angle_unit: Optional[str] = None,
    resolution_mode: Optional[str] = DEFAULT_RESOLUTION_MODE,
) -> int:
    """Return the number of coordinates :func:`generate_points` writes.

    Resolutions are step lengths in the unit of their range by default
    (``resolution_mode="step"``), so ``count_points(1, 100, 1000)`` is ``11``:
    the origin and ten shells. Pass ``resolution_mode="subdivisions"`` to
    give the number of steps per axis instead.
    """
    config = resolve_grid_config(
        dimensionality,
        radius_resolution,
        radius_range,
        longitude_resolution,
        longitude_range,
        latitude_resolution,
        latitude_range,
        angle_unit=angle_unit,
        resolution_mode=resolution_mode,
    )
    return _count_grid(config)


def _element_pointer(slice_ptr):
    """Return ``(pointer, struct type)`` for a ctypes array or pointer."""
    if isinstance(slice_ptr, ctypes.Array):
        struct = slice_ptr._type_
        return ctypes.cast(slice_ptr, ctypes.POINTER(struct)), struct
    if isinstance(slice_ptr, ctypes._Pointer):
        if not slice_ptr:
            raise BufferSizeError("output region is a null pointer")
        return slice_ptr, slice_ptr._type_
    raise BufferSizeError(
        f"output region must be a ctypes array or pointer, got {type(slice_ptr).__name__}"
    )


def generate_points(
    dimensionality: int,
    radius_resolution: float,
    radius_range: float,
    longitude_resolution: float,
    longitude_range: float,
    latitude_resolution: float,
    latitude_range: float,
    slice_ptr,
    slice_len: int,
    *,
    angle_unit: Optional[str] = None,
    resolution_mode: Optional[str] = DEFAULT_RESOLUTION_MODE,
) -> None:
    """Fill the caller-owned region ``slice_ptr[:slice_len]`` with grid points.

    ``slice_ptr`` is a ctypes array or pointer of :class:`Coordinates` or
    :class:`CoordinatesF32`. ``slice_len`` must be at least the value
    :func:`count_points` returns for the same arguments; only that many
    elements are written.
    Resolutions follow the same convention as in :func:`count_points`.

    Raises
    ------
    BufferSizeError
        If the region is null, too short, or of an unsupported element type.
    """
    config = resolve_grid_config(
        dimensionality,
        radius_resolution,
        radius_range,
        longitude_resolution,
        longitude_range,
        latitude_resolution,
        latitude_range,
        angle_unit=angle_unit,
        resolution_mode=resolution_mode,
    )
    required = _count_grid(config)
    pointer, struct = _element_pointer(slice_ptr)

    scalar = _SCALARS.get(struct)
    if scalar is None:
        raise BufferSizeError(f"unsupported element type {struct.__name__}")
    if isinstance(slice_ptr, ctypes.Array) and slice_len > len(slice_ptr):
        raise BufferSizeError(
            f"slice_len {slice_len} exceeds the array length {len(slice_ptr)}"
        )
    if slice_len < required:
        logger.error(
            "output region too short: %d < %d",
            slice_len,
            required,
            extra={"dimensionality": dimensionality, "point_count": required},
        )
        raise BufferSizeError(
            f"output region holds {slice_len} points but {required} are required"
        )

    flat = ctypes.cast(pointer, ctypes.POINTER(scalar))
    view = np.ctypeslib.as_array(flat, shape=(required, 3))
    fill_points(config, view)
