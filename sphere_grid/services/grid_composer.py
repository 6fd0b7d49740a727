"""Compose per-axis samples into a Cartesian point grid.

The grid always starts with the origin, followed by the cross product of the
radial, latitude and longitude samples (radius outermost, longitude
innermost). :func:`count_points` predicts the length of that sequence without
building it; :func:`generate_points` and :func:`fill_points` build it into an
owned or a borrowed buffer through the same writer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, Tuple

import numpy as np

from sphere_grid.constants import DEFAULT_PRECISION
from .axis_sampler import Axis, AxisSpec, sample_count, sample_offsets
from .conversion import HALF_PI, Point3, spherical_to_cartesian_array

logger = logging.getLogger(__name__)

SUPPORTED_DIMENSIONALITIES = (1, 2, 3)

# Axes that take part in the grid for each dimensionality.
_ACTIVE_AXES = {
    1: (Axis.RADIUS,),
    2: (Axis.RADIUS, Axis.LONGITUDE),
    3: (Axis.RADIUS, Axis.LONGITUDE, Axis.LATITUDE),
}


class GridConfigError(ValueError):
    """Raised when a grid configuration cannot be interpreted."""
    pass


class BufferSizeError(ValueError):
    """Raised when an output buffer cannot hold the requested grid."""
    pass


@dataclass(frozen=True)
class GridConfig:
    """Axis specs of a 1D, 2D or 3D grid.

    Specs of axes that are not active for ``dimensionality`` are kept but
    ignored: they contribute a single zero offset.
    """

    dimensionality: int
    radius: AxisSpec = field(default_factory=AxisSpec)
    longitude: AxisSpec = field(default_factory=AxisSpec)
    latitude: AxisSpec = field(default_factory=AxisSpec)

    def __post_init__(self) -> None:
        if self.dimensionality not in SUPPORTED_DIMENSIONALITIES:
            raise GridConfigError(
                f"dimensionality must be one of {SUPPORTED_DIMENSIONALITIES}, "
                f"got {self.dimensionality!r}"
            )

    @classmethod
    def line(cls, radius: AxisSpec) -> "GridConfig":
        return cls(1, radius=radius)

    @classmethod
    def plane(cls, radius: AxisSpec, longitude: AxisSpec) -> "GridConfig":
        return cls(2, radius=radius, longitude=longitude)

    @classmethod
    def sphere(
        cls, radius: AxisSpec, longitude: AxisSpec, latitude: AxisSpec
    ) -> "GridConfig":
        return cls(3, radius=radius, longitude=longitude, latitude=latitude)

    @property
    def active_axes(self) -> Tuple[Axis, ...]:
        return _ACTIVE_AXES[self.dimensionality]

    def spec_for(self, axis: Axis) -> AxisSpec:
        return getattr(self, axis.value)


def _axis_count(config: GridConfig, axis: Axis) -> int:
    if axis not in config.active_axes:
        return 1
    return sample_count(axis, config.spec_for(axis))


def count_points(config: GridConfig) -> int:
    """Return the exact number of points :func:`generate_points` produces.

    A radial axis with no samples (zero resolution or zero range) leaves only
    the origin, so the count is ``1`` whatever the angular axes hold.
    """
    radial = _axis_count(config, Axis.RADIUS)
    if radial == 0:
        total = 1
    else:
        total = (
            1
            + radial
            * _axis_count(config, Axis.LONGITUDE)
            * _axis_count(config, Axis.LATITUDE)
        )
    logger.debug(
        "counted %d points",
        total,
        extra={"dimensionality": config.dimensionality, "point_count": total},
    )
    return total


def _expand(config: GridConfig, radii: np.ndarray) -> np.ndarray:
    """Cartesian points for every sample after the origin, as an (n, 3) float64 array."""
    if config.dimensionality == 1:
        block = np.zeros((radii.size, 3), dtype=np.float64)
        block[:, 2] = radii
        return block

    theta = HALF_PI + sample_offsets(Axis.LONGITUDE, config.longitude)
    if config.dimensionality == 2:
        r, t = np.meshgrid(radii, theta, indexing="ij")
        return spherical_to_cartesian_array(r, t, HALF_PI).reshape(-1, 3)

    phi = HALF_PI + sample_offsets(Axis.LATITUDE, config.latitude)
    r, p, t = np.meshgrid(radii, phi, theta, indexing="ij")
    return spherical_to_cartesian_array(r, t, p).reshape(-1, 3)


def _write_points(config: GridConfig, out: np.ndarray) -> int:
    """Write the grid of ``config`` into the leading rows of ``out``.

    ``out`` must already hold at least :func:`count_points` rows. Returns the
    number of rows written.
    """
    out[0] = 0.0
    radii = sample_offsets(Axis.RADIUS, config.radius)
    if radii.size == 0:
        return 1
    block = _expand(config, radii)
    out[1 : 1 + len(block)] = block
    return 1 + len(block)


def _resolve_dtype(dtype) -> np.dtype:
    resolved = np.dtype(DEFAULT_PRECISION if dtype is None else dtype)
    if resolved.kind != "f":
        raise GridConfigError(f"point precision must be a floating dtype, got {resolved}")
    return resolved


def generate_points(config: GridConfig, dtype=None) -> np.ndarray:
    """Build the grid of ``config`` into a new ``(count, 3)`` array.

    ``dtype`` selects the precision of the result (``float32`` or
    ``float64``; defaults to the package's configured precision).
    """
    expected = count_points(config)
    out = np.empty((expected, 3), dtype=_resolve_dtype(dtype))
    written = _write_points(config, out)
    if written != expected:
        raise RuntimeError(
            f"grid writer produced {written} points but {expected} were counted"
        )
    logger.debug(
        "generated %d points",
        written,
        extra={"dimensionality": config.dimensionality, "point_count": written},
    )
    return out


def fill_points(config: GridConfig, out: np.ndarray) -> int:
    """Write the grid of ``config`` into the caller-owned array ``out``.

    ``out`` must be a writable floating array of shape ``(n, 3)`` with
    ``n >= count_points(config)``. Only the first ``count_points(config)``
    rows are written; the rest are left untouched. Returns the number of rows
    written.

    Raises
    ------
    BufferSizeError
        If ``out`` is too short or has the wrong shape or dtype. Nothing is
        written in that case.
    """
    expected = count_points(config)
    if not isinstance(out, np.ndarray) or out.ndim != 2 or out.shape[1] != 3:
        shape = getattr(out, "shape", None)
        raise BufferSizeError(f"output buffer must have shape (n, 3), got {shape}")
    if out.dtype.kind != "f":
        raise BufferSizeError(f"output buffer must be floating point, got {out.dtype}")
    if not out.flags.writeable:
        raise BufferSizeError("output buffer is read-only")
    if out.shape[0] < expected:
        raise BufferSizeError(
            f"output buffer holds {out.shape[0]} points but {expected} are required"
        )

    written = _write_points(config, out)
    if written != expected:
        raise RuntimeError(
            f"grid writer produced {written} points but {expected} were counted"
        )
    logger.debug(
        "filled %d points",
        written,
        extra={"dimensionality": config.dimensionality, "point_count": written},
    )
    return written


def iter_points(config: GridConfig, dtype=None) -> Iterator[Point3]:
    """Yield the grid of ``config`` as :class:`Point3` values, origin first."""
    for x, y, z in generate_points(config, dtype=dtype).tolist():
        yield Point3(x, y, z)
