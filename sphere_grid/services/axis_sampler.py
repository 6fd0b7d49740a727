"""Per-axis sampling for spherical point grids.

An axis is described by an :class:`AxisSpec` (a span and a subdivision count).
:func:`axis_layout` turns the spec into an :class:`AxisLayout`, an index window
over evenly spaced offsets. Both :func:`sample_count` and
:func:`sample_offsets` read that one layout, so the number of offsets reported
for an axis always matches the offsets that are materialised for it.
"""

from __future__ import annotations

import enum
import logging
import math
from dataclasses import dataclass
from typing import NamedTuple

import numpy as np

from sphere_grid.constants import FULL_TURN_TOLERANCE

logger = logging.getLogger(__name__)

FULL_TURN = 2.0 * math.pi
HALF_TURN = math.pi


class Axis(enum.Enum):
    RADIUS = "radius"
    LONGITUDE = "longitude"
    LATITUDE = "latitude"


# Upper clamp for the span of each angular axis, in radians.
_ANGULAR_LIMITS = {
    Axis.LONGITUDE: FULL_TURN,
    Axis.LATITUDE: HALF_TURN,
}


@dataclass(frozen=True)
class AxisSpec:
    """Span and subdivision count of one axis.

    ``range`` is in radians for angular axes and in caller units for the
    radial axis. Negative or non-finite spans clamp to ``0`` and resolutions
    are floored to a non-negative integer (``0`` when negative, NaN or
    infinite), so every spec describes a valid axis.
    """

    range: float = 0.0
    resolution: int = 0

    def __post_init__(self) -> None:
        span = float(self.range)
        if not 0.0 < span < math.inf:
            span = 0.0
        resolution = float(self.resolution)
        resolution = int(math.floor(resolution)) if 0.0 < resolution < math.inf else 0
        object.__setattr__(self, "range", span)
        object.__setattr__(self, "resolution", resolution)

    @classmethod
    def from_step(cls, span: float, step: float) -> "AxisSpec":
        """Build a spec from a span and a step length in the same unit.

        The subdivision count is the number of whole steps that fit in
        ``span``. A non-positive ``step`` yields a degenerate axis.
        """
        if not step > 0.0:
            return cls(span, 0)
        # 1e-9 absorbs float noise such as 0.3 / 0.1 == 2.9999999999999996
        return cls(span, span / step + 1e-9)


class AxisLayout(NamedTuple):
    """Offsets ``step * i - half_span`` for ``i`` in ``range(first, stop)``."""

    step: float
    half_span: float
    first: int
    stop: int

    @property
    def count(self) -> int:
        return self.stop - self.first


_SINGLE_SAMPLE = AxisLayout(step=0.0, half_span=0.0, first=0, stop=1)
_NO_SAMPLES = AxisLayout(step=0.0, half_span=0.0, first=1, stop=1)


def is_full_turn(span: float, turn: float) -> bool:
    """Return ``True`` when ``span`` equals ``turn`` within the full-turn tolerance."""
    return math.isclose(span, turn, rel_tol=0.0, abs_tol=FULL_TURN_TOLERANCE)


def clamp_span(axis: Axis, span: float) -> float:
    """Clamp ``span`` into the valid interval of ``axis``."""
    span = max(0.0, float(span))
    limit = _ANGULAR_LIMITS.get(axis)
    if limit is not None:
        span = min(span, limit)
    return span


def axis_layout(axis: Axis, spec: AxisSpec) -> AxisLayout:
    """Compute the index window describing the samples of ``axis``.

    The radial axis yields radii ``step * i`` for ``i = 1..resolution``; the
    origin is not part of it. Angular axes are centred on zero, drop the
    duplicate meridian of a full circle and the poles of a full half-turn,
    and never have fewer than one sample.
    """
    if axis is Axis.RADIUS:
        if spec.resolution == 0 or spec.range == 0.0:
            return _NO_SAMPLES
        return AxisLayout(
            step=spec.range / spec.resolution,
            half_span=0.0,
            first=1,
            stop=spec.resolution + 1,
        )

    if spec.resolution <= 1 or spec.range == 0.0:
        return _SINGLE_SAMPLE

    span = clamp_span(axis, spec.range)
    first, stop = 0, spec.resolution + 1
    if axis is Axis.LONGITUDE and is_full_turn(span, FULL_TURN):
        # last meridian coincides with the first one
        stop -= 1
    elif axis is Axis.LATITUDE and is_full_turn(span, HALF_TURN):
        # poles
        first += 1
        stop -= 1

    if stop - first < 1:
        logger.debug("%s axis collapsed to a single sample", axis.value)
        return _SINGLE_SAMPLE

    return AxisLayout(
        step=span / spec.resolution,
        half_span=span / 2.0,
        first=first,
        stop=stop,
    )


def sample_count(axis: Axis, spec: AxisSpec) -> int:
    """Number of samples :func:`sample_offsets` produces, without building them."""
    return axis_layout(axis, spec).count


def sample_offsets(axis: Axis, spec: AxisSpec) -> np.ndarray:
    """Materialise the ascending sample offsets of ``axis`` as a float64 array."""
    layout = axis_layout(axis, spec)
    indices = np.arange(layout.first, layout.stop, dtype=np.float64)
    return layout.step * indices - layout.half_span
