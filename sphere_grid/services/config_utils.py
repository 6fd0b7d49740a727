from __future__ import annotations

import logging
import math
from typing import Optional

from sphere_grid.constants import DEFAULT_ANGLE_UNIT
from .axis_sampler import AxisSpec
from .grid_composer import GridConfig, GridConfigError

logger = logging.getLogger(__name__)

ANGLE_UNITS = ("degrees", "radians")
RESOLUTION_MODES = ("subdivisions", "step")


def _axis_spec(span: float, resolution: float, mode: str, to_radians: bool) -> AxisSpec:
    if mode == "step":
        # step and span share a unit, so divide before converting angles
        spec = AxisSpec.from_step(span, resolution)
    else:
        spec = AxisSpec(span, resolution)
    if to_radians:
        spec = AxisSpec(math.radians(spec.range), spec.resolution)
    return spec


def resolve_grid_config(
    dimensionality: int,
    radius_resolution: float,
    radius_range: float,
    longitude_resolution: float = 0,
    longitude_range: float = 0.0,
    latitude_resolution: float = 0,
    latitude_range: float = 0.0,
    *,
    angle_unit: Optional[str] = None,
    resolution_mode: Optional[str] = None,
) -> GridConfig:
    """Normalize flat per-axis arguments into a :class:`GridConfig`.

    Parameters
    ----------
    dimensionality:
        ``1`` (radius only), ``2`` (radius and longitude) or ``3`` (all axes).
    radius_resolution, radius_range:
        Radial axis. The range is in caller units and is never converted.
    longitude_resolution, longitude_range, latitude_resolution, latitude_range:
        Angular axes. Ignored when ``dimensionality`` does not include them.
    angle_unit:
        ``"degrees"`` or ``"radians"``; unit of the angular ranges (and of the
        angular steps in ``"step"`` mode). Defaults to
        :data:`~sphere_grid.constants.DEFAULT_ANGLE_UNIT`.
    resolution_mode:
        ``"subdivisions"`` (default) treats resolutions as the number of
        steps along each axis. ``"step"`` treats them as step lengths in the
        unit of the matching range, and converts them to the number of whole
        steps that fit.
    """

    angle_unit = angle_unit or DEFAULT_ANGLE_UNIT
    if angle_unit not in ANGLE_UNITS:
        raise GridConfigError(f"angle_unit must be one of {ANGLE_UNITS}, got {angle_unit!r}")
    mode = resolution_mode or "subdivisions"
    if mode not in RESOLUTION_MODES:
        raise GridConfigError(
            f"resolution_mode must be one of {RESOLUTION_MODES}, got {mode!r}"
        )

    to_radians = angle_unit == "degrees"
    config = GridConfig(
        dimensionality,
        radius=_axis_spec(radius_range, radius_resolution, mode, False),
        longitude=_axis_spec(longitude_range, longitude_resolution, mode, to_radians),
        latitude=_axis_spec(latitude_range, latitude_resolution, mode, to_radians),
    )
    logger.debug("resolved grid config %s", config)
    return config
