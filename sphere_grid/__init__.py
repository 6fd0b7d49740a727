"""Deterministic spherical point grids converted to Cartesian coordinates."""

from .services.axis_sampler import (
    Axis,
    AxisSpec,
    axis_layout,
    sample_count,
    sample_offsets,
)
from .services.config_utils import resolve_grid_config
from .services.conversion import (
    ORIGIN,
    Point3,
    spherical_to_cartesian,
    spherical_to_cartesian_array,
)
from .services.grid_composer import (
    BufferSizeError,
    GridConfig,
    GridConfigError,
    count_points,
    fill_points,
    generate_points,
    iter_points,
)

__all__ = [
    "Axis",
    "AxisSpec",
    "axis_layout",
    "sample_count",
    "sample_offsets",
    "resolve_grid_config",
    "ORIGIN",
    "Point3",
    "spherical_to_cartesian",
    "spherical_to_cartesian_array",
    "BufferSizeError",
    "GridConfig",
    "GridConfigError",
    "count_points",
    "fill_points",
    "generate_points",
    "iter_points",
]
