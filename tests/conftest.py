# tests/conftest.py
import math
import os
import sys

import pytest

# add the project root (one level up) onto sys.path
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from sphere_grid import AxisSpec, GridConfig


@pytest.fixture
def radial_spec():
    # ten shells, 100 units apart
    return AxisSpec(1000.0, 10)


@pytest.fixture
def full_sphere_config(radial_spec):
    """Full-circle longitude and full-span latitude, both dedup rules active."""
    return GridConfig.sphere(
        radial_spec,
        AxisSpec(2.0 * math.pi, 4),
        AxisSpec(math.pi, 4),
    )
