import math

import numpy as np
import pytest

from sphere_grid.services.conversion import (
    HALF_PI,
    Point3,
    spherical_to_cartesian,
    spherical_to_cartesian_array,
)


def test_zero_offsets_point_forward():
    # quarter-turn bias on both angles lands on +Z
    p = spherical_to_cartesian(5.0, HALF_PI, HALF_PI)
    assert isinstance(p, Point3)
    assert p == pytest.approx((0.0, 0.0, 5.0), abs=1e-12)


def test_y_is_up():
    p = spherical_to_cartesian(2.0, 0.3, 0.0)
    assert p == pytest.approx((0.0, 2.0, 0.0), abs=1e-12)


def test_theta_zero_on_equator_is_x():
    p = spherical_to_cartesian(3.0, 0.0, HALF_PI)
    assert p == pytest.approx((3.0, 0.0, 0.0), abs=1e-12)


def test_radius_preserved():
    p = spherical_to_cartesian(7.5, 1.1, 0.4)
    assert math.sqrt(p.x ** 2 + p.y ** 2 + p.z ** 2) == pytest.approx(7.5)


def test_array_matches_scalar():
    rng = np.random.default_rng(0)
    radius = rng.uniform(0.0, 10.0, size=20)
    theta = rng.uniform(0.0, 2.0 * math.pi, size=20)
    phi = rng.uniform(0.0, math.pi, size=20)
    out = spherical_to_cartesian_array(radius, theta, phi)
    assert out.shape == (20, 3)
    expected = [spherical_to_cartesian(r, t, p) for r, t, p in zip(radius, theta, phi)]
    assert np.allclose(out, np.array(expected))


def test_array_broadcasts_scalar_phi():
    radius = np.arange(6, dtype=float).reshape(2, 3)
    out = spherical_to_cartesian_array(radius, HALF_PI, HALF_PI)
    assert out.shape == (2, 3, 3)
    assert out.dtype == np.float64
    assert np.allclose(out[..., 2], radius)
