import ctypes
import logging

import numpy as np
import pytest

from grid_ffi import (
    BufferSizeError,
    Coordinates,
    CoordinatesF32,
    allocate,
    count_points,
    generate_points,
)
from sphere_grid import GridConfigError, generate_points as generate_grid, resolve_grid_config

SPHERE_ARGS = (3, 100, 1000, 90, 360, 45, 180)


def _as_rows(buf, n):
    return np.array([(c.x, c.y, c.z) for c in buf[:n]])


def test_structure_layout():
    assert ctypes.sizeof(Coordinates) == 3 * ctypes.sizeof(ctypes.c_double)
    assert ctypes.sizeof(CoordinatesF32) == 3 * ctypes.sizeof(ctypes.c_float)
    assert [name for name, _ in Coordinates._fields_] == ["x", "y", "z"]


def test_count_points_line():
    assert count_points(1, 100, 1000, resolution_mode="step") == 11


def test_count_points_sphere():
    assert count_points(*SPHERE_ARGS, resolution_mode="step") == 121


def test_generate_fills_region():
    n = count_points(*SPHERE_ARGS, resolution_mode="step")
    buf = allocate(n)
    generate_points(*SPHERE_ARGS, buf, n, resolution_mode="step")

    expected = generate_grid(resolve_grid_config(*SPHERE_ARGS, resolution_mode="step"))
    assert np.array_equal(_as_rows(buf, n), expected)
    assert (buf[0].x, buf[0].y, buf[0].z) == (0.0, 0.0, 0.0)


def test_generate_through_pointer():
    n = count_points(1, 100, 1000, resolution_mode="step")
    buf = allocate(n)
    ptr = ctypes.cast(buf, ctypes.POINTER(Coordinates))
    generate_points(1, 100, 1000, 0, 0, 0, 0, ptr, n, resolution_mode="step")
    assert [c.z for c in buf] == [100.0 * i for i in range(11)]


def test_generate_float32_region():
    n = count_points(*SPHERE_ARGS, resolution_mode="step")
    buf = allocate(n, "float32")
    assert buf._type_ is CoordinatesF32
    generate_points(*SPHERE_ARGS, buf, n, resolution_mode="step")
    expected = generate_grid(
        resolve_grid_config(*SPHERE_ARGS, resolution_mode="step"), dtype=np.float32
    )
    assert np.array_equal(_as_rows(buf, n).astype(np.float32), expected)


def test_larger_region_tail_untouched():
    n = count_points(*SPHERE_ARGS, resolution_mode="step")
    buf = allocate(n + 1)
    buf[n].x = 42.0
    generate_points(*SPHERE_ARGS, buf, n + 1, resolution_mode="step")
    assert buf[n].x == 42.0


def test_short_region_rejected_before_writing(caplog):
    n = count_points(*SPHERE_ARGS, resolution_mode="step")
    buf = allocate(n)
    for c in buf:
        c.x = c.y = c.z = 7.0

    with caplog.at_level(logging.ERROR, logger="grid_ffi.bindings"):
        with pytest.raises(BufferSizeError):
            generate_points(*SPHERE_ARGS, buf, n - 1, resolution_mode="step")

    assert all((c.x, c.y, c.z) == (7.0, 7.0, 7.0) for c in buf)
    assert any(getattr(r, "point_count", None) == n for r in caplog.records)


def test_null_pointer_rejected():
    with pytest.raises(BufferSizeError):
        generate_points(1, 1, 10, 0, 0, 0, 0, ctypes.POINTER(Coordinates)(), 100)


def test_length_beyond_array_rejected():
    buf = allocate(3)
    with pytest.raises(BufferSizeError):
        generate_points(1, 1, 10, 0, 0, 0, 0, buf, 50)


@pytest.mark.parametrize("region", [(ctypes.c_double * 300)(), [0.0] * 300])
def test_unsupported_region_rejected(region):
    with pytest.raises(BufferSizeError):
        generate_points(1, 1, 10, 0, 0, 0, 0, region, 100)


def test_default_resolutions_are_step_lengths():
    assert count_points(1, 100, 1000) == 11
    assert count_points(2, 100, 1000, 30, 180) == 1 + 10 * 7


def test_default_resolutions_match_explicit_step_mode():
    n = count_points(*SPHERE_ARGS)
    assert n == count_points(*SPHERE_ARGS, resolution_mode="step")
    buf = allocate(n)
    generate_points(*SPHERE_ARGS, buf, n)
    expected = generate_grid(resolve_grid_config(*SPHERE_ARGS, resolution_mode="step"))
    assert np.array_equal(_as_rows(buf, n), expected)


def test_subdivision_mode_at_boundary():
    assert count_points(1, 100, 1000, resolution_mode="subdivisions") == 101


def test_allocate_error_is_grid_config_error():
    with pytest.raises(GridConfigError):
        allocate(4, "float16")
