import numpy as np
import pytest

from gcube.data import Cube


@pytest.fixture
def cube():
    cube = Cube()
    cube.set_limits([1.0, 2.0, 3.0], (2, 3, 4), [0.5, 0.25, 0.1])
    return cube


def test_set_limits(cube):
    assert cube.dimensions() == (2, 3, 4)
    np.testing.assert_allclose(cube.min(), [1.0, 2.0, 3.0])
    np.testing.assert_allclose(cube.spacing(), [0.5, 0.25, 0.1])
    np.testing.assert_allclose(cube.max(), [1.5, 2.5, 3.3])
    assert cube.voxel_count() == 24
    assert cube.data().shape == (24,)


@pytest.mark.parametrize('dimensions', [(0, 1, 1), (2, -3, 4), (1, 1)])
def test_set_limits_rejects_bad_dimensions(dimensions):
    with pytest.raises(ValueError):
        Cube().set_limits([0, 0, 0], dimensions, [1, 1, 1])


def test_set_limits_enforces_voxel_limit(max_voxels):
    max_voxels.set_max_voxels(100)
    cube = Cube()
    cube.set_limits([0, 0, 0], (4, 5, 5), [1, 1, 1])
    with pytest.raises(ValueError, match='exceeds the limit'):
        cube.set_limits([0, 0, 0], (5, 5, 5), [1, 1, 1])


def test_scan_order(cube):
    cube.set_data(np.arange(24))
    # z fastest, x slowest
    assert cube.value(0, 0, 1) == 1.0
    assert cube.value(0, 1, 0) == 4.0
    assert cube.value(1, 0, 0) == 12.0
    assert cube.value(1, 2, 3) == 23.0
    assert cube.values3d()[1, 2, 3] == 23.0


def test_set_data_3d(cube):
    values = np.arange(24, dtype=np.float64).reshape((2, 3, 4))
    cube.set_data(values)
    np.testing.assert_array_equal(cube.data(), np.arange(24))
    assert cube.data().dtype == np.float32


def test_set_data_wrong_length(cube):
    with pytest.raises(ValueError):
        cube.set_data(np.zeros(23))


def test_set_data_wrong_shape(cube):
    with pytest.raises(ValueError):
        cube.set_data(np.zeros((4, 3, 2)))


def test_position(cube):
    np.testing.assert_allclose(cube.position(1, 2, 3), [1.5, 2.5, 3.3])


def test_value_range(cube):
    assert Cube().min_value() is None
    cube.set_data(np.linspace(-1.0, 2.0, 24))
    assert cube.min_value() == pytest.approx(-1.0)
    assert cube.max_value() == pytest.approx(2.0)
