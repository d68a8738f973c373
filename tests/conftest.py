import io
import logging

import pytest

from gcube import config

WATER_CUBE = '''\
Water density
SCF Total Density
    3   -1.000000   -2.000000   -3.000000    1
    2    0.500000    0.000000    0.000000
    2    0.000000    0.400000    0.000000
    3    0.000000    0.000000    0.300000
    8    8.000000    0.000000    0.000000    0.000000
    1    1.000000    1.430000    1.110000    0.000000
    1    1.000000   -1.430000    1.110000    0.000000
  1.00000e+00  2.00000e+00  3.00000e+00  4.00000e+00  5.00000e+00  6.00000e+00
  7.00000e+00  8.00000e+00  9.00000e+00  1.00000e+01  1.10000e+01  1.20000e+01
'''

# Two stacked orbitals sharing one lattice, selected by a negative atom count
MO_CUBE = '''\
H2 orbitals
MO coefficients
   -2    0.000000    0.000000    0.000000
    1    0.200000    0.000000    0.000000
    2    0.000000    0.200000    0.000000
    3    0.000000    0.000000    0.200000
    1    1.000000    0.000000    0.000000    0.000000
    1    1.000000    0.000000    0.000000    1.400000
    2    5    6
 0.1 0.2 0.3 0.4 0.5 0.6
-0.1 -0.2 -0.3 -0.4 -0.5 -0.6
'''


@pytest.fixture
def water_cube_text():
    return WATER_CUBE


@pytest.fixture
def mo_cube_text():
    return MO_CUBE


@pytest.fixture
def water_cube_file():
    return io.StringIO(WATER_CUBE)


@pytest.fixture
def mo_cube_file():
    return io.StringIO(MO_CUBE)


@pytest.fixture
def max_voxels():
    '''Restore the voxel limit after a test changes it.'''
    saved = config.get_max_voxels()
    yield config
    config.set_max_voxels(saved)


@pytest.fixture
def reset_gcube_logger():
    yield
    logger = logging.getLogger('gcube')
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
