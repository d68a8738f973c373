import numpy as np

import gcube
from gcube import config

class Cube:
    '''An axis-aligned 3-D lattice of scalar samples. `origin` and `spacing`
    are in Angstrom. Samples are stored flat in cube-file scan order: x
    slowest, z fastest.'''
    def __init__(self, name=None, identifier=None):
        self.name = name

        # Opaque grid identifier from a multi-grid file, if any
        self.identifier = identifier

        self._origin = np.zeros(3, dtype=np.float64)
        self._spacing = np.zeros(3, dtype=np.float64)
        self._dimensions = (0, 0, 0)
        self._data = np.empty(0, dtype=gcube.data.scalar_dtype)

    def __repr__(self):
        return '<Cube at {:#x}, dimensions={}, origin={}, spacing={}>'\
                .format(id(self), self._dimensions, self._origin, self._spacing)

    def set_limits(self, origin, dimensions, spacing):
        '''Set the lattice frame. Validates `dimensions` against the configured
        voxel limit before any sample buffer is allocated.'''
        dimensions = tuple(int(n) for n in dimensions)
        if len(dimensions) != 3 or any(n <= 0 for n in dimensions):
            raise ValueError('grid dimensions must be three positive integers, not {!r}'
                             .format(dimensions))
        nvoxels = dimensions[0] * dimensions[1] * dimensions[2]
        if nvoxels > config.get_max_voxels():
            raise ValueError('grid of {:d}x{:d}x{:d} = {:d} voxels exceeds the limit of {:d}'
                             .format(*dimensions, nvoxels, config.get_max_voxels()))

        origin = np.array(origin, dtype=np.float64)
        spacing = np.array(spacing, dtype=np.float64)
        if origin.shape != (3,) or spacing.shape != (3,):
            raise ValueError('origin and spacing must be 3-vectors')

        self._origin = origin
        self._spacing = spacing
        self._dimensions = dimensions
        if self._data.size != nvoxels:
            self._data = np.zeros(nvoxels, dtype=gcube.data.scalar_dtype)

    def set_data(self, values):
        '''Replace the sample buffer. `values` is either flat, in scan order,
        or shaped (nx, ny, nz).'''
        values = np.asarray(values, dtype=gcube.data.scalar_dtype)
        if values.ndim == 3 and values.shape != self._dimensions:
            raise ValueError('data shape {} does not match grid dimensions {}'
                             .format(values.shape, self._dimensions))
        values = values.reshape(-1)
        if values.size != self.voxel_count():
            raise ValueError('expected {:d} values for a {:d}x{:d}x{:d} grid, got {:d}'
                             .format(self.voxel_count(), *self._dimensions, values.size))
        self._data = values.copy()

    def data(self):
        return self._data

    def values3d(self):
        return self._data.reshape(self._dimensions)

    def min(self):
        return self._origin.copy()

    def max(self):
        '''Position of the last lattice point'''
        return self._origin + self._spacing * (np.array(self._dimensions) - 1)

    def spacing(self):
        return self._spacing.copy()

    def dimensions(self):
        return self._dimensions

    def voxel_count(self):
        nx, ny, nz = self._dimensions
        return nx * ny * nz

    def index(self, i, j, k):
        _nx, ny, nz = self._dimensions
        return (i * ny + j) * nz + k

    def value(self, i, j, k):
        return float(self._data[self.index(i, j, k)])

    def position(self, i, j, k):
        return self._origin + self._spacing * np.array([i, j, k], dtype=np.float64)

    def min_value(self):
        return float(self._data.min()) if self._data.size else None

    def max_value(self):
        return float(self._data.max()) if self._data.size else None
