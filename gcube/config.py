'''Runtime limits. The initial voxel bound may be overridden with the
GCUBE_MAX_VOXELS environment variable.
'''

import os

DEFAULT_MAX_VOXELS = 512**3

def _validate_max_voxels(n):
    try:
        n = int(n)
    except (TypeError, ValueError):
        raise ValueError('invalid voxel limit {!r}'.format(n))
    if n <= 0:
        raise ValueError('voxel limit must be positive, not {:d}'.format(n))
    return n

_max_voxels = _validate_max_voxels(os.environ.get('GCUBE_MAX_VOXELS', DEFAULT_MAX_VOXELS))

def set_max_voxels(n):
    '''Set the largest number of voxels a single grid may hold.'''
    global _max_voxels
    _max_voxels = _validate_max_voxels(n)

def get_max_voxels():
    return _max_voxels
