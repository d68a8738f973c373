'''Length unit conversions. Cube files store geometry in Bohr; the in-memory
model uses Angstrom.
'''

import numpy as np

BOHR_TO_ANGSTROM = 0.52917721092
ANGSTROM_TO_BOHR = 1.0 / BOHR_TO_ANGSTROM

def _scale(value, factor):
    if np.isscalar(value):
        return value * factor
    return np.asarray(value, dtype=np.float64) * factor

def bohr_to_angstrom(value):
    return _scale(value, BOHR_TO_ANGSTROM)

def angstrom_to_bohr(value):
    return _scale(value, ANGSTROM_TO_BOHR)
