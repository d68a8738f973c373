'''Data model.'''

import numpy as np

# Atomic numbers are stored in a single byte, as in the cube format itself
atomicnumber_dtype = np.uint8

# Grid samples
scalar_dtype = np.float32

del np

from . import units, elements, io

from .cube import Cube
from .molecule import Molecule, Atom, normalize_atoms
from .propertyset import PropertySet
