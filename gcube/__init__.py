'''Reading and writing Gaussian cube volumetric data files.'''

__version__ = '0.1.0'

from . import config, parser, data, formats

from .data import Molecule, Cube
from .formats import GaussianCube, FormatError, InvalidModelState, load, dump
