'''File formats.'''

class FormatError(RuntimeError):
    pass

class InvalidModelState(FormatError):
    pass

from .fileformat import FileFormat
from .gaussiancube import GaussianCube, SingleGrid, MultiGrid, load, dump
