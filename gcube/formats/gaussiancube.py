'''Gaussian cube files: a molecular geometry plus one or more scalar grids on a
shared axis-aligned lattice. Geometry and lattice are stored in Bohr.

    <title>
    <comment>
    natoms  ox oy oz  [nval]
    nx      dx 0. 0.
    ny      0. dy 0.
    nz      0. 0. dz
    Z  charge  x y z          (|natoms| lines)
    ncubes id1 id2 ...        (only if natoms < 0)
    v v v v v v               (nx*ny*nz values per grid, z fastest)
'''

import dataclasses
import io
import logging
import os

import numpy as np

import gcube
from gcube.parser import ParseError, MalformedInput
from gcube.parser.textparser import TokenStream, trim, split, parse_int, parse_float
from gcube.data.molecule import Molecule
from gcube.data.units import bohr_to_angstrom, angstrom_to_bohr
from . import FormatError, InvalidModelState
from .fileformat import FileFormat

logger = logging.getLogger(__name__)

BANNER = 'Gaussian Cube file generated by gcube.'

@dataclasses.dataclass(frozen=True)
class SingleGrid:
    '''One grid follows the geometry (non-negative atom count).'''
    kind = 'single'
    identifiers = ()

    @property
    def count(self):
        return 1

@dataclasses.dataclass(frozen=True)
class MultiGrid:
    '''A grid index line follows the geometry (negative atom count), listing
    one opaque identifier (usually an orbital number) per stacked grid.'''
    identifiers: tuple
    kind = 'multi'

    @property
    def count(self):
        return len(self.identifiers)


class GaussianCubeParser:
    '''Decodes one cube file into `molecule`. Raises ParseError (or a
    subclass) on any structural problem, leaving `molecule` partially
    populated.'''
    def __init__(self, infile, molecule):
        self.infile = TokenStream(infile)
        self.molecule = molecule

        self.natoms = None
        self.origin = None
        self.dimensions = None
        self.spacing = None
        self.grid_set = None

    def parse(self):
        self.parse_titles()
        self.parse_header()
        self.parse_axes()
        self.parse_atoms()
        self.parse_grid_set()

        self.molecule.perceive_bonds_simple()

        # All grids share this one frame
        self.origin = bohr_to_angstrom(self.origin)
        self.spacing = bohr_to_angstrom(self.spacing)

        self.parse_grids()

    def parse_titles(self):
        self.molecule.set_data('name', self.infile.readline())
        self.molecule.set_data('comment', self.infile.readline())

    def parse_header(self):
        # Token reads: the line may carry a trailing values-per-point field
        self.natoms = self.infile.next_int()
        self.origin = np.array([self.infile.next_float() for _i in range(3)])
        self.infile.discard_line()

    def parse_axes(self):
        dimensions = []
        spacing = np.zeros(3, dtype=np.float64)
        for axis in range(3):
            fields = split(trim(self.infile.readline()))
            if len(fields) < axis + 2:
                raise MalformedInput('expected voxel count and step vector for axis {:d}'
                                     .format(axis), self.infile.linenum)

            dimensions.append(parse_int(fields[0], self.infile.linenum))
            spacing[axis] = parse_float(fields[axis + 1], self.infile.linenum)
            self._check_off_diagonal(axis, fields)

        self.dimensions = tuple(dimensions)
        self.spacing = spacing
        logger.debug('cube header: natoms={:d}, dimensions={}, origin={} bohr, spacing={} bohr'
                     .format(self.natoms, self.dimensions, self.origin, self.spacing))

    def _check_off_diagonal(self, axis, fields):
        '''Only axis-aligned lattices are supported; off-diagonal step
        components are ignored.'''
        for column in range(3):
            if column == axis or column + 1 >= len(fields):
                continue
            try:
                value = parse_float(fields[column + 1])
            except MalformedInput:
                continue
            if value != 0.0:
                logger.warning('line {:d}: ignoring off-diagonal step component {!r} for axis {:d}'
                               .format(self.infile.linenum, fields[column + 1], axis))

    def parse_atoms(self):
        for _i in range(abs(self.natoms)):
            fields = split(trim(self.infile.readline()))
            linenum = self.infile.linenum
            if len(fields) < 5:
                raise MalformedInput('expected atomic number, charge and position', linenum)

            number = parse_int(fields[0], linenum)
            if not 0 <= number <= 255:
                raise MalformedInput('atomic number {:d} out of range'.format(number), linenum)

            # fields[1] (nuclear charge) is not used
            position = np.array([parse_float(field, linenum) for field in fields[2:5]])
            atom = self.molecule.add_atom(number)
            atom.set_position3d(bohr_to_angstrom(position))

    def parse_grid_set(self):
        if self.natoms < 0:
            ncubes = self.infile.next_int()
            if ncubes < 1:
                raise MalformedInput('invalid grid count {:d}'.format(ncubes), self.infile.linenum)
            identifiers = tuple(self.infile.next_int() for _i in range(ncubes))
            self.infile.discard_line()
            self.grid_set = MultiGrid(identifiers)
        else:
            self.grid_set = SingleGrid()
        self.molecule.set_data('grid_set', self.grid_set)

    def parse_grids(self):
        for igrid in range(self.grid_set.count):
            cube = self.molecule.add_cube()
            try:
                cube.set_limits(self.origin, self.dimensions, self.spacing)
            except ValueError as e:
                raise MalformedInput(str(e), self.infile.linenum)
            if self.grid_set.identifiers:
                cube.identifier = self.grid_set.identifiers[igrid]

            values = self.infile.read_floats(cube.voxel_count(), dtype=gcube.data.scalar_dtype)
            self.infile.discard_line()
            cube.set_data(values)
            logger.debug('read grid {:d} of {:d} ({:d} values)'
                         .format(igrid + 1, self.grid_set.count, values.size))


def write_fixed_int(outfile, number):
    outfile.write('{:5d}'.format(int(number)))

def write_fixed_float(outfile, number):
    outfile.write('{:12.6f}'.format(float(number)))


class GaussianCube(FileFormat):
    '''Gaussian cube reader/writer. All grids in a file are read; only the
    first grid attached to a molecule is written.'''
    extensions = ('cube',)
    mime_types = ()

    def read(self, infile, molecule):
        self.clear_errors()
        try:
            GaussianCubeParser(infile, molecule).parse()
        except (ParseError, UnicodeDecodeError) as e:
            self.append_error('Error reading Gaussian cube file: {}'.format(e))
            return False
        return True

    def write(self, outfile, molecule):
        self.clear_errors()
        try:
            self._write(outfile, molecule)
        except InvalidModelState as e:
            self.append_error(str(e))
            return False
        return True

    def _write(self, outfile, molecule):
        if molecule.cube_count() == 0:
            raise InvalidModelState('No cubes to write.')
        if molecule.cube_count() > 1:
            # TODO: write stacked grids with a negative atom count and index line
            logger.warning('molecule has {:d} cubes; only the first is written'
                           .format(molecule.cube_count()))

        cube = molecule.cube(0)
        origin = angstrom_to_bohr(cube.min())
        spacing = angstrom_to_bohr(cube.spacing())
        dimensions = cube.dimensions()

        outfile.write(BANNER + '\n')
        name = molecule.data('name') or ''
        outfile.write(name + '\n')

        natoms = molecule.atom_count()
        write_fixed_int(outfile, natoms)
        for coord in origin:
            write_fixed_float(outfile, coord)
        write_fixed_int(outfile, 1) # one value per point
        outfile.write('\n')

        for axis in range(3):
            write_fixed_int(outfile, dimensions[axis])
            for column in range(3):
                write_fixed_float(outfile, spacing[axis] if column == axis else 0.0)
            outfile.write('\n')

        for iatom in range(natoms):
            atom = molecule.atom(iatom)
            if not atom.is_valid():
                raise InvalidModelState('Internal error: Atom invalid.')

            write_fixed_int(outfile, atom.atomic_number)
            write_fixed_float(outfile, 0.0) # charge
            for coord in angstrom_to_bohr(atom.position3d):
                write_fixed_float(outfile, coord)
            outfile.write('\n')

        for i, value in enumerate(cube.data()):
            outfile.write('{:13.5e}'.format(float(value)))
            if i % 6 == 5:
                outfile.write('\n')


def load(source):
    '''Read a cube file from a path or open text stream and return a new
    Molecule. Raises FormatError on failure.'''
    fmt = GaussianCube()
    molecule = Molecule()
    if isinstance(source, (str, os.PathLike)):
        ok = fmt.read_file(source, molecule)
    else:
        ok = fmt.read(source, molecule)
    if not ok:
        raise FormatError(fmt.error_string())
    return molecule

def dump(molecule, destination):
    '''Write the first grid of `molecule` to a path or open text stream.
    Raises InvalidModelState, without creating or writing anything, if the
    molecule cannot be written.'''
    fmt = GaussianCube()
    buffer = io.StringIO()
    if not fmt.write(buffer, molecule):
        raise InvalidModelState(fmt.error_string())

    if isinstance(destination, (str, os.PathLike)):
        with open(destination, 'wt', encoding='utf-8') as outfile:
            outfile.write(buffer.getvalue())
    else:
        destination.write(buffer.getvalue())
