import logging

import numpy as np

import gcube
from .elements import element_label_to_number, element_number_to_symbol, covalent_radii
from .propertyset import PropertySet
from .cube import Cube

logger = logging.getLogger(__name__)

# Rows of the pair-distance matrix held in memory at once by perceive_bonds_simple
_bond_block_rows = 256

def normalize_atoms(atoms):
    '''Convert a sequence of atom labels (symbols, names, or numbers) to an
    array of atomic numbers.'''
    numbers = [element_label_to_number(atom) for atom in atoms]
    for number in numbers:
        if not 0 <= number <= 255:
            raise ValueError('atomic number {:d} out of range'.format(number))
    return np.array(numbers, dtype=gcube.data.atomicnumber_dtype)


class Atom:
    '''A handle onto one atom of a Molecule. Handles go stale (invalid) when
    the atom they refer to is removed.'''
    def __init__(self, molecule, index):
        self.molecule = molecule
        self.index = index
        self._serial = molecule._serial_at(index)

    def __repr__(self):
        if not self.is_valid():
            return '<Atom (invalid)>'
        return '<Atom {:d} {} at {}>'.format(self.index, self.symbol, self.position3d)

    def is_valid(self):
        return self._serial is not None and self.molecule._serial_at(self.index) == self._serial

    @property
    def atomic_number(self):
        return int(self.molecule._atomic_numbers[self.index])

    @property
    def symbol(self):
        return element_number_to_symbol(self.atomic_number)

    @property
    def position3d(self):
        return self.molecule._positions[self.index].copy()

    def set_position3d(self, position):
        position = np.asarray(position, dtype=np.float64)
        if position.shape != (3,):
            raise ValueError('position must be a 3-vector')
        self.molecule._positions[self.index] = position


class Molecule:
    '''Atoms (atomic number and Angstrom position), perceived bonds, free-form
    metadata, and any attached volumetric grids.'''
    def __init__(self, name=''):
        self._atomic_numbers = np.empty(0, dtype=gcube.data.atomicnumber_dtype)
        self._positions = np.empty((0, 3), dtype=np.float64)

        # Unique per-atom serial numbers, so that stale handles can be detected
        self._serials = []
        self._next_serial = 0

        self._bonds = []
        self._cubes = []
        self._data = PropertySet({'name': name})

    def __repr__(self):
        return '<Molecule at {:#x}, {:d} atoms, {:d} cubes, name={!r}>'\
                .format(id(self), self.atom_count(), self.cube_count(), self.data('name'))

    def _serial_at(self, index):
        if 0 <= index < len(self._serials):
            return self._serials[index]
        return None

    # Metadata
    def set_data(self, key, value):
        self._data[key] = value

    def data(self, key, default=None):
        return self._data.get(key, default)

    @property
    def properties(self):
        return self._data

    # Atoms
    def add_atom(self, atom):
        '''Add an atom given its atomic number (or element symbol or name).
        The atom is placed at the origin.'''
        number = normalize_atoms([atom])
        self._atomic_numbers = np.concatenate((self._atomic_numbers, number))
        self._positions = np.concatenate((self._positions, np.zeros((1, 3))))
        self._serials.append(self._next_serial)
        self._next_serial += 1
        return Atom(self, len(self._serials) - 1)

    def remove_atom(self, index):
        if not 0 <= index < self.atom_count():
            raise IndexError('no atom {:d}'.format(index))
        self._atomic_numbers = np.delete(self._atomic_numbers, index)
        self._positions = np.delete(self._positions, index, axis=0)
        del self._serials[index]

        bonds = []
        for (i, j) in self._bonds:
            if index in (i, j):
                continue
            bonds.append((i - (i > index), j - (j > index)))
        self._bonds = bonds

    def atom(self, index):
        return Atom(self, index)

    def atoms(self):
        return [Atom(self, i) for i in range(self.atom_count())]

    def atom_count(self):
        return len(self._serials)

    @property
    def atomic_numbers(self):
        return self._atomic_numbers

    @property
    def positions(self):
        return self._positions

    # Bonds
    def perceive_bonds_simple(self, tolerance=0.45, min_distance=0.32):
        '''Bond every pair of atoms closer than the sum of their covalent radii
        plus `tolerance` (Angstrom), ignoring pairs closer than
        `min_distance`. Replaces any existing bonds. Returns the number of
        bonds found.'''
        self._bonds = []
        natoms = self.atom_count()
        if natoms < 2:
            return 0

        radii = covalent_radii(self._atomic_numbers)
        columns = np.arange(natoms)

        # Pair distances are computed a block of rows at a time, so memory
        # grows with natoms * _bond_block_rows rather than natoms**2
        for start in range(0, natoms - 1, _bond_block_rows):
            stop = min(start + _bond_block_rows, natoms)
            deltas = self._positions[start:stop, np.newaxis, :] - self._positions[np.newaxis, :, :]
            distances = np.sqrt((deltas**2).sum(axis=-1))
            cutoffs = radii[start:stop, np.newaxis] + radii[np.newaxis, :] + tolerance

            upper = columns[np.newaxis, :] > np.arange(start, stop)[:, np.newaxis]
            bonded = upper & (distances > min_distance) & (distances <= cutoffs)
            ii, jj = np.nonzero(bonded)
            self._bonds.extend((int(i) + start, int(j)) for (i, j) in zip(ii, jj))
        logger.debug('perceived {:d} bonds among {:d} atoms'.format(len(self._bonds), natoms))
        return len(self._bonds)

    def bonds(self):
        return list(self._bonds)

    def bond_count(self):
        return len(self._bonds)

    # Grids
    def add_cube(self):
        cube = Cube()
        self._cubes.append(cube)
        return cube

    def cube(self, index):
        return self._cubes[index]

    def cubes(self):
        return list(self._cubes)

    def cube_count(self):
        return len(self._cubes)

    def clear_cubes(self):
        self._cubes = []
