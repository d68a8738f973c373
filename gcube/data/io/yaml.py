import yaml

def _vector(values):
    return [float(v) for v in values]

def molecule_summary(molecule):
    '''Reduce `molecule` to plain Python types suitable for serialization.
    Grid samples are summarized by their range, not written out.'''
    grid_set = molecule.data('grid_set')

    summary = {'name': molecule.data('name', ''),
               'comment': molecule.data('comment', ''),
               'atoms': [{'symbol': atom.symbol,
                          'atomic_number': atom.atomic_number,
                          'position': _vector(atom.position3d)}
                         for atom in molecule.atoms()],
               'bond_count': molecule.bond_count(),
               'grid_set': {'kind': grid_set.kind,
                            'identifiers': [int(i) for i in grid_set.identifiers]}
                           if grid_set is not None else None,
               'cubes': []}

    for cube in molecule.cubes():
        summary['cubes'].append({'identifier': cube.identifier,
                                 'origin': _vector(cube.min()),
                                 'dimensions': [int(n) for n in cube.dimensions()],
                                 'spacing': _vector(cube.spacing()),
                                 'min_value': cube.min_value(),
                                 'max_value': cube.max_value()})
    return summary

def write_yaml(molecule, outfile):
    '''Write a summary of `molecule` to `outfile` in yaml format.'''
    yaml.dump(molecule_summary(molecule), outfile, Dumper=yaml.SafeDumper, sort_keys=False)

def read_yaml(infile):
    '''Read a molecule summary from `infile` and return it as a dict.'''
    return yaml.safe_load(infile)
