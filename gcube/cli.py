from argparse import ArgumentParser
import logging
import sys
import timeit

import gcube
from gcube.data.io.yaml import write_yaml
from gcube.formats.gaussiancube import GaussianCube
from gcube.logging_config import setup_logging


def make_parser():
    parser = ArgumentParser(prog='parse-cube',
                            description='Read a Gaussian cube file and summarize its contents')
    parser.add_argument('cubefile', help='Gaussian cube file')
    parser.add_argument('-o', '--output', help='Write a summary to OUTPUT in yaml format')
    parser.add_argument('-w', '--write-cube', dest='write_cube',
                        help='Re-encode the first grid to WRITE_CUBE')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    return parser

def main(argv=None):
    args = make_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    fmt = GaussianCube()
    molecule = gcube.Molecule()

    begin = timeit.default_timer()
    ok = fmt.read_file(args.cubefile, molecule)
    end = timeit.default_timer()
    if not ok:
        print(fmt.error_string(), file=sys.stderr)
        return 1

    print('READ CUBE FILE {} in {:.6g} seconds'.format(args.cubefile, end-begin))
    print('TITLE: {}'.format(molecule.data('name')))
    print('ATOMS: {:d} ({:d} bonds)'.format(molecule.atom_count(), molecule.bond_count()))
    print('GRIDS: {:d}'.format(molecule.cube_count()))
    for i, cube in enumerate(molecule.cubes()):
        print('  grid {:d}: {:d}x{:d}x{:d} values in [{:.5e}, {:.5e}]'
              .format(i, *cube.dimensions(), cube.min_value(), cube.max_value()))

    if args.output:
        begin = timeit.default_timer()
        with open(args.output, 'wt') as outputfile:
            write_yaml(molecule, outputfile)
        end = timeit.default_timer()
        print('Wrote summary to {} ({:.6g} s)'.format(args.output, end-begin))

    if args.write_cube:
        try:
            gcube.dump(molecule, args.write_cube)
        except gcube.FormatError as e:
            print(e, file=sys.stderr)
            return 1
        print('Wrote first grid to {}'.format(args.write_cube))

    return 0

if __name__ == '__main__':
    sys.exit(main())
