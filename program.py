import argparse
import sys

from config import HullConfig
from errors import HullError
from geometry import EXCLUSION_MODES
from logger import logger, out
from quickhull import construct_from_source


def parse_args(argv=None):
    default = HullConfig.from_env()
    parser = argparse.ArgumentParser(
        prog='quickhull',
        description='Convex hull and area of planar points (QuickHull)',
    )
    parser.add_argument('path', help='text file with one "X Y" pair per line')
    parser.add_argument(
        '-e', '--exclusion',
        choices=EXCLUSION_MODES,
        default=default.exclusion,
        help='how line endpoints are filtered from candidate subsets. defaults to %(default)s',
    )
    parser.add_argument('-p', '--plot', help='save a plot of the hull to this file')
    parser.add_argument('-v', '--verbose', action='store_true', help='debug logging')
    return parser.parse_args(argv)


def save_plot(result, filename):
    import matplotlib
    matplotlib.use('Agg')
    import matplotlib.pyplot as plt
    from visualization import plot_hull

    fig, ax = plt.subplots(figsize=(8, 8))
    plot_hull(result, ax=ax)
    fig.savefig(filename)
    plt.close(fig)
    out(f'Plot saved to {filename}')


def main(argv=None) -> int:
    args = parse_args(argv)
    if args.verbose:
        logger.setLevel('DEBUG')

    try:
        result = construct_from_source(args.path, HullConfig(exclusion=args.exclusion))
    except (HullError, OSError) as e:
        logger.error(f'Failed to build convex hull of {args.path}: {e}')
        return 1

    if result.is_degenerate:
        logger.warning('All points are collinear, the hull is a segment')

    print(result.describe())
    if args.plot:
        save_plot(result, args.plot)
    return 0


if __name__ == '__main__':
    sys.exit(main())
