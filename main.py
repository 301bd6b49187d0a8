import argparse
import os
import sys

from config import OUTPUT_FOLDER, UNSUPPORTED_POLICIES, get_active_params
from errors import VentureError
from pipeline import build_overlap_grid
from utils.record_io import load_records
from visualization.overlap_map import save_overlap_map


def parse_args(argv=None):
    """
    Parse command-line arguments.

    Every option defaults to the active configuration.
    """
    params = get_active_params()

    parser = argparse.ArgumentParser(
        description="Count the points where at least two hydrothermal vent lines overlap",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Count overlaps including 45-degree diagonals
  python main.py input.txt

  # Horizontal and vertical lines only
  python main.py input.txt --axis-only

  # Size the grid from the input and save an overlap map
  python main.py input.txt --auto-size --save-map
        """
    )

    parser.add_argument(
        'input',
        help='Path to the puzzle input file'
    )

    diagonals = parser.add_mutually_exclusive_group()
    diagonals.add_argument(
        '--axis-only',
        dest='include_diagonals',
        action='store_false',
        help='Ignore 45-degree diagonal lines'
    )
    diagonals.add_argument(
        '--diagonals',
        dest='include_diagonals',
        action='store_true',
        help='Include 45-degree diagonal lines'
    )
    parser.set_defaults(include_diagonals=params["INCLUDE_DIAGONALS"])

    parser.add_argument(
        '--unsupported',
        choices=UNSUPPORTED_POLICIES,
        default=params["UNSUPPORTED_POLICY"],
        help='What to do with lines at any other angle (default: %(default)s)'
    )

    parser.add_argument(
        '--grid-size',
        type=int,
        default=params["GRID_SIZE"],
        help='Width and height of the grid (default: %(default)s)'
    )

    parser.add_argument(
        '--auto-size',
        action='store_true',
        default=params["GRID_AUTO_SIZE"],
        help='Size the grid from the largest coordinate in the input'
    )

    parser.add_argument(
        '--threshold',
        type=int,
        default=params["OVERLAP_THRESHOLD"],
        help='Minimum number of lines for a point to count (default: %(default)s)'
    )

    parser.add_argument(
        '--workers',
        type=int,
        default=params["WORKERS"],
        help='Number of threads rasterizing segment shards (default: %(default)s)'
    )

    parser.add_argument(
        '--save-map',
        nargs='?',
        const=os.path.join(OUTPUT_FOLDER, "overlap_map.png"),
        default=None,
        metavar='PATH',
        help=f'Save the overlap grid as an image (default path: {OUTPUT_FOLDER}/overlap_map.png)'
    )

    return parser.parse_args(argv)


def main(argv=None):
    """
    Main entry point:
      - Loads the input records
      - Builds the overlap grid
      - Prints the overlap count (and optionally saves the map)

    Returns the process exit status.
    """
    args = parse_args(argv)

    try:
        records = load_records(args.input)
    except OSError as e:
        print(f"[ERROR] Cannot read {args.input}: {e}", file=sys.stderr)
        return 1

    if not records:
        print(f"[WARN] No records found in {args.input}.")

    try:
        grid = build_overlap_grid(
            records,
            include_diagonals=args.include_diagonals,
            on_unsupported=args.unsupported,
            grid_size=args.grid_size,
            auto_size=args.auto_size,
            workers=args.workers,
        )
    except (VentureError, ValueError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    overlaps = grid.count_at_least(args.threshold)
    print(f"Number of points where at least two lines overlaps: {overlaps}")

    if args.save_map:
        try:
            save_overlap_map(args.save_map, grid, args.threshold)
        except OSError as e:
            print(f"[ERROR] {e}", file=sys.stderr)
            return 1
        print(f"[OK] Saved overlap map to {args.save_map}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
