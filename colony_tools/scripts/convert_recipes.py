"""
Convert a Colony Survival gamedata directory into the calculator's item catalog.

Thin CLI around core.pipeline.convert_game_data(). Exits 0 when the
catalog was written and 1 otherwise, including on any conversion error.

Usage:
    python3 -m colony_tools.scripts.convert_recipes -i gamedata/ -o items.json
"""

import argparse
import sys

from colony_tools.core.pipeline import convert_game_data


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("-i", "--input-directory", required=True,
                        help="Path to directory containing all raw colony survival files")
    parser.add_argument("-o", "--output-file", required=True,
                        help="Path to write output to")
    args = parser.parse_args(argv)

    try:
        result = convert_game_data(args.input_directory, args.output_file)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0 if result else 1


if __name__ == "__main__":
    sys.exit(main())
