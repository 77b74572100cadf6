"""
Command-line seam carving of grayscale images.

    python -m seam_carving image.pgm 1 0
    python -m seam_carving photo.png 40 10 -o carved.png --plot maps.png
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import matplotlib.pyplot as plt

from .carving import carve_image, validate_grid
from .config import CarveOptions, DEFAULT_TRACEBACK, TRACEBACK_MODES
from .display import display_map, plot_maps
from .energy import gradient_magnitude_energy, cumulative_energy
from .logging_config import setup_logging
from .pgm import PGMImage, load_image, save_image, write_pgm
from .seam import trace_seam

logger = logging.getLogger("seam_carving")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='seam_carving',
        description='Remove minimum-energy seams from a grayscale image.')
    parser.add_argument('image', help='P2 .pgm file, or any image Pillow can open')
    parser.add_argument('vertical', type=int,
                        help='Number of vertical seams to remove')
    parser.add_argument('horizontal', type=int, nargs='?', default=0,
                        help='Number of horizontal seams to remove (default: 0)')
    parser.add_argument('-o', '--output', default=None,
                        help='Write the carved image here (.pgm keeps P2 text)')
    parser.add_argument('--traceback', choices=TRACEBACK_MODES,
                        default=DEFAULT_TRACEBACK,
                        help='How the backtrace picks the ancestor column')
    parser.add_argument('--plot', default=None,
                        help='Save a figure of the maps with the first seam')
    parser.add_argument('--log-file', default=None,
                        help='Also write log records to this file')
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument('-v', '--verbose', action='store_true',
                           help='Debug logging')
    verbosity.add_argument('-q', '--quiet', action='store_true',
                           help='Only log warnings and errors')
    return parser


def parse_options(argv: Optional[List[str]] = None):
    args = build_parser().parse_args(argv)
    options = CarveOptions(
        image_path=args.image,
        n_vertical=args.vertical,
        n_horizontal=args.horizontal,
        traceback=args.traceback,
        output_path=args.output,
        plot_path=args.plot,
        log_file=args.log_file,
    )
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    else:
        level = logging.INFO
    return options, level


def run(options: CarveOptions) -> PGMImage:
    image = load_image(options.image_path)
    validate_grid(image.pixels)

    print(f"Image Map For '{options.image_path}': ")
    display_map(image.pixels)

    energy = gradient_magnitude_energy(image.pixels)
    print("\nEnergy Map: ")
    display_map(energy)

    cumulative = cumulative_energy(energy)
    print("\nCumulative Energy Map: ")
    display_map(cumulative)

    if options.plot_path:
        seam = trace_seam(cumulative, traceback=options.traceback)
        fig = plot_maps(image.pixels, energy, cumulative, seam=seam,
                        path=options.plot_path, max_value=image.max_value)
        plt.close(fig)

    carved = carve_image(image.pixels, options.n_vertical, options.n_horizontal,
                         traceback=options.traceback)
    logger.info("Carved %d vertical and %d horizontal seams: %d x %d -> %d x %d",
                options.n_vertical, options.n_horizontal,
                image.columns, image.rows, carved.shape[1], carved.shape[0])

    print("\nSeam-Carved Image: ")
    display_map(carved)

    result = PGMImage(carved, image.max_value)
    if options.output_path:
        if Path(options.output_path).suffix.lower() == '.pgm':
            write_pgm(result, options.output_path)
        else:
            save_image(carved, options.output_path, max_value=image.max_value)
    return result


def main(argv: Optional[List[str]] = None) -> int:
    options, level = parse_options(argv)

    try:
        setup_logging(level, options.log_file)
        run(options)
    except (OSError, ValueError) as e:
        logger.error("error: %s", e)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
