"""
Seam carving of grayscale intensity grids.

Based on "Seam Carving for Content-Aware Image Resizing"
by Avidan & Shamir, 2007.
"""

__version__ = "0.1.0"

from .energy import gradient_magnitude_energy, cumulative_energy
from .seam import seam_end, trace_seam, remove_seam_, carve_seam
from .carving import CarveStep, carve_once, carve_image, validate_grid
from .pgm import (
    PGMFormatError,
    PGMImage,
    parse_pgm,
    read_pgm,
    format_pgm,
    write_pgm,
    load_image,
    save_image,
)
from .display import format_grid, display_map, overlay_seam, plot_maps

__all__ = [
    'gradient_magnitude_energy',
    'cumulative_energy',
    'seam_end',
    'trace_seam',
    'remove_seam_',
    'carve_seam',
    'CarveStep',
    'carve_once',
    'carve_image',
    'validate_grid',
    'PGMFormatError',
    'PGMImage',
    'parse_pgm',
    'read_pgm',
    'format_pgm',
    'write_pgm',
    'load_image',
    'save_image',
    'format_grid',
    'display_map',
    'overlay_seam',
    'plot_maps',
]
