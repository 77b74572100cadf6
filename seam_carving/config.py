"""
Package-wide defaults and command-line options.
"""

from dataclasses import dataclass
from typing import Optional

# How the backtrace maps an ancestor value back to a column
TRACEBACK_MODES = ('value', 'window')
DEFAULT_TRACEBACK = 'value'

# Digits per cell when printing a grid
DISPLAY_WIDTH = 3

# Grayscale ceiling for images that do not declare one
DEFAULT_MAX_VALUE = 255


@dataclass
class CarveOptions:
    """Options for one run of the command-line driver."""
    image_path: str
    n_vertical: int
    n_horizontal: int = 0
    traceback: str = DEFAULT_TRACEBACK
    output_path: Optional[str] = None
    plot_path: Optional[str] = None
    log_file: Optional[str] = None
