"""
High-level carving functions that orchestrate the energy -> cumulative
energy -> trace -> remove workflow.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

import torch

from .energy import gradient_magnitude_energy, cumulative_energy
from .seam import trace_seam, remove_seam_

logger = logging.getLogger(__name__)


@dataclass
class CarveStep:
    """Maps and seam of a single removal, in the orientation it was carved."""
    energy: torch.Tensor
    cumulative: torch.Tensor
    seam: torch.Tensor
    direction: str


def validate_grid(grid: torch.Tensor) -> None:
    """Reject grids the pipeline is not defined for.

    Raises:
        ValueError: if the grid is not 2-D, is empty, holds non-integer
            values or holds negative values
    """
    if grid.dim() != 2:
        raise ValueError(f"Expected a 2-D grid, got shape {tuple(grid.shape)}")
    if grid.shape[0] == 0 or grid.shape[1] == 0:
        raise ValueError(f"Grid must be non-empty, got shape {tuple(grid.shape)}")
    if grid.dtype.is_floating_point or grid.dtype == torch.bool:
        raise ValueError(f"Expected an integer grid, got {grid.dtype}")
    if (grid < 0).any():
        raise ValueError("Grid contains negative values")


def carve_once(image: torch.Tensor, direction: str = 'vertical',
               traceback: str = 'value') -> Tuple[torch.Tensor, CarveStep]:
    """
    Remove one seam from ``image``, modifying it in place.

    Energy and cumulative energy are rebuilt from the current grid, so the
    maps from a previous call are never reused.

    Args:
        image: Intensity grid (H, W)
        direction: 'vertical' (removes a column slot per row) or
            'horizontal' (removes a row slot per column)
        traceback: 'value' or 'window', see ``trace_seam``

    Returns:
        carved: (H, W - 1) for vertical, (H - 1, W) for horizontal
        step: the maps and seam used for this removal
    """
    if direction == 'vertical':
        grid = image
    elif direction == 'horizontal':
        grid = image.t()
    else:
        raise ValueError(f"Invalid direction: {direction}")

    energy = gradient_magnitude_energy(grid)
    cumulative = cumulative_energy(energy)
    seam = trace_seam(cumulative, traceback=traceback)
    carved = remove_seam_(grid, seam)

    if direction == 'horizontal':
        carved = carved.t()

    return carved, CarveStep(energy, cumulative, seam, direction)


def carve_image(image: torch.Tensor, n_vertical: int, n_horizontal: int = 0,
                traceback: str = 'value',
                callback: Optional[Callable[[CarveStep], None]] = None) -> torch.Tensor:
    """
    Seam carving: remove vertical seams, then horizontal seams.

    Args:
        image: Intensity grid (H, W); left untouched
        n_vertical: Number of vertical seams to remove
        n_horizontal: Number of horizontal seams to remove
        traceback: 'value' or 'window', see ``trace_seam``
        callback: Called with the ``CarveStep`` of every removal

    Returns:
        Carved grid (H - n_horizontal, W - n_vertical)
    """
    validate_grid(image)
    H, W = image.shape

    if n_vertical < 0 or n_horizontal < 0:
        raise ValueError(f"Seam counts must be non-negative, got "
                         f"{n_vertical} vertical and {n_horizontal} horizontal")
    if n_vertical >= W:
        raise ValueError(f"Cannot remove {n_vertical} vertical seams from width {W}")
    if n_horizontal >= H:
        raise ValueError(f"Cannot remove {n_horizontal} horizontal seams from height {H}")

    # Widen first: unsigned differences would wrap in the energy pass
    carved = image.to(dtype=torch.int64, copy=True)
    plan = [('vertical', n_vertical), ('horizontal', n_horizontal)]

    for direction, n_seams in plan:
        for i in range(n_seams):
            carved, step = carve_once(carved, direction=direction, traceback=traceback)
            if callback is not None:
                callback(step)
        if n_seams:
            logger.debug("Removed %d %s seams, size: %s", n_seams, direction,
                         tuple(carved.shape))

    # Drop the stale tail of the storage
    return carved.contiguous()
