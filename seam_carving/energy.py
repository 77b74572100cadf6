"""
Energy functions for seam carving.

The energy function determines which pixels are "important".
Low-energy seams are preferred for removal.

We use the L1 gradient magnitude of the four direct neighbours, and a
top-to-bottom dynamic programming pass to turn it into cumulative energy.
"""

import logging

import torch

logger = logging.getLogger(__name__)


def gradient_magnitude_energy(image: torch.Tensor) -> torch.Tensor:
    """
    Compute gradient magnitude energy for a grayscale grid.

    E(i,j) = |I - left| + |I - right| + |I - up| + |I - down|

    A neighbour that falls outside the grid is replaced by the pixel itself,
    so the missing direction contributes nothing. A 1x1 grid has zero energy.

    Args:
        image: Grayscale intensity grid (H, W)

    Returns:
        Energy map (H, W), same dtype as the input
    """
    if image.dim() != 2:
        raise ValueError(f"Expected a 2-D grid, got shape {tuple(image.shape)}")

    # Neighbour images via indexing; border cells take their own value
    left = image.clone()
    left[:, 1:] = image[:, :-1]

    right = image.clone()
    right[:, :-1] = image[:, 1:]

    up = image.clone()
    up[1:, :] = image[:-1, :]

    down = image.clone()
    down[:-1, :] = image[1:, :]

    change_x = torch.abs(image - left) + torch.abs(image - right)
    change_y = torch.abs(image - up) + torch.abs(image - down)

    return change_x + change_y


def cumulative_energy(energy: torch.Tensor) -> torch.Tensor:
    """Minimum total energy of any top-to-bottom path ending at each cell.

    Row 0 is the energy itself. Every later cell adds the smallest of its
    ancestor candidates in the row above: upper-left (if j-1 >= 0), upper,
    and upper-right (if j+1 < W).

    Args:
        energy: Energy map (H, W)

    Returns:
        Cumulative energy map (H, W). The input is not modified.
    """
    if energy.dim() != 2 or energy.numel() == 0:
        raise ValueError(f"Expected a non-empty 2-D grid, got shape {tuple(energy.shape)}")

    H, W = energy.shape
    M = energy.clone()

    if energy.dtype.is_floating_point:
        sentinel = float('inf')
    else:
        sentinel = torch.iinfo(energy.dtype).max

    for i in range(1, H):
        M_prev = M[i - 1]
        # Out-of-bounds ancestors never win the minimum
        M_left = torch.full((W,), sentinel, dtype=M.dtype, device=M.device)
        M_left[1:] = M_prev[:-1]
        M_right = torch.full((W,), sentinel, dtype=M.dtype, device=M.device)
        M_right[:-1] = M_prev[1:]

        M[i] += torch.min(torch.min(M_left, M_prev), M_right)

    logger.debug("Cumulative energy built for %dx%d grid", H, W)
    return M
