"""
Seam tracing and removal.

A vertical seam holds one column index per row. It is traced bottom-up
through a cumulative energy map and then cut out of the intensity grid,
shifting the remaining pixels of each row one slot to the left.
"""

import logging

import torch

from .config import TRACEBACK_MODES

logger = logging.getLogger(__name__)


def seam_end(cumulative: torch.Tensor) -> int:
    """Column of the lowest cumulative energy in the last row.

    Ties go to the leftmost column.
    """
    return int(torch.argmin(cumulative[-1]).item())


def trace_seam(cumulative: torch.Tensor, traceback: str = 'value') -> torch.Tensor:
    """
    Backtrace the minimum-energy vertical seam.

    Starting from ``seam_end``, each step looks at the up-to-three ancestor
    candidates (upper-left, upper, upper-right) of the current column and
    takes their minimum value. How that value is mapped back to a column
    depends on ``traceback``:

    - ``'value'``: first column of the whole row above holding that value,
      scanning left to right. When a row repeats values this can land on an
      equal-cost cell outside the three-cell window.
    - ``'window'``: first candidate inside the window holding that value.
      The seam is always connected.

    Args:
        cumulative: Cumulative energy map (H, W)
        traceback: 'value' or 'window'

    Returns:
        Seam indices (H,) with the column index per row
    """
    if traceback not in TRACEBACK_MODES:
        raise ValueError(f"Invalid traceback: {traceback}")

    H, W = cumulative.shape
    seam = torch.zeros(H, dtype=torch.long, device=cumulative.device)
    seam[H - 1] = seam_end(cumulative)

    for i in range(H - 1, 0, -1):
        col = seam[i].item()
        left = max(0, col - 1)
        right = min(W - 1, col + 1)
        ancestors = cumulative[i - 1, left:right + 1]

        if traceback == 'value':
            value = ancestors.min()
            matches = torch.nonzero(cumulative[i - 1] == value)
            seam[i - 1] = matches[0, 0]
        else:
            seam[i - 1] = left + torch.argmin(ancestors)

    logger.debug("Traced seam ending at column %d", seam[H - 1].item())
    return seam


def remove_seam_(image: torch.Tensor, seam: torch.Tensor) -> torch.Tensor:
    """
    Remove a vertical seam in place.

    In each row the pixels right of the seam slide one slot left, keeping
    their order. The last column of the storage is then dropped by narrowing.

    Args:
        image: Intensity grid (H, W), overwritten
        seam: Column index per row (H,)

    Returns:
        View (H, W - 1) over the storage of ``image``
    """
    H, W = image.shape
    if seam.shape != (H,):
        raise ValueError(f"Seam of shape {tuple(seam.shape)} does not fit {H} rows")

    for i in range(H):
        col = seam[i].item()
        # Source and destination overlap
        image[i, col:W - 1] = image[i, col + 1:W].clone()

    return image[:, :W - 1]


def carve_seam(image: torch.Tensor, cumulative: torch.Tensor,
               traceback: str = 'value') -> torch.Tensor:
    """
    Trace the lowest-energy seam in ``cumulative`` and cut it from ``image``.

    ``image`` is modified in place; the narrowed view is returned. The
    cumulative map is only read and is stale afterwards.

    Args:
        image: Intensity grid (H, W)
        cumulative: Cumulative energy map built from ``image`` (H, W)
        traceback: 'value' or 'window', see ``trace_seam``

    Returns:
        Carved grid (H, W - 1)
    """
    if image.shape != cumulative.shape:
        raise ValueError(f"Image shape {tuple(image.shape)} does not match "
                         f"cumulative energy shape {tuple(cumulative.shape)}")

    seam = trace_seam(cumulative, traceback=traceback)
    return remove_seam_(image, seam)
