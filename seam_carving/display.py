"""
Text and matplotlib views of intensity, energy and cumulative energy maps.
"""

from typing import Optional

import matplotlib
matplotlib.use('Agg')  # Non-interactive backend
import matplotlib.pyplot as plt
import torch

from .config import DISPLAY_WIDTH, DEFAULT_MAX_VALUE


def format_grid(grid: torch.Tensor, width: int = DISPLAY_WIDTH) -> str:
    """Render a grid one row per line, cells zero-padded to ``width`` digits.

    Values wider than ``width`` are printed in full.
    """
    lines = []
    for row in grid.tolist():
        lines.append(''.join(f" {int(v):0{width}d} " for v in row))
    return '\n'.join(lines)


def display_map(grid: torch.Tensor) -> None:
    print(format_grid(grid))


def overlay_seam(image: torch.Tensor, seam: torch.Tensor,
                 max_value: int = DEFAULT_MAX_VALUE) -> torch.Tensor:
    """
    Paint a vertical seam red on a grayscale grid.

    Args:
        image: Intensity grid (H, W)
        seam: Column index per row (H,)
        max_value: Intensity mapped to white

    Returns:
        RGB image (3, H, W) with values in [0, 1]
    """
    gray = image.float() / max_value
    img_vis = gray.unsqueeze(0).repeat(3, 1, 1).clamp(0.0, 1.0)

    red = torch.tensor([1.0, 0.0, 0.0])
    for i, col in enumerate(seam.tolist()):
        img_vis[:, i, col] = red

    return img_vis


def plot_maps(image: torch.Tensor, energy: torch.Tensor, cumulative: torch.Tensor,
              seam: Optional[torch.Tensor] = None, path: Optional[str] = None,
              max_value: int = DEFAULT_MAX_VALUE) -> matplotlib.figure.Figure:
    """Show the three maps side by side, with the seam drawn on each."""
    fig, axes = plt.subplots(1, 3, figsize=(15, 5))

    panels = [
        (image, 'Image', dict(cmap='gray', vmin=0, vmax=max_value)),
        (energy, 'Energy', dict(cmap='hot')),
        (cumulative, 'Cumulative Energy', dict(cmap='viridis')),
    ]
    for ax, (grid, title, style) in zip(axes, panels):
        ax.imshow(grid.cpu().numpy(), **style)
        if seam is not None:
            rows = list(range(seam.shape[0]))
            ax.plot(seam.tolist(), rows, 'r-', linewidth=1.5)
        ax.set_title(title)
        ax.axis('off')

    plt.tight_layout()
    if path is not None:
        fig.savefig(path, dpi=150, bbox_inches='tight')
        print(f"Saved: {path}")
    return fig
