"""
Basic seam carving example on a small PGM ridge image.

Prints the maps of the first removal, saves a figure with the seam drawn
on each map, and writes the carved image next to the input.
"""

import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from pathlib import Path

import numpy as np
import matplotlib.pyplot as plt
from PIL import Image

from seam_carving import (load_image, write_pgm, PGMImage, carve_image,
                          format_grid, plot_maps, overlay_seam)


def main():
    data_dir = Path(__file__).parent / 'data'
    output_dir = Path(__file__).parent / 'output'
    output_dir.mkdir(exist_ok=True)

    print("Loading image...")
    image = load_image(data_dir / 'ridge.pgm')
    print(f"Image shape: {image.rows} x {image.columns}")

    steps = []
    n_seams = 3
    print(f"Carving image (removing {n_seams} seams)...")
    carved = carve_image(image.pixels, n_seams, callback=steps.append)

    first = steps[0]
    print("\nEnergy Map:")
    print(format_grid(first.energy))
    print("\nCumulative Energy Map:")
    print(format_grid(first.cumulative))
    print(f"\nFirst seam: {first.seam.tolist()}")

    fig = plot_maps(image.pixels, first.energy, first.cumulative, seam=first.seam,
                    path=str(output_dir / 'ridge_maps.png'), max_value=image.max_value)
    plt.close(fig)

    vis = overlay_seam(image.pixels, first.seam, max_value=image.max_value)
    img_array = (vis.permute(1, 2, 0).numpy() * 255).clip(0, 255).astype(np.uint8)
    Image.fromarray(img_array).save(output_dir / "ridge_with_seam.png")

    print("\nSeam-Carved Image:")
    print(format_grid(carved))
    write_pgm(PGMImage(carved, image.max_value), output_dir / 'ridge_carved.pgm')

    print("\nDone! Check the output/ directory for results.")


if __name__ == '__main__':
    main()
