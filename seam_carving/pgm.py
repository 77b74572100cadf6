"""
Reading and writing grayscale images.

Plain (ASCII, ``P2``) PGM files are parsed directly so the declared maximum
value is kept and every pixel is range-checked. Other raster formats go
through Pillow.

    P2
    # optional comment
    <columns> <rows>
    <max value>
    <pixel data, whitespace separated>
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Union

import numpy as np
import torch
from PIL import Image

from .config import DEFAULT_MAX_VALUE

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

# Largest max value the PGM format allows
MAX_PGM_VALUE = 65535


class PGMFormatError(ValueError):
    """The file is not a well-formed P2 image."""


@dataclass
class PGMImage:
    pixels: torch.Tensor  # (rows, columns), int64
    max_value: int

    @property
    def rows(self) -> int:
        return self.pixels.shape[0]

    @property
    def columns(self) -> int:
        return self.pixels.shape[1]


def _tokenize(text: str) -> List[str]:
    tokens = []
    for line in text.splitlines():
        line = line.split('#', 1)[0]
        tokens.extend(line.split())
    return tokens


def _to_int(token: str, what: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise PGMFormatError(f"Invalid {what}: {token!r}") from None


def parse_pgm(text: str) -> PGMImage:
    """
    Parse the contents of a P2 file.

    Args:
        text: File contents

    Returns:
        PGMImage with a (rows, columns) int64 pixel grid

    Raises:
        PGMFormatError: on a wrong magic number, bad header, missing pixels
            or a pixel outside [0, max value]
    """
    tokens = _tokenize(text)
    if not tokens or tokens[0] != 'P2':
        found = tokens[0] if tokens else ''
        raise PGMFormatError(f"Unsupported format {found!r}, only 'P2' is supported")
    if len(tokens) < 4:
        raise PGMFormatError("Truncated header, expected columns, rows and max value")

    columns = _to_int(tokens[1], 'column count')
    rows = _to_int(tokens[2], 'row count')
    max_value = _to_int(tokens[3], 'max value')

    if columns <= 0 or rows <= 0:
        raise PGMFormatError(f"Invalid dimensions {columns}x{rows}")
    if not 0 < max_value <= MAX_PGM_VALUE:
        raise PGMFormatError(f"Invalid max value {max_value}, expected 1 to {MAX_PGM_VALUE}")

    data = tokens[4:]
    n_pixels = rows * columns
    if len(data) < n_pixels:
        raise PGMFormatError(f"Expected {n_pixels} pixels, found {len(data)}")
    if len(data) > n_pixels:
        logger.warning("Ignoring %d pixel values past the end of the image",
                       len(data) - n_pixels)

    values = [_to_int(token, 'pixel value') for token in data[:n_pixels]]
    # Checked before building the tensor so oversized values never reach int64
    if any(v < 0 or v > max_value for v in values):
        raise PGMFormatError(f"A pixel value falls outside the acceptable "
                             f"range of [0, {max_value}]")

    pixels = torch.tensor(values, dtype=torch.int64).reshape(rows, columns)
    return PGMImage(pixels, max_value)


def read_pgm(path: PathLike) -> PGMImage:
    """Read a P2 file from disk."""
    text = Path(path).read_text()
    image = parse_pgm(text)
    logger.info("Loaded %s: %d x %d, max value %d", path, image.columns,
                image.rows, image.max_value)
    return image


def format_pgm(image: PGMImage) -> str:
    """Serialize to P2 text, one image row per line."""
    lines = ['P2', f"{image.columns} {image.rows}", str(image.max_value)]
    for row in image.pixels.tolist():
        lines.append(' '.join(str(v) for v in row))
    return '\n'.join(lines) + '\n'


def write_pgm(image: PGMImage, path: PathLike) -> None:
    Path(path).write_text(format_pgm(image))
    print(f"Saved: {path}")


def load_image(path: PathLike) -> PGMImage:
    """Load a grayscale grid from a .pgm file or any image Pillow can open."""
    if Path(path).suffix.lower() == '.pgm':
        with open(path, 'rb') as f:
            magic = f.read(2)
        if magic == b'P2':
            return read_pgm(path)

    img = Image.open(path).convert('L')
    img_array = np.array(img, dtype=np.int64)
    logger.info("Loaded %s via Pillow: %d x %d", path, img_array.shape[1],
                img_array.shape[0])
    return PGMImage(torch.from_numpy(img_array), DEFAULT_MAX_VALUE)


def save_image(grid: torch.Tensor, path: PathLike,
               max_value: int = DEFAULT_MAX_VALUE) -> None:
    """Save a grid as an 8-bit grayscale image, scaling by ``max_value``."""
    img_array = grid.double().cpu().numpy() * (255.0 / max_value)
    img_array = img_array.round().clip(0, 255).astype(np.uint8)
    img = Image.fromarray(img_array)
    img.save(path)
    print(f"Saved: {path}")
