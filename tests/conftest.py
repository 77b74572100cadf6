"""Shared test fixtures for the seam carving test suite."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import torch
import pytest


@pytest.fixture
def small_image():
    """The 2x2 grid [[1, 2], [3, 4]]."""
    return torch.tensor([[1, 2], [3, 4]], dtype=torch.int64)


@pytest.fixture
def pgm_file(tmp_path):
    """A P2 file holding [[1, 2], [3, 4]] with a header comment."""
    path = tmp_path / "small.pgm"
    path.write_text("P2\n# Created by IrfanView\n2 2\n255\n1 2\n3 4\n")
    return path


def make_edge_image(H, W, low=0, high=200):
    """Vertical step edge: ``low`` in the left half, ``high`` in the right."""
    image = torch.full((H, W), low, dtype=torch.int64)
    image[:, W // 2:] = high
    return image


def make_random_image(H, W, max_value=255, seed=42):
    gen = torch.Generator().manual_seed(seed)
    return torch.randint(0, max_value + 1, (H, W), generator=gen, dtype=torch.int64)
