"""Tests for seam tracing and removal."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import torch
import pytest
from seam_carving.energy import gradient_magnitude_energy, cumulative_energy
from seam_carving.seam import seam_end, trace_seam, remove_seam_, carve_seam

from conftest import make_random_image


class TestSeamEnd:
    def test_lowest_value(self):
        M = torch.tensor([[0, 0, 0], [7, 2, 5]])
        assert seam_end(M) == 1

    def test_ties_go_left(self):
        M = torch.tensor([[0, 0, 0, 0], [5, 3, 4, 3]])
        assert seam_end(M) == 1


class TestTraceSeam:
    def test_follows_zero_energy_column(self):
        """Given an energy map that's zero in one column, the seam goes there."""
        energy = torch.ones(6, 5, dtype=torch.int64)
        energy[:, 2] = 0
        M = cumulative_energy(energy)
        for mode in ('value', 'window'):
            seam = trace_seam(M, traceback=mode)
            assert (seam == 2).all(), f"{mode}: got {seam.tolist()}"

    def test_follows_diagonal_valley(self):
        H, W = 8, 12
        energy = torch.full((H, W), 10, dtype=torch.int64)
        for i in range(H):
            energy[i, 2 + i] = 0
        M = cumulative_energy(energy)
        seam = trace_seam(M, traceback='window')
        assert seam.tolist() == [2 + i for i in range(H)]

    def test_picks_upper_left_ancestor(self):
        M = torch.tensor([[3, 5], [6, 5]])
        assert trace_seam(M).tolist() == [0, 1]

    def test_value_lookup_searches_whole_row(self):
        """The ancestor value is matched by the first equal cell in the row above."""
        M = torch.tensor([[1, 9, 9, 1],
                          [9, 9, 9, 0]])
        assert trace_seam(M, traceback='value').tolist() == [0, 3]

    def test_window_lookup_stays_connected(self):
        M = torch.tensor([[1, 9, 9, 1],
                          [9, 9, 9, 0]])
        assert trace_seam(M, traceback='window').tolist() == [3, 3]

    def test_window_ties_go_left(self):
        M = torch.tensor([[4, 2, 2, 2],
                          [9, 9, 0, 9]])
        assert trace_seam(M, traceback='window').tolist() == [1, 2]

    def test_window_seam_continuity(self):
        """Adjacent seam indices must differ by at most 1."""
        M = cumulative_energy(gradient_magnitude_energy(make_random_image(40, 40)))
        seam = trace_seam(M, traceback='window')
        diffs = torch.abs(seam[1:] - seam[:-1])
        assert diffs.max() <= 1

    def test_seam_length_matches_height(self):
        M = cumulative_energy(gradient_magnitude_energy(make_random_image(17, 9)))
        assert trace_seam(M).shape == (17,)

    def test_seam_on_cumulative_device(self):
        M = cumulative_energy(gradient_magnitude_energy(make_random_image(5, 5)))
        seam = trace_seam(M)
        assert seam.device == M.device
        assert seam.dtype == torch.long

    def test_single_row(self):
        M = torch.tensor([[4, 1, 1]])
        assert trace_seam(M).tolist() == [1]

    def test_invalid_traceback(self):
        with pytest.raises(ValueError):
            trace_seam(torch.tensor([[1, 2]]), traceback='nearest')


class TestRemoveSeam:
    def test_with_varying_positions(self):
        """Seam that zigzags removes the correct pixel from each row."""
        image = torch.arange(6).repeat(3, 1)
        seam = torch.tensor([2, 3, 2])
        carved = remove_seam_(image, seam)

        assert carved.shape == (3, 5)
        assert carved[0].tolist() == [0, 1, 3, 4, 5]
        assert carved[1].tolist() == [0, 1, 2, 4, 5]
        assert carved[2].tolist() == [0, 1, 3, 4, 5]

    def test_is_in_place(self):
        image = torch.arange(12).reshape(3, 4)
        carved = remove_seam_(image, torch.tensor([0, 1, 2]))
        assert carved.data_ptr() == image.data_ptr()
        assert torch.equal(image[:, :3], carved)

    def test_first_and_last_column(self):
        image = torch.tensor([[1, 2, 3], [4, 5, 6]])
        carved = remove_seam_(image, torch.tensor([0, 2]))
        assert carved.tolist() == [[2, 3], [4, 5]]

    def test_seam_length_mismatch(self):
        image = torch.zeros(3, 4, dtype=torch.int64)
        with pytest.raises(ValueError):
            remove_seam_(image, torch.tensor([0, 1]))

    def test_scalar_seam(self):
        image = torch.zeros(3, 4, dtype=torch.int64)
        with pytest.raises(ValueError, match="shape"):
            remove_seam_(image, torch.tensor(1))


class TestCarveSeam:
    def test_worked_example(self, small_image):
        """Seam [0, 1] drops column 0 from row 0 and column 1 from row 1."""
        M = torch.tensor([[3, 5], [6, 5]])
        carved = carve_seam(small_image, M)
        assert carved.tolist() == [[2], [3]]

    def test_from_computed_maps(self, small_image):
        M = cumulative_energy(gradient_magnitude_energy(small_image))
        carved = carve_seam(small_image, M)
        assert carved.tolist() == [[2], [4]]

    def test_cumulative_not_mutated(self):
        image = make_random_image(5, 6)
        M = cumulative_energy(gradient_magnitude_energy(image))
        before = M.clone()
        carve_seam(image, M)
        assert torch.equal(M, before)

    def test_survivors_keep_order(self):
        image = torch.arange(30).reshape(5, 6)
        original = image.clone()
        M = cumulative_energy(gradient_magnitude_energy(image))
        carved = carve_seam(image, M)

        assert carved.shape == (5, 5)
        for i in range(5):
            row = carved[i].tolist()
            assert row == sorted(row)
            assert set(row) < set(original[i].tolist())

    def test_shape_mismatch(self, small_image):
        with pytest.raises(ValueError):
            carve_seam(small_image, torch.zeros(2, 3, dtype=torch.int64))
