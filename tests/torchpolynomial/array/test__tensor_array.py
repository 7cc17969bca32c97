"""Tests for TensorArray."""

import pytest
import torch

from torchpolynomial import ArgumentError
from torchpolynomial.array import TensorArray


class TestTensorArray:
    """Tests for the tensor-backed coefficient store."""

    def test_zeros(self):
        a = TensorArray(3)
        assert a.size() == 3
        torch.testing.assert_close(a.tensor, torch.zeros(3, dtype=torch.float64))

    def test_from_sequence(self):
        a = TensorArray([1, 2, 3], dtype=torch.float32)
        assert a.dtype == torch.float32
        assert a.to_list() == [1.0, 2.0, 3.0]

    def test_from_tensor_copies(self):
        """Mutating the source does not change the array."""
        source = torch.tensor([1.0, 2.0], dtype=torch.float64)
        a = TensorArray(source)
        source[0] = 5.0
        assert a.get(0) == 1.0

    def test_get_set_add(self):
        a = TensorArray(3)
        a.set(0, 1.5)
        a.add(0, 2.0)
        a.add(2, -1.0)
        assert a.to_list() == [3.5, 0.0, -1.0]

    def test_negative_index(self):
        a = TensorArray([1.0, 2.0, 3.0])
        assert a[-1] == 3.0

    def test_out_of_range(self):
        a = TensorArray(2)
        with pytest.raises(ArgumentError):
            a.get(2)
        with pytest.raises(ArgumentError):
            a.set(-3, 1.0)

    def test_reset(self):
        a = TensorArray([1.0, 2.0])
        a.reset()
        assert a.to_list() == [0.0, 0.0]

    def test_fill_matching_shorter(self):
        """Only the overlapping prefix is copied."""
        a = TensorArray(4)
        a.fill_matching([1.0, 2.0])
        assert a.to_list() == [1.0, 2.0, 0.0, 0.0]

    def test_fill_matching_longer(self):
        a = TensorArray(2)
        a.fill_matching(torch.tensor([1.0, 2.0, 3.0]))
        assert a.to_list() == [1.0, 2.0]

    def test_copy_is_independent(self):
        a = TensorArray([1.0, 2.0])
        b = a.copy()
        b.set(0, 9.0)
        assert a.get(0) == 1.0

    def test_len_and_iter(self):
        a = TensorArray([1.0, 2.0, 3.0])
        assert len(a) == 3
        assert list(a) == [1.0, 2.0, 3.0]
