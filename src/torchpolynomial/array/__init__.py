"""Coefficient storage: fixed-size dense arrays with accumulate semantics."""

from torchpolynomial.array._dense_array import DenseArray
from torchpolynomial.array._object_array import ObjectArray
from torchpolynomial.array._tensor_array import TensorArray

__all__ = [
    "DenseArray",
    "ObjectArray",
    "TensorArray",
]
