"""Two-dimensional matrices backed by :class:`Tensor`."""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from typing import Any

from .linalg import one_hot_encode
from .tensor import Tensor


class Matrix:
    """A rows-by-columns matrix."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, tensor: Tensor) -> None:
        self.tensor = tensor

    @classmethod
    def from_zeros(cls, rows: int, cols: int) -> Matrix:
        return cls(Tensor.from_zeros((rows, cols)))

    @classmethod
    def from_nested(cls, data: Sequence[Sequence[Any]]) -> Matrix:
        return cls(Tensor.from_nested(data))

    @classmethod
    def from_shape(cls, shape: Sequence[int], data: Sequence[Any]) -> Matrix:
        return cls(Tensor.from_shape(shape, data))

    @classmethod
    def from_one_hot(cls, labels: Sequence[Hashable]) -> Matrix:
        """One-hot encoding of ``labels``, one row per label."""
        return cls(one_hot_encode(labels))

    @property
    def shape(self) -> tuple[int, ...]:
        return self.tensor.shape

    def row(self, index: int) -> Tensor:
        """A view of row ``index``."""
        return self.tensor.slice((index,))

    def col(self, index: int) -> Tensor:
        """A view of column ``index``."""
        return self.tensor.axis_slice(1, (index,))

    def update(self, data: Sequence[Sequence[Any]]) -> Tensor:
        """Overwrite every value; returns the updated tensor."""
        return self.tensor.update((), data)

    def update_row(self, index: int, data: Sequence[Any]) -> Tensor:
        """Overwrite row ``index``; returns the updated tensor."""
        return self.tensor.update((index,), data)

    def add(self, other: Matrix) -> Matrix:
        return Matrix(self.tensor.add(other.tensor))

    def sub(self, other: Matrix) -> Matrix:
        return Matrix(self.tensor.sub(other.tensor))

    def mul(self, other: Matrix) -> Matrix:
        """Matrix product."""
        return Matrix(self.tensor.matmul(other.tensor))

    def add_scalar(self, scalar: Any) -> None:
        self.tensor.add_scalar(scalar)

    def sub_scalar(self, scalar: Any) -> None:
        self.tensor.sub_scalar(scalar)

    def mul_scalar(self, scalar: Any) -> None:
        self.tensor.mul_scalar(scalar)

    def t(self) -> Tensor:
        """A transposed view."""
        return self.tensor.t()

    def render(self) -> str:
        return self.tensor.render()

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Matrix({self.render()})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Matrix):
            return self.tensor == other.tensor
        if isinstance(other, (list, tuple, Tensor)):
            return self.tensor == other
        return NotImplemented