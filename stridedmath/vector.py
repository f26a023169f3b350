"""Column vectors backed by :class:`Tensor`."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from .tensor import Tensor


class Vector:
    """A column vector stored as an ``n x 1`` tensor."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, tensor: Tensor) -> None:
        self.tensor = tensor

    @classmethod
    def from_zeros(cls, nelems: int) -> Vector:
        return cls(Tensor.from_zeros((nelems, 1)))

    @classmethod
    def from_list(cls, data: Sequence[Any]) -> Vector:
        values = list(data)
        return cls(Tensor.from_shape((len(values), 1), values))

    def get(self, index: int) -> Any:
        return self.tensor.getval((index, 0))

    def set(self, index: int, value: Any) -> None:
        self.tensor.setval((index, 0), value)

    def __len__(self) -> int:
        return self.tensor.shape[0]

    def __repr__(self) -> str:
        return f"Vector({self.tensor.render()})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Vector):
            return self.tensor == other.tensor
        if isinstance(other, (list, tuple, Tensor)):
            return self.tensor == other
        return NotImplemented