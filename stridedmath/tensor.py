"""An n-dimensional tensor over flat, shareable, strided storage."""

from __future__ import annotations

import math
import numbers
import operator
from collections.abc import Iterator, Sequence
from typing import Any

from .broadcast import batched_matmul, elementwise, iter_indices
from .errors import (
    DimensionMismatchError,
    IndexOutOfRangeError,
    InvalidAxisError,
    InvalidParamError,
    InvalidSlicingError,
    ShapeMismatchError,
)
from .layout import Layout, contiguous_strides, flatten_nested, nested_shape


def _as_lists(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return [_as_lists(item) for item in value]
    return value


class Tensor:
    """A strided view onto a flat list of numbers.

    Views produced by slicing, permuting and similar operations share the
    storage of the tensor they came from, so writes through one are seen
    by the others.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        shape: Sequence[int],
        strides: Sequence[int],
        offset: int,
        data: list[Any],
    ) -> None:
        self._layout = Layout(tuple(shape), tuple(strides), offset)
        self._storage = data if isinstance(data, list) else list(data)

    # ------------------------------------------------------------------
    # Construction

    @classmethod
    def from_nested(cls, data: Any) -> Tensor:
        """Build a contiguous tensor from nested lists (or a single scalar)."""
        shape = nested_shape(data)
        flat = flatten_nested(data)
        if len(flat) != math.prod(shape):
            raise InvalidParamError(
                f"nested data of shape {list(shape)} holds {len(flat)} elements"
            )
        return cls(shape, contiguous_strides(shape), 0, flat)

    @classmethod
    def from_zeros(cls, shape: Sequence[int]) -> Tensor:
        """A contiguous tensor of the given shape filled with zeros."""
        shape = tuple(shape)
        return cls(shape, contiguous_strides(shape), 0, [0] * math.prod(shape))

    @classmethod
    def from_shape(cls, shape: Sequence[int], data: Sequence[Any]) -> Tensor:
        """A contiguous tensor of ``shape`` holding a copy of the flat ``data``."""
        shape = tuple(shape)
        values = list(data)
        if len(values) != math.prod(shape):
            raise InvalidParamError(
                f"{len(values)} values do not fill shape {list(shape)}"
            )
        return cls(shape, contiguous_strides(shape), 0, values)

    def _derive(self, shape: Sequence[int], strides: Sequence[int], offset: int) -> Tensor:
        return Tensor(shape, strides, offset, self._storage)

    # ------------------------------------------------------------------
    # Introspection

    @property
    def shape(self) -> tuple[int, ...]:
        return self._layout.shape

    @property
    def strides(self) -> tuple[int, ...]:
        return self._layout.strides

    @property
    def ndim(self) -> int:
        return len(self._layout.strides)

    @property
    def nelems(self) -> int:
        """Number of elements in the underlying storage."""
        return len(self._storage)

    @property
    def data(self) -> list[Any]:
        """A copy of the whole underlying storage."""
        return list(self._storage)

    @property
    def _operand(self) -> tuple[Layout, list[Any]]:
        return self._layout, self._storage

    # ------------------------------------------------------------------
    # Element access

    def _flat_index(self, index: Sequence[int]) -> int:
        index = tuple(index)
        shape = self._layout.shape
        if len(index) != len(shape):
            raise ShapeMismatchError(index, shape)
        flat = self._layout.offset + sum(
            idx * stride for idx, stride in zip(index, self._layout.strides)
        )
        if any(idx < 0 for idx in index) or flat >= len(self._storage):
            raise IndexOutOfRangeError(flat, len(self._storage))
        return flat

    def getval(self, index: Sequence[int]) -> Any:
        """The value at a full index."""
        return self._storage[self._flat_index(index)]

    def setval(self, index: Sequence[int], value: Any) -> None:
        """Store ``value`` at a full index."""
        self._storage[self._flat_index(index)] = value

    def _positions(self) -> Iterator[int]:
        offset = self._layout.offset
        strides = self._layout.strides
        for index in iter_indices(self._layout.shape):
            yield offset + sum(idx * stride for idx, stride in zip(index, strides))

    def __iter__(self) -> Iterator[Any]:
        """Values of the view in row-major order of its own shape."""
        storage = self._storage
        return (storage[pos] for pos in self._positions())

    # ------------------------------------------------------------------
    # Views

    def view(self) -> Tensor:
        """A view with the same layout over the same storage."""
        return self._derive(self.shape, self.strides, self._layout.offset)

    def axis(self, axis: int) -> Tensor:
        """A view with ``axis`` moved to the front."""
        if not 0 <= axis < self.ndim:
            raise InvalidAxisError(axis, self.ndim)
        order = [axis] + [dim for dim in range(self.ndim) if dim != axis]
        return self._derive(
            [self.shape[dim] for dim in order],
            [self.strides[dim] for dim in order],
            self._layout.offset,
        )

    def slice(self, index: Sequence[int]) -> Tensor:
        """A view fixing the leading axes at ``index``."""
        index = tuple(index)
        if len(index) > self.ndim:
            raise ShapeMismatchError(index, self.shape)
        offset = self._layout.offset
        for idx, dim, stride in zip(index, self.shape, self.strides):
            if not 0 <= idx < dim:
                raise InvalidSlicingError(index, self.shape)
            offset += idx * stride
        return self._derive(self.shape[len(index):], self.strides[len(index):], offset)

    def axis_slice(self, axis: int, index: Sequence[int]) -> Tensor:
        """Slice after moving ``axis`` to the front."""
        return self.axis(axis).slice(index)

    def batch(self, start: int, stop: int) -> Tensor:
        """A view of the rows ``start`` to ``stop`` along the first axis."""
        if self.ndim == 0:
            raise InvalidAxisError(0, 0)
        if not 0 <= start <= stop <= self.shape[0]:
            raise InvalidSlicingError((start, stop), self.shape)
        return self._derive(
            (stop - start,) + self.shape[1:],
            self.strides,
            self._layout.offset + start * self.strides[0],
        )

    def permute(self, axes: Sequence[int]) -> Tensor:
        """A view with the axes reordered as ``axes``."""
        axes = tuple(axes)
        if len(axes) != self.ndim:
            raise DimensionMismatchError(self.ndim, len(axes))
        for axis in axes:
            if not 0 <= axis < self.ndim:
                raise InvalidAxisError(axis, self.ndim)
        return self._derive(
            [self.shape[axis] for axis in axes],
            [self.strides[axis] for axis in axes],
            self._layout.offset,
        )

    def transpose(self) -> Tensor:
        """A view with the order of all axes reversed."""
        return self.permute(range(self.ndim - 1, -1, -1))

    def t(self) -> Tensor:
        """Shorthand for :meth:`transpose`."""
        return self.transpose()

    def flatten(self) -> Tensor:
        """A two-dimensional view: the first axis by all the others combined."""
        if self.ndim == 0:
            raise InvalidAxisError(0, 0)
        rest = math.prod(self.shape[1:])
        return self._derive((self.shape[0], rest), (rest, 1), self._layout.offset)

    # ------------------------------------------------------------------
    # Reductions and rendering

    def max(self) -> Any:
        return max(self)

    def min(self) -> Any:
        return min(self)

    def to_nested(self) -> Any:
        """The view as nested lists; a scalar for a zero-dimensional view."""
        shape = self.shape

        def build(prefix: tuple[int, ...]) -> Any:
            if len(prefix) == len(shape):
                return self.getval(prefix)
            return [build(prefix + (i,)) for i in range(shape[len(prefix)])]

        return build(())

    def render(self) -> str:
        """The view as bracketed, comma-separated text."""
        shape = self.shape

        def build(prefix: tuple[int, ...]) -> str:
            if len(prefix) == len(shape):
                return str(self.getval(prefix))
            inner = ", ".join(build(prefix + (i,)) for i in range(shape[len(prefix)]))
            return f"[{inner}]"

        return build(())

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Tensor({self.render()}, shape={list(self.shape)})"

    # ------------------------------------------------------------------
    # Writing

    def _assign(self, index: list[int], data: Any) -> None:
        if not isinstance(data, (list, tuple)):
            self.setval(index, data)
        elif len(index) == self.ndim:
            self._assign(index, data[0])
        else:
            for i, item in enumerate(data):
                self._assign(index + [i], item)

    def update(self, index: Sequence[int], data: Any) -> Tensor:
        """Write nested ``data`` into the part of the view at ``index``.

        Returns the tensor itself so updates can be chained.
        """
        self._assign(list(index), data)
        return self

    # ------------------------------------------------------------------
    # Arithmetic

    def add(self, other: Tensor) -> Tensor:
        """Element-wise sum with broadcasting."""
        layout, values = elementwise(operator.add, self._operand, other._operand)
        return Tensor(layout.shape, layout.strides, 0, values)

    def sub(self, other: Tensor) -> Tensor:
        """Element-wise difference with broadcasting."""
        layout, values = elementwise(operator.sub, self._operand, other._operand)
        return Tensor(layout.shape, layout.strides, 0, values)

    def matmul(self, other: Tensor) -> Tensor:
        """Matrix product over the last two axes, broadcasting batch axes."""
        layout, values = batched_matmul(self._operand, other._operand)
        return Tensor(layout.shape, layout.strides, 0, values)

    def _apply_scalar(self, op: Any, scalar: Any) -> None:
        storage = self._storage
        for pos in self._positions():
            storage[pos] = op(storage[pos], scalar)

    def add_scalar(self, scalar: Any) -> None:
        self._apply_scalar(operator.add, scalar)

    def sub_scalar(self, scalar: Any) -> None:
        self._apply_scalar(operator.sub, scalar)

    def mul_scalar(self, scalar: Any) -> None:
        self._apply_scalar(operator.mul, scalar)

    def __add__(self, other: object) -> Tensor:
        if not isinstance(other, Tensor):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> Tensor:
        if not isinstance(other, Tensor):
            return NotImplemented
        return self.sub(other)

    def __matmul__(self, other: object) -> Tensor:
        if not isinstance(other, Tensor):
            return NotImplemented
        return self.matmul(other)

    def __iadd__(self, scalar: Any) -> Tensor:
        self.add_scalar(scalar)
        return self

    def __isub__(self, scalar: Any) -> Tensor:
        self.sub_scalar(scalar)
        return self

    def __imul__(self, scalar: Any) -> Tensor:
        self.mul_scalar(scalar)
        return self

    # ------------------------------------------------------------------
    # Comparison

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Tensor):
            return self.shape == other.shape and self.to_nested() == other.to_nested()
        if isinstance(other, (list, tuple)):
            return self.to_nested() == _as_lists(other)
        if isinstance(other, numbers.Number):
            return self.shape == () and self.to_nested() == other
        return NotImplemented