"""Exceptions raised by tensor operations."""

from __future__ import annotations

from collections.abc import Sequence


def _shape_text(shape: Sequence[int]) -> str:
    return str(list(shape))


class TensorError(Exception):
    """Base class for every tensor error; also used for generic failures."""

    def __init__(self, err_msg: str = "") -> None:
        super().__init__(err_msg)
        self.err_msg = err_msg

    def __str__(self) -> str:
        return f"Error [ ERR_MSG: {self.err_msg} ]"


class InvalidAxisError(TensorError, IndexError):
    """An axis was requested that the tensor does not have."""

    def __init__(self, axis: int, ndim: int) -> None:
        Exception.__init__(self, axis, ndim)
        self.axis = axis
        self.ndim = ndim

    def __str__(self) -> str:
        return f"Invalid axis [ AXIS: {self.axis} | NDIM: {self.ndim} ]"


class InvalidSlicingError(TensorError, IndexError):
    """A slice index lies outside the tensor's shape."""

    def __init__(self, slice: Sequence[int], shape: Sequence[int]) -> None:
        Exception.__init__(self, slice, shape)
        self.slice = tuple(slice)
        self.shape = tuple(shape)

    def __str__(self) -> str:
        return (
            f"Invalid slicing [ SLICE: {_shape_text(self.slice)} "
            f"| SHAPE: {_shape_text(self.shape)} ]"
        )


class ShapeMismatchError(TensorError, ValueError):
    """Two shapes (or an index and a shape) do not agree in length."""

    def __init__(self, shape_a: Sequence[int], shape_b: Sequence[int]) -> None:
        Exception.__init__(self, shape_a, shape_b)
        self.shape_a = tuple(shape_a)
        self.shape_b = tuple(shape_b)

    def __str__(self) -> str:
        return (
            f"Shape mismatch [ SHAPE(A): {_shape_text(self.shape_a)} "
            f"| SHAPE(B): {_shape_text(self.shape_b)} ]"
        )


class DimensionMismatchError(TensorError, ValueError):
    """The number of axes given does not match the tensor's dimension."""

    def __init__(self, tensor_dim: int, dim: int) -> None:
        Exception.__init__(self, tensor_dim, dim)
        self.tensor_dim = tensor_dim
        self.dim = dim

    def __str__(self) -> str:
        return (
            f"Dimension mismatch [ TENSOR_DIMENSION: {self.tensor_dim} "
            f"| DIMENSION: {self.dim} ]"
        )


class ShapeMismatchBroadcastError(TensorError, ValueError):
    """Two shapes cannot be broadcast together."""

    def __init__(self, shape_a: Sequence[int], shape_b: Sequence[int]) -> None:
        Exception.__init__(self, shape_a, shape_b)
        self.shape_a = tuple(shape_a)
        self.shape_b = tuple(shape_b)

    def __str__(self) -> str:
        return (
            "The two shapes are not compatible for broadcasting "
            f"[ SHAPE(A): {_shape_text(self.shape_a)} "
            f"| SHAPE(B): {_shape_text(self.shape_b)} ]"
        )


class IndexOutOfRangeError(TensorError, IndexError):
    """A computed flat index lies past the end of the storage."""

    def __init__(self, index: int, nelems: int) -> None:
        Exception.__init__(self, index, nelems)
        self.index = index
        self.nelems = nelems

    def __str__(self) -> str:
        return f"Index out of range [ INDEX: {self.index} | NUM_ELEMENTS: {self.nelems} ]"


class InvalidParamError(TensorError, ValueError):
    """A parameter value is not acceptable."""

    def __str__(self) -> str:
        return f"Invalid parameter [ DESC: {self.err_msg} ]"


class InvalidFileContentsError(TensorError):
    """A file did not hold what was expected."""

    def __str__(self) -> str:
        return f"Error [ ERR_MSG: {self.err_msg} ]"