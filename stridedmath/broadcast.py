"""Broadcasting rules and the kernels behind tensor arithmetic.

Operands are ``(Layout, storage)`` pairs, where ``storage`` is the flat
sequence the layout indexes into. Results come back in the same form,
always contiguous with a zero offset.
"""

from __future__ import annotations

import itertools
import math
from collections.abc import Callable, Iterator, Sequence
from typing import Any

from .errors import ShapeMismatchBroadcastError
from .layout import Layout, contiguous_strides

Operand = tuple[Layout, Sequence[Any]]


def _elementwise_shape(
    batch_a: Sequence[int],
    batch_b: Sequence[int],
    shape_a: Sequence[int],
    shape_b: Sequence[int],
) -> list[int]:
    ndim_c = max(len(batch_a), len(batch_b))
    padded_a = [1] * (ndim_c - len(batch_a)) + list(batch_a)
    padded_b = [1] * (ndim_c - len(batch_b)) + list(batch_b)
    shape_c = []
    for dim_a, dim_b in zip(padded_a, padded_b):
        if dim_a == dim_b or dim_a == 1 or dim_b == 1:
            shape_c.append(max(dim_a, dim_b))
        else:
            raise ShapeMismatchBroadcastError(shape_a, shape_b)
    return shape_c


def broadcast_shape(
    shape_a: Sequence[int], shape_b: Sequence[int], batch_mul: bool
) -> tuple[int, ...]:
    """Shape of the result of combining ``shape_a`` with ``shape_b``.

    With ``batch_mul`` the last two axes of each shape are multiplied as
    matrices and only the leading (batch) axes are broadcast.
    """
    if not batch_mul:
        return tuple(_elementwise_shape(shape_a, shape_b, shape_a, shape_b))

    if len(shape_a) < 2 or len(shape_b) < 2:
        raise ShapeMismatchBroadcastError(shape_a, shape_b)

    *batch_a, m, k_a = shape_a
    *batch_b, k_b, n = shape_b
    if k_a != k_b:
        raise ShapeMismatchBroadcastError(shape_a, shape_b)

    shape_c = _elementwise_shape(batch_a, batch_b, shape_a, shape_b)
    return tuple(shape_c) + (m, n)


def iter_indices(shape: Sequence[int]) -> Iterator[tuple[int, ...]]:
    """Every index of ``shape`` in row-major order."""
    return itertools.product(*(range(dim) for dim in shape))


def broadcast_offset(
    index: Sequence[int], shape: Sequence[int], strides: Sequence[int]
) -> int:
    """Flat offset of ``index`` in a layout that may be broadcast against it.

    The layout is aligned to the trailing axes of ``index``; axes of size
    one always contribute position zero.
    """
    if not shape:
        return 0
    tail = index[len(index) - len(shape):]
    return sum(
        0 if dim == 1 else idx * stride
        for idx, dim, stride in zip(tail, shape, strides)
    )


def elementwise(
    op: Callable[[Any, Any], Any], a: Operand, b: Operand
) -> tuple[Layout, list[Any]]:
    """Apply ``op`` pairwise over the broadcast of ``a`` and ``b``."""
    layout_a, data_a = a
    layout_b, data_b = b
    shape_c = broadcast_shape(layout_a.shape, layout_b.shape, False)

    data_c = [
        op(
            data_a[layout_a.offset + broadcast_offset(index, layout_a.shape, layout_a.strides)],
            data_b[layout_b.offset + broadcast_offset(index, layout_b.shape, layout_b.strides)],
        )
        for index in iter_indices(shape_c)
    ]
    return Layout(shape_c, contiguous_strides(shape_c), 0), data_c


def _matrix_strides(strides: Sequence[int]) -> tuple[int, int]:
    if len(strides) < 2:
        return 0, 0
    return strides[-2], strides[-1]


def batched_matmul(a: Operand, b: Operand) -> tuple[Layout, list[Any]]:
    """Matrix product over the last two axes, broadcasting the batch axes."""
    layout_a, data_a = a
    layout_b, data_b = b
    shape_a, shape_b = layout_a.shape, layout_b.shape
    shape_c = broadcast_shape(shape_a, shape_b, True)

    m, n = shape_c[-2], shape_c[-1]
    k = shape_a[-1]
    row_a, col_a = _matrix_strides(layout_a.strides)
    row_b, col_b = _matrix_strides(layout_b.strides)

    data_c: list[Any] = []
    if math.prod(shape_c) == 0:
        return Layout(shape_c, contiguous_strides(shape_c), 0), data_c

    for index in iter_indices(shape_c[:-2]):
        base_a = layout_a.offset + broadcast_offset(
            index, shape_a[:-2], layout_a.strides[:-2]
        )
        base_b = layout_b.offset + broadcast_offset(
            index, shape_b[:-2], layout_b.strides[:-2]
        )
        for mi in range(m):
            for ji in range(n):
                data_c.append(
                    sum(
                        (
                            data_a[base_a + mi * row_a + ki * col_a]
                            * data_b[base_b + ki * row_b + ji * col_b]
                            for ki in range(k)
                        ),
                        0,
                    )
                )

    return Layout(shape_c, contiguous_strides(shape_c), 0), data_c