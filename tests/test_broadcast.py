import operator

import pytest

from stridedmath.broadcast import (
    batched_matmul,
    broadcast_offset,
    broadcast_shape,
    elementwise,
    iter_indices,
)
from stridedmath.errors import ShapeMismatchBroadcastError
from stridedmath.layout import Layout, contiguous_strides, flatten_nested


def counting(shape):
    """Contiguous operand holding 1, 2, 3, ... in row-major order."""
    total = 1
    for dim in shape:
        total *= dim
    return Layout(shape, contiguous_strides(shape), 0), list(range(1, total + 1))


def operand(nested):
    data = flatten_nested(nested)
    shape = []
    level = nested
    while isinstance(level, list):
        shape.append(len(level))
        level = level[0]
    return Layout(shape, contiguous_strides(shape), 0), data


# broadcast_shape, carried over from the source's own cases


@pytest.mark.parametrize(
    "shape_a, shape_b, expected",
    [
        ([3], [3], (3,)),
        ([3], [1], (3,)),
        ([2, 3, 5], [2, 1, 1], (2, 3, 5)),
        ([2, 1, 5], [2, 4, 1], (2, 4, 5)),
    ],
)
def test_broadcast_shape_elementwise(shape_a, shape_b, expected):
    assert broadcast_shape(shape_a, shape_b, False) == expected


@pytest.mark.parametrize(
    "shape_a, shape_b",
    [
        ([1, 3], [1, 4]),
        ([2, 1, 4], [2, 3, 5]),
    ],
)
def test_broadcast_shape_elementwise_mismatch(shape_a, shape_b):
    with pytest.raises(ShapeMismatchBroadcastError):
        broadcast_shape(shape_a, shape_b, False)


@pytest.mark.parametrize(
    "shape_a, shape_b, expected",
    [
        ([2, 3], [3, 2], (2, 2)),
        ([1, 3, 4], [2, 4, 3], (2, 3, 3)),
    ],
)
def test_broadcast_shape_batch_mul(shape_a, shape_b, expected):
    assert broadcast_shape(shape_a, shape_b, True) == expected


def test_broadcast_shape_batch_mul_mismatch():
    with pytest.raises(ShapeMismatchBroadcastError):
        broadcast_shape([2, 3], [2, 3], True)


def test_broadcast_shape_batch_mul_needs_two_axes():
    with pytest.raises(ShapeMismatchBroadcastError):
        broadcast_shape([3], [3, 2], True)


def test_broadcast_shape_pads_missing_leading_axes():
    assert broadcast_shape([3], [2, 3], False) == (2, 3)


def test_broadcast_error_carries_shapes():
    with pytest.raises(ShapeMismatchBroadcastError) as info:
        broadcast_shape([1, 3], [1, 4], False)
    assert info.value.shape_a == (1, 3)
    assert info.value.shape_b == (1, 4)


# iter_indices and broadcast_offset


def test_iter_indices_row_major():
    assert list(iter_indices([2, 3])) == [
        (0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2),
    ]


def test_iter_indices_empty_shape_yields_single_index():
    assert list(iter_indices([])) == [()]


def test_iter_indices_zero_dimension_yields_nothing():
    assert list(iter_indices([2, 0, 3])) == []


def test_broadcast_offset_plain():
    assert broadcast_offset((1, 2), (2, 3), (3, 1)) == 5


def test_broadcast_offset_size_one_axis_is_pinned():
    assert broadcast_offset((1, 2), (2, 1), (1, 1)) == 1
    assert broadcast_offset((1, 2), (1, 3), (3, 1)) == 2


def test_broadcast_offset_empty_shape_is_zero():
    assert broadcast_offset((3, 4), (), ()) == 0


# elementwise, with values from the source's arithmetic cases


def test_elementwise_add_same_shape():
    layout, data = elementwise(operator.add, counting([4, 3, 2]), counting([4, 3, 2]))
    assert layout.shape == (4, 3, 2)
    assert layout.strides == (6, 2, 1)
    assert layout.offset == 0
    assert data == list(range(2, 49, 2))


def test_elementwise_add_partial_third_axis():
    _, data = elementwise(operator.add, counting([4, 3, 2]), counting([4, 3, 1]))
    assert data == flatten_nested([
        [[2, 3], [5, 6], [8, 9]],
        [[11, 12], [14, 15], [17, 18]],
        [[20, 21], [23, 24], [26, 27]],
        [[29, 30], [32, 33], [35, 36]],
    ])


def test_elementwise_add_is_commutative():
    forward = elementwise(operator.add, counting([4, 3, 2]), counting([4, 1, 1]))
    backward = elementwise(operator.add, counting([4, 1, 1]), counting([4, 3, 2]))
    assert forward == backward
    assert forward[1] == flatten_nested([
        [[2, 3], [4, 5], [6, 7]],
        [[9, 10], [11, 12], [13, 14]],
        [[16, 17], [18, 19], [20, 21]],
        [[23, 24], [25, 26], [27, 28]],
    ])


def test_elementwise_sub_all_axes_broadcast():
    _, data = elementwise(operator.sub, counting([4, 3, 2]), counting([1, 1, 1]))
    assert data == list(range(0, 24))


def test_elementwise_sub_partial_second_and_third():
    _, data = elementwise(operator.sub, counting([4, 3, 2]), counting([4, 1, 1]))
    assert data == flatten_nested([
        [[0, 1], [2, 3], [4, 5]],
        [[5, 6], [7, 8], [9, 10]],
        [[10, 11], [12, 13], [14, 15]],
        [[15, 16], [17, 18], [19, 20]],
    ])


def test_elementwise_respects_operand_offset():
    shifted = (Layout((3,), (1,), 3), [1, 2, 3, 4, 5, 6])
    _, data = elementwise(operator.add, shifted, counting([3]))
    assert data == [5, 7, 9]


def test_elementwise_shape_mismatch():
    with pytest.raises(ShapeMismatchBroadcastError):
        elementwise(operator.add, counting([1, 3]), counting([1, 4]))


# batched_matmul, with values from the source's arithmetic cases


def test_matmul_2x3_by_3x2():
    layout, data = batched_matmul(
        operand([[1, 2, 3], [4, 5, 6]]), operand([[1, 2], [3, 4], [5, 6]])
    )
    assert layout.shape == (2, 2)
    assert data == [22, 28, 49, 64]


def test_matmul_3x2_by_2x3():
    layout, data = batched_matmul(
        operand([[1, 2], [3, 4], [5, 6]]), operand([[1, 2, 3], [4, 5, 6]])
    )
    assert layout.shape == (3, 3)
    assert data == [9, 12, 15, 19, 26, 33, 29, 40, 51]


def test_matmul_3d_batches():
    a = operand([
        [[11, 12, 13], [14, 15, 16], [17, 18, 19], [20, 21, 22]],
        [[23, 24, 25], [26, 27, 28], [29, 30, 31], [32, 33, 34]],
    ])
    b = operand([
        [[11, 12, 13, 14], [15, 16, 17, 18], [19, 20, 21, 22]],
        [[23, 24, 25, 26], [27, 28, 29, 30], [31, 32, 33, 34]],
    ])
    layout, data = batched_matmul(a, b)
    assert layout.shape == (2, 4, 4)
    assert data == flatten_nested([
        [[548, 584, 620, 656], [683, 728, 773, 818],
         [818, 872, 926, 980], [953, 1016, 1079, 1142]],
        [[1952, 2024, 2096, 2168], [2195, 2276, 2357, 2438],
         [2438, 2528, 2618, 2708], [2681, 2780, 2879, 2978]],
    ])

    layout, data = batched_matmul(b, a)
    assert layout.shape == (2, 3, 3)
    assert data == flatten_nested([
        [[790, 840, 890], [1038, 1104, 1170], [1286, 1368, 1450]],
        [[2710, 2808, 2906], [3150, 3264, 3378], [3590, 3720, 3850]],
    ])


def test_matmul_4d_with_broadcast_batch_axis():
    layout, data = batched_matmul(counting([2, 3, 2, 3]), counting([2, 1, 3, 2]))
    assert layout.shape == (2, 3, 2, 2)
    assert data == flatten_nested([
        [[[22, 28], [49, 64]], [[76, 100], [103, 136]], [[130, 172], [157, 208]]],
        [[[544, 604], [625, 694]], [[706, 784], [787, 874]], [[868, 964], [949, 1054]]],
    ])


def test_matmul_4d_full_batch():
    _, data = batched_matmul(counting([2, 2, 2, 3]), counting([2, 2, 3, 2]))
    assert data == flatten_nested([
        [[[22, 28], [49, 64]], [[220, 244], [301, 334]]],
        [[[634, 676], [769, 820]], [[1264, 1324], [1453, 1522]]],
    ])


def test_matmul_inner_dimension_mismatch():
    with pytest.raises(ShapeMismatchBroadcastError):
        batched_matmul(counting([2, 3]), counting([2, 3]))


def test_matmul_transposed_operand_strides():
    # [[1, 2, 3], [4, 5, 6]] read through transposed strides is [[1, 4], [2, 5], [3, 6]].
    transposed = (Layout((3, 2), (1, 3), 0), [1, 2, 3, 4, 5, 6])
    _, data = batched_matmul(operand([[1, 0, 0], [0, 1, 0]]), transposed)
    assert data == [1, 4, 2, 5]