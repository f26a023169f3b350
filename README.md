# stridedmath

A small, dependency-free library of n-dimensional tensors stored as a flat
list together with a shape, strides and an offset. Views such as slices,
axis reorderings, transposes and batches share their storage with the tensor
they come from, so a write through one view is seen by the others.

## Modules

- `stridedmath.tensor` – the `Tensor` class.
- `stridedmath.broadcast` – broadcasting rules (`broadcast_shape`,
  `broadcast_offset`, `iter_indices`) and the kernels behind tensor
  arithmetic (`elementwise`, `batched_matmul`).
- `stridedmath.layout` – the `Layout` dataclass and the helpers
  `contiguous_strides`, `nested_shape` and `flatten_nested`.
- `stridedmath.linalg` – `one_hot_encode`, `relu` and `softmax`.
- `stridedmath.matrix` – the `Matrix` wrapper for two-dimensional data.
- `stridedmath.vector` – the `Vector` wrapper, a column vector stored as an
  `n x 1` tensor.
- `stridedmath.dist` – random samples: `uniform`, `uniform_he`, `normal`,
  `normal_he` and `standard`.
- `stridedmath.errors` – the exceptions.

## Tensor

Construction:

- `Tensor.from_nested(data)` from nested lists; ragged data raises
  `InvalidParamError`.
- `Tensor.from_zeros(shape)`.
- `Tensor.from_shape(shape, data)` from a shape and a flat sequence; the
  number of values must fill the shape.

Properties: `shape`, `strides`, `ndim`, `nelems` (the size of the underlying
storage) and `data` (a copy of the whole underlying storage).

Access and views:

- `getval(index)` / `setval(index, value)` with a full index.
- `update(index, data)` writes nested data into the part of the tensor at
  `index` and returns the tensor, so calls can be chained.
- `view()`, `slice(index)`, `axis(axis)` (moves an axis to the front),
  `axis_slice(axis, index)`, `batch(start, stop)`, `permute(axes)`,
  `transpose()` / `t()` and `flatten()` (first axis by all the others).
- Iterating a tensor yields its values in row-major order of its shape;
  `max()` and `min()` reduce over them.
- `to_nested()` returns nested lists; `render()` (also `str()`) returns a
  bracketed text form such as `[[1, 2, 3], [4, 5, 6]]`.

Arithmetic:

- `add` / `+` and `sub` / `-`: element-wise with broadcasting.
- `matmul` / `@`: matrix product over the last two axes, broadcasting the
  leading batch axes.
- `add_scalar`, `sub_scalar`, `mul_scalar`, and `+=`, `-=`, `*=` with a
  scalar, in place.

A tensor compares equal (`==`) to another tensor of the same shape and
values, to nested lists holding the same values, or, when it has no axes, to
a single number.

## Example

```python
from stridedmath.tensor import Tensor
from stridedmath.matrix import Matrix
from stridedmath.vector import Vector
from stridedmath.linalg import one_hot_encode, relu
from stridedmath import dist

a = Tensor.from_nested([[1, 2, 3], [4, 5, 6]])
b = Tensor.from_nested([[1, 2], [3, 4], [5, 6]])
assert a @ b == [[22, 28], [49, 64]]
assert a.transpose() == [[1, 4], [2, 5], [3, 6]]
print(a.render())            # [[1, 2, 3], [4, 5, 6]]

a += 5
assert a == [[6, 7, 8], [9, 10, 11]]

m = Matrix.from_nested([[1, 2, 3], [4, 5, 6]])
assert m.col(1) == [2, 5]

v = Vector.from_list([1, 2, 3])
v.set(0, 11)
assert v.get(0) == 11

labels = one_hot_encode(["cat", "dog", "cat"])
assert labels == [[1, 0], [0, 1], [1, 0]]

t = Tensor.from_nested([[1, -3, 0], [-4, 5, 0]])
relu(t)
assert t == [[1, 0, 0], [0, 5, 0]]

weights = dist.normal_he(100, 20)
```

## linalg

- `one_hot_encode(labels)` gives one row per label and one column per
  distinct label, in the order labels are first seen. An empty list raises
  `InvalidParamError`.
- `relu(tensor)` replaces negative values with zero in place and returns the
  tensor.
- `softmax(tensor, axis)` applies softmax over all values of the tensor in
  place and returns the view of it with `axis` moved to the front.

## Matrix and Vector

`Matrix` offers `from_zeros`, `from_nested`, `from_shape`, `from_one_hot`,
`shape`, `row`, `col`, `update`, `update_row`, `add`, `sub`, `mul` (matrix
product), `add_scalar`, `sub_scalar`, `mul_scalar`, `t` and `render`. The
underlying tensor is its `tensor` attribute.

`Vector` offers `from_zeros`, `from_list`, `get`, `set` and `len()`.

Both compare with `==` to each other, to tensors and to nested lists.

## Distributions

`uniform(length, start, end)` and `normal(length, mean, sd)` return lists of
floats; `uniform_he` and `normal_he` use bounds `sqrt(6 / ninputs)` and a
standard deviation of `sqrt(2 / ninputs)`; `standard` draws from the
standard normal. Invalid bounds or a negative standard deviation raise
`TensorError`. Samples come from Python's `random` module, so
`random.seed` makes them repeatable.

## Errors

Every error is a subclass of `stridedmath.errors.TensorError`:
`InvalidAxisError`, `InvalidSlicingError` and `IndexOutOfRangeError` are
also `IndexError`s; `ShapeMismatchError`, `DimensionMismatchError`,
`ShapeMismatchBroadcastError` and `InvalidParamError` are also
`ValueError`s. `InvalidFileContentsError` is defined but not raised by
anything in the package.

## What it does not do

This is a pure-Python library with no command-line tool. It does not read or
write tensors from files, and its arithmetic is plain Python loops, so it is
meant for small data rather than speed.

## Installation

```
pip install .
```

## Tests

```
pip install .[test]
pytest
```