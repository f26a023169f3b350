"""Encoding and activation routines built on :class:`Tensor`."""

from __future__ import annotations

import math
from collections.abc import Hashable, Sequence

from .broadcast import iter_indices
from .errors import InvalidParamError
from .tensor import Tensor


def one_hot_encode(labels: Sequence[Hashable]) -> Tensor:
    """One row per label, one column per distinct label in first-seen order."""
    if not labels:
        raise InvalidParamError("Label data shouldn't be an empty vector")

    classes: dict[Hashable, int] = {}
    for label in labels:
        classes.setdefault(label, len(classes))

    nclasses = len(classes)
    data = [
        1 if column == classes[label] else 0
        for label in labels
        for column in range(nclasses)
    ]
    return Tensor((len(labels), nclasses), (nclasses, 1), 0, data)


def relu(tensor: Tensor) -> Tensor:
    """Replace every negative value of ``tensor`` with zero, in place."""
    for index in iter_indices(tensor.shape):
        value = tensor.getval(index)
        if value < 0:
            tensor.setval(index, type(value)(0))
    return tensor


def softmax(tensor: Tensor, axis: int) -> Tensor:
    """Softmax over every value of ``tensor``, in place.

    Returns the view of ``tensor`` with ``axis`` moved to the front.
    """
    view = tensor.axis(axis)
    peak = view.max()
    indices = list(iter_indices(view.shape))

    total = 0.0
    for index in indices:
        value = math.exp(view.getval(index) - peak)
        view.setval(index, value)
        total += value

    for index in indices:
        view.setval(index, view.getval(index) / total)

    return view