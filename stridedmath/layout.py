"""Shape and stride helpers for row-major strided storage."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Layout:
    """How an n-dimensional view maps onto flat storage."""

    shape: tuple[int, ...]
    strides: tuple[int, ...]
    offset: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "shape", tuple(self.shape))
        object.__setattr__(self, "strides", tuple(self.strides))


def contiguous_strides(shape: Sequence[int]) -> tuple[int, ...]:
    """Row-major strides for ``shape``; empty when the shape is empty or has a zero."""
    if not shape or 0 in shape:
        return ()
    strides = [1]
    for dim in reversed(shape[1:]):
        strides.append(strides[-1] * dim)
    return tuple(reversed(strides))


def _is_nested(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def nested_shape(data: Any) -> tuple[int, ...]:
    """Shape of nested lists, taken from the first element at each level."""
    if not _is_nested(data):
        return ()
    if not data:
        return (0,)
    return (len(data),) + nested_shape(data[0])


def _walk(data: Any) -> Iterator[Any]:
    if _is_nested(data):
        for item in data:
            yield from _walk(item)
    else:
        yield data


def flatten_nested(data: Any) -> list[Any]:
    """All scalars of nested lists in row-major order."""
    return list(_walk(data))