"""Random samples from common distributions."""

from __future__ import annotations

import math
import random

from .errors import TensorError


def _check_uniform(start: float, end: float) -> None:
    if not (math.isfinite(start) and math.isfinite(end)):
        raise TensorError("uniform bounds must be finite")
    if not start < end:
        raise TensorError("low >= high in uniform distribution")


def _check_normal(sd: float) -> None:
    if not math.isfinite(sd) or sd < 0:
        raise TensorError("variance is negative or non-finite in normal distribution")


def uniform(length: int, start: float, end: float) -> list[float]:
    """``length`` samples drawn uniformly from ``[start, end)``."""
    _check_uniform(start, end)
    return [random.uniform(start, end) for _ in range(length)]


def uniform_he(length: int, ninputs: int) -> list[float]:
    """Uniform samples bounded by ``sqrt(6 / ninputs)`` on each side."""
    bound = math.sqrt(6.0 / ninputs) if ninputs else math.inf
    return uniform(length, -bound, bound)


def normal(length: int, mean: float, sd: float) -> list[float]:
    """``length`` samples from a normal distribution."""
    _check_normal(sd)
    return [random.gauss(mean, sd) for _ in range(length)]


def normal_he(length: int, ninputs: int) -> list[float]:
    """Zero-mean normal samples with standard deviation ``sqrt(2 / ninputs)``."""
    sd = math.sqrt(2.0 / ninputs) if ninputs else math.inf
    return normal(length, 0.0, sd)


def standard(length: int) -> list[float]:
    """``length`` samples from the standard normal distribution."""
    return normal(length, 0.0, 1.0)