"""Sample transforms and the shared rectangle-rule primitive.

Every rule in this package samples the integrand at ``start + i * step``
for an integer index ``i``. Abscissae are never accumulated with repeated
addition, so the first and last samples are exactly the ones the index
range names.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum


class SampleTransform(Enum):
    """Policy applied to each function sample before it is weighted."""

    ABSOLUTE = "absolute"
    IDENTITY = "identity"

    def __call__(self, value: float) -> float:
        if self is SampleTransform.ABSOLUTE:
            return abs(value)
        return value


def sample_sum(
    fn: Callable[[float], float],
    start: float,
    step: float,
    first: int,
    last: int,
    transform: SampleTransform = SampleTransform.ABSOLUTE,
    stride: int = 1,
) -> float:
    """Sum transform(fn(start + i * step)) for i in first..last inclusive.

    Args:
        fn: Integrand.
        start: Abscissa of index 0.
        step: Distance between consecutive indices.
        first: First index.
        last: Last index, included. No samples are taken if last < first.
        transform: Policy applied to each sample.
        stride: Index increment.
    """
    total = 0.0
    for i in range(first, last + 1, stride):
        total += transform(fn(start + i * step))
    return total


def rectangle_rule(
    fn: Callable[[float], float],
    start: float,
    step: float,
    first: int,
    last: int,
    transform: SampleTransform = SampleTransform.ABSOLUTE,
) -> float:
    """Rectangle rule over the samples first..last: step * sample_sum(...)."""
    return step * sample_sum(fn, start, step, first, last, transform)
