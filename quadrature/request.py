"""Parameter bundles passed to the quadrature rules.

A request is an immutable value object: it carries the bounds, the split
count and the integrand, and has no lifecycle beyond a single call.

``n_splits`` must be at least 1. It is not validated here; the step size
divides by it.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum


class Method(str, Enum):
    """Selectable one-dimensional quadrature methods."""

    LEFT_SQUARE = "left-square"
    RIGHT_SQUARE = "right-square"
    TRAPEZOIDAL = "trapezoidal"
    SIMPSON = "simpson"

    @classmethod
    def parse(cls, value: Method | str) -> Method | None:
        """Return the matching member, or None for an unknown selector."""
        try:
            return cls(value)
        except ValueError:
            return None


@dataclass(frozen=True)
class IntegrationRequest:
    """A single-variable integration request.

    Attributes:
        limit_a: First bound. Need not be smaller than limit_b.
        limit_b: Second bound.
        n_splits: Number of subintervals (seed granularity for adaptive rules).
        fn: Pure integrand of one real variable.
        precision: Convergence tolerance for adaptive rules. None selects the
            per-rule default from PrecisionConfig.
    """

    limit_a: float
    limit_b: float
    n_splits: int
    fn: Callable[[float], float]
    precision: float | None = None

    def __post_init__(self) -> None:
        if self.precision is not None and self.precision <= 0:
            raise ValueError(f"precision must be > 0, got {self.precision}")

    @property
    def step(self) -> float:
        """Width of one subinterval, (limit_b - limit_a) / n_splits."""
        return (self.limit_b - self.limit_a) / self.n_splits

    @property
    def is_degenerate(self) -> bool:
        return self.limit_a == self.limit_b


@dataclass(frozen=True)
class DoubleIntegrationRequest:
    """A two-variable integration request over a rectangle.

    Attributes:
        limit_a: First x bound.
        limit_b: Second x bound.
        n_splits_x: Subintervals along x.
        limit_c: First y bound.
        limit_d: Second y bound.
        n_splits_y: Subintervals along y.
        fn: Pure integrand fn(x, y).
    """

    limit_a: float
    limit_b: float
    n_splits_x: int
    limit_c: float
    limit_d: float
    n_splits_y: int
    fn: Callable[[float, float], float]

    @property
    def is_degenerate(self) -> bool:
        return self.limit_a == self.limit_b or self.limit_c == self.limit_d
