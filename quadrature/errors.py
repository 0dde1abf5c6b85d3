"""Exceptions for quadrature integration."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from quadrature.adaptive import AdaptiveResult


class ConvergenceError(Exception):
    """Adaptive refinement stopped before the residual met the tolerance.

    Attributes:
        result: The AdaptiveResult of the run, holding the last estimate.
    """

    def __init__(self, result: AdaptiveResult):
        super().__init__(
            f"did not converge after {result.iterations} iterations: "
            f"residual {result.residual:g} > tolerance {result.tolerance:g}"
        )
        self.result = result
