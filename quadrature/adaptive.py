"""Adaptive rectangle rules with step halving.

The estimate is recomputed from scratch at ``h, h/2, h/4, ...`` until two
successive estimates differ by no more than the tolerance. Convergence is
judged against the previous estimate only, never against an exact value.

Every level re-evaluates the integrand at all of its samples, including the
ones already visited at coarser levels. For an integrand of cost ``C`` and
``k`` levels, the run costs roughly ``C * n_splits * 2**k`` evaluations.
PrecisionConfig.max_iterations and PrecisionConfig.max_splits bound the run;
with the defaults a run that cannot reach its tolerance stops after about
``2 * max_splits`` evaluations and reports ``converged=False``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

import pandas as pd

from quadrature.config import DEFAULT_CONFIG, PrecisionConfig
from quadrature.errors import ConvergenceError
from quadrature.request import IntegrationRequest, Method
from quadrature.sampling import SampleTransform, rectangle_rule

logger = logging.getLogger(__name__)

HISTORY_COLUMNS = ["iteration", "step", "estimate", "residual"]


@dataclass
class AdaptiveResult:
    """Outcome of an adaptive run.

    Attributes:
        value: The last estimate computed.
        residual: |last estimate - previous estimate|.
        iterations: Number of refinement levels evaluated.
        converged: Whether residual <= tolerance.
        tolerance: The tolerance the run was held to.
        history: One (iteration, step, estimate, residual) row per level.
    """

    value: float
    residual: float
    iterations: int
    converged: bool
    tolerance: float
    history: list[tuple[int, float, float, float]] = field(default_factory=list)

    def to_dataframe(self) -> pd.DataFrame:
        """History as a DataFrame with one row per refinement level."""
        return pd.DataFrame(self.history, columns=HISTORY_COLUMNS)

    def raise_for_convergence(self) -> AdaptiveResult:
        """Return self, or raise ConvergenceError if the run did not converge."""
        if not self.converged:
            raise ConvergenceError(self)
        return self


def _refine(
    request: IntegrationRequest,
    tolerance: float,
    max_iterations: int | None,
    max_splits: int | None,
    level_bounds: Callable[[int], tuple[int, int]],
) -> AdaptiveResult:
    """Halve the step until successive estimates agree within tolerance.

    Args:
        request: The integration request; its step seeds the first level.
        tolerance: Stop once the residual is <= tolerance.
        max_iterations: Maximum number of levels, or None for no bound.
        max_splits: Largest split count after the seed level, or None for no bound.
        level_bounds: Maps the level's sample count to its (first, last) index.
    """
    previous = 0.0
    current = 0.0
    residual = 1.0
    h = request.step
    n = request.n_splits
    history: list[tuple[int, float, float, float]] = []

    iterations = 0
    # residual starts at 1.0 so at least one level runs for tolerance < 1.
    while residual > tolerance:
        if max_iterations is not None and iterations >= max_iterations:
            break
        if iterations and max_splits is not None and n > max_splits:
            break
        iterations += 1

        first, last = level_bounds(n)
        current = rectangle_rule(
            request.fn, request.limit_a, h, first, last, SampleTransform.ABSOLUTE
        )
        residual = abs(current - previous)
        history.append((iterations, h, current, residual))
        logger.debug(
            "level %d: step=%g estimate=%.12g residual=%g", iterations, h, current, residual
        )

        previous = current
        h /= 2
        n *= 2

    converged = residual <= tolerance
    if not converged:
        logger.warning(
            "adaptive integration stopped after %d iterations with residual %g > %g",
            iterations,
            residual,
            tolerance,
        )

    return AdaptiveResult(
        value=current,
        residual=residual,
        iterations=iterations,
        converged=converged,
        tolerance=tolerance,
        history=history,
    )


def left_rect_integral_adaptive(
    request: IntegrationRequest,
    config: PrecisionConfig = DEFAULT_CONFIG,
) -> AdaptiveResult:
    """Adaptive left rectangle rule.

    Each level samples indices 0..N-1 where N is the level's split count,
    i.e. from limit_a while the sample is <= limit_b - h.
    """
    tolerance = request.precision if request.precision is not None else config.tolerance_for(Method.LEFT_SQUARE)
    return _refine(
        request,
        tolerance,
        config.max_iterations,
        config.max_splits,
        lambda splits: (0, splits - 1),
    )


def right_rect_integral_adaptive(
    request: IntegrationRequest,
    config: PrecisionConfig = DEFAULT_CONFIG,
) -> AdaptiveResult:
    """Adaptive right rectangle rule.

    Each level samples indices 1..N, i.e. from limit_a + h while the sample
    is <= limit_b.
    """
    tolerance = request.precision if request.precision is not None else config.tolerance_for(Method.RIGHT_SQUARE)
    return _refine(
        request,
        tolerance,
        config.max_iterations,
        config.max_splits,
        lambda splits: (1, splits),
    )
