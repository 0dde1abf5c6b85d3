"""Double integral over a rectangle.

A left rectangle rule is applied independently along each axis. Outer
samples sit at ``x_i = limit_a + i * HX`` for ``i = 0..n_splits_x`` and
inner samples at ``y_j = limit_c + j * (limit_d - limit_c) / n_splits_y``
for ``j = 0..n_splits_y``. Inner samples are absolute-valued; the inner
integrals are summed unsigned.

The sign of the y step follows ``PrecisionConfig.y_step_convention``.
"""

from __future__ import annotations

import logging

from quadrature.config import DEFAULT_CONFIG, PrecisionConfig, YStepConvention
from quadrature.request import DoubleIntegrationRequest
from quadrature.sampling import SampleTransform, rectangle_rule

logger = logging.getLogger(__name__)


def double_integral(
    request: DoubleIntegrationRequest,
    config: PrecisionConfig = DEFAULT_CONFIG,
) -> float | None:
    """Integrate fn(x, y) over [limit_a, limit_b] x [limit_c, limit_d].

    Returns:
        The estimate, or None if either axis is degenerate.
    """
    if request.is_degenerate:
        logger.error(
            "Limits must differ: x in [%s, %s], y in [%s, %s]",
            request.limit_a,
            request.limit_b,
            request.limit_c,
            request.limit_d,
        )
        return None

    fn = request.fn
    hx = (request.limit_b - request.limit_a) / request.n_splits_x
    # Samples always walk from limit_c towards limit_d; only the weight's sign varies.
    y_spacing = (request.limit_d - request.limit_c) / request.n_splits_y
    sign = -1.0 if config.y_step_convention is YStepConvention.INVERTED else 1.0

    def inner(x: float) -> float:
        return sign * rectangle_rule(
            lambda y: fn(x, y),
            request.limit_c,
            y_spacing,
            0,
            request.n_splits_y,
            SampleTransform.ABSOLUTE,
        )

    return rectangle_rule(
        inner, request.limit_a, hx, 0, request.n_splits_x, SampleTransform.IDENTITY
    )
