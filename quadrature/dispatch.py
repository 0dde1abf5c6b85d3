"""Method selection and input validation.

``evaluate`` validates the request, routes it to the selected rule and
reports the outcome as an IntegrationResult. ``get_integral_value`` is the
plain form: a float, or None when there is no result.

Failures are reported through the ``quadrature.dispatch`` logger and a
None value; no exception is raised for an invalid request.

Adaptive mode only exists for the rectangle rules. For ``trapezoidal`` and
``simpson`` the ``use_precision`` flag is ignored.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from quadrature.adaptive import (
    AdaptiveResult,
    left_rect_integral_adaptive,
    right_rect_integral_adaptive,
)
from quadrature.config import DEFAULT_CONFIG, PrecisionConfig
from quadrature.request import IntegrationRequest, Method
from quadrature.rules import left_rect_integral, right_rect_integral, simpson, trapezoidal

logger = logging.getLogger(__name__)

FIXED_STEP_RULES = {
    Method.LEFT_SQUARE: left_rect_integral,
    Method.RIGHT_SQUARE: right_rect_integral,
    Method.TRAPEZOIDAL: trapezoidal,
    Method.SIMPSON: simpson,
}

ADAPTIVE_RULES = {
    Method.LEFT_SQUARE: left_rect_integral_adaptive,
    Method.RIGHT_SQUARE: right_rect_integral_adaptive,
}


class Status(Enum):
    """How an evaluation ended."""

    OK = "ok"
    DEGENERATE_INTERVAL = "degenerate_interval"
    UNKNOWN_METHOD = "unknown_method"
    NOT_CONVERGED = "not_converged"


@dataclass(frozen=True)
class IntegrationResult:
    """Outcome of a dispatched integration.

    Attributes:
        value: The integral estimate, or None unless status is OK.
        status: How the evaluation ended.
        method: The method that ran, or None if the selector was unknown.
        adaptive: Details of the adaptive run, when one was used.
    """

    value: float | None
    status: Status
    method: Method | None = None
    adaptive: AdaptiveResult | None = None

    @property
    def ok(self) -> bool:
        return self.status is Status.OK


def evaluate(
    request: IntegrationRequest,
    method: Method | str,
    use_precision: bool = False,
    config: PrecisionConfig = DEFAULT_CONFIG,
) -> IntegrationResult:
    """Validate the request and run the selected rule.

    Args:
        request: Bounds, split count and integrand.
        method: One of Method, or its string value (e.g. "left-square").
        use_precision: Use the adaptive form of the rectangle rules.
        config: Tolerances and iteration limit for adaptive rules.

    Returns:
        An IntegrationResult. Its value is None when the interval is
        degenerate, the method is unknown, or an adaptive run hit
        config.max_iterations.
    """
    if request.is_degenerate:
        logger.error("Limits must differ: limit_a == limit_b == %s", request.limit_a)
        return IntegrationResult(value=None, status=Status.DEGENERATE_INTERVAL)

    selected = Method.parse(method)
    if selected is None:
        logger.debug("Unknown integration method: %r", method)
        return IntegrationResult(value=None, status=Status.UNKNOWN_METHOD)

    if use_precision and selected in ADAPTIVE_RULES:
        adaptive = ADAPTIVE_RULES[selected](request, config)
        if not adaptive.converged:
            return IntegrationResult(
                value=None, status=Status.NOT_CONVERGED, method=selected, adaptive=adaptive
            )
        return IntegrationResult(
            value=adaptive.value, status=Status.OK, method=selected, adaptive=adaptive
        )

    if use_precision:
        logger.debug("%s has no adaptive form; using the fixed-step rule", selected.value)

    return IntegrationResult(
        value=FIXED_STEP_RULES[selected](request), status=Status.OK, method=selected
    )


def get_integral_value(
    request: IntegrationRequest,
    method: Method | str,
    use_precision: bool = False,
    config: PrecisionConfig = DEFAULT_CONFIG,
) -> float | None:
    """Integral estimate for the request, or None if there is no result."""
    return evaluate(request, method, use_precision, config).value
