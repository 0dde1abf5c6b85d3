"""Fixed-step quadrature rules.

Each rule takes an IntegrationRequest and returns one float. The step is
``h = (limit_b - limit_a) / n_splits`` and sample ``i`` sits at
``limit_a + i * h``.

The rules approximate the integral of ``|f|`` rather than ``f``: interior
samples are passed through ``transform`` (absolute value by default). The
trapezoidal and Simpson rules add the two endpoint values unsigned.
"""

from __future__ import annotations

from quadrature.request import IntegrationRequest
from quadrature.sampling import SampleTransform, rectangle_rule, sample_sum


def left_rect_integral(
    request: IntegrationRequest,
    transform: SampleTransform = SampleTransform.ABSOLUTE,
) -> float:
    """Left rectangle rule.

    Samples indices 0..n_splits, so both limit_a and limit_b are included
    and n_splits + 1 samples contribute.
    """
    return rectangle_rule(
        request.fn, request.limit_a, request.step, 0, request.n_splits, transform
    )


def right_rect_integral(
    request: IntegrationRequest,
    transform: SampleTransform = SampleTransform.ABSOLUTE,
) -> float:
    """Right rectangle rule.

    Samples indices 1..n_splits + 1, i.e. up to limit_b + h.
    """
    return rectangle_rule(
        request.fn, request.limit_a, request.step, 1, request.n_splits + 1, transform
    )


def trapezoidal(
    request: IntegrationRequest,
    transform: SampleTransform = SampleTransform.ABSOLUTE,
) -> float:
    """Trapezoidal rule.

    Starts from (f(a) + f(b)) / 2 and adds transformed samples at indices
    1..n_splits, which includes limit_b a second time.
    """
    fn, a, b, h = request.fn, request.limit_a, request.limit_b, request.step
    total = (fn(a) + fn(b)) / 2
    total += sample_sum(fn, a, h, 1, request.n_splits, transform)
    return total * h


def simpson(
    request: IntegrationRequest,
    transform: SampleTransform = SampleTransform.ABSOLUTE,
) -> float:
    """Composite Simpson's rule.

    Odd indices up to n_splits are weighted 4, even indices from 2 up to
    n_splits - 1 are weighted 2. With an even n_splits this is the textbook
    composite rule and is exact for cubics that are non-negative inside
    the interval.
    """
    fn, a, b, h = request.fn, request.limit_a, request.limit_b, request.step
    n = request.n_splits
    odd = 4 * sample_sum(fn, a, h, 1, n, transform, stride=2)
    even = 2 * sample_sum(fn, a, h, 2, n - 1, transform, stride=2)
    return (h / 3) * (fn(a) + fn(b) + odd + even)
