"""Classical quadrature rules for definite integrals.

Fixed-step left/right rectangle, trapezoidal and Simpson rules, adaptive
step-halving rectangle rules, and a rectangle-rule double integral.

Example:
    from quadrature import IntegrationRequest, get_integral_value

    request = IntegrationRequest(limit_a=0.0, limit_b=1.0, n_splits=1000, fn=lambda x: x * x)
    get_integral_value(request, "simpson")           # ~0.3333
    get_integral_value(request, "left-square", True)  # adaptive
"""

import logging

from quadrature.adaptive import (
    AdaptiveResult,
    left_rect_integral_adaptive,
    right_rect_integral_adaptive,
)
from quadrature.config import DEFAULT_CONFIG, PrecisionConfig, YStepConvention
from quadrature.dispatch import IntegrationResult, Status, evaluate, get_integral_value
from quadrature.double import double_integral
from quadrature.errors import ConvergenceError
from quadrature.logging_config import (
    configure_from_env,
    disable_logging,
    enable_console_logging,
    enable_file_logging,
    enable_json_logging,
    set_level,
    set_module_level,
)
from quadrature.request import DoubleIntegrationRequest, IntegrationRequest, Method
from quadrature.rules import left_rect_integral, right_rect_integral, simpson, trapezoidal
from quadrature.sampling import SampleTransform, rectangle_rule

# Silent unless the application configures logging.
logging.getLogger("quadrature").addHandler(logging.NullHandler())

__all__ = [
    # Requests
    "DoubleIntegrationRequest",
    "IntegrationRequest",
    "Method",
    # Configuration
    "DEFAULT_CONFIG",
    "PrecisionConfig",
    "YStepConvention",
    # Rules
    "SampleTransform",
    "double_integral",
    "left_rect_integral",
    "left_rect_integral_adaptive",
    "rectangle_rule",
    "right_rect_integral",
    "right_rect_integral_adaptive",
    "simpson",
    "trapezoidal",
    # Dispatch
    "AdaptiveResult",
    "ConvergenceError",
    "IntegrationResult",
    "Status",
    "evaluate",
    "get_integral_value",
    # Logging
    "configure_from_env",
    "disable_logging",
    "enable_console_logging",
    "enable_file_logging",
    "enable_json_logging",
    "set_level",
    "set_module_level",
]
