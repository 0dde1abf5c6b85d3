"""Named defaults for adaptive refinement and the double integral."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from quadrature.request import Method

DEFAULT_LEFT_TOLERANCE = 1e-4
DEFAULT_RIGHT_TOLERANCE = 1e-3

DEFAULT_MAX_ITERATIONS = 25

# Largest split count of any refinement level after the seed level.
DEFAULT_MAX_SPLITS = 2**20


class YStepConvention(Enum):
    """Sign convention for the second-axis step of the double integral.

    CONSISTENT uses (limit_d - limit_c) / n_splits_y, oriented like the x
    axis. INVERTED uses (limit_c - limit_d) / n_splits_y, which negates the
    result for the same samples.
    """

    CONSISTENT = "consistent"
    INVERTED = "inverted"


@dataclass(frozen=True)
class PrecisionConfig:
    """Tolerances and limits for adaptive rules.

    Attributes:
        left_tolerance: Default tolerance of the adaptive left rectangle rule.
        right_tolerance: Default tolerance of the adaptive right rectangle rule.
        max_iterations: Maximum number of refinement levels. None removes the
            bound, in which case a non-converging integrand loops forever.
        max_splits: Largest split count a refinement level may use. The seed
            level always runs. None removes the bound.
        y_step_convention: Sign convention of the double integral's y step.
    """

    left_tolerance: float = DEFAULT_LEFT_TOLERANCE
    right_tolerance: float = DEFAULT_RIGHT_TOLERANCE
    max_iterations: int | None = DEFAULT_MAX_ITERATIONS
    max_splits: int | None = DEFAULT_MAX_SPLITS
    y_step_convention: YStepConvention = YStepConvention.CONSISTENT

    def __post_init__(self) -> None:
        if self.left_tolerance <= 0:
            raise ValueError(f"left_tolerance must be > 0, got {self.left_tolerance}")
        if self.right_tolerance <= 0:
            raise ValueError(f"right_tolerance must be > 0, got {self.right_tolerance}")
        if self.max_iterations is not None and self.max_iterations < 1:
            raise ValueError(f"max_iterations must be >= 1, got {self.max_iterations}")
        if self.max_splits is not None and self.max_splits < 1:
            raise ValueError(f"max_splits must be >= 1, got {self.max_splits}")

    def tolerance_for(self, method: Method) -> float:
        """Default tolerance for an adaptive method.

        Raises:
            ValueError: If the method has no adaptive form.
        """
        if method is Method.LEFT_SQUARE:
            return self.left_tolerance
        if method is Method.RIGHT_SQUARE:
            return self.right_tolerance
        raise ValueError(f"{method.value} has no adaptive form")


DEFAULT_CONFIG = PrecisionConfig()
