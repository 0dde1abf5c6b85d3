"""Compare the quadrature rules on a few integrands.

Runs every fixed-step rule and both adaptive rules, prints a summary
table, and saves convergence plots of the adaptive runs.

Run:
    python examples/compare_methods.py [--output-dir output/compare_methods]
"""

from __future__ import annotations

import argparse
import math
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import matplotlib.pyplot as plt
import pandas as pd

import quadrature
from quadrature import IntegrationRequest, Method, evaluate
from quadrature.visual import plot_convergence


@dataclass(frozen=True)
class Case:
    name: str
    fn: Callable[[float], float]
    limit_a: float
    limit_b: float
    exact: float


CASES = [
    Case("x", lambda x: x, 0.0, 1.0, 0.5),
    Case("x^3", lambda x: x**3, 0.0, 2.0, 4.0),
    Case("sin(x)", math.sin, 0.0, math.pi, 2.0),
    Case("exp(-x^2)", lambda x: math.exp(-(x**2)), -2.0, 2.0, math.sqrt(math.pi) * math.erf(2)),
]


def run_comparison(n_splits: int) -> pd.DataFrame:
    rows = []
    for case in CASES:
        request = IntegrationRequest(case.limit_a, case.limit_b, n_splits, case.fn)
        for method in Method:
            for use_precision in (False, True):
                if use_precision and method in (Method.TRAPEZOIDAL, Method.SIMPSON):
                    continue
                result = evaluate(request, method, use_precision)
                rows.append(
                    {
                        "integrand": case.name,
                        "method": method.value + (" (adaptive)" if use_precision else ""),
                        "status": result.status.value,
                        "value": result.value,
                        "abs_error": None if result.value is None else abs(result.value - case.exact),
                        "levels": result.adaptive.iterations if result.adaptive else None,
                    }
                )
    return pd.DataFrame(rows)


def save_plots(n_splits: int, output_dir: Path) -> None:
    output_dir.mkdir(parents=True, exist_ok=True)
    for case in CASES:
        request = IntegrationRequest(case.limit_a, case.limit_b, n_splits, case.fn)
        for method in (Method.LEFT_SQUARE, Method.RIGHT_SQUARE):
            result = evaluate(request, method, use_precision=True)
            slug = case.name.replace("^", "").replace("(", "_").replace(")", "")
            fig = plot_convergence(
                result.adaptive,
                path=output_dir / f"{slug}_{method.value}.png",
                title=f"{case.name}: {method.value}",
            )
            plt.close(fig)

    print(f"Saved plots to: {output_dir.absolute()}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Compare quadrature rules")
    parser.add_argument("--n-splits", type=int, default=100)
    parser.add_argument("--output-dir", type=Path, default=Path("output/compare_methods"))
    parser.add_argument("--no-plots", action="store_true")
    args = parser.parse_args()

    quadrature.enable_console_logging(level="WARNING")

    table = run_comparison(args.n_splits)
    with pd.option_context("display.max_rows", None, "display.width", 120):
        print(table.to_string(index=False))

    if not args.no_plots:
        save_plots(args.n_splits, args.output_dir)


if __name__ == "__main__":
    main()
