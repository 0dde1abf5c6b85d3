"""Convergence plots for adaptive runs."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from quadrature.adaptive import AdaptiveResult

if TYPE_CHECKING:
    from matplotlib.figure import Figure


def plot_convergence(
    result: AdaptiveResult,
    path: str | Path | None = None,
    title: str | None = None,
) -> Figure:
    """Plot estimate and residual against step size for an adaptive run.

    The step axis is logarithmic and inverted so refinement reads left to
    right. The tolerance is drawn as a horizontal line on the residual plot.

    Args:
        result: The adaptive run to plot.
        path: If given, the figure is saved there (parents are created).
        title: Optional figure title.

    Returns:
        The matplotlib Figure. Close it with plt.close(fig) when done.
    """
    import matplotlib.pyplot as plt

    df = result.to_dataframe()

    fig, (ax1, ax2) = plt.subplots(2, 1, figsize=(8, 8), sharex=True)

    ax1.plot(df["step"].abs(), df["estimate"], "o-", color="steelblue")
    ax1.set_ylabel("Estimate")
    ax1.grid(True, alpha=0.3)

    ax2.plot(df["step"].abs(), df["residual"], "o-", color="darkorange", label="residual")
    ax2.axhline(y=result.tolerance, color="red", linestyle="--", alpha=0.7, label="tolerance")
    ax2.set_yscale("log")
    ax2.set_xscale("log")
    ax2.invert_xaxis()
    ax2.set_xlabel("Step size |h|")
    ax2.set_ylabel("Residual")
    ax2.legend(loc="upper right")
    ax2.grid(True, alpha=0.3)

    status = "converged" if result.converged else "not converged"
    fig.suptitle(title or f"Adaptive refinement ({result.iterations} levels, {status})")
    fig.tight_layout()

    if path is not None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(path, dpi=150)

    return fig
