"""Plotting helpers for quadrature results."""

from quadrature.visual.convergence import plot_convergence

__all__ = ["plot_convergence"]
