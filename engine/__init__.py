"""
Projection engine — single-path simulation, Monte Carlo ensembles, fixed-return projection.
"""

from .fixed_return import ProjectionPoint, ProjectionResult, run_fixed_return
from .path import BalancePath, run_single_path, simulate_path
from .runner import PathEnsemble, simulate_paths

__all__ = [
    "BalancePath",
    "PathEnsemble",
    "ProjectionPoint",
    "ProjectionResult",
    "run_fixed_return",
    "run_single_path",
    "simulate_path",
    "simulate_paths",
]
