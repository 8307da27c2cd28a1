"""
Ensemble runner — fans N independent path simulations out and back in.

Every path receives its own child DeviateSource (spawned once up front from
the run's source), so:
  - no generator object is shared between paths or threads, and
  - a seeded run gives the same ensemble whatever the worker count.

Paths are stored by index, so completion order never matters to the
aggregation step.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
import pandas as pd

from core.config import EngineConfig, SimulationParameters
from distributions.deviates import BoxMullerSource, DeviateSource
from distributions.profiles import get_risk_profile

from .path import BalancePath, simulate_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class PathEnsemble:
    """
    All simulated paths of one Monte Carlo run.

    balances has shape (n_paths, years + 1); row p is path p. It is stored
    as a read-only copy.
    ran_out_at_age[p] is None when path p never ran out of money.
    """
    current_age: int
    retirement_age: int
    balances: np.ndarray
    ran_out_at_age: Tuple[Optional[int], ...]

    def __post_init__(self):
        balances = np.array(self.balances, dtype=float)
        balances.setflags(write=False)
        object.__setattr__(self, "balances", balances)
        object.__setattr__(self, "ran_out_at_age", tuple(self.ran_out_at_age))

    def __eq__(self, other):
        if not isinstance(other, PathEnsemble):
            return NotImplemented
        return (
            self.current_age == other.current_age
            and self.retirement_age == other.retirement_age
            and self.ran_out_at_age == other.ran_out_at_age
            and np.array_equal(self.balances, other.balances)
        )

    @property
    def n_paths(self) -> int:
        return self.balances.shape[0]

    @property
    def n_years(self) -> int:
        return self.balances.shape[1]

    @property
    def success_count(self) -> int:
        return sum(1 for age in self.ran_out_at_age if age is None)

    def get_path(self, path_idx: int) -> BalancePath:
        return BalancePath(
            current_age=self.current_age,
            balances=self.balances[path_idx],
            ran_out_at_age=self.ran_out_at_age[path_idx],
        )

    def to_dataframe(self) -> pd.DataFrame:
        """Long format: one row per (path, year offset)."""
        n_paths, n_years = self.balances.shape
        offsets = np.tile(np.arange(n_years), n_paths)
        return pd.DataFrame({
            "path_id": np.repeat(np.arange(n_paths), n_years),
            "year_offset": offsets,
            "age": self.current_age + offsets,
            "balance": self.balances.reshape(-1),
        })


def simulate_paths(
    params: SimulationParameters,
    *,
    source: Optional[DeviateSource] = None,
    config: Optional[EngineConfig] = None,
) -> PathEnsemble:
    """
    Run params.simulation_count independent paths.

    Parameters
    ----------
    params : SimulationParameters
        Household inputs; the risk profile (mean, std) comes from
        params.risk_tolerance, falling back to moderate.
    source : DeviateSource, optional
        Parent source; each path gets one of source.spawn(n). Defaults to
        BoxMullerSource(config.seed).
    config : EngineConfig, optional
        seed and workers. workers > 1 fans paths out over a thread pool.
    """
    cfg = config or EngineConfig()
    profile = get_risk_profile(params.risk_tolerance)
    parent = source if source is not None else BoxMullerSource(cfg.seed)
    n_paths = int(params.simulation_count)
    children = parent.spawn(n_paths)

    logger.debug(
        "Simulating %d paths (%s: mean=%.4f, std=%.4f) with %d worker(s)",
        n_paths, profile.label.value, profile.mean, profile.std, cfg.workers,
    )

    def _run(path_idx: int) -> BalancePath:
        return simulate_path(
            current_age=params.current_age,
            retirement_age=params.retirement_age,
            max_age=params.max_age,
            current_savings=params.current_savings,
            monthly_contribution=params.monthly_contribution,
            mean_return=profile.mean,
            std_dev=profile.std,
            retirement_monthly_spending=params.retirement_monthly_spending,
            social_security_monthly=params.social_security_monthly,
            source=children[path_idx],
        )

    if cfg.workers > 1 and n_paths > 1:
        with ThreadPoolExecutor(max_workers=cfg.workers) as executor:
            paths = list(executor.map(_run, range(n_paths)))
    else:
        paths = [_run(p) for p in range(n_paths)]

    n_years = params.years + 1
    balances = np.zeros((n_paths, n_years), dtype=float)
    for p, path in enumerate(paths):
        balances[p, :] = path.balances

    return PathEnsemble(
        current_age=params.current_age,
        retirement_age=params.retirement_age,
        balances=balances,
        ran_out_at_age=[path.ran_out_at_age for path in paths],
    )
