"""
Aggregate N simulated paths into the numbers a retirement planner reads.

Instead of: "you'll have $1.2M at 65" (one path, no context)
The planner gets: "10% of futures below $0.7M, median $1.1M, 90% below $1.9M,
and the money lasts to 95 in 83.4% of them."

Percentiles use the nearest-rank rule: sort ascending, then take the element at
floor(p/100 × N) clamped to [0, N−1]. There is no interpolation, so every
reported value is an actual simulated balance. Sorting before ranking makes
p10 ≤ p25 ≤ p50 ≤ p75 ≤ p90 hold at every year offset by construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import numpy as np
import pandas as pd

from core.schema import PERCENTILE_COLUMNS, PERCENTILE_LEVELS, RETIREMENT_BALANCE_LEVELS
from core.utils import calendar_years, nearest_rank_index, resolve_start_year, round_money
from engine.fixed_return import ProjectionPoint
from engine.runner import PathEnsemble


@dataclass(frozen=True)
class PercentileBands:
    """Per-percentile series of (age, year, value), keyed "p10" … "p90"."""
    paths: Dict[str, List[ProjectionPoint]]

    def __getitem__(self, key: str) -> List[ProjectionPoint]:
        return self.paths[key]

    def values(self, key: str) -> List[float]:
        return [pt.value for pt in self.paths[key]]

    def to_dict(self) -> Dict[str, List[Dict]]:
        return {key: [pt.to_dict() for pt in series] for key, series in self.paths.items()}

    def to_dataframe(self) -> pd.DataFrame:
        first = next(iter(self.paths.values()), [])
        data = {
            "age": [pt.age for pt in first],
            "year": [pt.year for pt in first],
        }
        for key, series in self.paths.items():
            data[key] = [pt.value for pt in series]
        return pd.DataFrame(data, columns=[c for c in PERCENTILE_COLUMNS if c in data])


@dataclass(frozen=True)
class MonteCarloResult:
    percentile_paths: PercentileBands
    success_rate: float  # percent, 0–100, 2 decimals
    median_at_retirement: float
    worst_case_at_retirement: float
    best_case_at_retirement: float
    simulation_count: int

    def to_dict(self) -> Dict:
        return {
            "percentile_paths": self.percentile_paths.to_dict(),
            "success_rate": self.success_rate,
            "median_at_retirement": self.median_at_retirement,
            "worst_case_at_retirement": self.worst_case_at_retirement,
            "best_case_at_retirement": self.best_case_at_retirement,
            "simulation_count": self.simulation_count,
        }


def _require_paths(ensemble: PathEnsemble) -> None:
    if ensemble.n_paths == 0:
        raise ValueError("Cannot aggregate an ensemble with no simulated paths.")


def percentile_bands(
    ensemble: PathEnsemble,
    *,
    start_year: Optional[int] = None,
    percentiles: Tuple[int, ...] = PERCENTILE_LEVELS,
) -> PercentileBands:
    """
    Nearest-rank percentile of the balance at every year offset.

    Returns
    -------
    PercentileBands with one (age, year, value) point per year offset for
    each requested percentile, values rounded to cents.
    """
    _require_paths(ensemble)
    years = calendar_years(resolve_start_year(start_year), ensemble.n_years)
    n = ensemble.n_paths
    ordered = np.sort(ensemble.balances, axis=0)

    paths: Dict[str, List[ProjectionPoint]] = {}
    for p in percentiles:
        row = round_money(ordered[nearest_rank_index(p, n), :])
        paths[f"p{p}"] = [
            ProjectionPoint(
                age=ensemble.current_age + t,
                year=years[t],
                value=float(row[t]),
            )
            for t in range(ensemble.n_years)
        ]
    return PercentileBands(paths=paths)


def success_rate(ensemble: PathEnsemble) -> float:
    """Percent of paths whose money never ran out, rounded to 2 decimals."""
    _require_paths(ensemble)
    share = ensemble.success_count / ensemble.n_paths
    return float(np.floor(share * 10000 + 0.5) / 100)


def retirement_offset(ensemble: PathEnsemble) -> int:
    """Year offset of the retirement age, clamped into the path."""
    offset = ensemble.retirement_age - ensemble.current_age
    return min(max(offset, 0), ensemble.n_years - 1)


def retirement_balance_stats(ensemble: PathEnsemble) -> Dict[str, float]:
    """Median / worst-case (p10) / best-case (p90) balance at retirement."""
    _require_paths(ensemble)
    at_retirement = np.sort(ensemble.balances[:, retirement_offset(ensemble)])
    n = len(at_retirement)
    return {
        key: round_money(at_retirement[nearest_rank_index(p, n)])
        for key, p in RETIREMENT_BALANCE_LEVELS
    }


def aggregate_ensemble(
    ensemble: PathEnsemble,
    *,
    start_year: Optional[int] = None,
) -> MonteCarloResult:
    stats = retirement_balance_stats(ensemble)
    return MonteCarloResult(
        percentile_paths=percentile_bands(ensemble, start_year=start_year),
        success_rate=success_rate(ensemble),
        median_at_retirement=stats["median_at_retirement"],
        worst_case_at_retirement=stats["worst_case_at_retirement"],
        best_case_at_retirement=stats["best_case_at_retirement"],
        simulation_count=ensemble.n_paths,
    )
