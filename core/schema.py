from __future__ import annotations

from typing import Tuple

# Percentile levels reported for every year offset of a Monte Carlo run.
PERCENTILE_LEVELS: Tuple[int, ...] = (10, 25, 50, 75, 90)

# Retirement-balance statistics: (output key, percentile).
RETIREMENT_BALANCE_LEVELS: Tuple[Tuple[str, int], ...] = (
    ("median_at_retirement", 50),
    ("worst_case_at_retirement", 10),
    ("best_case_at_retirement", 90),
)

# Scenario labels and the risk profile whose mean return each one assumes.
SCENARIO_PROFILES: Tuple[Tuple[str, str], ...] = (
    ("best_case", "aggressive"),
    ("expected", "moderate"),
    ("worst_case", "conservative"),
)

MODEL_TYPES: Tuple[str, ...] = ("monte_carlo", "fixed_return", "three_scenario")

# Columns of the per-year tables returned by the to_dataframe() helpers.
PROJECTION_COLUMNS: Tuple[str, ...] = ("age", "year", "value")
PERCENTILE_COLUMNS: Tuple[str, ...] = ("age", "year") + tuple(f"p{p}" for p in PERCENTILE_LEVELS)
