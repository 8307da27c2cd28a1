"""
Three-scenario projection — best / expected / worst case at fixed returns.

Each scenario is one deterministic fixed-return projection whose annual
return is the mean of a risk profile:

  best_case   → aggressive mean
  expected    → moderate mean
  worst_case  → conservative mean

Inflation is held at 3% for all three so only the return assumption differs.
With non-negative contributions, a higher return can only raise the balance,
so best_case ≥ expected ≥ worst_case at retirement.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Optional

import pandas as pd

from core.config import DEFAULT_INFLATION_RATE, SimulationParameters
from core.schema import SCENARIO_PROFILES
from core.utils import resolve_start_year
from distributions.profiles import get_risk_profile
from engine.fixed_return import ProjectionResult, run_fixed_return


@dataclass(frozen=True)
class ScenarioSet:
    best_case: ProjectionResult
    expected: ProjectionResult
    worst_case: ProjectionResult

    @property
    def scenarios(self) -> Dict[str, ProjectionResult]:
        return {
            "best_case": self.best_case,
            "expected": self.expected,
            "worst_case": self.worst_case,
        }

    def to_dict(self) -> Dict[str, Dict]:
        return {label: result.to_dict() for label, result in self.scenarios.items()}

    def to_dataframe(self) -> pd.DataFrame:
        """Wide table: age, year, then one balance column per scenario."""
        frames = []
        for label, result in self.scenarios.items():
            df = result.to_dataframe().rename(columns={"value": label})
            frames.append(df.set_index(["age", "year"]))
        return pd.concat(frames, axis=1).reset_index()


def run_three_scenario(
    params: SimulationParameters,
    *,
    start_year: Optional[int] = None,
) -> ScenarioSet:
    """
    Run the fixed-return projection under the three profile means.

    params.annual_return, params.inflation_rate and params.risk_tolerance are
    ignored; everything else is shared by all three scenarios.
    """
    first_year = resolve_start_year(start_year)
    results = {}
    for label, profile_name in SCENARIO_PROFILES:
        scenario_params = replace(
            params,
            annual_return=get_risk_profile(profile_name).mean,
            inflation_rate=DEFAULT_INFLATION_RATE,
        )
        results[label] = run_fixed_return(scenario_params, start_year=first_year)
    return ScenarioSet(**results)
