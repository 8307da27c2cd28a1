"""
Side-by-side summary of the projection models for one set of inputs.

Each model is reduced to the same four fields so they can be shown in one
table:

  monte_carlo     → median balance at retirement, success rate,
                    goal met when success rate ≥ 80%
  fixed_return    → balance at retirement, years funds last, goal flag
  three_scenario  → the "expected" scenario's figures
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Dict, List, Optional, Sequence

import pandas as pd

from core.config import (
    COMPARISON_SIMULATION_COUNT,
    SUCCESS_RATE_GOAL,
    EngineConfig,
    SimulationParameters,
)
from core.schema import MODEL_TYPES
from distributions.deviates import DeviateSource
from engine.fixed_return import run_fixed_return
from inputs.validators import InvalidParameterError

from .monte_carlo import run_monte_carlo
from .scenarios import run_three_scenario


@dataclass(frozen=True)
class ModelSummary:
    model_type: str
    balance_at_retirement: float
    success_rate: Optional[float]
    years_funds_last: Optional[int]
    meets_goal: bool

    def to_dict(self) -> Dict:
        return asdict(self)


def _check_model_types(model_types: Sequence[str]) -> None:
    if isinstance(model_types, str) or not model_types:
        raise InvalidParameterError("model_types must be a non-empty list")
    for model_type in model_types:
        if model_type not in MODEL_TYPES:
            raise InvalidParameterError(
                f"Invalid model type: {model_type}. Must be one of: {', '.join(MODEL_TYPES)}"
            )


def compare_models(
    params: SimulationParameters,
    model_types: Sequence[str] = MODEL_TYPES,
    *,
    source: Optional[DeviateSource] = None,
    config: Optional[EngineConfig] = None,
) -> List[ModelSummary]:
    """
    Run each requested model and summarize it.

    Monte Carlo runs with a reduced simulation count (500) whatever
    params.simulation_count says.

    Raises
    ------
    InvalidParameterError
        If model_types is empty or names an unknown model.
    """
    _check_model_types(model_types)
    cfg = config or EngineConfig()

    summaries = []
    for model_type in model_types:
        if model_type == "monte_carlo":
            mc = run_monte_carlo(
                replace(params, simulation_count=COMPARISON_SIMULATION_COUNT),
                source=source,
                config=cfg,
            )
            summary = ModelSummary(
                model_type=model_type,
                balance_at_retirement=mc.median_at_retirement,
                success_rate=mc.success_rate,
                years_funds_last=None,
                meets_goal=mc.success_rate >= SUCCESS_RATE_GOAL,
            )
        elif model_type == "fixed_return":
            fixed = run_fixed_return(params, start_year=cfg.start_year)
            summary = ModelSummary(
                model_type=model_type,
                balance_at_retirement=fixed.balance_at_retirement,
                success_rate=None,
                years_funds_last=fixed.years_funds_last,
                meets_goal=fixed.meets_goal,
            )
        else:
            expected = run_three_scenario(params, start_year=cfg.start_year).expected
            summary = ModelSummary(
                model_type=model_type,
                balance_at_retirement=expected.balance_at_retirement,
                success_rate=None,
                years_funds_last=expected.years_funds_last,
                meets_goal=expected.meets_goal,
            )
        summaries.append(summary)

    return summaries


def summaries_to_dataframe(summaries: List[ModelSummary]) -> pd.DataFrame:
    return pd.DataFrame([s.to_dict() for s in summaries])
