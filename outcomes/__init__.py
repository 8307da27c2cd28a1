"""
Outcomes — Monte Carlo aggregation, scenario sets, and model comparison.
"""

from .aggregator import (
    MonteCarloResult,
    PercentileBands,
    aggregate_ensemble,
    percentile_bands,
    retirement_balance_stats,
    success_rate,
)
from .compare import ModelSummary, compare_models, summaries_to_dataframe
from .monte_carlo import run_monte_carlo
from .scenarios import ScenarioSet, run_three_scenario

__all__ = [
    "MonteCarloResult",
    "PercentileBands",
    "aggregate_ensemble",
    "percentile_bands",
    "retirement_balance_stats",
    "success_rate",
    "ModelSummary",
    "compare_models",
    "summaries_to_dataframe",
    "run_monte_carlo",
    "ScenarioSet",
    "run_three_scenario",
]
