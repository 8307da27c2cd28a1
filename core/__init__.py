"""
Core package — parameter records, configuration, output schema, and shared utilities.
No business logic lives here.
"""

from .config import (
    COMPARISON_SIMULATION_COUNT,
    DEFAULT_INFLATION_RATE,
    DEFAULT_MAX_AGE,
    DEFAULT_SIMULATION_COUNT,
    RETIREMENT_RETURN_SCALE,
    SUCCESS_RATE_GOAL,
    EngineConfig,
    SimulationParameters,
)
from .schema import MODEL_TYPES, PERCENTILE_LEVELS, SCENARIO_PROFILES
from .utils import calendar_years, nearest_rank_index, resolve_start_year, round_money

__all__ = [
    "COMPARISON_SIMULATION_COUNT",
    "DEFAULT_INFLATION_RATE",
    "DEFAULT_MAX_AGE",
    "DEFAULT_SIMULATION_COUNT",
    "RETIREMENT_RETURN_SCALE",
    "SUCCESS_RATE_GOAL",
    "EngineConfig",
    "SimulationParameters",
    "MODEL_TYPES",
    "PERCENTILE_LEVELS",
    "SCENARIO_PROFILES",
    "calendar_years",
    "nearest_rank_index",
    "resolve_start_year",
    "round_money",
]
