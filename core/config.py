"""
Projection configuration.
Risk profile parameters live in distributions/profiles.py (RISK_PROFILES).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

DEFAULT_MAX_AGE = 95
DEFAULT_SIMULATION_COUNT = 1000
DEFAULT_INFLATION_RATE = 0.03

# Retirement-phase return and volatility as a fraction of the accumulation-phase
# assumption (more conservative post-retirement allocation).
RETIREMENT_RETURN_SCALE = 0.7

COMPARISON_SIMULATION_COUNT = 500
SUCCESS_RATE_GOAL = 80.0


@dataclass(frozen=True)
class SimulationParameters:
    """
    One household's projection inputs, already resolved by the caller.

    Money amounts are nominal dollars; returns and rates are decimals
    (0.08 for 8%). The engine does not check the age ordering
    (max_age > current_age, current_age <= retirement_age <= max_age);
    see inputs.validators for that.
    """

    current_age: int
    retirement_age: int
    current_savings: float
    monthly_contribution: float
    max_age: int = DEFAULT_MAX_AGE
    retirement_monthly_spending: float = 0.0
    social_security_monthly: float = 0.0
    risk_tolerance: str = "moderate"
    simulation_count: int = DEFAULT_SIMULATION_COUNT

    # fixed-return projection only
    annual_return: Optional[float] = None
    inflation_rate: float = DEFAULT_INFLATION_RATE

    @property
    def years(self) -> int:
        return self.max_age - self.current_age

    @property
    def annual_contribution(self) -> float:
        return self.monthly_contribution * 12

    @property
    def annual_net_withdrawal(self) -> float:
        return (self.retirement_monthly_spending - self.social_security_monthly) * 12


@dataclass(frozen=True)
class EngineConfig:
    """Run settings that are not part of the household's inputs."""

    seed: Optional[int] = None
    workers: int = 1
    start_year: Optional[int] = None  # calendar year of offset 0; None -> this year

    def __post_init__(self):
        if self.workers < 1:
            raise ValueError("workers must be at least 1")
