"""
Single-path simulation — one lifetime balance trajectory, year by year.

Year offset 0 is today's balance. For each later offset i (age = current_age + i):

  Accumulation (age <= retirement_age):
      balance += monthly_contribution * 12
      balance *= 1 + sample(mean, std)
  Distribution (age > retirement_age):
      balance -= (retirement_monthly_spending - social_security_monthly) * 12
      balance *= 1 + sample(0.7 * mean, 0.7 * std)

The balance is floored at zero after every step.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np
import pandas as pd

from core.config import RETIREMENT_RETURN_SCALE, SimulationParameters
from distributions.deviates import DeviateSource, default_source
from distributions.profiles import get_risk_profile


@dataclass(frozen=True, eq=False)
class BalancePath:
    """
    Balance at each year offset 0..(max_age - current_age) for one path.

    ran_out_at_age is the first age after retirement at which the balance
    is zero, or None if the money lasts to max_age. balances is a read-only
    copy of whatever array is passed in.
    """
    current_age: int
    balances: np.ndarray  # shape (years + 1,)
    ran_out_at_age: Optional[int]

    def __post_init__(self):
        balances = np.array(self.balances, dtype=float)
        balances.setflags(write=False)
        object.__setattr__(self, "balances", balances)

    def __eq__(self, other):
        if not isinstance(other, BalancePath):
            return NotImplemented
        return (
            self.current_age == other.current_age
            and self.ran_out_at_age == other.ran_out_at_age
            and np.array_equal(self.balances, other.balances)
        )

    @property
    def n_years(self) -> int:
        return len(self.balances)

    @property
    def ages(self) -> np.ndarray:
        return self.current_age + np.arange(self.n_years)

    @property
    def succeeded(self) -> bool:
        return self.ran_out_at_age is None

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame({"age": self.ages, "balance": self.balances})


def simulate_path(
    *,
    current_age: int,
    retirement_age: int,
    max_age: int,
    current_savings: float,
    monthly_contribution: float,
    mean_return: float,
    std_dev: float,
    retirement_monthly_spending: float = 0.0,
    social_security_monthly: float = 0.0,
    source: Optional[DeviateSource] = None,
) -> BalancePath:
    """
    Simulate one balance trajectory.

    Parameters
    ----------
    mean_return, std_dev : float
        Accumulation-phase annual return assumption. The distribution phase
        uses RETIREMENT_RETURN_SCALE times both.
    source : DeviateSource, optional
        Where annual return samples come from. Defaults to an unseeded
        BoxMullerSource.

    Returns
    -------
    BalancePath with max_age - current_age + 1 balances.
    """
    rng = source if source is not None else default_source()
    years = max_age - current_age
    annual_contribution = monthly_contribution * 12
    annual_withdrawal = (retirement_monthly_spending - social_security_monthly) * 12
    retired_mean = mean_return * RETIREMENT_RETURN_SCALE
    retired_std = std_dev * RETIREMENT_RETURN_SCALE

    balances = np.zeros(years + 1, dtype=float)
    balance = float(current_savings)
    balances[0] = balance

    for i in range(1, years + 1):
        age = current_age + i
        if age <= retirement_age:
            balance += annual_contribution
            balance *= 1 + rng.sample(mean_return, std_dev)
        else:
            balance -= annual_withdrawal
            balance *= 1 + rng.sample(retired_mean, retired_std)

        if balance < 0:
            balance = 0.0
        balances[i] = balance

    # Only depletion after retirement counts; an empty account while still
    # saving is not "running out".
    ran_out_at_age = None
    for i in range(1, years + 1):
        age = current_age + i
        if age > retirement_age and balances[i] <= 0:
            ran_out_at_age = age
            break

    return BalancePath(
        current_age=current_age,
        balances=balances,
        ran_out_at_age=ran_out_at_age,
    )


def run_single_path(
    params: SimulationParameters,
    source: Optional[DeviateSource] = None,
) -> BalancePath:
    """Simulate one path using the mean/std of the parameters' risk profile."""
    profile = get_risk_profile(params.risk_tolerance)
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
        source=source,
    )
