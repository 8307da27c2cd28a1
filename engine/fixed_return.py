"""
Fixed-return projection — one deterministic trajectory at a single real return.

real_return = annual_return - inflation_rate, so every value is in today's
dollars. The phase split matches the path simulator: while age < retirement_age
the step from age to age + 1 adds a year of contributions and grows at
real_return; afterwards it withdraws a year of net spending and grows at
RETIREMENT_RETURN_SCALE * real_return.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

import pandas as pd

from core.config import RETIREMENT_RETURN_SCALE, SimulationParameters
from core.schema import PROJECTION_COLUMNS
from core.utils import resolve_start_year, round_money
from distributions.profiles import get_risk_profile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProjectionPoint:
    age: int
    year: int
    value: float

    def to_dict(self) -> Dict:
        return {"age": self.age, "year": self.year, "value": self.value}


@dataclass(frozen=True)
class ProjectionResult:
    """
    Deterministic projection plus the metrics a planner reads off it.

    years_funds_last is the year index at which the balance first hit zero,
    or the full number of modeled years if it never did.
    """
    projection: List[ProjectionPoint]
    annual_return: float
    real_return: float
    balance_at_retirement: float
    years_funds_last: int
    monthly_retirement_income: float
    meets_goal: bool

    def to_dict(self) -> Dict:
        return {
            "projection": [pt.to_dict() for pt in self.projection],
            "annual_return": self.annual_return,
            "real_return": self.real_return,
            "balance_at_retirement": self.balance_at_retirement,
            "years_funds_last": self.years_funds_last,
            "monthly_retirement_income": self.monthly_retirement_income,
            "meets_goal": self.meets_goal,
        }

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame(
            [(pt.age, pt.year, pt.value) for pt in self.projection],
            columns=list(PROJECTION_COLUMNS),
        )


def resolve_annual_return(params: SimulationParameters) -> float:
    """The explicit annual_return, else the mean of the risk profile."""
    if params.annual_return is not None:
        return float(params.annual_return)
    return get_risk_profile(params.risk_tolerance).mean


def run_fixed_return(
    params: SimulationParameters,
    *,
    start_year: Optional[int] = None,
) -> ProjectionResult:
    """
    Project the balance year by year at one fixed real return.

    Parameters
    ----------
    params : SimulationParameters
        annual_return (optional) and inflation_rate are used; risk_tolerance
        only supplies the default annual_return.
    start_year : int, optional
        Calendar year of the first point. Defaults to the current year.
    """
    annual_return = resolve_annual_return(params)
    real_return = annual_return - params.inflation_rate
    retired_return = real_return * RETIREMENT_RETURN_SCALE
    first_year = resolve_start_year(start_year)
    years = params.years

    projection: List[ProjectionPoint] = []
    balance = float(params.current_savings)
    years_funds_last = years
    funds_ran_out = False

    for i in range(years + 1):
        age = params.current_age + i
        projection.append(ProjectionPoint(age=age, year=first_year + i, value=round_money(balance)))

        if i == years:
            break

        if age < params.retirement_age:
            balance += params.annual_contribution
            balance *= 1 + real_return
        else:
            balance -= params.annual_net_withdrawal
            balance *= 1 + retired_return

        if balance < 0:
            balance = 0.0
            if not funds_ran_out:
                years_funds_last = i
                funds_ran_out = True

    retirement_idx = min(max(params.retirement_age - params.current_age, 0), len(projection) - 1)
    balance_at_retirement = projection[retirement_idx].value

    years_in_retirement = max(0, params.max_age - params.retirement_age)
    if years_in_retirement > 0:
        savings_income = round_money(balance_at_retirement / years_in_retirement / 12)
    else:
        savings_income = 0.0

    logger.debug(
        "Fixed-return projection: return=%.4f real=%.4f balance_at_retirement=%.2f ran_out=%s",
        annual_return, real_return, balance_at_retirement, funds_ran_out,
    )

    return ProjectionResult(
        projection=projection,
        annual_return=annual_return,
        real_return=real_return,
        balance_at_retirement=balance_at_retirement,
        years_funds_last=years_funds_last,
        monthly_retirement_income=savings_income + params.social_security_monthly,
        meets_goal=not funds_ran_out,
    )
