"""
Assemble SimulationParameters from a stored financial profile plus overrides.

The caller has already loaded the user's profile (age, savings, spending, ...)
from wherever it lives. What-if requests then override individual fields:
  - retirement_age and risk_tolerance override only when truthy
  - every other override applies whenever it is present (0 is a real value)
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, ValidationError

from core.config import DEFAULT_MAX_AGE, DEFAULT_SIMULATION_COUNT, SimulationParameters

from .validators import InvalidParameterError


class ProfileSnapshot(BaseModel):
    """The slice of a user's financial profile the engine needs."""
    model_config = ConfigDict(extra="ignore")

    age: int
    retirement_age: int
    risk_tolerance: Optional[str] = None
    current_savings: float = 0.0
    monthly_contribution: float = 0.0
    monthly_expenses: float = 0.0
    social_security_monthly: float = 0.0


class ParameterOverrides(BaseModel):
    model_config = ConfigDict(extra="ignore")

    retirement_age: Optional[int] = None
    risk_tolerance: Optional[str] = None
    current_savings: Optional[float] = None
    monthly_contribution: Optional[float] = None
    retirement_monthly_spending: Optional[float] = None
    social_security_monthly: Optional[float] = None


def _coerce(model_cls, data):
    if data is None:
        return model_cls()
    if isinstance(data, model_cls):
        return data
    try:
        return model_cls.model_validate(data)
    except ValidationError as e:
        raise InvalidParameterError(str(e)) from e


def _pick(override: Any, default: Any) -> Any:
    return default if override is None else override


def build_parameters(
    profile: Union[ProfileSnapshot, Mapping[str, Any]],
    overrides: Optional[Union[ParameterOverrides, Mapping[str, Any]]] = None,
    *,
    max_age: int = DEFAULT_MAX_AGE,
    simulation_count: int = DEFAULT_SIMULATION_COUNT,
) -> SimulationParameters:
    """
    Merge a profile and optional overrides into one SimulationParameters.

    Raises
    ------
    InvalidParameterError
        If the profile or overrides do not parse (missing age, text where a
        number belongs, ...).
    """
    if profile is None:
        raise InvalidParameterError("A financial profile is required.")
    snap = _coerce(ProfileSnapshot, profile)
    over = _coerce(ParameterOverrides, overrides)

    return SimulationParameters(
        current_age=snap.age,
        retirement_age=over.retirement_age or snap.retirement_age,
        max_age=max_age,
        current_savings=_pick(over.current_savings, snap.current_savings),
        monthly_contribution=_pick(over.monthly_contribution, snap.monthly_contribution),
        retirement_monthly_spending=_pick(over.retirement_monthly_spending, snap.monthly_expenses),
        social_security_monthly=_pick(over.social_security_monthly, snap.social_security_monthly),
        risk_tolerance=over.risk_tolerance or snap.risk_tolerance or "moderate",
        simulation_count=simulation_count,
    )
