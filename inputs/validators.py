"""
Parameter validation before inputs reach the engine.

The engine itself never validates: it clamps, falls back and degrades
numerically. Callers that want to reject bad input up front run these checks:
- Non-numeric or non-finite values
- Negative money amounts
- Impossible age ordering
- Simulation counts and horizons outside the supported range
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from numbers import Integral, Real
from typing import List

from core.config import SimulationParameters
from distributions.profiles import RiskTolerance

MIN_SIMULATION_COUNT = 100
MAX_SIMULATION_COUNT = 10000
MIN_MAX_AGE = 50
MAX_MAX_AGE = 120

AGE_FIELDS = ("current_age", "retirement_age", "max_age")
MONEY_FIELDS = (
    "current_savings",
    "monthly_contribution",
    "retirement_monthly_spending",
    "social_security_monthly",
)


class InvalidParameterError(ValueError):
    """Raised when projection inputs fail validation."""


@dataclass
class ValidationResult:
    """Collects all validation warnings/errors for a parameter record."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def summary(self) -> str:
        lines = []
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  ✗ {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  ⚠ {w}")
        if not lines:
            lines.append("✓ All checks passed.")
        return "\n".join(lines)


def _is_number(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


def _is_integer(value) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, Integral):
        return True
    return _is_number(value) and float(value).is_integer()


def validate_parameters(params: SimulationParameters) -> ValidationResult:
    """
    Run all validation checks on one SimulationParameters record.
    Returns a ValidationResult with errors (blocking) and warnings (informational).
    """
    result = ValidationResult()

    # --- Types ---
    for name in AGE_FIELDS:
        if not _is_integer(getattr(params, name)):
            result.errors.append(f"{name} must be an integer")
    for name in MONEY_FIELDS + ("inflation_rate",):
        if not _is_number(getattr(params, name)):
            result.errors.append(f"{name} must be a finite number")
    if params.annual_return is not None and not _is_number(params.annual_return):
        result.errors.append("annual_return must be a finite number")
    if result.errors:
        return result  # ordering checks below need numbers

    # --- Money ---
    for name in MONEY_FIELDS:
        if getattr(params, name) < 0:
            result.errors.append(f"{name} must be a non-negative number")

    # --- Ages ---
    if params.max_age <= params.current_age:
        result.errors.append("max_age must be greater than current_age")
    if not params.current_age <= params.retirement_age <= params.max_age:
        result.errors.append("retirement_age must be between current_age and max_age")
    if not MIN_MAX_AGE <= params.max_age <= MAX_MAX_AGE:
        result.errors.append(f"max_age must be between {MIN_MAX_AGE} and {MAX_MAX_AGE}")
    elif params.retirement_age == params.max_age:
        result.warnings.append("retirement_age equals max_age; no years in retirement are modeled.")

    # --- Simulation count ---
    count = params.simulation_count
    if not _is_integer(count):
        result.errors.append("simulation_count must be an integer")
    elif not MIN_SIMULATION_COUNT <= count <= MAX_SIMULATION_COUNT:
        result.errors.append(
            f"simulation_count must be between {MIN_SIMULATION_COUNT} and {MAX_SIMULATION_COUNT}"
        )

    # --- Assumptions ---
    labels = [t.value for t in RiskTolerance]
    risk = params.risk_tolerance
    if isinstance(risk, RiskTolerance):
        risk = risk.value
    if risk not in labels:
        result.warnings.append(
            f"Unknown risk_tolerance {params.risk_tolerance!r}, moderate will be used. "
            f"Must be one of: {', '.join(labels)}"
        )
    if params.annual_return is not None and params.annual_return > 1.0:
        result.warnings.append(
            "annual_return > 1.0: check if the return is in percent vs decimal form."
        )
    if params.social_security_monthly > params.retirement_monthly_spending:
        result.warnings.append(
            "social_security_monthly exceeds retirement_monthly_spending, "
            "retirement years add to the balance instead of drawing it down."
        )

    return result


def require_valid(params: SimulationParameters) -> SimulationParameters:
    """Return params unchanged, or raise InvalidParameterError listing every error."""
    result = validate_parameters(params)
    if not result.is_valid:
        raise InvalidParameterError(result.summary())
    return params
