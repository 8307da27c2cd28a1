"""
Distributions package — return assumptions and the random deviates drawn from them.

  1. profiles.py — risk tolerance → (mean, std) annual return assumption
  2. deviates.py — pluggable normal(mean, std) sample sources
"""

from .deviates import (
    BoxMullerSource,
    CallableSource,
    DeviateSource,
    MeanSource,
    default_source,
)
from .profiles import RISK_PROFILES, RiskProfile, RiskTolerance, get_risk_profile

__all__ = [
    "BoxMullerSource",
    "CallableSource",
    "DeviateSource",
    "MeanSource",
    "default_source",
    "RISK_PROFILES",
    "RiskProfile",
    "RiskTolerance",
    "get_risk_profile",
]
