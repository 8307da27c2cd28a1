"""
Risk profiles — assumed annual mean return and volatility per risk tolerance.

These are planning assumptions for a single blended portfolio, not calibrated
to market data. The three labels are a closed set: anything else a caller
passes in resolves to MODERATE.

Ordering invariant: mean and std both strictly increase from
conservative → moderate → aggressive.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Union

logger = logging.getLogger(__name__)


class RiskTolerance(str, Enum):
    CONSERVATIVE = "conservative"
    MODERATE = "moderate"
    AGGRESSIVE = "aggressive"

    @classmethod
    def parse(cls, value: Optional[Union[str, "RiskTolerance"]]) -> "RiskTolerance":
        """Map a caller-supplied label onto the closed set; unknown -> MODERATE."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if member.value == key:
                    return member
        if value is not None:
            logger.info("Unrecognized risk tolerance %r, using moderate", value)
        return cls.MODERATE


@dataclass(frozen=True)
class RiskProfile:
    """Return assumption for one risk tolerance."""
    label: RiskTolerance
    mean: float
    std: float


RISK_PROFILES: Dict[RiskTolerance, RiskProfile] = {
    RiskTolerance.CONSERVATIVE: RiskProfile(RiskTolerance.CONSERVATIVE, mean=0.06, std=0.08),
    RiskTolerance.MODERATE: RiskProfile(RiskTolerance.MODERATE, mean=0.08, std=0.12),
    RiskTolerance.AGGRESSIVE: RiskProfile(RiskTolerance.AGGRESSIVE, mean=0.10, std=0.16),
}


def get_risk_profile(
    risk_tolerance: Optional[Union[str, RiskTolerance]] = None,
) -> RiskProfile:
    """
    Return the risk profile for a label.

    Parameters
    ----------
    risk_tolerance : str or RiskTolerance, optional
        One of "conservative", "moderate", "aggressive". Missing or
        unrecognized labels return the moderate profile.
    """
    return RISK_PROFILES[RiskTolerance.parse(risk_tolerance)]
