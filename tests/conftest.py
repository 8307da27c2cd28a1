import pytest

from core.config import SimulationParameters


@pytest.fixture
def reference_params() -> SimulationParameters:
    return SimulationParameters(
        current_age=30,
        retirement_age=65,
        max_age=95,
        current_savings=100000,
        monthly_contribution=1000,
        risk_tolerance="moderate",
        retirement_monthly_spending=4000,
        social_security_monthly=1500,
        simulation_count=100,
    )
