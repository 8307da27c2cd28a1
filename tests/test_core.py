import numpy as np
import pytest

from core.config import EngineConfig, SimulationParameters
from core.utils import calendar_years, nearest_rank_index, resolve_start_year, round_money


def test_round_money_half_up():
    assert round_money(0.125) == 0.13
    assert round_money(1234.5678) == 1234.57
    assert round_money(-0.125) == -0.13
    assert isinstance(round_money(np.float64(2.5)), float)
    assert round_money(np.array([0.375, 1.0])).tolist() == [0.38, 1.0]


@pytest.mark.parametrize(
    "p, n, expected",
    [(10, 10, 1), (50, 10, 5), (90, 10, 9), (90, 1, 0), (10, 5, 0), (50, 5, 2), (100, 5, 4), (0, 5, 0)],
)
def test_nearest_rank_index(p, n, expected):
    assert nearest_rank_index(p, n) == expected


def test_years_helpers():
    assert resolve_start_year(2031) == 2031
    assert isinstance(resolve_start_year(), int)
    assert calendar_years(2030, 3) == [2030, 2031, 2032]


def test_parameter_derived_amounts(reference_params):
    assert reference_params.years == 65
    assert reference_params.annual_contribution == 12000
    assert reference_params.annual_net_withdrawal == 30000


def test_parameter_defaults():
    params = SimulationParameters(current_age=40, retirement_age=65, current_savings=0, monthly_contribution=0)
    assert params.max_age == 95
    assert params.simulation_count == 1000
    assert params.inflation_rate == 0.03
    assert params.annual_return is None


def test_engine_config_rejects_zero_workers():
    with pytest.raises(ValueError):
        EngineConfig(workers=0)
