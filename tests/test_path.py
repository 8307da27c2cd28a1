import numpy as np
import pytest

from core.config import RETIREMENT_RETURN_SCALE, SimulationParameters
from distributions.deviates import BoxMullerSource, CallableSource, MeanSource
from engine.path import run_single_path, simulate_path


def _zero_return(mean, std):
    return 0.0


def test_length_and_starting_balance():
    path = simulate_path(
        current_age=30, retirement_age=65, max_age=95,
        current_savings=100000, monthly_contribution=1000,
        mean_return=0.08, std_dev=0.12,
        retirement_monthly_spending=4000, social_security_monthly=1500,
        source=BoxMullerSource(seed=1),
    )
    assert len(path.balances) == 66
    assert path.balances[0] == 100000
    assert path.ages[0] == 30 and path.ages[-1] == 95


def test_phases_by_hand():
    path = simulate_path(
        current_age=60, retirement_age=62, max_age=64,
        current_savings=1000, monthly_contribution=100,
        mean_return=0.05, std_dev=0.1,
        retirement_monthly_spending=200, social_security_monthly=100,
        source=CallableSource(_zero_return),
    )
    # +1200 at 61 and 62, then -1200 net withdrawal at 63 and 64
    assert path.balances.tolist() == [1000, 2200, 3400, 2200, 1000]
    assert path.ran_out_at_age is None
    assert path.succeeded


def test_retirement_phase_uses_scaled_assumptions():
    calls = []

    def record(mean, std):
        calls.append((mean, std))
        return 0.0

    simulate_path(
        current_age=60, retirement_age=62, max_age=65,
        current_savings=1000, monthly_contribution=0,
        mean_return=0.08, std_dev=0.12,
        source=CallableSource(record),
    )
    assert calls[:2] == [(0.08, 0.12), (0.08, 0.12)]
    for mean, std in calls[2:]:
        assert mean == pytest.approx(0.08 * RETIREMENT_RETURN_SCALE)
        assert std == pytest.approx(0.12 * RETIREMENT_RETURN_SCALE)
    assert len(calls) == 5


def test_accumulation_strictly_increases_with_deterministic_returns():
    path = simulate_path(
        current_age=30, retirement_age=65, max_age=95,
        current_savings=0, monthly_contribution=500,
        mean_return=0.06, std_dev=0.0,
        source=MeanSource(),
    )
    accumulation = path.balances[: 65 - 30 + 1]
    assert np.all(np.diff(accumulation) > 0)


def test_ran_out_age_is_first_zero_after_retirement():
    path = simulate_path(
        current_age=60, retirement_age=60, max_age=70,
        current_savings=1000, monthly_contribution=0,
        mean_return=0.05, std_dev=0.0,
        retirement_monthly_spending=5000, social_security_monthly=0,
        source=MeanSource(),
    )
    assert path.ran_out_at_age == 61
    assert path.balances[1] == 0.0
    assert not path.succeeded


def test_empty_account_while_saving_is_not_running_out():
    path = simulate_path(
        current_age=30, retirement_age=50, max_age=50,
        current_savings=0, monthly_contribution=0,
        mean_return=0.08, std_dev=0.12,
        source=BoxMullerSource(seed=2),
    )
    assert np.all(path.balances == 0)
    assert path.ran_out_at_age is None


@pytest.mark.parametrize("seed", range(5))
def test_balances_never_negative(seed):
    path = simulate_path(
        current_age=40, retirement_age=45, max_age=100,
        current_savings=5000, monthly_contribution=50,
        mean_return=0.02, std_dev=1.5,
        retirement_monthly_spending=3000, social_security_monthly=0,
        source=BoxMullerSource(seed=seed),
    )
    assert np.all(path.balances >= 0)


def test_run_single_path_uses_profile():
    calls = []

    def record(mean, std):
        calls.append((mean, std))
        return 0.0

    params = SimulationParameters(
        current_age=60, retirement_age=61, max_age=61,
        current_savings=100, monthly_contribution=0,
        risk_tolerance="aggressive",
    )
    path = run_single_path(params, CallableSource(record))
    assert calls == [(0.10, 0.16)]
    assert len(path.balances) == 2


def test_to_dataframe():
    path = simulate_path(
        current_age=60, retirement_age=62, max_age=64,
        current_savings=1000, monthly_contribution=100,
        mean_return=0.05, std_dev=0.1,
        source=CallableSource(_zero_return),
    )
    df = path.to_dataframe()
    assert list(df.columns) == ["age", "balance"]
    assert df["age"].tolist() == [60, 61, 62, 63, 64]


def _seeded_path(seed):
    return simulate_path(
        current_age=30, retirement_age=65, max_age=95,
        current_savings=100000, monthly_contribution=1000,
        mean_return=0.08, std_dev=0.12,
        retirement_monthly_spending=4000, social_security_monthly=1500,
        source=BoxMullerSource(seed=seed),
    )


def test_same_seed_gives_equal_paths():
    assert _seeded_path(1) == _seeded_path(1)
    assert _seeded_path(1) != _seeded_path(2)


def test_path_balances_are_read_only():
    path = _seeded_path(1)
    with pytest.raises(ValueError):
        path.balances[0] = -1.0
    assert path.balances[0] == 100000
