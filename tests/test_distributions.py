import math

import numpy as np
import pytest

from distributions.deviates import BoxMullerSource, CallableSource, MeanSource
from distributions.profiles import RISK_PROFILES, RiskTolerance, get_risk_profile


@pytest.mark.parametrize("mean", [0.0, 0.08, -0.35, 1e9])
def test_zero_std_returns_mean_exactly(mean):
    source = BoxMullerSource(seed=3)
    assert source.sample(mean, 0) == mean
    assert source.sample(mean, 0.0) == mean


def test_standard_normal_moments():
    source = BoxMullerSource(seed=42)
    draws = np.array([source.standard_normal() for _ in range(10_000)])
    assert np.all(np.isfinite(draws))
    assert abs(draws.mean()) < 0.1
    assert abs(draws.var() - 1.0) < 0.2


def test_sample_is_scaled_and_shifted():
    a = BoxMullerSource(seed=11)
    b = BoxMullerSource(seed=11)
    z = a.standard_normal()
    assert b.sample(0.08, 0.12) == pytest.approx(0.08 + 0.12 * z)


def test_seeded_sources_repeat():
    a = BoxMullerSource(seed=7)
    b = BoxMullerSource(seed=7)
    assert [a.sample(0.08, 0.12) for _ in range(20)] == [b.sample(0.08, 0.12) for _ in range(20)]


def test_spawned_children_are_independent_and_reproducible():
    children = BoxMullerSource(seed=5).spawn(3)
    firsts = [c.standard_normal() for c in children]
    assert len(set(firsts)) == 3

    again = [c.standard_normal() for c in BoxMullerSource(seed=5).spawn(3)]
    assert firsts == again


def test_mean_source_is_deterministic():
    source = MeanSource()
    assert source.sample(0.06, 0.5) == 0.06
    assert all(child is source for child in source.spawn(4))


def test_callable_source_wraps_function():
    calls = []

    def fn(mean, std):
        calls.append((mean, std))
        return 0.01

    source = CallableSource(fn)
    assert source.sample(0.1, 0.2) == 0.01
    assert calls == [(0.1, 0.2)]
    assert len(source.spawn(2)) == 2


def test_profiles_strictly_increase():
    order = [RiskTolerance.CONSERVATIVE, RiskTolerance.MODERATE, RiskTolerance.AGGRESSIVE]
    means = [RISK_PROFILES[t].mean for t in order]
    stds = [RISK_PROFILES[t].std for t in order]
    assert means == sorted(means) and len(set(means)) == 3
    assert stds == sorted(stds) and len(set(stds)) == 3


@pytest.mark.parametrize(
    "label, expected",
    [
        ("conservative", RiskTolerance.CONSERVATIVE),
        ("Aggressive", RiskTolerance.AGGRESSIVE),
        (" moderate ", RiskTolerance.MODERATE),
        ("yolo", RiskTolerance.MODERATE),
        ("", RiskTolerance.MODERATE),
        (None, RiskTolerance.MODERATE),
        (RiskTolerance.AGGRESSIVE, RiskTolerance.AGGRESSIVE),
    ],
)
def test_parse_falls_back_to_moderate(label, expected):
    assert RiskTolerance.parse(label) is expected


def test_get_risk_profile_values():
    assert get_risk_profile("aggressive").mean == 0.10
    assert get_risk_profile("conservative").std == 0.08
    assert get_risk_profile("unknown") == RISK_PROFILES[RiskTolerance.MODERATE]
    assert math.isclose(get_risk_profile().mean, 0.08)


def test_reusing_a_source_advances_its_seed_sequence():
    source = BoxMullerSource(seed=11)
    first = source.spawn(1)[0].standard_normal()
    second = source.spawn(1)[0].standard_normal()
    assert first != second
    assert BoxMullerSource(seed=11).spawn(1)[0].standard_normal() == first
