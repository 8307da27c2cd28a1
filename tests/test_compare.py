import pytest

from core.config import EngineConfig
from inputs.validators import InvalidParameterError
from outcomes.compare import compare_models, summaries_to_dataframe
from outcomes.scenarios import run_three_scenario


def test_all_models_summarized_in_order(reference_params):
    summaries = compare_models(reference_params, config=EngineConfig(seed=1, start_year=2026))
    assert [s.model_type for s in summaries] == ["monte_carlo", "fixed_return", "three_scenario"]

    mc, fixed, three = summaries
    assert mc.years_funds_last is None
    assert 0 <= mc.success_rate <= 100
    assert mc.meets_goal == (mc.success_rate >= 80)

    assert fixed.success_rate is None
    assert isinstance(fixed.years_funds_last, int)

    expected = run_three_scenario(reference_params, start_year=2026).expected
    assert three.balance_at_retirement == expected.balance_at_retirement
    assert three.meets_goal == expected.meets_goal


def test_subset_of_models(reference_params):
    summaries = compare_models(reference_params, ["fixed_return"])
    assert len(summaries) == 1
    assert summaries[0].model_type == "fixed_return"


@pytest.mark.parametrize("model_types", [[], "fixed_return", ["fixed_return", "crystal_ball"]])
def test_invalid_model_types_rejected(reference_params, model_types):
    with pytest.raises(InvalidParameterError):
        compare_models(reference_params, model_types)


def test_summary_table(reference_params):
    summaries = compare_models(reference_params, ["fixed_return", "three_scenario"])
    df = summaries_to_dataframe(summaries)
    assert list(df.columns) == [
        "model_type", "balance_at_retirement", "success_rate", "years_funds_last", "meets_goal",
    ]
    assert len(df) == 2
