from __future__ import annotations

from typing import Optional

from core.config import EngineConfig, SimulationParameters
from distributions.deviates import DeviateSource
from engine.runner import simulate_paths

from .aggregator import MonteCarloResult, aggregate_ensemble


def run_monte_carlo(
    params: SimulationParameters,
    *,
    source: Optional[DeviateSource] = None,
    config: Optional[EngineConfig] = None,
) -> MonteCarloResult:
    """
    Simulate params.simulation_count paths and aggregate them.

    The whole ensemble is needed before any percentile can be computed, so a
    run either completes or is discarded.
    """
    cfg = config or EngineConfig()
    ensemble = simulate_paths(params, source=source, config=cfg)
    return aggregate_ensemble(ensemble, start_year=cfg.start_year)
