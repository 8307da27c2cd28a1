"""
Deviate sources — where annual return samples come from.

The path simulator never touches a global random state. It asks a
DeviateSource for `sample(mean, std)` once per simulated year:

  BoxMullerSource  — production: seedable, Box–Muller over numpy uniforms
  MeanSource       — deterministic: every year returns exactly the mean
  CallableSource   — wraps any fn(mean, std) -> float (test stubs, replays)

Parallel runs call `spawn(n)` once and hand each path its own child source,
so no generator object is shared between paths.

A BoxMullerSource is stateful: every `spawn` call advances its SeedSequence,
so handing the same source object to two runs gives two different ensembles.
Pass `EngineConfig(seed=...)` instead when runs must be repeatable.
"""

from __future__ import annotations

import math
from typing import Callable, List, Optional, Union

import numpy as np

SeedLike = Union[int, np.random.SeedSequence, None]


class DeviateSource:
    """Interface for drawing normal(mean, std) return samples."""

    def sample(self, mean: float, std: float) -> float:
        raise NotImplementedError

    def spawn(self, n: int) -> List["DeviateSource"]:
        """Return n sources suitable for independent paths."""
        raise NotImplementedError


class BoxMullerSource(DeviateSource):
    """
    Normal deviates via the Box–Muller transform on uniform(0,1) draws.

    Usage:
        source = BoxMullerSource(seed=42)
        source.standard_normal()      # one N(0, 1) draw
        source.sample(0.08, 0.12)     # one N(0.08, 0.12) draw
        children = source.spawn(1000) # independent per-path streams
    """

    def __init__(self, seed: SeedLike = None):
        if isinstance(seed, np.random.SeedSequence):
            self._seed_seq = seed
        else:
            self._seed_seq = np.random.SeedSequence(seed)
        self.rng = np.random.default_rng(self._seed_seq)

    def standard_normal(self) -> float:
        # u1 must be nonzero: log(0) is undefined
        u1 = self.rng.random()
        while u1 == 0.0:
            u1 = self.rng.random()
        u2 = self.rng.random()
        return math.sqrt(-2.0 * math.log(u1)) * math.cos(2.0 * math.pi * u2)

    def sample(self, mean: float, std: float) -> float:
        if std == 0:
            return float(mean)
        return mean + std * self.standard_normal()

    def spawn(self, n: int) -> List["BoxMullerSource"]:
        return [BoxMullerSource(child) for child in self._seed_seq.spawn(n)]


class MeanSource(DeviateSource):
    """Deterministic stand-in: the sample is always the mean."""

    def sample(self, mean: float, std: float) -> float:
        return float(mean)

    def spawn(self, n: int) -> List["MeanSource"]:
        return [self] * n


class CallableSource(DeviateSource):
    """
    Adapts a plain function fn(mean, std) -> float.

    Children share the function, so it should be stateless (or the run
    single-threaded) for results to be reproducible.
    """

    def __init__(self, fn: Callable[[float, float], float]):
        self.fn = fn

    def sample(self, mean: float, std: float) -> float:
        return float(self.fn(mean, std))

    def spawn(self, n: int) -> List["CallableSource"]:
        return [self] * n


def default_source(seed: Optional[int] = None) -> DeviateSource:
    return BoxMullerSource(seed)
