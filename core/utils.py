from __future__ import annotations

import datetime as dt
import math
from typing import List, Optional

import numpy as np


def round_money(x, decimals: int = 2):
    """Round half away from zero (vectorized). Scalars come back as float."""
    m = 10 ** decimals
    arr = np.asarray(x, dtype=float)
    out = np.sign(arr) * (np.floor(np.abs(arr) * m + 0.5) / m)
    if out.ndim == 0:
        return float(out)
    return out


def nearest_rank_index(percentile: float, n: int) -> int:
    """
    Index of the nearest-rank percentile in an ascending sample of size n:
    floor(p/100 * n), clamped to [0, n-1]. No interpolation.
    """
    idx = int(math.floor(percentile / 100 * n))
    return min(max(idx, 0), n - 1)


def resolve_start_year(start_year: Optional[int] = None) -> int:
    if start_year is not None:
        return int(start_year)
    return dt.date.today().year


def calendar_years(start_year: int, n_years: int) -> List[int]:
    """Calendar year for each year offset 0..n_years-1."""
    return [start_year + i for i in range(n_years)]
