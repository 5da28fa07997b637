from __future__ import annotations

import logging
from typing import Any

import pandas as pd

from ..data.grid import HisGrid, TS
from .duration import to_timedelta
from .folds import Fold, resolve_fold

logger = logging.getLogger(__name__)


def his_rollup(grid: HisGrid, fold: Fold | str, interval: Any) -> HisGrid:
    """Bucket rows into fixed windows of ``interval`` and reduce each window per column.

    - windows are epoch aligned in UTC: each ts is floored to the interval
    - one output row per window from the first to the last occupied window
    - a window with no rows is null in every column; NA appears only where the fold made it
    """
    fold = resolve_fold(fold)
    step = to_timedelta(interval)

    df = grid.df[grid.df[TS].notna()]
    if len(df) == 0 or step <= pd.Timedelta(0):
        return grid.copy()

    buckets = df[TS].dt.floor(step).rename(TS)
    index = pd.date_range(buckets.min(), buckets.max(), freq=step, name=TS)

    grouped = df.drop(columns=[TS]).groupby(buckets, sort=True)
    out = pd.DataFrame(index=index)
    for c in grid.value_cols:
        reduced = grouped[c].apply(lambda s: fold(s.tolist()))
        out[c] = reduced.reindex(index)

    result = out.reset_index()
    logger.debug(f"his_rollup: {len(df)} rows -> {len(result)} buckets of {step}")
    return grid.with_frame(result)
