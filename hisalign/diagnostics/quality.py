import pandas as pd
import numpy as np

from ..data.grid import HisGrid
from ..data.na import is_na
from ..time.intervals import estimate_interval

REPORT_COLUMNS = ["field", "n", "missing", "na", "missing_pct", "interval_s", "cov"]


def history_quality_report(grid: HisGrid) -> pd.DataFrame:
    """Per-column null/NA counts with the estimated sampling interval and cov flag."""
    df = grid.df
    rows = []
    for c in grid.value_cols:
        s = df[c]
        interval = estimate_interval(grid, c)
        rows.append(
            {
                "field": c,
                "n": int(len(s)),
                "missing": int(s.isna().sum()),
                "na": int(s.map(is_na).sum()) if len(s) else 0,
                "missing_pct": float(s.isna().mean()) if len(s) else np.nan,
                "interval_s": float(interval) if interval is not None else np.nan,
                "cov": grid.is_cov(c),
            }
        )
    return pd.DataFrame(rows, columns=REPORT_COLUMNS).set_index("field")
