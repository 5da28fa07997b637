import logging

import numpy as np
import pandas as pd

from hisalign import HisGrid, align_intervals, history_quality_report, plan_intervals


def main():
    logging.basicConfig(level=logging.DEBUG)

    rng = np.random.default_rng(123)

    # a 15s power meter, a 1min temperature sensor and a change-of-value damper
    power_ts = pd.date_range("2024-01-01", periods=240, freq="15s")
    temp_ts = pd.date_range("2024-01-01", periods=60, freq="1min")
    damper_ts = pd.to_datetime(["2024-01-01 00:03:12", "2024-01-01 00:41:55"])

    histories = {
        "power": pd.Series(50 + rng.normal(0, 2, size=len(power_ts)), index=power_ts),
        "temp": pd.Series(
            20 + np.cumsum(rng.normal(0, 0.1, size=len(temp_ts))), index=temp_ts
        ),
    }
    grid = HisGrid.from_histories(histories)
    print(history_quality_report(grid))

    plan = plan_intervals(grid)
    print(f"action={plan.action} interval={plan.interval}")
    aligned = align_intervals(grid, rollup_fn="avg", remove_missing=True)
    print(aligned.df.head())

    # the cov damper disables snapping unless a floor is given
    histories["damper"] = pd.Series([1.0, 0.0], index=damper_ts)
    grid = HisGrid.from_histories(histories, meta={"damper": {"hisMode": "cov"}})
    print(f"cov, no floor: {plan_intervals(grid).action}")
    aligned = align_intervals(grid, rollup_fn="last", min_interval="5min")
    print(aligned.df.head())


if __name__ == "__main__":
    main()
