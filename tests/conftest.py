import numpy as np
import pandas as pd
import pytest

from hisalign.data.grid import HisGrid


def make_grid(step_s, n, start="2024-01-01", meta=None, **cols):
    """Grid with n rows spaced step_s seconds apart; extra kwargs are value columns."""
    ts = pd.date_range(start, periods=n, freq=pd.Timedelta(seconds=step_s), tz="UTC")
    df = pd.DataFrame({"ts": ts, **cols})
    return HisGrid.from_frame(df, meta=meta)


@pytest.fixture
def periodic_grid():
    # one column sampled every 5s over 10 points
    return make_grid(5, 10, v=np.arange(10, dtype=float))


@pytest.fixture
def gappy_grid():
    # column "a" misses one sample, "b" is complete
    a = np.arange(10, dtype=float)
    a[3] = np.nan
    return make_grid(5, 10, a=a, b=np.arange(10, dtype=float) * 10)
