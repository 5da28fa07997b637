from datetime import timedelta

import numpy as np
import pandas as pd
import pytest

from hisalign.time.duration import or_default, to_seconds, to_timedelta


def test_to_seconds_accepts_duration_forms():
    assert to_seconds("30s") == 30.0
    assert to_seconds("1min") == 60.0
    assert to_seconds(" 6h ") == 6 * 3600.0
    assert to_seconds(pd.Timedelta(minutes=2)) == 120.0
    assert to_seconds(timedelta(seconds=15)) == 15.0
    assert to_seconds(np.timedelta64(2, "s")) == 2.0
    assert to_seconds(5) == 5.0
    assert to_seconds(0.5) == 0.5


def test_to_timedelta_rejects_non_durations():
    with pytest.raises(ValueError):
        to_timedelta("banana")
    with pytest.raises(ValueError):
        to_timedelta(float("nan"))
    with pytest.raises(ValueError):
        to_timedelta(np.timedelta64("NaT"))
    with pytest.raises(TypeError):
        to_timedelta(True)
    with pytest.raises(TypeError):
        to_timedelta(None)
    with pytest.raises(TypeError):
        to_timedelta([1, 2])


def test_or_default_substitutes_on_failure():
    assert or_default(to_seconds, "1min", 0.0) == 60.0
    assert or_default(to_seconds, "banana", 0.0) == 0.0
    assert or_default(to_seconds, None, 0.0) == 0.0
    assert or_default(to_seconds, object(), -1.0) == -1.0
