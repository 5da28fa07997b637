import pickle

import numpy as np
import pandas as pd

from hisalign.data.na import NA, is_na, is_null


def test_na_is_not_null():
    assert not is_null(NA)
    assert is_na(NA)
    assert not pd.isna(NA)
    assert repr(NA) == "NA"
    assert not NA


def test_null_values():
    assert is_null(None)
    assert is_null(np.nan)
    assert is_null(pd.NaT)
    assert not is_null(0.0)
    assert not is_null("x")
    assert not is_null([1, 2])


def test_na_singleton_survives_pickle():
    assert pickle.loads(pickle.dumps(NA)) is NA
