import numpy as np
import pytest

from hisalign.data.na import NA
from hisalign.time.folds import (
    fold_avg,
    fold_count,
    fold_first,
    fold_last,
    fold_max,
    fold_min,
    fold_sum,
    resolve_fold,
)


def test_numeric_folds_skip_nulls():
    vals = [1.0, None, 3.0, np.nan]
    assert fold_avg(vals) == 2.0
    assert fold_sum(vals) == 4.0
    assert fold_min(vals) == 1.0
    assert fold_max(vals) == 3.0
    assert fold_count(vals) == 2


def test_numeric_folds_propagate_na():
    vals = [1.0, NA, 3.0]
    assert fold_avg(vals) is NA
    assert fold_sum(vals) is NA
    assert fold_min(vals) is NA
    assert fold_max(vals) is NA
    assert fold_count(vals) == 3


def test_empty_bucket_folds_to_none():
    assert fold_avg([]) is None
    assert fold_avg([None, np.nan]) is None
    assert fold_first([np.nan]) is None
    assert fold_count([None]) == 0


def test_first_last_return_present_values():
    assert fold_first([None, NA, 2.0]) is NA
    assert fold_last([None, NA, 2.0, None]) == 2.0


def test_resolve_fold():
    assert resolve_fold("avg") is fold_avg
    assert resolve_fold("mean") is fold_avg
    fn = lambda vals: len(vals)  # noqa: E731
    assert resolve_fold(fn) is fn
    with pytest.raises(KeyError):
        resolve_fold("median")
    with pytest.raises(TypeError):
        resolve_fold(3)
