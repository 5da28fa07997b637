"""Rollup folds. Each fold reduces the cell values of one bucket to a single value.

Nulls are skipped. NA poisons the numeric folds: if any present value is NA the
result is NA. A bucket with nothing present folds to None.
"""

from __future__ import annotations

from functools import wraps
from typing import Any, Callable, Sequence

from ..data.na import NA, is_na, is_null

Fold = Callable[[Sequence[Any]], Any]


def _present(values: Sequence[Any]) -> list:
    return [v for v in values if not is_null(v)]


def _na_aware(reduce: Callable[[list], Any]) -> Fold:
    @wraps(reduce)
    def fold(values: Sequence[Any]) -> Any:
        vals = _present(values)
        if not vals:
            return None
        if any(is_na(v) for v in vals):
            return NA
        return reduce(vals)

    return fold


@_na_aware
def fold_avg(values: list) -> Any:
    return sum(values) / len(values)


@_na_aware
def fold_sum(values: list) -> Any:
    return sum(values)


@_na_aware
def fold_min(values: list) -> Any:
    return min(values)


@_na_aware
def fold_max(values: list) -> Any:
    return max(values)


def fold_first(values: Sequence[Any]) -> Any:
    # NA is a present value here, returned as-is
    vals = _present(values)
    return vals[0] if vals else None


def fold_last(values: Sequence[Any]) -> Any:
    vals = _present(values)
    return vals[-1] if vals else None


def fold_count(values: Sequence[Any]) -> int:
    return len(_present(values))


FOLDS: dict[str, Fold] = {
    "avg": fold_avg,
    "mean": fold_avg,
    "sum": fold_sum,
    "min": fold_min,
    "max": fold_max,
    "first": fold_first,
    "last": fold_last,
    "count": fold_count,
}


def resolve_fold(fold: Fold | str) -> Fold:
    if isinstance(fold, str):
        try:
            return FOLDS[fold]
        except KeyError:
            raise KeyError(f"Unknown fold: {fold}. Expected one of {sorted(FOLDS)}.")
    if callable(fold):
        return fold
    raise TypeError(f"Fold must be callable or a name, got {type(fold).__name__}")
