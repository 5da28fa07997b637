from __future__ import annotations

import pandas as pd


class _NAType:
    """Explicit "not available" marker. Distinct from null: never reported by pandas.isna."""

    _instance: "_NAType | None" = None

    def __new__(cls) -> "_NAType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NA"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_NAType, ())


NA = _NAType()


def is_na(value) -> bool:
    return value is NA


def is_null(value) -> bool:
    """True for None/NaN/NaT; False for NA and any non-scalar."""
    if value is NA:
        return False
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        # array-likes are values, not nulls
        return False
