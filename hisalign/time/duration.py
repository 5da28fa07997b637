from __future__ import annotations

import logging
import math
import numbers
from datetime import timedelta
from typing import Any, Callable, TypeVar

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)

T = TypeVar("T")


def to_timedelta(value: Any) -> pd.Timedelta:
    """Convert a duration-like value to a pandas Timedelta.

    Accepted forms:
      - pandas.Timedelta, datetime.timedelta, numpy.timedelta64
      - real numbers, read as seconds
      - strings pandas understands, e.g. "30s", "1min", "6h"

    Raises TypeError for unsupported types and ValueError for unparseable or
    missing values.
    """
    if isinstance(value, bool):
        raise TypeError("Booleans are not durations.")

    if isinstance(value, (pd.Timedelta, timedelta, np.timedelta64)):
        td = pd.Timedelta(value)
    elif isinstance(value, numbers.Real):
        if not math.isfinite(float(value)):
            raise ValueError(f"Non-finite duration: {value!r}")
        td = pd.Timedelta(seconds=float(value))
    elif isinstance(value, str):
        td = pd.Timedelta(value.strip())
    else:
        raise TypeError(f"Unsupported duration type: {type(value).__name__}")

    if pd.isna(td):
        raise ValueError(f"Missing duration: {value!r}")
    return td


def to_seconds(value: Any) -> float:
    return to_timedelta(value).total_seconds()


def or_default(fn: Callable[[Any], T], value: Any, default: T) -> T:
    """Return fn(value), or ``default`` when the conversion fails."""
    try:
        return fn(value)
    except (ValueError, TypeError, OverflowError) as exc:
        logger.debug(f"or_default: {value!r} -> {default!r} ({exc})")
        return default
