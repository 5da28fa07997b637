from __future__ import annotations

from typing import Any, Callable, Optional, Sequence

import numpy as np
import pandas as pd

from ..data.grid import HisGrid, TS
from .duration import to_timedelta

IntervalCombine = Callable[[float, float], float]

DEFAULT_CANDIDATE_INTERVALS: tuple[pd.Timedelta, ...] = tuple(
    [pd.Timedelta(seconds=s) for s in (1, 2, 5, 10, 15, 30)]
    + [pd.Timedelta(minutes=m) for m in (1, 2, 3, 5, 10, 15, 30)]
    + [pd.Timedelta(hours=h) for h in (1, 2, 6, 12, 24)]
)

COMBINES: dict[str, IntervalCombine] = {"min": min, "max": max}


def resolve_combine(fn: IntervalCombine | str) -> IntervalCombine:
    if isinstance(fn, str):
        try:
            return COMBINES[fn]
        except KeyError:
            raise KeyError(f"Unknown interval combine: {fn}. Expected one of {sorted(COMBINES)}.")
    if callable(fn):
        return fn
    raise TypeError(f"Interval combine must be callable or a name, got {type(fn).__name__}")


def normalize_candidates(candidates: Optional[Sequence[Any]]) -> list[pd.Timedelta]:
    if candidates is None:
        return list(DEFAULT_CANDIDATE_INTERVALS)
    out = []
    for c in candidates:
        try:
            out.append(to_timedelta(c))
        except (TypeError, ValueError, OverflowError) as exc:
            raise ValueError(f"Invalid candidate interval: {c!r}") from exc
    if not out:
        raise ValueError("candidate_intervals must not be empty.")
    return out


def estimate_interval(grid: HisGrid, col: str) -> Optional[float]:
    """Mean sample spacing of ``col`` in seconds, or None with fewer than 2 samples.

    The column is clipped to its covered span and reduced to non-null rows; the
    spacing is (last ts - first ts) / (rows - 1).
    """
    his = grid.select([col]).clip(col)
    his = his.filter_rows(his.df[col].notna())
    if len(his) < 2:
        return None
    ts = his.col_values(TS)
    return (ts[-1] - ts[0]).total_seconds() / (len(ts) - 1)


def snap_interval(seconds: float, candidates: Optional[Sequence[Any]] = None) -> pd.Timedelta:
    """Closest candidate by absolute difference; exact ties go to the earliest candidate."""
    cands = normalize_candidates(candidates)
    secs = np.array([c.total_seconds() for c in cands], dtype=float)
    order = np.argsort(np.abs(secs - float(seconds)), kind="stable")
    return cands[int(order[0])]
