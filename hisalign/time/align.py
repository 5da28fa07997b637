from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import partial, reduce
from typing import Any, Literal, Optional, Sequence

import pandas as pd

from ..data.grid import HisGrid
from .duration import or_default, to_seconds
from .folds import Fold, resolve_fold
from .intervals import (
    IntervalCombine,
    estimate_interval,
    normalize_candidates,
    resolve_combine,
    snap_interval,
)
from .rollup import his_rollup

logger = logging.getLogger(__name__)


PlanAction = Literal[
    "rollup_min_interval",  # cov column with an explicit floor: roll up at the floor
    "passthrough",  # cov without floor, no estimate, or zero interval
    "rollup_snapped",  # periodic data: roll up at the nearest candidate
]


@dataclass(frozen=True)
class ColumnEstimate:
    name: str
    interval_s: Optional[float]  # None: fewer than 2 samples
    cov: bool


@dataclass(frozen=True)
class _Acc:
    interval_s: Optional[float] = None
    cov: bool = False


@dataclass(frozen=True)
class IntervalPlan:
    estimates: tuple[ColumnEstimate, ...]
    cov: bool
    combined_s: Optional[float]  # folded estimate before the min_interval clamp
    min_interval_s: float
    clamped_s: Optional[float]
    action: PlanAction
    interval: Optional[pd.Timedelta]  # None on passthrough


@dataclass(frozen=True)
class IntervalAlignSpec:
    rollup_fn: Fold | str = "avg"
    interval_combine_fn: IntervalCombine | str = min
    remove_missing: bool = False
    min_interval: Any = 0
    candidate_intervals: Optional[Sequence[Any]] = None

    def plan(self, grid: HisGrid) -> IntervalPlan:
        return plan_intervals(
            grid,
            interval_combine_fn=self.interval_combine_fn,
            min_interval=self.min_interval,
            candidate_intervals=self.candidate_intervals,
        )

    def align(self, grid: HisGrid) -> HisGrid:
        return align_intervals(
            grid,
            rollup_fn=self.rollup_fn,
            interval_combine_fn=self.interval_combine_fn,
            remove_missing=self.remove_missing,
            min_interval=self.min_interval,
            candidate_intervals=self.candidate_intervals,
        )


def _fold_estimate(combine: IntervalCombine, acc: _Acc, est: ColumnEstimate) -> _Acc:
    if est.interval_s is None:
        return acc
    if acc.interval_s is None:
        interval = est.interval_s
    else:
        interval = combine(acc.interval_s, est.interval_s)
    return _Acc(interval_s=interval, cov=acc.cov or est.cov)


def plan_intervals(
    grid: HisGrid,
    interval_combine_fn: IntervalCombine | str = min,
    min_interval: Any = 0,
    candidate_intervals: Optional[Sequence[Any]] = None,
) -> IntervalPlan:
    """Decide the common interval for a grid without touching its data.

    Each value column is clipped to its own span and its mean spacing estimated;
    estimates fold through ``interval_combine_fn``. The result is floored at
    ``min_interval`` and snapped to the nearest candidate, except:
    - any cov column with min_interval > 0: use min_interval as is, no snapping
    - any cov column otherwise, no estimate, or a zero interval: pass through
    """
    if not isinstance(grid, HisGrid):
        raise TypeError(f"plan_intervals expects HisGrid, got {type(grid).__name__}")

    combine = resolve_combine(interval_combine_fn)
    candidates = normalize_candidates(candidate_intervals)
    min_s = float(or_default(to_seconds, min_interval, 0.0))

    estimates = tuple(
        ColumnEstimate(c, estimate_interval(grid, c), grid.is_cov(c))
        for c in grid.value_cols
    )
    acc = reduce(partial(_fold_estimate, combine), estimates, _Acc())

    clamped = acc.interval_s
    if min_s > 0 and clamped is not None:
        clamped = max(clamped, min_s)

    if acc.cov and min_s > 0:
        action, interval = "rollup_min_interval", pd.Timedelta(seconds=min_s)
    elif acc.cov or clamped is None or clamped == 0:
        action, interval = "passthrough", None
    else:
        action, interval = "rollup_snapped", snap_interval(clamped, candidates)

    for est in estimates:
        logger.debug(f"plan_intervals: {est.name} interval_s={est.interval_s} cov={est.cov}")
    logger.debug(
        f"plan_intervals: combined_s={acc.interval_s} clamped_s={clamped} "
        f"cov={acc.cov} action={action} interval={interval}"
    )

    return IntervalPlan(
        estimates=estimates,
        cov=acc.cov,
        combined_s=acc.interval_s,
        min_interval_s=min_s,
        clamped_s=clamped,
        action=action,
        interval=interval,
    )


def align_intervals(
    grid: HisGrid,
    rollup_fn: Fold | str = "avg",
    interval_combine_fn: IntervalCombine | str = min,
    remove_missing: bool = False,
    min_interval: Any = 0,
    candidate_intervals: Optional[Sequence[Any]] = None,
) -> HisGrid:
    """Resample every history in ``grid`` onto one common interval.

    The interval comes from plan_intervals(). Afterwards missing data is normalized:
    with ``remove_missing`` rows holding any null are dropped, otherwise every null
    cell becomes NA. NA cells are values and are never dropped.

    Sparse or event-driven grids degrade to a pass-through; this never raises for
    lack of data, and an unparseable ``min_interval`` counts as zero.
    """
    fold = resolve_fold(rollup_fn)
    plan = plan_intervals(
        grid,
        interval_combine_fn=interval_combine_fn,
        min_interval=min_interval,
        candidate_intervals=candidate_intervals,
    )

    if plan.interval is None:
        out = grid.copy()
    else:
        out = his_rollup(grid, fold, plan.interval)

    return out.drop_missing() if remove_missing else out.fill_na()
