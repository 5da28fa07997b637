"""hisalign: align histories sharing a grid onto one common sampling interval."""

from .data.na import NA, is_na, is_null
from .data.grid import HisGrid, TS, COV_MARKER, HIS_MODE

from .time.duration import to_seconds, to_timedelta, or_default
from .time.folds import FOLDS, resolve_fold
from .time.rollup import his_rollup
from .time.intervals import DEFAULT_CANDIDATE_INTERVALS, estimate_interval, snap_interval
from .time.align import (
    ColumnEstimate,
    IntervalAlignSpec,
    IntervalPlan,
    align_intervals,
    plan_intervals,
)

from .diagnostics.quality import history_quality_report

__all__ = [
    "NA",
    "is_na",
    "is_null",
    "HisGrid",
    "TS",
    "COV_MARKER",
    "HIS_MODE",
    "to_seconds",
    "to_timedelta",
    "or_default",
    "FOLDS",
    "resolve_fold",
    "his_rollup",
    "DEFAULT_CANDIDATE_INTERVALS",
    "estimate_interval",
    "snap_interval",
    "ColumnEstimate",
    "IntervalAlignSpec",
    "IntervalPlan",
    "align_intervals",
    "plan_intervals",
    "history_quality_report",
]
