from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional, Sequence
import numpy as np
import pandas as pd

from .na import NA, is_null

TS = "ts"

# column meta keys marking an event-driven (change-of-value) history
COV_MARKER = "cov"
HIS_MODE = "hisMode"


def _coerce_dt_aware(x: pd.Series | pd.DatetimeIndex) -> pd.DatetimeIndex:
    idx = pd.DatetimeIndex(pd.to_datetime(x))
    # If tz-naive, localize to UTC; otherwise convert to UTC
    if idx.tz is None:
        idx = idx.tz_localize("UTC")
    else:
        idx = idx.tz_convert("UTC")
    return idx


@dataclass
class HisGrid:
    """Histories sharing one grid: a "ts" column (tz-aware UTC) plus ordered value columns.

    ``meta`` maps value column names to their tag dicts; ``grid_meta`` is carried through
    every operation unchanged. All operations return a new grid.
    """

    df: pd.DataFrame
    meta: dict[str, dict] = field(default_factory=dict)
    grid_meta: dict = field(default_factory=dict)

    def __post_init__(self) -> None:
        if TS not in self.df.columns:
            raise ValueError(f"Expected a '{TS}' column, got {list(self.df.columns)}.")

    @staticmethod
    def from_frame(
        df: pd.DataFrame,
        ts_col: str = TS,
        meta: Optional[Mapping[str, Mapping[str, Any]]] = None,
        grid_meta: Optional[Mapping[str, Any]] = None,
    ) -> "HisGrid":
        if ts_col not in df.columns:
            raise ValueError(f"Expected time column {ts_col}.")
        out = df.copy()

        out[ts_col] = _coerce_dt_aware(out[ts_col])
        if ts_col != TS:
            out = out.rename(columns={ts_col: TS})

        # stable sort keeps the caller's order among equal timestamps
        out = out.sort_values(TS, kind="mergesort").reset_index(drop=True)
        out = out[[TS] + [c for c in out.columns if c != TS]]

        meta = {str(k): dict(v) for k, v in (meta or {}).items()}
        return HisGrid(out, meta, dict(grid_meta or {}))

    @staticmethod
    def from_histories(
        histories: Mapping[str, pd.Series],
        meta: Optional[Mapping[str, Mapping[str, Any]]] = None,
    ) -> "HisGrid":
        """Outer-join named histories (Series indexed by timestamp) on ts."""
        if not histories:
            empty = pd.DataFrame({TS: pd.DatetimeIndex([], tz="UTC")})
            return HisGrid(empty, {}, {})

        series = {}
        for name, s in histories.items():
            s = s.copy()
            s.index = _coerce_dt_aware(s.index)
            series[name] = s[~s.index.duplicated(keep="last")]

        df = pd.concat(series, axis=1, join="outer", sort=True)
        df.index.name = TS
        return HisGrid.from_frame(df.reset_index(), meta=meta)

    def __len__(self) -> int:
        return len(self.df)

    @property
    def value_cols(self) -> list[str]:
        return [c for c in self.df.columns if c != TS]

    def col_meta(self, name: str) -> dict:
        return self.meta.get(name, {})

    def is_cov(self, name: str) -> bool:
        """True when the column is flagged as event-driven rather than periodically sampled."""
        m = self.col_meta(name)
        return bool(m.get(COV_MARKER)) or m.get(HIS_MODE) == COV_MARKER

    def with_frame(self, df: pd.DataFrame) -> "HisGrid":
        """New grid over ``df`` keeping meta for the columns it still has."""
        df = df.reset_index(drop=True)
        meta = {c: dict(m) for c, m in self.meta.items() if c in df.columns and c != TS}
        return HisGrid(df, meta, dict(self.grid_meta))

    def copy(self) -> "HisGrid":
        return self.with_frame(self.df.copy())

    def remove_col(self, name: str) -> "HisGrid":
        if name == TS:
            raise ValueError(f"Cannot remove the '{TS}' column.")
        return self.with_frame(self.df.drop(columns=[name]))

    def select(self, names: Sequence[str]) -> "HisGrid":
        cols = [TS] + [c for c in names if c != TS]
        return self.with_frame(self.df[cols])

    def filter_rows(self, mask) -> "HisGrid":
        return self.with_frame(self.df[np.asarray(mask, dtype=bool)])

    def col_values(self, name: str) -> list:
        return self.df[name].tolist()

    def map_values(self, fn: Callable[[Any], Any]) -> "HisGrid":
        df = self.df.copy()
        for c in self.value_cols:
            df[c] = df[c].map(fn)
        return self.with_frame(df)

    def clip(self, name: str) -> "HisGrid":
        """Trim to the rows spanning the first through last non-null value of ``name``."""
        present = np.flatnonzero(self.df[name].notna().to_numpy())
        if len(present) == 0:
            return self.with_frame(self.df.iloc[0:0])
        return self.with_frame(self.df.iloc[present[0] : present[-1] + 1])

    def fill_na(self) -> "HisGrid":
        """Replace null cells with NA; present values (NA included) are left as they are."""
        df = self.df.copy()
        for c in self.value_cols:
            if df[c].isna().any():
                df[c] = df[c].map(lambda v: NA if is_null(v) else v)
        return self.with_frame(df)

    def drop_missing(self) -> "HisGrid":
        """Keep only rows without a null cell. NA is a value, so NA rows survive."""
        return self.filter_rows(~self.df.isna().any(axis=1).to_numpy())
