import numpy as np

from hisalign.data.na import NA
from hisalign.diagnostics.quality import history_quality_report
from conftest import make_grid


def test_history_quality_report():
    grid = make_grid(
        5,
        4,
        a=[1.0, np.nan, 3.0, 4.0],
        b=[NA, "on", "off", NA],
        c=[np.nan] * 4,
        meta={"b": {"hisMode": "cov"}},
    )
    rep = history_quality_report(grid)

    assert list(rep.index) == ["a", "b", "c"]
    assert rep.loc["a", "missing"] == 1
    assert rep.loc["a", "missing_pct"] == 0.25
    assert rep.loc["a", "interval_s"] == 7.5
    assert rep.loc["b", "interval_s"] == 5.0
    assert rep.loc["b", "na"] == 2
    assert rep.loc["b", "missing"] == 0
    assert bool(rep.loc["b", "cov"])
    assert np.isnan(rep.loc["c", "interval_s"])


def test_quality_report_without_value_columns():
    rep = history_quality_report(make_grid(5, 3))
    assert rep.empty
    assert "interval_s" in rep.columns
