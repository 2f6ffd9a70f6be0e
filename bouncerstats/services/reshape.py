"""Turn query results into chart-ready series."""

from __future__ import annotations

from typing import Dict, List, Tuple

import pandas as pd

from bouncerstats.utils.report_params import ReportParams, to_julian_day

# Prefix of the raw os value -> pie slice, checked in this order
OS_FAMILIES: Tuple[Tuple[str, str], ...] = (
    ("win", "Windows"),
    ("linux", "Linux"),
    ("macosx", "Mac OS X"),
    ("solaris", "Solaris"),
)
OTHER_OS = "Others"
OS_ORDER: Tuple[str, ...] = tuple(name for _, name in OS_FAMILIES) + (OTHER_OS,)

AXIS_LABEL_FMT = "%Y/%m/%d"


def _as_int(value) -> int:
    return 0 if pd.isna(value) else int(value)


def count_total(df: pd.DataFrame) -> int:
    """Summed downloads of a count query; 0 when nothing matched."""
    if df is None or df.empty:
        return 0
    return _as_int(df["downloads"].iloc[0])


def pie_slices(df: pd.DataFrame) -> Tuple[List[str], List[int]]:
    """One slice per result row, in query order."""
    if df is None or df.empty:
        return [], []
    labels = [str(v) for v in df["category"]]
    values = [_as_int(v) for v in df["downloads"]]
    return labels, values


def os_family(os_name: str) -> str:
    for prefix, family in OS_FAMILIES:
        if os_name.startswith(prefix):
            return family
    return OTHER_OS


def os_family_slices(df: pd.DataFrame) -> Tuple[List[str], List[int]]:
    """Fold raw os/architecture values into the five fixed OS families.

    Always returns every family, in OS_ORDER, with 0 for families that
    had no rows.
    """
    totals: Dict[str, int] = {name: 0 for name in OS_ORDER}
    if df is not None and not df.empty:
        families = df["category"].astype(str).map(os_family)
        grouped = df["downloads"].fillna(0).groupby(families).sum()
        for family, total in grouped.items():
            totals[family] += int(total)
    return list(OS_ORDER), [totals[name] for name in OS_ORDER]


def label_interval(params: ReportParams) -> int:
    """Label every Nth day so about ten dates show on the x axis."""
    span = (params.end - params.start).days
    # round half up, never below 1
    return max(1, (span + 5) // 10)


def axis_labels(params: ReportParams) -> List[str]:
    interval = label_interval(params)
    return [
        day.strftime(AXIS_LABEL_FMT) if i % interval == 0 else ""
        for i, day in enumerate(params.day_range())
    ]


def line_series(df: pd.DataFrame, params: ReportParams) -> Tuple[List[str], Dict[str, List[int]]]:
    """One series per category, indexed by day offset from ``params.start``.

    Every series has ``params.days`` entries; days without a row stay 0.
    """
    labels = axis_labels(params)
    series: Dict[str, List[int]] = {}
    if df is None or df.empty:
        return labels, series

    start_jd = to_julian_day(params.start)
    for row in df.itertuples(index=False):
        name = str(row.category)
        if name not in series:
            series[name] = [0] * params.days
        offset = int(row.datejd) - start_jd
        if 0 <= offset < params.days:
            series[name][offset] = _as_int(row.downloads)
    return labels, series


__all__ = [
    "OS_ORDER",
    "axis_labels",
    "count_total",
    "label_interval",
    "line_series",
    "os_family",
    "os_family_slices",
    "pie_slices",
]
