"""Unit tests for reshaping query rows into chart series."""

from __future__ import annotations

from datetime import date

import pandas as pd
import pytest

from bouncerstats.services.reshape import (
    OS_ORDER,
    axis_labels,
    count_total,
    label_interval,
    line_series,
    os_family,
    os_family_slices,
)
from bouncerstats.utils.report_params import ReportParams, to_julian_day

pytestmark = pytest.mark.unit

DAY = date(2009, 3, 1)


def _params(start: date, end: date, chart_type: str = "line_by_os") -> ReportParams:
    return ReportParams(start=start, end=end, chart_type=chart_type)


@pytest.mark.parametrize(
    ("os_name", "family"),
    [
        ("win_x86", "Windows"),
        ("winwjre", "Windows"),
        ("linux_x86_64", "Linux"),
        ("macosx_ppc", "Mac OS X"),
        ("macos_intel", "Others"),
        ("solaris_sparc", "Solaris"),
        ("freebsd", "Others"),
        ("Windows", "Others"),
    ],
)
def test_os_family_prefixes(os_name, family) -> None:
    assert os_family(os_name) == family


def test_os_family_slices_example() -> None:
    """win_x86=10 and linux_x86=5 on the same day give Windows:10, Linux:5."""

    df = pd.DataFrame({"category": ["linux_x86", "win_x86"], "downloads": [5, 10]})
    labels, values = os_family_slices(df)
    assert labels == ["Windows", "Linux", "Mac OS X", "Solaris", "Others"]
    assert values == [10, 5, 0, 0, 0]


def test_os_family_slices_always_five_even_when_empty() -> None:
    labels, values = os_family_slices(pd.DataFrame({"category": [], "downloads": []}))
    assert labels == list(OS_ORDER)
    assert values == [0, 0, 0, 0, 0]


def test_os_family_slices_accumulate_per_family() -> None:
    df = pd.DataFrame(
        {"category": ["beos", "win_x86", "winwjre", "zeta"], "downloads": [1, 2, 3, 4]}
    )
    assert os_family_slices(df)[1] == [5, 0, 0, 0, 5]


def test_count_total_handles_null_sum() -> None:
    assert count_total(pd.DataFrame({"downloads": [float("nan")]})) == 0
    assert count_total(pd.DataFrame({"downloads": [42]})) == 42


@pytest.mark.parametrize(
    ("span", "interval"),
    [(0, 1), (4, 1), (9, 1), (14, 1), (15, 2), (24, 2), (25, 3), (29, 3), (364, 36)],
)
def test_label_interval_rounds_half_up(span, interval) -> None:
    end = date.fromordinal(DAY.toordinal() + span)
    assert label_interval(_params(DAY, end)) == interval


def test_axis_labels_blank_between_ticks() -> None:
    labels = axis_labels(_params(date(2009, 3, 1), date(2009, 3, 30)))
    assert len(labels) == 30
    assert labels[0] == "2009/03/01"
    assert labels[1] == labels[2] == ""
    assert labels[3] == "2009/03/04"
    assert sum(1 for label in labels if label) == 10


def test_line_series_fill_missing_days_with_zero() -> None:
    params = _params(date(2009, 3, 1), date(2009, 3, 5))
    df = pd.DataFrame(
        {
            "datejd": [to_julian_day(date(2009, 3, 2)), to_julian_day(date(2009, 3, 5)), to_julian_day(date(2009, 3, 1))],
            "category": ["linux_x86", "linux_x86", "win_x86"],
            "downloads": [4, 6, 9],
        }
    )
    labels, series = line_series(df, params)
    assert len(labels) == 5
    assert series == {"linux_x86": [0, 4, 0, 0, 6], "win_x86": [9, 0, 0, 0, 0]}


def test_line_series_without_rows_has_no_series() -> None:
    params = _params(date(2009, 3, 1), date(2009, 3, 3))
    labels, series = line_series(pd.DataFrame(columns=["datejd", "category", "downloads"]), params)
    assert labels == ["2009/03/01", "2009/03/02", "2009/03/03"]
    assert series == {}
