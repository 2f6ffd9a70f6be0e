"""Shared helper functions for report routes."""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Iterable

import pandas as pd

from bouncerstats.errors import ValidationError
from bouncerstats.utils.report_params import FilterSet, ReportParams

logger = logging.getLogger("bouncerstats")

DATE_PARTS = ("year", "month", "day")


def _parse_date(value: str) -> date:
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        parsed = pd.to_datetime(value, errors="coerce")
        if pd.isna(parsed):
            raise ValidationError(f"cannot understand the date '{value}'.")
        return parsed.date()


def parse_request_date(args, prefix: str, default: date) -> date:
    """Read ``<prefix>_year/_month/_day`` or ``<prefix>_date`` from the request.

    Falls back to ``default`` when neither form is present. Non-numeric
    components raise ``ValueError`` from ``int()``.
    """
    parts = [(args.get(f"{prefix}_{part}") or "").strip() for part in DATE_PARTS]

    if any(parts):
        if not all(parts):
            raise ValidationError(f"incomplete {prefix} date: give year, month and day.")
        year, month, day = (int(p) for p in parts)
        try:
            return date(year, month, day)
        except ValueError:
            raise ValidationError(
                f"{year:04d}-{month:02d}-{day:02d} is not a valid {prefix} date."
            )

    free_form = (args.get(f"{prefix}_date") or "").strip()
    if free_form:
        return _parse_date(free_form)

    return default


def check_chart_type(args, valid_types: Iterable[str]) -> str:
    chart_type = args.get("type", "")
    if chart_type not in tuple(valid_types):
        raise ValidationError(f"Invalid argument for 'type': {chart_type}")
    return chart_type


def build_params(args, datastore, valid_types: Iterable[str]) -> ReportParams:
    """Build validated ``ReportParams`` from request args.

    The chart type is checked before the data store is touched; the date
    range is then checked against the first and last day in the table.
    """
    chart_type = check_chart_type(args, valid_types)

    first_date, last_date = datastore.date_bounds()
    if first_date is None or last_date is None:
        raise ValidationError("no statistics are available yet.")

    params = ReportParams(
        start=parse_request_date(args, "start", first_date),
        end=parse_request_date(args, "end", last_date),
        chart_type=chart_type,
        products=FilterSet.from_values(args.getlist("product")),
        languages=FilterSet.from_values(args.getlist("language")),
        oses=FilterSet.from_values(args.getlist("os")),
    )

    if params.start < first_date:
        raise ValidationError(f"you specified the date before {first_date:%Y-%m-%d}.")
    if params.end > last_date:
        raise ValidationError(f"you specified the date after {last_date:%Y-%m-%d}.")

    logger.debug("Report params: %s", params)
    return params


__all__ = [
    "_parse_date",
    "build_params",
    "check_chart_type",
    "parse_request_date",
]
