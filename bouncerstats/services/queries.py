"""SQL for each chart type."""

from __future__ import annotations

from typing import List, Tuple

from bouncerstats.utils.report_params import ReportParams


def build_query(params: ReportParams, table: str) -> Tuple[str, List[object]]:
    """Return ``(sql, sql_params)`` for the chart type in ``params``.

    Result columns are always named ``category``, ``datejd`` and
    ``downloads`` where they apply, so reshaping does not depend on
    which dimension was grouped.
    """
    clause, sql_params = params.to_sql_where()
    col = params.category

    if params.kind == "count":
        sql = f"""
        SELECT SUM(downloads) AS downloads
        FROM {table}
        WHERE {clause}
        """
    elif params.kind == "pie" and col:
        sql = f"""
        SELECT {col} AS category, SUM(downloads) AS downloads
        FROM {table}
        WHERE {clause}
        GROUP BY {col}
        ORDER BY {col}
        """
    elif params.kind == "line" and col:
        sql = f"""
        SELECT datejd, {col} AS category, SUM(downloads) AS downloads
        FROM {table}
        WHERE {clause}
        GROUP BY datejd, {col}
        ORDER BY {col}, datejd ASC
        """
    else:
        raise ValueError(f"No query for chart type {params.chart_type!r}")

    return sql, sql_params


__all__ = ["build_query"]
