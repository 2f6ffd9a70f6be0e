"""Data access for the download statistics table."""

from __future__ import annotations
import logging
import os
import re
from contextlib import contextmanager
from datetime import date
from typing import Any, Iterator, Mapping, Optional, Sequence, Tuple
import duckdb
import pandas as pd

from bouncerstats.utils.report_params import from_julian_day, to_julian_day

logger = logging.getLogger("bouncerstats")

_TABLE_NAME_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_.]*$")

STATS_COLUMNS = ("datejd", "product", "language", "os", "downloads")


def check_table_name(name: str) -> str:
    """Table names are interpolated into SQL, so only plain identifiers are accepted."""
    if not name or not _TABLE_NAME_RE.match(name):
        raise ValueError(f"Invalid statistics table name: {name!r}")
    return name


class DataStore:
    """Access to the statistics table; requests only read from it.

    Storage backend: DuckDB (.duckdb file)
    - Table: Config.STATS_TABLE with columns datejd, product, language, os, downloads
    - Every query opens its own connection and closes it afterwards
    """

    def __init__(self, config: Mapping[str, Any]):
        self.config = config
        self.table = check_table_name(str(config.get("STATS_TABLE", "stats")))

    # ---------- DuckDB helpers ----------

    @property
    def db_path(self) -> str:
        return str(self.config.get("DUCKDB_PATH"))

    @contextmanager
    def _connect(self, read_only: bool = True) -> Iterator[duckdb.DuckDBPyConnection]:
        con = duckdb.connect(self.db_path, read_only=read_only)
        try:
            yield con
        finally:
            con.close()

    def run_query(self, sql: str, params: Optional[Sequence[Any]] = None) -> pd.DataFrame:
        """Execute SQL on DuckDB and return as pandas DataFrame."""
        logger.debug("SQL: %s (%d params)", " ".join(sql.split()), len(params or []))
        with self._connect() as con:
            return con.execute(sql, list(params or [])).df()

    def date_bounds(self) -> Tuple[Optional[date], Optional[date]]:
        """First and last day present in the table, ``(None, None)`` when empty."""
        df = self.run_query(f"SELECT MIN(datejd) AS dmin, MAX(datejd) AS dmax FROM {self.table}")
        dmin, dmax = df.iloc[0]["dmin"], df.iloc[0]["dmax"]
        if pd.isna(dmin) or pd.isna(dmax):
            return None, None
        return from_julian_day(int(dmin)), from_julian_day(int(dmax))

    # ---------- Loading ----------

    def rebuild_from_csv(self, csv_path: Optional[str] = None) -> int:
        """Full rebuild of the statistics table from a CSV export.

        The CSV carries either a ``datejd`` column or a ``date`` column
        (YYYY-MM-DD), plus product, language, os and downloads.
        Returns the number of rows written.
        """
        csv_path = csv_path or self.config.get("CSV_PATH", "data/stats.csv")
        raw = pd.read_csv(csv_path, dtype={"product": str, "language": str, "os": str})

        if "datejd" not in raw.columns:
            if "date" not in raw.columns:
                raise ValueError(f"{csv_path}: needs a 'date' or 'datejd' column")
            days = pd.to_datetime(raw["date"], format="%Y-%m-%d")
            raw["datejd"] = [to_julian_day(d.date()) for d in days]

        missing = [c for c in STATS_COLUMNS if c not in raw.columns]
        if missing:
            raise ValueError(f"{csv_path}: missing column(s) {', '.join(missing)}")

        df = raw[list(STATS_COLUMNS)].copy()
        df["datejd"] = df["datejd"].astype("int64")
        df["downloads"] = pd.to_numeric(df["downloads"], errors="coerce").fillna(0).astype("int64")

        parent = os.path.dirname(self.db_path)
        if parent:
            os.makedirs(parent, exist_ok=True)

        with self._connect(read_only=False) as con:
            con.execute(f"DROP TABLE IF EXISTS {self.table};")
            con.register("tmp_df", df)
            con.execute(
                f"""
                CREATE TABLE {self.table} AS
                SELECT
                  CAST(datejd AS INTEGER) AS datejd,
                  CAST(product AS VARCHAR) AS product,
                  CAST(language AS VARCHAR) AS language,
                  CAST(os AS VARCHAR) AS os,
                  CAST(downloads AS BIGINT) AS downloads
                FROM tmp_df;
                """
            )
            con.unregister("tmp_df")

        logger.info("Rebuilt %s from %s (%d rows).", self.table, csv_path, len(df))
        return len(df)


__all__ = ["DataStore", "STATS_COLUMNS", "check_table_name"]
