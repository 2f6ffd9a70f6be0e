"""Application configuration objects."""

import os
import sys
from typing import Tuple
from dotenv import load_dotenv
from pathlib import Path

if getattr(sys, "frozen", False):
    load_dotenv(os.path.join(sys._MEIPASS, ".env"))
else:
    load_dotenv()


class Config:
    """Base configuration for the bouncer statistics charts."""

    # -------------------------
    # Data paths
    # -------------------------
    # DuckDB database file holding the statistics table
    DUCKDB_PATH = Path(os.getenv("BOUNCER_DUCKDB_PATH", "data/bouncer.duckdb"))

    # CSV export used by csv_to_duckdb.py to (re)build the table
    CSV_PATH = os.getenv("BOUNCER_CSV_PATH", "data/stats.csv")

    # -------------------------
    # Data schema
    # -------------------------
    STATS_TABLE = os.getenv("BOUNCER_STATS_TABLE", "stats")

    # -------------------------
    # Output
    # -------------------------
    OUTPUT_CHARSET = os.getenv("BOUNCER_CHARSET", "utf-8")
    REPORT_TITLE = os.getenv("BOUNCER_REPORT_TITLE", "OpenOffice.org Bouncer statistics")
    CHART_TITLE = "Bouncer Statistics"

    # (width, height) in pixels
    PIE_SIZE: Tuple[int, int] = (900, 500)
    LINE_SIZE: Tuple[int, int] = (850, 500)

    VALID_TYPES: Tuple[str, ...] = (
        "pie_by_product",
        "pie_by_language",
        "pie_by_os",
        "pie_by_oswa",
        "line_by_product",
        "line_by_language",
        "line_by_os",
        "line_by_oswa",
        "count",
    )


__all__ = ["Config"]
