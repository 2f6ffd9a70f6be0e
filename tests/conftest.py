"""Pytest fixtures shared across DuckDB and Flask tests."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date

import duckdb
import pytest

from bouncerstats.app import create_app
from bouncerstats.services.datastore import DataStore
from bouncerstats.utils.report_params import to_julian_day

# Downloads sum to 42 across the whole table.
SAMPLE_ROWS = [
    (date(2009, 3, 1), "OOo", "en-US", "win_x86", 10),
    (date(2009, 3, 1), "OOo", "en-US", "linux_x86", 5),
    (date(2009, 3, 2), "OOo", "ja", "macosx_intel", 7),
    (date(2009, 3, 5), "OOo-dev", "en-US", "solaris_sparc", 3),
    (date(2009, 3, 10), "OOo", "de", "winwjre", 17),
]

FIRST_DAY = date(2009, 3, 1)
LAST_DAY = date(2009, 3, 10)


@pytest.fixture
def stats_db(tmp_path):
    """Return the path of a DuckDB file holding SAMPLE_ROWS in table ``stats``."""

    path = tmp_path / "bouncer.duckdb"
    con = duckdb.connect(str(path))
    try:
        con.execute(
            "CREATE TABLE stats (datejd INTEGER, product VARCHAR, language VARCHAR, "
            "os VARCHAR, downloads INTEGER)"
        )
        con.executemany(
            "INSERT INTO stats VALUES (?, ?, ?, ?, ?)",
            [(to_julian_day(day), p, lang, os_name, n) for day, p, lang, os_name, n in SAMPLE_ROWS],
        )
    finally:
        con.close()
    return path


@pytest.fixture
def datastore(stats_db):
    """Return a DataStore reading the sample table."""

    return DataStore({"DUCKDB_PATH": stats_db, "STATS_TABLE": "stats"})


@pytest.fixture
def app(stats_db):
    """Return the Flask app wired to the sample table."""

    return create_app({"TESTING": True, "DUCKDB_PATH": stats_db, "STATS_TABLE": "stats"})


@pytest.fixture
def client(app):
    return app.test_client()


class BoundsOnlyStore:
    """DataStore stand-in that only knows the first and last day."""

    def __init__(self, first=FIRST_DAY, last=LAST_DAY):
        self.first = first
        self.last = last
        self.calls = 0

    def date_bounds(self):
        self.calls += 1
        return self.first, self.last


@pytest.fixture
def bounds_store():
    return BoundsOnlyStore()


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Every test must carry exactly one of the ``unit`` / ``integration`` markers."""

    invalid: list[str] = []
    for item in items:
        has_unit = item.get_closest_marker("unit") is not None
        has_integration = item.get_closest_marker("integration") is not None
        if has_unit == has_integration:
            invalid.append(item.nodeid)
    if invalid:
        raise pytest.UsageError(
            "Tests must be marked with exactly one of unit/integration: " + ", ".join(invalid)
        )
