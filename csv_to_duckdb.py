import sys

from bouncerstats.config import Config
from bouncerstats.services.datastore import DataStore


def csv_to_duckdb(csv_path: str) -> None:
    datastore = DataStore(
        {
            "DUCKDB_PATH": Config.DUCKDB_PATH,
            "STATS_TABLE": Config.STATS_TABLE,
            "CSV_PATH": csv_path,
        }
    )
    rows = datastore.rebuild_from_csv(csv_path)
    print(f"Loaded {rows} rows from {csv_path} into {datastore.db_path}:{datastore.table}")


if __name__ == "__main__":
    if len(sys.argv) > 2:
        print("Usage: python csv_to_duckdb.py [file.csv]")
        sys.exit(1)
    csv_to_duckdb(sys.argv[1] if len(sys.argv) == 2 else Config.CSV_PATH)
