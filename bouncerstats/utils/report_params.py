# report_params.py
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Dict, Iterable, List, Optional, Tuple

# date.toordinal() of a day plus this offset gives its chronological Julian Day Number
JD_OFFSET = 1721425

ALL = "ALL"

FILTER_COLUMNS = ("product", "language", "os")


def to_julian_day(value: date) -> int:
    return value.toordinal() + JD_OFFSET


def from_julian_day(jd: int) -> date:
    return date.fromordinal(int(jd) - JD_OFFSET)


@dataclass(frozen=True)
class FilterSet:
    """Accepted values for one column; ``values is None`` means every value."""

    values: Optional[Tuple[str, ...]] = None

    @classmethod
    def from_values(cls, raw: Iterable[str]) -> "FilterSet":
        """Normalize submitted values: nothing submitted, or ``ALL``, selects everything."""
        cleaned: List[str] = []
        for v in raw:
            if v in (None, ""):
                continue
            v = str(v)
            if v == ALL:
                return cls()
            if v not in cleaned:
                cleaned.append(v)
        if not cleaned:
            return cls()
        return cls(tuple(cleaned))

    @property
    def is_all(self) -> bool:
        return self.values is None


@dataclass(frozen=True)
class ReportParams:
    start: date
    end: date
    chart_type: str
    products: FilterSet = field(default_factory=FilterSet)
    languages: FilterSet = field(default_factory=FilterSet)
    oses: FilterSet = field(default_factory=FilterSet)

    def __post_init__(self):
        if self.start > self.end:
            # frozen, so go through object.__setattr__
            start, end = self.end, self.start
            object.__setattr__(self, "start", start)
            object.__setattr__(self, "end", end)

    # -------- chart type helpers --------
    @property
    def kind(self) -> str:
        """``pie``, ``line`` or ``count``."""
        return self.chart_type.split("_", 1)[0]

    @property
    def category(self) -> Optional[str]:
        """Column a pie or line chart is split by."""
        if "_by_" not in self.chart_type:
            return None
        dimension = self.chart_type.split("_by_", 1)[1]
        if dimension == "oswa":
            dimension = "os"
        return dimension if dimension in FILTER_COLUMNS else None

    @property
    def days(self) -> int:
        """Number of days covered, both ends included."""
        return (self.end - self.start).days + 1

    def day_range(self) -> List[date]:
        return [self.start + timedelta(days=i) for i in range(self.days)]

    def filters(self) -> Dict[str, FilterSet]:
        return {
            "product": self.products,
            "language": self.languages,
            "os": self.oses,
        }

    # -------- SQL helpers --------
    def to_sql_where(self) -> Tuple[str, List[object]]:
        """
        Build the WHERE clause and its parameters (DuckDB compatible).

        INTERSECTION (AND) of:
          - IN-lists for every filter that is not "all"
          - date range (inclusive) on datejd
        """
        where: List[str] = []
        params: List[object] = []

        for col, selected in self.filters().items():
            if selected.is_all:
                continue
            placeholders = ",".join(["?"] * len(selected.values))
            where.append(f"{col} IN ({placeholders})")
            params.extend(selected.values)

        where.append("datejd BETWEEN ? AND ?")
        params.extend([to_julian_day(self.start), to_julian_day(self.end)])

        return " AND ".join(where), params
