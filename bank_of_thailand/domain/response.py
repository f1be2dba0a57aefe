"""
Response wrapper with time-series analytics.

A Response owns the decoded JSON of one request and the ordered record set
extracted from it. Every query is a pure function of that snapshot.
Date-based queries are fail-soft: unparseable periods give empty/zero
results instead of raising.
"""

import csv
import io
import math
import statistics
from collections.abc import Mapping
from dataclasses import asdict, dataclass
from datetime import date
from enum import Enum
from pathlib import Path
from typing import Any, Iterator, Optional, Union

from bank_of_thailand.core.timeutil import days_between, iter_days, parse_date

Record = Union[Mapping, list, tuple, str, int, float, bool, None]

TREND_THRESHOLD = 1.0


class Trend(str, Enum):
    """Direction of a series between its first and last value."""
    UP = "up"
    DOWN = "down"
    FLAT = "flat"


@dataclass(frozen=True)
class Change:
    """First-to-last change of a numeric column."""
    absolute: float
    percentage: float
    first_value: float
    last_value: float

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class DailyChange:
    """Change between two consecutive values."""
    absolute: float
    percentage: float

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def extract_data(raw: Any) -> Any:
    """
    Locate the record set inside a decoded payload.

    A top-level list is the record set itself (e.g. financial holidays).
    Otherwise the record set lives at ``result.data``. Any other shape
    yields an empty list.
    """
    if isinstance(raw, list):
        return raw
    if not isinstance(raw, Mapping):
        return []
    result = raw.get("result")
    if not isinstance(result, Mapping):
        return []
    data = result.get("data")
    return [] if data is None else data


def _as_records(extracted: Any) -> tuple:
    # A mapping at result.data is read as its (key, value) pairs.
    if isinstance(extracted, Mapping):
        return tuple([key, value] for key, value in extracted.items())
    if isinstance(extracted, (list, tuple)):
        return tuple(extracted)
    return (extracted,)


def _is_sequence(row: Any) -> bool:
    return isinstance(row, (list, tuple))


def _to_float(value: Any) -> Optional[float]:
    """Numeric coercion; None for nulls, booleans, non-numeric text and non-finite numbers."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip()
        # float() also accepts digit separators like "1_000".
        if "_" in text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(number):
        return None
    return number


def _row_period(row: Mapping) -> Any:
    value = row.get("period")
    if value is None:
        value = row.get("date")
    return value


class Response:
    """
    Read-only view over one API response.

    Example:
        >>> response = Response({"result": {"data": [{"period": "2025-01-01", "value": "33.5"}]}})
        >>> response.count
        1
        >>> response.values_for("value")
        [33.5]
    """

    __slots__ = ("_raw", "_data")

    def __init__(self, raw: Any):
        self._raw = raw
        self._data = _as_records(extract_data(raw))

    @property
    def raw(self) -> Any:
        """The decoded JSON value as returned by the API."""
        return self._raw

    @property
    def data(self) -> tuple:
        """Extracted records, in payload order."""
        return self._data

    # ------------------------------------------------------------------
    # Raw access
    # ------------------------------------------------------------------

    def __getitem__(self, key: Any) -> Any:
        if not isinstance(self._raw, Mapping):
            return None
        return self._raw.get(str(key))

    def dig(self, *keys: Any) -> Any:
        """Nested lookup into raw; None as soon as a step is missing."""
        if not isinstance(self._raw, Mapping):
            return None
        current = self._raw
        for key in keys:
            if isinstance(current, Mapping):
                current = current.get(str(key))
            elif _is_sequence(current) and isinstance(key, int) and -len(current) <= key < len(current):
                current = current[key]
            else:
                return None
            if current is None:
                return None
        return current

    # ------------------------------------------------------------------
    # Positional access
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._data)

    @property
    def count(self) -> int:
        return len(self._data)

    @property
    def first(self) -> Optional[Record]:
        return self._data[0] if self._data else None

    @property
    def last(self) -> Optional[Record]:
        return self._data[-1] if self._data else None

    def _mapping_rows(self) -> list[Mapping]:
        return [row for row in self._data if isinstance(row, Mapping)]

    # ------------------------------------------------------------------
    # Column statistics
    # ------------------------------------------------------------------

    def values_for(self, column: str) -> list[float]:
        """Numeric values of a column; nulls and non-numeric entries are dropped."""
        values = []
        for row in self._mapping_rows():
            number = _to_float(row.get(column))
            if number is not None:
                values.append(number)
        return values

    def min(self, column: str) -> Optional[float]:
        values = self.values_for(column)
        return min(values) if values else None

    def max(self, column: str) -> Optional[float]:
        values = self.values_for(column)
        return max(values) if values else None

    def sum(self, column: str) -> float:
        return sum(self.values_for(column))

    def average(self, column: str) -> float:
        """Arithmetic mean, 0.0 when the column has no numeric values."""
        values = self.values_for(column)
        if not values:
            return 0.0
        return sum(values) / len(values)

    mean = average

    # ------------------------------------------------------------------
    # Date coverage
    # ------------------------------------------------------------------

    @property
    def date_range(self) -> Optional[tuple[str, str]]:
        """(earliest, latest) period/date string, or None if no record has one."""
        dates = []
        for row in self._mapping_rows():
            value = _row_period(row)
            if value is not None:
                dates.append(value if isinstance(value, str) else str(value))
        if not dates:
            return None
        return min(dates), max(dates)

    @property
    def period_days(self) -> int:
        """Inclusive number of calendar days spanned by date_range."""
        date_range = self.date_range
        if date_range is None:
            return 0
        try:
            start, end = parse_date(date_range[0]), parse_date(date_range[1])
        except ValueError:
            return 0
        return days_between(start, end)

    @property
    def is_complete(self) -> bool:
        expected_days = self.period_days
        if expected_days == 0:
            return True
        return self.count >= expected_days

    @property
    def missing_dates(self) -> list[date]:
        """Calendar days inside date_range with no record, ascending."""
        date_range = self.date_range
        if date_range is None:
            return []
        try:
            start, end = parse_date(date_range[0]), parse_date(date_range[1])
            actual = {parse_date(_row_period(row)) for row in self._mapping_rows()}
        except ValueError:
            return []
        return [day for day in iter_days(start, end) if day not in actual]

    # ------------------------------------------------------------------
    # Change metrics
    # ------------------------------------------------------------------

    def change(self, column: str = "value") -> Optional[Change]:
        """
        First-to-last change of a column.

        Returns None with fewer than two numeric values. A zero first value
        raises ZeroDivisionError.
        """
        values = self.values_for(column)
        if len(values) < 2:
            return None

        first_value, last_value = values[0], values[-1]
        return Change(
            absolute=last_value - first_value,
            percentage=round((last_value - first_value) / first_value * 100, 4),
            first_value=first_value,
            last_value=last_value,
        )

    def daily_changes(self, column: str = "value") -> list[DailyChange]:
        """Change between each consecutive pair of values."""
        values = self.values_for(column)
        changes = []
        for prev, curr in zip(values, values[1:]):
            percentage = 0.0 if prev == 0 else round((curr - prev) / prev * 100, 4)
            changes.append(DailyChange(absolute=curr - prev, percentage=percentage))
        return changes

    def volatility(self, column: str = "value") -> float:
        """Population standard deviation of daily percentage changes."""
        percentages = [c.percentage for c in self.daily_changes(column)]
        if not percentages:
            return 0.0
        return round(statistics.pstdev(percentages), 4)

    def trend(self, column: str = "value") -> Trend:
        change = self.change(column)
        if change is None:
            return Trend.FLAT
        if change.percentage > TREND_THRESHOLD:
            return Trend.UP
        if change.percentage < -TREND_THRESHOLD:
            return Trend.DOWN
        return Trend.FLAT

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def _csv_headers(self) -> list[str]:
        if not self._data:
            return []
        first_row = self._data[0]
        if isinstance(first_row, Mapping):
            return [str(key) for key in first_row.keys()]
        if _is_sequence(first_row):
            return [f"column_{i}" for i in range(1, len(first_row) + 1)]
        return ["value"]

    def _csv_rows(self) -> Iterator[list]:
        for row in self._data:
            if isinstance(row, Mapping):
                yield list(row.values())
            elif _is_sequence(row):
                yield list(row)
            else:
                yield [row]

    def to_csv(self, filename: Optional[Union[str, Path]] = None) -> Union[str, Path]:
        """
        Export the records as CSV.

        Args:
            filename: Where to write. If omitted the CSV text is returned.

        Returns:
            The CSV text, or ``filename`` after writing it
        """
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(self._csv_headers())
        writer.writerows(self._csv_rows())
        csv_data = buffer.getvalue()

        if filename is not None:
            Path(filename).write_text(csv_data, encoding="utf-8")
            return filename
        return csv_data

    # ------------------------------------------------------------------
    # Summary
    # ------------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Coverage summary for logging/serialization."""
        date_range = self.date_range
        return {
            "count": self.count,
            "date_range": list(date_range) if date_range else None,
            "period_days": self.period_days,
            "is_complete": self.is_complete,
        }

    def __repr__(self) -> str:
        return f"Response(count={self.count}, date_range={self.date_range!r})"
